# data/funds.py — Curated low-cost ETF menu (static reference data)
#
# Display only: the recommendation engine never reads this catalog.
# All figures are plain percentages.

from dataclasses import dataclass, asdict

import pandas as pd


@dataclass(frozen=True)
class Fund:
    symbol: str
    name: str
    description: str
    category: str
    expense_ratio: float
    yield_pct: float
    ytd_return: float
    three_year_return: float


# ─────────────────────────────────────────────
# CATALOG
# ─────────────────────────────────────────────
CURATED_FUNDS = (
    Fund("VTI",  "Vanguard Total Stock Market ETF",
         "Entire US equity market in one low-cost fund.",
         "US Core Equity",                0.03, 1.3,  9.8,  8.4),
    Fund("VXUS", "Vanguard Total International Stock ETF",
         "Developed and emerging markets outside the US.",
         "International Equity",          0.08, 3.1,  7.2,  4.9),
    Fund("SCHD", "Schwab US Dividend Equity ETF",
         "Quality dividend payers screened for cash-flow strength.",
         "Dividend Income Equity",        0.06, 3.5,  5.4,  6.1),
    Fund("ESGV", "Vanguard ESG US Stock ETF",
         "US stocks screened for ESG criteria.",
         "Sustainable Equity",            0.09, 1.1, 10.6,  8.9),
    Fund("BND",  "Vanguard Total Bond Market ETF",
         "Investment-grade US bonds across the maturity curve.",
         "Investment-Grade Bonds",        0.03, 3.7,  2.1, -1.2),
    Fund("VNQ",  "Vanguard Real Estate ETF",
         "US REITs for real-asset and inflation exposure.",
         "Real Assets",                   0.13, 4.0,  3.3,  1.7),
    Fund("SGOV", "iShares 0-3 Month Treasury Bond ETF",
         "Ultra-short Treasury bills for the liquidity sleeve.",
         "Cash & Short-Term Treasuries",  0.09, 5.1,  3.9,  3.8),
)


def load_fund_catalog(funds=CURATED_FUNDS) -> pd.DataFrame:
    """Catalog as a symbol-indexed DataFrame."""
    return pd.DataFrame([asdict(f) for f in funds]).set_index("symbol")


def funds_by_category(funds=CURATED_FUNDS) -> dict[str, list[Fund]]:
    grouped = {}
    for fund in funds:
        grouped.setdefault(fund.category, []).append(fund)
    return grouped


def format_fund_menu(funds=CURATED_FUNDS) -> str:
    """Generate the implementation menu table."""
    lines = []
    lines.append(f"\n  IMPLEMENTATION MENU")
    lines.append(f"  {'Fund':<7} {'Category':<30} {'Exp%':>5} {'Yld%':>5} {'YTD%':>6} {'3Y%':>6}")
    lines.append(f"  {'─'*62}")
    for f in funds:
        lines.append(
            f"  {f.symbol:<7} {f.category:<30} {f.expense_ratio:>5.2f} "
            f"{f.yield_pct:>5.1f} {f.ytd_return:>6.1f} {f.three_year_return:>6.1f}"
        )
    return "\n".join(lines)
