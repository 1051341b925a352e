# portfolio/goals.py — Goal reference data and contribution solver
#
# Goals: Retirement income, Wealth accumulation, Down payment, Education,
#        Financial independence
#
# Each goal profile defines:
#   - Display name and one-line description
#   - Framing text per asset class (shown as the allocation slice description)
#   - Goal-specific guidance notes
#
# Goal focus never changes weights; risk level and the preference flags do.

from config import MONTHS_PER_YEAR
from portfolio.profile import GoalFocus, InvestorProfile

# ─────────────────────────────────────────────────────────────────────────────
# GENERIC ASSET-CLASS DESCRIPTIONS (fallback framing)
# ─────────────────────────────────────────────────────────────────────────────

ASSET_CLASS_DESCRIPTIONS = {
    "US Core Equity":               "Broad domestic stock market exposure for long-run growth.",
    "International Equity":         "Developed and emerging market stocks for global diversification.",
    "Dividend Income Equity":       "Dividend-paying companies that throw off steady cash.",
    "Sustainable Equity":           "ESG-screened equities aligned with sustainability preferences.",
    "Investment-Grade Bonds":       "High-quality bonds that dampen volatility and pay coupons.",
    "Real Assets":                  "REITs and real assets as an inflation hedge.",
    "Cash & Short-Term Treasuries": "Liquidity reserve for near-term needs and rebalancing.",
}

# ─────────────────────────────────────────────────────────────────────────────
# GOAL PROFILES
# ─────────────────────────────────────────────────────────────────────────────

GOAL_PROFILES = {

    GoalFocus.RETIREMENT_INCOME: {
        "display_name": "Retirement Income",
        "description": "Build a portfolio that can fund withdrawals in retirement",
        "framing": {
            "US Core Equity":               "Growth engine that keeps withdrawals ahead of inflation.",
            "Dividend Income Equity":       "Dividend stream that funds retirement spending without selling.",
            "Investment-Grade Bonds":       "Bond ladder backing the next several years of withdrawals.",
            "Cash & Short-Term Treasuries": "One year of spending held in reserve.",
        },
        "notes": [
            "Plan withdrawals around a 4% initial rate and revisit it after large market moves.",
            "Keep one to two years of spending outside equities as the retirement date approaches.",
        ],
    },

    GoalFocus.WEALTH_ACCUMULATION: {
        "display_name": "Wealth Accumulation",
        "description": "Compound capital over the long run",
        "framing": {
            "US Core Equity":       "Primary compounding engine for long-run wealth.",
            "International Equity": "Global growth exposure beyond the home market.",
            "Real Assets":          "Diversifier that holds value when inflation runs hot.",
        },
        "notes": [
            "Automate contributions and reinvest distributions to keep compounding uninterrupted.",
            "Harvest drift during rebalancing instead of timing entries.",
        ],
    },

    GoalFocus.DOWN_PAYMENT: {
        "display_name": "Down Payment",
        "description": "Save for a home purchase on a fixed date",
        "framing": {
            "US Core Equity":               "Growth sleeve to be stepped down as the purchase nears.",
            "Investment-Grade Bonds":       "Stable sleeve that protects the deposit from drawdowns.",
            "Cash & Short-Term Treasuries": "Deposit reserve kept liquid for closing costs.",
        },
        "notes": [
            "Move the deposit into cash and short-term Treasuries 12-18 months before the purchase.",
            "Budget closing costs on top of the down payment target.",
        ],
    },

    GoalFocus.EDUCATION: {
        "display_name": "Education",
        "description": "Fund tuition and education costs",
        "framing": {
            "US Core Equity":               "Growth sleeve sized to outpace tuition inflation.",
            "Investment-Grade Bonds":       "Glidepath sleeve that grows as enrollment approaches.",
            "Cash & Short-Term Treasuries": "First-year tuition held ready.",
        },
        "notes": [
            "Tuition inflation runs above general inflation; revisit the target every year.",
            "Shift toward bonds and cash over the final three years before enrollment.",
        ],
    },

    GoalFocus.FINANCIAL_INDEPENDENCE: {
        "display_name": "Financial Independence",
        "description": "Reach a portfolio that covers living expenses",
        "framing": {
            "US Core Equity":         "Core compounder driving the path to independence.",
            "International Equity":   "Global diversification for a multi-decade runway.",
            "Sustainable Equity":     "Values-aligned equity that still pulls its weight on growth.",
            "Investment-Grade Bonds": "Ballast that keeps a bad year from resetting the timeline.",
        },
        "notes": [
            "Independence usually needs about 25x annual expenses; size the target accordingly.",
            "Track savings rate as closely as returns; it is the lever you control.",
        ],
    },
}


def slice_description(goal: GoalFocus, asset_class: str) -> str:
    """Goal-specific framing for an asset class, falling back to the generic text."""
    framing = GOAL_PROFILES[goal]["framing"]
    return framing.get(asset_class, ASSET_CLASS_DESCRIPTIONS[asset_class])


# ─────────────────────────────────────────────────────────────────────────────
# CONTRIBUTION RECOMMENDATION
# ─────────────────────────────────────────────────────────────────────────────

def required_monthly_contribution(
    profile: InvestorProfile,
    annual_return: float,
) -> float:
    """
    Monthly contribution needed to reach the target amount, given the
    initial investment already in place.

    Uses the same model as the projection: monthly compounding at
    annual_return / 12, contribution added at the end of each month.
    """
    target = profile.target_amount
    if target <= 0:
        return 0.0

    months = profile.time_horizon * MONTHS_PER_YEAR
    r_m    = annual_return / MONTHS_PER_YEAR
    growth = (1 + r_m) ** months

    remaining = target - profile.initial_investment * growth
    if remaining <= 0:
        return 0.0  # principal alone is enough

    if r_m == 0:
        return round(remaining / months, 0)

    # Ordinary annuity rearranged: PMT = FV * r_m / ((1+r_m)^n - 1)
    needed = remaining * r_m / (growth - 1)
    return round(max(needed, 0.0), 0)
