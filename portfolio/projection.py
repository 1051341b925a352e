# portfolio/projection.py — Multi-scenario capital trajectory
#
# Models:
# - Lump sum compounding (monthly, rate / 12 per period)
# - Monthly contributions added at the end of each period
# - Three deterministic scenarios: expected / optimistic / stressed
# - CAGR from start to final balance, with a zero-principal fallback

from dataclasses import dataclass

import numpy as np
import pandas as pd

from config import SCENARIO_RETURNS, SCENARIOS, MONTHS_PER_YEAR, CAGR_DECIMALS
from portfolio.profile import InvestorProfile, RiskLevel


@dataclass(frozen=True)
class ProjectionYear:
    year: int
    expected_value: float
    optimistic_value: float
    stressed_value: float
    cumulative_contributions: float


def scenario_returns(risk_level: RiskLevel) -> dict[str, float]:
    """Annual return assumptions for a risk level, keyed by scenario."""
    return dict(SCENARIO_RETURNS[risk_level.value])


# ─────────────────────────────────────────────────────────────────────────────
# PROJECTION
# ─────────────────────────────────────────────────────────────────────────────

def project_scenarios(profile: InvestorProfile) -> list[ProjectionYear]:
    """
    Year-by-year balances for all three scenarios.

    Each year is 12 periods of: balance * (1 + r/12) + monthly_contribution.
    Balances are reported in whole currency units.
    """
    returns = scenario_returns(profile.risk_level)
    rates   = np.array([returns[s] for s in SCENARIOS]) / MONTHS_PER_YEAR
    growth  = 1.0 + rates
    sip     = profile.monthly_contribution
    lump    = profile.initial_investment

    balance = np.full(len(SCENARIOS), lump, dtype=float)
    yearly  = []
    for yr in range(1, profile.time_horizon + 1):
        for _ in range(MONTHS_PER_YEAR):
            balance = balance * growth + sip
        expected, optimistic, stressed = np.round(balance, 0)
        yearly.append(ProjectionYear(
            year                     = yr,
            expected_value           = float(expected),
            optimistic_value         = float(optimistic),
            stressed_value           = float(stressed),
            cumulative_contributions = lump + sip * MONTHS_PER_YEAR * yr,
        ))
    return yearly


# ─────────────────────────────────────────────────────────────────────────────
# SUMMARY METRICS
# ─────────────────────────────────────────────────────────────────────────────

def compute_cagr(
    final_value: float,
    initial_investment: float,
    years: int,
    total_contributions: float = 0.0,
) -> float:
    """
    Annualised growth (percent) from initial_investment to final_value.

    With no initial investment the growth is annualised against total
    contributions instead; with neither, or with a non-finite operand, it is 0.
    """
    base = initial_investment if initial_investment > 0 else total_contributions
    if not (np.isfinite(base) and np.isfinite(final_value)):
        return 0.0
    if base <= 0 or years <= 0:
        return 0.0
    if final_value <= 0:
        return -100.0
    cagr = (final_value / base) ** (1 / years) - 1
    return round(cagr * 100, CAGR_DECIMALS)


def projection_cagr(profile: InvestorProfile, projection: list[ProjectionYear]) -> tuple[float, float]:
    """(expected_cagr, downside_cagr) from the final projection year."""
    final = projection[-1]
    expected = compute_cagr(
        final.expected_value, profile.initial_investment,
        profile.time_horizon, final.cumulative_contributions,
    )
    downside = compute_cagr(
        final.stressed_value, profile.initial_investment,
        profile.time_horizon, final.cumulative_contributions,
    )
    return expected, downside


def funding_ratio(value: float, target: float) -> float:
    if target <= 0:
        return 0.0
    return value / target


def projection_frame(projection: list[ProjectionYear]) -> pd.DataFrame:
    frame = pd.DataFrame([
        {
            "year":                     p.year,
            "expected_value":           p.expected_value,
            "optimistic_value":         p.optimistic_value,
            "stressed_value":           p.stressed_value,
            "cumulative_contributions": p.cumulative_contributions,
        }
        for p in projection
    ])
    frame["expected_gain"] = frame["expected_value"] - frame["cumulative_contributions"]
    return frame.set_index("year")
