# portfolio/allocator.py — Rule-selected asset-class weights for a mandate

from dataclasses import dataclass

import numpy as np
import pandas as pd

from config import SUSTAINABLE_SHIFT, INCOME_SHIFT
from portfolio.goals import slice_description
from portfolio.profile import InvestorProfile, RiskLevel

# ─────────────────────────────────────────────────────────────────────────────
# ASSET CLASSES (canonical output order)
# ─────────────────────────────────────────────────────────────────────────────

ASSET_CLASSES = [
    "US Core Equity",
    "International Equity",
    "Dividend Income Equity",
    "Sustainable Equity",
    "Investment-Grade Bonds",
    "Real Assets",
    "Cash & Short-Term Treasuries",
]

EQUITY_CLASSES = ASSET_CLASSES[:4]

SUSTAINABLE_BUCKET = "Sustainable Equity"
INCOME_BUCKET      = "Dividend Income Equity"

# Base weights (points, each row sums to 100). Equity rises and bonds/cash
# fall monotonically from Capital Preservation to Aggressive Growth.
BASE_WEIGHTS = {
    #                                  Core Intl  Div  ESG  Bond Real Cash
    RiskLevel.CAPITAL_PRESERVATION: [ 15,   5,   5,   0,  50,   5,  20],
    RiskLevel.BALANCED:             [ 30,  12,   8,   0,  35,   8,   7],
    RiskLevel.GROWTH:               [ 42,  20,   6,   0,  20,   8,   4],
    RiskLevel.AGGRESSIVE_GROWTH:    [ 52,  25,   5,   0,   8,   7,   3],
}


@dataclass(frozen=True)
class AllocationSlice:
    asset_class: str
    description: str
    percentage: int


# ─────────────────────────────────────────────────────────────────────────────
# WEIGHT RULES
# ─────────────────────────────────────────────────────────────────────────────

def base_weights(risk_level: RiskLevel) -> pd.Series:
    return pd.Series(BASE_WEIGHTS[risk_level], index=ASSET_CLASSES, dtype=float)


def shift_weight(weights: pd.Series, sources: dict, target: str) -> pd.Series:
    """
    Move points from each source bucket into target, never more than the
    source currently holds. Total is unchanged.
    """
    weights = weights.copy()
    for source, points in sources.items():
        moved = min(float(points), weights[source])
        weights[source] -= moved
        weights[target] += moved
    return weights


def renormalize(weights: pd.Series) -> pd.Series:
    """
    Scale weights to sum to 100, round each to a whole point, then let the
    largest slice absorb the residual so the total is exactly 100.
    idxmax returns the first maximum, so ties go to canonical order.
    """
    total = weights.sum()
    if total <= 0:
        raise ValueError("Cannot renormalize an allocation with no weight.")

    scaled  = weights * 100.0 / total
    rounded = np.round(scaled).astype(int)

    residual = 100 - int(rounded.sum())
    if residual:
        rounded[rounded.idxmax()] += residual
    return rounded


def allocation_weights(profile: InvestorProfile) -> pd.Series:
    """Final whole-point weights in canonical order (zero slices included)."""
    weights = base_weights(profile.risk_level)
    if profile.sustainability_bias:
        weights = shift_weight(weights, SUSTAINABLE_SHIFT, SUSTAINABLE_BUCKET)
    if profile.income_priority:
        weights = shift_weight(weights, INCOME_SHIFT, INCOME_BUCKET)
    return renormalize(weights)


def build_allocation(profile: InvestorProfile) -> list[AllocationSlice]:
    """
    Map a mandate to asset-class slices summing to 100.

    Order is canonical asset-class order regardless of weight; empty
    slices are dropped.
    """
    weights = allocation_weights(profile)
    weights = weights[weights > 0]
    return [
        AllocationSlice(
            asset_class = asset_class,
            description = slice_description(profile.goal_focus, asset_class),
            percentage  = int(pct),
        )
        for asset_class, pct in weights.items()
    ]


# ─────────────────────────────────────────────────────────────────────────────
# HELPERS
# ─────────────────────────────────────────────────────────────────────────────

def equity_share(allocation: list[AllocationSlice]) -> int:
    return sum(s.percentage for s in allocation if s.asset_class in EQUITY_CLASSES)


def allocation_frame(allocation: list[AllocationSlice]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "description": [s.description for s in allocation],
            "percentage":  [s.percentage for s in allocation],
        },
        index=pd.Index([s.asset_class for s in allocation], name="asset_class"),
    )


def format_allocation_report(allocation: list[AllocationSlice]) -> str:
    """Generate a human-readable allocation table."""
    lines = []
    lines.append(f"  {'Asset Class':<30} {'Wt%':>5}")
    lines.append("─" * 62)
    for s in allocation:
        lines.append(f"  {s.asset_class:<30} {s.percentage:>4}%  {'█' * (s.percentage // 5)}")
        lines.append(f"    {s.description}")
    lines.append("─" * 62)
    lines.append(f"  {'TOTAL':<30} {sum(s.percentage for s in allocation):>4}%")
    return "\n".join(lines)
