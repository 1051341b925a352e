# portfolio/narrative.py — Strategy name, agent message, insights, cadence
#
# Rule-based text selection over the normalized profile, the allocation and
# the projection. No randomness, no I/O.

from dataclasses import dataclass
from typing import Callable

from config import (
    MAX_INSIGHTS, ON_TRACK_RATIO, CLOSE_RATIO, STRESS_MEANINGFUL_RATIO,
    LOW_CONTRIBUTION_SHARE, LONG_PRESERVATION_YEARS, MIN_HORIZON_BY_RISK,
    REBALANCING_CADENCE, CURRENCY_SYMBOL,
)
from portfolio.allocator import AllocationSlice, equity_share, INCOME_BUCKET, SUSTAINABLE_BUCKET
from portfolio.goals import GOAL_PROFILES
from portfolio.profile import InvestorProfile, RiskLevel, GoalFocus
from portfolio.projection import ProjectionYear

# ─────────────────────────────────────────────────────────────────────────────
# STRATEGY NAMES
# ─────────────────────────────────────────────────────────────────────────────

RISK_NAMES = {
    RiskLevel.CAPITAL_PRESERVATION: "Capital Shield",
    RiskLevel.BALANCED:             "Balanced Compounder",
    RiskLevel.GROWTH:               "Growth Engine",
    RiskLevel.AGGRESSIVE_GROWTH:    "Velocity Growth",
}

GOAL_NAMES = {
    (RiskLevel.CAPITAL_PRESERVATION, GoalFocus.RETIREMENT_INCOME):   "Income Sentinel",
    (RiskLevel.CAPITAL_PRESERVATION, GoalFocus.DOWN_PAYMENT):        "Down Payment Reserve",
    (RiskLevel.BALANCED,             GoalFocus.RETIREMENT_INCOME):   "Retirement Income Ladder",
    (RiskLevel.BALANCED,             GoalFocus.EDUCATION):           "Tuition Glidepath",
    (RiskLevel.BALANCED,             GoalFocus.FINANCIAL_INDEPENDENCE): "Independence Core",
    (RiskLevel.GROWTH,               GoalFocus.WEALTH_ACCUMULATION): "Wealth Accelerator",
    (RiskLevel.GROWTH,               GoalFocus.FINANCIAL_INDEPENDENCE): "Freedom Builder",
    (RiskLevel.AGGRESSIVE_GROWTH,    GoalFocus.FINANCIAL_INDEPENDENCE): "Early Freedom Sprint",
}

POSTURE_TEXT = {
    RiskLevel.CAPITAL_PRESERVATION: "protects capital first",
    RiskLevel.BALANCED:             "balances growth against drawdown control",
    RiskLevel.GROWTH:               "leans into growth while keeping a bond cushion",
    RiskLevel.AGGRESSIVE_GROWTH:    "runs close to fully invested for maximum growth",
}


def strategy_name(profile: InvestorProfile) -> str:
    return GOAL_NAMES.get(
        (profile.risk_level, profile.goal_focus),
        RISK_NAMES[profile.risk_level],
    )


def _money(value: float) -> str:
    return f"{CURRENCY_SYMBOL}{value:,.0f}"


# ─────────────────────────────────────────────────────────────────────────────
# CONTEXT
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class NarrativeContext:
    """Everything the text rules can look at."""
    profile: InvestorProfile
    allocation: list[AllocationSlice]
    projection: list[ProjectionYear]
    funding_ratio: float
    stress_funding_ratio: float
    required_monthly_contribution: float

    @property
    def final(self) -> ProjectionYear:
        return self.projection[-1]

    @property
    def has_target(self) -> bool:
        return self.profile.target_amount > 0

    def weight_of(self, asset_class: str) -> int:
        for s in self.allocation:
            if s.asset_class == asset_class:
                return s.percentage
        return 0


# ─────────────────────────────────────────────────────────────────────────────
# AGENT MESSAGE
# ─────────────────────────────────────────────────────────────────────────────

def agent_message(ctx: NarrativeContext) -> str:
    p    = ctx.profile
    goal = GOAL_PROFILES[p.goal_focus]["display_name"].lower()
    parts = []

    if not ctx.has_target:
        parts.append(
            f"No target amount is set, so the agent is steering your {goal} mandate "
            f"toward an expected {_money(ctx.final.expected_value)} after {p.time_horizon} years."
        )
    elif ctx.funding_ratio >= ON_TRACK_RATIO:
        parts.append(
            f"On the expected path your {goal} mandate reaches {ctx.funding_ratio:.0%} "
            f"of the {_money(p.target_amount)} target by year {p.time_horizon}."
        )
    elif ctx.funding_ratio >= CLOSE_RATIO:
        parts.append(
            f"The expected path covers {ctx.funding_ratio:.0%} of your "
            f"{_money(p.target_amount)} {goal} target; a modest contribution lift closes the gap."
        )
    else:
        parts.append(
            f"The expected path covers only {ctx.funding_ratio:.0%} of your "
            f"{_money(p.target_amount)} {goal} target, so the plan needs more capital or more time."
        )

    parts.append(
        f"The {strategy_name(p)} posture {POSTURE_TEXT[p.risk_level]}, "
        f"with {equity_share(ctx.allocation)}% in equities."
    )

    if ctx.has_target:
        if ctx.stress_funding_ratio >= STRESS_MEANINGFUL_RATIO:
            parts.append(
                f"Even the stress scenario lands at {ctx.stress_funding_ratio:.0%} of target, "
                f"so the plan holds up through a prolonged drawdown."
            )
        else:
            parts.append(
                f"In the stress scenario the balance reaches {ctx.stress_funding_ratio:.0%} of target; "
                f"keep a contingency buffer outside this portfolio."
            )

    return " ".join(parts)


# ─────────────────────────────────────────────────────────────────────────────
# INSIGHT RULES (priority order, most actionable first)
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class InsightRule:
    key: str
    applies: Callable[[NarrativeContext], bool]
    render: Callable[[NarrativeContext], str]


INSIGHT_RULES = [
    InsightRule(
        "stress_shortfall",
        lambda c: c.has_target and c.final.stressed_value < c.profile.target_amount,
        lambda c: (
            f"Stress scenario falls {_money(c.profile.target_amount - c.final.stressed_value)} "
            f"short of target; consider de-risking or increasing contributions."
        ),
    ),
    InsightRule(
        "expected_shortfall",
        lambda c: (
            c.has_target
            and c.final.expected_value < c.profile.target_amount
            and c.required_monthly_contribution > c.profile.monthly_contribution
        ),
        lambda c: (
            f"Expected path misses the target; raising the monthly contribution to about "
            f"{_money(c.required_monthly_contribution)} closes the gap."
        ),
    ),
    InsightRule(
        "no_contribution",
        lambda c: c.profile.monthly_contribution <= 0,
        lambda c: (
            "No monthly contribution is scheduled; even a small automated deposit "
            "smooths entry prices and compounds meaningfully."
        ),
    ),
    InsightRule(
        "low_contribution",
        lambda c: (
            c.has_target
            and 0 < c.profile.annual_contribution * c.profile.time_horizon
            < LOW_CONTRIBUTION_SHARE * c.profile.target_amount
        ),
        lambda c: (
            f"Contribution rate looks low relative to target: scheduled deposits cover "
            f"{c.profile.annual_contribution * c.profile.time_horizon / c.profile.target_amount:.0%} "
            f"of {_money(c.profile.target_amount)}."
        ),
    ),
    InsightRule(
        "short_horizon",
        lambda c: c.profile.time_horizon < MIN_HORIZON_BY_RISK[c.profile.risk_level.value],
        lambda c: (
            f"A {c.profile.time_horizon}-year horizon is short for a {c.profile.risk_level} posture; "
            f"a drawdown may not have time to recover before the money is needed."
        ),
    ),
    InsightRule(
        "long_preservation",
        lambda c: (
            c.profile.risk_level == RiskLevel.CAPITAL_PRESERVATION
            and c.profile.time_horizon >= LONG_PRESERVATION_YEARS
        ),
        lambda c: (
            f"With {c.profile.time_horizon} years to run, a Capital Preservation stance may leave "
            f"growth on the table; a Balanced posture fits the horizon."
        ),
    ),
    InsightRule(
        "on_track",
        lambda c: c.has_target and c.final.expected_value >= c.profile.target_amount,
        lambda c: (
            f"Expected path clears the target with {c.funding_ratio - 1:.0%} headroom; "
            f"step risk down as the goal date approaches to lock it in."
        ),
    ),
    InsightRule(
        "income_sleeve",
        lambda c: c.profile.income_priority,
        lambda c: (
            f"Dividend income sleeve sits at {c.weight_of(INCOME_BUCKET)}%; route distributions "
            f"to cash needs before selling units."
        ),
    ),
    InsightRule(
        "sustainable_sleeve",
        lambda c: c.profile.sustainability_bias,
        lambda c: (
            f"Sustainable equity sleeve holds {c.weight_of(SUSTAINABLE_BUCKET)}%; check screen "
            f"overlap with core holdings when rebalancing."
        ),
    ),
    InsightRule(
        "goal_guidance",
        lambda c: True,
        lambda c: GOAL_PROFILES[c.profile.goal_focus]["notes"][0],
    ),
]


def select_insights(ctx: NarrativeContext, limit: int = MAX_INSIGHTS) -> list[str]:
    """Texts of the firing rules, in rule order, capped at limit."""
    fired = [rule.render(ctx) for rule in INSIGHT_RULES if rule.applies(ctx)]
    return fired[:limit]


# ─────────────────────────────────────────────────────────────────────────────
# REBALANCING
# ─────────────────────────────────────────────────────────────────────────────

def rebalancing_note(risk_level: RiskLevel) -> str:
    cadence, band = REBALANCING_CADENCE[risk_level.value]
    return (
        f"{cadence} rebalancing review; rebalance early if any sleeve drifts "
        f"more than {band} points from target."
    )
