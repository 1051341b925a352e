# portfolio/plan.py — Recommendation engine entry point: profile → Plan
#
# Evaluation order (each step only sees the outputs of the steps before it):
#   1. Allocation:  risk table + ESG / income shifts, renormalised
#   2. Projection:  three scenarios, monthly compounding
#   3. Narrative:   name, agent message, insights, rebalancing note

from dataclasses import dataclass, asdict

from config import CURRENCY_SYMBOL
from portfolio.allocator import AllocationSlice, build_allocation, format_allocation_report
from portfolio.goals import GOAL_PROFILES, required_monthly_contribution
from portfolio.narrative import (
    NarrativeContext, strategy_name, agent_message, select_insights, rebalancing_note,
)
from portfolio.profile import InvestorProfile
from portfolio.projection import (
    ProjectionYear, project_scenarios, projection_cagr, funding_ratio, scenario_returns,
)


@dataclass(frozen=True)
class Plan:
    """Everything the engine produces for one mandate."""
    name: str
    agent_message: str
    expected_cagr: float
    downside_cagr: float
    rebalancing_note: str
    allocation: tuple[AllocationSlice, ...]
    projection: tuple[ProjectionYear, ...]
    insights: tuple[str, ...]
    funding_ratio: float = 0.0
    stress_funding_ratio: float = 0.0
    required_monthly_contribution: float = 0.0

    @property
    def final_year(self) -> ProjectionYear:
        return self.projection[-1]


def generate_plan(profile: InvestorProfile) -> Plan:
    """
    Map a normalized InvestorProfile to a Plan.

    Pure and deterministic: identical profiles give identical plans.
    Callers should pass input through normalize_profile first; the profile
    itself rejects invariant violations at construction.
    """
    if not isinstance(profile, InvestorProfile):
        raise TypeError(
            f"generate_plan expects an InvestorProfile, got {type(profile).__name__}; "
            f"use normalize_profile() on raw input."
        )

    allocation = build_allocation(profile)

    projection = project_scenarios(profile)
    expected_cagr, downside_cagr = projection_cagr(profile, projection)
    final = projection[-1]

    ctx = NarrativeContext(
        profile                       = profile,
        allocation                    = allocation,
        projection                    = projection,
        funding_ratio                 = funding_ratio(final.expected_value, profile.target_amount),
        stress_funding_ratio          = funding_ratio(final.stressed_value, profile.target_amount),
        required_monthly_contribution = required_monthly_contribution(
            profile, scenario_returns(profile.risk_level)["expected"],
        ),
    )

    return Plan(
        name                          = strategy_name(profile),
        agent_message                 = agent_message(ctx),
        expected_cagr                 = expected_cagr,
        downside_cagr                 = downside_cagr,
        rebalancing_note              = rebalancing_note(profile.risk_level),
        allocation                    = tuple(allocation),
        projection                    = tuple(projection),
        insights                      = tuple(select_insights(ctx)),
        funding_ratio                 = round(ctx.funding_ratio, 4),
        stress_funding_ratio          = round(ctx.stress_funding_ratio, 4),
        required_monthly_contribution = ctx.required_monthly_contribution,
    )


def plan_to_dict(plan: Plan) -> dict:
    """JSON-serialisable view of a plan."""
    data = asdict(plan)
    data["allocation"] = list(data["allocation"])
    data["projection"] = list(data["projection"])
    data["insights"]   = list(data["insights"])
    return data


# ─────────────────────────────────────────────────────────────────────────────
# PLAN REPORT FORMATTER
# ─────────────────────────────────────────────────────────────────────────────

def _money(value: float) -> str:
    return f"{CURRENCY_SYMBOL}{value:>13,.0f}"


def _amount(value: float) -> str:
    return f"{CURRENCY_SYMBOL}{value:,.0f}"


def format_plan_report(profile: InvestorProfile, plan: Plan) -> str:
    """Generate a comprehensive mandate report."""
    goal  = GOAL_PROFILES[profile.goal_focus]
    final = plan.final_year

    lines = []
    lines.append("╔" + "═" * 62 + "╗")
    lines.append(f"║  {'INVESTMENT COPILOT — MANDATE PLAN':<60}║")
    lines.append("╠" + "═" * 62 + "╣")
    lines.append(f"║  {'Goal        : ' + goal['display_name']:<60}║")
    lines.append(f"║  {'Risk        : ' + profile.risk_level.value:<60}║")
    lines.append(f"║  {'Horizon     : ' + str(profile.time_horizon) + ' years':<60}║")
    lines.append(f"║  {'Starting    : ' + _amount(profile.initial_investment):<60}║")
    lines.append(f"║  {'Monthly     : ' + _amount(profile.monthly_contribution):<60}║")
    if profile.target_amount > 0:
        lines.append(f"║  {'Target      : ' + _amount(profile.target_amount):<60}║")
    lines.append("╚" + "═" * 62 + "╝")
    lines.append(f"  {goal['description']}.")

    # ── Verdict ────────────────────────────────────────────────────────────
    lines.append(f"\n  AGENT VERDICT: {plan.name.upper()}")
    lines.append(f"  {plan.agent_message}")
    lines.append(f"  Expected CAGR                : {plan.expected_cagr:.1f}%")
    lines.append(f"  Stress-scenario CAGR         : {plan.downside_cagr:.1f}%")
    if profile.target_amount > 0:
        lines.append(f"  Funding ratio (expected)     : {plan.funding_ratio:.0%}")
        lines.append(f"  Funding ratio (stress)       : {plan.stress_funding_ratio:.0%}")
        if plan.required_monthly_contribution > profile.monthly_contribution:
            lines.append(
                f"  Monthly needed for target    : {_money(plan.required_monthly_contribution)}"
            )

    # ── Allocation ─────────────────────────────────────────────────────────
    lines.append(f"\n  STRATEGIC ALLOCATION")
    lines.append(f"  {plan.rebalancing_note}")
    lines.append(format_allocation_report(list(plan.allocation)))

    # ── Trajectory milestones ─────────────────────────────────────────────
    lines.append(f"\n  CAPITAL TRAJECTORY ({profile.time_horizon} years)")
    lines.append(f"  {'Year':<5} {'Expected':>14} {'Optimistic':>14} {'Stress':>14} {'Paid In':>14}")
    lines.append(f"  {'─'*64}")
    milestone_years = {1, 3, 5}
    milestone_years.update(range(5, profile.time_horizon + 1, 5))
    milestone_years.add(profile.time_horizon)
    for row in plan.projection:
        if row.year in milestone_years:
            lines.append(
                f"  {row.year:<5} {_money(row.expected_value)} {_money(row.optimistic_value)} "
                f"{_money(row.stressed_value)} {_money(row.cumulative_contributions)}"
            )
    lines.append(f"  Year {profile.time_horizon} expected balance : {_amount(final.expected_value)}")

    # ── Tactical moves ────────────────────────────────────────────────────
    lines.append(f"\n  TACTICAL MOVES")
    for insight in plan.insights:
        lines.append(f"  • {insight}")

    notes = [n for n in goal["notes"] if n not in plan.insights]
    if notes:
        lines.append(f"\n  GOAL NOTES: {goal['display_name'].upper()}")
        for note in notes:
            lines.append(f"  - {note}")

    lines.append(f"\n  ⚠  Projections are illustrative, not financial advice.")
    lines.append("─" * 64)

    return "\n".join(lines)
