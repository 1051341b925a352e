import pytest

from config import MAX_INSIGHTS, REBALANCING_CADENCE
from portfolio.allocator import build_allocation
from portfolio.goals import GOAL_PROFILES, required_monthly_contribution
from portfolio.narrative import (
    GOAL_NAMES,
    INSIGHT_RULES,
    RISK_NAMES,
    NarrativeContext,
    agent_message,
    rebalancing_note,
    select_insights,
    strategy_name,
)
from portfolio.profile import GoalFocus, RiskLevel
from portfolio.projection import funding_ratio, project_scenarios, scenario_returns


def make_context(profile, required=None):
    projection = project_scenarios(profile)
    if required is None:
        required = required_monthly_contribution(
            profile, scenario_returns(profile.risk_level)["expected"],
        )
    final = projection[-1]
    return NarrativeContext(
        profile=profile,
        allocation=build_allocation(profile),
        projection=projection,
        funding_ratio=funding_ratio(final.expected_value, profile.target_amount),
        stress_funding_ratio=funding_ratio(final.stressed_value, profile.target_amount),
        required_monthly_contribution=required,
    )


def fired_keys(ctx):
    return [rule.key for rule in INSIGHT_RULES if rule.applies(ctx)]


# ── Names ──────────────────────────────────────────────────────────────────

def test_name_uses_specific_entry(make_profile):
    profile = make_profile(risk_level=RiskLevel.BALANCED, goal_focus=GoalFocus.FINANCIAL_INDEPENDENCE)
    assert strategy_name(profile) == "Independence Core"


def test_name_falls_back_to_risk_level(make_profile):
    profile = make_profile(risk_level=RiskLevel.AGGRESSIVE_GROWTH, goal_focus=GoalFocus.DOWN_PAYMENT)
    assert (RiskLevel.AGGRESSIVE_GROWTH, GoalFocus.DOWN_PAYMENT) not in GOAL_NAMES
    assert strategy_name(profile) == RISK_NAMES[RiskLevel.AGGRESSIVE_GROWTH]


def test_every_combination_has_a_name(make_profile):
    for risk in RiskLevel:
        for goal in GoalFocus:
            assert strategy_name(make_profile(risk_level=risk, goal_focus=goal))


# ── Agent message ──────────────────────────────────────────────────────────

def test_message_on_track(make_profile):
    ctx = make_context(make_profile(target_amount=50000.0, initial_investment=50000.0))
    message = agent_message(ctx)

    assert ctx.funding_ratio >= 1
    assert message.startswith("On the expected path")
    assert "% in equities" in message


def test_message_close_to_target(make_profile):
    profile = make_profile(initial_investment=10000.0, monthly_contribution=500.0, time_horizon=10)
    final_value = project_scenarios(profile)[-1].expected_value
    ctx = make_context(make_profile(
        initial_investment=10000.0, monthly_contribution=500.0, time_horizon=10,
        target_amount=final_value / 0.9,
    ))
    assert "modest contribution lift" in agent_message(ctx)


def test_message_behind_target(make_profile):
    ctx = make_context(make_profile(target_amount=10_000_000.0))
    message = agent_message(ctx)

    assert "covers only" in message
    assert "stress scenario the balance reaches" in message


def test_message_without_target(make_profile):
    ctx = make_context(make_profile(target_amount=0.0))
    message = agent_message(ctx)

    assert message.startswith("No target amount is set")
    assert "stress" not in message.lower()


def test_message_stress_holds_up(make_profile):
    ctx = make_context(make_profile(
        risk_level=RiskLevel.CAPITAL_PRESERVATION,
        initial_investment=100000.0, target_amount=100000.0,
    ))
    assert ctx.stress_funding_ratio >= 0.8
    assert "Even the stress scenario" in agent_message(ctx)


# ── Insights ───────────────────────────────────────────────────────────────

def test_insights_fire_in_priority_order(make_profile):
    ctx = make_context(make_profile(
        risk_level=RiskLevel.AGGRESSIVE_GROWTH,
        time_horizon=3,
        initial_investment=1000.0,
        monthly_contribution=0.0,
        target_amount=500000.0,
    ), required=13000.0)

    assert fired_keys(ctx) == [
        "stress_shortfall", "expected_shortfall", "no_contribution", "short_horizon", "goal_guidance",
    ]
    insights = select_insights(ctx)
    assert insights[0].startswith("Stress scenario falls")
    assert "$13,000" in insights[1]


def test_insights_are_capped(make_profile):
    ctx = make_context(make_profile(
        risk_level=RiskLevel.AGGRESSIVE_GROWTH,
        time_horizon=2,
        monthly_contribution=10.0,
        target_amount=900000.0,
        sustainability_bias=True,
        income_priority=True,
    ))
    assert len(fired_keys(ctx)) > MAX_INSIGHTS
    insights = select_insights(ctx)
    assert len(insights) == MAX_INSIGHTS
    assert insights == [rule.render(ctx) for rule in INSIGHT_RULES if rule.applies(ctx)][:MAX_INSIGHTS]


def test_expected_shortfall_needs_a_higher_contribution(make_profile):
    reported = project_scenarios(make_profile(monthly_contribution=500.0))[-1].expected_value
    ctx = make_context(make_profile(monthly_contribution=500.0, target_amount=reported + 0.75))

    assert ctx.final.expected_value < ctx.profile.target_amount
    assert ctx.required_monthly_contribution <= ctx.profile.monthly_contribution
    assert "expected_shortfall" not in fired_keys(ctx)
    assert not any(i.startswith("Expected path misses") for i in select_insights(ctx))


def test_expected_shortfall_quotes_a_larger_contribution(make_profile):
    ctx = make_context(make_profile(monthly_contribution=500.0, target_amount=500000.0))

    assert "expected_shortfall" in fired_keys(ctx)
    assert ctx.required_monthly_contribution > 500


def test_low_contribution_rule(make_profile):
    ctx = make_context(make_profile(monthly_contribution=100.0, time_horizon=10, target_amount=1_000_000.0))
    assert "low_contribution" in fired_keys(ctx)
    assert any(i.startswith("Contribution rate looks low") for i in select_insights(ctx))


def test_long_preservation_rule(make_profile):
    ctx = make_context(make_profile(risk_level=RiskLevel.CAPITAL_PRESERVATION, time_horizon=20))
    assert "long_preservation" in fired_keys(ctx)


def test_on_track_and_sleeve_notes(make_profile):
    ctx = make_context(make_profile(
        initial_investment=200000.0, target_amount=100000.0,
        sustainability_bias=True, income_priority=True,
    ))
    keys = fired_keys(ctx)
    assert "on_track" in keys
    assert "stress_shortfall" not in keys

    insights = select_insights(ctx)
    assert any("Dividend income sleeve sits at 16%" in i for i in insights)
    assert any("Sustainable equity sleeve holds 8%" in i for i in insights)


def test_goal_guidance_always_present_when_room(make_profile):
    profile = make_profile(goal_focus=GoalFocus.EDUCATION, target_amount=0.0)
    insights = select_insights(make_context(profile))

    assert 1 <= len(insights) <= MAX_INSIGHTS
    assert insights[-1] == GOAL_PROFILES[GoalFocus.EDUCATION]["notes"][0]


def test_context_weight_of_missing_slice(make_profile):
    ctx = make_context(make_profile())
    assert ctx.weight_of("Sustainable Equity") == 0


# ── Rebalancing ────────────────────────────────────────────────────────────

@pytest.mark.parametrize("risk, cadence", [
    (RiskLevel.CAPITAL_PRESERVATION, "Annual"),
    (RiskLevel.BALANCED, "Semiannual"),
    (RiskLevel.GROWTH, "Quarterly"),
    (RiskLevel.AGGRESSIVE_GROWTH, "Monthly"),
])
def test_rebalancing_cadence(risk, cadence):
    assert rebalancing_note(risk).startswith(cadence)


def test_higher_risk_reviews_more_often():
    reviews_per_year = {"Annual": 1, "Semiannual": 2, "Quarterly": 4, "Monthly": 12}
    cadence = [reviews_per_year[REBALANCING_CADENCE[r.value][0]] for r in RiskLevel]
    bands   = [REBALANCING_CADENCE[r.value][1] for r in RiskLevel]

    assert cadence == sorted(cadence)
    assert bands == sorted(bands, reverse=True)
