import pytest

from portfolio.allocator import ASSET_CLASSES
from portfolio.goals import (
    ASSET_CLASS_DESCRIPTIONS,
    GOAL_PROFILES,
    required_monthly_contribution,
    slice_description,
)
from portfolio.profile import GoalFocus, RiskLevel
from portfolio.projection import project_scenarios, scenario_returns


def test_every_goal_has_a_profile():
    assert set(GOAL_PROFILES) == set(GoalFocus)
    for profile in GOAL_PROFILES.values():
        assert profile["display_name"]
        assert profile["notes"]
        assert set(profile["framing"]) <= set(ASSET_CLASSES)


def test_every_asset_class_has_a_generic_description():
    assert set(ASSET_CLASS_DESCRIPTIONS) == set(ASSET_CLASSES)


@pytest.mark.parametrize("goal", list(GoalFocus))
def test_slice_description_always_resolves(goal):
    for asset_class in ASSET_CLASSES:
        assert slice_description(goal, asset_class)


def test_required_contribution_reaches_target(make_profile):
    base = make_profile(
        risk_level=RiskLevel.GROWTH, initial_investment=10000.0,
        monthly_contribution=0.0, target_amount=200000.0, time_horizon=15,
    )
    needed = required_monthly_contribution(base, scenario_returns(base.risk_level)["expected"])
    assert needed > 0

    funded = make_profile(
        risk_level=RiskLevel.GROWTH, initial_investment=10000.0,
        monthly_contribution=needed, target_amount=200000.0, time_horizon=15,
    )
    final = project_scenarios(funded)[-1].expected_value
    assert final == pytest.approx(200000.0, rel=1e-3)


def test_required_contribution_zero_when_principal_suffices(make_profile):
    profile = make_profile(initial_investment=500000.0, target_amount=100000.0)
    assert required_monthly_contribution(profile, 0.05) == 0.0


def test_required_contribution_zero_without_target(make_profile):
    assert required_monthly_contribution(make_profile(target_amount=0.0), 0.05) == 0.0


def test_required_contribution_with_zero_return(make_profile):
    profile = make_profile(initial_investment=0.0, target_amount=12000.0, time_horizon=1)
    assert required_monthly_contribution(profile, 0.0) == 1000.0
