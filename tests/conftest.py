import pytest

from config import DEFAULT_PROFILE
from portfolio.profile import InvestorProfile, RiskLevel, GoalFocus, normalize_profile


@pytest.fixture
def raw_profile():
    """The default mandate from the input form."""
    return dict(DEFAULT_PROFILE)


@pytest.fixture
def default_profile(raw_profile):
    return normalize_profile(raw_profile)


@pytest.fixture
def make_profile():
    """Factory for profiles with sensible defaults."""
    def _make(**overrides):
        fields = dict(
            risk_level=RiskLevel.BALANCED,
            time_horizon=10,
            initial_investment=10000.0,
            monthly_contribution=500.0,
            target_amount=100000.0,
            goal_focus=GoalFocus.WEALTH_ACCUMULATION,
            sustainability_bias=False,
            income_priority=False,
        )
        fields.update(overrides)
        return InvestorProfile(**fields)
    return _make
