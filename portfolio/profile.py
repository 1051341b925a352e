# portfolio/profile.py — Investor mandate: enums, profile, normalizer
#
# The profile is rebuilt from raw form input on every edit. Numeric input is
# corrected silently (clamped / zeroed); enum input is trusted to come from
# the fixed option lists and anything else is a contract violation.

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from config import MIN_HORIZON_YEARS, MAX_HORIZON_YEARS, MAX_AMOUNT, CURRENCY_SYMBOL


# ─────────────────────────────────────────────────────────────────────────────
# ERRORS
# ─────────────────────────────────────────────────────────────────────────────

class PlanningError(ValueError):
    """Base class for engine contract violations."""


class InvalidEnumValue(PlanningError):
    """Risk level or goal focus outside the fixed option list."""


class ProfileInvariantError(PlanningError):
    """A directly-constructed profile breaks a field invariant."""


# ─────────────────────────────────────────────────────────────────────────────
# ENUMERATIONS
# ─────────────────────────────────────────────────────────────────────────────

class _LabelEnum(str, Enum):

    @classmethod
    def parse(cls, value: Any):
        """Accept a member, its label, or its member name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if value == member.value or value == member.name:
                    return member
        raise InvalidEnumValue(
            f"Unknown {cls.__name__}: {value!r}. "
            f"Choose from: {[m.value for m in cls]}"
        )

    @classmethod
    def labels(cls) -> list[str]:
        return [m.value for m in cls]

    def __str__(self) -> str:
        return self.value


class RiskLevel(_LabelEnum):
    """Declared from most conservative to most aggressive."""
    CAPITAL_PRESERVATION = "Capital Preservation"
    BALANCED             = "Balanced"
    GROWTH               = "Growth"
    AGGRESSIVE_GROWTH    = "Aggressive Growth"

    @property
    def rank(self) -> int:
        return list(RiskLevel).index(self)


class GoalFocus(_LabelEnum):
    RETIREMENT_INCOME      = "Retirement income"
    WEALTH_ACCUMULATION    = "Wealth accumulation"
    DOWN_PAYMENT           = "Down payment"
    EDUCATION              = "Education"
    FINANCIAL_INDEPENDENCE = "Financial independence"


# ─────────────────────────────────────────────────────────────────────────────
# PROFILE
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class InvestorProfile:
    """Canonical investor mandate."""
    risk_level: RiskLevel
    time_horizon: int                  # whole years, 1–40
    initial_investment: float          # starting capital
    monthly_contribution: float = 0.0
    target_amount: float = 0.0
    goal_focus: GoalFocus = GoalFocus.WEALTH_ACCUMULATION
    sustainability_bias: bool = False
    income_priority: bool = False

    def __post_init__(self):
        object.__setattr__(self, "risk_level", RiskLevel.parse(self.risk_level))
        object.__setattr__(self, "goal_focus", GoalFocus.parse(self.goal_focus))

        if isinstance(self.time_horizon, bool) or not isinstance(self.time_horizon, int):
            raise ProfileInvariantError(
                f"time_horizon must be a whole number of years, got {self.time_horizon!r}."
            )
        if not MIN_HORIZON_YEARS <= self.time_horizon <= MAX_HORIZON_YEARS:
            raise ProfileInvariantError(
                f"time_horizon must be between {MIN_HORIZON_YEARS} and "
                f"{MAX_HORIZON_YEARS} years, got {self.time_horizon}."
            )
        for name in ("initial_investment", "monthly_contribution", "target_amount"):
            value = getattr(self, name)
            if not _is_finite(value) or not 0 <= value <= MAX_AMOUNT:
                raise ProfileInvariantError(
                    f"{name} must be a finite amount between 0 and {MAX_AMOUNT:,}, got {value!r}."
                )

    @property
    def annual_contribution(self) -> float:
        return self.monthly_contribution * 12


# ─────────────────────────────────────────────────────────────────────────────
# NORMALIZER
# ─────────────────────────────────────────────────────────────────────────────

_AMOUNT_FIELDS = ("initial_investment", "monthly_contribution", "target_amount")


def _is_finite(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _to_number(value: Any) -> float:
    """Coerce raw form input to a finite float; anything else becomes 0."""
    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def clamp_horizon(value: Any) -> int:
    years = int(round(_to_number(value)))
    return max(MIN_HORIZON_YEARS, min(MAX_HORIZON_YEARS, years))


def clamp_amount(value: Any) -> float:
    return min(float(MAX_AMOUNT), max(0.0, _to_number(value)))


def normalize_profile(raw: Mapping[str, Any]) -> InvestorProfile:
    """
    Build a canonical InvestorProfile from raw (possibly untrusted) input.

    Non-finite or unparsable numbers become 0, the horizon is clamped to
    [1, 40] years and amounts to [0, MAX_AMOUNT]. Enum fields must be recognised values;
    anything else raises InvalidEnumValue.
    """
    amounts = {name: clamp_amount(raw.get(name)) for name in _AMOUNT_FIELDS}
    return InvestorProfile(
        risk_level          = RiskLevel.parse(raw.get("risk_level")),
        time_horizon        = clamp_horizon(raw.get("time_horizon")),
        goal_focus          = GoalFocus.parse(raw.get("goal_focus")),
        sustainability_bias = bool(raw.get("sustainability_bias", False)),
        income_priority     = bool(raw.get("income_priority", False)),
        **amounts,
    )


# ─────────────────────────────────────────────────────────────────────────────
# VALIDATION
# ─────────────────────────────────────────────────────────────────────────────

def validate_profile_inputs(raw: Mapping[str, Any]) -> list[str]:
    """Returns list of warnings for the user (guidance, not errors)."""
    warnings_list = []

    horizon_raw = _to_number(raw.get("time_horizon"))
    if not _is_finite_input(raw.get("time_horizon")):
        warnings_list.append(
            f"Time horizon {raw.get('time_horizon')!r} is not a number; "
            f"using {MIN_HORIZON_YEARS} year."
        )
    elif not MIN_HORIZON_YEARS <= horizon_raw <= MAX_HORIZON_YEARS:
        warnings_list.append(
            f"Time horizon of {raw.get('time_horizon')} years is outside "
            f"{MIN_HORIZON_YEARS}-{MAX_HORIZON_YEARS}; using {clamp_horizon(horizon_raw)} years."
        )
    elif horizon_raw != round(horizon_raw):
        warnings_list.append(
            f"Time horizon is counted in whole years; using {clamp_horizon(horizon_raw)} years."
        )

    for name in _AMOUNT_FIELDS:
        label = name.replace("_", " ")
        value = raw.get(name)
        if not _is_finite_input(value):
            warnings_list.append(f"{label.capitalize()} {value!r} is not a number; treating it as 0.")
        elif _to_number(value) < 0:
            warnings_list.append(f"{label.capitalize()} cannot be negative; treating it as 0.")
        elif _to_number(value) > MAX_AMOUNT:
            warnings_list.append(
                f"{label.capitalize()} exceeds the {CURRENCY_SYMBOL}{MAX_AMOUNT:,} cap; using the cap."
            )

    if _to_number(raw.get("target_amount")) <= 0:
        warnings_list.append(
            "No target amount set; funding ratio and shortfall checks are skipped."
        )

    return warnings_list


def _is_finite_input(value: Any) -> bool:
    if isinstance(value, bool) or value is None:
        return False
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False
