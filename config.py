# config.py — Central configuration for the Investment Copilot engine

# ─────────────────────────────────────────────
# MANDATE BOUNDS
# ─────────────────────────────────────────────
MIN_HORIZON_YEARS = 1
MAX_HORIZON_YEARS = 40
MONTHS_PER_YEAR   = 12
MAX_AMOUNT        = 1_000_000_000_000   # cap per currency field

# ─────────────────────────────────────────────
# RETURN SCENARIOS (annualised, by risk level)
# expected / optimistic / stressed; must satisfy optimistic > expected > stressed
# ─────────────────────────────────────────────
SCENARIO_RETURNS = {
    "Capital Preservation": {"expected": 0.040, "optimistic": 0.055, "stressed":  0.010},
    "Balanced":             {"expected": 0.058, "optimistic": 0.080, "stressed": -0.005},
    "Growth":               {"expected": 0.072, "optimistic": 0.100, "stressed": -0.020},
    "Aggressive Growth":    {"expected": 0.085, "optimistic": 0.125, "stressed": -0.040},
}
SCENARIOS = ("expected", "optimistic", "stressed")
CAGR_DECIMALS = 1

# ─────────────────────────────────────────────
# ALLOCATION ADJUSTMENTS (percentage points)
# ─────────────────────────────────────────────
SUSTAINABLE_SHIFT = {"US Core Equity": 5, "Investment-Grade Bonds": 3}
INCOME_SHIFT      = {"US Core Equity": 5, "International Equity": 3}

# ─────────────────────────────────────────────
# NARRATIVE RULES
# ─────────────────────────────────────────────
MAX_INSIGHTS             = 6
ON_TRACK_RATIO           = 1.00     # expected path meets target
CLOSE_RATIO              = 0.75     # within reach with a contribution lift
STRESS_MEANINGFUL_RATIO  = 0.80     # stress path still covers most of target
LOW_CONTRIBUTION_SHARE   = 0.35     # scheduled contributions vs target
LONG_PRESERVATION_YEARS  = 15

# Minimum years a posture needs to ride out a drawdown
MIN_HORIZON_BY_RISK = {
    "Capital Preservation": 1,
    "Balanced":             3,
    "Growth":               5,
    "Aggressive Growth":    7,
}

# Review cadence and drift band (points) per risk level
REBALANCING_CADENCE = {
    "Capital Preservation": ("Annual",     5),
    "Balanced":             ("Semiannual", 5),
    "Growth":               ("Quarterly",  4),
    "Aggressive Growth":    ("Monthly",    3),
}

# ─────────────────────────────────────────────
# CLI DEFAULTS / OUTPUT
# ─────────────────────────────────────────────
OUTPUT_DIR = "outputs/"
CURRENCY_SYMBOL = "$"

DEFAULT_PROFILE = {
    "risk_level":           "Balanced",
    "time_horizon":         12,
    "initial_investment":   65000,
    "monthly_contribution": 1500,
    "target_amount":        400000,
    "goal_focus":           "Financial independence",
    "sustainability_bias":  True,
    "income_priority":      False,
}
