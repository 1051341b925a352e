#!/usr/bin/env python3
"""
main.py — Investment Copilot: mandate → allocation, projection, tactical moves

Usage:
  python main.py
  python main.py --risk Growth --goal "Wealth accumulation" --years 20 --initial 25000 --monthly 800
  python main.py --risk "Capital Preservation" --goal "Down payment" --years 3 --target 90000 --no-charts
  python main.py --risk "Aggressive Growth" --goal "Financial independence" --years 15 --esg --income --json
"""

import argparse
import json
import os

from config import DEFAULT_PROFILE, OUTPUT_DIR
from data.funds import format_fund_menu
from portfolio.allocator import allocation_frame
from portfolio.plan import generate_plan, format_plan_report, plan_to_dict
from portfolio.profile import (
    RiskLevel, GoalFocus, normalize_profile, validate_profile_inputs,
)
from portfolio.projection import projection_frame


# ─────────────────────────────────────────────────────────────────────────────
# PIPELINE
# ─────────────────────────────────────────────────────────────────────────────

def run_pipeline(
    raw_profile: dict,
    output_dir: str   = OUTPUT_DIR,
    charts: bool      = True,
    save: bool        = True,
    as_json: bool     = False,
) -> dict:
    """Normalize the mandate, generate the plan, print and save reports."""

    # ── Validation warnings ────────────────────────────────────────────────
    warnings_list = validate_profile_inputs(raw_profile)
    if warnings_list and not as_json:
        print("\n  WARNINGS:")
        for w in warnings_list:
            print(f"  * {w}")

    # ── STEP 1: Normalize ──────────────────────────────────────────────────
    profile = normalize_profile(raw_profile)

    # ── STEPS 2-4: Allocation, projection, narrative ──────────────────────
    plan = generate_plan(profile)

    report = format_plan_report(profile, plan) + "\n" + format_fund_menu()
    if as_json:
        print(json.dumps(plan_to_dict(plan), indent=2))
    else:
        print(report)

    if save:
        os.makedirs(output_dir, exist_ok=True)
        report_path = os.path.join(output_dir, "plan_report.txt")
        with open(report_path, "w", encoding="utf-8") as f:
            f.write(report + "\n")
        projection_frame(list(plan.projection)).to_csv(os.path.join(output_dir, "projection.csv"))
        allocation_frame(list(plan.allocation)).to_csv(os.path.join(output_dir, "allocation.csv"))
        if not as_json:
            print(f"\n  Reports saved -> {output_dir}")

    if charts and not as_json:
        print("\n[CHARTS] Generating charts...")
        from utils.visualization import plot_allocation, plot_plan_projection
        plot_allocation(plan, os.path.join(output_dir, "allocation.png"))
        plot_plan_projection(plan, profile, os.path.join(output_dir, "projection.png"))

    return {
        "profile":  profile,
        "plan":     plan,
        "warnings": warnings_list,
    }


# ─────────────────────────────────────────────────────────────────────────────
# CLI
# ─────────────────────────────────────────────────────────────────────────────

def parse_args(argv=None):
    d = DEFAULT_PROFILE
    parser = argparse.ArgumentParser(
        description="Investment Copilot — rule-based allocation and growth projection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --risk Balanced --goal "Financial independence" --years 12 --initial 65000 --monthly 1500 --target 400000 --esg
  python main.py --risk Growth   --goal "Education"              --years 10 --initial 10000 --monthly 400  --target 120000
        """
    )
    parser.add_argument("--risk",    type=str,   default=d["risk_level"], choices=RiskLevel.labels())
    parser.add_argument("--goal",    type=str,   default=d["goal_focus"], choices=GoalFocus.labels())
    parser.add_argument("--years",   type=float, default=d["time_horizon"],
                        help="Time horizon in years (clamped to 1-40)")
    parser.add_argument("--initial", type=float, default=d["initial_investment"], help="Starting capital")
    parser.add_argument("--monthly", type=float, default=d["monthly_contribution"], help="Monthly contribution")
    parser.add_argument("--target",  type=float, default=d["target_amount"], help="Target amount (0 = none)")
    parser.add_argument("--esg",     action=argparse.BooleanOptionalAction, default=d["sustainability_bias"],
                        help="Prioritise sustainability screens")
    parser.add_argument("--income",  action=argparse.BooleanOptionalAction, default=d["income_priority"],
                        help="Tilt toward supplemental income")
    parser.add_argument("--output",  type=str,   default=OUTPUT_DIR, help="Directory for reports and charts")
    parser.add_argument("--no-charts", action="store_true", help="Skip chart generation")
    parser.add_argument("--no-save",   action="store_true", help="Print only, write nothing")
    parser.add_argument("--json",      action="store_true", help="Print the plan as JSON")
    return parser.parse_args(argv)


def profile_from_args(args) -> dict:
    return {
        "risk_level":           args.risk,
        "goal_focus":           args.goal,
        "time_horizon":         args.years,
        "initial_investment":   args.initial,
        "monthly_contribution": args.monthly,
        "target_amount":        args.target,
        "sustainability_bias":  args.esg,
        "income_priority":      args.income,
    }


if __name__ == "__main__":
    args = parse_args()
    results = run_pipeline(
        raw_profile = profile_from_args(args),
        output_dir  = args.output,
        charts      = not (args.no_charts or args.no_save),
        save        = not args.no_save,
        as_json     = args.json,
    )
