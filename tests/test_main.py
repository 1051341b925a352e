import json

import pandas as pd

from main import parse_args, profile_from_args, run_pipeline


def test_parse_args_defaults_to_form_mandate():
    args = parse_args([])
    raw = profile_from_args(args)

    assert raw["risk_level"] == "Balanced"
    assert raw["goal_focus"] == "Financial independence"
    assert raw["time_horizon"] == 12
    assert raw["sustainability_bias"] is True
    assert raw["income_priority"] is False


def test_parse_args_flags():
    args = parse_args([
        "--risk", "Aggressive Growth", "--goal", "Education", "--years", "41",
        "--no-esg", "--income", "--no-charts",
    ])
    raw = profile_from_args(args)

    assert raw["risk_level"] == "Aggressive Growth"
    assert raw["time_horizon"] == 41.0
    assert raw["sustainability_bias"] is False
    assert raw["income_priority"] is True
    assert args.no_charts is True


def test_run_pipeline_writes_reports(tmp_path, raw_profile, capsys):
    result = run_pipeline(raw_profile, output_dir=str(tmp_path), charts=False)

    assert (tmp_path / "plan_report.txt").exists()
    projection = pd.read_csv(tmp_path / "projection.csv", index_col="year")
    allocation = pd.read_csv(tmp_path / "allocation.csv", index_col="asset_class")

    assert len(projection) == 12
    assert allocation["percentage"].sum() == 100
    assert result["plan"].name == "Independence Core"

    out = capsys.readouterr().out
    assert "TACTICAL MOVES" in out
    assert "IMPLEMENTATION MENU" in out


def test_run_pipeline_prints_warnings(raw_profile, capsys):
    raw_profile["time_horizon"] = 41
    result = run_pipeline(raw_profile, charts=False, save=False)

    assert result["profile"].time_horizon == 40
    assert result["warnings"]
    assert "WARNINGS:" in capsys.readouterr().out


def test_run_pipeline_json(raw_profile, capsys):
    run_pipeline(raw_profile, charts=False, save=False, as_json=True)
    data = json.loads(capsys.readouterr().out)

    assert data["name"] == "Independence Core"
    assert len(data["projection"]) == 12
