"""Tests for the soilcalc command-line interface."""

import json

import pandas as pd
import pytest
from click.testing import CliRunner

from soilcalc.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def soil_file(tmp_path, sample_soil_data):
    path = tmp_path / "soil.json"
    path.write_text(json.dumps(sample_soil_data))
    return path


def test_evaluate_prints_bundle(runner, soil_file):
    result = runner.invoke(main, ["evaluate", str(soil_file)])
    assert result.exit_code == 0, result.output

    data = json.loads(result.output)
    assert data["foundation_type"] == "Raft/Mat Foundation (IS 8009)"
    assert data["max_floors"] == 15


def test_evaluate_writes_output_with_environment(runner, soil_file, tmp_path):
    env_file = tmp_path / "env.json"
    env_file.write_text(json.dumps({"tags": ["industrial"], "sulfate_exposure": "high"}))
    out_file = tmp_path / "bundle.json"

    result = runner.invoke(
        main,
        ["evaluate", str(soil_file), "--environment", str(env_file), "--output", str(out_file)],
    )
    assert result.exit_code == 0, result.output
    assert "Results saved" in result.output

    data = json.loads(out_file.read_text())
    assert data["exposure"] == "very_severe"
    assert data["concrete"]["cement_type"] == "SRC"
    assert data["steel"]["system"] == "PEB"


def test_summary_lists_messages(runner, soil_file):
    result = runner.invoke(main, ["summary", str(soil_file)])
    assert result.exit_code == 0, result.output
    assert result.output.startswith("- Safe Bearing Capacity")
    assert "Slab system: Two-way" in result.output


def test_score_prints_suitability(runner, soil_file):
    result = runner.invoke(main, ["score", str(soil_file)])
    assert result.exit_code == 0, result.output

    data = json.loads(result.output)
    assert data["overall_recommendation"] == "agriculture"


def test_invalid_input_is_reported(runner, tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    result = runner.invoke(main, ["evaluate", str(bad)])
    assert result.exit_code == 1
    assert "Invalid SoilDescription" in result.output


def test_bore_log_export_csv(runner, tmp_path, sample_layers_data):
    layers_file = tmp_path / "layers.json"
    layers = sample_layers_data + [
        {"from_depth": 5.0, "to_depth": 6.0, "soil_type": "rock"},
    ]
    layers_file.write_text(json.dumps({"layers": layers}))
    out_file = tmp_path / "bore_log.csv"

    result = runner.invoke(main, ["bore-log", str(layers_file), "--output", str(out_file)])
    assert result.exit_code == 0, result.output
    assert "Warning: Layer 5: gap of 1.00 m" in result.output

    df = pd.read_csv(out_file)
    assert len(df) == 5
    assert df["gamma"].iloc[-1] == 23.0


def test_bore_log_prints_table(runner, tmp_path, sample_layers_data):
    layers_file = tmp_path / "layers.json"
    layers_file.write_text(json.dumps({"layers": sample_layers_data}))

    result = runner.invoke(main, ["bore-log", str(layers_file)])
    assert result.exit_code == 0, result.output
    assert "Compressible" in result.output
    assert "Warning" not in result.output
