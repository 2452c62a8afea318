"""Tests for the topology validation script."""

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "validate_topology.py"


@pytest.fixture
def validate_topology():
    spec = importlib.util.spec_from_file_location("validate_topology", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_small_sweep_passes(validate_topology, tmp_path):
    report_path = tmp_path / "report.json"

    exit_code = validate_topology.main(
        ["--size", "2x2", "--size", "3x5", "--output", str(report_path)])

    assert exit_code == 0
    report = json.loads(report_path.read_text())
    assert report["result"] == "PASSED"
    assert report["grids_checked"] == ["2x2", "3x5"]
    assert report["failures"] == {}


def test_unsupported_size_fails(validate_topology, tmp_path):
    report_path = tmp_path / "report.json"

    exit_code = validate_topology.main(["--size", "1x4", "--output", str(report_path)])

    assert exit_code == 1
    report = json.loads(report_path.read_text())
    assert "1x4" in report["failures"]


def test_limits_check_clean(validate_topology):
    assert validate_topology.validate_limits() == []
