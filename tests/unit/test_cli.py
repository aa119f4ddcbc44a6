"""Tests for the nprog command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from neural_progression.cli.main import app
from neural_progression.core.network import NeuralNetwork

runner = CliRunner()


@pytest.fixture
def network_file(tmp_path: Path) -> Path:
    path = tmp_path / "network.json"
    result = runner.invoke(app, ["init", "u1", "--output", str(path)])
    assert result.exit_code == 0, result.output
    return path


@pytest.fixture
def results_file(tmp_path: Path) -> Path:
    path = tmp_path / "results.json"
    path.write_text(json.dumps({"round1": {"score": 100, "timeRemaining": 60}}))
    return path


class TestInit:
    def test_writes_network(self, network_file: Path) -> None:
        data = json.loads(network_file.read_text())
        assert data["userId"] == "u1"
        assert len(data["nodes"]) == 20

    def test_prints_network(self) -> None:
        result = runner.invoke(app, ["init", "u2"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["userId"] == "u2"

    def test_rejects_blank_owner(self) -> None:
        result = runner.invoke(app, ["init", "  "])
        assert result.exit_code == 1


class TestApply:
    def test_updates_network_file(
        self, network_file: Path, results_file: Path, tmp_path: Path
    ) -> None:
        out = tmp_path / "updated.json"
        result = runner.invoke(
            app, ["apply", str(network_file), str(results_file), "-o", str(out), "--json"]
        )
        assert result.exit_code == 0, result.output
        report = json.loads(result.stdout)
        assert report["progress"]["currentLevel"] == 1
        assert "network" not in report

        updated = NeuralNetwork.from_dict(json.loads(out.read_text()))
        memory = updated.get_node("memory")
        assert memory is not None
        assert memory.progress == pytest.approx(25.0)

    def test_rival_file(self, network_file: Path, tmp_path: Path) -> None:
        results = tmp_path / "r.json"
        results.write_text(json.dumps({"roundResults": {"round1": {"score": 50}}}))
        rival = tmp_path / "rival.json"
        rival.write_text(json.dumps({"performance": {"round1": 10}}))

        result = runner.invoke(
            app, ["apply", str(network_file), str(results), "--rival", str(rival), "--json"]
        )
        assert result.exit_code == 0, result.output
        network = NeuralNetwork.from_dict(json.loads(result.stdout)["network"])
        memory = network.get_node("memory")
        assert memory is not None
        assert memory.progress == pytest.approx(20.0)

    def test_human_output(self, network_file: Path, results_file: Path) -> None:
        result = runner.invoke(app, ["apply", str(network_file), str(results_file)])
        assert result.exit_code == 0, result.output
        assert "Overall level: 1" in result.stdout

    def test_missing_file(self, tmp_path: Path, results_file: Path) -> None:
        result = runner.invoke(app, ["apply", str(tmp_path / "nope.json"), str(results_file)])
        assert result.exit_code == 1

    def test_invalid_network_record(self, tmp_path: Path, results_file: Path) -> None:
        bogus = tmp_path / "bogus.json"
        bogus.write_text(json.dumps({"hello": "world"}))
        result = runner.invoke(app, ["apply", str(bogus), str(results_file)])
        assert result.exit_code == 1

    @pytest.mark.parametrize(
        "record",
        [
            {"userId": "u1", "nodes": None},
            {"userId": "u1", "nodes": ["memory"]},
            {"userId": "u1", "nodes": [], "lastUpdated": 12345},
        ],
    )
    def test_corrupt_network_exits_cleanly(self, tmp_path: Path, record: dict) -> None:
        corrupt = tmp_path / "corrupt.json"
        corrupt.write_text(json.dumps(record))
        result = runner.invoke(app, ["stats", str(corrupt)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)


class TestStats:
    def test_json_stats(self, network_file: Path) -> None:
        result = runner.invoke(app, ["stats", str(network_file), "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["unlockedNodes"] == 5
        assert data["networkDensity"] == pytest.approx(0.6)

    def test_table_stats(self, network_file: Path) -> None:
        result = runner.invoke(app, ["stats", str(network_file), "--nodes"])
        assert result.exit_code == 0, result.output
        assert "Network statistics" in result.stdout


class TestCatalog:
    def test_json_catalog(self) -> None:
        result = runner.invoke(app, ["catalog", "--json"])
        assert result.exit_code == 0
        assert len(json.loads(result.stdout)["nodes"]) == 20
