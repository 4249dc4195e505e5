"""Tests for the circuitry CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from circuitry.cli.main import app

runner = CliRunner()


@pytest.fixture
def line_file(tmp_path: Path) -> Path:
    path = tmp_path / "input.txt"
    path.write_text("0,0,0\n1,0,0\n10,0,0\n11,0,0\n", encoding="utf-8")
    return path


class TestSolve:
    def test_part_one_writes_output(self, line_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "answer.txt"
        result = runner.invoke(
            app, ["solve", "-i", str(line_file), "--part", "1", "-k", "3", "-o", str(out)]
        )
        assert result.exit_code == 0, result.output
        assert out.read_text(encoding="utf-8") == "4"
        assert f"Successfully determined solution {line_file} -> {out}" in result.output

    def test_part_two_writes_output(self, line_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "answer.txt"
        result = runner.invoke(app, ["solve", "-i", str(line_file), "-p", "2", "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert out.read_text(encoding="utf-8") == "10"

    def test_capacity_from_config_file(self, line_file: Path, tmp_path: Path) -> None:
        config = tmp_path / "config.toml"
        config.write_text("[analysis]\nedge_capacity = 1\n", encoding="utf-8")
        out = tmp_path / "answer.txt"
        result = runner.invoke(
            app, ["solve", "-i", str(line_file), "-c", str(config), "-o", str(out)]
        )
        assert result.exit_code == 0, result.output
        assert out.read_text(encoding="utf-8") == "2"

    def test_out_of_range_config_exits(self, line_file: Path, tmp_path: Path) -> None:
        """A config value that fails validation stops the run instead of using defaults."""
        config = tmp_path / "config.toml"
        config.write_text("[analysis]\nedge_capacity = 10\ntop_components = 0\n", encoding="utf-8")
        out = tmp_path / "answer.txt"
        result = runner.invoke(
            app, ["solve", "-i", str(line_file), "-c", str(config), "-o", str(out)]
        )
        assert result.exit_code == 1
        assert "invalid config" in result.output
        assert "top_components" in result.output
        assert not out.exists()

    def test_long_input_option(self, line_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "answer.txt"
        result = runner.invoke(
            app, ["solve", "--input", str(line_file), "--part", "2", "--output", str(out)]
        )
        assert result.exit_code == 0, result.output
        assert out.read_text(encoding="utf-8") == "10"

    def test_input_required(self) -> None:
        result = runner.invoke(app, ["solve", "-p", "1"])
        assert result.exit_code != 0

    def test_json_output(self, line_file: Path) -> None:
        result = runner.invoke(app, ["solve", "-i", str(line_file), "-p", "2", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["x_product"] == 10
        assert data["last_merge"] == {"u": 1, "v": 2, "distance": 81}

    def test_invalid_part(self, line_file: Path) -> None:
        result = runner.invoke(app, ["solve", "-i", str(line_file), "-p", "3"])
        assert result.exit_code == 1
        assert "Invalid part specified" in result.output

    def test_malformed_input(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.txt"
        path.write_text("1,2,3\n4,five,6\n", encoding="utf-8")
        result = runner.invoke(app, ["solve", "-i", str(path)])
        assert result.exit_code == 1
        assert "line 2" in result.output

    def test_missing_input(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["solve", "-i", str(tmp_path / "missing.txt")])
        assert result.exit_code != 0


class TestEdges:
    def test_lists_shortest(self, line_file: Path) -> None:
        result = runner.invoke(app, ["edges", "-i", str(line_file), "--limit", "2"])
        assert result.exit_code == 0, result.output
        lines = result.output.strip().splitlines()
        assert len(lines) == 2
        assert "(0, 0, 0) - (1, 0, 0)" in lines[0]
        assert "(10, 0, 0) - (11, 0, 0)" in lines[1]


class TestComponents:
    def test_reports_sizes(self, line_file: Path) -> None:
        result = runner.invoke(app, ["components", "-i", str(line_file), "-k", "2"])
        assert result.exit_code == 0, result.output
        assert "Circuits: 2" in result.output
        assert "Sizes: 2, 2" in result.output
        assert "product: 4" in result.output
