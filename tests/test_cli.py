"""Tests for the CLI commands."""

import json
from pathlib import Path

from typer.testing import CliRunner

from stagewise.cli import app

runner = CliRunner()


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "stagewise" in result.output


class TestInit:
    def test_creates_config(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 0
        assert (tmp_path / ".stagewise.toml").exists()

    def test_refuses_overwrite(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".stagewise.toml").write_text("existing")
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 1


class TestShow:
    def test_terminal(self, sample_snapshot: Path, monkeypatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["show", str(sample_snapshot)])
        assert result.exit_code == 0
        assert "src/app.py" in result.output

    def test_json(self, sample_snapshot: Path, monkeypatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["show", str(sample_snapshot), "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["total_files"] == 7
        assert data["include_all"] is None

    def test_include_all(self, sample_snapshot: Path, monkeypatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(
            app, ["show", str(sample_snapshot), "--format", "json", "--exclude-all"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["include_all"] is False
        assert data["included_files"] == 0

    def test_format_from_config(self, sample_snapshot: Path, monkeypatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".stagewise.toml").write_text('[output]\nformat = "json"\n')
        result = runner.invoke(app, ["show", str(sample_snapshot)])
        assert result.exit_code == 0
        assert json.loads(result.output)["version"] == "1.0"

    def test_output_file(self, sample_snapshot: Path, monkeypatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)
        report = tmp_path / "report.json"
        result = runner.invoke(app, ["show", str(sample_snapshot), "--output", str(report)])
        assert result.exit_code == 0
        assert json.loads(report.read_text())["total_files"] == 7

    def test_strict_duplicates_exit_2(self, duplicate_snapshot: Path, monkeypatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)
        assert runner.invoke(app, ["show", str(duplicate_snapshot)]).exit_code == 0
        result = runner.invoke(app, ["show", str(duplicate_snapshot), "--strict"])
        assert result.exit_code == 2

    def test_unwritable_output_exit_2(self, sample_snapshot: Path, monkeypatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)
        report = tmp_path / "missing_dir" / "report.json"
        result = runner.invoke(app, ["show", str(sample_snapshot), "--output", str(report)])
        assert result.exit_code == 2
        assert "Output error" in result.output

    def test_bad_format_exit_2(self, sample_snapshot: Path):
        result = runner.invoke(app, ["show", str(sample_snapshot), "--format", "sarif"])
        assert result.exit_code == 2

    def test_missing_snapshot_exit_2(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["show", str(tmp_path / "absent.yaml")])
        assert result.exit_code == 2


class TestFind:
    def test_found(self, sample_snapshot: Path, monkeypatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(
            app, ["find", str(sample_snapshot), "Renamed+new_name.py+old_name.py"]
        )
        assert result.exit_code == 0
        assert result.output.startswith("2\tnew_name.py\tAll")

    def test_not_found(self, sample_snapshot: Path, monkeypatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["find", str(sample_snapshot), "New+nowhere"])
        assert result.exit_code == 1
