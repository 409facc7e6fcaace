"""Tests for the typer CLI."""

import json

import pytest
from typer.testing import CliRunner

from job_board.cli import app

runner = CliRunner()


@pytest.fixture
def snapshot_file(tmp_path, sample_snapshot):
    path = tmp_path / "snapshot.json"
    path.write_text(sample_snapshot.model_dump_json(), encoding="utf-8")
    return path


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    config = tmp_path / "config.yaml"
    config.write_text(f"skills:\n  db_path: {tmp_path / 'skills.db'}\n")
    monkeypatch.setenv("JOB_BOARD_CONFIG", str(config))
    return config


class TestDashboardCommand:
    def test_dashboard(self, snapshot_file, config_env):
        result = runner.invoke(app, ["dashboard", str(snapshot_file)])
        assert result.exit_code == 0, result.output
        assert "Success rate: 40%" in result.output
        assert "UI Designer" in result.output
        assert "Browse Jobs" in result.output

    def test_missing_snapshot(self, tmp_path, config_env):
        result = runner.invoke(app, ["dashboard", str(tmp_path / "missing.json")])
        assert result.exit_code == 1

    def test_invalid_snapshot(self, tmp_path, config_env):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"jobs": []}), encoding="utf-8")
        result = runner.invoke(app, ["dashboard", str(path)])
        assert result.exit_code == 1


class TestCategoryCommands:
    def test_category_stats(self, snapshot_file, config_env):
        result = runner.invoke(app, ["category-stats", str(snapshot_file), "cat-eng"])
        assert result.exit_code == 0, result.output
        assert "Jobs: 4" in result.output
        assert "INTERNSHIP" in result.output

    def test_unknown_category(self, snapshot_file, config_env):
        result = runner.invoke(app, ["category-stats", str(snapshot_file), "nope"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_export(self, snapshot_file, config_env, tmp_path):
        out = tmp_path / "export" / "categories.csv"
        result = runner.invoke(app, ["categories", str(snapshot_file), "--output", str(out)])
        assert result.exit_code == 0, result.output
        assert out.read_text(encoding="utf-8").startswith("ID,Name,Status")


class TestSkillsCommands:
    def test_add_list_remove(self, config_env):
        result = runner.invoke(
            app, ["skills", "add", "stu-1", "Python", "--level", "advanced", "--years", "2"]
        )
        assert result.exit_code == 0, result.output
        skill_id = result.output.strip().rsplit(": ", 1)[-1]

        result = runner.invoke(app, ["skills", "list", "stu-1"])
        assert "Python" in result.output

        result = runner.invoke(app, ["skills", "remove", "stu-1", skill_id])
        assert result.exit_code == 0, result.output

        result = runner.invoke(app, ["skills", "list", "stu-1"])
        assert "No skills yet" in result.output

    def test_add_rejects_years(self, config_env):
        result = runner.invoke(app, ["skills", "add", "stu-1", "Python", "--years", "51"])
        assert result.exit_code == 1
        assert "years_of_experience" in result.output

    def test_remove_missing(self, config_env):
        result = runner.invoke(app, ["skills", "remove", "stu-1", "nope"])
        assert result.exit_code == 1
