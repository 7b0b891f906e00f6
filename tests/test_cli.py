"""Tests for CLI commands."""

from __future__ import annotations

import json
from datetime import date

import pytest
from typer.testing import CliRunner

from pantryplan.cli import app
from pantryplan.config import get_settings
from pantryplan.config import settings as settings_module
from pantryplan.config.settings import Settings
from pantryplan.db import MaterialQueries, MealPlanQueries, set_db

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated(temp_db, monkeypatch):
    """Point the CLI at a temporary database and default settings."""
    monkeypatch.setattr(settings_module, "_settings", Settings())
    set_db(temp_db)
    yield
    set_db(None)


@pytest.fixture
def seeded_pantry():
    result = runner.invoke(app, ["materials", "seed"])
    assert result.exit_code == 0


class TestMainCommands:
    """Tests for main CLI commands."""

    def test_help(self):
        """Test that --help works."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "pantry" in result.output.lower()

    def test_subcommand_help(self):
        for group in ("materials", "generate", "plan", "config"):
            result = runner.invoke(app, [group, "--help"])
            assert result.exit_code == 0

    def test_custom_requires_material(self):
        """Test that generate custom requires --require."""
        result = runner.invoke(app, ["generate", "custom"])
        assert result.exit_code != 0


class TestMaterialsCommands:
    """Tests for materials commands."""

    def test_seed_and_list(self, seeded_pantry):
        result = runner.invoke(app, ["materials", "list"])
        assert result.exit_code == 0
        assert "Chicken Breast" in result.output

    def test_toggle_unknown(self):
        result = runner.invoke(app, ["materials", "toggle", "nope", "--unavailable"])
        assert result.exit_code == 1

    def test_import_csv(self, tmp_path):
        csv_path = tmp_path / "materials.csv"
        csv_path.write_text("id,name,category\nmat_tofu,Tofu,vegetables\n")
        result = runner.invoke(app, ["materials", "import", str(csv_path)])
        assert result.exit_code == 0
        assert "Imported 1 materials" in result.output

    def test_import_bad_csv(self, tmp_path):
        csv_path = tmp_path / "materials.csv"
        csv_path.write_text("id,name\nmat_tofu,Tofu\n")
        result = runner.invoke(app, ["materials", "import", str(csv_path)])
        assert result.exit_code == 1

    def test_add_edit_remove(self, temp_db):
        result = runner.invoke(
            app,
            ["materials", "add", "mat_tofu", "--name", "Tofu", "--category", "vegetables",
             "--info", "High protein"],
        )
        assert result.exit_code == 0

        duplicate = runner.invoke(
            app, ["materials", "add", "mat_tofu", "--name", "Tofu", "--category", "vegetables"]
        )
        assert duplicate.exit_code == 1

        result = runner.invoke(
            app, ["materials", "edit", "mat_tofu", "--name", "Silken Tofu", "--description", "Soft"]
        )
        assert result.exit_code == 0
        with temp_db.get_connection() as conn:
            stored = MaterialQueries.get_material_by_id(conn, "mat_tofu")
        assert stored.name == "Silken Tofu"
        assert stored.description == "Soft"
        assert stored.nutritional_info == ("High protein",)

        assert runner.invoke(app, ["materials", "remove", "mat_tofu"]).exit_code == 0
        assert runner.invoke(app, ["materials", "remove", "mat_tofu"]).exit_code == 1

    def test_add_unknown_category(self):
        result = runner.invoke(
            app, ["materials", "add", "mat_x", "--name", "X", "--category", "candy"]
        )
        assert result.exit_code == 1

    def test_edit_needs_changes(self, seeded_pantry):
        assert runner.invoke(app, ["materials", "edit", "mat_salmon"]).exit_code == 1
        result = runner.invoke(app, ["materials", "edit", "mat_unicorn", "--name", "Unicorn"])
        assert result.exit_code == 1

    def test_search_and_stats(self, seeded_pantry):
        result = runner.invoke(app, ["materials", "search", "salmon"])
        assert result.exit_code == 0
        assert "Salmon" in result.output

        empty = runner.invoke(app, ["materials", "search", "unicorn"])
        assert "No materials found" in empty.output

        stats = runner.invoke(app, ["materials", "stats"])
        assert stats.exit_code == 0
        assert "Total" in stats.output


class TestGenerateCommands:
    """Tests for generate commands."""

    def test_empty_pantry(self):
        result = runner.invoke(app, ["generate", "meals"])
        assert result.exit_code == 1

    def test_meals_json(self, seeded_pantry):
        result = runner.invoke(
            app,
            ["generate", "meals", "--type", "lunch", "--count", "2", "--seed", "1", "--output", "json"],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert len(data["meals"]) == 2
        assert all(m["meal_type"] == "lunch" for m in data["meals"])

    def test_unknown_meal_type(self, seeded_pantry):
        result = runner.invoke(app, ["generate", "meals", "--type", "brunch"])
        assert result.exit_code == 1

    def test_custom_meal(self, seeded_pantry):
        result = runner.invoke(
            app,
            ["generate", "custom", "--require", "mat_salmon", "--seed", "2", "--output", "json"],
        )
        assert result.exit_code == 0
        meal = json.loads(result.output)["meals"][0]
        assert "mat_salmon" in [m["id"] for m in meal["materials"]]

    def test_custom_unknown_material(self, seeded_pantry):
        result = runner.invoke(app, ["generate", "custom", "--require", "mat_unicorn"])
        assert result.exit_code == 1


    def test_unknown_output_format(self, seeded_pantry):
        result = runner.invoke(app, ["generate", "meals", "--output", "xml"])
        assert result.exit_code == 1

    def test_seed_option_leaves_settings(self, seeded_pantry):
        """--seed applies to one run without changing the loaded settings."""
        result = runner.invoke(app, ["generate", "meals", "--seed", "5", "--output", "json"])
        assert result.exit_code == 0
        assert get_settings().generation.seed is None

class TestPlanCommands:
    """Tests for plan commands."""

    def test_day_saves_plan(self, seeded_pantry, temp_db):
        result = runner.invoke(app, ["plan", "day", "2024-01-01", "--seed", "4"])
        assert result.exit_code == 0
        with temp_db.get_connection() as conn:
            assert MealPlanQueries.get_plan_for_date(conn, date(2024, 1, 1)) is not None

    def test_week_no_save(self, seeded_pantry, temp_db):
        result = runner.invoke(
            app, ["plan", "week", "--start", "2024-01-01", "--no-save", "--output", "json"]
        )
        assert result.exit_code == 0
        assert len(json.loads(result.output)["plans"]) == 7
        with temp_db.get_connection() as conn:
            assert MealPlanQueries.get_statistics(conn)["total_plans"] == 0

    def test_month(self, seeded_pantry, temp_db):
        result = runner.invoke(
            app, ["plan", "month", "--month", "2024-01", "--meal-type", "dinner"]
        )
        assert result.exit_code == 0
        with temp_db.get_connection() as conn:
            plans = MealPlanQueries.get_plans_in_range(conn, date(2024, 1, 1), date(2024, 1, 31))
        assert [p.date.day for p in plans] == [1, 8, 15, 22, 29]

    def test_manage_saved_plan(self, seeded_pantry, temp_db):
        assert runner.invoke(app, ["plan", "day", "2024-01-01"]).exit_code == 0

        assert runner.invoke(app, ["plan", "show", "2024-01-01"]).exit_code == 0
        assert runner.invoke(app, ["plan", "complete", "2024-01-01"]).exit_code == 0
        assert runner.invoke(app, ["plan", "copy", "2024-01-01", "2024-01-02"]).exit_code == 0
        assert runner.invoke(app, ["plan", "replace", "2024-01-02", "--type", "dinner"]).exit_code == 0

        share = runner.invoke(app, ["plan", "share", "2024-01-02", "--no-emoji"])
        assert share.exit_code == 0
        assert "MEAL PLAN" in share.output

        stats = runner.invoke(app, ["plan", "stats"])
        assert stats.exit_code == 0

        with temp_db.get_connection() as conn:
            assert MealPlanQueries.get_plan_for_date(conn, date(2024, 1, 1)).is_completed
            assert not MealPlanQueries.get_plan_for_date(conn, date(2024, 1, 2)).is_completed

    def test_show_missing(self):
        result = runner.invoke(app, ["plan", "show", "2024-01-01"])
        assert result.exit_code == 1

    def test_invalid_date(self, seeded_pantry):
        result = runner.invoke(app, ["plan", "day", "01/02/2024"])
        assert result.exit_code == 1


    def test_delete(self, seeded_pantry, temp_db):
        assert runner.invoke(app, ["plan", "day", "2024-01-01"]).exit_code == 0
        assert runner.invoke(app, ["plan", "delete", "2024-01-01"]).exit_code == 0
        with temp_db.get_connection() as conn:
            assert MealPlanQueries.get_plan_for_date(conn, date(2024, 1, 1)) is None
        assert runner.invoke(app, ["plan", "delete", "2024-01-01"]).exit_code == 1

    def test_export_and_import(self, seeded_pantry, temp_db, tmp_path):
        """Exported plans load back with their meals intact."""
        result = runner.invoke(app, ["plan", "week", "--start", "2024-01-01", "--seed", "3"])
        assert result.exit_code == 0
        with temp_db.get_connection() as conn:
            before = MealPlanQueries.get_plans_in_range(conn, date(2024, 1, 1), date(2024, 1, 7))

        export_path = tmp_path / "plans.json"
        result = runner.invoke(
            app, ["plan", "export", str(export_path), "--start", "2024-01-01", "--end", "2024-01-07"]
        )
        assert result.exit_code == 0
        assert len(json.loads(export_path.read_text())["plans"]) == 7

        for day in range(1, 8):
            runner.invoke(app, ["plan", "delete", f"2024-01-0{day}"])
        assert runner.invoke(app, ["plan", "import", str(export_path)]).exit_code == 0

        with temp_db.get_connection() as conn:
            after = MealPlanQueries.get_plans_in_range(conn, date(2024, 1, 1), date(2024, 1, 7))
        assert [p.date for p in after] == [p.date for p in before]
        assert [[m.name for m in p.all_meals] for p in after] == [
            [m.name for m in p.all_meals] for p in before
        ]

    def test_import_bad_file(self, tmp_path):
        assert runner.invoke(app, ["plan", "import", str(tmp_path / "missing.json")]).exit_code == 1
        bad = tmp_path / "bad.json"
        bad.write_text('{"plans": [{"id": "x"}]}')
        assert runner.invoke(app, ["plan", "import", str(bad)]).exit_code == 1

class TestConfigCommands:
    """Tests for config commands."""

    def test_show(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "max_attempts" in result.output

    def test_init(self, tmp_path):
        target = tmp_path / "config.yaml"
        assert runner.invoke(app, ["config", "init", "--path", str(target)]).exit_code == 0
        assert target.exists()
        assert runner.invoke(app, ["config", "init", "--path", str(target)]).exit_code == 1
