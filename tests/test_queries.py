"""Tests for SQLite persistence of materials, meals and meal plans."""

from __future__ import annotations

import sqlite3
from dataclasses import replace
from datetime import date

import pytest

from pantryplan.db.queries import MaterialQueries, MealPlanQueries, MealQueries
from pantryplan.generator.models import MealPlan, MealType
from pantryplan.generator.synthesizer import synthesize_meal
from pantryplan.materials.models import MaterialCategory


class TestMaterialQueries:
    """Tests for MaterialQueries."""

    def test_upsert_and_list(self, temp_db, pantry):
        with temp_db.get_connection() as conn:
            assert MaterialQueries.upsert_materials(conn, pantry) == len(pantry)
            stored = MaterialQueries.get_all_materials(conn)
        assert {m.id for m in stored} == {m.id for m in pantry}

    def test_upsert_replaces_by_id(self, temp_db, rice):
        with temp_db.get_connection() as conn:
            MaterialQueries.upsert_material(conn, rice)
            MaterialQueries.upsert_material(conn, rice.with_availability(False))
            stored = MaterialQueries.get_all_materials(conn)
        assert len(stored) == 1
        assert stored[0].is_available is False

    def test_available_only(self, temp_db, rice, salt):
        with temp_db.get_connection() as conn:
            MaterialQueries.upsert_materials(conn, [rice, salt])
            assert MaterialQueries.set_available(conn, salt.id, False)
            available = MaterialQueries.get_all_materials(conn, available_only=True)
        assert available == [rice]

    def test_set_available_unknown(self, temp_db):
        with temp_db.get_connection() as conn:
            assert MaterialQueries.set_available(conn, "nope", True) is False

    def test_get_by_ids_keeps_order(self, temp_db, pantry, salt, chicken):
        with temp_db.get_connection() as conn:
            MaterialQueries.upsert_materials(conn, pantry)
            found = MaterialQueries.get_materials_by_ids(conn, [salt.id, "missing", chicken.id])
        assert found == [salt, chicken]

    def test_get_material_by_id(self, temp_db, rice):
        with temp_db.get_connection() as conn:
            MaterialQueries.add_material(conn, rice)
            assert MaterialQueries.get_material_by_id(conn, rice.id).name == "Rice"
            assert MaterialQueries.get_material_by_id(conn, "missing") is None

    def test_add_duplicate_id_fails(self, temp_db, rice):
        with temp_db.get_connection() as conn:
            MaterialQueries.add_material(conn, rice)
            with pytest.raises(sqlite3.IntegrityError):
                MaterialQueries.add_material(conn, rice)

    def test_update_material(self, temp_db, rice):
        changed = replace(rice, name="Brown Rice", description="Whole grain")
        with temp_db.get_connection() as conn:
            assert MaterialQueries.update_material(conn, changed) is False
            MaterialQueries.add_material(conn, rice)
            assert MaterialQueries.update_material(conn, changed) is True
            stored = MaterialQueries.get_material_by_id(conn, rice.id)
        assert stored.name == "Brown Rice"
        assert stored.description == "Whole grain"
        assert stored.category == MaterialCategory.GRAINS

    def test_delete_material(self, temp_db, rice, salt):
        with temp_db.get_connection() as conn:
            MaterialQueries.upsert_materials(conn, [rice, salt])
            assert MaterialQueries.delete_material(conn, rice.id) is True
            assert MaterialQueries.delete_material(conn, rice.id) is False
            assert MaterialQueries.get_all_materials(conn) == [salt]

    def test_search_name_and_description(self, temp_db, pantry):
        tagged = replace(pantry[1], description="Rich in omega-3")
        with temp_db.get_connection() as conn:
            MaterialQueries.upsert_materials(conn, [*pantry, tagged])
            assert [m.name for m in MaterialQueries.search_materials(conn, "CHICK")] == ["Chicken"]
            assert [m.name for m in MaterialQueries.search_materials(conn, "omega")] == ["Salmon"]
            assert MaterialQueries.search_materials(conn, "tofu") == []

    def test_count_by_category(self, temp_db, broccoli, carrots, rice):
        with temp_db.get_connection() as conn:
            MaterialQueries.upsert_materials(conn, [broccoli, carrots, rice])
            counts = MaterialQueries.count_by_category(conn)
        assert counts[MaterialCategory.VEGETABLES] == 2
        assert counts[MaterialCategory.GRAINS] == 1
        assert counts[MaterialCategory.MEAT] == 0
        assert set(counts) == set(MaterialCategory)


class TestMealPlanQueries:
    """Tests for MealPlanQueries."""

    def make_plan(self, day, *materials):
        meal = synthesize_meal(list(materials), MealType.DINNER)
        return MealPlan.create_with_meals(day, {MealType.DINNER: meal})

    def test_save_and_load(self, temp_db, chicken, broccoli, rice):
        plan = self.make_plan(date(2024, 1, 1), chicken, broccoli, rice)
        with temp_db.get_connection() as conn:
            MealPlanQueries.save_plan(conn, plan)
        with temp_db.get_connection() as conn:
            loaded = MealPlanQueries.get_plan_for_date(conn, date(2024, 1, 1))

        assert loaded is not None
        assert loaded.id == plan.id
        dinner = loaded.meals[MealType.DINNER]
        assert dinner.name == plan.meals[MealType.DINNER].name
        assert dinner.materials == (chicken, broccoli, rice)
        assert dinner.instructions == plan.meals[MealType.DINNER].instructions
        assert loaded.meals[MealType.LUNCH] is None

    def test_last_write_wins_per_date(self, temp_db, chicken, salmon, broccoli, rice):
        first = self.make_plan(date(2024, 1, 1), chicken, broccoli, rice)
        second = self.make_plan(date(2024, 1, 1), salmon, broccoli, rice)
        with temp_db.get_connection() as conn:
            MealPlanQueries.save_plans(conn, [first, second])
            loaded = MealPlanQueries.get_plan_for_date(conn, date(2024, 1, 1))
            in_range = MealPlanQueries.get_plans_in_range(conn, date(2024, 1, 1), date(2024, 1, 1))

        assert loaded.id == second.id
        assert len(in_range) == 1

    def test_range_is_inclusive_and_ordered(self, temp_db, chicken, broccoli, rice):
        days = [date(2024, 1, 3), date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 9)]
        with temp_db.get_connection() as conn:
            MealPlanQueries.save_plans(
                conn, [self.make_plan(d, chicken, broccoli, rice) for d in days]
            )
            plans = MealPlanQueries.get_plans_in_range(conn, date(2024, 1, 1), date(2024, 1, 3))
        assert [p.date for p in plans] == [date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3)]

    def test_mark_completed_and_delete(self, temp_db, chicken, broccoli, rice):
        day = date(2024, 1, 1)
        with temp_db.get_connection() as conn:
            MealPlanQueries.save_plan(conn, self.make_plan(day, chicken, broccoli, rice))
            assert MealPlanQueries.mark_completed(conn, day)
            assert MealPlanQueries.get_plan_for_date(conn, day).is_completed
            assert MealPlanQueries.delete_plan(conn, day)
            assert MealPlanQueries.get_plan_for_date(conn, day) is None
            assert MealPlanQueries.mark_completed(conn, day) is False

    def test_replace_meal_creates_plan(self, temp_db, salt):
        snack = synthesize_meal([salt], MealType.SNACK)
        with temp_db.get_connection() as conn:
            plan = MealPlanQueries.replace_meal(conn, date(2024, 2, 1), MealType.SNACK, snack)
            loaded = MealPlanQueries.get_plan_for_date(conn, date(2024, 2, 1))
        assert plan.meals[MealType.SNACK] is snack
        assert loaded.meals[MealType.SNACK].id == snack.id

    def test_copy_plan(self, temp_db, chicken, broccoli, rice):
        source = self.make_plan(date(2024, 1, 1), chicken, broccoli, rice)
        with temp_db.get_connection() as conn:
            MealPlanQueries.save_plan(conn, source)
            MealPlanQueries.mark_completed(conn, date(2024, 1, 1))
            copied = MealPlanQueries.copy_plan(conn, date(2024, 1, 1), date(2024, 1, 8))
            missing = MealPlanQueries.copy_plan(conn, date(2024, 3, 1), date(2024, 3, 2))
            loaded = MealPlanQueries.get_plan_for_date(conn, date(2024, 1, 8))

        assert missing is None
        assert copied.id != source.id
        assert loaded.is_completed is False
        assert loaded.meals[MealType.DINNER].id == source.meals[MealType.DINNER].id

    def test_statistics(self, temp_db, chicken, broccoli, rice):
        with temp_db.get_connection() as conn:
            MealPlanQueries.save_plan(conn, self.make_plan(date(2024, 1, 1), chicken, broccoli, rice))
            MealPlanQueries.save_plan(conn, self.make_plan(date(2024, 1, 2), chicken, broccoli, rice))
            MealPlanQueries.mark_completed(conn, date(2024, 1, 2))
            stats = MealPlanQueries.get_statistics(conn)

        assert stats["total_plans"] == 2
        assert stats["completed_plans"] == 1
        assert stats["total_meals"] == 2
        assert stats["meals_by_type"]["dinner"] == 2
        assert stats["meals_by_type"]["breakfast"] == 0

    def test_meals_by_type(self, temp_db, salt):
        with temp_db.get_connection() as conn:
            MealQueries.upsert_meal(conn, synthesize_meal([salt], MealType.SNACK))
            assert len(MealQueries.get_meals_by_type(conn, MealType.SNACK)) == 1
            assert MealQueries.get_meals_by_type(conn, MealType.LUNCH) == []
