"""Common database query functions.

Meals and materials are written insert-or-replace by id. Saving a meal
plan first removes whatever plan holds the same date, so the last plan
saved for a date wins.
"""

from __future__ import annotations

import json
import sqlite3
import uuid
from datetime import date, datetime
from typing import Iterable, Optional

from pantryplan.generator.models import Meal, MealPlan, MealType, normalize_date
from pantryplan.materials.models import Material, MaterialCategory


class MaterialQueries:
    """Query functions for materials table."""

    @staticmethod
    def upsert_material(conn: sqlite3.Connection, material: Material) -> None:
        """Insert or replace a material by id.

        Args:
            conn: Database connection
            material: Material to store
        """
        query = """
            INSERT INTO materials
                (id, name, category, is_available, nutritional_info, description, image_url)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                name = excluded.name,
                category = excluded.category,
                is_available = excluded.is_available,
                nutritional_info = excluded.nutritional_info,
                description = excluded.description,
                image_url = excluded.image_url
        """
        conn.execute(query, _material_params(material))

    @staticmethod
    def upsert_materials(conn: sqlite3.Connection, materials: Iterable[Material]) -> int:
        """Insert or replace several materials.

        Returns:
            Number of materials written
        """
        count = 0
        for material in materials:
            MaterialQueries.upsert_material(conn, material)
            count += 1
        return count

    @staticmethod
    def get_all_materials(
        conn: sqlite3.Connection, available_only: bool = False
    ) -> list[Material]:
        """Get all materials ordered by category and name.

        Args:
            conn: Database connection
            available_only: Only return materials marked available

        Returns:
            List of Material objects
        """
        query = "SELECT * FROM materials"
        if available_only:
            query += " WHERE is_available = TRUE"
        query += " ORDER BY category, name"
        return [_row_to_material(row) for row in conn.execute(query).fetchall()]

    @staticmethod
    def get_materials_by_ids(
        conn: sqlite3.Connection, material_ids: list[str]
    ) -> list[Material]:
        """Get materials by id, in the order the ids were given.

        Unknown ids are skipped.
        """
        if not material_ids:
            return []
        placeholders = ",".join("?" * len(material_ids))
        rows = conn.execute(
            f"SELECT * FROM materials WHERE id IN ({placeholders})", material_ids
        ).fetchall()
        by_id = {row["id"]: _row_to_material(row) for row in rows}
        return [by_id[mid] for mid in material_ids if mid in by_id]

    @staticmethod
    def get_material_by_id(
        conn: sqlite3.Connection, material_id: str
    ) -> Optional[Material]:
        row = conn.execute(
            "SELECT * FROM materials WHERE id = ?", (material_id,)
        ).fetchone()
        return _row_to_material(row) if row else None

    @staticmethod
    def add_material(conn: sqlite3.Connection, material: Material) -> None:
        """Insert a new material.

        Raises:
            sqlite3.IntegrityError: If a material with the same id exists
        """
        query = """
            INSERT INTO materials
                (id, name, category, is_available, nutritional_info, description, image_url)
            VALUES (?, ?, ?, ?, ?, ?, ?)
        """
        conn.execute(query, _material_params(material))

    @staticmethod
    def update_material(conn: sqlite3.Connection, material: Material) -> bool:
        """Overwrite an existing material's fields.

        Returns:
            True if the material exists
        """
        query = """
            UPDATE materials
            SET name = ?, category = ?, is_available = ?, nutritional_info = ?,
                description = ?, image_url = ?
            WHERE id = ?
        """
        params = _material_params(material)
        cursor = conn.execute(query, (*params[1:], material.id))
        return cursor.rowcount > 0

    @staticmethod
    def delete_material(conn: sqlite3.Connection, material_id: str) -> bool:
        """Delete a material.

        Meals already generated keep their own copy of the material.

        Returns:
            True if a material was deleted
        """
        cursor = conn.execute("DELETE FROM materials WHERE id = ?", (material_id,))
        return cursor.rowcount > 0

    @staticmethod
    def search_materials(conn: sqlite3.Connection, query: str) -> list[Material]:
        """Find materials whose name or description contains ``query``.

        Matching is case-insensitive. Results are ordered by category and name.
        """
        pattern = f"%{query}%"
        rows = conn.execute(
            """
            SELECT * FROM materials
            WHERE name LIKE ? OR description LIKE ?
            ORDER BY category, name
            """,
            (pattern, pattern),
        ).fetchall()
        return [_row_to_material(row) for row in rows]

    @staticmethod
    def count_by_category(conn: sqlite3.Connection) -> dict[MaterialCategory, int]:
        """Number of stored materials per category (every category present)."""
        counts = {c: 0 for c in MaterialCategory}
        rows = conn.execute(
            "SELECT category, COUNT(*) FROM materials GROUP BY category"
        ).fetchall()
        for row in rows:
            counts[MaterialCategory(row[0])] = row[1]
        return counts

    @staticmethod
    def set_available(
        conn: sqlite3.Connection, material_id: str, is_available: bool
    ) -> bool:
        """Set a material's availability.

        Returns:
            True if the material exists
        """
        cursor = conn.execute(
            "UPDATE materials SET is_available = ? WHERE id = ?",
            (is_available, material_id),
        )
        return cursor.rowcount > 0


class MealQueries:
    """Query functions for meals table."""

    @staticmethod
    def upsert_meal(conn: sqlite3.Connection, meal: Meal) -> None:
        """Insert or replace a meal by id."""
        query = """
            INSERT INTO meals
                (id, name, description, meal_type, preparation_time, instructions,
                 calories, tags, materials_json, image_url, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                name = excluded.name,
                description = excluded.description,
                meal_type = excluded.meal_type,
                preparation_time = excluded.preparation_time,
                instructions = excluded.instructions,
                calories = excluded.calories,
                tags = excluded.tags,
                materials_json = excluded.materials_json,
                image_url = excluded.image_url,
                created_at = excluded.created_at
        """
        conn.execute(
            query,
            (
                meal.id,
                meal.name,
                meal.description,
                meal.meal_type.value,
                meal.preparation_time,
                json.dumps(list(meal.instructions)),
                meal.calories,
                json.dumps(list(meal.tags)),
                json.dumps([m.to_dict() for m in meal.materials]),
                meal.image_url,
                meal.created_at.isoformat(),
            ),
        )

    @staticmethod
    def get_meal_by_id(conn: sqlite3.Connection, meal_id: str) -> Optional[Meal]:
        row = conn.execute("SELECT * FROM meals WHERE id = ?", (meal_id,)).fetchone()
        return _row_to_meal(row) if row else None

    @staticmethod
    def get_meals_by_type(
        conn: sqlite3.Connection, meal_type: MealType, limit: int = 50
    ) -> list[Meal]:
        """Get the most recent meals of one type."""
        query = """
            SELECT * FROM meals
            WHERE meal_type = ?
            ORDER BY created_at DESC
            LIMIT ?
        """
        rows = conn.execute(query, (meal_type.value, limit)).fetchall()
        return [_row_to_meal(row) for row in rows]


class MealPlanQueries:
    """Query functions for meal_plans table."""

    @staticmethod
    def save_plan(conn: sqlite3.Connection, plan: MealPlan) -> None:
        """Store a plan and its meals, replacing any plan for the same date.

        Args:
            conn: Database connection
            plan: Plan to store
        """
        for meal in plan.all_meals:
            MealQueries.upsert_meal(conn, meal)

        # Last write wins: drop whatever holds this date or this id
        conn.execute(
            "DELETE FROM meal_plans WHERE plan_date = ? OR id = ?",
            (plan.date.isoformat(), plan.id),
        )

        query = """
            INSERT INTO meal_plans
                (id, plan_date, breakfast_meal_id, lunch_meal_id, dinner_meal_id,
                 snack_meal_id, notes, is_completed, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """
        meal_ids = [
            plan.meals[m].id if plan.meals[m] is not None else None for m in MealType
        ]
        conn.execute(
            query,
            (
                plan.id,
                plan.date.isoformat(),
                *meal_ids,
                plan.notes,
                plan.is_completed,
                plan.created_at.isoformat(),
                plan.updated_at.isoformat(),
            ),
        )

    @staticmethod
    def save_plans(conn: sqlite3.Connection, plans: Iterable[MealPlan]) -> int:
        """Store several plans.

        Returns:
            Number of plans written
        """
        count = 0
        for plan in plans:
            MealPlanQueries.save_plan(conn, plan)
            count += 1
        return count

    @staticmethod
    def get_plan_for_date(
        conn: sqlite3.Connection, plan_date: date
    ) -> Optional[MealPlan]:
        """Get the plan for a date, or None."""
        row = conn.execute(
            "SELECT * FROM meal_plans WHERE plan_date = ?",
            (normalize_date(plan_date).isoformat(),),
        ).fetchone()
        return _row_to_plan(conn, row) if row else None

    @staticmethod
    def get_plans_in_range(
        conn: sqlite3.Connection, start: date, end: date
    ) -> list[MealPlan]:
        """Get plans between two dates (inclusive), ordered by date."""
        query = """
            SELECT * FROM meal_plans
            WHERE plan_date BETWEEN ? AND ?
            ORDER BY plan_date
        """
        rows = conn.execute(
            query,
            (normalize_date(start).isoformat(), normalize_date(end).isoformat()),
        ).fetchall()
        return [_row_to_plan(conn, row) for row in rows]

    @staticmethod
    def delete_plan(conn: sqlite3.Connection, plan_date: date) -> bool:
        """Delete the plan for a date.

        Returns:
            True if a plan was deleted
        """
        cursor = conn.execute(
            "DELETE FROM meal_plans WHERE plan_date = ?",
            (normalize_date(plan_date).isoformat(),),
        )
        return cursor.rowcount > 0

    @staticmethod
    def mark_completed(
        conn: sqlite3.Connection, plan_date: date, is_completed: bool = True
    ) -> bool:
        """Set the completion flag for a date's plan.

        Returns:
            True if a plan exists for the date
        """
        cursor = conn.execute(
            "UPDATE meal_plans SET is_completed = ?, updated_at = ? WHERE plan_date = ?",
            (
                is_completed,
                datetime.now().isoformat(),
                normalize_date(plan_date).isoformat(),
            ),
        )
        return cursor.rowcount > 0

    @staticmethod
    def replace_meal(
        conn: sqlite3.Connection,
        plan_date: date,
        meal_type: MealType,
        meal: Optional[Meal],
    ) -> MealPlan:
        """Replace one slot of a date's plan, creating the plan if needed.

        Args:
            conn: Database connection
            plan_date: Date of the plan
            meal_type: Slot to replace
            meal: New meal, or None to clear the slot

        Returns:
            The updated plan
        """
        plan = MealPlanQueries.get_plan_for_date(conn, plan_date)
        if plan is None:
            plan = MealPlan.create_empty(plan_date)
        plan = plan.with_meal(meal_type, meal)
        MealPlanQueries.save_plan(conn, plan)
        return plan

    @staticmethod
    def copy_plan(
        conn: sqlite3.Connection, source_date: date, target_date: date
    ) -> Optional[MealPlan]:
        """Copy a date's meals onto another date.

        The copy gets a new id and starts out not completed. Any plan
        already on the target date is replaced.

        Returns:
            The new plan, or None if the source date has no plan
        """
        source = MealPlanQueries.get_plan_for_date(conn, source_date)
        if source is None:
            return None

        now = datetime.now()
        copied = MealPlan(
            id=str(uuid.uuid4()),
            date=normalize_date(target_date),
            meals=dict(source.meals),
            created_at=now,
            updated_at=now,
            notes=source.notes,
        )
        MealPlanQueries.save_plan(conn, copied)
        return copied

    @staticmethod
    def get_statistics(conn: sqlite3.Connection) -> dict[str, object]:
        """Summary counts over all stored plans and meals."""
        plan_row = conn.execute(
            """
            SELECT COUNT(*) AS total,
                   COALESCE(SUM(CASE WHEN is_completed THEN 1 ELSE 0 END), 0) AS completed
            FROM meal_plans
            """
        ).fetchone()
        type_rows = conn.execute(
            "SELECT meal_type, COUNT(*) FROM meals GROUP BY meal_type"
        ).fetchall()
        meals_by_type = {m.value: 0 for m in MealType}
        for row in type_rows:
            meals_by_type[row[0]] = row[1]

        return {
            "total_plans": plan_row["total"],
            "completed_plans": plan_row["completed"],
            "total_meals": sum(meals_by_type.values()),
            "meals_by_type": meals_by_type,
        }


def _material_params(material: Material) -> tuple:
    return (
        material.id,
        material.name,
        material.category.value,
        material.is_available,
        json.dumps(list(material.nutritional_info)),
        material.description,
        material.image_url,
    )


def _row_to_material(row: sqlite3.Row) -> Material:
    return Material(
        id=row["id"],
        name=row["name"],
        category=MaterialCategory(row["category"]),
        is_available=bool(row["is_available"]),
        nutritional_info=tuple(json.loads(row["nutritional_info"] or "[]")),
        description=row["description"],
        image_url=row["image_url"],
    )


def _row_to_meal(row: sqlite3.Row) -> Meal:
    return Meal(
        id=row["id"],
        name=row["name"],
        description=row["description"] or "",
        materials=tuple(Material.from_dict(m) for m in json.loads(row["materials_json"])),
        meal_type=MealType(row["meal_type"]),
        preparation_time=row["preparation_time"] or 0,
        instructions=tuple(json.loads(row["instructions"] or "[]")),
        created_at=datetime.fromisoformat(row["created_at"]),
        calories=row["calories"],
        tags=tuple(json.loads(row["tags"] or "[]")),
        image_url=row["image_url"],
    )


def _row_to_plan(conn: sqlite3.Connection, row: sqlite3.Row) -> MealPlan:
    meals: dict[MealType, Optional[Meal]] = {}
    for meal_type in MealType:
        meal_id = row[f"{meal_type.value}_meal_id"]
        meals[meal_type] = MealQueries.get_meal_by_id(conn, meal_id) if meal_id else None

    return MealPlan(
        id=row["id"],
        date=date.fromisoformat(row["plan_date"]),
        meals=meals,
        created_at=datetime.fromisoformat(row["created_at"]),
        updated_at=datetime.fromisoformat(row["updated_at"]),
        notes=row["notes"],
        is_completed=bool(row["is_completed"]),
    )
