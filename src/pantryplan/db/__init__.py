"""SQLite persistence for materials, meals and meal plans."""

from pantryplan.db.connection import DatabaseConnection, get_db, set_db
from pantryplan.db.queries import MaterialQueries, MealPlanQueries, MealQueries

__all__ = [
    "DatabaseConnection",
    "MaterialQueries",
    "MealPlanQueries",
    "MealQueries",
    "get_db",
    "set_db",
]
