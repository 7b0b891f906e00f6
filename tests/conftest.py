"""Pytest fixtures for pantryplan tests."""

from __future__ import annotations

import random
import tempfile
from pathlib import Path

import pytest

from pantryplan.db.connection import DatabaseConnection
from pantryplan.generator.combinations import CombinationGenerator
from pantryplan.generator.planner import MealPlanGenerator
from pantryplan.materials.models import Material, MaterialCategory


@pytest.fixture
def temp_db():
    """Create a temporary database with schema."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    db = DatabaseConnection(db_path)
    db.initialize_schema()

    yield db

    # Cleanup
    db_path.unlink(missing_ok=True)


@pytest.fixture
def chicken():
    return Material("m1", "Chicken", MaterialCategory.POULTRY)


@pytest.fixture
def salmon():
    return Material("m2", "Salmon", MaterialCategory.SEAFOOD)


@pytest.fixture
def broccoli():
    return Material("m3", "Broccoli", MaterialCategory.VEGETABLES)


@pytest.fixture
def carrots():
    return Material("m4", "Carrots", MaterialCategory.VEGETABLES)


@pytest.fixture
def rice():
    return Material("m5", "Rice", MaterialCategory.GRAINS)


@pytest.fixture
def salt():
    return Material("m6", "Salt", MaterialCategory.SPICES)


@pytest.fixture
def milk():
    return Material("m7", "Milk", MaterialCategory.DAIRY)


@pytest.fixture
def beef():
    return Material("m8", "Beef", MaterialCategory.MEAT)


@pytest.fixture
def wheat_bread():
    return Material("m9", "Whole Wheat Bread", MaterialCategory.GRAINS)


@pytest.fixture
def pantry(chicken, salmon, broccoli, carrots, rice, salt, milk, beef):
    """A small pantry covering every category except wheat grains."""
    return [chicken, salmon, broccoli, carrots, rice, salt, milk, beef]


@pytest.fixture
def seeded_generator():
    """Meal plan generator with a fixed random seed."""
    return MealPlanGenerator(
        combination_generator=CombinationGenerator(rng=random.Random(42))
    )
