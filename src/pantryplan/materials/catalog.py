"""Material catalog: built-in pantry staples and CSV import.

The seed catalog gives a fresh install something to generate from. Users
can replace or extend it by importing a CSV file:

    id,name,category,is_available,nutritional_info,description,image_url
    mat_tofu,Firm Tofu,vegetables,true,High protein;Low fat,Pressed tofu,
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd

from pantryplan.materials.models import Material, MaterialCategory

# =============================================================================
# Seed catalog
# =============================================================================

DEFAULT_MATERIALS = [
    # Proteins
    Material(
        "mat_chicken_breast", "Chicken Breast", MaterialCategory.POULTRY,
        nutritional_info=("High protein", "Low carb", "165 calories per 100g"),
        description="Boneless, skinless chicken breast",
    ),
    Material(
        "mat_salmon", "Salmon Fillet", MaterialCategory.SEAFOOD,
        nutritional_info=("Rich in omega-3", "High protein", "208 calories per 100g"),
        description="Fresh Atlantic salmon fillet",
    ),
    Material(
        "mat_ground_beef", "Ground Beef", MaterialCategory.MEAT,
        nutritional_info=("High protein", "Rich in iron", "250 calories per 100g"),
        description="Lean ground beef (85/15)",
    ),
    # Vegetables
    Material(
        "mat_broccoli", "Broccoli", MaterialCategory.VEGETABLES,
        nutritional_info=("High in vitamin C", "Rich in fiber", "34 calories per 100g"),
        description="Fresh broccoli crowns",
    ),
    Material(
        "mat_carrots", "Carrots", MaterialCategory.VEGETABLES,
        nutritional_info=("Rich in beta-carotene", "41 calories per 100g"),
        description="Baby carrots",
    ),
    Material(
        "mat_spinach", "Spinach", MaterialCategory.VEGETABLES,
        nutritional_info=("Rich in iron", "23 calories per 100g"),
        description="Fresh baby spinach",
    ),
    Material(
        "mat_bell_peppers", "Bell Peppers", MaterialCategory.VEGETABLES,
        nutritional_info=("High vitamin C", "31 calories per 100g"),
        description="Mixed color bell peppers",
    ),
    Material(
        "mat_onions", "Yellow Onions", MaterialCategory.VEGETABLES,
        nutritional_info=("Good flavor base", "40 calories per 100g"),
        description="Medium yellow onions",
    ),
    Material(
        "mat_tomatoes", "Tomatoes", MaterialCategory.VEGETABLES,
        nutritional_info=("Rich in lycopene", "18 calories per 100g"),
        description="Roma tomatoes",
    ),
    Material(
        "mat_garlic", "Garlic", MaterialCategory.VEGETABLES,
        nutritional_info=("Immune support", "149 calories per 100g"),
        description="Fresh garlic bulbs",
    ),
    # Grains and starches
    Material(
        "mat_rice", "White Rice", MaterialCategory.GRAINS,
        nutritional_info=("Good carb source", "130 calories per 100g"),
        description="Long grain white rice",
    ),
    Material(
        "mat_pasta", "Spaghetti Pasta", MaterialCategory.GRAINS,
        nutritional_info=("Complex carbs", "131 calories per 100g"),
        description="Whole wheat spaghetti",
    ),
    Material(
        "mat_quinoa", "Quinoa", MaterialCategory.GRAINS,
        nutritional_info=("Complete protein", "120 calories per 100g"),
        description="Organic quinoa",
    ),
    Material(
        "mat_bread", "Whole Wheat Bread", MaterialCategory.GRAINS,
        nutritional_info=("Good fiber", "B vitamins", "247 calories per 100g"),
        description="Whole grain bread",
    ),
    # Dairy (eggs are stocked with dairy)
    Material(
        "mat_eggs", "Eggs", MaterialCategory.DAIRY,
        nutritional_info=("Complete protein", "155 calories per 100g"),
        description="Large eggs",
    ),
    Material(
        "mat_milk", "Milk", MaterialCategory.DAIRY,
        nutritional_info=("Rich in calcium", "50 calories per 100ml"),
        description="2% milk",
    ),
    Material(
        "mat_cheese", "Cheddar Cheese", MaterialCategory.DAIRY,
        nutritional_info=("High calcium", "403 calories per 100g"),
        description="Sharp cheddar cheese",
    ),
    Material(
        "mat_greek_yogurt", "Greek Yogurt", MaterialCategory.DAIRY,
        nutritional_info=("High protein", "Probiotics", "59 calories per 100g"),
        description="Plain Greek yogurt",
    ),
    # Spices and seasonings
    Material(
        "mat_salt", "Salt", MaterialCategory.SPICES,
        nutritional_info=("Flavor enhancer",),
        description="Sea salt",
    ),
    Material(
        "mat_pepper", "Black Pepper", MaterialCategory.SPICES,
        nutritional_info=("Antioxidants", "Flavor enhancer"),
        description="Ground black pepper",
    ),
    Material(
        "mat_olive_oil", "Olive Oil", MaterialCategory.SPICES,
        nutritional_info=("Healthy fats", "884 calories per 100ml"),
        description="Extra virgin olive oil",
    ),
]


def available_only(materials: Iterable[Material]) -> list[Material]:
    """Return only the materials currently marked as available."""
    return [m for m in materials if m.is_available]


# =============================================================================
# CSV import
# =============================================================================

REQUIRED_COLUMNS = ["id", "name", "category"]
OPTIONAL_COLUMNS = ["is_available", "nutritional_info", "description", "image_url"]

_TRUE_STRINGS = {"true", "yes", "1", "y"}


def load_materials_csv(csv_path: Path) -> list[Material]:
    """Load materials from a CSV file.

    Args:
        csv_path: Path to the CSV file

    Returns:
        List of Material objects in file order.

    Raises:
        ValueError: If required columns are missing or a category is unknown
    """
    df = pd.read_csv(csv_path, dtype=str)

    missing = set(REQUIRED_COLUMNS) - set(df.columns)
    if missing:
        raise ValueError(
            f"Missing required columns: {sorted(missing)}. "
            f"Required columns are: {REQUIRED_COLUMNS}"
        )

    valid_categories = {c.value for c in MaterialCategory}
    materials: list[Material] = []

    for line_no, row in enumerate(df.itertuples(index=False), start=2):
        data = row._asdict()
        material_id = _clean(data.get("id"))
        name = _clean(data.get("name"))
        if material_id is None or name is None:
            raise ValueError(f"Line {line_no}: id and name must not be empty")

        category = _clean(data.get("category"))
        if category is None or category.lower() not in valid_categories:
            raise ValueError(
                f"Line {line_no}: unknown category '{category}'. "
                f"Valid categories: {sorted(valid_categories)}"
            )

        available = _clean(data.get("is_available"))
        info = _clean(data.get("nutritional_info"))

        materials.append(
            Material(
                id=material_id,
                name=name,
                category=MaterialCategory(category.lower()),
                is_available=available is None or available.lower() in _TRUE_STRINGS,
                nutritional_info=tuple(
                    part.strip() for part in info.split(";") if part.strip()
                ) if info else (),
                description=_clean(data.get("description")),
                image_url=_clean(data.get("image_url")),
            )
        )

    return materials


def _clean(value) -> str | None:
    """Convert NaN/blank cells to None."""
    if value is None or pd.isna(value):
        return None
    value = str(value).strip()
    return value or None
