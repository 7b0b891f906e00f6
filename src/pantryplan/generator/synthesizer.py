"""Turn a winning combination into a presentable Meal.

Every derivation here is a pure function of the combination and the meal
type. Only the meal id and creation time vary between calls, and both can
be passed in.
"""

from __future__ import annotations

import math
import uuid
from datetime import datetime
from typing import Optional, Sequence

from pantryplan.generator.models import Meal, MealType
from pantryplan.materials.models import Material, MaterialCategory

# Minutes added per material, by category (anything else adds 5)
PREP_MINUTES = {
    MaterialCategory.MEAT: 20,
    MaterialCategory.POULTRY: 20,
    MaterialCategory.SEAFOOD: 15,
    MaterialCategory.VEGETABLES: 10,
    MaterialCategory.GRAINS: 15,
}
BASE_PREP_MINUTES = 15
DEFAULT_PREP_MINUTES = 5

# Calories added per material, by category (anything else adds 10)
CALORIES = {
    MaterialCategory.MEAT: 200,
    MaterialCategory.POULTRY: 200,
    MaterialCategory.SEAFOOD: 150,
    MaterialCategory.DAIRY: 100,
    MaterialCategory.GRAINS: 150,
    MaterialCategory.VEGETABLES: 30,
}
DEFAULT_CALORIES = 10

PREP_SCALE = {MealType.BREAKFAST: 0.8, MealType.SNACK: 0.5}
CALORIE_SCALE = {MealType.BREAKFAST: 0.8, MealType.SNACK: 0.4}

PREP_RANGE = (10, 120)
CALORIE_RANGE = (100, 1000)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return max(low, min(high, value))


def _is_main_ingredient(material: Material) -> bool:
    return material.category.is_protein or material.category == MaterialCategory.VEGETABLES


def generate_meal_name(materials: Sequence[Material], meal_type: MealType) -> str:
    """Name a meal after its first one or two main ingredients."""
    main = [m.name for m in materials if _is_main_ingredient(m)][:2]
    if not main:
        return f"{meal_type.display_name} Bowl"
    return f"{meal_type.name_prefix} {' and '.join(main)}"


def generate_meal_description(materials: Sequence[Material], meal_type: MealType) -> str:
    names = ", ".join(m.name.lower() for m in materials)
    return f"A delicious {meal_type.display_name.lower()} featuring {names}."


def generate_instructions(materials: Sequence[Material]) -> list[str]:
    """Build numbered cooking steps."""
    steps: list[str] = []
    if any(m.category.is_protein for m in materials):
        steps.append("Season and cook the protein until done.")
    if any(m.category == MaterialCategory.VEGETABLES for m in materials):
        steps.append("Prepare and cook the vegetables.")
    steps.append("Combine all ingredients and season to taste.")
    steps.append("Serve hot and enjoy!")
    return [f"{i}. {step}" for i, step in enumerate(steps, start=1)]


def estimate_preparation_time(materials: Sequence[Material], meal_type: MealType) -> int:
    """Estimate preparation minutes, clamped to 10-120."""
    minutes = BASE_PREP_MINUTES + sum(
        PREP_MINUTES.get(m.category, DEFAULT_PREP_MINUTES) for m in materials
    )
    scale = PREP_SCALE.get(meal_type)
    if scale is not None:
        minutes = _round_half_up(minutes * scale)
    return _clamp(minutes, PREP_RANGE)


def estimate_calories(materials: Sequence[Material], meal_type: MealType) -> int:
    """Estimate calories, clamped to 100-1000."""
    calories = sum(CALORIES.get(m.category, DEFAULT_CALORIES) for m in materials)
    scale = CALORIE_SCALE.get(meal_type)
    if scale is not None:
        calories = _round_half_up(calories * scale)
    return _clamp(calories, CALORIE_RANGE)


def generate_tags(materials: Sequence[Material], meal_type: MealType) -> list[str]:
    """Tag with the meal type, each category, and vegetarian/vegan."""
    tags = [meal_type.value]
    for material in materials:
        tag = material.category.display_name.lower()
        if tag not in tags:
            tags.append(tag)

    categories = {m.category for m in materials}
    if not categories & {MaterialCategory.MEAT, MaterialCategory.SEAFOOD}:
        tags.append("vegetarian")
        if MaterialCategory.DAIRY not in categories:
            tags.append("vegan")
    return tags


def synthesize_meal(
    combination: Sequence[Material],
    meal_type: MealType,
    meal_id: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> Meal:
    """Build a Meal from a selected combination.

    Args:
        combination: Selected materials (non-empty)
        meal_type: Meal slot being filled
        meal_id: Id to use; a uuid4 by default
        created_at: Creation time; now by default

    Returns:
        Meal with name, description, steps, timing, calories and tags.
    """
    materials = tuple(combination)
    return Meal(
        id=meal_id or str(uuid.uuid4()),
        name=generate_meal_name(materials, meal_type),
        description=generate_meal_description(materials, meal_type),
        materials=materials,
        meal_type=meal_type,
        preparation_time=estimate_preparation_time(materials, meal_type),
        instructions=tuple(generate_instructions(materials)),
        created_at=created_at or datetime.now(),
        calories=estimate_calories(materials, meal_type),
        tags=tuple(generate_tags(materials, meal_type)),
    )
