"""Scoring and selection of candidate combinations."""

from __future__ import annotations

from typing import Sequence

from pantryplan.generator.models import MealType
from pantryplan.materials.models import Material, MaterialCategory

# Size above which every extra material costs points
CROWDED_SIZE = 7


def score_combination(combination: Sequence[Material], meal_type: MealType) -> float:
    """Score how good a combination looks for a meal type.

    Bigger and more varied combinations score higher, with bonuses for
    what suits the meal (dairy and grains at breakfast, protein and
    vegetables at lunch and dinner, small snacks) and a penalty past
    seven materials.

    Args:
        combination: Candidate materials
        meal_type: Meal the combination is for

    Returns:
        Score (higher is better).
    """
    size = len(combination)
    categories = {m.category for m in combination}

    score = 10.0 * size + 15.0 * len(categories)

    if meal_type == MealType.BREAKFAST:
        if MaterialCategory.DAIRY in categories:
            score += 20
        if MaterialCategory.GRAINS in categories:
            score += 15
    elif meal_type in (MealType.LUNCH, MealType.DINNER):
        if any(c.is_protein for c in categories):
            score += 25
        if MaterialCategory.VEGETABLES in categories:
            score += 20
    elif meal_type == MealType.SNACK:
        if size <= 3:
            score += 10

    if size > CROWDED_SIZE:
        score -= 5 * (size - CROWDED_SIZE)

    return score


def select_best_combination(
    combinations: Sequence[Sequence[Material]], meal_type: MealType
) -> list[Material]:
    """Pick the highest-scoring combination.

    Ties go to the earliest candidate. Returns an empty list when there are
    no candidates.
    """
    best: list[Material] = []
    best_score = float("-inf")

    for combination in combinations:
        score = score_combination(combination, meal_type)
        if score > best_score:
            best_score = score
            best = list(combination)

    return best
