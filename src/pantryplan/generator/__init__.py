"""Meal generation pipeline and plan assembly.

Materials are filtered by dietary restrictions, combined into candidate
meals by a randomized search, scored, and the winner is turned into a
Meal. MealPlanGenerator repeats this for meal lists and daily, weekly
and monthly plans.
"""

from __future__ import annotations

from pantryplan.generator.combinations import CombinationGenerator
from pantryplan.generator.dietary import (
    DietaryRestriction,
    filter_materials,
    parse_restrictions,
)
from pantryplan.generator.errors import EmptyInputError, GenerationError
from pantryplan.generator.models import (
    MEAL_TYPE_RULES,
    Meal,
    MealPlan,
    MealType,
    MealTypeRules,
    get_rules,
    normalize_date,
    parse_meal_type,
)
from pantryplan.generator.planner import MealPlanGenerator
from pantryplan.generator.scoring import score_combination, select_best_combination
from pantryplan.generator.synthesizer import synthesize_meal

__all__ = [
    "CombinationGenerator",
    "DietaryRestriction",
    "EmptyInputError",
    "GenerationError",
    "MEAL_TYPE_RULES",
    "Meal",
    "MealPlan",
    "MealPlanGenerator",
    "MealType",
    "MealTypeRules",
    "filter_materials",
    "get_rules",
    "normalize_date",
    "parse_meal_type",
    "parse_restrictions",
    "score_combination",
    "select_best_combination",
    "synthesize_meal",
]
