"""Randomized search for candidate material combinations.

Each attempt assembles one combination the way a cook would: start from
anything the user insisted on, add a protein, a vegetable or two, a grain
and some seasoning as the meal type's rules ask, then keep the result if
its size fits the rules and it has not been served already in this call.

Category requirements are best-effort: when the pool has no material of a
required category the requirement is skipped, not failed.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence

from pantryplan.generator.models import MealType, combination_key, get_rules
from pantryplan.materials.models import Material, MaterialCategory

DEFAULT_MAX_ATTEMPTS = 50


class CombinationGenerator:
    """Generate candidate combinations for a meal type.

    Args:
        rng: Random number generator. Pass a seeded ``random.Random`` for
            reproducible output; defaults to a system-seeded one.
        max_attempts: Number of independent attempts per call
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts

    def generate(
        self,
        materials: Sequence[Material],
        meal_type: MealType,
        used_combinations: set[frozenset[str]],
        required_materials: Optional[Sequence[Material]] = None,
    ) -> list[list[Material]]:
        """Run the attempts and return every accepted combination.

        Args:
            materials: Filtered material pool
            meal_type: Meal type whose rules apply
            used_combinations: Id-sets already taken in this call (read only)
            required_materials: Materials forced into every combination

        Returns:
            Accepted combinations in attempt order. May be empty; may hold
            several combinations with the same id-set.
        """
        rules = get_rules(meal_type)

        proteins = [m for m in materials if m.category.is_protein]
        vegetables = [m for m in materials if m.category == MaterialCategory.VEGETABLES]
        grains = [m for m in materials if m.category == MaterialCategory.GRAINS]
        spices = [m for m in materials if m.category == MaterialCategory.SPICES]

        combinations: list[list[Material]] = []

        for _ in range(self.max_attempts):
            combination: list[Material] = []
            for material in required_materials or ():
                _add_unique(combination, material)

            if rules.requires_protein and proteins:
                if not any(m.category.is_protein for m in combination):
                    _add_unique(combination, self.rng.choice(proteins))

            if rules.requires_vegetables and vegetables:
                self._add_sample(combination, vegetables, self.rng.randint(1, 2))

            if rules.requires_carbs and grains:
                _add_unique(combination, self.rng.choice(grains))

            if spices:
                self._add_sample(combination, spices, self.rng.randint(1, 3))

            if not rules.accepts_size(len(combination)):
                continue
            if combination_key(combination) in used_combinations:
                continue
            combinations.append(combination)

        return combinations

    def _add_sample(
        self, combination: list[Material], pool: list[Material], count: int
    ) -> None:
        """Add up to ``count`` distinct random picks from ``pool``."""
        for material in self.rng.sample(pool, min(count, len(pool))):
            _add_unique(combination, material)


def _add_unique(combination: list[Material], material: Material) -> None:
    if material not in combination:
        combination.append(material)
