"""Plan assembly: single meals, daily, weekly and monthly meal plans.

The single-meal pipeline is

    dietary filter -> combination generator -> scorer -> synthesizer

and every public method here runs it one or more times. Nothing is
persisted; callers hand the returned plans to the store.

Each public method is an error boundary: whatever goes wrong inside is
re-raised as a GenerationError("Failed to generate ...") chained to the
original exception. Running out of valid combinations is not an error,
it just leaves that slot empty.
"""

from __future__ import annotations

import calendar
import logging
import random
from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING, Callable, Iterable, Optional, Sequence, Union

from pantryplan.generator.combinations import CombinationGenerator
from pantryplan.generator.dietary import (
    RestrictionInput,
    filter_materials,
    is_excluded,
    parse_restrictions,
)
from pantryplan.generator.errors import EmptyInputError, GenerationError
from pantryplan.generator.models import (
    Meal,
    MealPlan,
    MealType,
    combination_key,
    normalize_date,
)
from pantryplan.generator.scoring import select_best_combination
from pantryplan.generator.synthesizer import synthesize_meal
from pantryplan.materials.models import Material

if TYPE_CHECKING:
    from pantryplan.config.settings import Settings

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7
DEFAULT_MEAL_COUNT = 3

RestrictionFilter = Callable[
    [Sequence[Material], Optional[Iterable[RestrictionInput]]], list[Material]
]
Selector = Callable[[Sequence[Sequence[Material]], MealType], list[Material]]
Synthesizer = Callable[[Sequence[Material], MealType], Meal]


class MealPlanGenerator:
    """Generate meals and meal plans from a pool of materials.

    All collaborators are injected; the generator itself holds no state
    between calls.

    Args:
        restriction_filter: Removes materials that break dietary restrictions
        combination_generator: Produces candidate combinations
        scorer: Picks the best combination from the candidates
        synthesizer: Builds a Meal from the chosen combination
    """

    def __init__(
        self,
        restriction_filter: RestrictionFilter = filter_materials,
        combination_generator: Optional[CombinationGenerator] = None,
        scorer: Selector = select_best_combination,
        synthesizer: Synthesizer = synthesize_meal,
    ):
        self.restriction_filter = restriction_filter
        self.combination_generator = combination_generator or CombinationGenerator()
        self.scorer = scorer
        self.synthesizer = synthesizer

    @classmethod
    def from_settings(cls, settings: Settings) -> MealPlanGenerator:
        """Build a generator using the generation section of the settings."""
        gen = settings.generation
        return cls(
            combination_generator=CombinationGenerator(
                rng=random.Random(gen.seed),
                max_attempts=gen.max_attempts,
            )
        )

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def generate_meals(
        self,
        materials: Sequence[Material],
        meal_type: MealType,
        count: int = DEFAULT_MEAL_COUNT,
        restrictions: Optional[Iterable[RestrictionInput]] = None,
    ) -> list[Meal]:
        """Generate up to ``count`` meals with distinct ingredient sets.

        Args:
            materials: Material pool (availability already applied)
            meal_type: Meal slot to fill
            count: Number of meals to try for
            restrictions: Dietary restriction keywords

        Returns:
            Generated meals; shorter than ``count`` when the pool runs out
            of fresh combinations.

        Raises:
            GenerationError: If the pool is empty or the pipeline fails
        """
        try:
            if not materials:
                raise EmptyInputError("No materials available for meal generation")

            meals: list[Meal] = []
            used_combinations: set[frozenset[str]] = set()

            for _ in range(count):
                meal = self._generate_single_meal(
                    materials, meal_type, used_combinations, restrictions
                )
                if meal is not None:
                    meals.append(meal)
                    used_combinations.add(meal.material_ids)

            logger.debug(
                "Generated %d/%d %s meals", len(meals), count, meal_type.value
            )
            return meals
        except Exception as exc:
            raise GenerationError("meals", exc) from exc

    def generate_custom_meal(
        self,
        required_materials: Sequence[Material],
        meal_type: MealType,
        additional_materials: Optional[Sequence[Material]] = None,
        restrictions: Optional[Iterable[RestrictionInput]] = None,
    ) -> Optional[Meal]:
        """Generate one meal that contains every required material.

        Args:
            required_materials: Materials that must appear in the meal
            meal_type: Meal slot to fill
            additional_materials: Extra materials the meal may draw on
            restrictions: Dietary restriction keywords

        Returns:
            The meal, or None if no valid combination exists. A required
            material excluded by the restrictions also yields None.

        Raises:
            GenerationError: If no required material is given or the
                pipeline fails
        """
        try:
            if not required_materials:
                raise EmptyInputError("At least one required material must be provided")

            pool: list[Material] = []
            for material in list(required_materials) + list(additional_materials or ()):
                if material not in pool:
                    pool.append(material)

            return self._generate_single_meal(
                pool,
                meal_type,
                set(),
                restrictions,
                required_materials=required_materials,
            )
        except Exception as exc:
            raise GenerationError("custom meal", exc) from exc

    def generate_daily_plan(
        self,
        day: Union[date, datetime],
        materials: Sequence[Material],
        included_meal_types: Optional[Sequence[MealType]] = None,
        restrictions: Optional[Iterable[RestrictionInput]] = None,
    ) -> Optional[MealPlan]:
        """Generate a plan for one date.

        Each included meal type gets its own ``generate_meals(count=1)``
        call, so ingredient sets are not deduplicated across slots.

        Returns:
            The plan, or None if no slot produced a meal.

        Raises:
            GenerationError: If the pool is empty or the pipeline fails
        """
        try:
            return self._build_day(day, materials, included_meal_types, restrictions)
        except Exception as exc:
            raise GenerationError("daily plan", exc) from exc

    def generate_weekly_plan(
        self,
        start_date: Union[date, datetime],
        materials: Sequence[Material],
        included_meal_types: Optional[Sequence[MealType]] = None,
        restrictions: Optional[Iterable[RestrictionInput]] = None,
    ) -> dict[date, MealPlan]:
        """Generate plans for the 7 days starting at ``start_date``.

        Dates for which no meal could be generated are left out.

        Raises:
            GenerationError: If the pool is empty or the pipeline fails
        """
        try:
            start = normalize_date(start_date)
            plans: dict[date, MealPlan] = {}
            for offset in range(DAYS_PER_WEEK):
                day = start + timedelta(days=offset)
                plan = self._build_day(day, materials, included_meal_types, restrictions)
                if plan is not None:
                    plans[day] = plan
            logger.info("Weekly plan from %s: %d/7 days planned", start, len(plans))
            return plans
        except Exception as exc:
            raise GenerationError("weekly plan", exc) from exc

    def generate_monthly_plan(
        self,
        month: Union[date, datetime],
        materials: Sequence[Material],
        included_meal_types: Optional[Sequence[MealType]] = None,
        restrictions: Optional[Iterable[RestrictionInput]] = None,
    ) -> dict[date, MealPlan]:
        """Generate plans across the month containing ``month``.

        Weekends are skipped. For each weekday reached, a weekly plan is
        generated from that day and only that day's entry is kept, then
        the walk jumps ahead a full week. The result therefore holds at
        most one plan per 7-day block.

        Raises:
            GenerationError: If the pool is empty or the pipeline fails
        """
        try:
            first = normalize_date(month).replace(day=1)
            days_in_month = calendar.monthrange(first.year, first.month)[1]
            plans: dict[date, MealPlan] = {}

            day_number = 1
            while day_number <= days_in_month:
                day = first.replace(day=day_number)
                if day.weekday() >= calendar.SATURDAY:
                    day_number += 1
                    continue

                week = self.generate_weekly_plan(
                    day, materials, included_meal_types, restrictions
                )
                if day in week:
                    plans[day] = week[day]

                day_number += DAYS_PER_WEEK

            logger.info(
                "Monthly plan for %s: %d days planned", first.strftime("%Y-%m"), len(plans)
            )
            return plans
        except Exception as exc:
            raise GenerationError("monthly plan", exc) from exc

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _build_day(
        self,
        day: Union[date, datetime],
        materials: Sequence[Material],
        included_meal_types: Optional[Sequence[MealType]],
        restrictions: Optional[Iterable[RestrictionInput]],
    ) -> Optional[MealPlan]:
        restrictions = parse_restrictions(restrictions)
        meals: dict[MealType, Meal] = {}

        for meal_type in included_meal_types or list(MealType):
            generated = self.generate_meals(
                materials, meal_type, count=1, restrictions=restrictions
            )
            if generated:
                meals[meal_type] = generated[0]

        if not meals:
            logger.debug("No meals generated for %s", normalize_date(day))
            return None
        return MealPlan.create_with_meals(day, meals)

    def _generate_single_meal(
        self,
        materials: Sequence[Material],
        meal_type: MealType,
        used_combinations: set[frozenset[str]],
        restrictions: Optional[Iterable[RestrictionInput]],
        required_materials: Optional[Sequence[Material]] = None,
    ) -> Optional[Meal]:
        parsed = parse_restrictions(restrictions)

        if required_materials and parsed:
            blocked = [m.name for m in required_materials if is_excluded(m, parsed)]
            if blocked:
                logger.debug(
                    "Required materials %s excluded by %s",
                    blocked,
                    [r.value for r in parsed],
                )
                return None

        pool = self.restriction_filter(materials, parsed)
        if not pool:
            logger.debug("Material pool empty after dietary filtering")
            return None

        combinations = self.combination_generator.generate(
            pool, meal_type, used_combinations, required_materials
        )
        if not combinations:
            logger.debug("No valid %s combination found", meal_type.value)
            return None

        best = self.scorer(combinations, meal_type)
        if not best:
            return None

        logger.debug(
            "Selected %s combination %s", meal_type.value, sorted(combination_key(best))
        )
        return self.synthesizer(best, meal_type)
