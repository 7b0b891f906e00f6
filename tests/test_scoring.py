"""Tests for combination scoring and selection."""

from __future__ import annotations

import pytest

from pantryplan.generator.models import MealType
from pantryplan.generator.scoring import score_combination, select_best_combination
from pantryplan.materials.models import Material, MaterialCategory


class TestScoreCombination:
    """Tests for score_combination."""

    def test_breakfast_bonuses(self, milk, rice):
        # 2 materials, 2 categories, +20 dairy, +15 grains
        assert score_combination([milk, rice], MealType.BREAKFAST) == pytest.approx(85.0)

    def test_dinner_bonuses(self, chicken, broccoli, rice):
        # 3 materials, 3 categories, +25 protein, +20 vegetables
        assert score_combination([chicken, broccoli, rice], MealType.DINNER) == pytest.approx(120.0)

    def test_lunch_without_protein(self, broccoli, carrots, rice):
        # 3 materials, 2 categories, +20 vegetables
        assert score_combination([broccoli, carrots, rice], MealType.LUNCH) == pytest.approx(80.0)

    def test_small_snack_bonus(self, salt):
        assert score_combination([salt], MealType.SNACK) == pytest.approx(35.0)

    def test_oversized_penalty(self):
        materials = [
            Material(f"v{i}", f"Veg {i}", MaterialCategory.VEGETABLES) for i in range(9)
        ]
        # 90 + 15 (one category) - 5 * 2
        assert score_combination(materials, MealType.SNACK) == pytest.approx(95.0)


class TestSelectBestCombination:
    """Tests for select_best_combination."""

    def test_picks_highest(self, chicken, broccoli, rice, salt):
        small = [salt]
        big = [chicken, broccoli, rice]
        assert select_best_combination([small, big], MealType.DINNER) == big

    def test_tie_goes_to_first(self, broccoli, carrots):
        first = [broccoli]
        second = [carrots]
        assert select_best_combination([first, second], MealType.SNACK) == first

    def test_empty_returns_empty(self):
        assert select_best_combination([], MealType.LUNCH) == []

    def test_score_is_repeatable(self, chicken, broccoli, rice):
        combination = [chicken, broccoli, rice]
        first = score_combination(combination, MealType.LUNCH)
        assert score_combination(combination, MealType.LUNCH) == first
