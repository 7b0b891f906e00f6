"""Data models for generated meals and calendar meal plans.

Meals are produced by the synthesizer from one accepted material
combination. Meal plans group up to one meal per meal type under a single
calendar date; the date (time of day stripped) is the plan's identity key.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, Union

from pantryplan.materials.models import Material


class MealType(Enum):
    """The four meal slots of a day."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def name_prefix(self) -> str:
        """Word used to prefix generated meal names."""
        return _NAME_PREFIXES[self]

    @property
    def emoji(self) -> str:
        return _MEAL_EMOJI[self]


_NAME_PREFIXES = {
    MealType.BREAKFAST: "Morning",
    MealType.LUNCH: "Midday",
    MealType.DINNER: "Evening",
    MealType.SNACK: "Quick",
}

_MEAL_EMOJI = {
    MealType.BREAKFAST: "\U0001f305",
    MealType.LUNCH: "☀️",
    MealType.DINNER: "\U0001f319",
    MealType.SNACK: "\U0001f37f",
}


@dataclass(frozen=True)
class MealTypeRules:
    """Composition policy for one meal type.

    Attributes:
        requires_protein: Try to include one meat/seafood/poultry item
        requires_vegetables: Try to include 1-2 vegetables
        requires_carbs: Try to include one grain
        min_materials: Smallest accepted combination size (inclusive)
        max_materials: Largest accepted combination size (inclusive)
    """

    requires_protein: bool
    requires_vegetables: bool
    requires_carbs: bool
    min_materials: int
    max_materials: int

    def accepts_size(self, size: int) -> bool:
        return self.min_materials <= size <= self.max_materials


MEAL_TYPE_RULES: dict[MealType, MealTypeRules] = {
    MealType.BREAKFAST: MealTypeRules(
        requires_protein=False,
        requires_vegetables=False,
        requires_carbs=True,
        min_materials=2,
        max_materials=5,
    ),
    MealType.LUNCH: MealTypeRules(
        requires_protein=True,
        requires_vegetables=True,
        requires_carbs=True,
        min_materials=3,
        max_materials=7,
    ),
    MealType.DINNER: MealTypeRules(
        requires_protein=True,
        requires_vegetables=True,
        requires_carbs=True,
        min_materials=3,
        max_materials=7,
    ),
    MealType.SNACK: MealTypeRules(
        requires_protein=False,
        requires_vegetables=False,
        requires_carbs=False,
        min_materials=1,
        max_materials=3,
    ),
}


def get_rules(meal_type: MealType) -> MealTypeRules:
    """Return the composition rules for a meal type."""
    return MEAL_TYPE_RULES[meal_type]


def parse_meal_type(value: Union[str, MealType]) -> MealType:
    """Parse a meal type name (case-insensitive).

    Raises:
        ValueError: If the name is not one of the four meal types
    """
    if isinstance(value, MealType):
        return value
    try:
        return MealType(value.strip().lower())
    except ValueError:
        valid = ", ".join(m.value for m in MealType)
        raise ValueError(f"Unknown meal type '{value}'. Valid: {valid}") from None


def normalize_date(value: Union[date, datetime]) -> date:
    """Strip the time of day, returning a plain calendar date."""
    if isinstance(value, datetime):
        return value.date()
    return value


def combination_key(materials) -> frozenset[str]:
    """Identity of a combination: the set of its material ids."""
    return frozenset(m.id for m in materials)


@dataclass(frozen=True)
class Meal:
    """A meal suggestion built from one combination of materials.

    Attributes:
        id: Unique meal identifier
        name: Generated meal name
        description: One-sentence description
        materials: Materials used, in combination order
        meal_type: Slot this meal was generated for
        preparation_time: Estimated minutes
        instructions: Numbered preparation steps
        created_at: When the meal was generated
        calories: Rough calorie estimate
        tags: Meal type, categories and diet tags
        image_url: Optional image reference
    """

    id: str
    name: str
    description: str
    materials: tuple[Material, ...]
    meal_type: MealType
    preparation_time: int = 0
    instructions: tuple[str, ...] = ()
    created_at: datetime = field(default_factory=datetime.now)
    calories: Optional[int] = None
    tags: tuple[str, ...] = ()
    image_url: Optional[str] = None

    @property
    def material_ids(self) -> frozenset[str]:
        return combination_key(self.materials)

    @property
    def instructions_text(self) -> str:
        return "\n".join(self.instructions)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "materials": [m.to_dict() for m in self.materials],
            "meal_type": self.meal_type.value,
            "preparation_time": self.preparation_time,
            "instructions": list(self.instructions),
            "created_at": self.created_at.isoformat(),
            "calories": self.calories,
            "tags": list(self.tags),
            "image_url": self.image_url,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Meal:
        """Build a Meal from a dictionary produced by to_dict()."""
        instructions = data.get("instructions") or ()
        if isinstance(instructions, str):
            instructions = [line for line in instructions.splitlines() if line]

        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            materials=tuple(Material.from_dict(m) for m in data.get("materials", [])),
            meal_type=MealType(data["meal_type"]),
            preparation_time=int(data.get("preparation_time") or 0),
            instructions=tuple(instructions),
            created_at=datetime.fromisoformat(data["created_at"]),
            calories=data.get("calories"),
            tags=tuple(data.get("tags") or ()),
            image_url=data.get("image_url"),
        )


@dataclass(frozen=True)
class MealPlan:
    """Meals planned for one calendar date.

    ``meals`` always carries all four meal types; unplanned slots map to
    None. Plans are immutable: the ``with_meal`` family returns updated
    copies.

    Attributes:
        id: Unique plan identifier
        date: Normalized calendar date
        meals: Meal type -> planned meal (or None)
        created_at: Creation timestamp
        updated_at: Last modification timestamp
        notes: Free-text notes
        is_completed: Whether the user marked the day as done
    """

    id: str
    date: date
    meals: dict[MealType, Optional[Meal]]
    created_at: datetime
    updated_at: datetime
    notes: Optional[str] = None
    is_completed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", normalize_date(self.date))
        object.__setattr__(
            self, "meals", {m: self.meals.get(m) for m in MealType}
        )

    @classmethod
    def create_empty(cls, day: Union[date, datetime]) -> MealPlan:
        """Create a plan with every slot empty."""
        now = datetime.now()
        return cls(
            id=str(uuid.uuid4()),
            date=normalize_date(day),
            meals={},
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_meals(
        cls, day: Union[date, datetime], meals: dict[MealType, Meal]
    ) -> MealPlan:
        """Create a plan pre-filled with the given meals."""
        plan = cls.create_empty(day)
        return replace(plan, meals=dict(meals))

    def get_meal(self, meal_type: MealType) -> Optional[Meal]:
        return self.meals.get(meal_type)

    def with_meal(self, meal_type: MealType, meal: Optional[Meal]) -> MealPlan:
        """Return a copy with one slot replaced."""
        meals = dict(self.meals)
        meals[meal_type] = meal
        return replace(self, meals=meals, updated_at=datetime.now())

    def without_meal(self, meal_type: MealType) -> MealPlan:
        return self.with_meal(meal_type, None)

    @property
    def has_any_meals(self) -> bool:
        return any(meal is not None for meal in self.meals.values())

    @property
    def all_meals(self) -> list[Meal]:
        return [meal for meal in self.meals.values() if meal is not None]

    @property
    def total_preparation_time(self) -> int:
        return sum(meal.preparation_time for meal in self.all_meals)

    @property
    def total_calories(self) -> Optional[int]:
        """Sum of calorie estimates, or None if no meal has one."""
        calories = [m.calories for m in self.all_meals if m.calories is not None]
        if not calories:
            return None
        return sum(calories)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data: dict[str, Any] = {
            "id": self.id,
            "plan_date": self.date.isoformat(),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "notes": self.notes,
            "is_completed": self.is_completed,
        }
        for meal_type, meal in self.meals.items():
            data[f"{meal_type.value}_meal"] = meal.to_dict() if meal else None
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MealPlan:
        """Build a MealPlan from a dictionary produced by to_dict()."""
        meals: dict[MealType, Optional[Meal]] = {}
        for meal_type in MealType:
            meal_data = data.get(f"{meal_type.value}_meal")
            meals[meal_type] = Meal.from_dict(meal_data) if meal_data else None

        return cls(
            id=data["id"],
            date=date.fromisoformat(data["plan_date"]),
            meals=meals,
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(data["updated_at"]),
            notes=data.get("notes"),
            is_completed=bool(data.get("is_completed", False)),
        )
