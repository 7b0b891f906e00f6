"""Data models for raw materials (ingredients) in the pantry."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional


class MaterialCategory(Enum):
    """Closed set of ingredient categories."""

    MEAT = "meat"
    SEAFOOD = "seafood"
    POULTRY = "poultry"
    VEGETABLES = "vegetables"
    GRAINS = "grains"
    DAIRY = "dairy"
    SPICES = "spices"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def emoji(self) -> str:
        return _CATEGORY_EMOJI[self]

    @property
    def is_protein(self) -> bool:
        """Meat, seafood and poultry all count as protein."""
        return self in PROTEIN_CATEGORIES


_CATEGORY_EMOJI = {
    MaterialCategory.MEAT: "\U0001f969",
    MaterialCategory.SEAFOOD: "\U0001f41f",
    MaterialCategory.POULTRY: "\U0001f414",
    MaterialCategory.VEGETABLES: "\U0001f96c",
    MaterialCategory.GRAINS: "\U0001f33e",
    MaterialCategory.DAIRY: "\U0001f95b",
    MaterialCategory.SPICES: "\U0001f33f",
}

PROTEIN_CATEGORIES = frozenset(
    {MaterialCategory.MEAT, MaterialCategory.SEAFOOD, MaterialCategory.POULTRY}
)


@dataclass(frozen=True, eq=False)
class Material:
    """A raw ingredient that can be combined into meals.

    Materials compare and hash by id only, so two records for the same
    pantry item are interchangeable.

    Attributes:
        id: Unique material identifier
        name: Display name (e.g., "Chicken Breast")
        category: Ingredient category
        is_available: Whether the item is currently in the pantry
        nutritional_info: Free-text nutrition notes, informational only
        description: Optional longer description
        image_url: Optional image reference
    """

    id: str
    name: str
    category: MaterialCategory
    is_available: bool = True
    nutritional_info: tuple[str, ...] = ()
    description: Optional[str] = None
    image_url: Optional[str] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def with_availability(self, is_available: bool) -> Material:
        """Return a copy with a different availability flag."""
        return replace(self, is_available=is_available)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "nutritional_info": list(self.nutritional_info),
            "is_available": self.is_available,
            "description": self.description,
            "image_url": self.image_url,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Material:
        """Build a Material from a dictionary produced by to_dict()."""
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            category=MaterialCategory(data["category"]),
            is_available=bool(data.get("is_available", True)),
            nutritional_info=tuple(data.get("nutritional_info") or ()),
            description=data.get("description"),
            image_url=data.get("image_url"),
        )
