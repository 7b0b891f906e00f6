"""Dietary restriction parsing and material filtering.

Restrictions form a closed set. Free-text keywords (from the CLI or the
settings file) are parsed once with ``parse_restrictions``; anything not
recognized is dropped without error.

Usage:
    from pantryplan.generator.dietary import filter_materials
    pool = filter_materials(materials, ["vegan"])
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

from pantryplan.materials.models import Material, MaterialCategory

logger = logging.getLogger(__name__)


class DietaryRestriction(Enum):
    """Supported dietary restrictions."""

    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    PESCATARIAN = "pescatarian"
    GLUTEN_FREE = "gluten-free"


@dataclass(frozen=True)
class ExclusionRule:
    """What a restriction removes from the pool.

    Attributes:
        categories: Categories excluded outright
        name_keywords: Per-category name substrings that are excluded
            (matched case-insensitively)
    """

    categories: frozenset[MaterialCategory] = frozenset()
    name_keywords: tuple[tuple[MaterialCategory, str], ...] = ()

    def excludes(self, material: Material) -> bool:
        if material.category in self.categories:
            return True
        name = material.name.lower()
        return any(
            material.category == category and keyword in name
            for category, keyword in self.name_keywords
        )


RESTRICTION_RULES: dict[DietaryRestriction, ExclusionRule] = {
    DietaryRestriction.VEGETARIAN: ExclusionRule(
        categories=frozenset({MaterialCategory.MEAT, MaterialCategory.SEAFOOD}),
    ),
    DietaryRestriction.VEGAN: ExclusionRule(
        categories=frozenset(
            {MaterialCategory.MEAT, MaterialCategory.SEAFOOD, MaterialCategory.DAIRY}
        ),
    ),
    DietaryRestriction.PESCATARIAN: ExclusionRule(
        categories=frozenset({MaterialCategory.MEAT}),
    ),
    DietaryRestriction.GLUTEN_FREE: ExclusionRule(
        name_keywords=((MaterialCategory.GRAINS, "wheat"),),
    ),
}

RestrictionInput = Union[str, DietaryRestriction]


def parse_restrictions(
    restrictions: Optional[Iterable[RestrictionInput]],
) -> list[DietaryRestriction]:
    """Parse restriction keywords, dropping unknown ones.

    Matching is case-insensitive and ignores surrounding whitespace.
    Duplicates are collapsed, first occurrence wins.
    """
    parsed: list[DietaryRestriction] = []
    for raw in restrictions or ():
        if isinstance(raw, DietaryRestriction):
            restriction = raw
        else:
            try:
                restriction = DietaryRestriction(str(raw).strip().lower())
            except ValueError:
                logger.debug("Ignoring unrecognized dietary restriction %r", raw)
                continue
        if restriction not in parsed:
            parsed.append(restriction)
    return parsed


def is_excluded(
    material: Material, restrictions: Iterable[DietaryRestriction]
) -> bool:
    """Check whether any restriction excludes a material."""
    return any(RESTRICTION_RULES[r].excludes(material) for r in restrictions)


def filter_materials(
    materials: Iterable[Material],
    restrictions: Optional[Iterable[RestrictionInput]] = None,
) -> list[Material]:
    """Remove materials that conflict with any dietary restriction.

    Args:
        materials: Material pool
        restrictions: Restriction keywords or enum members; None or empty
            leaves the pool unchanged

    Returns:
        New list of the materials that survive, in input order.
    """
    parsed = parse_restrictions(restrictions)
    if not parsed:
        return list(materials)
    return [m for m in materials if not is_excluded(m, parsed)]
