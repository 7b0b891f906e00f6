"""Pantry materials: models and catalog loading."""

from pantryplan.materials.catalog import (
    DEFAULT_MATERIALS,
    available_only,
    load_materials_csv,
)
from pantryplan.materials.models import PROTEIN_CATEGORIES, Material, MaterialCategory

__all__ = [
    "DEFAULT_MATERIALS",
    "Material",
    "MaterialCategory",
    "PROTEIN_CATEGORIES",
    "available_only",
    "load_materials_csv",
]
