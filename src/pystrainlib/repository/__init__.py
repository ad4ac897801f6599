"""Material repository built from a material table."""

from .material_repository import MaterialRepository

__all__ = [
    "MaterialRepository"
]
