from dataclasses import dataclass
from typing import Dict, Final


@dataclass(frozen=True)
class RegionStyle:
    """Display attributes of a named strain region."""
    color: str
    description: str


class RegionStyles:
    """
    Display styles for the named strain regions, keyed by region display name.

    Attributes:
        ELASTIC (RegionStyle): Material returns to its original shape once unloaded.
        PLASTIC (RegionStyle): Material deforms permanently.
        STRAIN_HARDENING (RegionStyle): Additional stress is needed for continued deformation.
    """

    ELASTIC: Final[RegionStyle] = RegionStyle(
        color="rgba(34, 197, 94, 0.1)",
        description="Material returns to original shape when force is removed")
    PLASTIC: Final[RegionStyle] = RegionStyle(
        color="rgba(234, 179, 8, 0.1)",
        description="Material permanently deforms and doesn't return to original shape")
    STRAIN_HARDENING: Final[RegionStyle] = RegionStyle(
        color="rgba(239, 68, 68, 0.1)",
        description="Region where additional stress is required for continued deformation")

    @classmethod
    def get_all_styles(cls) -> Dict[str, RegionStyle]:
        """Return a dictionary of all region styles keyed by attribute name."""
        return {name: getattr(cls, name) for name in dir(cls)
                if not name.startswith('_') and isinstance(getattr(cls, name), RegionStyle)}

    @classmethod
    def get_style(cls, name: str) -> RegionStyle:
        """Get the style of a region by attribute name (e.g. 'STRAIN_HARDENING')."""
        if not hasattr(cls, name):
            raise AttributeError(f"Region style '{name}' not found")
        return getattr(cls, name)


@dataclass(frozen=True)
class PropertyUnits:
    """Units of the plotted curve axes."""
    STRAIN: Final[str] = "%"
    STRESS: Final[str] = "MPa"
