import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict

from pystrainlib.core.models import ParameterSet, PhaseModel, SamplingPlan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MaterialRecord:
    """
    Represents one entry of the material table.

    Mirrors the persisted material record (id, name, color and the four
    physical constants) and pairs it with the shape parameters and sampling
    steps used to synthesize its curve.
    """
    id: int
    name: str
    color: str
    parameters: ParameterSet
    phase_model: PhaseModel = field(repr=False)
    sampling: SamplingPlan = field(default_factory=SamplingPlan, repr=False)

    HEX_COLOR_PATTERN = re.compile(r'^#(?:[0-9a-fA-F]{3}){1,2}$')

    def __post_init__(self) -> None:
        """Validate the identifying fields of the record."""
        logger.debug("Initializing material record: %s (id: %s)", self.name, self.id)
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id <= 0:
            raise ValueError(f"Material id must be a positive integer, got {self.id!r}")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError(f"Material name must be a non-empty string, got {self.name!r}")
        if not isinstance(self.color, str) or not self.HEX_COLOR_PATTERN.match(self.color):
            raise ValueError(f"Color of material '{self.name}' must be a hex color like '#6B7280', "
                             f"got {self.color!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Listing payload of the record, without any curve data."""
        return {
            'id': self.id,
            'name': self.name,
            'color': self.color,
            **self.parameters.to_dict(),
        }
