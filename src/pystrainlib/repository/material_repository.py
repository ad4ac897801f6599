import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from pystrainlib.core.materials import MaterialRecord
from pystrainlib.core.models import MaterialCurveData
from pystrainlib.parsing.api import synthesize
from pystrainlib.parsing.config.material_yaml_parser import MaterialTableParser

logger = logging.getLogger(__name__)


class MaterialRepository:
    """
    Read-only collection of materials and their synthesized curves.

    Built once from a material table. Listing is cheap and never carries
    curve data; the full curve of a material is synthesized once and cached,
    either while the repository is populated (eager) or on first request.
    """

    # --- Constructor ---
    def __init__(self, records: Iterable[MaterialRecord], eager: bool = True) -> None:
        self._records: Dict[int, MaterialRecord] = {}
        for record in records:
            if record.id in self._records:
                logger.error("Duplicate material id in repository: %s", record.id)
                raise ValueError(f"Duplicate material id: {record.id}")
            self._records[record.id] = record
        self._curves: Dict[int, MaterialCurveData] = {}
        logger.info("MaterialRepository initialized with %d materials", len(self._records))
        if eager:
            for material_id in self._records:
                self.get_material(material_id)

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path], eager: bool = True) -> "MaterialRepository":
        """Create a repository from a YAML material table."""
        parser = MaterialTableParser(yaml_path)
        return cls(parser.create_records(), eager=eager)

    @classmethod
    def from_config(cls, config: Dict[str, Any], eager: bool = True) -> "MaterialRepository":
        """Create a repository from an in-memory material table."""
        return cls(MaterialTableParser.parse_records(config), eager=eager)

    # --- Public API ---
    def list_materials(self) -> List[MaterialRecord]:
        """Return every material record, in table order, without curve data."""
        return list(self._records.values())

    def get_record(self, material_id: int) -> Optional[MaterialRecord]:
        return self._records.get(material_id)

    def get_material(self, material_id: int) -> Optional[MaterialCurveData]:
        """
        Return the synthesized curve of a material.
        Args:
            material_id: Id of the material in the table
        Returns:
            MaterialCurveData, or None if no material has this id
        """
        record = self._records.get(material_id)
        if record is None:
            logger.debug("Material id %s not found", material_id)
            return None
        curve = self._curves.get(material_id)
        if curve is not None:
            logger.debug("Cache hit for material: %s", record.name)
            return curve
        try:
            curve = synthesize(record.parameters, record.phase_model, record.sampling)
        except Exception as e:
            logger.error("Failed to synthesize curve for material '%s': %s", record.name, e)
            raise
        logger.info("Synthesized curve for material '%s' with %d samples", record.name, len(curve))
        self._curves[material_id] = curve
        return curve

    def get_material_by_name(self, name: str) -> Optional[MaterialCurveData]:
        """Return the synthesized curve of a material by case-insensitive name."""
        wanted = name.strip().lower()
        for record in self._records.values():
            if record.name.strip().lower() == wanted:
                return self.get_material(record.id)
        logger.debug("Material '%s' not found", name)
        return None

    # --- Container protocol ---
    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[MaterialRecord]:
        return iter(self._records.values())

    def __contains__(self, material_id: object) -> bool:
        return material_id in self._records
