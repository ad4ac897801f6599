import logging
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, Iterable, List, Set, Union

from ruamel.yaml import YAML, constructor, scanner

from pystrainlib.core.exceptions import InvalidParameterError, InvalidPhaseOrderingError
from pystrainlib.core.materials import MaterialRecord
from pystrainlib.core.models import ParameterSet, PhaseModel, SamplingPlan
from pystrainlib.parsing.config.yaml_keys import (
    MATERIALS_KEY, ID_KEY, NAME_KEY, COLOR_KEY, PROPERTIES_KEY, PHASE_MODEL_KEY, SAMPLING_KEY,
    YOUNGS_MODULUS_KEY, YIELD_STRENGTH_KEY, ULTIMATE_STRENGTH_KEY, DENSITY_KEY,
    ELASTIC_LIMIT_STRAIN_KEY, YIELD_STRAIN_KEY, ULTIMATE_STRAIN_KEY, BREAK_STRAIN_KEY,
    HARDENING_EXPONENT_KEY, NECKING_FACTOR_KEY,
    ELASTIC_STEP_KEY, YIELD_STEP_KEY, PLASTIC_STEP_KEY, NECKING_STEP_KEY
)

logger = logging.getLogger(__name__)


class BaseFileParser:
    """Base class for parsing configuration files."""

    def __init__(self, config_path: Union[str, Path]) -> None:
        self.config_path = Path(config_path)
        self.config = self._load_config()
        logger.info("Successfully loaded configuration from: %s", self.config_path)

    def _load_config(self) -> Dict[str, Any]:
        raise NotImplementedError("Subclasses must implement _load_config method")


class YAMLFileParser(BaseFileParser):
    """Parser for YAML configuration files."""

    def _load_config(self) -> Dict[str, Any]:
        yaml = YAML(typ='safe')
        yaml.allow_duplicate_keys = False
        try:
            logger.debug("Loading YAML file: %s", self.config_path)
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = yaml.load(f)
            logger.debug("YAML file loaded successfully, found %d top-level keys",
                         len(config) if isinstance(config, dict) else 0)
            return config
        except FileNotFoundError as e:
            logger.error("YAML file not found: %s", self.config_path)
            raise FileNotFoundError(f"YAML file not found: {self.config_path}") from e
        except constructor.DuplicateKeyError as e:
            logger.error("Duplicate key found in YAML file %s: %s", self.config_path, e)
            raise ValueError(f"Duplicate key in {self.config_path}: {str(e)}") from e
        except scanner.ScannerError as e:
            logger.error("YAML syntax error in file %s: %s", self.config_path, e)
            raise ValueError(f"YAML syntax error in {self.config_path}: {str(e)}") from e
        except Exception as e:
            logger.error("Unexpected error parsing YAML file %s: %s", self.config_path, e, exc_info=True)
            raise ValueError(f"Error parsing {self.config_path}: {str(e)}") from e


class MaterialTableParser(YAMLFileParser):
    """Parser for material table files in YAML format."""

    REQUIRED_RECORD_KEYS = {ID_KEY, NAME_KEY, COLOR_KEY, PROPERTIES_KEY, PHASE_MODEL_KEY}
    OPTIONAL_RECORD_KEYS = {SAMPLING_KEY}
    PROPERTY_KEYS = {YOUNGS_MODULUS_KEY, YIELD_STRENGTH_KEY, ULTIMATE_STRENGTH_KEY, DENSITY_KEY}
    PHASE_MODEL_KEYS = {ELASTIC_LIMIT_STRAIN_KEY, YIELD_STRAIN_KEY, ULTIMATE_STRAIN_KEY, BREAK_STRAIN_KEY,
                        HARDENING_EXPONENT_KEY, NECKING_FACTOR_KEY}
    SAMPLING_KEYS = {ELASTIC_STEP_KEY, YIELD_STEP_KEY, PLASTIC_STEP_KEY, NECKING_STEP_KEY}

    # --- Constructor ---
    def __init__(self, yaml_path: Union[str, Path]) -> None:
        super().__init__(yaml_path)
        logger.info("Initializing MaterialTableParser for: %s", yaml_path)
        self.validate_table(self.config)
        logger.info("MaterialTableParser initialized successfully with %d materials",
                    len(self.config[MATERIALS_KEY]))

    # --- Public API ---
    def create_records(self) -> List[MaterialRecord]:
        """Create a MaterialRecord for every entry of the parsed table."""
        logger.info("Creating material records from: %s", self.config_path)
        return self.parse_records(self.config)

    @staticmethod
    def parse_records(config: Dict[str, Any]) -> List[MaterialRecord]:
        """
        Build material records from an in-memory table.
        Args:
            config: Table with a 'materials' list, as loaded from YAML
        Returns:
            Records in table order
        Raises:
            ValueError: If the table structure is invalid
            ValidationError: If an entry holds invalid constants or shape parameters
        """
        MaterialTableParser.validate_table(config)
        records = [MaterialTableParser._create_record(entry) for entry in config[MATERIALS_KEY]]
        logger.info("Created %d material records", len(records))
        return records

    # --- Validation Methods ---
    @staticmethod
    def validate_table(config: Any) -> None:
        """Validate the table structure: root keys, entries, sections and uniqueness."""
        logger.debug("Starting material table validation")
        if not isinstance(config, dict):
            logger.error("Invalid YAML structure - expected dictionary at root level")
            raise ValueError("The YAML file must start with a dictionary/object structure with key-value pairs, "
                             "not a list or scalar value")
        MaterialTableParser._check_keys(set(config.keys()), {MATERIALS_KEY}, set(), "material table")
        entries = config[MATERIALS_KEY]
        if not isinstance(entries, list) or not entries:
            logger.error("The '%s' section is not a non-empty list: %s", MATERIALS_KEY, type(entries))
            raise ValueError(f"The '{MATERIALS_KEY}' section must be a non-empty list of materials")
        for index, entry in enumerate(entries):
            MaterialTableParser._validate_entry(entry, index)
        MaterialTableParser._validate_unique(entries)
        logger.debug("Material table validation completed successfully")

    @staticmethod
    def _validate_entry(entry: Any, index: int) -> None:
        if not isinstance(entry, dict):
            raise ValueError(f"Material entry {index} must be a dictionary, got {type(entry).__name__}")
        label = f"material entry {index} ('{entry.get(NAME_KEY, 'unnamed')}')"
        MaterialTableParser._check_keys(set(entry.keys()), MaterialTableParser.REQUIRED_RECORD_KEYS,
                                        MaterialTableParser.OPTIONAL_RECORD_KEYS, label)
        sections = [
            (PROPERTIES_KEY, MaterialTableParser.PROPERTY_KEYS, set()),
            (PHASE_MODEL_KEY, MaterialTableParser.PHASE_MODEL_KEYS, set()),
            (SAMPLING_KEY, set(), MaterialTableParser.SAMPLING_KEYS),
        ]
        for section, required, optional in sections:
            if section not in entry:
                continue
            value = entry[section]
            if not isinstance(value, dict):
                logger.error("Section '%s' of %s is not a dictionary: %s", section, label, type(value))
                raise ValueError(f"The '{section}' section of {label} must be a dictionary")
            MaterialTableParser._check_keys(set(value.keys()), required, optional, f"'{section}' of {label}")

    @staticmethod
    def _check_keys(keys: Set[str], required: Set[str], optional: Set[str], label: str) -> None:
        missing = required - keys
        if missing:
            logger.error("Missing required fields in %s: %s", label, missing)
            raise ValueError(f"Missing required fields in {label}: {', '.join(sorted(missing))}")
        allowed = required | optional
        extra = keys - allowed
        if extra:
            logger.error("Unknown fields in %s: %s", label, extra)
            error_msg = f"Unknown fields found in {label}: \n ->"
            for key in sorted(extra, key=str):
                matches = get_close_matches(str(key), allowed, n=1, cutoff=0.6)
                suggestion = f" (did you mean '{matches[0]}'?)" if matches else ""
                error_msg += f" - '{key}'{suggestion}\n"
            raise ValueError(error_msg)

    @staticmethod
    def _validate_unique(entries: Iterable[Dict[str, Any]]) -> None:
        seen_ids, seen_names = set(), set()
        for entry in entries:
            material_id = entry[ID_KEY]
            name = str(entry[NAME_KEY]).strip().lower()
            if material_id in seen_ids:
                logger.error("Duplicate material id: %s", material_id)
                raise ValueError(f"Duplicate material id: {material_id}")
            if name in seen_names:
                logger.error("Duplicate material name: %s", entry[NAME_KEY])
                raise ValueError(f"Duplicate material name: '{entry[NAME_KEY]}'")
            seen_ids.add(material_id)
            seen_names.add(name)

    # --- Processing Methods ---
    @staticmethod
    def _create_record(entry: Dict[str, Any]) -> MaterialRecord:
        name = entry[NAME_KEY]
        logger.debug("Creating material record: %s", name)
        try:
            parameters = ParameterSet(**entry[PROPERTIES_KEY])
            phase_model = PhaseModel(**entry[PHASE_MODEL_KEY])
            sampling = SamplingPlan(**entry.get(SAMPLING_KEY, {}))
        except InvalidParameterError as e:
            logger.error("Invalid constants for material '%s': %s", name, e)
            raise InvalidParameterError(f"Material '{name}': {e}", parameter=e.parameter) from e
        except InvalidPhaseOrderingError as e:
            logger.error("Invalid phase model for material '%s': %s", name, e)
            raise InvalidPhaseOrderingError(f"Material '{name}': {e}", breakpoints=e.breakpoints) from e
        return MaterialRecord(
            id=entry[ID_KEY],
            name=name,
            color=entry[COLOR_KEY],
            parameters=parameters,
            phase_model=phase_model,
            sampling=sampling,
        )
