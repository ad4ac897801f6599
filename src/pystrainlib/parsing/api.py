import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pystrainlib.algorithms.curve_synthesizer import CurveSynthesizer
from pystrainlib.algorithms.region_annotator import RegionAnnotator
from pystrainlib.core.models import MaterialCurveData, ParameterSet, PhaseModel, SamplingPlan
from pystrainlib.parsing.config import yaml_keys
from pystrainlib.parsing.config.material_yaml_parser import MaterialTableParser
from pystrainlib.parsing.validation.parameter_validator import ParameterValidator

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "materials.yaml"


def validate(parameters: ParameterSet, phase_model: PhaseModel,
             sampling: Optional[SamplingPlan] = None) -> None:
    """
    Validate the inputs of a synthesis call without computing anything.
    Args:
        parameters: Physical constants of the material
        phase_model: Breakpoints and shape parameters of the material
        sampling: Per-phase strain steps (optional)
    Raises:
        InvalidParameterError: If a physical constant or sampling step is invalid
        InvalidPhaseOrderingError: If breakpoints or shape parameters are invalid
    """
    ParameterValidator.validate(parameters, phase_model, sampling)


def synthesize(parameters: ParameterSet, phase_model: PhaseModel,
               sampling: Optional[SamplingPlan] = None) -> MaterialCurveData:
    """
    Synthesize the stress-strain curve of one material.

    Pure and deterministic: identical inputs always give an identical result.
    Samples, key points and regions all derive from the same inputs, so they
    are mutually consistent by construction.
    Args:
        parameters: Physical constants of the material
        phase_model: Breakpoints and shape parameters of the material
        sampling: Per-phase strain steps (default: SamplingPlan())
    Returns:
        MaterialCurveData with samples, key points and regions
    Raises:
        ValidationError: If the inputs are invalid
        SynthesisError: If the numeric configuration is degenerate
    Examples:
        params = ParameterSet(youngs_modulus=200, yield_strength=250,
                              ultimate_strength=400, density=7850)
        phases = PhaseModel(elastic_limit_strain=0.0012, yield_strain=0.002,
                            ultimate_strain=0.20, break_strain=0.30,
                            hardening_exponent=0.5, necking_factor=0.8)
        curve = synthesize(params, phases)
        curve.peak  # CurveSample(strain_percent=20.0, stress_mpa=400.0)
    """
    validate(parameters, phase_model, sampling)
    samples = CurveSynthesizer.synthesize_samples(parameters, phase_model, sampling)
    key_points, regions = RegionAnnotator.annotate(parameters, phase_model)
    return MaterialCurveData(
        samples=samples,
        key_points=key_points,
        regions=regions,
        parameters=parameters,
        phase_model=phase_model,
    )


def default_table_path() -> Path:
    """Path of the material table bundled with the package."""
    return Path(str(resources.files("pystrainlib.data.materials").joinpath(DEFAULT_TABLE)))


def load_repository(yaml_path: Optional[Union[str, Path]] = None, eager: bool = True):
    """
    Create a material repository from a YAML material table.
    Args:
        yaml_path: Path to the table (default: the bundled table)
        eager: Synthesize every curve while populating the repository (default: True)
    Returns:
        MaterialRepository
    Examples:
        repository = load_repository()
        [record.name for record in repository.list_materials()]
        steel = repository.get_material_by_name('structural steel')
    """
    from pystrainlib.repository.material_repository import MaterialRepository
    path = Path(yaml_path) if yaml_path is not None else default_table_path()
    logger.info("Loading material repository from: %s (eager=%s)", path, eager)
    try:
        repository = MaterialRepository.from_yaml(path, eager=eager)
        logger.info("Successfully loaded %d materials", len(repository))
        return repository
    except Exception as e:
        logger.error("Failed to load material repository from %s: %s", path, e, exc_info=True)
        raise


def get_supported_keys() -> Dict[str, List[str]]:
    """
    Returns the keys accepted in a material table, per section.
    Returns:
        Dictionary mapping section names to sorted key lists
    """
    return {
        yaml_keys.MATERIALS_KEY: sorted(MaterialTableParser.REQUIRED_RECORD_KEYS
                                        | MaterialTableParser.OPTIONAL_RECORD_KEYS),
        yaml_keys.PROPERTIES_KEY: sorted(MaterialTableParser.PROPERTY_KEYS),
        yaml_keys.PHASE_MODEL_KEY: sorted(MaterialTableParser.PHASE_MODEL_KEYS),
        yaml_keys.SAMPLING_KEY: sorted(MaterialTableParser.SAMPLING_KEYS),
    }


def get_material_info(yaml_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Get basic information about a material table without synthesizing any curve.
    Args:
        yaml_path: Path to the YAML material table
    Returns:
        Dictionary containing table information
    Example:
        info = get_material_info('materials.yaml')
        print(f"Materials: {info['names']}")
    """
    try:
        parser = MaterialTableParser(yaml_path=yaml_path)
        entries = parser.config[yaml_keys.MATERIALS_KEY]
        return {
            'path': str(parser.config_path),
            'total_materials': len(entries),
            'ids': [entry[yaml_keys.ID_KEY] for entry in entries],
            'names': [entry[yaml_keys.NAME_KEY] for entry in entries],
            'custom_sampling': [entry[yaml_keys.NAME_KEY] for entry in entries
                                if yaml_keys.SAMPLING_KEY in entry],
        }
    except Exception as e:
        logger.error("Failed to get material info from %s: %s", yaml_path, e, exc_info=True)
        raise
