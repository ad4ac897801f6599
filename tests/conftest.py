"""Shared pytest fixtures for PyStrainLib tests."""
import pytest
from pathlib import Path
from ruamel.yaml import YAML

from pystrainlib.core.models import ParameterSet, PhaseModel, SamplingPlan
from pystrainlib.parsing.api import synthesize


@pytest.fixture
def table_path():
    """Path to the bundled material table."""
    return Path(__file__).parent.parent / "src" / "pystrainlib" / "data" / "materials" / "materials.yaml"


@pytest.fixture
def steel_parameters():
    """Physical constants of structural steel."""
    return ParameterSet(youngs_modulus=200, yield_strength=250, ultimate_strength=400, density=7850)


@pytest.fixture
def steel_phase_model():
    """Phase model of structural steel."""
    return PhaseModel(elastic_limit_strain=0.0012, yield_strain=0.002, ultimate_strain=0.20,
                      break_strain=0.30, hardening_exponent=0.5, necking_factor=0.8)


@pytest.fixture
def default_sampling():
    return SamplingPlan()


@pytest.fixture
def steel_curve(steel_parameters, steel_phase_model):
    """Synthesized curve of structural steel with default sampling."""
    return synthesize(steel_parameters, steel_phase_model)


@pytest.fixture
def steel_entry():
    """Material table entry for structural steel."""
    return {
        'id': 1,
        'name': 'Structural Steel',
        'color': '#6B7280',
        'properties': {
            'youngs_modulus': 200,
            'yield_strength': 250,
            'ultimate_strength': 400,
            'density': 7850,
        },
        'phase_model': {
            'elastic_limit_strain': 0.0012,
            'yield_strain': 0.002,
            'ultimate_strain': 0.20,
            'break_strain': 0.30,
            'hardening_exponent': 0.5,
            'necking_factor': 0.8,
        },
    }


@pytest.fixture
def copper_entry():
    """Material table entry for copper, with custom sampling."""
    return {
        'id': 3,
        'name': 'Copper',
        'color': '#F59E0B',
        'properties': {
            'youngs_modulus': 110,
            'yield_strength': 70,
            'ultimate_strength': 220,
            'density': 8960,
        },
        'phase_model': {
            'elastic_limit_strain': 0.0005,
            'yield_strain': 0.00065,
            'ultimate_strain': 0.30,
            'break_strain': 0.45,
            'hardening_exponent': 0.4,
            'necking_factor': 0.5,
        },
        'sampling': {'plastic_step': 0.01},
    }


@pytest.fixture
def write_yaml(tmp_path):
    """Write a dictionary to a YAML file in a temporary directory and return its path."""
    def _write(config, filename="materials.yaml"):
        path = tmp_path / filename
        yaml = YAML()
        with open(path, 'w', encoding='utf-8') as f:
            yaml.dump(config, f)
        return path
    return _write
