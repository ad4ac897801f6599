"""Unit tests for the public API functions."""

from types import SimpleNamespace

import pytest

from pystrainlib.core.exceptions import InvalidParameterError, InvalidPhaseOrderingError, ValidationError
from pystrainlib.core.models import KeyPointLabel, MaterialCurveData, ParameterSet, PhaseModel, SamplingPlan
from pystrainlib.parsing.api import (
    default_table_path, get_material_info, get_supported_keys, load_repository, synthesize, validate
)


class TestSynthesize:
    """Test cases for synthesize."""
    def test_returns_curve_data(self, steel_parameters, steel_phase_model):
        curve = synthesize(steel_parameters, steel_phase_model)
        assert isinstance(curve, MaterialCurveData)
        assert curve.parameters is steel_parameters
        assert curve.phase_model is steel_phase_model

    def test_key_points_consistent_with_samples(self, steel_curve):
        """Test that every key point lies on the sampled curve."""
        for kp in steel_curve.key_points:
            assert steel_curve.stress_at(kp.strain_percent) == pytest.approx(kp.stress_mpa)

    def test_regions_cover_key_points(self, steel_curve):
        elastic_limit = steel_curve.key_point(KeyPointLabel.ELASTIC_LIMIT)
        ultimate = steel_curve.key_point(KeyPointLabel.ULTIMATE)
        for region in steel_curve.regions:
            assert region.start_strain_percent >= 0.0
            assert region.end_strain_percent <= ultimate.strain_percent + 1e-9
        assert steel_curve.regions[0].end_strain_percent == pytest.approx(elastic_limit.strain_percent)

    def test_identical_inputs_identical_result(self, steel_parameters, steel_phase_model):
        assert synthesize(steel_parameters, steel_phase_model) == synthesize(steel_parameters, steel_phase_model)

    def test_sampling_override(self, steel_parameters, steel_phase_model):
        coarse = synthesize(steel_parameters, steel_phase_model, SamplingPlan(elastic_step=6e-4))
        fine = synthesize(steel_parameters, steel_phase_model)
        assert len(coarse) < len(fine)
        assert coarse.key_points == fine.key_points

    def test_inconsistent_elastic_phase(self, steel_parameters):
        """Test that an elastic limit stress above the ultimate strength is rejected before synthesis."""
        phase_model = PhaseModel(elastic_limit_strain=0.0025, yield_strain=0.003, ultimate_strain=0.20,
                                 break_strain=0.30, hardening_exponent=0.5, necking_factor=0.8)
        with pytest.raises(InvalidPhaseOrderingError):
            synthesize(steel_parameters, phase_model)

    def test_descending_yield_transition(self, steel_parameters):
        """Test a curve whose elastic limit stress lies above the yield strength."""
        phase_model = PhaseModel(elastic_limit_strain=0.0013, yield_strain=0.002, ultimate_strain=0.20,
                                 break_strain=0.30, hardening_exponent=0.5, necking_factor=0.8)
        curve = synthesize(steel_parameters, phase_model)
        by_strain = {round(s.strain_percent, 9): s.stress_mpa for s in curve.samples}
        assert by_strain[0.13] == pytest.approx(260.0)
        assert by_strain[0.2] == pytest.approx(250.0)
        transition = [s.stress_mpa for s in curve.samples if 0.13 - 1e-9 <= s.strain_percent <= 0.2 + 1e-9]
        assert len(transition) == 8
        assert all(b < a for a, b in zip(transition, transition[1:]))
        assert curve.peak.strain_percent == pytest.approx(20.0)
        assert curve.peak.stress_mpa == pytest.approx(400.0)
        assert curve.samples[-1].stress_mpa < 400.0
        assert min(curve.stresses) >= 0.0

    def test_validate_rejects_unvalidated_strengths(self, steel_phase_model):
        """Test that validate re-checks inputs that bypassed construction."""
        parameters = SimpleNamespace(youngs_modulus=200, yield_strength=300, ultimate_strength=250,
                                     density=7850, youngs_modulus_mpa=200000.0)
        with pytest.raises(ValidationError):
            validate(parameters, steel_phase_model)

    def test_validate_accepts_valid(self, steel_parameters, steel_phase_model):
        validate(steel_parameters, steel_phase_model)

    def test_invalid_strengths_never_synthesized(self):
        with pytest.raises(ValidationError):
            synthesize(ParameterSet(youngs_modulus=200, yield_strength=300, ultimate_strength=250, density=7850),
                       PhaseModel(elastic_limit_strain=0.0012, yield_strain=0.002, ultimate_strain=0.20,
                                  break_strain=0.30, hardening_exponent=0.5, necking_factor=0.8))


class TestTableFunctions:
    """Test cases for table-level API functions."""
    def test_default_table_path(self):
        path = default_table_path()
        assert path.name == "materials.yaml"
        assert path.exists()

    def test_load_default_repository(self):
        repository = load_repository()
        assert len(repository) == 4

    def test_load_repository_from_path(self, write_yaml, steel_entry):
        repository = load_repository(write_yaml({'materials': [steel_entry]}), eager=False)
        assert [record.name for record in repository.list_materials()] == ['Structural Steel']

    def test_load_repository_invalid(self, write_yaml, steel_entry):
        steel_entry['properties']['density'] = -1
        with pytest.raises(InvalidParameterError, match="density"):
            load_repository(write_yaml({'materials': [steel_entry]}))

    def test_get_supported_keys(self):
        keys = get_supported_keys()
        assert set(keys) == {'materials', 'properties', 'phase_model', 'sampling'}
        assert 'necking_factor' in keys['phase_model']
        assert keys['sampling'] == ['elastic_step', 'necking_step', 'plastic_step', 'yield_step']

    def test_get_material_info(self, table_path):
        info = get_material_info(table_path)
        assert info['total_materials'] == 4
        assert info['ids'] == [1, 2, 3, 4]
        assert info['custom_sampling'] == ['Aluminum Alloy', 'Copper', 'Titanium Alloy']

    def test_get_material_info_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            get_material_info(tmp_path / "missing.yaml")
