"""End-to-end integration tests."""

import pytest
import sympy as sp

import pystrainlib
from pystrainlib import (
    InvalidParameterError, KeyPointLabel, ParameterSet, PhaseModel, PiecewiseBuilder, RegionName,
    ValidationError, load_repository, synthesize
)


class TestEndToEnd:
    """End-to-end integration tests."""
    def test_structural_steel_scenario(self):
        """Test the full structural steel curve from constants to annotated samples."""
        parameters = ParameterSet(youngs_modulus=200, yield_strength=250, ultimate_strength=400, density=7850)
        phase_model = PhaseModel(elastic_limit_strain=0.0012, yield_strain=0.002, ultimate_strain=0.20,
                                 break_strain=0.30, hardening_exponent=0.5, necking_factor=0.8)
        curve = synthesize(parameters, phase_model)
        by_strain = {round(s.strain_percent, 9): s.stress_mpa for s in curve.samples}
        # Elastic limit, yield point and ultimate are sampled exactly
        assert by_strain[0.12] == pytest.approx(240.0)
        assert by_strain[0.2] == pytest.approx(250.0)
        assert by_strain[20.0] == pytest.approx(400.0)
        assert max(curve.stresses) == pytest.approx(400.0)
        assert curve.samples[-1].strain_percent == pytest.approx(30.0)
        assert curve.samples[-1].stress_mpa < 400.0
        assert [kp.label for kp in curve.key_points] == list(KeyPointLabel)
        assert [r.name for r in curve.regions] == list(RegionName)

    def test_invalid_strengths_scenario(self):
        """Test that yield above ultimate fails validation with no partial output."""
        with pytest.raises(ValidationError) as exc_info:
            synthesize(ParameterSet(youngs_modulus=200, yield_strength=300, ultimate_strength=250, density=7850),
                       PhaseModel(elastic_limit_strain=0.0012, yield_strain=0.002, ultimate_strain=0.20,
                                  break_strain=0.30, hardening_exponent=0.5, necking_factor=0.8))
        assert isinstance(exc_info.value, InvalidParameterError)

    def test_repository_round_trip(self, write_yaml, steel_entry, copper_entry):
        """Test loading a table, listing it and fetching curves."""
        repository = load_repository(write_yaml({'materials': [steel_entry, copper_entry]}))
        listing = [record.to_dict() for record in repository.list_materials()]
        assert [item['name'] for item in listing] == ['Structural Steel', 'Copper']
        assert 'curveData' not in listing[0]
        payload = repository.get_material(3).to_dict()
        assert payload['keyPoints'][-1] == {'x': pytest.approx(30.0), 'y': 220, 'label': 'Ultimate'}
        assert payload['regions'][2]['name'] == 'Strain Hardening'
        assert repository.get_material(2) is None

    def test_symbolic_and_sampled_agree(self):
        """Test that the symbolic curve passes through every sample of the bundled materials."""
        eps = sp.Symbol('eps')
        repository = load_repository()
        for record in repository.list_materials():
            curve = repository.get_material(record.id)
            stress = PiecewiseBuilder.build_stress_strain(record.parameters, record.phase_model, eps)
            for sample in curve.samples[::10]:
                value = float(stress.subs(eps, sample.strain_percent / 100.0))
                assert value == pytest.approx(sample.stress_mpa, rel=1e-5, abs=1e-6)

    def test_package_version(self):
        assert pystrainlib.__version__
