"""Unit tests for CurveSynthesizer."""

import numpy as np
import pytest

from pystrainlib.algorithms.curve_synthesizer import CurveSynthesizer, Phase
from pystrainlib.core.exceptions import SynthesisError
from pystrainlib.core.models import ParameterSet, PhaseModel, SamplingPlan


class TestBuildPhaseGrid:
    """Test cases for per-phase strain grids."""
    def test_grid_with_start(self):
        """Test a grid that owns its start point."""
        grid = CurveSynthesizer.build_phase_grid(Phase("Elastic", 0.0, 1.0, 0.3, True))
        np.testing.assert_allclose(grid, [0.0, 0.3, 0.6, 0.9, 1.0])

    def test_grid_without_start(self):
        """Test that the start is omitted and the end appears exactly once."""
        grid = CurveSynthesizer.build_phase_grid(Phase("Necking", 0.0, 1.0, 0.25, False))
        np.testing.assert_allclose(grid, [0.25, 0.5, 0.75, 1.0])
        assert grid[-1] == 1.0

    def test_near_duplicate_end_dropped(self):
        """Test that an interior point within a tiny gap of the end is dropped."""
        grid = CurveSynthesizer.build_phase_grid(Phase("Elastic", 0.0, 1.0, 0.333, True))
        np.testing.assert_allclose(grid, [0.0, 0.333, 0.666, 1.0])

    def test_step_larger_than_phase(self):
        """Test that a coarse step still samples the phase end."""
        grid = CurveSynthesizer.build_phase_grid(Phase("Yield transition", 0.0012, 0.002, 0.01, False))
        np.testing.assert_allclose(grid, [0.002])

    def test_empty_interval(self):
        with pytest.raises(SynthesisError, match="Necking phase: empty strain interval"):
            CurveSynthesizer.build_phase_grid(Phase("Necking", 0.2, 0.2, 0.01, False))

    def test_invalid_step(self):
        with pytest.raises(SynthesisError, match="invalid strain step"):
            CurveSynthesizer.build_phase_grid(Phase("Elastic", 0.0, 0.1, 0.0, True))

    def test_too_many_samples(self):
        """Test the per-phase sample limit."""
        with pytest.raises(SynthesisError, match="limit is"):
            CurveSynthesizer.build_phase_grid(Phase("Elastic", 0.0, 1.0, 1e-6, True))


class TestSynthesizeSamples:
    """Test cases for full curve sampling."""
    def test_steel_sample_count(self, steel_parameters, steel_phase_model):
        """Test the number of samples per phase for structural steel."""
        samples = CurveSynthesizer.synthesize_samples(steel_parameters, steel_phase_model)
        # 13 elastic (with origin), 8 yield, 40 hardening, 10 necking
        assert len(samples) == 71

    def test_starts_at_origin(self, steel_parameters, steel_phase_model):
        samples = CurveSynthesizer.synthesize_samples(steel_parameters, steel_phase_model)
        assert samples[0].strain_percent == 0.0
        assert samples[0].stress_mpa == 0.0

    def test_ends_at_break_strain(self, steel_parameters, steel_phase_model):
        """Test that the last sample lies at the break strain with the necking end stress."""
        last = CurveSynthesizer.synthesize_samples(steel_parameters, steel_phase_model)[-1]
        assert last.strain_percent == pytest.approx(30.0)
        assert last.stress_mpa == pytest.approx(400.0 - 150.0 * 0.8)

    def test_strain_strictly_increasing(self, steel_parameters, steel_phase_model):
        strains = np.array([s.strain_percent for s in
                            CurveSynthesizer.synthesize_samples(steel_parameters, steel_phase_model)])
        assert np.all(np.diff(strains) > 0)

    def test_breakpoints_sampled(self, steel_parameters, steel_phase_model):
        """Test that every breakpoint is present in the samples."""
        samples = CurveSynthesizer.synthesize_samples(steel_parameters, steel_phase_model)
        by_strain = {round(s.strain_percent, 9): s.stress_mpa for s in samples}
        assert by_strain[0.12] == pytest.approx(240.0)
        assert by_strain[0.2] == pytest.approx(250.0)
        assert by_strain[20.0] == pytest.approx(400.0)

    def test_maximum_at_ultimate(self, steel_parameters, steel_phase_model):
        """Test that the global stress maximum is the ultimate strength."""
        samples = CurveSynthesizer.synthesize_samples(steel_parameters, steel_phase_model)
        peak = max(samples, key=lambda s: s.stress_mpa)
        assert peak.strain_percent == pytest.approx(20.0)
        assert peak.stress_mpa == pytest.approx(400.0)

    def test_necking_decreasing(self, steel_parameters, steel_phase_model):
        samples = CurveSynthesizer.synthesize_samples(steel_parameters, steel_phase_model)
        necking = [s.stress_mpa for s in samples if s.strain_percent >= 20.0 - 1e-9]
        assert all(b < a for a, b in zip(necking, necking[1:]))

    def test_custom_sampling_changes_density(self, steel_parameters, steel_phase_model):
        """Test that a coarser plastic step yields fewer samples with the same breakpoints."""
        default = CurveSynthesizer.synthesize_samples(steel_parameters, steel_phase_model)
        coarse = CurveSynthesizer.synthesize_samples(steel_parameters, steel_phase_model,
                                                     SamplingPlan(plastic_step=0.01))
        assert len(coarse) < len(default)
        assert coarse[-1] == default[-1]

    def test_deterministic(self, steel_parameters, steel_phase_model):
        first = CurveSynthesizer.synthesize_samples(steel_parameters, steel_phase_model)
        second = CurveSynthesizer.synthesize_samples(steel_parameters, steel_phase_model)
        assert first == second

    def test_linear_hardening(self):
        """Test that an exponent of 1 gives a straight hardening line."""
        parameters = ParameterSet(youngs_modulus=100, yield_strength=100, ultimate_strength=200, density=1000)
        phase_model = PhaseModel(elastic_limit_strain=0.0005, yield_strain=0.001, ultimate_strain=0.101,
                                 break_strain=0.2, hardening_exponent=1.0, necking_factor=0.5)
        stress = CurveSynthesizer.stress_at_strain(parameters, phase_model, 0.051)
        assert stress == pytest.approx(150.0)


class TestStressAtStrain:
    """Test cases for single-point evaluation."""
    @pytest.mark.parametrize("strain, expected", [
        (0.0, 0.0),
        (0.0006, 120.0),
        (0.0012, 240.0),
        (0.0016, 245.0),
        (0.002, 250.0),
        (0.0515, 325.0),
        (0.20, 400.0),
        (0.25, 340.0),
        (0.30, 280.0),
        (0.31, 0.0),
    ])
    def test_steel_values(self, steel_parameters, steel_phase_model, strain, expected):
        assert CurveSynthesizer.stress_at_strain(steel_parameters, steel_phase_model, strain) == \
            pytest.approx(expected)

    def test_negative_strain(self, steel_parameters, steel_phase_model):
        with pytest.raises(ValueError, match="non-negative"):
            CurveSynthesizer.stress_at_strain(steel_parameters, steel_phase_model, -0.001)

    def test_matches_samples(self, steel_parameters, steel_phase_model):
        """Test that sampled stresses agree with single-point evaluation."""
        for sample in CurveSynthesizer.synthesize_samples(steel_parameters, steel_phase_model)[::7]:
            expected = CurveSynthesizer.stress_at_strain(steel_parameters, steel_phase_model,
                                                         sample.strain_percent / 100.0)
            assert sample.stress_mpa == pytest.approx(expected)

    def test_unknown_phase(self, steel_parameters, steel_phase_model):
        with pytest.raises(SynthesisError, match="unknown phase"):
            CurveSynthesizer.evaluate_phase("Creep", steel_parameters, steel_phase_model, np.array([0.1]))
