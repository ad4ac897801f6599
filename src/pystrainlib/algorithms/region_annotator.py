from typing import Dict, Tuple

from pystrainlib.core.exceptions import SynthesisError
from pystrainlib.core.models import KeyPoint, KeyPointLabel, ParameterSet, PhaseModel, Region, RegionName
from pystrainlib.data.constants import ProcessingConstants


class RegionAnnotator:
    """
    Derives key points and display regions of a curve from its inputs.

    Key points are computed from the ParameterSet and PhaseModel rather than
    looked up among the samples, so they are exact even when the sampling
    step skips over them. Regions are derived from the key points:

        Elastic           [0, elastic limit]
        Plastic           [elastic limit, ultimate]
        Strain Hardening  [yield point, ultimate]

    Plastic and Strain Hardening overlap between the yield point and the
    ultimate strain.
    """

    @staticmethod
    def annotate(parameters: ParameterSet,
                 phase_model: PhaseModel) -> Tuple[Tuple[KeyPoint, ...], Tuple[Region, ...]]:
        """Compute key points and regions for one material."""
        key_points = RegionAnnotator.key_points(parameters, phase_model)
        regions = RegionAnnotator.regions(key_points, phase_model.break_strain_percent)
        return key_points, regions

    @staticmethod
    def key_points(parameters: ParameterSet, phase_model: PhaseModel) -> Tuple[KeyPoint, ...]:
        """
        Compute the elastic limit, yield point and ultimate key points.
        Returns:
            Key points ordered by strain
        """
        to_percent = ProcessingConstants.STRAIN_TO_PERCENT
        return (
            KeyPoint(phase_model.elastic_limit_strain * to_percent,
                     parameters.youngs_modulus_mpa * phase_model.elastic_limit_strain,
                     KeyPointLabel.ELASTIC_LIMIT),
            KeyPoint(phase_model.yield_strain * to_percent,
                     parameters.yield_strength,
                     KeyPointLabel.YIELD_POINT),
            KeyPoint(phase_model.ultimate_strain * to_percent,
                     parameters.ultimate_strength,
                     KeyPointLabel.ULTIMATE),
        )

    @staticmethod
    def regions(key_points: Tuple[KeyPoint, ...], break_strain_percent: float) -> Tuple[Region, ...]:
        """
        Derive the region boundaries from the key points.
        Args:
            key_points: Elastic limit, yield point and ultimate key points
            break_strain_percent: End of the curve in percent strain
        Returns:
            Elastic, Plastic and Strain Hardening regions
        Raises:
            SynthesisError: If a key point is missing or a region is empty or out of range
        """
        by_label: Dict[KeyPointLabel, KeyPoint] = {kp.label: kp for kp in key_points}
        missing = [label.value for label in KeyPointLabel if label not in by_label]
        if missing:
            raise SynthesisError(f"Missing key points: {', '.join(missing)}")
        elastic_limit = by_label[KeyPointLabel.ELASTIC_LIMIT].strain_percent
        yield_point = by_label[KeyPointLabel.YIELD_POINT].strain_percent
        ultimate = by_label[KeyPointLabel.ULTIMATE].strain_percent
        regions = (
            Region(RegionName.ELASTIC, 0.0, elastic_limit),
            Region(RegionName.PLASTIC, elastic_limit, ultimate),
            Region(RegionName.STRAIN_HARDENING, yield_point, ultimate),
        )
        for region in regions:
            if not 0.0 <= region.start_strain_percent < region.end_strain_percent <= break_strain_percent:
                raise SynthesisError(
                    f"Region '{region.name.value}' [{region.start_strain_percent}, "
                    f"{region.end_strain_percent}] is empty or outside [0, {break_strain_percent}]")
        return regions
