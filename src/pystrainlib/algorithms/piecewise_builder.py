import logging
from typing import Optional

import sympy as sp

from pystrainlib.core.models import MaterialCurveData, ParameterSet, PhaseModel

logger = logging.getLogger(__name__)


class PiecewiseBuilder:
    """Symbolic counterparts of the stress-strain curve."""

    @staticmethod
    def build_stress_strain(parameters: ParameterSet, phase_model: PhaseModel,
                            eps: Optional[sp.Symbol] = None) -> sp.Piecewise:
        """
        Create the four-phase model as a piecewise function of fractional strain.
        Args:
            parameters: Physical constants of the material
            phase_model: Breakpoints and shape parameters of the material
            eps: Strain symbol (default: sp.Symbol('eps'))
        Returns:
            sp.Piecewise: Stress in MPa; 0 below zero strain and beyond the break strain
        Examples:
            eps = sp.Symbol('eps')
            stress = PiecewiseBuilder.build_stress_strain(params, phases, eps)
            float(stress.subs(eps, 0.002))  # yield strength
        """
        if eps is None:
            eps = sp.Symbol('eps')
        e_mpa = sp.Float(parameters.youngs_modulus_mpa)
        s_y = sp.Float(parameters.yield_strength)
        s_u = sp.Float(parameters.ultimate_strength)
        e_el, e_y, e_u, e_b = (sp.Float(v) for v in phase_model.breakpoints)
        n = sp.Float(phase_model.hardening_exponent)
        f = sp.Float(phase_model.necking_factor)
        logger.debug("Building stress-strain piecewise with breakpoints %s", phase_model.breakpoints)
        elastic_limit_stress = e_mpa * e_el
        conditions = [
            (sp.Float(0), eps < 0),
            (e_mpa * eps, eps <= e_el),
            (elastic_limit_stress + (s_y - elastic_limit_stress) * (eps - e_el) / (e_y - e_el), eps <= e_y),
            (s_y + (s_u - s_y) * ((eps - e_y) / (e_u - e_y)) ** n, eps <= e_u),
            (s_u - (s_u - s_y) * f * (eps - e_u) / (e_b - e_u), eps <= e_b),
            (sp.Float(0), True),
        ]
        return sp.Piecewise(*conditions)

    @staticmethod
    def build_from_samples(data: MaterialCurveData, x: Optional[sp.Symbol] = None) -> sp.Piecewise:
        """
        Create a linear interpolation of the synthesized samples.
        Args:
            data: Synthesized curve
            x: Strain symbol in percent (default: sp.Symbol('x'))
        Returns:
            sp.Piecewise: Interpolated stress in MPa; 0 outside the sampled range
        """
        if x is None:
            x = sp.Symbol('x')
        strains = [float(v) for v in data.strains]
        stresses = [float(v) for v in data.stresses]
        if len(strains) < 2:
            raise ValueError(f"At least 2 samples required for interpolation, got {len(strains)}")
        logger.debug("Building interpolation piecewise over %d samples", len(strains))
        conditions = [(sp.Float(0), x < strains[0])]
        for i in range(len(strains) - 1):
            slope = (stresses[i + 1] - stresses[i]) / (strains[i + 1] - strains[i])
            conditions.append((stresses[i] + slope * (x - strains[i]), x < strains[i + 1]))
        conditions.append((sp.Float(stresses[-1]), sp.Eq(x, strains[-1])))
        conditions.append((sp.Float(0), True))
        return sp.Piecewise(*conditions)
