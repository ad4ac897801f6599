"""Plotting of synthesized stress-strain curves."""

from .plotters import CurveVisualizer, css_to_rgba

__all__ = ["CurveVisualizer", "css_to_rgba"]
