import logging
import re
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from pystrainlib.core.models import MaterialCurveData
from pystrainlib.data.constants import ProcessingConstants, PropertyUnits

logger = logging.getLogger(__name__)

_RGBA_PATTERN = re.compile(r'^rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*([\d.]+)\s*)?\)$')


def css_to_rgba(color: str) -> Union[str, Tuple[float, float, float, float]]:
    """
    Convert a CSS 'rgba(r, g, b, a)' color into a matplotlib RGBA tuple.
    Other color strings (e.g. '#6B7280') are returned unchanged.
    """
    match = _RGBA_PATTERN.match(color.strip())
    if match is None:
        return color
    r, g, b, a = match.groups()
    return int(r) / 255.0, int(g) / 255.0, int(b) / 255.0, float(a) if a is not None else 1.0


class CurveVisualizer:
    """Handles visualization of synthesized stress-strain curves."""

    KEY_POINT_MARKERS = {
        'Elastic Limit': 's',
        'Yield Point': 'o',
        'Ultimate': '^',
    }

    # --- Constructor ---
    def __init__(self, figsize: Tuple[float, float] = (12, 7)) -> None:
        self.setup_style()
        self.fig, self.ax = plt.subplots(figsize=figsize)
        self.plotted_materials = []
        logger.debug("CurveVisualizer initialized with figure size %s", figsize)

    @staticmethod
    def setup_style() -> None:
        plt.rcParams.update({
            'font.size': 10,
            'font.family': 'sans-serif',
            'font.sans-serif': ['DejaVu Sans', 'Arial', 'Helvetica', 'Liberation Sans'],
            'axes.titlesize': 12,
            'axes.labelsize': 10,
            'xtick.labelsize': 9,
            'ytick.labelsize': 9,
            'legend.fontsize': 9,
            'axes.grid': True,
            'grid.alpha': 0.3,
            'grid.linestyle': '--',
            'axes.axisbelow': True,
            'figure.facecolor': 'white',
            'axes.facecolor': 'white',
            'savefig.facecolor': 'white',
            'savefig.dpi': 300,
        })

    # --- Public API Methods ---
    def plot_curve(self, data: MaterialCurveData, ax: Optional[Axes] = None,
                   title: Optional[str] = None, color: Optional[str] = None,
                   label: Optional[str] = None, show_regions: bool = True,
                   show_key_points: bool = True) -> Axes:
        """
        Plot one curve with its region bands and key-point markers.
        Args:
            data: Synthesized curve
            ax: Axes to draw on (default: the visualizer's own axes)
            title: Plot title
            color: Line color (default: matplotlib cycle)
            label: Legend label of the curve
            show_regions: Draw the named regions as shaded bands
            show_key_points: Draw the key points as annotated markers
        Returns:
            The axes drawn on
        """
        ax = ax if ax is not None else self.ax
        logger.info("Plotting stress-strain curve%s with %d samples",
                    f" '{label}'" if label else "", len(data))
        if show_regions:
            self._draw_regions(ax, data)
        line, = ax.plot(data.strains, data.stresses, color=color, linewidth=2.5, label=label, zorder=3)
        if show_key_points:
            self._draw_key_points(ax, data, line.get_color())
        self._style_axes(ax, title)
        if label:
            self.plotted_materials.append(label)
        return ax

    def plot_materials(self, repository, ids: Optional[Iterable[int]] = None,
                       title: str = "Stress-Strain Curves") -> Axes:
        """
        Overlay the curves of several repository materials, in their table colors.
        Args:
            repository: MaterialRepository providing records and curves
            ids: Material ids to plot (default: all)
            title: Plot title
        Returns:
            The visualizer's axes
        """
        records = repository.list_materials()
        if ids is not None:
            wanted = set(ids)
            missing = wanted - {record.id for record in records}
            if missing:
                raise KeyError(f"Unknown material ids: {sorted(missing)}")
            records = [record for record in records if record.id in wanted]
        logger.info("Plotting %d materials", len(records))
        for record in records:
            data = repository.get_material(record.id)
            self.plot_curve(data, color=record.color, label=record.name,
                            show_regions=len(records) == 1, show_key_points=True)
        self._style_axes(self.ax, title)
        self.ax.legend(loc='lower right')
        return self.ax

    def save(self, path: Union[str, Path]) -> Path:
        """Save the figure and return its path."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.fig.savefig(path, bbox_inches='tight')
        logger.info("Saved stress-strain plot to: %s", path)
        return path

    def close(self) -> None:
        plt.close(self.fig)

    # --- Private helpers ---
    @staticmethod
    def _draw_regions(ax: Axes, data: MaterialCurveData) -> None:
        for region in data.regions:
            style = region.style
            ax.axvspan(region.start_strain_percent, region.end_strain_percent,
                       color=css_to_rgba(style.color), label=region.name.value, zorder=1)

    def _draw_key_points(self, ax: Axes, data: MaterialCurveData, color: str) -> None:
        for kp in data.key_points:
            ax.plot(kp.strain_percent, kp.stress_mpa, linestyle='none',
                    marker=self.KEY_POINT_MARKERS.get(kp.label.value, 'o'),
                    markersize=7, color=color, markeredgecolor='black', zorder=4)
            ax.annotate(f"{kp.label.value}\n({kp.strain_percent:.3g}%, {kp.stress_mpa:.0f} MPa)",
                        xy=(kp.strain_percent, kp.stress_mpa), xytext=(8, -14),
                        textcoords='offset points', fontsize=8,
                        bbox=dict(facecolor='white', alpha=0.8, boxstyle='round,pad=0.3'))

    @staticmethod
    def _style_axes(ax: Axes, title: Optional[str]) -> None:
        ax.set_xlabel(f"Strain ({PropertyUnits.STRAIN})", fontsize=12, fontweight='bold')
        ax.set_ylabel(f"Stress ({PropertyUnits.STRESS})", fontsize=12, fontweight='bold')
        if title:
            ax.set_title(title, fontsize=14, fontweight='bold', pad=10)
        ax.set_xmargin(ProcessingConstants.STRAIN_PADDING_FACTOR)
        ax.set_ymargin(ProcessingConstants.STRESS_PADDING_FACTOR)
        ax.set_ylim(bottom=0)
        for spine in ax.spines.values():
            spine.set_color('#CCCCCC')
            spine.set_linewidth(1.2)
