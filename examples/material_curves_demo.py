"""Demonstration script for stress-strain curve synthesis."""
import logging
from pathlib import Path
import sympy as sp

from pystrainlib.parsing.api import load_repository, get_supported_keys
from pystrainlib.algorithms.piecewise_builder import PiecewiseBuilder
from pystrainlib.visualization.plotters import CurveVisualizer


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )
    # Silence noisy libraries
    logging.getLogger('matplotlib').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)
    logging.getLogger('fontTools').setLevel(logging.WARNING)


def demonstrate_material_curves():
    """Demonstrate curve synthesis for the bundled material table."""
    setup_logging()
    eps = sp.Symbol('eps')
    output_dir = Path(__file__).parent / "stress_strain_plots"
    repository = load_repository()
    print(f"\n{'=' * 80}")
    print(f"Supported table keys: {get_supported_keys()}")
    for record in repository.list_materials():
        curve = repository.get_material(record.id)
        print(f"\n{'=' * 80}")
        print(f"MATERIAL: {record.name} (id {record.id}, color {record.color})")
        print(f"{'=' * 80}")
        for key, value in record.to_dict().items():
            print(f"{key:<20}: {value}")
        print(f"{'Samples':<20}: {len(curve)}")
        for kp in curve.key_points:
            print(f"  {kp.label.value:<15} strain = {kp.strain_percent:8.4f} %   stress = {kp.stress_mpa:8.2f} MPa")
        for region in curve.regions:
            print(f"  {region.name.value:<18} [{region.start_strain_percent:.4f}, {region.end_strain_percent:.4f}] %")
        stress = PiecewiseBuilder.build_stress_strain(record.parameters, record.phase_model, eps)
        mid = (record.phase_model.yield_strain + record.phase_model.ultimate_strain) / 2
        print(f"  Symbolic stress at {mid * 100:.3f} %: {float(stress.subs(eps, mid)):.2f} MPa "
              f"(sampled: {curve.stress_at(mid * 100):.2f} MPa)")
        visualizer = CurveVisualizer()
        visualizer.plot_curve(curve, title=record.name, color=record.color, label=record.name)
        visualizer.save(output_dir / f"{record.name.replace(' ', '_')}.png")
        visualizer.close()
    visualizer = CurveVisualizer()
    visualizer.plot_materials(repository)
    visualizer.save(output_dir / "all_materials.png")
    visualizer.close()


if __name__ == "__main__":
    demonstrate_material_curves()
