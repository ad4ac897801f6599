"""Constants used for YAML parsing of material tables."""

# Table key
MATERIALS_KEY = "materials"

# Record keys
ID_KEY = "id"
NAME_KEY = "name"
COLOR_KEY = "color"

# Physical constants
PROPERTIES_KEY = "properties"
YOUNGS_MODULUS_KEY = "youngs_modulus"
YIELD_STRENGTH_KEY = "yield_strength"
ULTIMATE_STRENGTH_KEY = "ultimate_strength"
DENSITY_KEY = "density"

# Phase model
PHASE_MODEL_KEY = "phase_model"
ELASTIC_LIMIT_STRAIN_KEY = "elastic_limit_strain"
YIELD_STRAIN_KEY = "yield_strain"
ULTIMATE_STRAIN_KEY = "ultimate_strain"
BREAK_STRAIN_KEY = "break_strain"
HARDENING_EXPONENT_KEY = "hardening_exponent"
NECKING_FACTOR_KEY = "necking_factor"

# Sampling steps
SAMPLING_KEY = "sampling"
ELASTIC_STEP_KEY = "elastic_step"
YIELD_STEP_KEY = "yield_step"
PLASTIC_STEP_KEY = "plastic_step"
NECKING_STEP_KEY = "necking_step"

# Automatically export all constants (those that don't start with underscore)
__all__ = [name for name in globals() if not name.startswith('_') and name.isupper()]
