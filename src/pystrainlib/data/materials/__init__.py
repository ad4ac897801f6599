"""Material table files and data."""

# This module contains the bundled material table:
# - materials.yaml: Structural Steel, Aluminum Alloy, Copper, Titanium Alloy

# The table is loaded dynamically via the YAML parser
# rather than being imported as a Python module

__all__ = []
