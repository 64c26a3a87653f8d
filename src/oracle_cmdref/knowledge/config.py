"""Catalog resource path configuration.

Paths are resolved relative to this package's resources/ directory.
"""

from pathlib import Path

# Base path for bundled resources
_RESOURCES_DIR = Path(__file__).parent / "resources"

# Static command catalog (version-controlled, JSON format)
# Oracle Database, OCI CLI, Oracle Linux, Oracle VM and Enterprise Manager commands
CATALOG_PATH = _RESOURCES_DIR / "catalog.json"

# Catalog schema version understood by the loader
CATALOG_SCHEMA_VERSION = 1
