"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration.  Tests build their own
``Settings`` instances and pass them to ``create_app``.

The default reference values used to seed every new catalog also live
here, as a single named constant.
"""

import os
from dataclasses import dataclass
from typing import Dict, Tuple


# Initial contents of the reference catalog.  Every ``ReferenceCatalog``
# copies these lists, so changing one catalog never affects another.
DEFAULT_REFERENCE_VALUES: Dict[str, Tuple[str, ...]] = {
    "models": ("car", "humanoid", "transformation"),
    "techs": ("AI", "car", "robot", "cyborg", "humanoid"),
    "status": ("progress", "active", "inactive"),
}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Robot Registry API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  Console logging is always enabled.
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the robot and reference routes are mounted.
    # Empty by default so that routes live at ``/robots`` and
    # ``/references``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # JSON file with ``{"robots": [...]}`` loaded once at startup.  A
    # relative path is resolved against the project root by the seed
    # service.  Set to an empty string to start with an empty store.
    seed_data_path: str = os.getenv("SEED_DATA_PATH", "data/initial_data.json")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
