"""
Startup seeding of the robot store.

The seed file is a JSON document of the form ``{"robots": [...]}``.
It is read once when the application starts.  Entries that cannot be
parsed as a robot, or that the store rejects, are skipped with a
warning; the remaining robots are loaded through ``RobotStore.upsert``
so seeding obeys the same validation as the API.

A missing seed file is an error and the service refuses to start.  A
file that exists but does not decode to ``{"robots": [...]}`` is
logged and the service starts with an empty store.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError as SchemaValidationError

from robot_api.app.schemas.robot import Robot
from robot_api.app.services.errors import ValidationError
from robot_api.app.services.robot_store import RobotStore


logger = logging.getLogger(__name__)


def get_seed_data_path(seed_data_path: str) -> str:
    """Resolve ``seed_data_path`` to an absolute path.

    Absolute paths are returned unchanged.  Relative paths are resolved
    against the project root (the directory containing the
    ``robot_api`` package).
    """
    if os.path.isabs(seed_data_path):
        return seed_data_path
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / seed_data_path).resolve())


def load_initial_data(store: RobotStore, seed_data_path: str) -> int:
    """Load robots from ``seed_data_path`` into ``store``.

    Returns the number of robots loaded.  Raises ``FileNotFoundError``
    if the file does not exist.  A file that does not decode to
    ``{"robots": [...]}`` is logged and loads nothing.
    """
    path = get_seed_data_path(seed_data_path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            logger.warning("Seed file %s is not valid JSON (%s); no robots loaded", path, exc)
            return 0

    if not isinstance(data, dict):
        logger.warning("Seed file %s must contain a JSON object; no robots loaded", path)
        return 0
    robots = data.get("robots")
    if robots is None:
        robots = []
    if not isinstance(robots, list):
        logger.warning("Seed file %s: \"robots\" must be a list; no robots loaded", path)
        return 0

    loaded = 0
    for index, raw in enumerate(robots):
        try:
            store.upsert(Robot.model_validate(raw))
        except SchemaValidationError as exc:
            logger.warning("Skipping seed robot #%d: malformed entry (%s)", index, exc.error_count())
            continue
        except ValidationError as exc:
            logger.warning("Skipping seed robot #%d: %s", index, exc)
            continue
        loaded += 1
    logger.info("Loaded %d robots from %s", loaded, path)
    return loaded
