"""
In-memory robot store.

``RobotStore`` owns the mapping from robot code to robot together with
the reference catalog used to validate writes.  A single
``ReadWriteLock`` protects both: lookups and listings take shared
access, while upserts, deletions and catalog merges take exclusive
access.  Every public method acquires the lock exactly once and
releases it before returning, so a validation check always sees a
catalog consistent with the records around it.

Records are copied on the way in and on the way out.  Callers never
hold a reference to a stored robot, which means a reader can never see
a record while it is being replaced.

``upsert`` is the only way to add or change a robot.  Create and
replace share it; whether the code may already exist is decided by the
caller (see the robots endpoints).
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from robot_api.app.core.locking import ReadWriteLock
from robot_api.app.schemas.reference import ReferenceValues, ReferenceValuesUpdate
from robot_api.app.schemas.robot import Robot
from robot_api.app.services.errors import RobotNotFoundError, ValidationError
from robot_api.app.services.reference_catalog import ReferenceCatalog


logger = logging.getLogger(__name__)


class RobotStore:
    """Concurrency-safe CRUD over robots keyed by code."""

    def __init__(self, catalog: Optional[ReferenceCatalog] = None) -> None:
        self._lock = ReadWriteLock()
        self._robots: Dict[str, Robot] = {}
        self._catalog = catalog if catalog is not None else ReferenceCatalog()

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._robots)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def get(self, code: str) -> Robot:
        """Return a copy of the robot stored under ``code``.

        Raises ``RobotNotFoundError`` if there is none.
        """
        with self._lock.read_locked():
            robot = self._robots.get(code)
            if robot is None:
                raise RobotNotFoundError(code)
            return robot.model_copy(deep=True)

    def exists(self, code: str) -> bool:
        with self._lock.read_locked():
            return code in self._robots

    def list_robots(
        self,
        model: Optional[str] = None,
        techs: Optional[Sequence[str]] = None,
    ) -> List[Robot]:
        """Return robots in insertion order, optionally filtered.

        ``model`` must match exactly when given.  When ``techs`` is
        non-empty a robot is only returned if it carries every listed
        tech.
        """
        with self._lock.read_locked():
            result = []
            for robot in self._robots.values():
                if model and robot.model != model:
                    continue
                if techs and not all(tech in robot.tech for tech in techs):
                    continue
                result.append(robot.model_copy(deep=True))
            return result

    def get_reference_values(self) -> ReferenceValues:
        with self._lock.read_locked():
            return self._catalog.snapshot()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def upsert(self, robot: Robot) -> Robot:
        """Validate ``robot`` and insert or fully replace it.

        Checks run in a fixed order and the first failure is raised as
        a ``ValidationError``; the store is left unchanged in that case.
        Returns a copy of the stored robot.
        """
        stored = robot.model_copy(deep=True)
        try:
            with self._lock.write_locked():
                self._validate(stored)
                replaced = stored.code in self._robots
                self._robots[stored.code] = stored
        except ValidationError as exc:
            logger.info("Rejected robot %r: %s", robot.code, exc)
            raise
        logger.info("%s robot %s", "Updated" if replaced else "Created", stored.code)
        return stored.model_copy(deep=True)

    def delete(self, code: str) -> None:
        """Remove the robot stored under ``code``; no-op if absent."""
        with self._lock.write_locked():
            removed = self._robots.pop(code, None)
        if removed is not None:
            logger.info("Deleted robot %s", code)

    def update_reference_values(self, new_values: ReferenceValuesUpdate) -> ReferenceValues:
        """Merge ``new_values`` into the catalog and return the result.

        Existing robots are not revalidated.
        """
        with self._lock.write_locked():
            self._catalog.merge(new_values)
            merged = self._catalog.snapshot()
        logger.info(
            "Reference values updated: %d models, %d techs, %d status",
            len(merged.models),
            len(merged.techs),
            len(merged.status),
        )
        return merged

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def _validate(self, robot: Robot) -> None:
        """Raise ``ValidationError`` for the first invalid field.

        Must be called with the write lock held.
        """
        catalog = self._catalog
        if robot.code == "":
            raise ValidationError("Code", "Code cannot be empty")
        if not catalog.contains("models", robot.model):
            raise ValidationError(
                "Model", f"Invalid model. Allowed models: {_join(catalog.allowed('models'))}"
            )
        for tech in robot.tech:
            if not catalog.contains("techs", tech):
                raise ValidationError(
                    "Tech", f"Invalid tech: {tech}. Allowed techs: {_join(catalog.allowed('techs'))}"
                )
        if not catalog.contains("status", robot.status):
            raise ValidationError(
                "Status", f"Invalid status. Allowed status: {_join(catalog.allowed('status'))}"
            )
        if robot.name == "":
            raise ValidationError("Name", "Name cannot be empty")


def _join(values: List[str]) -> str:
    return ", ".join(values)
