"""
Reference catalog of permitted robot field values.

The catalog keeps three ordered vocabularies (``models``, ``techs`` and
``status``).  Values are only ever appended: a merge adds unseen values
at the end and leaves existing entries and their order untouched, so
merging the same values twice is a no-op the second time.

The catalog does no locking of its own.  It is owned by a
``RobotStore`` and only accessed while the store's lock is held.
"""

from typing import Dict, Iterable, List, Mapping, Optional

from robot_api.app.core.config import DEFAULT_REFERENCE_VALUES
from robot_api.app.schemas.reference import ReferenceValues, ReferenceValuesUpdate

VOCABULARIES = ("models", "techs", "status")


class ReferenceCatalog:
    """Ordered, append-only sets of allowed model/tech/status values."""

    def __init__(self, defaults: Optional[Mapping[str, Iterable[str]]] = None) -> None:
        if defaults is None:
            defaults = DEFAULT_REFERENCE_VALUES
        self._values: Dict[str, List[str]] = {name: [] for name in VOCABULARIES}
        for name in VOCABULARIES:
            self._extend(name, defaults.get(name) or ())

    def contains(self, vocabulary: str, value: str) -> bool:
        """Return ``True`` if ``value`` is allowed in ``vocabulary``.

        Matching is exact and case sensitive.  An unknown vocabulary
        name raises ``KeyError``.
        """
        return value in self._values[vocabulary]

    def allowed(self, vocabulary: str) -> List[str]:
        """Return a copy of the values currently allowed in ``vocabulary``."""
        return list(self._values[vocabulary])

    def merge(self, new_values: ReferenceValuesUpdate) -> None:
        """Append values from ``new_values`` that are not yet present.

        Vocabularies left as ``None`` in ``new_values`` are skipped.  No
        validation is applied to the values themselves.
        """
        for name in VOCABULARIES:
            values = getattr(new_values, name)
            if values:
                self._extend(name, values)

    def snapshot(self) -> ReferenceValues:
        return ReferenceValues(
            models=list(self._values["models"]),
            techs=list(self._values["techs"]),
            status=list(self._values["status"]),
        )

    def _extend(self, vocabulary: str, values: Iterable[str]) -> None:
        current = self._values[vocabulary]
        for value in values:
            if value not in current:
                current.append(value)
