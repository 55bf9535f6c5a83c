"""Robot Registry API client.

A thin wrapper around the HTTP interface of the robot registry, built
on ``requests``.  Every method returns a tuple ``(data, error)``: on
success ``error`` is ``None``; on failure ``data`` is empty and
``error`` is a dictionary with ``status_code`` and ``message`` keys.
Validation failures reported by the server carry the offending field
in ``error["field"]``.

The client exposes:

* :meth:`list_robots` – list robots, optionally filtered by model and techs.
* :meth:`get_robot` – fetch a single robot by code.
* :meth:`create_robot` – create a new robot.
* :meth:`update_robot` – replace an existing robot.
* :meth:`delete_robot` – delete a robot.
* :meth:`get_references` – read the reference catalog.
* :meth:`update_references` – merge new values into the catalog.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class RobotRegistryAPI:
    """Client for the robot registry HTTP API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service including any API prefix,
                e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns a tuple ``(data, error)``.  ``data`` is the parsed JSON
        response (``None`` for empty responses such as 204).
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            return None, self._error_from_response(exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _error_from_response(exc: requests.HTTPError) -> Error:
        response = exc.response
        status = response.status_code if response is not None else None
        error: Error = {"status_code": status, "message": str(exc)}
        if response is not None:
            try:
                detail = response.json().get("detail")
            except ValueError:
                detail = response.text or None
            if isinstance(detail, dict):
                # Validation failures: {"field": ..., "message": ...}
                error["field"] = detail.get("field")
                error["message"] = detail.get("message") or error["message"]
            elif detail:
                error["message"] = detail
        logger.error("API request failed (%s): %s", status, error["message"])
        return error

    @staticmethod
    def _robot_path(code: str) -> str:
        return f"/robots/{quote(code, safe='')}"

    # ------------------------------------------------------------------
    # Robot operations
    # ------------------------------------------------------------------
    def list_robots(
        self, model: Optional[str] = None, techs: Optional[Sequence[str]] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve robots, optionally filtered.

        Args:
            model: Only return robots with exactly this model.
            techs: Only return robots carrying all of these techs.
        """
        params: Dict[str, Any] = {}
        if model:
            params["model"] = model
        if techs:
            params["tech"] = ",".join(techs)
        data, error = self._request("GET", "/robots", params=params or None)
        if error:
            return [], error
        return data or [], None

    def get_robot(self, code: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", self._robot_path(code))

    def create_robot(self, robot: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a robot.  A taken code yields ``status_code`` 409."""
        return self._request("POST", "/robots", json_body=robot)

    def update_robot(
        self, code: str, robot: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace the robot stored under ``code`` with ``robot``."""
        return self._request("PUT", self._robot_path(code), json_body=robot)

    def delete_robot(self, code: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", self._robot_path(code))
        return error is None, error

    # ------------------------------------------------------------------
    # Reference values
    # ------------------------------------------------------------------
    def get_references(self) -> Tuple[Optional[Dict[str, List[str]]], Optional[Error]]:
        return self._request("GET", "/references")

    def update_references(
        self,
        *,
        models: Optional[Sequence[str]] = None,
        techs: Optional[Sequence[str]] = None,
        status: Optional[Sequence[str]] = None,
    ) -> Tuple[Optional[Dict[str, List[str]]], Optional[Error]]:
        """Merge new reference values and return the merged catalog."""
        body: Dict[str, List[str]] = {}
        if models is not None:
            body["models"] = list(models)
        if techs is not None:
            body["techs"] = list(techs)
        if status is not None:
            body["status"] = list(status)
        return self._request("POST", "/references/update", json_body=body)
