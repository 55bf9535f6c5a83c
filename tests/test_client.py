"""Tests for the requests-based API client, using a stub session."""

import json
from typing import Any, Dict, List, Optional

import pytest
import requests

from robot_api_client import RobotRegistryAPI


def make_response(status_code: int, body: Any = None, url: str = "http://robots.test") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    return response


class StubSession:
    """Records requests and answers with queued responses."""

    def __init__(self, *responses: requests.Response) -> None:
        self.responses: List[requests.Response] = list(responses)
        self.calls: List[Dict[str, Any]] = []
        self.error: Optional[Exception] = None

    def request(self, **kwargs: Any) -> requests.Response:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)


@pytest.fixture
def robot() -> Dict[str, Any]:
    return {"code": "R1", "name": "Arm", "description": "", "model": "car", "tech": ["AI"], "status": "active"}


def test_list_robots_builds_filter_params(robot: Dict[str, Any]) -> None:
    session = StubSession(make_response(200, [robot]))
    api = RobotRegistryAPI(base_url="http://robots.test/", session=session)

    robots, error = api.list_robots(model="car", techs=["AI", "car"])

    assert error is None
    assert robots == [robot]
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "http://robots.test/robots"
    assert call["params"] == {"model": "car", "tech": "AI,car"}


def test_list_robots_without_filters() -> None:
    session = StubSession(make_response(200, []))

    robots, error = RobotRegistryAPI(base_url="http://robots.test", session=session).list_robots()

    assert (robots, error) == ([], None)
    assert session.calls[0]["params"] is None


def test_create_robot_sends_json(robot: Dict[str, Any]) -> None:
    session = StubSession(make_response(201, robot))

    created, error = RobotRegistryAPI(base_url="http://robots.test", session=session).create_robot(robot)

    assert error is None
    assert created == robot
    assert session.calls[0]["method"] == "POST"
    assert session.calls[0]["json"] == robot


def test_validation_error_carries_field(robot: Dict[str, Any]) -> None:
    detail = {"field": "Model", "message": "Invalid model. Allowed models: car"}
    session = StubSession(make_response(400, {"detail": detail}))

    created, error = RobotRegistryAPI(base_url="http://robots.test", session=session).create_robot(robot)

    assert created is None
    assert error == {"status_code": 400, "field": "Model", "message": detail["message"]}


def test_not_found_message() -> None:
    session = StubSession(make_response(404, {"detail": "Robot not found"}))

    data, error = RobotRegistryAPI(base_url="http://robots.test", session=session).get_robot("R1")

    assert data is None
    assert error == {"status_code": 404, "message": "Robot not found"}


def test_robot_code_is_quoted() -> None:
    session = StubSession(make_response(204))
    api = RobotRegistryAPI(base_url="http://robots.test", session=session)

    ok, error = api.delete_robot("a/b c")

    assert ok is True
    assert error is None
    assert session.calls[0]["url"] == "http://robots.test/robots/a%2Fb%20c"


def test_update_robot_uses_put(robot: Dict[str, Any]) -> None:
    session = StubSession(make_response(200, robot))

    updated, error = RobotRegistryAPI(base_url="http://robots.test", session=session).update_robot("R1", robot)

    assert error is None
    assert updated == robot
    assert session.calls[0]["method"] == "PUT"
    assert session.calls[0]["url"] == "http://robots.test/robots/R1"


def test_update_references_sends_only_given_vocabularies() -> None:
    merged = {"models": ["car"], "techs": ["AI", "drone"], "status": ["active"]}
    session = StubSession(make_response(200, merged))

    data, error = RobotRegistryAPI(base_url="http://robots.test", session=session).update_references(
        techs=["drone"]
    )

    assert error is None
    assert data == merged
    assert session.calls[0]["url"] == "http://robots.test/references/update"
    assert session.calls[0]["json"] == {"techs": ["drone"]}


def test_connection_error() -> None:
    session = StubSession()
    session.error = requests.ConnectionError("refused")

    refs, error = RobotRegistryAPI(base_url="http://robots.test", session=session).get_references()

    assert refs is None
    assert error == {"status_code": None, "message": "refused"}
