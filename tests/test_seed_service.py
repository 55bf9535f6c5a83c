"""Tests for loading the startup seed file."""

import json
import logging
from pathlib import Path

import pytest

from robot_api.app.services.robot_store import RobotStore
from robot_api.app.services.seed_service import get_seed_data_path, load_initial_data


def write_seed(tmp_path: Path, data) -> str:
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_loads_valid_robots(store: RobotStore, tmp_path: Path) -> None:
    path = write_seed(
        tmp_path,
        {
            "robots": [
                {"code": "A", "name": "a", "model": "car", "tech": ["AI"], "status": "active"},
                {"code": "B", "name": "b", "model": "humanoid", "tech": None, "status": "progress"},
            ]
        },
    )

    assert load_initial_data(store, path) == 2
    assert [r.code for r in store.list_robots()] == ["A", "B"]
    assert store.get("B").tech == []


def test_invalid_robots_are_skipped(store: RobotStore, tmp_path: Path, caplog) -> None:
    path = write_seed(
        tmp_path,
        {
            "robots": [
                {"code": "A", "name": "a", "model": "spaceship", "tech": [], "status": "active"},
                {"code": "B", "name": "b", "model": "car", "tech": 7, "status": "active"},
                "not a robot",
                {"code": "", "name": "c", "model": "car", "tech": [], "status": "active"},
                {"code": "D", "name": "d", "model": "car", "tech": ["car"], "status": "inactive"},
            ]
        },
    )

    with caplog.at_level(logging.WARNING, logger="robot_api"):
        loaded = load_initial_data(store, path)

    assert loaded == 1
    assert [r.code for r in store.list_robots()] == ["D"]
    assert "Skipping seed robot #0" in caplog.text


def test_missing_robots_key_loads_nothing(store: RobotStore, tmp_path: Path) -> None:
    assert load_initial_data(store, write_seed(tmp_path, {})) == 0
    assert len(store) == 0


def test_missing_file_raises(store: RobotStore, tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_initial_data(store, str(tmp_path / "absent.json"))


def test_truncated_file_loads_nothing(store: RobotStore, tmp_path: Path, caplog) -> None:
    path = tmp_path / "seed.json"
    path.write_text('{"robots": [', encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="robot_api"):
        assert load_initial_data(store, str(path)) == 0

    assert len(store) == 0
    assert "not valid JSON" in caplog.text


def test_non_object_loads_nothing(store: RobotStore, tmp_path: Path) -> None:
    assert load_initial_data(store, write_seed(tmp_path, [1, 2, 3])) == 0
    assert len(store) == 0


@pytest.mark.parametrize("robots", [5, "R1", {"code": "R1", "name": "a"}])
def test_robots_not_a_list_loads_nothing(store: RobotStore, tmp_path: Path, robots, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="robot_api"):
        assert load_initial_data(store, write_seed(tmp_path, {"robots": robots})) == 0

    assert len(store) == 0
    assert "must be a list" in caplog.text


def test_relative_path_resolves_to_project_root() -> None:
    project_root = Path(__file__).resolve().parent.parent

    assert get_seed_data_path("data/initial_data.json") == str(project_root / "data" / "initial_data.json")
    assert get_seed_data_path(str(project_root)) == str(project_root)


def test_bundled_seed_file_loads(store: RobotStore) -> None:
    assert load_initial_data(store, "data/initial_data.json") == 4
    assert store.get("R001").model == "transformation"
