"""
Pytest configuration for the robot registry.

Provides fixtures for:
- A fresh robot store per test
- Test settings with seeding disabled
- A TestClient bound to an application serving that store
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from robot_api.app.core.config import Settings
from robot_api.app.main import create_app
from robot_api.app.schemas.robot import Robot
from robot_api.app.services.robot_store import RobotStore


@pytest.fixture
def store() -> RobotStore:
    """An empty store with the default reference catalog."""
    return RobotStore()


@pytest.fixture
def sample_robot() -> Robot:
    return Robot(code="R1", name="Arm", model="car", tech=["AI"], status="active")


@pytest.fixture
def test_settings() -> Settings:
    """Settings with seeding disabled so every test starts empty."""
    return Settings(seed_data_path="", log_level="DEBUG")


@pytest.fixture
def client(store: RobotStore, test_settings: Settings) -> Generator[TestClient, None, None]:
    """A test client for an app serving ``store``."""
    with TestClient(create_app(test_settings, store)) as test_client:
        yield test_client


@pytest.fixture
def robot_payload() -> dict:
    return {
        "code": "R1",
        "name": "Arm",
        "description": "Welding arm",
        "model": "car",
        "tech": ["AI"],
        "status": "active",
    }
