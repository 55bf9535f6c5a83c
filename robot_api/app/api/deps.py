"""
FastAPI dependencies.

The robot store is created by ``create_app`` and kept on
``app.state``.  Endpoints receive it through ``get_robot_store`` so
that each application (and each test) works with its own store.
"""

from fastapi import Request

from robot_api.app.services.robot_store import RobotStore


def get_robot_store(request: Request) -> RobotStore:
    """Return the store attached to the running application."""
    return request.app.state.robot_store
