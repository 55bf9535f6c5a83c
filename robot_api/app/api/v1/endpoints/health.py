"""
Health endpoint for API v1.

Used by process supervisors and load balancers to check that the
service is up.  Also reports how many robots are currently stored.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from robot_api.app.api.deps import get_robot_store
from robot_api.app.services.robot_store import RobotStore

router = APIRouter()


@router.get("/health", response_model=Dict[str, Any])
def health(store: RobotStore = Depends(get_robot_store)) -> Dict[str, Any]:
    return {"status": "ok", "robots": len(store)}
