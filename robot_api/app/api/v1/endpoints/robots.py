"""
Robot endpoints for API v1.

These routes expose CRUD over robot records.  Handlers are plain
functions so FastAPI runs them in its threadpool; the store's
reader/writer lock keeps concurrent requests consistent.  The replace
handler reads its body itself and hands store calls to the threadpool
explicitly.

Create, replace and delete first check whether the code exists and
then write.  The check and the write are separate store calls, so two
concurrent creates of the same code can both pass the check; the
last one wins.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError as SchemaValidationError

from robot_api.app.api.deps import get_robot_store
from robot_api.app.schemas.robot import Robot
from robot_api.app.services.errors import RobotNotFoundError, ValidationError
from robot_api.app.services.robot_store import RobotStore

router = APIRouter()


def _bad_request(exc: ValidationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"field": exc.field, "message": exc.message},
    )


@router.get("", response_model=List[Robot])
def list_robots(
    model: Optional[str] = Query(None, description="Exact model to match"),
    tech: Optional[str] = Query(None, description="Comma separated techs; a robot must have all of them"),
    store: RobotStore = Depends(get_robot_store),
) -> List[Robot]:
    """Return all robots, optionally filtered by model and techs."""
    techs = tech.split(",") if tech else None
    return store.list_robots(model=model, techs=techs)


@router.post("", response_model=Robot, status_code=status.HTTP_201_CREATED)
def create_robot(robot: Robot, store: RobotStore = Depends(get_robot_store)) -> Robot:
    """Create a new robot.

    Returns HTTP 409 if the code is already taken and HTTP 400 if the
    robot fails validation.
    """
    if store.exists(robot.code):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Robot code already exists")
    try:
        return store.upsert(robot)
    except ValidationError as exc:
        raise _bad_request(exc)


@router.get("/{code}", response_model=Robot)
def get_robot(code: str, store: RobotStore = Depends(get_robot_store)) -> Robot:
    try:
        return store.get(code)
    except RobotNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Robot not found")


@router.put(
    "/{code}",
    response_model=Robot,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": Robot.model_json_schema()}},
        }
    },
)
async def update_robot(code: str, request: Request, store: RobotStore = Depends(get_robot_store)) -> Robot:
    """Replace an existing robot.

    Existence is checked before the body is decoded, so an unknown code
    is a 404 even when the body is malformed.  The code in the path
    wins over any code in the body.  Every field is replaced; omitted
    fields fall back to their empty defaults and are validated as such.
    """
    if not await run_in_threadpool(store.exists, code):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Robot not found")
    try:
        robot = Robot.model_validate_json(await request.body())
    except SchemaValidationError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid request body")
    try:
        return await run_in_threadpool(store.upsert, robot.model_copy(update={"code": code}))
    except ValidationError as exc:
        raise _bad_request(exc)


@router.delete("/{code}", status_code=status.HTTP_204_NO_CONTENT)
def delete_robot(code: str, store: RobotStore = Depends(get_robot_store)) -> None:
    if not store.exists(code):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Robot not found")
    store.delete(code)
    return None
