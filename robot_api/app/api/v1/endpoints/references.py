"""
Reference value endpoints for API v1.

The reference catalog lists the values allowed for a robot's model,
techs and status.  It can be read in full and extended additively;
there is no way to remove a value.
"""

from fastapi import APIRouter, Depends

from robot_api.app.api.deps import get_robot_store
from robot_api.app.schemas.reference import ReferenceValues, ReferenceValuesUpdate
from robot_api.app.services.robot_store import RobotStore

router = APIRouter()


@router.get("", response_model=ReferenceValues)
def get_references(store: RobotStore = Depends(get_robot_store)) -> ReferenceValues:
    """Return the current reference catalog."""
    return store.get_reference_values()


@router.post("/update", response_model=ReferenceValues)
def update_references(
    new_values: ReferenceValuesUpdate,
    store: RobotStore = Depends(get_robot_store),
) -> ReferenceValues:
    """Merge new values into the catalog and return the merged catalog.

    Values already present are ignored.  Robots stored before the
    update are not revalidated.
    """
    return store.update_reference_values(new_values)
