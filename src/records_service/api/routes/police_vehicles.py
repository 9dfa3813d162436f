"""
Police Vehicle API Routes

Standard record routes plus two narrow mutators used by the tracking map:
location and status.
"""

import json
import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError

from records_service.api.dependencies import get_current_session, get_store
from records_service.api.routes.resources import build_resource_router
from records_service.core.errors import InvalidInputError
from records_service.core.record_manager import RecordManager
from records_service.core.resources import POLICE_VEHICLES
from records_service.core.sessions import Session
from records_service.infrastructure.store import RecordStore
from records_service.models import VehicleLocationUpdate, VehicleStatus, VehicleStatusUpdate

router: APIRouter = build_resource_router(POLICE_VEHICLES)
logger = logging.getLogger(__name__)

ALLOWED_STATUSES = ", ".join(s.value for s in VehicleStatus)


def get_vehicle_manager(store: RecordStore = Depends(get_store)) -> RecordManager:
    """Dependency for getting the police vehicle RecordManager"""
    return RecordManager(POLICE_VEHICLES, store)


@router.patch(
    "/{record_id}/location",
    summary="Update Vehicle Location",
    description="""
Moves a vehicle on the tracking map.

**Request Body**:
```json
{"location": [-122.4194, 37.7749]}
```

The location must be exactly two numbers, longitude first. It is stored as
JSON text in `currentLocation` and `lastUpdate` is refreshed.
    """,
    responses={
        200: {"description": "Vehicle updated"},
        400: {"description": "Malformed location"},
        401: {"description": "No session"},
        404: {"description": "Police vehicle not found"},
    },
)
async def update_vehicle_location(
    record_id: int,
    body: Dict[str, Any] = Body(...),
    session: Session = Depends(get_current_session),
    manager: RecordManager = Depends(get_vehicle_manager),
):
    """Update vehicle location"""
    try:
        update = VehicleLocationUpdate.model_validate(body)
    except ValidationError:
        raise InvalidInputError("Invalid location format. Expected [longitude, latitude]")

    vehicle = await manager.patch_record(
        record_id, {"current_location": json.dumps(update.location)}
    )
    logger.info(f"Vehicle {record_id} moved to {update.location}")
    return vehicle.to_wire()


@router.patch(
    "/{record_id}/status",
    summary="Update Vehicle Status",
    description="""
Sets the vehicle status to one of `available`, `on_patrol`, `responding`,
`out_of_service`. Any other value is rejected.
    """,
    responses={
        200: {"description": "Vehicle updated"},
        400: {"description": "Status outside the allowed set"},
        401: {"description": "No session"},
        404: {"description": "Police vehicle not found"},
    },
)
async def update_vehicle_status(
    record_id: int,
    body: Dict[str, Any] = Body(...),
    session: Session = Depends(get_current_session),
    manager: RecordManager = Depends(get_vehicle_manager),
):
    """Update vehicle status"""
    try:
        update = VehicleStatusUpdate.model_validate(body)
    except ValidationError:
        raise InvalidInputError(f"Invalid status. Must be one of: {ALLOWED_STATUSES}")

    vehicle = await manager.patch_record(record_id, {"status": update.status.value})
    logger.info(f"Vehicle {record_id} status set to {update.status.value}")
    return vehicle.to_wire()
