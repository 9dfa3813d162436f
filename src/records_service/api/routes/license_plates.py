"""
License Plate API Routes

Standard record routes plus exact plate-number lookup.
"""

from fastapi import APIRouter, Depends

from records_service.api.dependencies import get_current_session, get_store
from records_service.api.routes.resources import build_resource_router
from records_service.core.errors import NotFoundError
from records_service.core.record_manager import RecordManager
from records_service.core.resources import LICENSE_PLATES
from records_service.core.sessions import Session
from records_service.infrastructure.store import RecordStore

router: APIRouter = build_resource_router(LICENSE_PLATES)


def get_plate_manager(store: RecordStore = Depends(get_store)) -> RecordManager:
    """Dependency for getting the license plate RecordManager"""
    return RecordManager(LICENSE_PLATES, store)


@router.get(
    "/search/{plate_number}",
    summary="Look Up Plate",
    description="""
Exact, case-sensitive lookup by plate number. For partial matches the client
filters the full list instead.
    """,
    responses={
        200: {"description": "Plate found"},
        401: {"description": "No session"},
        404: {"description": "License plate not found"},
    },
)
async def search_plate(
    plate_number: str,
    session: Session = Depends(get_current_session),
    manager: RecordManager = Depends(get_plate_manager),
):
    """Find a plate by its number"""
    plate = await manager.find_record("plate_number", plate_number)
    if plate is None:
        raise NotFoundError("License plate not found")
    return {"licensePlate": plate.to_wire()}
