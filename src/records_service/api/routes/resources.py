"""
Record API Routes

RESTful CRUD endpoints shared by every record family. Each family gets the
same five routes under ``/api/<family>``; envelopes follow the family's
ResourceSpec.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from records_service.api.dependencies import get_current_session, get_store
from records_service.core.record_manager import RecordManager
from records_service.core.resources import (
    CASES,
    EVIDENCE,
    GEOFILES,
    OB_ENTRIES,
    REPORTS,
    ResourceSpec,
)
from records_service.core.sessions import Session
from records_service.infrastructure.store import RecordStore
from records_service.models import MessageResponse, RecordModel

logger = logging.getLogger(__name__)


def build_resource_router(resource: ResourceSpec) -> APIRouter:
    """Create the list/get/create/update/delete router for one record family"""

    router = APIRouter(prefix=f"/api/{resource.path}", tags=[resource.path])
    label = resource.label

    # Dependency for the family's RecordManager
    def get_manager(store: RecordStore = Depends(get_store)) -> RecordManager:
        return RecordManager(resource, store)

    def item_body(record: RecordModel) -> Dict[str, Any]:
        data = record.to_wire()
        return {resource.item_key: data} if resource.item_key else data

    @router.get(
        "",
        summary=f"List {label} Records",
        description=f"""
Returns the full {label.lower()} collection. No pagination and no server-side
filtering: the client materializes the whole set and filters it locally.

**Authorization**: Requires an authenticated session
        """,
        responses={
            200: {"description": "Collection returned"},
            401: {"description": "No session"},
        },
    )
    async def list_records(
        session: Session = Depends(get_current_session),
        manager: RecordManager = Depends(get_manager),
    ):
        """List records"""
        data = [r.to_wire() for r in await manager.list_records()]
        return {resource.collection_key: data} if resource.collection_key else data

    @router.get(
        "/{record_id}",
        summary=f"Get {label}",
        responses={
            200: {"description": "Record returned"},
            401: {"description": "No session"},
            404: {"description": f"{label} not found"},
        },
    )
    async def get_record(
        record_id: int,
        session: Session = Depends(get_current_session),
        manager: RecordManager = Depends(get_manager),
    ):
        """Get one record"""
        return item_body(await manager.get_record(record_id))

    @router.post(
        "",
        status_code=201,
        summary=f"Create {label}",
        description=f"""
Creates a {label.lower()} record.

**Workflow**:
1. Body is validated for shape (required fields, types)
2. Server assigns the id, timestamps and any derived number
3. The session user is stamped as the record's owner where the family has one

**Authorization**: Requires an authenticated session
        """,
        responses={
            201: {"description": f"{label} created"},
            400: {"description": "Invalid input"},
            401: {"description": "No session"},
            409: {"description": "Duplicate unique field"},
        },
    )
    async def create_record(
        payload: resource.create_model,
        session: Session = Depends(get_current_session),
        manager: RecordManager = Depends(get_manager),
    ):
        """Create a record"""
        record = await manager.create_record(payload, user_id=session.user_id)
        logger.info(f"User {session.user_id} created {resource.kind} {record.id}")
        return item_body(record)

    @router.put(
        "/{record_id}",
        summary=f"Update {label}",
        description="""
Shallow-merges the submitted fields over the stored record. Fields left out
of the body keep their values; `updatedAt` always advances.
        """,
        responses={
            200: {"description": f"{label} updated"},
            400: {"description": "Invalid input"},
            401: {"description": "No session"},
            404: {"description": f"{label} not found"},
            409: {"description": "Duplicate unique field"},
        },
    )
    async def update_record(
        record_id: int,
        payload: resource.update_model,
        session: Session = Depends(get_current_session),
        manager: RecordManager = Depends(get_manager),
    ):
        """Update a record"""
        return item_body(await manager.update_record(record_id, payload))

    @router.delete(
        "/{record_id}",
        response_model=MessageResponse,
        summary=f"Delete {label}",
        description="""
Removes the record outright. No soft delete and no cascade: records that
reference it keep the dangling id. Deleting an unknown id is a 404.
        """,
        responses={
            200: {"description": f"{label} deleted"},
            401: {"description": "No session"},
            404: {"description": f"{label} not found"},
        },
    )
    async def delete_record(
        record_id: int,
        session: Session = Depends(get_current_session),
        manager: RecordManager = Depends(get_manager),
    ):
        """Delete a record"""
        await manager.delete_record(record_id)
        logger.info(f"User {session.user_id} deleted {resource.kind} {record_id}")
        return {"message": f"{label} deleted successfully"}

    return router


cases_router = build_resource_router(CASES)
ob_entries_router = build_resource_router(OB_ENTRIES)
evidence_router = build_resource_router(EVIDENCE)
geofiles_router = build_resource_router(GEOFILES)
reports_router = build_resource_router(REPORTS)
