"""
Record Manager

Core business logic shared by every record family: create with derived
numbers, shallow-merge updates, deletes and lookups.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ValidationError

from records_service.core.errors import ConflictError, InvalidInputError, NotFoundError
from records_service.core.resources import ResourceSpec
from records_service.infrastructure.store import RecordStore, get_record_store
from records_service.models import RecordModel

logger = logging.getLogger(__name__)


class RecordManager:
    """CRUD operations for one record family"""

    def __init__(self, resource: ResourceSpec, store: RecordStore = None):
        self.resource = resource
        self.store = store or get_record_store()

    def _to_model(self, record: Dict[str, Any]) -> RecordModel:
        return self.resource.model.model_validate(record)

    async def _check_unique(self, values: Dict[str, Any], record_id: Optional[int] = None) -> None:
        """
        Reject values that collide with another record's unique field

        Raises:
            ConflictError: If a different record already holds the value
        """
        for field_name in self.resource.unique_fields:
            value = values.get(field_name)
            if value is None:
                continue
            existing = await self.store.find_by(self.resource.kind, field_name, value)
            if existing and existing["id"] != record_id:
                raise ConflictError(f"{self.resource.label} with {field_name} '{value}' already exists")

    async def list_records(self) -> List[RecordModel]:
        """All records of this family, full collection, in id order"""
        records = await self.store.list(self.resource.kind)
        return [self._to_model(r) for r in records]

    async def get_record(self, record_id: int) -> RecordModel:
        """
        Get one record

        Raises:
            NotFoundError: If the id is unknown
        """
        record = await self.store.get(self.resource.kind, record_id)
        if record is None:
            raise NotFoundError(f"{self.resource.label} not found")
        return self._to_model(record)

    async def find_record(self, field_name: str, value: Any) -> Optional[RecordModel]:
        record = await self.store.find_by(self.resource.kind, field_name, value)
        return self._to_model(record) if record else None

    async def create_record(self, payload: BaseModel, user_id: Optional[int] = None) -> RecordModel:
        """
        Create a record from a validated payload

        Args:
            payload: Create model instance
            user_id: Session user, stamped into the family's owner field

        Returns:
            The stored record, including its derived number if the family has one
        """
        values = self.resource.create_defaults()
        values.update(payload.model_dump())
        if self.resource.owner_field and user_id is not None:
            values[self.resource.owner_field] = user_id

        await self._check_unique(values)

        record = await self.store.create(self.resource.kind, values, derive=self.resource.derive)
        logger.info(f"Created {self.resource.kind} record {record['id']}")
        return self._to_model(record)

    async def update_record(self, record_id: int, payload: BaseModel) -> RecordModel:
        """
        Apply a partial update; fields absent from the payload are preserved

        Raises:
            NotFoundError: If the id is unknown
            InvalidInputError: If the merged record would not be valid
            ConflictError: If a unique field would collide
        """
        patch = payload.model_dump(exclude_unset=True)
        return await self.patch_record(record_id, patch)

    async def patch_record(self, record_id: int, patch: Dict[str, Any]) -> RecordModel:
        """Shallow-merge raw field values over a record"""
        existing = await self.store.get(self.resource.kind, record_id)
        if existing is None:
            raise NotFoundError(f"{self.resource.label} not found")

        patch = dict(patch)
        if self.resource.touch_fields:
            now = datetime.now(timezone.utc)
            for field_name in self.resource.touch_fields:
                patch[field_name] = now

        # explicit nulls on required fields must not reach the store
        try:
            self._to_model({**existing, **patch})
        except ValidationError:
            raise InvalidInputError()

        await self._check_unique(patch, record_id=record_id)

        try:
            record = await self.store.update(self.resource.kind, record_id, patch)
        except NotFoundError:
            raise NotFoundError(f"{self.resource.label} not found")

        logger.info(f"Updated {self.resource.kind} record {record_id}")
        return self._to_model(record)

    async def delete_record(self, record_id: int) -> None:
        """
        Delete a record outright

        Raises:
            NotFoundError: If the id is unknown (deleting twice is not silently accepted)
        """
        try:
            await self.store.delete(self.resource.kind, record_id)
        except NotFoundError:
            raise NotFoundError(f"{self.resource.label} not found")

        logger.info(f"Deleted {self.resource.kind} record {record_id}")
