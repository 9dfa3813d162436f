"""
Account Manager

Business logic for user accounts: credential checks, registration, officer
administration, profile edits and password resets.
"""

import logging
import time
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from records_service.config.settings import settings
from records_service.core.errors import (
    ConflictError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
)
from records_service.core.resources import USERS
from records_service.core.security import (
    generate_reset_token,
    get_password_hash,
    verify_password,
)
from records_service.infrastructure.store import RecordStore, get_record_store
from records_service.models import (
    OfficerCreate,
    OfficerUpdate,
    ProfileUpdate,
    RegisterRequest,
    User,
    UserRole,
)

logger = logging.getLogger(__name__)

DEFAULT_OFFICER_PASSWORD = "changeme123"


def public_user(record: Dict[str, Any]) -> User:
    """Strip credentials from a stored user record"""
    return User.model_validate(record)


class AccountManager:
    """User account operations"""

    def __init__(self, store: RecordStore = None):
        self.store = store or get_record_store()

    async def _get(self, user_id: int) -> Dict[str, Any]:
        record = await self.store.get(USERS, user_id)
        if record is None:
            raise NotFoundError("User not found")
        return record

    async def _ensure_available(
        self,
        username: Optional[str] = None,
        email: Optional[str] = None,
        user_id: Optional[int] = None,
    ) -> None:
        if username is not None:
            existing = await self.store.find_by(USERS, "username", username)
            if existing and existing["id"] != user_id:
                raise ConflictError("Username already exists")
        if email is not None:
            existing = await self.store.find_by(USERS, "email", email)
            if existing and existing["id"] != user_id:
                raise ConflictError("Email already exists")

    async def create_user(self, fields: Dict[str, Any], password: str) -> User:
        """
        Store a new account

        Args:
            fields: Profile fields (username, email, names, role, ...)
            password: Plain password, hashed before storage

        Raises:
            ConflictError: On duplicate username or email
        """
        await self._ensure_available(fields.get("username"), fields.get("email"))

        values = {
            "role": UserRole.USER.value,
            "is_active": True,
            "last_login_at": None,
            "profile_image": None,
        }
        values.update(fields)
        values["password_hash"] = get_password_hash(password)

        record = await self.store.create(USERS, values)
        logger.info(f"Created user {record['id']} ({record['username']})")
        return public_user(record)

    async def authenticate(self, username: str, password: str) -> Optional[User]:
        """
        Check credentials and record the login time

        Returns:
            The user, or None when the username or password is wrong

        Raises:
            ForbiddenError: If the account is deactivated
        """
        record = await self.store.find_by(USERS, "username", username)
        if record is None or not verify_password(password, record.get("password_hash")):
            logger.warning(f"Failed login for username '{username}'")
            return None

        if not record.get("is_active", True):
            raise ForbiddenError("Account is deactivated")

        record = await self.store.update(
            USERS, record["id"], {"last_login_at": datetime.now(timezone.utc)}
        )
        logger.info(f"User {record['id']} logged in")
        return public_user(record)

    async def get_user(self, user_id: int) -> User:
        return public_user(await self._get(user_id))

    async def list_users(self) -> List[User]:
        return [public_user(r) for r in await self.store.list(USERS)]

    async def register(self, request: RegisterRequest) -> User:
        fields = request.model_dump(exclude={"password", "confirm_password"})
        fields["role"] = request.role.value
        return await self.create_user(fields, request.password)

    async def create_officer(self, request: OfficerCreate) -> User:
        """Officer accounts log in with their badge number and a default password"""
        fields = request.model_dump()
        fields["username"] = request.badge_number or f"officer_{int(time.time() * 1000)}"
        fields["role"] = UserRole.USER.value
        return await self.create_user(fields, DEFAULT_OFFICER_PASSWORD)

    async def update_user(self, user_id: int, request: ProfileUpdate) -> User:
        """
        Partial update of profile fields (and role/active flag for officers)

        Raises:
            NotFoundError: Unknown user
            InvalidInputError: Null or malformed value for a required field
            ConflictError: Email taken by another account
        """
        existing = await self._get(user_id)
        patch = request.model_dump(exclude_unset=True)
        if isinstance(request, OfficerUpdate) and request.role is not None:
            patch["role"] = request.role.value
        try:
            public_user({**existing, **patch})
        except ValidationError:
            raise InvalidInputError()
        await self._ensure_available(email=patch.get("email"), user_id=user_id)

        record = await self.store.update(USERS, user_id, patch)
        logger.info(f"Updated user {user_id}")
        return public_user(record)

    async def delete_user(self, user_id: int, acting_user_id: int) -> None:
        """
        Remove an account

        Raises:
            ForbiddenError: If an admin targets their own account
            NotFoundError: Unknown user
        """
        if user_id == acting_user_id:
            raise ForbiddenError("Cannot delete your own account")
        try:
            await self.store.delete(USERS, user_id)
        except NotFoundError:
            raise NotFoundError("User not found")
        logger.info(f"User {acting_user_id} deleted user {user_id}")

    async def request_password_reset(self, username: str) -> Optional[str]:
        """Issue a reset token, or None when the username is unknown"""
        record = await self.store.find_by(USERS, "username", username)
        if record is None:
            return None

        token = generate_reset_token()
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=settings.reset_token_ttl_seconds)
        await self.store.save_reset_token(token, record["id"], expires_at)
        logger.info(f"Password reset token issued for user {record['id']}")
        return token

    async def reset_password(self, token: str, password: str) -> None:
        """
        Consume a reset token

        Raises:
            InvalidInputError: Missing and expired tokens alike
        """
        data = await self.store.get_reset_token(token)
        if data is None:
            raise InvalidInputError("Invalid or expired token")

        try:
            await self.store.update(USERS, data["user_id"], {"password_hash": get_password_hash(password)})
        except NotFoundError:
            raise InvalidInputError("Invalid or expired token")
        finally:
            await self.store.delete_reset_token(token)

        logger.info(f"Password reset for user {data['user_id']}")

    async def ensure_account(self, fields: Dict[str, Any], password: str) -> Tuple[User, bool]:
        """Create the account unless the username is taken; used for seeding"""
        existing = await self.store.find_by(USERS, "username", fields["username"])
        if existing:
            return public_user(existing), False
        return await self.create_user(fields, password), True
