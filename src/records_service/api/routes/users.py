"""
User API Routes

Admin-only account administration (users and officers) and the self-service
profile edit.
"""

import logging

from fastapi import APIRouter, Depends

from records_service.api.dependencies import (
    get_account_manager,
    get_current_session,
    get_sessions,
    require_admin,
)
from records_service.core.accounts import AccountManager
from records_service.core.sessions import Session, SessionStore
from records_service.models import MessageResponse, OfficerCreate, OfficerUpdate, ProfileUpdate

router = APIRouter(tags=["users"])
logger = logging.getLogger(__name__)


@router.get(
    "/api/users",
    summary="List Users",
    responses={
        200: {"description": "All accounts, without credentials"},
        401: {"description": "No session"},
        403: {"description": "Admin access required"},
    },
)
async def list_users(
    admin: Session = Depends(require_admin),
    accounts: AccountManager = Depends(get_account_manager),
):
    """List all accounts"""
    return {"users": [u.to_wire() for u in await accounts.list_users()]}


@router.delete(
    "/api/users/{user_id}",
    response_model=MessageResponse,
    summary="Delete User",
    description="""
Removes an account. Admins cannot delete their own account.
    """,
    responses={
        200: {"description": "User deleted"},
        401: {"description": "No session"},
        403: {"description": "Admin access required, or self-delete"},
        404: {"description": "User not found"},
    },
)
async def delete_user(
    user_id: int,
    admin: Session = Depends(require_admin),
    accounts: AccountManager = Depends(get_account_manager),
):
    """Delete an account"""
    await accounts.delete_user(user_id, acting_user_id=admin.user_id)
    return {"message": "User deleted successfully"}


@router.get(
    "/api/officers",
    summary="List Officers",
    responses={
        200: {"description": "Raw list of accounts"},
        401: {"description": "No session"},
        403: {"description": "Admin access required"},
    },
)
async def list_officers(
    admin: Session = Depends(require_admin),
    accounts: AccountManager = Depends(get_account_manager),
):
    """List officer accounts"""
    return [u.to_wire() for u in await accounts.list_users()]


@router.post(
    "/api/officers",
    status_code=201,
    summary="Create Officer",
    description="""
Creates an officer account.

**Workflow**:
1. Username is the badge number, or `officer_<epoch millis>` without one
2. Initial password is the shared default, stored hashed
3. Role is always `user`

**Request Body Example**:
```json
{"firstName": "Jane", "lastName": "Doe", "email": "jane@police.gov", "badgeNumber": "B-100"}
```
    """,
    responses={
        201: {"description": "Officer created"},
        400: {"description": "Invalid input"},
        401: {"description": "No session"},
        403: {"description": "Admin access required"},
        409: {"description": "Username or email already exists"},
    },
)
async def create_officer(
    request: OfficerCreate,
    admin: Session = Depends(require_admin),
    accounts: AccountManager = Depends(get_account_manager),
):
    """Create an officer"""
    officer = await accounts.create_officer(request)
    return officer.to_wire()


@router.put(
    "/api/officers/{user_id}",
    summary="Update Officer",
    responses={
        200: {"description": "Officer updated"},
        400: {"description": "Invalid input"},
        401: {"description": "No session"},
        403: {"description": "Admin access required"},
        404: {"description": "User not found"},
        409: {"description": "Email already exists"},
    },
)
async def update_officer(
    user_id: int,
    request: OfficerUpdate,
    admin: Session = Depends(require_admin),
    accounts: AccountManager = Depends(get_account_manager),
    sessions: SessionStore = Depends(get_sessions),
):
    """Update an officer"""
    officer = await accounts.update_user(user_id, request)
    sessions.refresh_user(officer.model_dump(mode="json"))
    return officer.to_wire()


@router.delete(
    "/api/officers/{user_id}",
    response_model=MessageResponse,
    summary="Delete Officer",
    responses={
        200: {"description": "Officer deleted"},
        401: {"description": "No session"},
        403: {"description": "Admin access required, or self-delete"},
        404: {"description": "User not found"},
    },
)
async def delete_officer(
    user_id: int,
    admin: Session = Depends(require_admin),
    accounts: AccountManager = Depends(get_account_manager),
):
    """Delete an officer"""
    await accounts.delete_user(user_id, acting_user_id=admin.user_id)
    return {"message": "Officer deleted successfully"}


@router.put(
    "/api/profile",
    summary="Update Own Profile",
    description="""
Partial update of the caller's own profile fields. Role and active flag are
not editable here. The session's cached user is refreshed so later requests
see the new values.
    """,
    responses={
        200: {"description": "Profile updated"},
        400: {"description": "Invalid input"},
        401: {"description": "No session"},
        409: {"description": "Email already exists"},
    },
)
async def update_profile(
    request: ProfileUpdate,
    session: Session = Depends(get_current_session),
    accounts: AccountManager = Depends(get_account_manager),
    sessions: SessionStore = Depends(get_sessions),
):
    """Update own profile"""
    user = await accounts.update_user(session.user_id, request)
    sessions.refresh_user(user.model_dump(mode="json"))
    logger.info(f"User {user.id} updated their profile")
    return {"user": user.to_wire()}
