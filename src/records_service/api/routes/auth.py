"""
Auth API Routes

Login/logout with server-side sessions, admin-gated registration and the
password reset flow.
"""

import logging

from fastapi import APIRouter, Depends, Request, Response

from records_service.api.dependencies import (
    get_account_manager,
    get_current_session,
    get_sessions,
    require_admin,
)
from records_service.config.settings import settings
from records_service.core.accounts import AccountManager
from records_service.core.errors import AuthRequiredError
from records_service.core.sessions import Session, SessionStore
from records_service.models import (
    ForgotPasswordRequest,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    ResetPasswordRequest,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post(
    "/login",
    summary="Log In",
    description="""
Checks credentials and opens a session.

**Workflow**:
1. Looks up the account by username and verifies the password hash
2. Rejects deactivated accounts
3. Stamps `lastLoginAt`, creates the server-side session
4. Sets the httpOnly session cookie (24h max-age)

**Response Example**:
```json
{"user": {"id": 1, "username": "admin", "role": "admin"}}
```

Wrong username and wrong password are indistinguishable to the caller.
    """,
    responses={
        200: {"description": "Logged in, session cookie set"},
        400: {"description": "Invalid input"},
        401: {"description": "Invalid credentials"},
        403: {"description": "Account is deactivated"},
    },
)
async def login(
    request: LoginRequest,
    response: Response,
    accounts: AccountManager = Depends(get_account_manager),
    sessions: SessionStore = Depends(get_sessions),
):
    """Log in"""
    user = await accounts.authenticate(request.username, request.password)
    if user is None:
        raise AuthRequiredError("Invalid credentials")

    session = sessions.create(user.model_dump(mode="json"))
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session.token,
        max_age=settings.session_max_age_seconds,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return {"user": user.to_wire()}


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Log Out",
    responses={200: {"description": "Session destroyed"}},
)
async def logout(
    request: Request,
    response: Response,
    sessions: SessionStore = Depends(get_sessions),
):
    """Log out"""
    sessions.destroy(request.cookies.get(settings.session_cookie_name))
    response.delete_cookie(settings.session_cookie_name)
    return {"message": "Logged out successfully"}


@router.get(
    "/me",
    summary="Current User",
    responses={
        200: {"description": "Current user returned"},
        401: {"description": "No session"},
        404: {"description": "Session user no longer exists"},
    },
)
async def current_user(
    session: Session = Depends(get_current_session),
    accounts: AccountManager = Depends(get_account_manager),
):
    """Get the logged-in user"""
    user = await accounts.get_user(session.user_id)
    return {"user": user.to_wire()}


@router.post(
    "/register",
    status_code=201,
    summary="Register Account",
    description="""
Creates an account. Admin only; there is no self-service sign-up.

`password` and `confirmPassword` must match. Usernames and emails are unique.
    """,
    responses={
        201: {"description": "Account created"},
        400: {"description": "Invalid input"},
        401: {"description": "No session"},
        403: {"description": "Admin access required"},
        409: {"description": "Username or email already exists"},
    },
)
async def register(
    request: RegisterRequest,
    admin: Session = Depends(require_admin),
    accounts: AccountManager = Depends(get_account_manager),
):
    """Register a new account"""
    user = await accounts.register(request)
    logger.info(f"Admin {admin.user_id} registered user {user.id}")
    return {"user": user.to_wire()}


@router.post(
    "/forgot-password",
    summary="Request Password Reset",
    description="""
Issues a one-hour reset token for the username.

In demo mode (`EXPOSE_RESET_TOKEN=true`, the default) the token is returned in
the response. Otherwise it is only written to the service log for an
out-of-band delivery channel to pick up. Unknown usernames get a neutral
message so account existence is not revealed.
    """,
    responses={
        200: {"description": "Token generated (or neutral message)"},
        400: {"description": "Invalid input"},
    },
)
async def forgot_password(
    request: ForgotPasswordRequest,
    accounts: AccountManager = Depends(get_account_manager),
):
    """Start the password reset flow"""
    token = await accounts.request_password_reset(request.username)
    if token is None:
        return {"message": "If the username exists, a reset token has been generated"}

    if not settings.expose_reset_token:
        logger.info(f"Reset token for '{request.username}': {token}")
        return {"message": "If the username exists, a reset token has been generated"}

    return {"message": "Password reset token generated", "token": token}


@router.post(
    "/reset-password",
    response_model=MessageResponse,
    summary="Reset Password",
    description="""
Consumes a reset token and stores the new password. Missing and expired
tokens both answer `Invalid or expired token`.
    """,
    responses={
        200: {"description": "Password updated"},
        400: {"description": "Invalid input, or invalid/expired token"},
    },
)
async def reset_password(
    request: ResetPasswordRequest,
    accounts: AccountManager = Depends(get_account_manager),
):
    """Complete the password reset flow"""
    await accounts.reset_password(request.token, request.password)
    return {"message": "Password updated successfully"}
