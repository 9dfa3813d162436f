"""
Request Dependencies

Store access and the two request gates: an authenticated session for every
non-auth route, and the admin role for privileged routes.
"""

from fastapi import Depends, Request

from records_service.config.settings import settings
from records_service.core.accounts import AccountManager
from records_service.core.errors import AuthRequiredError, ForbiddenError
from records_service.core.sessions import Session, SessionStore, session_store
from records_service.infrastructure.store import RecordStore, get_record_store


def get_store() -> RecordStore:
    """Dependency for getting the record store"""
    return get_record_store()


def get_sessions() -> SessionStore:
    """Dependency for getting the session store"""
    return session_store


def get_account_manager(store: RecordStore = Depends(get_store)) -> AccountManager:
    """Dependency for getting AccountManager instance"""
    return AccountManager(store)


def get_current_session(
    request: Request,
    sessions: SessionStore = Depends(get_sessions),
) -> Session:
    session = sessions.get(request.cookies.get(settings.session_cookie_name))
    if session is None:
        raise AuthRequiredError()
    # snapshot is kept current by SessionStore.refresh_user
    if not session.user.get("is_active", True):
        raise ForbiddenError("Account is deactivated")
    return session


def require_admin(session: Session = Depends(get_current_session)) -> Session:
    if not session.is_admin:
        raise ForbiddenError("Admin access required")
    return session
