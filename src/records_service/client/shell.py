"""
Application Shell

Top-level client state: the signed-in user, the active section, which
modals are open, and one FeatureView per feature section. The sidebar menu
is defined once in ``navigation_menu`` for both the expanded and the
collapsed sidebar.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from records_service.client.api_client import (
    NETWORK_ERROR_MESSAGE,
    ApiError,
    NetworkError,
    RecordsApiClient,
)
from records_service.client.views import FeatureView

logger = logging.getLogger(__name__)

DASHBOARD = "dashboard"

ADD_CASE = "add-case"
ADD_OB = "add-ob"
LICENSE_PLATE = "license-plate"
LOGIN = "login"
REGISTER = "register"
FORGOT_PASSWORD = "forgot-password"

MODALS = {ADD_CASE, ADD_OB, LICENSE_PLATE, LOGIN, REGISTER, FORGOT_PASSWORD}
AUTH_MODALS = {LOGIN, REGISTER, FORGOT_PASSWORD}

# menu section -> API area backing its FeatureView
FEATURE_SECTIONS = {
    "cases": "cases",
    "occurrence-book": "ob-entries",
    "license-plates": "license-plates",
    "evidence": "evidence",
    "geofiles": "geofiles",
    "reports": "reports",
    "admin": "officers",
}


@dataclass(frozen=True)
class MenuItem:
    id: str
    label: Optional[str]
    icon: str
    admin_only: bool = False


MENU_ITEMS = [
    MenuItem("dashboard", "Dashboard", "home"),
    MenuItem("cases", "Cases", "file-text"),
    MenuItem("occurrence-book", "Occurrence Book (OB)", "user-check"),
    MenuItem("license-plates", "License Plates", "car"),
    MenuItem("evidence", "Evidence Log", "camera"),
    MenuItem("geofiles", "Geo Files", "map"),
    MenuItem("reports", "Generate Report", "file-check"),
    MenuItem("profile", "Profile", "user", admin_only=True),
    MenuItem("admin", "User Management", "users", admin_only=True),
]


def is_admin(user: Optional[Dict[str, Any]]) -> bool:
    return bool(user) and user.get("role") == "admin"


def navigation_menu(user: Optional[Dict[str, Any]], collapsed: bool = False) -> List[MenuItem]:
    """Menu entries visible to ``user``; collapsed entries carry no label"""
    items = [i for i in MENU_ITEMS if not i.admin_only or is_admin(user)]
    if collapsed:
        return [MenuItem(i.id, None, i.icon, i.admin_only) for i in items]
    return items


@dataclass
class DashboardStats:
    open_cases: int = 0
    in_progress_cases: int = 0
    closed_cases: int = 0
    high_priority_cases: int = 0


def dashboard_stats(cases: Iterable[Dict[str, Any]]) -> DashboardStats:
    stats = DashboardStats()
    for case in cases:
        status = case.get("status")
        if status == "Open":
            stats.open_cases += 1
        elif status == "In Progress":
            stats.in_progress_cases += 1
        elif status == "Closed":
            stats.closed_cases += 1
        if case.get("priority") == "High":
            stats.high_priority_cases += 1
    return stats


class AppShell:
    """Client application state"""

    def __init__(self, api: RecordsApiClient):
        self.api = api
        self.user: Optional[Dict[str, Any]] = None
        self.active_section = DASHBOARD
        self.open_modals = set()
        self.error: Optional[str] = None
        self.views: Dict[str, FeatureView] = {
            section: FeatureView(area, api) for section, area in FEATURE_SECTIONS.items()
        }

    @property
    def menu(self) -> List[MenuItem]:
        return navigation_menu(self.user)

    def navigate(self, section: str) -> bool:
        """Switch sections; admin-only sections are refused for other users"""
        item = next((i for i in MENU_ITEMS if i.id == section), None)
        if item is None:
            raise ValueError(f"Unknown section: {section}")
        if item.admin_only and not is_admin(self.user):
            return False

        self.active_section = section
        view = self.views.get(section)
        if view is not None:
            view.open()
        return True

    def open_modal(self, name: str) -> None:
        if name not in MODALS:
            raise ValueError(f"Unknown modal: {name}")
        if name in AUTH_MODALS:
            self.open_modals -= AUTH_MODALS
        self.open_modals.add(name)

    def close_modal(self, name: str) -> None:
        self.open_modals.discard(name)

    def is_open(self, name: str) -> bool:
        return name in self.open_modals

    def _fail(self, exc: Exception) -> bool:
        self.error = exc.message if isinstance(exc, ApiError) else NETWORK_ERROR_MESSAGE
        return False

    def login(self, username: str, password: str) -> bool:
        try:
            self.user = self.api.login(username, password)
        except (ApiError, NetworkError) as e:
            return self._fail(e)
        self.error = None
        self.close_modal(LOGIN)
        logger.info(f"Signed in as {self.user.get('username')}")
        return True

    def logout(self) -> None:
        try:
            self.api.logout()
        except (ApiError, NetworkError) as e:
            logger.warning(f"Logout request failed: {e}")
        self.user = None
        self.active_section = DASHBOARD
        self.open_modals.clear()

    def load_dashboard(self) -> Optional[DashboardStats]:
        """Fetch cases and compute the dashboard counters"""
        try:
            cases = self.api.list_records("cases")
        except (ApiError, NetworkError) as e:
            self._fail(e)
            return None
        return dashboard_stats(cases)
