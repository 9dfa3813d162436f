"""
Records API Client

Thin HTTP client used by the view layer. Speaks the service's JSON API,
unwraps each family's response envelope and turns failures into two
exceptions: ApiError for answers from the server, NetworkError when no
answer arrived. Records are returned as camelCase dicts, exactly as sent.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from records_service.core.resources import ALL_RESOURCES

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error. Please try again."

# area path -> (collection key, item key); None means the body is not wrapped
ENVELOPES: Dict[str, Tuple[Optional[str], Optional[str]]] = {
    r.path: (r.collection_key, r.item_key) for r in ALL_RESOURCES
}
ENVELOPES["officers"] = (None, None)


class ApiError(Exception):
    """The server answered with an error status"""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class NetworkError(Exception):
    """The request never got an answer"""

    def __init__(self, message: str = NETWORK_ERROR_MESSAGE):
        self.message = message
        super().__init__(message)


class RecordsApiClient:
    """Client for the Police Records Service API

    The session cookie set by ``login`` is kept in the underlying
    ``httpx.Client`` cookie jar and sent with every later request.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        http: Optional[httpx.Client] = None,
        timeout: float = 30.0,
    ):
        self.http = http or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self):
        self.http.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = self.http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise NetworkError()

        if response.status_code >= 400:
            try:
                message = response.json().get("message")
            except ValueError:
                message = None
            raise ApiError(response.status_code, message or response.reason_phrase)

        return response.json()

    @staticmethod
    def _unwrap(data: Any, key: Optional[str]) -> Any:
        return data[key] if key else data

    # Auth

    def login(self, username: str, password: str) -> Dict[str, Any]:
        data = self._request("POST", "/api/auth/login", json={"username": username, "password": password})
        return data["user"]

    def logout(self) -> None:
        self._request("POST", "/api/auth/logout")

    def me(self) -> Dict[str, Any]:
        return self._request("GET", "/api/auth/me")["user"]

    def register(self, values: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/auth/register", json=values)["user"]

    def forgot_password(self, username: str) -> Dict[str, Any]:
        return self._request("POST", "/api/auth/forgot-password", json={"username": username})

    def reset_password(self, token: str, password: str, confirm_password: str) -> None:
        self._request(
            "POST",
            "/api/auth/reset-password",
            json={"token": token, "password": password, "confirmPassword": confirm_password},
        )

    def update_profile(self, values: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", "/api/profile", json=values)["user"]

    # Record families

    def list_records(self, area: str) -> List[Dict[str, Any]]:
        collection_key, _ = ENVELOPES[area]
        return self._unwrap(self._request("GET", f"/api/{area}"), collection_key)

    def get_record(self, area: str, record_id: int) -> Dict[str, Any]:
        _, item_key = ENVELOPES[area]
        return self._unwrap(self._request("GET", f"/api/{area}/{record_id}"), item_key)

    def create_record(self, area: str, values: Dict[str, Any]) -> Dict[str, Any]:
        _, item_key = ENVELOPES[area]
        return self._unwrap(self._request("POST", f"/api/{area}", json=values), item_key)

    def update_record(self, area: str, record_id: int, values: Dict[str, Any]) -> Dict[str, Any]:
        _, item_key = ENVELOPES[area]
        return self._unwrap(self._request("PUT", f"/api/{area}/{record_id}", json=values), item_key)

    def delete_record(self, area: str, record_id: int) -> None:
        self._request("DELETE", f"/api/{area}/{record_id}")

    def search_plate(self, plate_number: str) -> Dict[str, Any]:
        return self._request("GET", f"/api/license-plates/search/{plate_number}")["licensePlate"]

    def update_vehicle_location(self, record_id: int, lng: float, lat: float) -> Dict[str, Any]:
        return self._request(
            "PATCH", f"/api/police-vehicles/{record_id}/location", json={"location": [lng, lat]}
        )

    def update_vehicle_status(self, record_id: int, status: str) -> Dict[str, Any]:
        return self._request("PATCH", f"/api/police-vehicles/{record_id}/status", json={"status": status})

    def list_users(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/users")["users"]

    def delete_user(self, user_id: int) -> None:
        self._request("DELETE", f"/api/users/{user_id}")
