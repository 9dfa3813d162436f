"""
Feature Views

One FeatureView per feature area (cases, evidence, geofiles, reports,
license plates, OB entries, officers). It ties the navigator, the API client
and the local filters together and keeps the state a screen renders from:
records, form values, loading flag and the last error.
"""

import logging
from typing import Any, Dict, List, Optional

from records_service.client.api_client import (
    NETWORK_ERROR_MESSAGE,
    ApiError,
    NetworkError,
    RecordsApiClient,
)
from records_service.client.filters import filter_records
from records_service.client.navigation import ViewName, ViewNavigator

logger = logging.getLogger(__name__)


class FeatureView:
    """List/detail/create/edit screen state for one feature area"""

    def __init__(self, area: str, api: RecordsApiClient, navigator: ViewNavigator = None):
        self.area = area
        self.api = api
        self.navigator = navigator or ViewNavigator()
        self.records: List[Dict[str, Any]] = []
        self.search = ""
        self.filters: Dict[str, Any] = {}
        self.form_values: Dict[str, Any] = {}
        self.error: Optional[str] = None
        self.is_loading = False

    @property
    def current_view(self) -> ViewName:
        return self.navigator.current_view

    @property
    def selected_record(self) -> Optional[Dict[str, Any]]:
        return self.navigator.selected_record

    @property
    def visible_records(self) -> List[Dict[str, Any]]:
        return filter_records(self.area, self.records, self.search, self.filters)

    def _fail(self, exc: Exception) -> bool:
        if isinstance(exc, ApiError):
            self.error = exc.message
        else:
            self.error = NETWORK_ERROR_MESSAGE
        logger.warning(f"{self.area}: {self.error}")
        return False

    def _return_to_list(self) -> None:
        while self.current_view != ViewName.LIST and self.navigator.pop():
            pass

    def open(self) -> bool:
        """Enter the area at its list view and load the collection"""
        self.navigator.reset()
        return self.refresh()

    def refresh(self) -> bool:
        """Refetch the whole collection"""
        self.is_loading = True
        try:
            self.records = self.api.list_records(self.area)
        except (ApiError, NetworkError) as e:
            return self._fail(e)
        finally:
            self.is_loading = False
        return True

    def select(self, record: Dict[str, Any]) -> None:
        self.navigator.push(ViewName.DETAIL, record)

    def start_create(self) -> None:
        self.form_values = {}
        self.error = None
        self.navigator.push(ViewName.CREATE)

    def start_edit(self) -> None:
        """Open the edit form prefilled from the selected record"""
        if self.selected_record is None:
            raise RuntimeError("No record selected")
        self.form_values = dict(self.selected_record)
        self.error = None
        self.navigator.push(ViewName.EDIT, self.selected_record)

    def submit_create(self, values: Dict[str, Any]) -> bool:
        """
        Create a record from form values

        On failure the view stays on the create form with the values kept and
        ``error`` set. On success the list is refetched and shown.
        """
        self.form_values = dict(values)
        try:
            self.api.create_record(self.area, values)
        except (ApiError, NetworkError) as e:
            return self._fail(e)

        self.form_values = {}
        self.error = None
        self._return_to_list()
        self.refresh()
        return True

    def submit_edit(self, values: Dict[str, Any]) -> bool:
        """Save the edit form; on success show the updated record's detail"""
        self.form_values = dict(values)
        record_id = self.selected_record["id"]
        try:
            updated = self.api.update_record(self.area, record_id, values)
        except (ApiError, NetworkError) as e:
            return self._fail(e)

        self.form_values = {}
        self.error = None
        self.navigator.pop()
        if self.current_view == ViewName.DETAIL:
            self.navigator.selected_record = updated
        else:
            self.navigator.push(ViewName.DETAIL, updated)
        self.refresh()
        return True

    def delete_selected(self) -> bool:
        if self.selected_record is None:
            raise RuntimeError("No record selected")
        try:
            self.api.delete_record(self.area, self.selected_record["id"])
        except (ApiError, NetworkError) as e:
            return self._fail(e)

        self.error = None
        self._return_to_list()
        self.refresh()
        return True

    def back(self) -> bool:
        return self.navigator.pop()
