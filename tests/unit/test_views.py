"""Unit tests for FeatureView, driven against the app through TestClient"""

import httpx
import pytest

from records_service.client.api_client import NETWORK_ERROR_MESSAGE, RecordsApiClient
from records_service.client.navigation import ViewName
from records_service.client.views import FeatureView


@pytest.fixture
def api(admin_client):
    return RecordsApiClient(http=admin_client)


@pytest.fixture
def cases_view(api):
    view = FeatureView("cases", api)
    assert view.open()
    return view


def unreachable_api():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    http = httpx.Client(base_url="http://records.invalid", transport=httpx.MockTransport(handler))
    return RecordsApiClient(http=http)


@pytest.mark.unit
class TestFeatureView:

    def test_open_loads_collection(self, cases_view):
        assert cases_view.current_view == ViewName.LIST
        assert len(cases_view.records) == 3
        assert cases_view.error is None

    def test_select_then_back(self, cases_view):
        record = cases_view.records[0]

        cases_view.select(record)
        assert cases_view.current_view == ViewName.DETAIL
        assert cases_view.selected_record == record

        assert cases_view.back()
        assert cases_view.current_view == ViewName.LIST
        assert cases_view.selected_record is None

    def test_failed_create_keeps_form(self, cases_view):
        cases_view.start_create()
        values = {"description": "no title given"}

        assert cases_view.submit_create(values) is False

        assert cases_view.current_view == ViewName.CREATE
        assert cases_view.form_values == values
        assert cases_view.error == "Invalid input"
        assert len(cases_view.records) == 3

    def test_create_returns_to_refreshed_list(self, cases_view):
        cases_view.start_create()

        assert cases_view.submit_create({"title": "Shoplifting", "priority": "Low"})

        assert cases_view.current_view == ViewName.LIST
        assert cases_view.form_values == {}
        assert len(cases_view.records) == 4
        assert cases_view.records[-1]["title"] == "Shoplifting"

    def test_edit_shows_updated_detail(self, cases_view):
        cases_view.select(cases_view.records[1])
        cases_view.start_edit()
        assert cases_view.form_values["title"] == "Traffic Accident Investigation"

        assert cases_view.submit_edit({"status": "Closed"})

        assert cases_view.current_view == ViewName.DETAIL
        assert cases_view.selected_record["status"] == "Closed"
        assert cases_view.selected_record["title"] == "Traffic Accident Investigation"
        assert cases_view.records[1]["status"] == "Closed"

    def test_delete_selected(self, cases_view):
        doomed = cases_view.records[0]
        cases_view.select(doomed)

        assert cases_view.delete_selected()

        assert cases_view.current_view == ViewName.LIST
        assert doomed["id"] not in [r["id"] for r in cases_view.records]

    def test_visible_records_apply_filters(self, cases_view):
        cases_view.filters = {"status": "Open"}
        assert len(cases_view.visible_records) == 2

        cases_view.search = "missing"
        assert [r["title"] for r in cases_view.visible_records] == ["Missing Person Report"]

    def test_network_failure_uses_generic_message(self):
        view = FeatureView("cases", unreachable_api())

        assert view.open() is False
        assert view.error == NETWORK_ERROR_MESSAGE
        assert view.is_loading is False

    def test_unwrapped_area(self, api):
        view = FeatureView("police-vehicles", api)

        assert view.open()
        assert len(view.records) == 4
