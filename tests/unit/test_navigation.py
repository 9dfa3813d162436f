"""Unit tests for the per-feature view navigator"""

import pytest

from records_service.client.navigation import ViewName, ViewNavigator


@pytest.mark.unit
class TestViewNavigator:

    def test_starts_at_list(self):
        nav = ViewNavigator()

        assert nav.current_view == ViewName.LIST
        assert nav.selected_record is None
        assert nav.depth == 1

    def test_select_then_back(self):
        nav = ViewNavigator()
        record = {"id": 1, "title": "A"}

        nav.push(ViewName.DETAIL, record)
        assert nav.current_view == ViewName.DETAIL
        assert nav.selected_record == record

        assert nav.pop() is True
        assert nav.current_view == ViewName.LIST
        assert nav.selected_record is None

    def test_pop_at_bottom_is_noop(self):
        nav = ViewNavigator()

        assert nav.pop() is False
        assert nav.current_view == ViewName.LIST

    def test_edit_back_to_detail_keeps_selection(self):
        nav = ViewNavigator()
        record = {"id": 1}
        nav.push(ViewName.DETAIL, record)
        nav.push(ViewName.EDIT, record)

        nav.pop()

        assert nav.current_view == ViewName.DETAIL
        assert nav.selected_record == record

    def test_accepts_plain_strings(self):
        nav = ViewNavigator()
        nav.push("create")

        assert nav.current_view == ViewName.CREATE

    def test_listeners_see_push_and_pop(self):
        nav = ViewNavigator()
        events = []
        nav.add_listener(lambda action, entry: events.append((action, entry.view)))

        nav.push(ViewName.DETAIL, {"id": 1})
        nav.pop()
        nav.pop()

        assert events == [("push", ViewName.DETAIL), ("pop", ViewName.DETAIL)]

    def test_sync_from_history_does_not_notify(self):
        nav = ViewNavigator()
        events = []
        nav.add_listener(lambda action, entry: events.append(action))
        nav.push(ViewName.DETAIL, {"id": 1})

        assert nav.sync_from_history() is True
        assert nav.current_view == ViewName.LIST
        assert nav.selected_record is None
        assert events == ["push"]
        assert nav.sync_from_history() is False

    def test_reset(self):
        nav = ViewNavigator()
        nav.push(ViewName.DETAIL, {"id": 1})
        nav.push(ViewName.EDIT)

        nav.reset()

        assert nav.current_view == ViewName.LIST
        assert nav.depth == 1
        assert nav.selected_record is None
