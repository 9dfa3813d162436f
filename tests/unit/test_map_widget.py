"""Unit tests for the vehicle tracking map"""

import json

import pytest

from records_service.client.map_widget import (
    DEFAULT_CENTER,
    MapWidget,
    parse_point,
    patrol_area_path,
    project,
    render_map,
    status_color,
)


def vehicle(record_id, status="available", location=(-122.45, 37.75), area=None):
    return {
        "id": record_id,
        "vehicleId": f"PATROL-{record_id:03d}",
        "status": status,
        "currentLocation": json.dumps(list(location)) if location is not None else None,
        "assignedArea": json.dumps(area) if area is not None else None,
    }


SQUARE = [[-122.5, 37.8], [-122.4, 37.8], [-122.4, 37.7]]


@pytest.mark.unit
class TestProjection:

    def test_project(self):
        x, y = project(-122.45, 37.75)

        assert x == pytest.approx(50.0)
        assert y == pytest.approx(50.0)

    def test_status_colors(self):
        assert status_color("available") == "#2ecc71"
        assert status_color("on_patrol") == "#3498db"
        assert status_color("responding") == "#e74c3c"
        assert status_color("out_of_service") == "#95a5a6"
        assert status_color("parked") == "#7f8c8d"
        assert status_color(None) == "#7f8c8d"

    def test_parse_point_rejects_malformed(self):
        assert parse_point("[-122.4, 37.7]") == (-122.4, 37.7)
        assert parse_point(None) is None
        assert parse_point("not json") is None
        assert parse_point("[1]") is None
        assert parse_point('["a", "b"]') is None

    def test_patrol_area_path(self):
        assert patrol_area_path(SQUARE) == "M 0 0 L 100 0 L 100 100 Z"

    def test_patrol_area_needs_three_points(self):
        assert patrol_area_path(SQUARE[:2]) is None


@pytest.mark.unit
class TestRenderMap:

    def test_markers_and_areas(self):
        render = render_map([vehicle(1, "responding", area=SQUARE), vehicle(2)])

        assert [m.vehicle_id for m in render.markers] == ["PATROL-001", "PATROL-002"]
        assert render.markers[0].color == "#e74c3c"
        assert render.markers[0].x == pytest.approx(50.0)
        assert len(render.patrol_areas) == 1
        assert render.patrol_areas[0].path.startswith("M 0 0")

    def test_vehicle_without_location_has_no_marker(self):
        render = render_map([vehicle(1, location=None), vehicle(2)])

        assert [m.record_id for m in render.markers] == [2]

    def test_malformed_location_has_no_marker(self):
        broken = vehicle(1)
        broken["currentLocation"] = "{oops"

        assert render_map([broken]).markers == []

    def test_patrol_areas_can_be_hidden(self):
        render = render_map([vehicle(1, area=SQUARE)], show_patrol_areas=False)

        assert render.patrol_areas == []
        assert len(render.markers) == 1

    def test_short_polygon_has_no_path(self):
        render = render_map([vehicle(1, area=SQUARE[:2])])

        assert render.patrol_areas == []


@pytest.mark.unit
class TestMapWidget:

    def test_select_vehicle_centres_and_notifies(self):
        selected = []
        target = vehicle(3, location=(-122.41, 37.78))
        widget = MapWidget([vehicle(1), target], on_vehicle_select=selected.append)

        widget.select_vehicle(target)

        assert selected == [target]
        assert widget.center == (-122.41, 37.78)
        assert [m.selected for m in widget.render().markers] == [False, True]

    def test_zoom_is_clamped(self):
        widget = MapWidget()
        assert widget.zoom == 12

        for _ in range(10):
            widget.zoom_in()
        assert widget.zoom == 18

        for _ in range(20):
            widget.zoom_out()
        assert widget.zoom == 8

    def test_reset(self):
        widget = MapWidget([vehicle(1)])
        widget.select_vehicle(vehicle(1, location=(-122.3, 37.7)))
        widget.zoom_in()

        widget.reset()

        assert widget.center == DEFAULT_CENTER
        assert widget.zoom == 12
        assert widget.selected_vehicle is None
