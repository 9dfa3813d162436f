"""
Vehicle Tracking Map

Projects police vehicles and their patrol areas onto a 100x100 view box
centred on San Francisco. ``render_map`` is a pure function of the vehicle
list; ``MapWidget`` adds selection, zoom and centre state on top of it.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

DEFAULT_CENTER: Tuple[float, float] = (-122.4194, 37.7749)
DEFAULT_ZOOM = 12
MIN_ZOOM = 8
MAX_ZOOM = 18

STATUS_COLORS = {
    "available": "#2ecc71",
    "on_patrol": "#3498db",
    "responding": "#e74c3c",
    "out_of_service": "#95a5a6",
}
DEFAULT_COLOR = "#7f8c8d"


@dataclass
class MapMarker:
    record_id: int
    vehicle_id: str
    x: float
    y: float
    color: str
    status: str
    selected: bool = False


@dataclass
class PatrolArea:
    vehicle_id: str
    path: str
    color: str
    label_x: float
    label_y: float


@dataclass
class MapRender:
    markers: List[MapMarker] = field(default_factory=list)
    patrol_areas: List[PatrolArea] = field(default_factory=list)


def status_color(status: Optional[str]) -> str:
    return STATUS_COLORS.get(status, DEFAULT_COLOR)


def project(lng: float, lat: float) -> Tuple[float, float]:
    """Longitude/latitude to view box coordinates"""
    x = (lng + 122.5) / 0.1 * 100
    y = (37.8 - lat) / 0.1 * 100
    return x, y


def _is_point(value: Any) -> bool:
    return (
        isinstance(value, (list, tuple))
        and len(value) == 2
        and all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value)
    )


def parse_coordinates(text: Optional[str]) -> Optional[Any]:
    """Decode a JSON coordinate field; None when absent or malformed"""
    if not text:
        return None
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        logger.debug(f"Ignoring malformed coordinates: {text!r}")
        return None


def parse_point(text: Optional[str]) -> Optional[Tuple[float, float]]:
    value = parse_coordinates(text)
    if not _is_point(value):
        return None
    return float(value[0]), float(value[1])


def _fmt(value: float) -> str:
    return f"{round(value, 4):g}"


def patrol_area_path(points: Sequence[Sequence[float]]) -> Optional[str]:
    """SVG path ``M x y L x y ... Z`` for a polygon, None below three points"""
    if len(points) < 3 or not all(_is_point(p) for p in points):
        return None
    commands = []
    for index, (lng, lat) in enumerate(points):
        x, y = project(lng, lat)
        commands.append(f"{'M' if index == 0 else 'L'} {_fmt(x)} {_fmt(y)}")
    return " ".join(commands) + " Z"


def render_map(
    vehicles: Sequence[Dict[str, Any]],
    show_patrol_areas: bool = True,
    selected_id: Optional[int] = None,
) -> MapRender:
    """
    Build the render model for a list of vehicles (camelCase records)

    Vehicles without a usable ``currentLocation`` get no marker; patrol areas
    that do not decode to a polygon of at least three points get no path.
    """
    render = MapRender()

    for vehicle in vehicles:
        color = status_color(vehicle.get("status"))

        if show_patrol_areas:
            area = parse_coordinates(vehicle.get("assignedArea"))
            path = patrol_area_path(area) if isinstance(area, list) else None
            if path:
                label_x, label_y = project(*area[0])
                render.patrol_areas.append(
                    PatrolArea(vehicle.get("vehicleId"), path, color, label_x, label_y)
                )

        point = parse_point(vehicle.get("currentLocation"))
        if point is None:
            continue
        x, y = project(*point)
        render.markers.append(
            MapMarker(
                record_id=vehicle.get("id"),
                vehicle_id=vehicle.get("vehicleId"),
                x=x,
                y=y,
                color=color,
                status=vehicle.get("status"),
                selected=selected_id is not None and vehicle.get("id") == selected_id,
            )
        )

    return render


class MapWidget:
    """Interactive map state: selection, zoom level and centre"""

    def __init__(
        self,
        vehicles: Sequence[Dict[str, Any]] = (),
        show_patrol_areas: bool = True,
        on_vehicle_select: Optional[Callable[[Dict[str, Any]], None]] = None,
    ):
        self.vehicles = list(vehicles)
        self.show_patrol_areas = show_patrol_areas
        self.on_vehicle_select = on_vehicle_select
        self.selected_vehicle: Optional[Dict[str, Any]] = None
        self.center: Tuple[float, float] = DEFAULT_CENTER
        self.zoom = DEFAULT_ZOOM

    def render(self) -> MapRender:
        selected_id = self.selected_vehicle.get("id") if self.selected_vehicle else None
        return render_map(self.vehicles, self.show_patrol_areas, selected_id)

    def select_vehicle(self, vehicle: Dict[str, Any]) -> None:
        """Select a vehicle, notify the callback and centre on it when located"""
        self.selected_vehicle = vehicle
        if self.on_vehicle_select:
            self.on_vehicle_select(vehicle)
        point = parse_point(vehicle.get("currentLocation"))
        if point:
            self.center = point

    def zoom_in(self) -> int:
        self.zoom = min(self.zoom + 1, MAX_ZOOM)
        return self.zoom

    def zoom_out(self) -> int:
        self.zoom = max(self.zoom - 1, MIN_ZOOM)
        return self.zoom

    def reset(self) -> None:
        self.center = DEFAULT_CENTER
        self.zoom = DEFAULT_ZOOM
        self.selected_vehicle = None
