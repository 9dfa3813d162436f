"""
Default Data

Demo records loaded at startup: the administrator account, sample cases and
patrol vehicles around San Francisco.
"""

import json
import logging

from records_service.core.accounts import AccountManager
from records_service.core.record_manager import RecordManager
from records_service.core.resources import CASES, POLICE_VEHICLES
from records_service.infrastructure.store import RecordStore
from records_service.models import CaseCreate, PoliceVehicleCreate

logger = logging.getLogger(__name__)

DEFAULT_ADMIN = {
    "username": "admin",
    "email": "admin@police.gov",
    "first_name": "System",
    "last_name": "Administrator",
    "role": "admin",
    "badge_number": "ADMIN001",
    "department": "IT",
    "position": "System Administrator",
    "phone": "+1-555-0000",
}
DEFAULT_ADMIN_PASSWORD = "admin123"

SAMPLE_CASES = [
    {
        "title": "Burglary at Main Street Store",
        "description": "Break-in occurred at electronics store on Main Street. "
                       "Several items reported missing including laptops and phones.",
        "type": "Burglary",
        "priority": "High",
        "status": "In Progress",
        "incident_date": "2025-01-20T10:30:00Z",
        "location": "Main Street Electronics Store, Downtown",
        "assigned_officer": "Officer Johnson",
    },
    {
        "title": "Traffic Accident Investigation",
        "description": "Multi-vehicle accident at highway intersection. Minor injuries reported.",
        "type": "Traffic",
        "priority": "Medium",
        "status": "Open",
        "incident_date": "2025-01-21T15:45:00Z",
        "location": "Highway 101 & Oak Avenue Intersection",
        "assigned_officer": "Officer Davis",
    },
    {
        "title": "Missing Person Report",
        "description": "Adult male reported missing by family. Last seen at work on Friday evening.",
        "type": "Other",
        "priority": "Critical",
        "status": "Open",
        "incident_date": "2025-01-19T18:00:00Z",
        "location": "Last seen at Downtown Office Building",
        "assigned_officer": "Detective Smith",
    },
]


def _square(west: float, east: float, north: float, south: float) -> str:
    return json.dumps([
        [west, north], [east, north], [east, south], [west, south], [west, north]
    ])


SAMPLE_VEHICLES = [
    {
        "vehicle_id": "PATROL-001",
        "license_plate": "POL-001",
        "vehicle_type": "patrol",
        "make": "Ford",
        "model": "Explorer",
        "year": 2023,
        "current_location": json.dumps([-122.4194, 37.7749]),
        "assigned_area": _square(-122.45, -122.40, 37.7849, 37.7649),
        "status": "on_patrol",
        "assigned_officer_id": 1,
    },
    {
        "vehicle_id": "PATROL-002",
        "license_plate": "POL-002",
        "vehicle_type": "motorcycle",
        "make": "Harley-Davidson",
        "model": "Police Special",
        "year": 2022,
        "current_location": json.dumps([-122.3894, 37.7594]),
        "assigned_area": _square(-122.42, -122.37, 37.77, 37.75),
        "status": "available",
    },
    {
        "vehicle_id": "K9-001",
        "license_plate": "POL-K9-001",
        "vehicle_type": "k9",
        "make": "Chevrolet",
        "model": "Tahoe",
        "year": 2023,
        "current_location": json.dumps([-122.4094, 37.7849]),
        "assigned_area": _square(-122.43, -122.39, 37.79, 37.77),
        "status": "responding",
        "assigned_officer_id": 1,
    },
    {
        "vehicle_id": "SPECIAL-001",
        "license_plate": "POL-SWAT-001",
        "vehicle_type": "special",
        "make": "Ford",
        "model": "F-550",
        "year": 2021,
        "current_location": json.dumps([-122.4394, 37.7949]),
        "assigned_area": _square(-122.46, -122.41, 37.80, 37.78),
        "status": "out_of_service",
    },
]


async def seed_defaults(store: RecordStore) -> None:
    """Load demo data into an empty store. Safe to call on a populated one."""
    admin, created = await AccountManager(store).ensure_account(DEFAULT_ADMIN, DEFAULT_ADMIN_PASSWORD)
    if not created:
        logger.info("Default data already present, skipping seed")
        return

    cases = RecordManager(CASES, store)
    for data in SAMPLE_CASES:
        await cases.create_record(CaseCreate(**data), user_id=admin.id)

    vehicles = RecordManager(POLICE_VEHICLES, store)
    for data in SAMPLE_VEHICLES:
        await vehicles.create_record(PoliceVehicleCreate(**data))

    logger.info(
        f"Seeded admin account, {len(SAMPLE_CASES)} cases and {len(SAMPLE_VEHICLES)} vehicles"
    )
