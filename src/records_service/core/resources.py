"""
Resource Definitions

Describes each record family exposed over HTTP: where it is stored, how it is
validated and serialized, which derived number it carries and how the
responses are enveloped.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, Tuple, Type

from pydantic import BaseModel

from records_service.models import (
    Case,
    CaseCreate,
    CaseUpdate,
    Evidence,
    EvidenceCreate,
    EvidenceUpdate,
    Geofile,
    GeofileCreate,
    GeofileUpdate,
    LicensePlate,
    LicensePlateCreate,
    LicensePlateUpdate,
    OBEntry,
    OBEntryCreate,
    OBEntryUpdate,
    PoliceVehicle,
    PoliceVehicleCreate,
    PoliceVehicleUpdate,
    RecordModel,
    Report,
    ReportCreate,
    ReportUpdate,
)

USERS = "users"


def case_number(record_id: int, year: int) -> str:
    return f"CASE-{year}-{record_id:03d}"


def ob_number(record_id: int, year: int) -> str:
    return f"OB/{year}/{record_id:04d}"


def evidence_number(record_id: int, year: int) -> str:
    return f"EV-{year}-{record_id:04d}"


def report_number(record_id: int, year: int) -> str:
    return f"RPT-{year}-{record_id:04d}"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ResourceSpec:
    """One record family.

    ``collection_key``/``item_key`` name the JSON envelope of list and item
    responses; None means the bare list or record is returned.
    """

    kind: str
    label: str
    model: Type[RecordModel]
    create_model: Type[BaseModel]
    update_model: Type[BaseModel]
    collection_key: Optional[str] = None
    item_key: Optional[str] = None
    number_field: Optional[str] = None
    number_format: Optional[Callable[[int, int], str]] = None
    owner_field: Optional[str] = None
    unique_fields: Tuple[str, ...] = ()
    create_defaults: Callable[[], Dict[str, Any]] = field(default=dict)
    touch_fields: Tuple[str, ...] = ()

    @property
    def path(self) -> str:
        return self.kind.replace("_", "-")

    def derive(self, record_id: int) -> Dict[str, Any]:
        if not self.number_field:
            return {}
        return {self.number_field: self.number_format(record_id, _now().year)}


CASES = ResourceSpec(
    kind="cases",
    label="Case",
    model=Case,
    create_model=CaseCreate,
    update_model=CaseUpdate,
    collection_key="cases",
    item_key="case",
    number_field="case_number",
    number_format=case_number,
    owner_field="created_by_id",
)

OB_ENTRIES = ResourceSpec(
    kind="ob_entries",
    label="OB Entry",
    model=OBEntry,
    create_model=OBEntryCreate,
    update_model=OBEntryUpdate,
    collection_key="obEntries",
    item_key="obEntry",
    number_field="ob_number",
    number_format=ob_number,
    owner_field="recording_officer_id",
    create_defaults=lambda: {"date_time": _now(), "status": "recorded"},
)

LICENSE_PLATES = ResourceSpec(
    kind="license_plates",
    label="License plate",
    model=LicensePlate,
    create_model=LicensePlateCreate,
    update_model=LicensePlateUpdate,
    collection_key="licensePlates",
    item_key="licensePlate",
    owner_field="added_by_id",
    unique_fields=("plate_number",),
)

EVIDENCE = ResourceSpec(
    kind="evidence",
    label="Evidence",
    model=Evidence,
    create_model=EvidenceCreate,
    update_model=EvidenceUpdate,
    collection_key="evidence",
    number_field="evidence_number",
    number_format=evidence_number,
    owner_field="collected_by",
)

GEOFILES = ResourceSpec(
    kind="geofiles",
    label="Geofile",
    model=Geofile,
    create_model=GeofileCreate,
    update_model=GeofileUpdate,
    collection_key="geofiles",
    owner_field="uploaded_by",
)

REPORTS = ResourceSpec(
    kind="reports",
    label="Report",
    model=Report,
    create_model=ReportCreate,
    update_model=ReportUpdate,
    collection_key="reports",
    number_field="report_number",
    number_format=report_number,
    owner_field="requested_by",
)

POLICE_VEHICLES = ResourceSpec(
    kind="police_vehicles",
    label="Police vehicle",
    model=PoliceVehicle,
    create_model=PoliceVehicleCreate,
    update_model=PoliceVehicleUpdate,
    unique_fields=("vehicle_id", "license_plate"),
    create_defaults=lambda: {"last_update": _now()},
    touch_fields=("last_update",),
)

ALL_RESOURCES = (CASES, OB_ENTRIES, LICENSE_PLATES, EVIDENCE, GEOFILES, REPORTS, POLICE_VEHICLES)
