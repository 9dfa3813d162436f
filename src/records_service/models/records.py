"""
Record Data Models

Core domain models for the records kept by the service. Field names are
snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserRole(str, Enum):
    """Account role"""
    ADMIN = "admin"
    USER = "user"


class VehicleStatus(str, Enum):
    """Police vehicle availability"""
    AVAILABLE = "available"
    ON_PATROL = "on_patrol"
    RESPONDING = "responding"
    OUT_OF_SERVICE = "out_of_service"


class RecordModel(BaseModel):
    """Base for every stored record"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: int = Field(..., description="Store-assigned identifier")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_wire(self) -> Dict[str, Any]:
        """Serialize with wire (camelCase) keys"""
        return self.model_dump(mode="json", by_alias=True)


class User(RecordModel):
    """Account as exposed by the API (never carries the password hash)"""

    username: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: UserRole = UserRole.USER
    badge_number: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    phone: Optional[str] = None
    profile_image: Optional[str] = None
    is_active: bool = True
    last_login_at: Optional[datetime] = None


class Case(RecordModel):
    """Investigation case"""

    case_number: str
    title: str
    description: Optional[str] = None
    type: Optional[str] = None
    status: str = "Open"
    priority: str = "Medium"
    location: Optional[str] = None
    assigned_officer: Optional[str] = None
    assigned_officer_id: Optional[int] = None
    incident_date: Optional[str] = None
    created_by_id: Optional[int] = None


class OBEntry(RecordModel):
    """Occurrence book entry"""

    ob_number: str
    date_time: Optional[datetime] = None
    type: str
    description: str
    reported_by: str
    recording_officer_id: Optional[int] = None
    location: Optional[str] = None
    status: str = "recorded"


class LicensePlate(RecordModel):
    """Registered plate and owner details"""

    plate_number: str
    owner_name: str
    father_name: Optional[str] = None
    mother_name: Optional[str] = None
    id_number: Optional[str] = None
    passport_number: Optional[str] = None
    owner_image: Optional[str] = None
    added_by_id: Optional[int] = None


class Evidence(RecordModel):
    """Logged evidence item"""

    evidence_number: str
    case_id: Optional[int] = None
    ob_id: Optional[int] = None
    type: str
    description: str
    location: str
    chain_of_custody: Optional[str] = Field(default=None, alias="chain_of_custody")
    status: str = "collected"
    collected_by: Optional[int] = None
    collected_at: Optional[datetime] = None


class Geofile(RecordModel):
    """Geographic file attached to a case, OB entry or evidence item"""

    case_id: Optional[int] = None
    ob_id: Optional[int] = None
    evidence_id: Optional[int] = None
    filename: str
    filepath: str
    file_type: str
    coordinates: Optional[str] = None
    address: Optional[str] = None
    description: Optional[str] = None
    uploaded_by: Optional[int] = None


class Report(RecordModel):
    """Generated report"""

    report_number: str
    type: str
    case_id: Optional[int] = None
    ob_id: Optional[int] = None
    evidence_id: Optional[int] = None
    title: str
    content: str
    requested_by: Optional[int] = None
    status: str = "pending"
    priority: str = "medium"


class PoliceVehicle(RecordModel):
    """Tracked police vehicle"""

    vehicle_id: str
    license_plate: str
    vehicle_type: str
    make: str
    model: str
    year: int
    current_location: Optional[str] = None
    assigned_area: Optional[str] = None
    status: VehicleStatus = VehicleStatus.AVAILABLE
    assigned_officer_id: Optional[int] = None
    last_update: Optional[datetime] = None
