"""
API Request and Response Models

Pydantic models for API input validation. Validation is shape-only: required
fields, types and a few length checks. No cross-field business rules beyond
password confirmation.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, model_validator
from pydantic.alias_generators import to_camel

from .records import UserRole, VehicleStatus


class Payload(BaseModel):
    """Base for request bodies (accepts camelCase or snake_case keys)"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# Auth

class LoginRequest(Payload):
    username: str = Field(..., min_length=1, description="Username is required")
    password: str = Field(..., min_length=1, description="Password is required")


class RegisterRequest(Payload):
    """Admin-only account registration"""

    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)
    confirm_password: str = Field(..., min_length=1)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    role: UserRole = UserRole.USER
    badge_number: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    phone: Optional[str] = None

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self


class ForgotPasswordRequest(Payload):
    username: str = Field(..., min_length=1)


class ResetPasswordRequest(Payload):
    token: str = Field(..., min_length=1)
    password: str = Field(..., min_length=6, description="Password must be at least 6 characters")
    confirm_password: str = Field(..., min_length=1)

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self


class ProfileUpdate(Payload):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    badge_number: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    phone: Optional[str] = None
    profile_image: Optional[str] = None


class OfficerCreate(Payload):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    badge_number: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    phone: Optional[str] = None


class OfficerUpdate(ProfileUpdate):
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None


# Cases

class CaseCreate(Payload):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    type: str = "Other"
    status: str = "Open"
    priority: str = "Medium"
    location: Optional[str] = None
    assigned_officer: Optional[str] = None
    assigned_officer_id: Optional[int] = None
    incident_date: Optional[str] = None


class CaseUpdate(Payload):
    title: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    location: Optional[str] = None
    assigned_officer: Optional[str] = None
    assigned_officer_id: Optional[int] = None
    incident_date: Optional[str] = None


# Occurrence book

class OBEntryCreate(Payload):
    type: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    reported_by: str = Field(..., min_length=1)
    location: Optional[str] = None


class OBEntryUpdate(Payload):
    type: Optional[str] = None
    description: Optional[str] = None
    reported_by: Optional[str] = None
    location: Optional[str] = None
    status: Optional[str] = None


# License plates

class LicensePlateCreate(Payload):
    plate_number: str = Field(..., min_length=1)
    owner_name: str = Field(..., min_length=1)
    father_name: Optional[str] = None
    mother_name: Optional[str] = None
    id_number: Optional[str] = None
    passport_number: Optional[str] = None
    owner_image: Optional[str] = None


class LicensePlateUpdate(Payload):
    plate_number: Optional[str] = None
    owner_name: Optional[str] = None
    father_name: Optional[str] = None
    mother_name: Optional[str] = None
    id_number: Optional[str] = None
    passport_number: Optional[str] = None
    owner_image: Optional[str] = None


# Evidence

class EvidenceCreate(Payload):
    type: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    chain_of_custody: Optional[str] = Field(default=None, alias="chain_of_custody")
    status: str = "collected"
    collected_at: datetime
    case_id: Optional[int] = None
    ob_id: Optional[int] = None


class EvidenceUpdate(Payload):
    type: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    chain_of_custody: Optional[str] = Field(default=None, alias="chain_of_custody")
    status: Optional[str] = None
    collected_at: Optional[datetime] = None
    case_id: Optional[int] = None
    ob_id: Optional[int] = None


# Geofiles

class GeofileCreate(Payload):
    filename: str = Field(..., min_length=1)
    filepath: str = Field(..., min_length=1)
    file_type: str = Field(..., min_length=1)
    coordinates: Optional[str] = None
    address: Optional[str] = None
    description: Optional[str] = None
    case_id: Optional[int] = None
    ob_id: Optional[int] = None
    evidence_id: Optional[int] = None


class GeofileUpdate(Payload):
    filename: Optional[str] = None
    filepath: Optional[str] = None
    file_type: Optional[str] = None
    coordinates: Optional[str] = None
    address: Optional[str] = None
    description: Optional[str] = None
    case_id: Optional[int] = None
    ob_id: Optional[int] = None
    evidence_id: Optional[int] = None


# Reports

class ReportCreate(Payload):
    type: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    status: str = "pending"
    priority: str = "medium"
    case_id: Optional[int] = None
    ob_id: Optional[int] = None
    evidence_id: Optional[int] = None


class ReportUpdate(Payload):
    type: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    case_id: Optional[int] = None
    ob_id: Optional[int] = None
    evidence_id: Optional[int] = None


# Police vehicles

class PoliceVehicleCreate(Payload):
    vehicle_id: str = Field(..., min_length=1)
    license_plate: str = Field(..., min_length=1)
    vehicle_type: str = Field(..., min_length=1)
    make: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    year: int
    current_location: Optional[str] = None
    assigned_area: Optional[str] = None
    status: VehicleStatus = VehicleStatus.AVAILABLE
    assigned_officer_id: Optional[int] = None


class PoliceVehicleUpdate(Payload):
    vehicle_id: Optional[str] = None
    license_plate: Optional[str] = None
    vehicle_type: Optional[str] = None
    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    current_location: Optional[str] = None
    assigned_area: Optional[str] = None
    status: Optional[VehicleStatus] = None
    assigned_officer_id: Optional[int] = None


class VehicleLocationUpdate(Payload):
    location: List[StrictFloat] = Field(..., min_length=2, max_length=2, description="[longitude, latitude]")


class VehicleStatusUpdate(Payload):
    status: VehicleStatus


class MessageResponse(BaseModel):
    """Plain acknowledgement"""

    message: str


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(default="healthy")
    service: str = Field(default="police-records-service")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    store: str = Field(default="memory")
    store_available: bool = Field(default=True)
