"""Data models for Records Service"""

from .records import (
    Case,
    Evidence,
    Geofile,
    LicensePlate,
    OBEntry,
    PoliceVehicle,
    RecordModel,
    Report,
    User,
    UserRole,
    VehicleStatus,
)
from .requests import (
    CaseCreate,
    CaseUpdate,
    EvidenceCreate,
    EvidenceUpdate,
    ForgotPasswordRequest,
    GeofileCreate,
    GeofileUpdate,
    HealthResponse,
    LicensePlateCreate,
    LicensePlateUpdate,
    LoginRequest,
    MessageResponse,
    OBEntryCreate,
    OBEntryUpdate,
    OfficerCreate,
    OfficerUpdate,
    PoliceVehicleCreate,
    PoliceVehicleUpdate,
    ProfileUpdate,
    RegisterRequest,
    ReportCreate,
    ReportUpdate,
    ResetPasswordRequest,
    VehicleLocationUpdate,
    VehicleStatusUpdate,
)

__all__ = [
    "Case",
    "Evidence",
    "Geofile",
    "LicensePlate",
    "OBEntry",
    "PoliceVehicle",
    "RecordModel",
    "Report",
    "User",
    "UserRole",
    "VehicleStatus",
    "CaseCreate",
    "CaseUpdate",
    "EvidenceCreate",
    "EvidenceUpdate",
    "ForgotPasswordRequest",
    "GeofileCreate",
    "GeofileUpdate",
    "HealthResponse",
    "LicensePlateCreate",
    "LicensePlateUpdate",
    "LoginRequest",
    "MessageResponse",
    "OBEntryCreate",
    "OBEntryUpdate",
    "OfficerCreate",
    "OfficerUpdate",
    "PoliceVehicleCreate",
    "PoliceVehicleUpdate",
    "ProfileUpdate",
    "RegisterRequest",
    "ReportCreate",
    "ReportUpdate",
    "ResetPasswordRequest",
    "VehicleLocationUpdate",
    "VehicleStatusUpdate",
]
