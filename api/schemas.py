"""API Schemas - Request and Response DTOs"""
from pydantic import BaseModel, Field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from domain.entities import StaffProfile
from domain.enums import ServiceKind, StaffRole
from domain.value_objects import CleaningTasks


# ============================================================================
# ROOM SCHEMAS
# ============================================================================

class CreateRoomRequest(BaseModel):
    """Create room request DTO"""
    room_id: str = Field(min_length=1)
    category: str
    nightly_rate: Decimal = Field(gt=0)


class RoomResponse(BaseModel):
    """Room response DTO"""
    room_id: str
    category: str
    nightly_rate: Decimal
    occupancy: str
    cleanliness: str
    available: bool


# ============================================================================
# GUEST SCHEMAS
# ============================================================================

class CreateGuestRequest(BaseModel):
    """Register guest request DTO"""
    guest_id: str = Field(min_length=1)
    name: str
    age: int = Field(ge=0)
    contact_info: str = ""


class GuestResponse(BaseModel):
    """Guest response DTO"""
    guest_id: str
    name: str
    age: int
    contact_info: str
    stay_status: str
    current_room_id: Optional[str] = None
    reserved_room_id: Optional[str] = None
    checked_in_at: Optional[datetime] = None
    scheduled_check_out_at: Optional[datetime] = None


class ReserveRoomRequest(BaseModel):
    """Reserve room request DTO"""
    room_id: str


class ServiceRequest(BaseModel):
    """Service request DTO"""
    kind: ServiceKind
    room_id: Optional[str] = None
    nights: Optional[int] = None
    peak_season: bool = False
    tasks: Optional[CleaningTasks] = None
    dish_name: Optional[str] = None
    quantity: int = 1


# ============================================================================
# STAFF SCHEMAS
# ============================================================================

class CreateStaffRequest(BaseModel):
    """Onboard staff request DTO"""
    staff_id: str = Field(min_length=1)
    role: StaffRole
    name: str
    age: int = Field(ge=0)
    contact_info: str = ""
    base_salary: Optional[Decimal] = Field(None, ge=0)
    profile: StaffProfile = Field(discriminator="role")


class StaffResponse(BaseModel):
    """Staff response DTO"""
    staff_id: str
    role: str
    name: str
    age: int
    contact_info: str
    base_salary: Decimal
    profile: StaffProfile = Field(discriminator="role")


class UpdateShiftRequest(BaseModel):
    shift: str


class AssignFloorRequest(BaseModel):
    floor: str


class UpdateAvailabilityRequest(BaseModel):
    available: bool


class UpdateExperienceRequest(BaseModel):
    years: int


class CompensationResponse(BaseModel):
    """Compensation response DTO"""
    staff_id: str
    tier: str
    base_salary: Decimal
    total: Decimal


# ============================================================================
# DINING SCHEMAS
# ============================================================================

class MenuItemRequest(BaseModel):
    """Add menu item request DTO"""
    name: str = Field(min_length=1)


class MenuResponse(BaseModel):
    items: List[str]


# ============================================================================
# PRICING SCHEMAS
# ============================================================================

class RoomCostResponse(BaseModel):
    nightly_rate: Decimal
    nights: int
    peak_season: bool
    cost: Decimal


class DiscountResponse(BaseModel):
    amount: Decimal
    loyal_member: bool
    discounted: Decimal


class EnumValuesResponse(BaseModel):
    values: List[str]
