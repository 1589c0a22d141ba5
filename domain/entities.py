"""Domain Entities"""
from pydantic import BaseModel, Field
from decimal import Decimal
from typing import Optional, List, Literal, Union

from domain.enums import OccupancyStatus, CleanlinessStatus, StayStatus, StaffRole
from domain.value_objects import StayInterval


class Room(BaseModel):
    """Room Entity

    Occupancy and cleanliness are only changed through the RoomRegistry.
    """

    # Identity
    room_id: str = Field(min_length=1)

    category: str
    nightly_rate: Decimal = Field(gt=0)

    # State
    occupancy: OccupancyStatus = OccupancyStatus.VACANT
    cleanliness: CleanlinessStatus = CleanlinessStatus.CLEAN

    class Config:
        from_attributes = True

    # ==================== QUERY METHODS ====================
    @property
    def is_occupied(self) -> bool:
        return self.occupancy == OccupancyStatus.OCCUPIED

    @property
    def is_clean(self) -> bool:
        return self.cleanliness == CleanlinessStatus.CLEAN

    def is_available(self) -> bool:
        """Vacant and clean"""
        return not self.is_occupied and self.is_clean


class Guest(BaseModel):
    """Guest Entity

    A guest is in-house while ``current_room_id`` is set; ``stay`` is set
    exactly for the same period and both are cleared on check-out.
    """

    # Identity
    guest_id: str = Field(min_length=1)

    name: str
    age: int = Field(ge=0)
    contact_info: str = ""

    # Stay
    current_room_id: Optional[str] = None
    stay: Optional[StayInterval] = None
    reserved_room_id: Optional[str] = None
    stay_status: StayStatus = StayStatus.UNBOOKED

    class Config:
        from_attributes = True

    @property
    def is_in_house(self) -> bool:
        return self.current_room_id is not None

    @property
    def has_reservation(self) -> bool:
        return self.stay_status == StayStatus.RESERVED

    # ==================== STATE TRANSITION METHODS ====================
    def reserve(self, room_id: str) -> None:
        self.reserved_room_id = room_id
        self.stay_status = StayStatus.RESERVED

    def cancel_reservation(self) -> None:
        self.reserved_room_id = None
        self.stay_status = StayStatus.UNBOOKED

    def begin_stay(self, room_id: str, stay: StayInterval) -> None:
        self.current_room_id = room_id
        self.stay = stay
        self.reserved_room_id = None
        self.stay_status = StayStatus.CHECKED_IN

    def end_stay(self) -> None:
        self.current_room_id = None
        self.stay = None
        self.stay_status = StayStatus.CHECKED_OUT


# ==================== STAFF ROLE PROFILES ====================

class FrontDeskProfile(BaseModel):
    role: Literal["FRONT_DESK"] = "FRONT_DESK"
    shift: str
    duties: List[str] = []


class HousekeepingProfile(BaseModel):
    role: Literal["HOUSEKEEPING"] = "HOUSEKEEPING"
    assigned_floor: str
    rooms_cleaned: int = Field(ge=0, default=0)
    is_available: bool = True


class CulinaryProfile(BaseModel):
    role: Literal["CULINARY"] = "CULINARY"
    specialty: str
    years_of_experience: int = Field(ge=0, default=0)


StaffProfile = Union[FrontDeskProfile, HousekeepingProfile, CulinaryProfile]


class StaffMember(BaseModel):
    """Staff Entity: shared personal details plus a role-tagged profile"""

    # Identity
    staff_id: str = Field(min_length=1)

    name: str
    age: int = Field(ge=0)
    contact_info: str = ""
    base_salary: Decimal = Field(ge=0, default=Decimal("30000"))

    profile: StaffProfile = Field(discriminator="role")

    class Config:
        from_attributes = True

    @property
    def role(self) -> StaffRole:
        return StaffRole(self.profile.role)

    def record_cleaning(self) -> None:
        """Count one more cleaned room for a housekeeper"""
        match self.profile:
            case HousekeepingProfile():
                self.profile.rooms_cleaned += 1
            case _:
                raise TypeError(f"{self.role.value} staff do not clean rooms")
