"""Domain Enums"""
from enum import Enum


class OccupancyStatus(str, Enum):
    VACANT = "VACANT"
    OCCUPIED = "OCCUPIED"


class CleanlinessStatus(str, Enum):
    CLEAN = "CLEAN"
    DIRTY = "DIRTY"


class StayStatus(str, Enum):
    UNBOOKED = "UNBOOKED"
    RESERVED = "RESERVED"
    CHECKED_IN = "CHECKED_IN"
    CHECKED_OUT = "CHECKED_OUT"


class StaffRole(str, Enum):
    FRONT_DESK = "FRONT_DESK"
    HOUSEKEEPING = "HOUSEKEEPING"
    CULINARY = "CULINARY"


class ServiceKind(str, Enum):
    CHECK_IN = "CHECK_IN"
    CHECK_OUT = "CHECK_OUT"
    CLEAN = "CLEAN"
    SERVE_MEAL = "SERVE_MEAL"


class StaffTier(str, Enum):
    JUNIOR = "junior"
    SENIOR = "senior"
    MANAGER = "manager"
    DIRECTOR = "director"


# Which staff pool handles each service kind
SERVICE_ROLES = {
    ServiceKind.CHECK_IN: StaffRole.FRONT_DESK,
    ServiceKind.CHECK_OUT: StaffRole.FRONT_DESK,
    ServiceKind.CLEAN: StaffRole.HOUSEKEEPING,
    ServiceKind.SERVE_MEAL: StaffRole.CULINARY,
}
