"""Application Services - Business use cases"""
import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Union

from pydantic import BaseModel, Field

from domain.entities import Room, Guest, StaffMember, HousekeepingProfile
from domain.enums import OccupancyStatus, CleanlinessStatus, StaffRole, ServiceKind, SERVICE_ROLES
from domain.exceptions import (
    DuplicateKeyError, NotFoundError, InvalidArgumentError, InvalidStateTransitionError,
    RoomUnavailableError, AlreadyCheckedInError, NotCheckedInError, NoStaffAvailableError,
    InvalidGuestError
)
from domain.policies import PricingPolicy
from domain.repositories import RoomRepository, GuestRepository, StaffRepository
from domain.value_objects import Money, StayInterval, CleaningTasks, MealOrder

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RoomRegistry:
    """Owns every room and its occupancy/cleanliness state"""

    def __init__(self, repository: RoomRepository):
        self.repository = repository

    def add_room(self, room: Room) -> Room:
        """Register a room under a unique identifier; new rooms start vacant and clean"""
        if self.repository.exists(room.room_id):
            raise DuplicateKeyError(f"Room {room.room_id} already exists")
        if not room.is_available():
            raise InvalidArgumentError(
                f"Room {room.room_id} must be registered VACANT and CLEAN, "
                f"not {room.occupancy.value} and {room.cleanliness.value}"
            )
        logger.info("Room %s added (%s)", room.room_id, room.category)
        return self.repository.save(room)

    def find_room(self, room_id: str) -> Room:
        room = self.repository.find_by_id(room_id)
        if room is None:
            raise NotFoundError(f"Room {room_id} not found")
        return room

    def list_rooms(self) -> List[Room]:
        return self.repository.find_all()

    def list_available(self) -> List[Room]:
        """Vacant and clean rooms, recomputed on every call"""
        return [room for room in self.repository.find_all() if room.is_available()]

    def count(self) -> int:
        return len(self.repository.find_all())

    # ==================== STATE TRANSITIONS ====================
    def mark_occupied(self, room_id: str) -> Room:
        return self._set_occupancy(room_id, OccupancyStatus.OCCUPIED)

    def mark_vacant(self, room_id: str) -> Room:
        return self._set_occupancy(room_id, OccupancyStatus.VACANT)

    def mark_clean(self, room_id: str) -> Room:
        return self._set_cleanliness(room_id, CleanlinessStatus.CLEAN)

    def mark_dirty(self, room_id: str) -> Room:
        return self._set_cleanliness(room_id, CleanlinessStatus.DIRTY)

    def _set_occupancy(self, room_id: str, target: OccupancyStatus) -> Room:
        room = self.find_room(room_id)
        if room.occupancy == target:
            raise InvalidStateTransitionError(f"Room {room_id} is already {target.value}")
        room.occupancy = target
        logger.debug("Room %s is now %s", room_id, target.value)
        return self.repository.save(room)

    def _set_cleanliness(self, room_id: str, target: CleanlinessStatus) -> Room:
        room = self.find_room(room_id)
        if room.cleanliness == target:
            raise InvalidStateTransitionError(f"Room {room_id} is already {target.value}")
        room.cleanliness = target
        logger.debug("Room %s is now %s", room_id, target.value)
        return self.repository.save(room)


class GuestStayService:
    """Reservation, check-in and check-out of a guest against a room.

    Every operation validates first and only then mutates, so a rejected
    call leaves both the guest and the room exactly as they were.
    """

    def __init__(self,
                 rooms: RoomRegistry,
                 guest_repository: GuestRepository,
                 pricing: PricingPolicy,
                 currency: str = "TWD",
                 clock: Optional[Clock] = None):
        self.rooms = rooms
        self.guest_repository = guest_repository
        self.pricing = pricing
        self.currency = currency
        self.clock = clock or utc_now

    # ==================== RESERVATION ====================
    def reserve(self, guest: Guest, room_id: str) -> Guest:
        """Hold a vacant, clean room for a guest who is not in-house"""
        if guest.is_in_house:
            raise AlreadyCheckedInError(f"Guest {guest.guest_id} is already checked in")
        if guest.has_reservation:
            raise InvalidStateTransitionError(
                f"Guest {guest.guest_id} already holds a reservation for room {guest.reserved_room_id}"
            )
        self._require_available(guest, self.rooms.find_room(room_id))

        guest.reserve(room_id)
        logger.info("Room %s reserved for guest %s", room_id, guest.guest_id)
        return self.guest_repository.save(guest)

    def cancel_reservation(self, guest: Guest) -> Guest:
        if not guest.has_reservation:
            raise InvalidStateTransitionError(f"Guest {guest.guest_id} has no reservation")

        room_id = guest.reserved_room_id
        guest.cancel_reservation()
        logger.info("Reservation on room %s cancelled for guest %s", room_id, guest.guest_id)
        return self.guest_repository.save(guest)

    # ==================== CHECK-IN ====================
    def check_in(self, guest: Guest, room_id: str, nights: int, peak_season: bool = False) -> Money:
        """Put the guest into the room and return the booked room cost.

        The loyalty discount is not applied here.
        """
        room = self._validate_check_in(guest, room_id, nights)
        cost = self.pricing.room_cost(room.nightly_rate, nights, peak_season)

        stay = StayInterval.starting(self.clock(), nights, peak_season)
        self.rooms.mark_occupied(room.room_id)
        guest.begin_stay(room.room_id, stay)
        self.guest_repository.save(guest)

        logger.info(
            "Guest %s checked in to room %s for %d night(s), cost %s",
            guest.guest_id, room.room_id, nights, cost
        )
        return Money(amount=cost, currency=self.currency)

    def _validate_check_in(self, guest: Guest, room_id: str, nights: int) -> Room:
        PricingPolicy.validate_nights(nights)
        self._validate_guest(guest)
        if guest.is_in_house:
            raise AlreadyCheckedInError(
                f"Guest {guest.guest_id} is already checked in to room {guest.current_room_id}"
            )
        room = self.rooms.find_room(room_id)
        self._require_available(guest, room)
        return room

    # ==================== CHECK-OUT ====================
    def check_out(self, guest: Guest) -> Money:
        """Release the room and charge for the whole days actually stayed"""
        if not guest.is_in_house or guest.stay is None:
            raise NotCheckedInError(f"Guest {guest.guest_id} is not checked in")

        room = self.rooms.find_room(guest.current_room_id)
        days = guest.stay.elapsed_days(self.clock())
        cost = self.pricing.room_cost(room.nightly_rate, days, guest.stay.peak_season)

        self.rooms.mark_vacant(room.room_id)
        if room.is_clean:
            self.rooms.mark_dirty(room.room_id)
        guest.end_stay()
        self.guest_repository.save(guest)

        logger.info(
            "Guest %s checked out of room %s after %d day(s), cost %s",
            guest.guest_id, room.room_id, days, cost
        )
        return Money(amount=cost, currency=self.currency)

    # ==================== PRIVATE VALIDATION METHODS ====================
    @staticmethod
    def _validate_guest(guest: Guest) -> None:
        if not guest.name or not guest.name.strip():
            raise InvalidGuestError("Guest name cannot be empty")

    def _require_available(self, guest: Guest, room: Room) -> None:
        if not room.is_available():
            raise RoomUnavailableError(
                f"Room {room.room_id} is {room.occupancy.value} and {room.cleanliness.value}"
            )
        holder = self.guest_repository.find_by_reserved_room(room.room_id)
        if holder is not None and holder.guest_id != guest.guest_id:
            raise RoomUnavailableError(f"Room {room.room_id} is reserved for another guest")


DEFAULT_MENU = ("Pasta", "Pizza", "Salad", "Steak", "Dessert")


class DiningService:
    """The restaurant menu. Only dishes on the menu can be prepared.

    Dish names are matched case-insensitively but kept as first added.
    """

    def __init__(self, menu: Optional[List[str]] = None):
        self._menu: List[str] = []
        for item in DEFAULT_MENU if menu is None else menu:
            self.add_menu_item(item)

    def menu_items(self) -> List[str]:
        return list(self._menu)

    def find_item(self, dish_name: str) -> Optional[str]:
        key = dish_name.strip().casefold()
        for item in self._menu:
            if item.casefold() == key:
                return item
        return None

    def add_menu_item(self, dish_name: str) -> str:
        item = dish_name.strip() if dish_name else ""
        if not item:
            raise InvalidArgumentError("Menu item name cannot be empty")
        if self.find_item(item) is not None:
            raise DuplicateKeyError(f"{item} is already on the menu")
        self._menu.append(item)
        logger.info("%s added to the menu", item)
        return item

    def remove_menu_item(self, dish_name: str) -> str:
        item = self.find_item(dish_name or "")
        if item is None:
            raise NotFoundError(f"{dish_name} is not on the menu")
        self._menu.remove(item)
        logger.info("%s removed from the menu", item)
        return item

    def prepare(self, dish_name: str, quantity: int) -> MealOrder:
        order = MealOrder.create(dish_name, quantity)
        item = self.find_item(order.dish_name)
        if item is None:
            raise InvalidArgumentError(f"{order.dish_name} is not on the menu")
        return MealOrder.create(item, order.quantity)

    def serve_all(self) -> List[MealOrder]:
        """One portion of every dish on the menu"""
        return [MealOrder.create(item, 1) for item in self._menu]


# ==================== SERVICE DISPATCH ====================

class ServiceParams(BaseModel):
    """Arguments of a requested service; each kind reads only its own fields"""
    room_id: Optional[str] = None
    nights: Optional[int] = None
    peak_season: bool = False
    tasks: CleaningTasks = Field(default_factory=CleaningTasks.full_service)
    dish_name: Optional[str] = None
    quantity: int = 1


class ServiceRecord(BaseModel):
    """One performed service, kept in the dispatcher's log"""
    kind: ServiceKind
    guest_id: str
    staff_id: str
    room_id: Optional[str] = None
    detail: List[str] = []
    cost: Optional[Money] = None
    performed_at: datetime


class DispatchOutcome(BaseModel):
    kind: ServiceKind
    staff_id: str
    room_id: Optional[str] = None
    cost: Optional[Money] = None
    detail: List[str] = []


class ServiceDispatcher:
    """Routes a requested service to a member of the matching staff pool"""

    def __init__(self,
                 staff_repository: StaffRepository,
                 rooms: RoomRegistry,
                 stays: GuestStayService,
                 dining: Optional[DiningService] = None,
                 clock: Optional[Clock] = None):
        self.staff_repository = staff_repository
        self.rooms = rooms
        self.stays = stays
        self.dining = dining or DiningService()
        self.clock = clock or utc_now
        self.records: List[ServiceRecord] = []

    def select_staff(self, role: StaffRole) -> StaffMember:
        """First eligible member of the pool, in onboarding order"""
        for member in self.staff_repository.find_by_role(role):
            if self._is_eligible(member):
                return member
        raise NoStaffAvailableError(f"No {role.value} staff available")

    @staticmethod
    def _is_eligible(member: StaffMember) -> bool:
        match member.profile:
            case HousekeepingProfile(is_available=available):
                return available
            case _:
                return True

    @staticmethod
    def service_kind(kind: Union[ServiceKind, str]) -> ServiceKind:
        """Coerce a kind label, rejecting unknown ones"""
        try:
            return ServiceKind(kind)
        except ValueError:
            raise InvalidArgumentError(f"Unknown service kind {kind!r}") from None

    def dispatch(self,
                 kind: Union[ServiceKind, str],
                 guest: Guest,
                 params: Optional[ServiceParams] = None) -> DispatchOutcome:
        kind = self.service_kind(kind)
        params = params or ServiceParams()
        member = self.select_staff(SERVICE_ROLES[kind])

        match kind:
            case ServiceKind.CHECK_IN:
                outcome = self._check_in(member, guest, params)
            case ServiceKind.CHECK_OUT:
                outcome = self._check_out(member, guest)
            case ServiceKind.CLEAN:
                outcome = self._clean(member, guest, params)
            case ServiceKind.SERVE_MEAL:
                outcome = self._serve_meal(member, guest, params)

        self.records.append(ServiceRecord(
            kind=kind,
            guest_id=guest.guest_id,
            staff_id=member.staff_id,
            room_id=outcome.room_id,
            detail=outcome.detail,
            cost=outcome.cost,
            performed_at=self.clock()
        ))
        return outcome

    def _check_in(self, member: StaffMember, guest: Guest, params: ServiceParams) -> DispatchOutcome:
        if not params.room_id:
            raise InvalidArgumentError("Check-in requires a room_id")
        if params.nights is None:
            raise InvalidArgumentError("Check-in requires a number of nights")

        cost = self.stays.check_in(guest, params.room_id, params.nights, params.peak_season)
        return DispatchOutcome(
            kind=ServiceKind.CHECK_IN,
            staff_id=member.staff_id,
            room_id=params.room_id,
            cost=cost,
            detail=[f"nights={params.nights}"]
        )

    def _check_out(self, member: StaffMember, guest: Guest) -> DispatchOutcome:
        room_id = guest.current_room_id
        cost = self.stays.check_out(guest)
        return DispatchOutcome(
            kind=ServiceKind.CHECK_OUT,
            staff_id=member.staff_id,
            room_id=room_id,
            cost=cost
        )

    def _clean(self, member: StaffMember, guest: Guest, params: ServiceParams) -> DispatchOutcome:
        room_id = params.room_id or guest.current_room_id
        if not room_id:
            raise InvalidArgumentError("Cleaning requires a room_id")
        room = self.rooms.find_room(room_id)

        member.record_cleaning()
        self.staff_repository.save(member)
        if not room.is_clean:
            self.rooms.mark_clean(room_id)

        logger.info("Room %s cleaned by %s", room_id, member.staff_id)
        return DispatchOutcome(
            kind=ServiceKind.CLEAN,
            staff_id=member.staff_id,
            room_id=room_id,
            detail=params.tasks.performed()
        )

    def _serve_meal(self, member: StaffMember, guest: Guest, params: ServiceParams) -> DispatchOutcome:
        order = self.dining.prepare(params.dish_name or "", params.quantity)
        logger.info(
            "%d portion(s) of %s prepared by %s for guest %s",
            order.quantity, order.dish_name, member.staff_id, guest.guest_id
        )
        return DispatchOutcome(
            kind=ServiceKind.SERVE_MEAL,
            staff_id=member.staff_id,
            room_id=guest.current_room_id,
            detail=[f"{order.quantity} x {order.dish_name}"]
        )

    # ==================== QUERY METHODS ====================
    def records_of(self, kind: ServiceKind) -> List[ServiceRecord]:
        return [r for r in self.records if r.kind == kind]
