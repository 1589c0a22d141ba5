"""Hotel Aggregate - the operational API of a single property"""
import logging
from decimal import Decimal
from typing import List, Optional, Union

from pydantic import BaseModel

from application.services import (
    RoomRegistry, GuestStayService, ServiceDispatcher, DiningService, ServiceParams, Clock
)
from domain.entities import (
    Room, Guest, StaffMember, FrontDeskProfile, HousekeepingProfile, CulinaryProfile
)
from domain.enums import StaffRole, ServiceKind, StayStatus
from domain.exceptions import DuplicateKeyError, NotFoundError, InvalidArgumentError, HotelError
from domain.policies import PricingPolicy
from domain.repositories import RoomRepository, GuestRepository, StaffRepository
from domain.value_objects import Money, RateTable
from infrastructure.repositories.in_memory_repositories import (
    InMemoryRoomRepository, InMemoryGuestRepository, InMemoryStaffRepository
)

logger = logging.getLogger(__name__)


class ServiceResult(BaseModel):
    """Outcome of request_service, successful or not"""
    success: bool
    kind: str
    guest_id: str
    staff_id: Optional[str] = None
    room_id: Optional[str] = None
    cost: Optional[Money] = None
    detail: List[str] = []
    error: Optional[str] = None
    message: Optional[str] = None


class RoomInfo(BaseModel):
    room_id: str
    category: str
    nightly_rate: Decimal


class RoomQuote(BaseModel):
    room_id: str
    nights: int
    peak_season: bool
    loyal_member: bool
    base_cost: Decimal
    total: Decimal
    currency: str


class HotelSummary(BaseModel):
    hotel_name: str
    address: str
    total_rooms: int
    available_rooms: int
    occupied_rooms: int
    dirty_rooms: int
    total_guests: int
    in_house_guests: int
    front_desk_count: int
    housekeeping_count: int
    culinary_count: int
    rooms_cleaned: int
    meals_served: int


class Hotel:
    """Aggregate over rooms, guests, staff and the rate table"""

    def __init__(self,
                 name: str,
                 address: str,
                 rate_table: RateTable,
                 room_repository: Optional[RoomRepository] = None,
                 guest_repository: Optional[GuestRepository] = None,
                 staff_repository: Optional[StaffRepository] = None,
                 currency: str = "TWD",
                 clock: Optional[Clock] = None):
        self.name = name
        self.address = address
        self.currency = currency
        self.pricing = PricingPolicy(rate_table)

        self.guest_repository = guest_repository or InMemoryGuestRepository()
        self.staff_repository = staff_repository or InMemoryStaffRepository()
        self.rooms = RoomRegistry(room_repository or InMemoryRoomRepository())
        self.stays = GuestStayService(
            self.rooms, self.guest_repository, self.pricing, currency=currency, clock=clock
        )
        self.dining = DiningService()
        self.dispatcher = ServiceDispatcher(
            self.staff_repository, self.rooms, self.stays, dining=self.dining, clock=clock
        )

    # ==================== REGISTRATION ====================
    def add_room(self, room: Room) -> Room:
        return self.rooms.add_room(room)

    def add_guest(self, guest: Guest) -> Guest:
        if self.guest_repository.exists(guest.guest_id):
            raise DuplicateKeyError(f"Guest {guest.guest_id} already exists")
        self._validate_new_guest(guest)
        logger.info("Guest %s registered", guest.guest_id)
        return self.guest_repository.save(guest)

    def add_staff(self, role: StaffRole, member: StaffMember) -> StaffMember:
        if member.role != role:
            raise InvalidArgumentError(
                f"Staff {member.staff_id} has a {member.role.value} profile, not {role.value}"
            )
        if self.staff_repository.exists(member.staff_id):
            raise DuplicateKeyError(f"Staff {member.staff_id} already exists")
        logger.info("Staff %s onboarded as %s", member.staff_id, role.value)
        return self.staff_repository.save(member)

    @staticmethod
    def _validate_new_guest(guest: Guest) -> None:
        """Stays and reservations only come from the stay lifecycle"""
        booked = (
            guest.current_room_id is not None
            or guest.stay is not None
            or guest.reserved_room_id is not None
            or guest.stay_status != StayStatus.UNBOOKED
        )
        if booked:
            raise InvalidArgumentError(
                f"Guest {guest.guest_id} must be registered UNBOOKED with no room, stay or reservation"
            )

    # ==================== LOOKUPS ====================
    def get_room(self, room_id: str) -> Room:
        return self.rooms.find_room(room_id)

    def get_guest(self, guest_id: str) -> Guest:
        guest = self.guest_repository.find_by_id(guest_id)
        if guest is None:
            raise NotFoundError(f"Guest {guest_id} not found")
        return guest

    def get_staff(self, staff_id: str) -> StaffMember:
        member = self.staff_repository.find_by_id(staff_id)
        if member is None:
            raise NotFoundError(f"Staff {staff_id} not found")
        return member

    def list_rooms(self) -> List[Room]:
        return self.rooms.list_rooms()

    def list_available_rooms(self) -> List[Room]:
        return self.rooms.list_available()

    def list_guests(self) -> List[Guest]:
        return self.guest_repository.find_all()

    def list_staff(self, role: Optional[StaffRole] = None) -> List[StaffMember]:
        if role is None:
            return self.staff_repository.find_all()
        return self.staff_repository.find_by_role(role)

    def room_occupant(self, room_id: str) -> Optional[Guest]:
        """Guest currently staying in the room, if any"""
        self.get_room(room_id)
        return self.guest_repository.find_by_room(room_id)

    # ==================== OPERATIONS ====================
    def request_service(self,
                        guest_id: str,
                        kind: Union[ServiceKind, str],
                        params: Optional[ServiceParams] = None) -> ServiceResult:
        """Resolve the guest and dispatch the service.

        Hotel errors, unknown kinds included, come back as a failed
        ServiceResult instead of raising.
        """
        label = kind.value if isinstance(kind, ServiceKind) else str(kind)
        try:
            guest = self.get_guest(guest_id)
            outcome = self.dispatcher.dispatch(kind, guest, params)
        except HotelError as e:
            logger.warning("%s for guest %s rejected: %s", label, guest_id, e)
            return ServiceResult(
                success=False,
                kind=label,
                guest_id=guest_id,
                error=e.kind,
                message=str(e)
            )

        return ServiceResult(
            success=True,
            kind=outcome.kind.value,
            guest_id=guest_id,
            staff_id=outcome.staff_id,
            room_id=outcome.room_id,
            cost=outcome.cost,
            detail=outcome.detail
        )

    def reserve_room(self, guest_id: str, room_id: str) -> Guest:
        return self.stays.reserve(self.get_guest(guest_id), room_id)

    def cancel_reservation(self, guest_id: str) -> Guest:
        return self.stays.cancel_reservation(self.get_guest(guest_id))

    # ==================== DINING ====================
    def menu_items(self) -> List[str]:
        return self.dining.menu_items()

    def add_menu_item(self, dish_name: str) -> List[str]:
        self.dining.add_menu_item(dish_name)
        return self.dining.menu_items()

    def remove_menu_item(self, dish_name: str) -> List[str]:
        self.dining.remove_menu_item(dish_name)
        return self.dining.menu_items()

    # ==================== PRICING ====================
    def room_quote(self, room_id: str, nights: int,
                   peak_season: bool = False, loyal_member: bool = False) -> RoomQuote:
        room = self.get_room(room_id)
        base_cost = self.pricing.room_cost(room.nightly_rate, nights, peak_season)
        return RoomQuote(
            room_id=room_id,
            nights=nights,
            peak_season=peak_season,
            loyal_member=loyal_member,
            base_cost=base_cost,
            total=self.pricing.loyalty_discount(base_cost, loyal_member),
            currency=self.currency
        )

    def apply_loyalty_discount(self, amount: Decimal, loyal_member: bool) -> Decimal:
        return self.pricing.loyalty_discount(amount, loyal_member)

    def staff_compensation(self, staff_id: str, tier: str) -> Decimal:
        member = self.get_staff(staff_id)
        return self.pricing.staff_compensation(member.base_salary, tier)

    # ==================== ADMINISTRATION ====================
    def update_shift(self, staff_id: str, shift: str) -> StaffMember:
        member = self.get_staff(staff_id)
        match member.profile:
            case FrontDeskProfile():
                member.profile.shift = shift
            case _:
                raise InvalidArgumentError(f"Staff {staff_id} does not work front-desk shifts")
        return self.staff_repository.save(member)

    def assign_floor(self, staff_id: str, floor: str) -> StaffMember:
        member = self.get_staff(staff_id)
        match member.profile:
            case HousekeepingProfile():
                member.profile.assigned_floor = floor
            case _:
                raise InvalidArgumentError(f"Staff {staff_id} is not a housekeeper")
        return self.staff_repository.save(member)

    def set_housekeeper_availability(self, staff_id: str, available: bool) -> StaffMember:
        member = self.get_staff(staff_id)
        match member.profile:
            case HousekeepingProfile():
                member.profile.is_available = available
            case _:
                raise InvalidArgumentError(f"Staff {staff_id} is not a housekeeper")
        return self.staff_repository.save(member)

    def set_years_of_experience(self, staff_id: str, years: int) -> StaffMember:
        if years < 0:
            raise InvalidArgumentError("Years of experience cannot be negative")
        member = self.get_staff(staff_id)
        match member.profile:
            case CulinaryProfile():
                member.profile.years_of_experience = years
            case _:
                raise InvalidArgumentError(f"Staff {staff_id} is not culinary staff")
        return self.staff_repository.save(member)

    # ==================== REPORTING ====================
    def summary(self) -> HotelSummary:
        rooms = self.rooms.list_rooms()
        guests = self.guest_repository.find_all()
        return HotelSummary(
            hotel_name=self.name,
            address=self.address,
            total_rooms=len(rooms),
            available_rooms=sum(1 for r in rooms if r.is_available()),
            occupied_rooms=sum(1 for r in rooms if r.is_occupied),
            dirty_rooms=sum(1 for r in rooms if not r.is_clean),
            total_guests=len(guests),
            in_house_guests=sum(1 for g in guests if g.is_in_house),
            front_desk_count=len(self.staff_repository.find_by_role(StaffRole.FRONT_DESK)),
            housekeeping_count=len(self.staff_repository.find_by_role(StaffRole.HOUSEKEEPING)),
            culinary_count=len(self.staff_repository.find_by_role(StaffRole.CULINARY)),
            rooms_cleaned=len(self.dispatcher.records_of(ServiceKind.CLEAN)),
            meals_served=len(self.dispatcher.records_of(ServiceKind.SERVE_MEAL))
        )

    def first_guest_room_info(self) -> Optional[RoomInfo]:
        """Room details of the first-registered guest while they are in-house"""
        guests = self.guest_repository.find_all()
        if not guests or not guests[0].is_in_house:
            return None
        room = self.rooms.find_room(guests[0].current_room_id)
        return RoomInfo(room_id=room.room_id, category=room.category, nightly_rate=room.nightly_rate)
