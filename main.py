import logging
from decimal import Decimal
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Depends, Query

from api.schemas import (
    # Rooms
    CreateRoomRequest, RoomResponse,
    # Guests
    CreateGuestRequest, GuestResponse, ReserveRoomRequest, ServiceRequest,
    # Staff
    CreateStaffRequest, StaffResponse, UpdateShiftRequest, AssignFloorRequest,
    UpdateAvailabilityRequest, UpdateExperienceRequest, CompensationResponse,
    # Dining
    MenuItemRequest, MenuResponse,
    # Pricing
    RoomCostResponse, DiscountResponse, EnumValuesResponse
)
from api.dependencies import get_hotel, hotel_lock
from application.hotel import Hotel, ServiceResult, HotelSummary, RoomInfo
from application.services import ServiceParams
from config import get_settings
from domain.entities import Room, Guest, StaffMember
from domain.enums import OccupancyStatus, CleanlinessStatus, StayStatus, StaffRole, ServiceKind, StaffTier
from domain.exceptions import (
    HotelError, NotFoundError, InvalidArgumentError, InvalidGuestError
)

logging.basicConfig(
    level=get_settings().LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Hotel Operations API",
    description="Rooms, guest stays, staff dispatch and pricing for a single hotel",
    version="1.0.0"
)

ENUMS = {
    "occupancy": OccupancyStatus,
    "cleanliness": CleanlinessStatus,
    "stay-status": StayStatus,
    "staff-role": StaffRole,
    "service-kind": ServiceKind,
    "staff-tier": StaffTier,
}

# ============================================================================
# HEALTH & ENUM REFERENCE ENDPOINTS
# ============================================================================

@app.get("/api/health", tags=["Health"])
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "API is running"}

@app.get("/api/enums/{name}", response_model=EnumValuesResponse, tags=["Enum Reference"])
def get_enum_values(name: str):
    """Get the values of a domain enum"""
    enum = ENUMS.get(name)
    if enum is None:
        raise HTTPException(status_code=404, detail=f"Unknown enum {name}")
    return EnumValuesResponse(values=[item.value for item in enum])

# ============================================================================
# ROOM ENDPOINTS
# ============================================================================

@app.post("/api/rooms", response_model=RoomResponse, status_code=201, tags=["Rooms"])
def create_room(request: CreateRoomRequest, hotel: Hotel = Depends(get_hotel)):
    """Register a new room"""
    with hotel_lock:
        try:
            room = hotel.add_room(Room(
                room_id=request.room_id,
                category=request.category,
                nightly_rate=request.nightly_rate
            ))
        except HotelError as e:
            raise _http_error(e)
        return _room_to_response(room)

@app.get("/api/rooms", response_model=List[RoomResponse], tags=["Rooms"])
def get_all_rooms(hotel: Hotel = Depends(get_hotel)):
    """Get all rooms"""
    with hotel_lock:
        return [_room_to_response(r) for r in hotel.list_rooms()]

@app.get("/api/rooms/available", response_model=List[RoomResponse], tags=["Rooms"])
def get_available_rooms(hotel: Hotel = Depends(get_hotel)):
    """Get rooms that are vacant and clean"""
    with hotel_lock:
        return [_room_to_response(r) for r in hotel.list_available_rooms()]

@app.get("/api/rooms/{room_id}", response_model=RoomResponse, tags=["Rooms"])
def get_room(room_id: str, hotel: Hotel = Depends(get_hotel)):
    """Get room by ID"""
    with hotel_lock:
        try:
            return _room_to_response(hotel.get_room(room_id))
        except HotelError as e:
            raise _http_error(e)

@app.get("/api/rooms/{room_id}/occupant", response_model=Optional[GuestResponse], tags=["Rooms"])
def get_room_occupant(room_id: str, hotel: Hotel = Depends(get_hotel)):
    """Guest staying in the room, null when it is vacant"""
    with hotel_lock:
        try:
            guest = hotel.room_occupant(room_id)
        except HotelError as e:
            raise _http_error(e)
        return _guest_to_response(guest) if guest else None

# ============================================================================
# GUEST ENDPOINTS
# ============================================================================

@app.post("/api/guests", response_model=GuestResponse, status_code=201, tags=["Guests"])
def register_guest(request: CreateGuestRequest, hotel: Hotel = Depends(get_hotel)):
    """Register a new guest"""
    with hotel_lock:
        try:
            guest = hotel.add_guest(Guest(
                guest_id=request.guest_id,
                name=request.name,
                age=request.age,
                contact_info=request.contact_info
            ))
        except HotelError as e:
            raise _http_error(e)
        return _guest_to_response(guest)

@app.get("/api/guests/{guest_id}", response_model=GuestResponse, tags=["Guests"])
def get_guest(guest_id: str, hotel: Hotel = Depends(get_hotel)):
    """Get guest by ID"""
    with hotel_lock:
        try:
            return _guest_to_response(hotel.get_guest(guest_id))
        except HotelError as e:
            raise _http_error(e)

@app.post("/api/guests/{guest_id}/reservation", response_model=GuestResponse, tags=["Guests"])
def reserve_room(guest_id: str, request: ReserveRoomRequest, hotel: Hotel = Depends(get_hotel)):
    """Hold a room for a guest"""
    with hotel_lock:
        try:
            return _guest_to_response(hotel.reserve_room(guest_id, request.room_id))
        except HotelError as e:
            raise _http_error(e)

@app.delete("/api/guests/{guest_id}/reservation", response_model=GuestResponse, tags=["Guests"])
def cancel_reservation(guest_id: str, hotel: Hotel = Depends(get_hotel)):
    """Cancel a guest's reservation"""
    with hotel_lock:
        try:
            return _guest_to_response(hotel.cancel_reservation(guest_id))
        except HotelError as e:
            raise _http_error(e)

@app.post("/api/guests/{guest_id}/services", response_model=ServiceResult, tags=["Services"])
def request_service(guest_id: str, request: ServiceRequest, hotel: Hotel = Depends(get_hotel)):
    """Dispatch check-in, check-out, cleaning or a meal for a guest.

    Business failures are returned in the result body, not as HTTP errors.
    """
    params = ServiceParams(
        room_id=request.room_id,
        nights=request.nights,
        peak_season=request.peak_season,
        dish_name=request.dish_name,
        quantity=request.quantity
    )
    if request.tasks is not None:
        params.tasks = request.tasks
    with hotel_lock:
        return hotel.request_service(guest_id, request.kind, params)

# ============================================================================
# STAFF ENDPOINTS
# ============================================================================

@app.post("/api/staff", response_model=StaffResponse, status_code=201, tags=["Staff"])
def onboard_staff(request: CreateStaffRequest, hotel: Hotel = Depends(get_hotel)):
    """Onboard a staff member into a role pool"""
    base_salary = request.base_salary
    if base_salary is None:
        base_salary = get_settings().DEFAULT_BASE_SALARY
    with hotel_lock:
        try:
            member = hotel.add_staff(request.role, StaffMember(
                staff_id=request.staff_id,
                name=request.name,
                age=request.age,
                contact_info=request.contact_info,
                base_salary=base_salary,
                profile=request.profile
            ))
        except HotelError as e:
            raise _http_error(e)
        return _staff_to_response(member)

@app.get("/api/staff", response_model=List[StaffResponse], tags=["Staff"])
def get_staff(role: Optional[StaffRole] = None, hotel: Hotel = Depends(get_hotel)):
    """Get all staff, optionally one role pool"""
    with hotel_lock:
        return [_staff_to_response(m) for m in hotel.list_staff(role)]

@app.patch("/api/staff/{staff_id}/shift", response_model=StaffResponse, tags=["Staff"])
def update_shift(staff_id: str, request: UpdateShiftRequest, hotel: Hotel = Depends(get_hotel)):
    """Change a front-desk shift"""
    with hotel_lock:
        try:
            return _staff_to_response(hotel.update_shift(staff_id, request.shift))
        except HotelError as e:
            raise _http_error(e)

@app.patch("/api/staff/{staff_id}/floor", response_model=StaffResponse, tags=["Staff"])
def assign_floor(staff_id: str, request: AssignFloorRequest, hotel: Hotel = Depends(get_hotel)):
    """Assign a housekeeper to a floor"""
    with hotel_lock:
        try:
            return _staff_to_response(hotel.assign_floor(staff_id, request.floor))
        except HotelError as e:
            raise _http_error(e)

@app.patch("/api/staff/{staff_id}/availability", response_model=StaffResponse, tags=["Staff"])
def update_availability(staff_id: str, request: UpdateAvailabilityRequest, hotel: Hotel = Depends(get_hotel)):
    """Mark a housekeeper available or unavailable for dispatch"""
    with hotel_lock:
        try:
            return _staff_to_response(hotel.set_housekeeper_availability(staff_id, request.available))
        except HotelError as e:
            raise _http_error(e)

@app.patch("/api/staff/{staff_id}/experience", response_model=StaffResponse, tags=["Staff"])
def update_experience(staff_id: str, request: UpdateExperienceRequest, hotel: Hotel = Depends(get_hotel)):
    """Set a chef's years of experience"""
    with hotel_lock:
        try:
            return _staff_to_response(hotel.set_years_of_experience(staff_id, request.years))
        except HotelError as e:
            raise _http_error(e)

@app.get("/api/staff/{staff_id}/compensation", response_model=CompensationResponse, tags=["Staff"])
def get_compensation(staff_id: str, tier: str = Query(...), hotel: Hotel = Depends(get_hotel)):
    """Salary plus tier bonus for a staff member"""
    with hotel_lock:
        try:
            member = hotel.get_staff(staff_id)
            total = hotel.staff_compensation(staff_id, tier)
        except HotelError as e:
            raise _http_error(e)
        return CompensationResponse(
            staff_id=staff_id,
            tier=tier,
            base_salary=member.base_salary,
            total=total
        )

# ============================================================================
# DINING ENDPOINTS
# ============================================================================

@app.get("/api/menu", response_model=MenuResponse, tags=["Dining"])
def get_menu(hotel: Hotel = Depends(get_hotel)):
    """Dishes the kitchen can serve"""
    with hotel_lock:
        return MenuResponse(items=hotel.menu_items())

@app.post("/api/menu", response_model=MenuResponse, status_code=201, tags=["Dining"])
def add_menu_item(request: MenuItemRequest, hotel: Hotel = Depends(get_hotel)):
    """Add a dish to the menu"""
    with hotel_lock:
        try:
            return MenuResponse(items=hotel.add_menu_item(request.name))
        except HotelError as e:
            raise _http_error(e)

@app.delete("/api/menu/{name}", response_model=MenuResponse, tags=["Dining"])
def remove_menu_item(name: str, hotel: Hotel = Depends(get_hotel)):
    """Take a dish off the menu"""
    with hotel_lock:
        try:
            return MenuResponse(items=hotel.remove_menu_item(name))
        except HotelError as e:
            raise _http_error(e)

# ============================================================================
# PRICING ENDPOINTS
# ============================================================================

@app.get("/api/pricing/room-cost", response_model=RoomCostResponse, tags=["Pricing"])
def get_room_cost(
    nightly_rate: Decimal = Query(..., gt=0),
    nights: int = Query(...),
    peak_season: bool = False,
    hotel: Hotel = Depends(get_hotel)
):
    """Room cost for a rate and a number of nights"""
    try:
        cost = hotel.pricing.room_cost(nightly_rate, nights, peak_season)
    except HotelError as e:
        raise _http_error(e)
    return RoomCostResponse(nightly_rate=nightly_rate, nights=nights, peak_season=peak_season, cost=cost)

@app.get("/api/pricing/loyalty-discount", response_model=DiscountResponse, tags=["Pricing"])
def get_loyalty_discount(
    amount: Decimal = Query(..., ge=0),
    loyal_member: bool = False,
    hotel: Hotel = Depends(get_hotel)
):
    """Amount after the loyalty discount"""
    return DiscountResponse(
        amount=amount,
        loyal_member=loyal_member,
        discounted=hotel.apply_loyalty_discount(amount, loyal_member)
    )

# ============================================================================
# REPORTING ENDPOINTS
# ============================================================================

@app.get("/api/summary", response_model=HotelSummary, tags=["Reports"])
def get_summary(hotel: Hotel = Depends(get_hotel)):
    """Room, guest and staff counts"""
    with hotel_lock:
        return hotel.summary()

@app.get("/api/reports/first-guest-room", response_model=Optional[RoomInfo], tags=["Reports"])
def get_first_guest_room(hotel: Hotel = Depends(get_hotel)):
    """Room of the first-registered guest, null unless that guest is in-house"""
    with hotel_lock:
        return hotel.first_guest_room_info()

# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def _http_error(error: HotelError) -> HTTPException:
    """Map a hotel error onto an HTTP status"""
    if isinstance(error, NotFoundError):
        status_code = 404
    elif isinstance(error, (InvalidArgumentError, InvalidGuestError)):
        status_code = 400
    else:
        # duplicates, state conflicts and unavailability
        status_code = 409
    logger.warning("%s: %s", error.kind, error)
    return HTTPException(status_code=status_code, detail=str(error))

def _room_to_response(room: Room) -> RoomResponse:
    """Convert Room entity to RoomResponse"""
    return RoomResponse(
        room_id=room.room_id,
        category=room.category,
        nightly_rate=room.nightly_rate,
        occupancy=room.occupancy.value,
        cleanliness=room.cleanliness.value,
        available=room.is_available()
    )

def _guest_to_response(guest: Guest) -> GuestResponse:
    """Convert Guest entity to GuestResponse"""
    return GuestResponse(
        guest_id=guest.guest_id,
        name=guest.name,
        age=guest.age,
        contact_info=guest.contact_info,
        stay_status=guest.stay_status.value,
        current_room_id=guest.current_room_id,
        reserved_room_id=guest.reserved_room_id,
        checked_in_at=guest.stay.checked_in_at if guest.stay else None,
        scheduled_check_out_at=guest.stay.scheduled_check_out_at if guest.stay else None
    )

def _staff_to_response(member: StaffMember) -> StaffResponse:
    """Convert StaffMember entity to StaffResponse"""
    return StaffResponse(
        staff_id=member.staff_id,
        role=member.role.value,
        name=member.name,
        age=member.age,
        contact_info=member.contact_info,
        base_salary=member.base_salary,
        profile=member.profile
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
