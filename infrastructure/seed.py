"""Demo population for a fresh hotel"""
from decimal import Decimal
from typing import Optional

from application.hotel import Hotel
from config import Settings, get_settings, build_rate_table
from domain.entities import (
    Room, Guest, StaffMember, FrontDeskProfile, HousekeepingProfile, CulinaryProfile
)
from domain.enums import StaffRole


def build_hotel(settings: Optional[Settings] = None) -> Hotel:
    """Empty hotel configured from settings"""
    settings = settings or get_settings()
    return Hotel(
        name=settings.HOTEL_NAME,
        address=settings.HOTEL_ADDRESS,
        rate_table=build_rate_table(settings),
        currency=settings.CURRENCY
    )


def seed_demo_data(hotel: Hotel, base_salary: Decimal = Decimal("30000")) -> Hotel:
    """Register the sample rooms, staff, menu and guests through the public API"""
    hotel.add_room(Room(room_id="101", category="Standard Double Room", nightly_rate=Decimal("2000")))
    hotel.add_room(Room(room_id="201", category="Deluxe Suite", nightly_rate=Decimal("5000")))
    hotel.add_room(Room(room_id="301", category="Presidential Suite", nightly_rate=Decimal("10000")))

    hotel.add_staff(StaffRole.FRONT_DESK, StaffMember(
        staff_id="FD001",
        name="John Zhang",
        age=28,
        contact_info="0912-345-678",
        base_salary=base_salary,
        profile=FrontDeskProfile(shift="Morning Shift", duties=["Check-in", "Check-out", "Customer Service"])
    ))
    hotel.add_staff(StaffRole.HOUSEKEEPING, StaffMember(
        staff_id="HK001",
        name="Lisa Lee",
        age=35,
        contact_info="0923-456-789",
        base_salary=base_salary,
        profile=HousekeepingProfile(assigned_floor="1st Floor")
    ))
    hotel.add_staff(StaffRole.CULINARY, StaffMember(
        staff_id="CH001",
        name="Master Wang",
        age=45,
        contact_info="0934-567-890",
        base_salary=base_salary,
        profile=CulinaryProfile(specialty="Chinese Cuisine", years_of_experience=20)
    ))

    hotel.add_menu_item("Kung Pao Chicken")

    hotel.add_guest(Guest(guest_id="G001", name="Mr. Chen", age=30, contact_info="chen@example.com"))
    hotel.add_guest(Guest(guest_id="G002", name="Ms. Lin", age=28, contact_info="lin@example.com"))
    return hotel


def build_demo_hotel(settings: Optional[Settings] = None) -> Hotel:
    settings = settings or get_settings()
    return seed_demo_data(build_hotel(settings), settings.DEFAULT_BASE_SALARY)
