"""API Dependencies - the hotel served by this process"""
import threading
from typing import Optional

from application.hotel import Hotel
from config import get_settings
from infrastructure.seed import build_hotel, build_demo_hotel

# The core is single-threaded; every request touching the hotel holds this lock.
hotel_lock = threading.Lock()

_hotel: Optional[Hotel] = None
_init_lock = threading.Lock()


def get_hotel() -> Hotel:
    global _hotel
    with _init_lock:
        if _hotel is None:
            settings = get_settings()
            _hotel = build_demo_hotel(settings) if settings.SEED_DEMO_DATA else build_hotel(settings)
    return _hotel


def set_hotel(hotel: Optional[Hotel]) -> None:
    """Replace the served hotel; None rebuilds it from settings on next use"""
    global _hotel
    with _init_lock:
        _hotel = hotel
