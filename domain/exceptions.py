"""Domain Exceptions"""


class HotelError(Exception):
    """Base class for every error raised by the hotel core"""

    @property
    def kind(self) -> str:
        return type(self).__name__


class DuplicateKeyError(HotelError):
    """An entity with the same identifier is already registered"""


class NotFoundError(HotelError, LookupError):
    """No entity with the requested identifier"""


class InvalidArgumentError(HotelError, ValueError):
    """An argument is outside its documented domain"""


class InvalidStateTransitionError(HotelError):
    """The entity is already in the requested state, or cannot move to it"""


class RoomUnavailableError(HotelError):
    """The room is occupied, dirty or held for another guest"""


class AlreadyCheckedInError(HotelError):
    """The guest already holds a room"""


class NotCheckedInError(HotelError):
    """The guest does not currently hold a room"""


class NoStaffAvailableError(HotelError):
    """No eligible staff member in the requested pool"""


class InvalidGuestError(HotelError, ValueError):
    """Guest details are incomplete"""
