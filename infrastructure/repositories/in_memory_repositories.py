"""In-Memory Repository Implementations"""
from typing import Optional, List, Dict

from domain.repositories import RoomRepository, GuestRepository, StaffRepository
from domain.entities import Room, Guest, StaffMember
from domain.enums import StaffRole


class InMemoryRoomRepository(RoomRepository):
    """In-memory implementation of RoomRepository"""

    def __init__(self):
        self._storage: Dict[str, Room] = {}

    def save(self, room: Room) -> Room:
        """Save room to memory"""
        self._storage[room.room_id] = room
        return room

    def find_by_id(self, room_id: str) -> Optional[Room]:
        """Find room by ID"""
        return self._storage.get(room_id)

    def exists(self, room_id: str) -> bool:
        return room_id in self._storage

    def find_all(self) -> List[Room]:
        """Find all rooms"""
        return list(self._storage.values())


class InMemoryGuestRepository(GuestRepository):
    """In-memory implementation of GuestRepository"""

    def __init__(self):
        self._storage: Dict[str, Guest] = {}

    def save(self, guest: Guest) -> Guest:
        """Save guest to memory"""
        self._storage[guest.guest_id] = guest
        return guest

    def find_by_id(self, guest_id: str) -> Optional[Guest]:
        """Find guest by ID"""
        return self._storage.get(guest_id)

    def exists(self, guest_id: str) -> bool:
        return guest_id in self._storage

    def find_all(self) -> List[Guest]:
        """Find all guests"""
        return list(self._storage.values())

    def find_by_room(self, room_id: str) -> Optional[Guest]:
        """Find the guest staying in a room"""
        for guest in self._storage.values():
            if guest.current_room_id == room_id:
                return guest
        return None

    def find_by_reserved_room(self, room_id: str) -> Optional[Guest]:
        """Find the guest holding a reservation on a room"""
        for guest in self._storage.values():
            if guest.has_reservation and guest.reserved_room_id == room_id:
                return guest
        return None


class InMemoryStaffRepository(StaffRepository):
    """In-memory implementation of StaffRepository"""

    def __init__(self):
        self._storage: Dict[str, StaffMember] = {}

    def save(self, member: StaffMember) -> StaffMember:
        """Save staff member to memory"""
        self._storage[member.staff_id] = member
        return member

    def find_by_id(self, staff_id: str) -> Optional[StaffMember]:
        """Find staff member by ID"""
        return self._storage.get(staff_id)

    def exists(self, staff_id: str) -> bool:
        return staff_id in self._storage

    def find_by_role(self, role: StaffRole) -> List[StaffMember]:
        """Find the staff pool for a role"""
        return [m for m in self._storage.values() if m.role == role]

    def find_all(self) -> List[StaffMember]:
        """Find all staff"""
        return list(self._storage.values())
