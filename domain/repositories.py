"""Domain Repository Interfaces"""
from abc import ABC, abstractmethod
from typing import Optional, List

from domain.entities import Room, Guest, StaffMember
from domain.enums import StaffRole


class RoomRepository(ABC):
    """Repository interface for Room entities"""

    @abstractmethod
    def save(self, room: Room) -> Room:
        """Save room"""
        pass

    @abstractmethod
    def find_by_id(self, room_id: str) -> Optional[Room]:
        """Find room by ID"""
        pass

    @abstractmethod
    def exists(self, room_id: str) -> bool:
        pass

    @abstractmethod
    def find_all(self) -> List[Room]:
        """All rooms in insertion order"""
        pass


class GuestRepository(ABC):
    """Repository interface for Guest entities"""

    @abstractmethod
    def save(self, guest: Guest) -> Guest:
        """Save guest"""
        pass

    @abstractmethod
    def find_by_id(self, guest_id: str) -> Optional[Guest]:
        """Find guest by ID"""
        pass

    @abstractmethod
    def exists(self, guest_id: str) -> bool:
        pass

    @abstractmethod
    def find_all(self) -> List[Guest]:
        """All guests in registration order"""
        pass

    @abstractmethod
    def find_by_room(self, room_id: str) -> Optional[Guest]:
        """Guest currently staying in a room"""
        pass

    @abstractmethod
    def find_by_reserved_room(self, room_id: str) -> Optional[Guest]:
        """Guest holding a reservation on a room"""
        pass


class StaffRepository(ABC):
    """Repository interface for StaffMember entities"""

    @abstractmethod
    def save(self, member: StaffMember) -> StaffMember:
        """Save staff member"""
        pass

    @abstractmethod
    def find_by_id(self, staff_id: str) -> Optional[StaffMember]:
        """Find staff member by ID"""
        pass

    @abstractmethod
    def exists(self, staff_id: str) -> bool:
        pass

    @abstractmethod
    def find_by_role(self, role: StaffRole) -> List[StaffMember]:
        """Role pool in onboarding order"""
        pass

    @abstractmethod
    def find_all(self) -> List[StaffMember]:
        pass
