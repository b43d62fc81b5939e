"""Building / floor / room hierarchy."""

from core.zones.base import RoomStatus, RoomType, Zone
from core.zones.building import Building
from core.zones.floor import Floor
from core.zones.maintenance import MaintenanceSchedule, validate_room_order
from core.zones.room import Room

__all__ = [
    "Building",
    "Floor",
    "MaintenanceSchedule",
    "Room",
    "RoomStatus",
    "RoomType",
    "Zone",
    "validate_room_order",
]
