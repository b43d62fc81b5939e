"""Floor - a rectangular level holding rooms and an optional maintenance schedule."""

import logging
from typing import TYPE_CHECKING, override

from core.config import DEFAULT, BuildingConfig
from core.errors import DuplicateRoomError, FloorTooSmallError, InsufficientSpaceError, InvalidArgumentError
from core.zones.base import RoomType, Zone
from core.zones.maintenance import MaintenanceSchedule, validate_room_order
from core.zones.room import Room

if TYPE_CHECKING:
    from simulation.clock import SimulationClock

logger = logging.getLogger(__name__)


class Floor(Zone):
    """A numbered floor of width × length metres.

    The summed area of its rooms never exceeds the floor area.
    """

    def __init__(self, floor_number: int, width: float, length: float, config: BuildingConfig = DEFAULT) -> None:
        self.floor_number = floor_number
        self.width = float(width)
        self.length = float(length)
        self.config = config
        self._rooms: list[Room] = []
        self.maintenance_schedule: MaintenanceSchedule | None = None

    @property
    def rooms(self) -> list[Room]:
        return list(self._rooms)

    def area(self) -> float:
        return self.width * self.length

    def occupied_area(self) -> float:
        return sum(room.area for room in self._rooms)

    def free_area(self) -> float:
        return self.area() - self.occupied_area()

    def get_room_by_number(self, room_number: int) -> Room | None:
        for room in self._rooms:
            if room.room_number == room_number:
                return room
        return None

    def add_room(self, room: Room) -> None:
        if room.area < self.config.min_room_area_m2:
            raise InvalidArgumentError(f"Area cannot be less than {self.config.min_room_area_m2}")
        if self.get_room_by_number(room.room_number) is not None:
            raise DuplicateRoomError(f"The room number {room.room_number} is already taken on this floor.")
        if self.occupied_area() + room.area > self.area():
            raise InsufficientSpaceError(
                f"Insufficient space to add room. Floor area: {self.area()}m², "
                f"occupied area: {self.occupied_area()}m², this room: {room.area}m²"
            )
        self._rooms.append(room)

    def change_dimensions(self, width: float, length: float) -> None:
        """Resize the floor. Existing rooms must still fit."""
        if width < self.config.min_floor_width_m or length < self.config.min_floor_length_m:
            raise InvalidArgumentError(
                f"Floor must be at least {self.config.min_floor_width_m}m × {self.config.min_floor_length_m}m"
            )
        if self.occupied_area() > width * length:
            raise FloorTooSmallError(
                f"Rooms on floor {self.floor_number} occupy {self.occupied_area()}m², "
                f"more than the new area of {width * length}m²"
            )
        self.width = float(width)
        self.length = float(length)

    def create_maintenance_schedule(
        self,
        room_order: list[Room],
        clock: "SimulationClock | None" = None,
    ) -> MaintenanceSchedule:
        """Install a new schedule, retiring the previous one.

        Rooms are matched by number against this floor's own rooms.
        """
        resolved: list[Room] = []
        for room in room_order:
            own = self.get_room_by_number(room.room_number)
            if own is None:
                raise InvalidArgumentError(f"Room {room.room_number} is not on floor {self.floor_number}")
            resolved.append(own)

        # Validate before touching the old schedule so a bad order changes nothing.
        validate_room_order(resolved)
        if self.maintenance_schedule is not None:
            self.maintenance_schedule.retire()
            logger.info("Replacing maintenance schedule on floor %d", self.floor_number)
        schedule = MaintenanceSchedule(resolved, config=self.config)
        self.maintenance_schedule = schedule
        if clock is not None:
            clock.register(schedule)
        logger.info("Maintenance schedule on floor %d: %s", self.floor_number, schedule.encode())
        return schedule

    @override
    def all_rooms(self) -> list[Room]:
        return self.rooms

    @override
    def fire_drill(self, room_type: RoomType | None = None) -> None:
        for room in self._rooms:
            if room_type is None or room.room_type == room_type:
                room.fire_drill = True

    @override
    def cancel_fire_drill(self) -> None:
        for room in self._rooms:
            room.fire_drill = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Floor):
            return NotImplemented
        return (
            self.floor_number == other.floor_number
            and self.width == other.width
            and self.length == other.length
            and self._rooms == other._rooms
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Floor(#{self.floor_number}, width={self.width:.2f}m, length={self.length:.2f}m, "
            f"rooms={len(self._rooms)})"
        )
