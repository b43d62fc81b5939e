"""MaintenanceSchedule - round-robin maintenance visits over a floor's rooms."""

import logging

from core.config import DEFAULT, BuildingConfig
from core.errors import InvalidArgumentError
from core.rounding import round_half_up
from core.zones.room import Room

logger = logging.getLogger(__name__)


def validate_room_order(room_order: list[Room]) -> None:
    """Reject empty orders and rooms repeated back-to-back (ends are adjacent)."""
    if not room_order:
        raise InvalidArgumentError("Maintenance room order must not be empty")
    numbers = [room.room_number for room in room_order]
    if len(numbers) > 1:
        for current, following in zip(numbers, numbers[1:] + numbers[:1], strict=True):
            if current == following:
                raise InvalidArgumentError(f"Room {current} is scheduled twice in a row")


class MaintenanceSchedule:
    """Visits rooms in a fixed cyclic order, one maintenance job at a time.

    The current room has its maintenance flag set. Each simulated minute is
    spent on the current room; once its maintenance time is used up the
    schedule moves on to the next room in the order, wrapping around.
    """

    def __init__(self, room_order: list[Room], config: BuildingConfig = DEFAULT) -> None:
        validate_room_order(room_order)
        self.room_order = list(room_order)
        self.config = config
        self.current_room_index = 0
        self.time_elapsed_current_room = 0
        self.retired = False
        self.current_room.maintenance = True

    @property
    def current_room(self) -> Room:
        return self.room_order[self.current_room_index]

    def maintenance_time(self, room: Room) -> int:
        """Minutes needed to maintain a room, from its area and type."""
        cfg = self.config
        raw = cfg.maintenance_base_minutes + (room.area - cfg.min_room_area_m2) * cfg.maintenance_minutes_per_m2
        return round_half_up(raw * cfg.maintenance_type_factors[room.room_type])

    def elapse_one_minute(self) -> None:
        if self.retired:
            return
        self.time_elapsed_current_room += 1
        if self.time_elapsed_current_room >= self.maintenance_time(self.current_room):
            self._advance()

    def skip_current_maintenance(self) -> None:
        """Abandon the current room and move straight on to the next one."""
        if self.retired:
            return
        self._advance()

    def retire(self) -> None:
        """Stop this schedule for good, releasing the room it was working on."""
        self.current_room.maintenance = False
        self.retired = True

    def _advance(self) -> None:
        finished = self.current_room
        finished.maintenance = False
        self.current_room_index = (self.current_room_index + 1) % len(self.room_order)
        self.current_room.maintenance = True
        self.time_elapsed_current_room = 0
        logger.debug("Maintenance moved from room %d to room %d", finished.room_number, self.current_room.room_number)

    def encode(self) -> str:
        return ",".join(str(room.room_number) for room in self.room_order)

    def __repr__(self) -> str:
        return (
            f"MaintenanceSchedule(currentRoom=#{self.current_room.room_number}, "
            f"currentElapsed={self.time_elapsed_current_room})"
        )
