"""Simulation clock - explicit registry of everything that moves with time."""

import logging
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from core.zones import Building

logger = logging.getLogger(__name__)


class TimedItem(Protocol):
    """Anything advanced by the clock: sensors and maintenance schedules."""

    def elapse_one_minute(self) -> None:
        """Advance by one simulated minute."""
        ...


class SimulationClock:
    """Fans a single "one minute passed" tick out to every registered item.

    Membership is append-only and items tick in registration order.
    Registering the same object twice is a no-op. Pausing is the caller's
    business: the clock ticks whenever it is asked to.
    """

    def __init__(self) -> None:
        self._items: list[TimedItem] = []
        self.minutes_elapsed: int = 0

    @property
    def items(self) -> tuple[TimedItem, ...]:
        return tuple(self._items)

    def is_registered(self, item: TimedItem) -> bool:
        return any(existing is item for existing in self._items)

    def register(self, item: TimedItem) -> None:
        if self.is_registered(item):
            return
        self._items.append(item)

    def register_building(self, building: "Building") -> None:
        """Register every sensor and the active schedule of each floor."""
        for floor in building.floors:
            for room in floor.rooms:
                for sensor in room.sensors:
                    self.register(sensor)
            if floor.maintenance_schedule is not None:
                self.register(floor.maintenance_schedule)

    def elapse_one_minute(self) -> None:
        # Snapshot so items registered during the fan-out wait for the next tick.
        for item in tuple(self._items):
            item.elapse_one_minute()
        self.minutes_elapsed += 1
        logger.debug("Tick %d: advanced %d timed items", self.minutes_elapsed, len(self._items))

    def elapse(self, minutes: int) -> None:
        """Advance several minutes, one tick at a time."""
        if minutes < 0:
            raise ValueError(f"Cannot elapse a negative number of minutes: {minutes}")
        for _ in range(minutes):
            self.elapse_one_minute()
