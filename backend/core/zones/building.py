"""Building - top-level zone stacking floors under the support rule."""

import logging
from typing import override

from core.config import DEFAULT, BuildingConfig
from core.errors import (
    DuplicateFloorError,
    FireDrillError,
    FloorTooSmallError,
    InvalidArgumentError,
    NoFloorBelowError,
)
from core.zones.base import RoomType, Zone
from core.zones.floor import Floor
from core.zones.room import Room

logger = logging.getLogger(__name__)


class Building(Zone):
    """A named stack of floors.

    Floor numbers are unique, and every floor above the ground floor rests on
    the floor directly below it, which must be at least as large.
    """

    def __init__(self, name: str, config: BuildingConfig = DEFAULT) -> None:
        # Names are written on a line of their own in save files.
        if not name or not name.strip():
            raise InvalidArgumentError("Building name must not be empty")
        if ":" in name or "\n" in name or "\r" in name:
            raise InvalidArgumentError(f"Building name must not contain ':' or line breaks: {name!r}")
        self.name = name
        self.config = config
        self._floors: list[Floor] = []

    @property
    def floors(self) -> list[Floor]:
        return list(self._floors)

    def get_floor_by_number(self, floor_number: int) -> Floor | None:
        for floor in self._floors:
            if floor.floor_number == floor_number:
                return floor
        return None

    def _check_dimensions(self, width: float, length: float) -> None:
        if width < self.config.min_floor_width_m:
            raise InvalidArgumentError(f"Width cannot be less than {self.config.min_floor_width_m}")
        if length < self.config.min_floor_length_m:
            raise InvalidArgumentError(f"Length cannot be less than {self.config.min_floor_length_m}")

    def add_floor(self, floor: Floor) -> None:
        number = floor.floor_number
        if number < 1:
            raise InvalidArgumentError("Floor number must be 1 or higher.")
        self._check_dimensions(floor.width, floor.length)
        if self.get_floor_by_number(number) is not None:
            raise DuplicateFloorError(f"Floor {number} already exists in the building.")

        if number >= 2:
            below = self.get_floor_by_number(number - 1)
            if below is None:
                raise NoFloorBelowError(f"There is no floor below to support floor {number}.")
            if below.area() < floor.area():
                raise FloorTooSmallError(
                    f"Floor {number - 1} ({below.area()}m²) cannot support floor {number} ({floor.area()}m²)."
                )

        self._floors.append(floor)

    def renovate_floor(self, floor_number: int, width: float, length: float) -> None:
        """Resize a floor in place.

        The rooms must still fit, the floor below must still support it and it
        must still support the floor above. Nothing changes on failure.
        """
        floor = self.get_floor_by_number(floor_number)
        if floor is None:
            raise InvalidArgumentError(f"There is no floor {floor_number} to renovate.")
        self._check_dimensions(width, length)

        new_area = width * length
        below = self.get_floor_by_number(floor_number - 1)
        if below is not None and below.area() < new_area:
            raise FloorTooSmallError(
                f"Floor {floor_number - 1} ({below.area()}m²) cannot support {new_area}m² above it."
            )
        above = self.get_floor_by_number(floor_number + 1)
        if above is not None and above.area() > new_area:
            raise FloorTooSmallError(
                f"A {new_area}m² floor {floor_number} cannot support floor {floor_number + 1} ({above.area()}m²)."
            )

        floor.change_dimensions(width, length)
        logger.info("Renovated floor %d of %s to %sm × %sm", floor_number, self.name, width, length)

    @override
    def all_rooms(self) -> list[Room]:
        return [room for floor in self._floors for room in floor.rooms]

    @override
    def fire_drill(self, room_type: RoomType | None = None) -> None:
        """Start a fire drill in every room of the given type, or every room."""
        if not self._floors:
            raise FireDrillError("Cannot conduct fire drill because there are no floors in the building yet!")
        if not self.all_rooms():
            raise FireDrillError("Cannot conduct fire drill because there are no rooms in the building yet!")
        for floor in self._floors:
            floor.fire_drill(room_type)

    @override
    def cancel_fire_drill(self) -> None:
        for floor in self._floors:
            floor.cancel_fire_drill()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Building):
            return NotImplemented
        return self.name == other.name and self._floors == other._floors

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'Building(name="{self.name}", floors={len(self._floors)})'
