"""Zone abstract base class and room classification enums."""

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.zones.room import Room


class RoomType(StrEnum):
    STUDY = "STUDY"
    LABORATORY = "LABORATORY"
    OFFICE = "OFFICE"


class RoomStatus(StrEnum):
    """Derived room state. Never stored, always recomputed from flags and sensors."""

    OPEN = "OPEN"
    EVACUATE = "EVACUATE"
    MAINTENANCE = "MAINTENANCE"


# ---------------------------------------------------------------------------
# Abstract base class
# ---------------------------------------------------------------------------


class Zone(ABC):
    """Every container level of the building hierarchy implements this interface."""

    @abstractmethod
    def all_rooms(self) -> list["Room"]: ...

    @abstractmethod
    def fire_drill(self, room_type: RoomType | None = None) -> None: ...

    @abstractmethod
    def cancel_fire_drill(self) -> None: ...
