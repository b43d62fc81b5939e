"""Study room recommendation.

Looks for the most comfortable open study room, starting on the lowest floor
and only climbing while each floor up offers a strictly better room.
"""

import logging

import numpy as np

from core.sensors import comfort_level, is_comfort_sensor
from core.zones import Building, Floor, Room, RoomStatus, RoomType

logger = logging.getLogger(__name__)


def room_comfort(room: Room) -> float:
    """Mean comfort of the room's comfort-capable sensors, 0 when it has none."""
    levels = [comfort_level(sensor) for sensor in room.sensors if is_comfort_sensor(sensor)]
    if not levels:
        return 0.0
    return float(np.mean(levels))


def _best_on_floor(floor: Floor) -> tuple[Room, float] | None:
    best: tuple[Room, float] | None = None
    for room in floor.rooms:
        if room.room_type != RoomType.STUDY or room.evaluate_room_status() != RoomStatus.OPEN:
            continue
        comfort = room_comfort(room)
        if best is None or comfort > best[1]:
            best = (room, comfort)
    return best


def recommend_study_room(building: Building) -> Room | None:
    floors = sorted(building.floors, key=lambda floor: floor.floor_number)
    if not floors:
        return None

    best = _best_on_floor(floors[0])
    if best is None:
        return None
    for floor in floors[1:]:
        candidate = _best_on_floor(floor)
        if candidate is None or candidate[1] <= best[1]:
            break
        best = candidate

    room, comfort = best
    logger.debug("Recommending room %d with comfort %.1f", room.room_number, comfort)
    return room
