"""Save format: encode buildings to text and decode them back.

A save holds one block of lines per building::

    buildingName
    floorCount
    floorNumber:width:length:roomCount[:room,number,list]
    roomNumber:ROOM_TYPE:area:sensorCount[:RuleBased|WeightingBased]
    SensorType:r1,r2,...,rN[:updateFrequency[:extra...]][@weight]

Decoding rebuilds the hierarchy through the same API callers use, so every
building rule is re-checked. Any problem rejects the whole text with a
single ``FileFormatError``.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from core.errors import BuildingError, FileFormatError
from core.hazard import (
    HazardEvaluator,
    RuleBasedHazardEvaluator,
    WeightingBasedHazardEvaluator,
    evaluator_id,
    uses_weightings,
)
from core.sensors import (
    CarbonDioxideSensor,
    NoiseSensor,
    OccupancySensor,
    Sensor,
    SensorKind,
    TemperatureSensor,
    is_hazard_sensor,
    sensor_kind,
)
from core.zones import Building, Floor, Room
from persistence.records import (
    FIELD_SEPARATOR,
    LIST_SEPARATOR,
    WEIGHT_SEPARATOR,
    RoomRecord,
    SensorRecord,
    parse_building_header,
    parse_floor_line,
    parse_room_line,
    parse_sensor_line,
)
from simulation.clock import SimulationClock

logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\n"


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def format_number(value: float) -> str:
    """Integral values print without a fractional part: 10.0 -> "10", 10.5 -> "10.5"."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def encode_sensor(sensor: Sensor, weight: int | None = None) -> str:
    fields = [str(sensor_kind(sensor)), LIST_SEPARATOR.join(str(r) for r in sensor.readings)]
    match sensor:
        case TemperatureSensor():
            pass
        case NoiseSensor(update_frequency=frequency):
            fields.append(str(frequency))
        case OccupancySensor(update_frequency=frequency, capacity=capacity):
            fields.extend([str(frequency), str(capacity)])
        case CarbonDioxideSensor(update_frequency=frequency, ideal_value=ideal, variation_limit=limit):
            fields.extend([str(frequency), str(ideal), str(limit)])
    line = FIELD_SEPARATOR.join(fields)
    if weight is not None:
        line += f"{WEIGHT_SEPARATOR}{weight}"
    return line


def encode_room(room: Room) -> list[str]:
    evaluator = room.hazard_evaluator
    fields = [str(room.room_number), str(room.room_type), format_number(room.area), str(len(room.sensors))]
    if evaluator is not None:
        fields.append(evaluator_id(evaluator))
    lines = [FIELD_SEPARATOR.join(fields)]

    weighted = uses_weightings(evaluator)
    for sensor in room.sensors:
        lines.append(encode_sensor(sensor, evaluator.weight_for(sensor) if weighted else None))
    return lines


def encode_floor(floor: Floor) -> list[str]:
    fields = [
        str(floor.floor_number),
        format_number(floor.width),
        format_number(floor.length),
        str(len(floor.rooms)),
    ]
    if floor.maintenance_schedule is not None:
        fields.append(floor.maintenance_schedule.encode())
    lines = [FIELD_SEPARATOR.join(fields)]
    for room in floor.rooms:
        lines.extend(encode_room(room))
    return lines


def encode_building(building: Building) -> list[str]:
    lines = [building.name, str(len(building.floors))]
    for floor in building.floors:
        lines.extend(encode_floor(floor))
    return lines


def encode(buildings: Iterable[Building]) -> str:
    """Encode buildings as save text. No trailing line separator."""
    lines: list[str] = []
    for building in buildings:
        lines.extend(encode_building(building))
    return LINE_SEPARATOR.join(lines)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class _LineReader:
    """Hands out lines one at a time. Running out or hitting a blank line is fatal."""

    def __init__(self, text: str) -> None:
        # Only the line separator splits; other Unicode line breaks stay inside a line.
        lines = text.split(LINE_SEPARATOR)
        if lines[-1] == "":
            lines.pop()
        self._lines = lines
        self._position = 0

    @property
    def line_number(self) -> int:
        return self._position

    def has_more(self) -> bool:
        return self._position < len(self._lines)

    def next_line(self) -> str:
        if not self.has_more():
            raise FileFormatError(f"Unexpected end of save data after line {self._position}")
        line = self._lines[self._position]
        self._position += 1
        if not line.strip():
            raise FileFormatError(f"Blank line {self._position} where content was expected")
        return line


def _build_sensor(record: SensorRecord) -> Sensor:
    match record.kind:
        case SensorKind.TEMPERATURE:
            return TemperatureSensor(record.readings)
        case SensorKind.NOISE:
            return NoiseSensor(record.readings, record.update_frequency)
        case SensorKind.OCCUPANCY:
            return OccupancySensor(record.readings, record.update_frequency, record.capacity)
        case SensorKind.CARBON_DIOXIDE:
            return CarbonDioxideSensor(
                record.readings,
                record.update_frequency,
                record.ideal_value,
                record.variation_limit,
            )


def _build_evaluator(record: RoomRecord, room: Room, weights: dict[SensorKind, int]) -> HazardEvaluator | None:
    hazard_sensors = [sensor for sensor in room.sensors if is_hazard_sensor(sensor)]
    match record.evaluator:
        case "RuleBased":
            return RuleBasedHazardEvaluator(hazard_sensors)
        case "WeightingBased":
            return WeightingBasedHazardEvaluator([(sensor, weights[sensor_kind(sensor)]) for sensor in hazard_sensors])
        case _:
            return None


def _decode_room(reader: _LineReader) -> Room:
    record = parse_room_line(reader.next_line())
    room = Room(record.room_number, record.room_type, record.area)
    weighted = record.evaluator == "WeightingBased"

    weights: dict[SensorKind, int] = {}
    for _ in range(record.sensor_count):
        sensor_record = parse_sensor_line(reader.next_line(), weighted=weighted)
        room.add_sensor(_build_sensor(sensor_record))
        if sensor_record.weight is not None:
            weights[sensor_record.kind] = sensor_record.weight

    evaluator = _build_evaluator(record, room, weights)
    if evaluator is not None:
        room.set_hazard_evaluator(evaluator)
    return room


def _decode_floor(reader: _LineReader) -> Floor:
    record = parse_floor_line(reader.next_line())
    floor = Floor(record.floor_number, record.width, record.length)
    for _ in range(record.room_count):
        floor.add_room(_decode_room(reader))

    if record.maintenance_order is not None:
        order: list[Room] = []
        for room_number in record.maintenance_order:
            room = floor.get_room_by_number(room_number)
            if room is None:
                raise FileFormatError(
                    f"Maintenance schedule on floor {record.floor_number} names unknown room {room_number}"
                )
            order.append(room)
        floor.create_maintenance_schedule(order)
    return floor


def _decode_building(reader: _LineReader) -> Building:
    name_line = reader.next_line()
    header = parse_building_header(name_line, reader.next_line())
    building = Building(header.name)
    for _ in range(header.floor_count):
        building.add_floor(_decode_floor(reader))
    return building


def decode(text: str, clock: SimulationClock | None = None) -> list[Building]:
    """Decode save text into buildings.

    Empty text decodes to no buildings. With a clock, every decoded sensor
    and maintenance schedule is registered on it, but only once the whole
    text has been accepted.
    """
    reader = _LineReader(text)
    try:
        buildings: list[Building] = []
        while reader.has_more():
            buildings.append(_decode_building(reader))
    except FileFormatError as exc:
        logger.warning("Rejecting save data: %s", exc)
        raise
    except (BuildingError, ValidationError, ValueError, TypeError) as exc:
        logger.warning("Rejecting save data near line %d: %s", reader.line_number, exc)
        raise FileFormatError(f"Invalid save data near line {reader.line_number}") from exc

    if clock is not None:
        for building in buildings:
            clock.register_building(building)
    return buildings


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


def save_buildings(path: str | Path, buildings: Iterable[Building]) -> None:
    """Write buildings to a save file, replacing it."""
    buildings = list(buildings)
    Path(path).write_text(encode(buildings), encoding="utf-8")
    logger.info("Saved %d buildings to %s", len(buildings), path)


def load_buildings(path: str | Path, clock: SimulationClock | None = None) -> list[Building]:
    """Read and decode a save file. OS errors propagate unchanged."""
    buildings = decode(Path(path).read_text(encoding="utf-8"), clock=clock)
    logger.info("Loaded %d buildings from %s", len(buildings), path)
    return buildings

