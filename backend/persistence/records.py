"""Typed records for the lines of a save file.

Each line is split into string tokens and validated into a frozen pydantic
model. The records only check that the tokens are well-formed; the domain
constructors re-check every building rule when the records are turned back
into objects.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from core.sensors import SensorKind
from core.zones import RoomType

FIELD_SEPARATOR = ":"
LIST_SEPARATOR = ","
WEIGHT_SEPARATOR = "@"

# Number of ':'-separated fields on a sensor line, per kind.
SENSOR_FIELD_COUNTS: dict[SensorKind, int] = {
    SensorKind.TEMPERATURE: 2,
    SensorKind.NOISE: 3,
    SensorKind.OCCUPANCY: 4,
    SensorKind.CARBON_DIOXIDE: 5,
}

EvaluatorName = Literal["RuleBased", "WeightingBased"]


class LineFormatError(ValueError):
    """A line has the wrong shape before any field is validated."""


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


class BuildingHeader(_Record):
    name: str = Field(min_length=1)
    floor_count: int = Field(ge=0)


class FloorRecord(_Record):
    floor_number: int
    width: float
    length: float
    room_count: int = Field(ge=0)
    maintenance_order: list[int] | None = None


class RoomRecord(_Record):
    room_number: int
    room_type: RoomType
    area: float
    sensor_count: int = Field(ge=0)
    evaluator: EvaluatorName | None = None


class SensorRecord(_Record):
    kind: SensorKind
    readings: list[int] = Field(min_length=1)
    update_frequency: int = 1
    capacity: int | None = None
    ideal_value: int | None = None
    variation_limit: int | None = None
    weight: int | None = None


# ---------------------------------------------------------------------------
# Line parsers
# ---------------------------------------------------------------------------


def parse_building_header(name_line: str, count_line: str) -> BuildingHeader:
    if FIELD_SEPARATOR in name_line:
        raise LineFormatError(f"Building name must not contain '{FIELD_SEPARATOR}': {name_line!r}")
    return BuildingHeader(name=name_line, floor_count=count_line)


def parse_floor_line(line: str) -> FloorRecord:
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) not in (4, 5):
        raise LineFormatError(f"Floor line needs 4 or 5 fields, got {len(fields)}: {line!r}")
    return FloorRecord(
        floor_number=fields[0],
        width=fields[1],
        length=fields[2],
        room_count=fields[3],
        maintenance_order=fields[4].split(LIST_SEPARATOR) if len(fields) == 5 else None,
    )


def parse_room_line(line: str) -> RoomRecord:
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) not in (4, 5):
        raise LineFormatError(f"Room line needs 4 or 5 fields, got {len(fields)}: {line!r}")
    return RoomRecord(
        room_number=fields[0],
        room_type=fields[1],
        area=fields[2],
        sensor_count=fields[3],
        evaluator=fields[4] if len(fields) == 5 else None,
    )


def parse_sensor_line(line: str, weighted: bool) -> SensorRecord:
    """Parse a sensor line. Weighted rooms require an ``@weight`` suffix, others forbid it."""
    body, separator, weight = line.partition(WEIGHT_SEPARATOR)
    if weighted and not separator:
        raise LineFormatError(f"Sensor line in a weighted room needs a weight: {line!r}")
    if not weighted and separator:
        raise LineFormatError(f"Unexpected weight on sensor line: {line!r}")

    fields = body.split(FIELD_SEPARATOR)
    kind = SensorKind(fields[0])
    expected = SENSOR_FIELD_COUNTS[kind]
    if len(fields) != expected:
        raise LineFormatError(f"{kind} line needs {expected} fields, got {len(fields)}: {line!r}")

    values: dict[str, object] = {"kind": kind, "readings": fields[1].split(LIST_SEPARATOR)}
    if weighted:
        values["weight"] = weight
    match kind:
        case SensorKind.NOISE:
            values["update_frequency"] = fields[2]
        case SensorKind.OCCUPANCY:
            values["update_frequency"] = fields[2]
            values["capacity"] = fields[3]
        case SensorKind.CARBON_DIOXIDE:
            values["update_frequency"] = fields[2]
            values["ideal_value"] = fields[3]
            values["variation_limit"] = fields[4]
        case SensorKind.TEMPERATURE:
            pass
    return SensorRecord.model_validate(values)
