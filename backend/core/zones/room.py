"""Room - atomic zone holding sensors, an optional hazard evaluator and status flags."""

from core.errors import DuplicateSensorError, InvalidArgumentError
from core.hazard import HazardEvaluator, evaluate_hazard_level
from core.sensors import Sensor, SensorKind, TemperatureSensor, hazard_level, sensor_kind
from core.zones.base import RoomStatus, RoomType

# Two areas closer than this are considered equal.
_AREA_TOLERANCE_M2 = 0.001


class Room:
    """A numbered room of fixed type and area.

    Sensors are kept in canonical kind order, at most one per kind. The room
    status is derived on demand from its temperature sensor and its fire
    drill and maintenance flags.
    """

    def __init__(self, room_number: int, room_type: RoomType, area: float) -> None:
        self.room_number = room_number
        self.room_type = RoomType(room_type)
        self.area = float(area)
        self.fire_drill = False
        self.maintenance = False
        self._sensors: list[Sensor] = []
        self._hazard_evaluator: HazardEvaluator | None = None

    @property
    def sensors(self) -> list[Sensor]:
        return list(self._sensors)

    @property
    def hazard_evaluator(self) -> HazardEvaluator | None:
        return self._hazard_evaluator

    def get_sensor(self, kind: SensorKind | str) -> Sensor | None:
        """Return the attached sensor of the given kind, if any."""
        kind = SensorKind(kind)
        for sensor in self._sensors:
            if sensor_kind(sensor) == kind:
                return sensor
        return None

    def add_sensor(self, sensor: Sensor) -> None:
        """Attach a sensor. Invalidates the current hazard evaluator."""
        kind = sensor_kind(sensor)
        if self.get_sensor(kind) is not None:
            raise DuplicateSensorError(f"Duplicate sensor of type: {kind}")
        self._sensors.append(sensor)
        self._sensors.sort(key=lambda s: sensor_kind(s).order)
        self._hazard_evaluator = None

    def set_hazard_evaluator(self, evaluator: HazardEvaluator | None) -> None:
        """Install an evaluator. Every sensor it reads must be attached here."""
        if evaluator is not None:
            for sensor in evaluator.sensors:
                if not any(sensor is own for own in self._sensors):
                    raise InvalidArgumentError(
                        f"Room {self.room_number} has no attached {sensor_kind(sensor)} for the evaluator"
                    )
        self._hazard_evaluator = evaluator

    def hazard_level(self) -> int:
        """Evaluator score, or 0 when the room has no evaluator."""
        if self._hazard_evaluator is None:
            return 0
        return evaluate_hazard_level(self._hazard_evaluator)

    def evaluate_room_status(self) -> RoomStatus:
        for sensor in self._sensors:
            match sensor:
                case TemperatureSensor() if hazard_level(sensor) == 100:
                    return RoomStatus.EVACUATE
                case _:
                    pass
        if self.fire_drill:
            return RoomStatus.EVACUATE
        if self.maintenance:
            return RoomStatus.MAINTENANCE
        return RoomStatus.OPEN

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Room):
            return NotImplemented
        return (
            self.room_number == other.room_number
            and self.room_type == other.room_type
            and abs(self.area - other.area) < _AREA_TOLERANCE_M2
            and self._sensors == other._sensors
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Room(#{self.room_number}, type={self.room_type}, area={self.area:.2f}m², sensors={len(self._sensors)})"
