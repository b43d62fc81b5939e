"""Core domain: sensors, hazard evaluation and the zone hierarchy."""

from core.config import DEFAULT, BuildingConfig
from core.errors import (
    BuildingError,
    DuplicateFloorError,
    DuplicateRoomError,
    DuplicateSensorError,
    FileFormatError,
    FireDrillError,
    FloorTooSmallError,
    InsufficientSpaceError,
    InvalidArgumentError,
    NoFloorBelowError,
    StructuralConflictError,
)
from core.hazard import (
    HazardEvaluator,
    RuleBasedHazardEvaluator,
    WeightingBasedHazardEvaluator,
    evaluate_hazard_level,
    evaluator_id,
)
from core.sensors import (
    CarbonDioxideSensor,
    ComfortSensor,
    HazardSensor,
    NoiseSensor,
    OccupancySensor,
    Sensor,
    SensorKind,
    TemperatureSensor,
    comfort_level,
    hazard_level,
    is_comfort_sensor,
    is_hazard_sensor,
    sensor_kind,
)

__all__ = [
    "DEFAULT",
    "BuildingConfig",
    "BuildingError",
    "CarbonDioxideSensor",
    "ComfortSensor",
    "DuplicateFloorError",
    "DuplicateRoomError",
    "DuplicateSensorError",
    "FileFormatError",
    "FireDrillError",
    "FloorTooSmallError",
    "HazardEvaluator",
    "HazardSensor",
    "InsufficientSpaceError",
    "InvalidArgumentError",
    "NoFloorBelowError",
    "NoiseSensor",
    "OccupancySensor",
    "RuleBasedHazardEvaluator",
    "Sensor",
    "SensorKind",
    "StructuralConflictError",
    "TemperatureSensor",
    "WeightingBasedHazardEvaluator",
    "comfort_level",
    "evaluate_hazard_level",
    "evaluator_id",
    "hazard_level",
    "is_comfort_sensor",
    "is_hazard_sensor",
    "sensor_kind",
]
