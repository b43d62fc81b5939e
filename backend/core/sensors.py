"""Sensor variants, readings replay and hazard/comfort scoring.

Sensors don't measure anything - each one replays a fixed list of readings,
advancing through it once every ``update_frequency`` simulated minutes and
wrapping around at the end. Hazard and comfort scores are pure functions of
the current reading.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from core.config import DEFAULT
from core.errors import InvalidArgumentError
from core.rounding import clamp_score, round_half_up


class SensorKind(StrEnum):
    """Persisted sensor type names.

    Declaration order is the canonical order of a room's sensor list.
    """

    CARBON_DIOXIDE = "CarbonDioxideSensor"
    NOISE = "NoiseSensor"
    OCCUPANCY = "OccupancySensor"
    TEMPERATURE = "TemperatureSensor"

    @property
    def order(self) -> int:
        return _KIND_ORDER[self]


_KIND_ORDER: dict[SensorKind, int] = {kind: i for i, kind in enumerate(SensorKind)}


# ---------------------------------------------------------------------------
# Timed base
# ---------------------------------------------------------------------------


@dataclass
class TimedSensor:
    """Shared state of every sensor: a cyclic list of readings."""

    readings: Sequence[int]
    update_frequency: int
    time_elapsed: int = field(default=0, init=False, compare=False)
    current_reading: int = field(default=0, init=False, compare=False)

    def __post_init__(self) -> None:
        self.readings = tuple(self.readings)
        if not self.readings:
            raise InvalidArgumentError("Sensor readings must have at least one element")
        if any(reading < 0 for reading in self.readings):
            raise InvalidArgumentError("All sensor readings must be non-negative")
        if not DEFAULT.min_update_frequency <= self.update_frequency <= DEFAULT.max_update_frequency:
            raise InvalidArgumentError(
                f"Update frequency must be between {DEFAULT.min_update_frequency} "
                f"and {DEFAULT.max_update_frequency} minutes (inclusive)"
            )
        self.current_reading = self.readings[0]

    def elapse_one_minute(self) -> None:
        """Advance one minute and pick the reading for the new time."""
        self.time_elapsed += 1
        rotation = len(self.readings) * self.update_frequency
        index = (self.time_elapsed % rotation) // self.update_frequency
        self.current_reading = self.readings[index]


# ---------------------------------------------------------------------------
# Sensor variants
# ---------------------------------------------------------------------------


@dataclass
class TemperatureSensor(TimedSensor):
    """Room temperature in °C, updated every minute."""

    update_frequency: int = field(default=1, init=False)


@dataclass
class NoiseSensor(TimedSensor):
    """Noise level in dB."""


@dataclass
class OccupancySensor(TimedSensor):
    """Number of people in the room, compared against its capacity."""

    capacity: int

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.capacity < 0:
            raise InvalidArgumentError("Capacity must be >= 0")


@dataclass
class CarbonDioxideSensor(TimedSensor):
    """CO2 concentration in ppm, scored against an ideal value."""

    ideal_value: int
    variation_limit: int

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.ideal_value <= 0:
            raise InvalidArgumentError("Ideal CO2 value must be > 0")
        if self.variation_limit <= 0:
            raise InvalidArgumentError("CO2 variation limit must be > 0")
        if self.ideal_value - self.variation_limit < 0:
            raise InvalidArgumentError("Ideal CO2 value - variation limit must be >= 0")


type Sensor = TemperatureSensor | NoiseSensor | OccupancySensor | CarbonDioxideSensor
type HazardSensor = TemperatureSensor | NoiseSensor | OccupancySensor | CarbonDioxideSensor
type ComfortSensor = TemperatureSensor | OccupancySensor | CarbonDioxideSensor


def sensor_kind(sensor: Sensor) -> SensorKind:
    """Stable kind tag, used for ordering and persistence."""
    match sensor:
        case TemperatureSensor():
            return SensorKind.TEMPERATURE
        case NoiseSensor():
            return SensorKind.NOISE
        case OccupancySensor():
            return SensorKind.OCCUPANCY
        case CarbonDioxideSensor():
            return SensorKind.CARBON_DIOXIDE
    raise TypeError(f"Not a sensor: {sensor!r}")


def is_hazard_sensor(sensor: Sensor) -> bool:
    return isinstance(sensor, TemperatureSensor | NoiseSensor | OccupancySensor | CarbonDioxideSensor)


def is_comfort_sensor(sensor: Sensor) -> bool:
    return isinstance(sensor, TemperatureSensor | OccupancySensor | CarbonDioxideSensor)


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


def _temperature_comfort(reading: int) -> int:
    low, high = DEFAULT.comfort_band_low_c, DEFAULT.comfort_band_high_c
    step = DEFAULT.comfort_step_per_degree
    if low <= reading <= high:
        return 100
    if reading < low:
        return clamp_score(100 - step * (low - reading))
    return clamp_score(100 - step * (reading - high))


def _co2_hazard(reading: int) -> int:
    for upper, hazard in DEFAULT.co2_hazard_steps:
        if reading < upper:
            return hazard
    return 100


def _noise_hazard(reading: int) -> int:
    relative_loudness = 2.0 ** ((reading - DEFAULT.noise_reference_db) / 10.0)
    return clamp_score(round_half_up(min(100.0, relative_loudness * 100.0)))


def hazard_level(sensor: HazardSensor) -> int:
    """Hazard score 0-100 for the sensor's current reading."""
    reading = sensor.current_reading
    match sensor:
        case TemperatureSensor():
            return 100 if reading >= DEFAULT.temperature_hazard_c else 0
        case NoiseSensor():
            return _noise_hazard(reading)
        case OccupancySensor(capacity=capacity):
            if reading >= capacity:
                return 100
            return round_half_up(100.0 * reading / capacity)
        case CarbonDioxideSensor():
            return _co2_hazard(reading)
    raise TypeError(f"Not a hazard sensor: {sensor!r}")


def comfort_level(sensor: ComfortSensor) -> int:
    """Comfort score 0-100 for the sensor's current reading."""
    reading = sensor.current_reading
    match sensor:
        case TemperatureSensor():
            return _temperature_comfort(reading)
        case OccupancySensor(capacity=capacity):
            if reading >= capacity:
                return 0
            return round_half_up(100.0 * (capacity - reading) / capacity)
        case CarbonDioxideSensor(ideal_value=ideal, variation_limit=limit):
            difference = abs(reading - ideal)
            if difference >= limit:
                return 0
            return round_half_up(100.0 * (1.0 - difference / limit))
    raise TypeError(f"Not a comfort sensor: {sensor!r}")
