"""Hazard evaluator variants that reduce a room's sensors to one 0-100 score."""

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from core.errors import InvalidArgumentError
from core.rounding import clamp_score, round_half_up
from core.sensors import HazardSensor, OccupancySensor, hazard_level, sensor_kind


@dataclass(frozen=True)
class RuleBasedHazardEvaluator:
    """Average of the non-occupancy hazards, scaled down by occupancy.

    Any non-occupancy sensor at 100 makes the whole room 100. At most one
    occupancy sensor is expected.
    """

    sensors: Sequence[HazardSensor] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sensors", tuple(self.sensors))


@dataclass(frozen=True)
class WeightingBasedHazardEvaluator:
    """Weighted sum of sensor hazards. Weights are percentages summing to 100.

    The pairs are fixed at construction.
    """

    weightings: Sequence[tuple[HazardSensor, int]]

    def __post_init__(self) -> None:
        object.__setattr__(self, "weightings", tuple((sensor, weight) for sensor, weight in self.weightings))
        for sensor, weight in self.weightings:
            if not 0 <= weight <= 100:
                raise InvalidArgumentError(
                    f"Weight for {sensor_kind(sensor)} must be between 0 and 100, got {weight}"
                )
        total = sum(weight for _, weight in self.weightings)
        if total != 100:
            raise InvalidArgumentError(f"Weights must sum to 100, got {total}")

    @property
    def sensors(self) -> list[HazardSensor]:
        return [sensor for sensor, _ in self.weightings]

    def weight_for(self, sensor: HazardSensor) -> int:
        """Weight assigned to this sensor handle, 0 if it is not weighted."""
        for candidate, weight in self.weightings:
            if candidate is sensor:
                return weight
        return 0

    def ordered_weights(self) -> list[int]:
        """Weights in canonical sensor order."""
        ordered = sorted(self.weightings, key=lambda pair: sensor_kind(pair[0]).order)
        return [weight for _, weight in ordered]


type HazardEvaluator = RuleBasedHazardEvaluator | WeightingBasedHazardEvaluator


def evaluator_id(evaluator: HazardEvaluator) -> str:
    """Stable string identifier used by the save format."""
    match evaluator:
        case RuleBasedHazardEvaluator():
            return "RuleBased"
        case WeightingBasedHazardEvaluator():
            return "WeightingBased"


def _evaluate_rule_based(sensors: Sequence[HazardSensor]) -> int:
    if not sensors:
        return 0
    if len(sensors) == 1:
        return hazard_level(sensors[0])

    levels: list[int] = []
    occupancy: OccupancySensor | None = None
    for sensor in sensors:
        match sensor:
            case OccupancySensor():
                occupancy = sensor
            case _:
                level = hazard_level(sensor)
                if level == 100:
                    return 100
                levels.append(level)

    if not levels:
        return hazard_level(occupancy) if occupancy is not None else 0

    average = float(np.mean(levels))
    if occupancy is not None:
        average *= hazard_level(occupancy) / 100.0
    return clamp_score(round_half_up(average))


def _evaluate_weighting_based(weightings: Sequence[tuple[HazardSensor, int]]) -> int:
    levels = np.array([hazard_level(sensor) for sensor, _ in weightings], dtype=np.float64)
    weights = np.array([weight for _, weight in weightings], dtype=np.float64) / 100.0
    return clamp_score(round_half_up(float(np.dot(levels, weights))))


def evaluate_hazard_level(evaluator: HazardEvaluator) -> int:
    """Overall hazard score 0-100 for the evaluator's sensors."""
    match evaluator:
        case RuleBasedHazardEvaluator(sensors=sensors):
            return _evaluate_rule_based(sensors)
        case WeightingBasedHazardEvaluator(weightings=weightings):
            return _evaluate_weighting_based(weightings)


def uses_weightings(evaluator: HazardEvaluator | None) -> bool:
    return isinstance(evaluator, WeightingBasedHazardEvaluator)
