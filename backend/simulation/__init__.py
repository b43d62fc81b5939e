"""Simulation module - the clock that drives sensors and maintenance."""

from simulation.clock import SimulationClock, TimedItem

__all__ = [
    "SimulationClock",
    "TimedItem",
]
