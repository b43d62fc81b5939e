"""Centralised building rules.

Every magic number that governs validation, sensor scoring and maintenance
timing lives here. Create a custom ``BuildingConfig`` to tweak values in
tests::

    cfg = BuildingConfig(min_room_area_m2=10)
    building = Building("Annex", config=cfg)
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BuildingConfig:
    """All building rules, grouped by category."""

    # --- Spatial minimums ---
    min_room_area_m2: int = 5
    min_floor_width_m: int = 5
    min_floor_length_m: int = 5

    # --- Sensor update frequency (minutes) ---
    min_update_frequency: int = 1
    max_update_frequency: int = 5

    # --- Temperature sensor ---
    temperature_hazard_c: int = 68  # at or above this the room is evacuated
    comfort_band_low_c: int = 20
    comfort_band_high_c: int = 26
    comfort_step_per_degree: int = 20

    # --- CO2 sensor ---
    # (upper bound exclusive, hazard) pairs; readings above the last bound score 100
    co2_hazard_steps: tuple[tuple[int, int], ...] = ((1000, 0), (2000, 25), (5000, 50))

    # --- Noise sensor ---
    noise_reference_db: float = 70.0  # loudness doubles every 10 dB above this

    # --- Maintenance timing ---
    maintenance_base_minutes: float = 5.0
    maintenance_minutes_per_m2: float = 0.2  # per m² above the minimum room area
    maintenance_type_factors: dict[str, float] = field(
        default_factory=lambda: {"STUDY": 1.0, "OFFICE": 1.5, "LABORATORY": 2.0}
    )


DEFAULT = BuildingConfig()
