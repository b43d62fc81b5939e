"""Sample data stays loadable."""

from core.zones import RoomType
from data.sample_building import SAMPLE_SAVE, create_sample_building, load_sample_buildings
from simulation.clock import SimulationClock


def test_sample_save_loads():
    clock = SimulationClock()
    buildings = load_sample_buildings(clock)
    assert len(buildings) == 3
    assert len(clock.items) == 11
    assert SAMPLE_SAVE.startswith("General Purpose South\n5\n")


def test_sample_building_layout():
    building = create_sample_building()
    assert [floor.floor_number for floor in building.floors] == [1, 2, 3]
    assert [room.room_number for room in building.all_rooms()] == [101, 102, 103, 201, 202, 301]
    assert sum(room.room_type == RoomType.STUDY for room in building.all_rooms()) == 5


def test_sample_buildings_are_independent():
    a = load_sample_buildings()
    b = load_sample_buildings()
    assert a == b
    a[0].fire_drill()
    assert not any(room.fire_drill for room in b[0].all_rooms())
