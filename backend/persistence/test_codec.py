"""Save text encoding, strict decoding and file round trips."""

import pytest

from core.errors import FileFormatError, FloorTooSmallError
from core.hazard import RuleBasedHazardEvaluator, WeightingBasedHazardEvaluator
from core.sensors import NoiseSensor, SensorKind, TemperatureSensor
from core.zones import Building, Floor, Room, RoomType
from data.sample_building import SAMPLE_SAVE
from persistence.codec import decode, encode, format_number, load_buildings, save_buildings
from persistence.records import LineFormatError, parse_sensor_line
from simulation.clock import SimulationClock

# -----------------------------------------------------------------------------
# Decoding the sample
# -----------------------------------------------------------------------------


def test_sample_buildings_decoded():
    first, second, third = decode(SAMPLE_SAVE)

    assert first.name == "General Purpose South"
    assert second.name == "Forgan Smith Building"
    assert third.name == "Andrew N. Liveris Building"
    assert len(first.floors) == 5
    assert len(first.get_floor_by_number(1).rooms) == 4
    assert len(second.floors) == 1
    assert third.get_floor_by_number(1).rooms == []


def test_sample_sensors_decoded():
    first, second, _ = decode(SAMPLE_SAVE)

    room_201 = first.get_floor_by_number(2).get_room_by_number(201)
    assert len(room_201.sensors) == 2
    noise = room_201.get_sensor(SensorKind.NOISE)
    assert noise.readings == (55, 62, 69, 63)
    assert noise.update_frequency == 3

    co2 = second.get_floor_by_number(1).get_room_by_number(107).get_sensor("CarbonDioxideSensor")
    assert co2.readings == (745, 1320, 2782, 3216, 5043, 3528, 1970)
    assert (co2.update_frequency, co2.ideal_value, co2.variation_limit) == (3, 700, 300)
    assert len(second.get_floor_by_number(1).get_room_by_number(103).sensors) == 1


def test_sample_evaluators_decoded():
    first, _, _ = decode(SAMPLE_SAVE)

    rule_based = first.get_floor_by_number(2).get_room_by_number(201).hazard_evaluator
    assert isinstance(rule_based, RuleBasedHazardEvaluator)

    weighted = first.get_floor_by_number(5).get_room_by_number(501).hazard_evaluator
    assert isinstance(weighted, WeightingBasedHazardEvaluator)
    assert weighted.ordered_weights() == [25, 75]

    assert first.get_floor_by_number(1).get_room_by_number(103).hazard_evaluator is None


def test_sample_schedule_decoded():
    first, _, _ = decode(SAMPLE_SAVE)
    floor = first.get_floor_by_number(1)
    assert repr(floor.maintenance_schedule) == "MaintenanceSchedule(currentRoom=#101, currentElapsed=0)"
    assert floor.get_room_by_number(101).maintenance
    assert first.get_floor_by_number(2).maintenance_schedule is None


def test_sample_round_trips_exactly():
    assert encode(decode(SAMPLE_SAVE)) == SAMPLE_SAVE


def test_decoded_buildings_equal_after_second_pass():
    assert decode(encode(decode(SAMPLE_SAVE))) == decode(SAMPLE_SAVE)


def test_empty_text_means_no_buildings():
    assert decode("") == []
    assert encode([]) == ""


def test_clock_registration_on_decode():
    clock = SimulationClock()
    decode(SAMPLE_SAVE, clock=clock)
    # 10 sensors and one schedule.
    assert len(clock.items) == 11


# -----------------------------------------------------------------------------
# Encoding
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(("value", "expected"), [(10.0, "10"), (25.6, "25.6"), (12.25, "12.25"), (7, "7")])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_encode_unweighted_sensor_gets_zero_weight():
    building = Building("Annex")
    floor = Floor(1, 10, 10)
    building.add_floor(floor)
    room = Room(101, RoomType.STUDY, 20)
    noise = NoiseSensor([50, 55], 2)
    temperature = TemperatureSensor([20])
    room.add_sensor(noise)
    room.add_sensor(temperature)
    room.set_hazard_evaluator(WeightingBasedHazardEvaluator([(temperature, 100)]))
    floor.add_room(room)

    text = encode([building])
    assert text == "\n".join(
        [
            "Annex",
            "1",
            "1:10:10:1",
            "101:STUDY:20:2:WeightingBased",
            "NoiseSensor:50,55:2@0",
            "TemperatureSensor:20@100",
        ]
    )
    assert encode(decode(text)) == text


def test_encode_reflects_live_state():
    building = decode(SAMPLE_SAVE)[0]
    with pytest.raises(FloorTooSmallError):
        building.renovate_floor(5, 8, 10)
    building.renovate_floor(4, 8, 9)
    building.get_floor_by_number(1).create_maintenance_schedule(
        [building.get_floor_by_number(1).get_room_by_number(n) for n in (103, 104)]
    )
    lines = encode([building]).split("\n")
    assert "1:10:10:4:103,104" in lines
    assert "5:8:8:1" in lines
    assert "4:8:9:0" in lines


# -----------------------------------------------------------------------------
# Rejection
# -----------------------------------------------------------------------------


def _replace(old: str, new: str) -> str:
    assert old in SAMPLE_SAVE
    return SAMPLE_SAVE.replace(old, new, 1)


@pytest.mark.parametrize(
    "text",
    [
        # floor counts
        _replace("General Purpose South\n5", "General Purpose South\n4"),
        _replace("General Purpose South\n5", "General Purpose South\n6"),
        _replace("General Purpose South\n5", "General Purpose South\n-1"),
        # room counts
        _replace("1:10:10:4:101,102", "1:10:10:5:101,102"),
        _replace("1:10:10:4:101,102", "1:10:10:3:101,102"),
        # sensor counts
        _replace("101:STUDY:20:2:RuleBased", "101:STUDY:20:1:RuleBased"),
        _replace("201:STUDY:30:2:RuleBased", "201:STUDY:30:3:RuleBased"),
        # blank line
        _replace("1:10:10:4:101,102\n", "1:10:10:4:101,102\n\n"),
        SAMPLE_SAVE + "\n\n",
        # weights
        _replace("TemperatureSensor:21,22,23,24", "TemperatureSensor:21,22,23,24@50"),
        _replace("TemperatureSensor:20,25,70@75", "TemperatureSensor:20,25,70"),
        _replace("TemperatureSensor:20,25,70@75", "TemperatureSensor:20,25,70@70"),
        # room type and evaluator names
        _replace("103:STUDY:15:1", "103:study:15:1"),
        _replace("103:STUDY:15:1", "103:KITCHEN:15:1"),
        _replace("201:STUDY:30:2:RuleBased", "201:STUDY:30:2:Random"),
        # schedules
        _replace("1:10:10:4:101,102", "1:10:10:4:101,109"),
        _replace("1:10:10:4:101,102", "1:10:10:4:101,101"),
        # structure
        _replace("1\n1:7:7:0", "2\n1:7:7:0\n1:7:7:0"),
        _replace("1:7:7:0", "2:7:7:0"),
        _replace("1:7:7:0", "0:7:7:0"),
        _replace("3:10:8:1", "3:10:4:1"),
        _replace("3:10:8:1", "3:11:10:1"),
        _replace("103:STUDY:10:0", "103:STUDY:90:0"),
        _replace("103:STUDY:10:0", "103:STUDY:4:0"),
        _replace("103:STUDY:10:0", "101:STUDY:10:0"),
        # field counts
        _replace("103:STUDY:10:0", "103:STUDY:10"),
        _replace("103:STUDY:10:0", "103:STUDY:10:0:RuleBased:x"),
        _replace("TemperatureSensor:22,23", "TemperatureSensor:22,23:1"),
        _replace("OccupancySensor:4,8,12:2:20", "OccupancySensor:4,8,12:2"),
        # sensor values
        _replace("NoiseSensor:55,62,69,63:3", "HumiditySensor:55,62,69,63:3"),
        _replace("NoiseSensor:55,62,69,63:3", "NoiseSensor:55,62,69,63:6"),
        _replace("OccupancySensor:4,8,12:2:20", "OccupancySensor:4,-8,12:2:20"),
        _replace("OccupancySensor:4,8,12:2:20", "OccupancySensor:4,8,12:2:-20"),
        _replace("CarbonDioxideSensor:690,740,640,700:1:600:200", "CarbonDioxideSensor:690,740,640,700:1:600:700"),
        _replace("CarbonDioxideSensor:690,740,640,700:1:600:200", "CarbonDioxideSensor:690,740,640,700:1:-600:200"),
        _replace("TemperatureSensor:22,23", "TemperatureSensor:"),
        _replace("TemperatureSensor:22,23", "TemperatureSensor:22,,23"),
        # numbers
        _replace("102:OFFICE:25.6:1", "102:OFFICE:nan:1"),
        _replace("102:OFFICE:25.6:1", "102:OFFICE:25,6:1"),
        # duplicates
        _replace("NoiseSensor:55,62,69,63:3\nTemperatureSensor:21,22,23,24", "NoiseSensor:55,62,69,63:3\nNoiseSensor:1:1"),
    ],
)
def test_malformed_save_rejected(text):
    with pytest.raises(FileFormatError):
        decode(text)


def test_rejected_save_registers_nothing():
    clock = SimulationClock()
    with pytest.raises(FileFormatError):
        decode(_replace("1:7:7:0", "2:7:7:0"), clock=clock)
    assert clock.items == ()


def test_rejection_chains_underlying_error():
    with pytest.raises(FileFormatError) as excinfo:
        decode(_replace("1:7:7:0", "2:7:7:0"))
    assert excinfo.value.__cause__ is not None


# -----------------------------------------------------------------------------
# Line records
# -----------------------------------------------------------------------------


def test_sensor_line_weight_presence_enforced():
    with pytest.raises(LineFormatError):
        parse_sensor_line("NoiseSensor:50:1", weighted=True)
    with pytest.raises(LineFormatError):
        parse_sensor_line("NoiseSensor:50:1@10", weighted=False)
    record = parse_sensor_line("NoiseSensor:50,60:2@10", weighted=True)
    assert record.readings == [50, 60]
    assert record.update_frequency == 2
    assert record.weight == 10


# -----------------------------------------------------------------------------
# Files
# -----------------------------------------------------------------------------


def test_save_and_load(tmp_path):
    path = tmp_path / "campus.txt"
    save_buildings(path, decode(SAMPLE_SAVE))
    assert path.read_text(encoding="utf-8") == SAMPLE_SAVE

    clock = SimulationClock()
    buildings = load_buildings(path, clock=clock)
    assert [building.name for building in buildings] == [
        "General Purpose South",
        "Forgan Smith Building",
        "Andrew N. Liveris Building",
    ]
    assert clock.items


def test_load_missing_file_raises_os_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_buildings(tmp_path / "missing.txt")


@pytest.mark.parametrize("separator", ["\x0b", "\x0c", "\x1c", "\x1d", "\x1e", "\x85", "\u2028", "\u2029"])
def test_names_with_other_line_breaks_round_trip(separator):
    building = Building(f"North{separator}Wing")
    building.add_floor(Floor(1, 10, 10))
    text = encode([building])

    (decoded,) = decode(text)
    assert decoded.name == f"North{separator}Wing"
    assert decoded == building
    assert encode([decoded]) == text
