"""Sample buildings for testing and demos."""

from core.sensors import CarbonDioxideSensor, OccupancySensor, TemperatureSensor
from core.zones import Building, Floor, Room, RoomType
from persistence.codec import decode
from simulation.clock import SimulationClock

# Three campus buildings in canonical save form: encoding the decoded
# buildings gives this text back unchanged.
SAMPLE_SAVE = "\n".join(
    [
        "General Purpose South",
        "5",
        "1:10:10:4:101,102",
        "101:STUDY:20:2:RuleBased",
        "NoiseSensor:55,62,69,63:3",
        "TemperatureSensor:21,22,23,24",
        "102:OFFICE:25.6:1",
        "CarbonDioxideSensor:690,740,640,700:1:600:200",
        "103:STUDY:10:0",
        "104:LABORATORY:20:1",
        "OccupancySensor:4,8,12:2:20",
        "2:10:10:1",
        "201:STUDY:30:2:RuleBased",
        "NoiseSensor:55,62,69,63:3",
        "TemperatureSensor:25,26,27",
        "3:10:8:1",
        "301:OFFICE:40:0",
        "4:8:8:0",
        "5:8:8:1",
        "501:LABORATORY:30:2:WeightingBased",
        "OccupancySensor:5,10,15:1:30@25",
        "TemperatureSensor:20,25,70@75",
        "Forgan Smith Building",
        "1",
        "1:20:10:2",
        "103:STUDY:15:1",
        "TemperatureSensor:22,23",
        "107:LABORATORY:40:1",
        "CarbonDioxideSensor:745,1320,2782,3216,5043,3528,1970:3:700:300",
        "Andrew N. Liveris Building",
        "1",
        "1:7:7:0",
    ]
)


def load_sample_buildings(clock: SimulationClock | None = None) -> list[Building]:
    """Decode ``SAMPLE_SAVE`` into fresh buildings."""
    return decode(SAMPLE_SAVE, clock=clock)


def create_sample_building() -> Building:
    """A three-storey study centre with study rooms on every floor.

    Floor 2 holds the most comfortable open study room (201); floor 3 only
    ties with it.
    """
    building = Building("Study Centre")
    for floor_number in (1, 2, 3):
        building.add_floor(Floor(floor_number, 10, 10))

    _add_room(building, 1, Room(101, RoomType.STUDY, 20), TemperatureSensor([22]), OccupancySensor([10], 1, 20))
    _add_room(building, 1, Room(102, RoomType.STUDY, 20), TemperatureSensor([18]))
    _add_room(building, 1, Room(103, RoomType.OFFICE, 20), TemperatureSensor([23]))
    _add_room(building, 2, Room(201, RoomType.STUDY, 20), TemperatureSensor([23]), CarbonDioxideSensor([600], 1, 600, 200))
    _add_room(building, 2, Room(202, RoomType.STUDY, 20))
    _add_room(building, 3, Room(301, RoomType.STUDY, 20), TemperatureSensor([24]), OccupancySensor([0], 1, 10))
    return building


def _add_room(building: Building, floor_number: int, room: Room, *sensors) -> None:
    for sensor in sensors:
        room.add_sensor(sensor)
    building.get_floor_by_number(floor_number).add_room(room)
