import json
import uuid

import pytest

from dudes_in_space.dyn_serde import DynDeserializeSeed, DynDeserializeSeedVault, UnknownTypeError
from dudes_in_space.geom.vectors import Point
from dudes_in_space.modules.base import Module, ModuleCapability
from dudes_in_space.person import (
    MOVING_TO_CRAFTING_MODULE,
    CraftingVesselsObjective,
    CraftingVesselsStage,
    Gender,
    Person,
)
from dudes_in_space.vessel import MoveToModule, Vessel, VesselCreateInfo


class _Room(Module):
    def __init__(self, people=(), capacity=1, caps=(), room_id=None):
        self.room_id = room_id or uuid.uuid4()
        self.people = list(people)
        self.capacity = capacity
        self.caps = tuple(caps)
        self.seen = None

    def type_id(self):
        return "Room"

    def serialize(self):
        return {
            "id": str(self.room_id),
            "people": [p.to_dict() for p in self.people],
            "capacity": self.capacity,
            "caps": [c.value for c in self.caps],
        }

    def id(self):
        return self.room_id

    def package_id(self):
        return "test"

    def proceed(self, vessel):
        self.seen = vessel.modules_with_cap(ModuleCapability.Cargo)
        for person in self.people:
            person.proceed(vessel)

    def capabilities(self):
        return self.caps

    def recipes(self):
        return []

    def assembly_recipes(self):
        return []

    def extract_person(self, person_id):
        for person in self.people:
            if person.id == person_id:
                self.people.remove(person)
                return person
        return None

    def insert_person(self, person):
        if not self.can_insert_person():
            return False
        self.people.append(person)
        return True

    def can_insert_person(self):
        return len(self.people) < self.capacity

    def contains_person(self, person_id):
        return any(p.id == person_id for p in self.people)


class _RoomSeed(DynDeserializeSeed):
    def type_id(self):
        return "Room"

    def deserialize(self, payload):
        return _Room(
            people=[Person.from_dict(p) for p in payload["people"]],
            capacity=payload["capacity"],
            caps=[ModuleCapability(c) for c in payload["caps"]],
            room_id=uuid.UUID(payload["id"]),
        )


def _vault():
    return DynDeserializeSeedVault().register(_RoomSeed())


def _mover(dst):
    return Person(
        id=uuid.uuid4(),
        name="Kane",
        age=40,
        gender=Gender.CisMale,
        state=CraftingVesselsObjective(CraftingVesselsStage(MOVING_TO_CRAFTING_MODULE, dst)),
    )


def test_from_create_info():
    room = _Room()
    vessel = Vessel.from_create_info(3, VesselCreateInfo(Point(1.5, -2.0), [room]))
    assert vessel.id == 3
    assert vessel.pos == Point(1.5, -2.0)
    assert vessel.modules() == (room,)


def test_add_module_appends():
    first, second = _Room(), _Room()
    vessel = Vessel(0, Point.origin(), [first])
    vessel.add_module(second)
    assert vessel.modules() == (first, second)


def test_id_out_of_range():
    with pytest.raises(ValueError):
        Vessel(-1, Point.origin())


def test_person_moves_between_modules():
    room_b = _Room(capacity=1)
    person = _mover(room_b.id())
    room_a = _Room(people=[person], capacity=2)
    vessel = Vessel(0, Point.origin(), [room_a, room_b])
    vessel.proceed()
    assert room_a.people == []
    assert room_b.people == [person]


def test_move_into_full_module_is_skipped():
    room_b = _Room(capacity=0)
    person = _mover(room_b.id())
    room_a = _Room(people=[person])
    Vessel(0, Point.origin(), [room_a, room_b]).proceed()
    assert room_a.people == [person]
    assert room_b.people == []


def test_move_into_same_module_is_skipped():
    room_a = _Room(capacity=5)
    person = _mover(room_a.id())
    room_a.people.append(person)
    Vessel(0, Point.origin(), [room_a]).proceed()
    assert room_a.people == [person]


def test_move_to_unknown_module_raises():
    person = _mover(uuid.UUID(int=99))
    vessel = Vessel(0, Point.origin(), [_Room(people=[person])])
    with pytest.raises(LookupError):
        vessel.proceed()


def test_move_request_is_recorded_and_applied_once():
    room_b = _Room(capacity=3)
    room_a = _Room(capacity=3)
    person = Person(id=uuid.uuid4(), name="Noel", age=20, gender=Gender.CisMale)
    room_a.people.append(person)
    vessel = Vessel(0, Point.origin(), [room_a, room_b])
    vessel.move_to_module(person, room_b.id())
    assert vessel._requests == [MoveToModule(person.id, room_b.id())]
    vessel.proceed()
    assert room_b.people == [person]
    assert vessel._requests == []


def test_modules_with_cap_excludes_proceeding_module():
    room_a = _Room(caps=[ModuleCapability.Cargo])
    room_b = _Room(caps=[ModuleCapability.Cargo])
    room_c = _Room(caps=[ModuleCapability.Radar])
    vessel = Vessel(0, Point.origin(), [room_a, room_b, room_c])
    vessel.proceed()
    assert room_a.seen == [room_b]
    assert room_b.seen == [room_a]
    assert room_c.seen == [room_a, room_b]
    assert vessel.modules_with_cap(ModuleCapability.Cargo) == [room_a, room_b]


def test_to_dict_format():
    vessel = Vessel(3, Point(1.5, -2.0), [_Room()])
    data = vessel.to_dict()
    assert data["id"] == 3
    assert data["pos"] == {"x": 1.5, "y": -2.0}
    assert [m["tp"] for m in data["modules"]] == ["Room"]


def test_round_trip_through_json():
    person = Person(id=uuid.uuid4(), name="Olivia", age=33, gender=Gender.CisFemale)
    vessel = Vessel(
        7,
        Point(4.0, 5.0),
        [_Room(people=[person], caps=[ModuleCapability.Cargo]), _Room(capacity=0)],
    )
    data = json.loads(json.dumps(vessel.to_dict()))
    restored = Vessel.from_dict(data, _vault())
    assert restored.to_dict() == vessel.to_dict()
    assert restored.modules()[0].people == [person]


def test_from_dict_rejects_unknown_field():
    data = Vessel(1, Point.origin()).to_dict()
    data["extra"] = 1
    with pytest.raises(ValueError):
        Vessel.from_dict(data, _vault())


def test_from_dict_rejects_missing_field():
    data = Vessel(1, Point.origin()).to_dict()
    del data["modules"]
    with pytest.raises(ValueError):
        Vessel.from_dict(data, _vault())


def test_from_dict_rejects_unknown_module_type():
    data = Vessel(1, Point.origin(), [_Room()]).to_dict()
    with pytest.raises(UnknownTypeError):
        Vessel.from_dict(data, DynDeserializeSeedVault())