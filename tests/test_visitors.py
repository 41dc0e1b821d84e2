import uuid

from dudes_in_space.core.visitors import CoreModule, ModuleVisitor, visit_modules
from dudes_in_space.geom.vectors import Point
from dudes_in_space.modules.base import Module
from dudes_in_space.vessel import Vessel


class _Stub(Module):
    def __init__(self):
        self._id = uuid.uuid4()

    def type_id(self):
        return "Stub"

    def serialize(self):
        return {}

    def id(self):
        return self._id

    def package_id(self):
        return "test"

    def proceed(self, vessel):
        pass

    def capabilities(self):
        return ()

    def recipes(self):
        return []

    def assembly_recipes(self):
        return []

    def extract_person(self, person_id):
        return None

    def insert_person(self, person):
        return False

    def can_insert_person(self):
        return False

    def contains_person(self, person_id):
        return False


class _Area(_Stub, CoreModule):
    def accept_visitor(self, visitor):
        return visitor.visit_personnel_area(self)


class _Asm(_Stub, CoreModule):
    def accept_visitor(self, visitor):
        return visitor.visit_assembler(self)


class _FindArea(ModuleVisitor):
    def visit_personnel_area(self, area):
        return area


class _FindAssembler(ModuleVisitor):
    def visit_assembler(self, assembler):
        return assembler


class _Recorder(ModuleVisitor):
    def __init__(self):
        self.seen = []

    def visit_personnel_area(self, area):
        self.seen.append(area)

    def visit_assembler(self, assembler):
        self.seen.append(assembler)


def test_returns_first_matching_module():
    plain, area1, area2 = _Stub(), _Area(), _Area()
    vessel = Vessel(0, Point.origin(), [plain, area1, area2])
    assert visit_modules(vessel, _FindArea()) is area1


def test_dispatches_by_module_kind():
    area, asm = _Area(), _Asm()
    vessel = Vessel(0, Point.origin(), [area, asm])
    assert visit_modules(vessel, _FindAssembler()) is asm


def test_default_visitor_finds_nothing():
    vessel = Vessel(0, Point.origin(), [_Area(), _Asm()])
    assert visit_modules(vessel, ModuleVisitor()) is None


def test_non_core_modules_are_skipped():
    vessel = Vessel(0, Point.origin(), [_Stub(), _Stub()])
    assert visit_modules(vessel, _FindArea()) is None


def test_visits_every_core_module_in_order():
    area, plain, asm = _Area(), _Stub(), _Asm()
    recorder = _Recorder()
    result = visit_modules(Vessel(0, Point.origin(), [area, plain, asm]), recorder)
    assert result is None
    assert recorder.seen == [area, asm]