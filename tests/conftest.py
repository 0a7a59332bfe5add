"""Shared fixtures: in-memory stores, a fixed clock and predictable ids."""

import itertools

import pytest

from academic_records.repositories import InMemoryRecordStore
from academic_records.schemas import Semester
from academic_records.services import RecordService

T0 = 1_700_000_000_000_000_000


class FakeClock:
    """Nanosecond clock that advances by one on every read."""

    def __init__(self, start: int = T0):
        self._counter = itertools.count(start)

    def __call__(self) -> int:
        return next(self._counter)


def make_semester(id_semester: str, credits: int) -> Semester:
    return Semester(id_semester=id_semester, semester_credit_semester=credits,
                    created_at=T0, updated_at=T0)


@pytest.fixture
def stores():
    return {
        "courses": InMemoryRecordStore(),
        "students": InMemoryRecordStore(),
        "semesters": InMemoryRecordStore(),
    }


@pytest.fixture
def service(stores):
    ids = itertools.count(1)
    return RecordService(
        courses=stores["courses"],
        students=stores["students"],
        semesters=stores["semesters"],
        clock=FakeClock(),
        id_factory=lambda: f"id-{next(ids):04d}",
    )
