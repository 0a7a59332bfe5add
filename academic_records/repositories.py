"""Keyed record stores.

A store is an ordered mapping from a string key to a typed record. Records
handed out by a store are detached copies: changing one has no effect until
it is written back with ``insert``.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import inspect
from sqlalchemy.orm import Session

from academic_records import models, schemas

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


class RecordStore(ABC, Generic[R]):
    @abstractmethod
    def insert(self, key: str, record: R) -> None:
        """Store ``record`` under ``key``, replacing any previous record."""

    @abstractmethod
    def get(self, key: str) -> Optional[R]:
        ...

    @abstractmethod
    def values(self) -> List[R]:
        """All records in ascending key order."""


class InMemoryRecordStore(RecordStore[R]):
    """Dict-backed store, iterated in key order."""

    def __init__(self):
        self._records: Dict[str, R] = {}

    def insert(self, key: str, record: R) -> None:
        self._records[key] = record.model_copy(deep=True)

    def get(self, key: str) -> Optional[R]:
        record = self._records.get(key)
        if record is None:
            return None
        return record.model_copy(deep=True)

    def values(self) -> List[R]:
        return [self._records[k].model_copy(deep=True) for k in sorted(self._records)]

    def __len__(self):
        return len(self._records)


class SqlRecordStore(RecordStore[R]):
    """Store backed by one SQLAlchemy table, one row per record."""

    def __init__(self, db: Session, row_model, schema: Type[R]):
        self.db = db
        self.row_model = row_model
        self.schema = schema
        self._key_column = inspect(row_model).primary_key[0]

    def insert(self, key: str, record: R) -> None:
        data = record.model_dump()
        row = self.db.get(self.row_model, key)
        if row is None:
            row = self.row_model(**data)
            self.db.add(row)
        else:
            for field, value in data.items():
                setattr(row, field, value)
        self.db.commit()
        logger.debug("Stored %s key=%s", self.row_model.__tablename__, key)

    def get(self, key: str) -> Optional[R]:
        row = self.db.get(self.row_model, key)
        if row is None:
            return None
        return self.schema.model_validate(row)

    def values(self) -> List[R]:
        rows = self.db.query(self.row_model).order_by(self._key_column).all()
        return [self.schema.model_validate(r) for r in rows]


def course_store(db: Session) -> SqlRecordStore[schemas.Course]:
    return SqlRecordStore(db, models.CourseRow, schemas.Course)

def student_store(db: Session) -> SqlRecordStore[schemas.Student]:
    return SqlRecordStore(db, models.StudentRow, schemas.Student)

def semester_store(db: Session) -> SqlRecordStore[schemas.Semester]:
    return SqlRecordStore(db, models.SemesterRow, schemas.Semester)
