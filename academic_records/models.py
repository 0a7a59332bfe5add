from sqlalchemy import Column, String, Boolean, JSON
from sqlalchemy.types import TypeDecorator
from academic_records.database import Base

class Uint64(TypeDecorator):
    """Unsigned 64-bit integer kept as decimal text; BIGINT is signed and stops at 2**63-1."""
    impl = String(20)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(int(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return int(value)

class CourseRow(Base):
    __tablename__ = "courses"
    id_course = Column(String(64), primary_key=True)
    name_course = Column(String(255), nullable=False)
    semester_credit_semester = Column(Uint64, nullable=False, default=0)
    created_at = Column(Uint64, nullable=False)
    updated_at = Column(Uint64, nullable=False)

class StudentRow(Base):
    __tablename__ = "students"
    id_student = Column(String(64), primary_key=True)
    name_student = Column(String(255), nullable=False)
    semester_student = Column(String(64), nullable=False)
    # denormalized course snapshots taken at enrollment time
    course_student = Column(JSON, nullable=False, default=list)
    semester_credit_semester_total = Column(Uint64, nullable=False, default=0)
    payment_student = Column(Uint64, nullable=False)
    already_pay = Column(Boolean, nullable=False, default=False)
    created_at = Column(Uint64, nullable=False)
    updated_at = Column(Uint64, nullable=False)

class SemesterRow(Base):
    __tablename__ = "semesters"
    id_semester = Column(String(64), primary_key=True)
    semester_credit_semester = Column(Uint64, nullable=False)
    created_at = Column(Uint64, nullable=False)
    updated_at = Column(Uint64, nullable=False)
