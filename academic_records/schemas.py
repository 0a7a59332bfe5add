# academic_records/schemas.py
from typing import Annotated, List
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

UINT64_MAX = 2**64 - 1

Uint64 = Annotated[int, Field(ge=0, le=UINT64_MAX)]

class RecordModel(BaseModel):
    # attributes are snake_case, the wire form is camelCase (idStudent, nameCourse, ...)
    model_config = ConfigDict(from_attributes=True, populate_by_name=True, alias_generator=to_camel)

class Course(RecordModel):
    id_course: str
    name_course: str
    semester_credit_semester: Uint64
    created_at: Uint64
    updated_at: Uint64

class Student(RecordModel):
    id_student: str
    name_student: str
    semester_student: str
    course_student: List[Course] = []
    semester_credit_semester_total: Uint64 = 0
    payment_student: Uint64
    already_pay: bool = False
    created_at: Uint64
    updated_at: Uint64

class Semester(RecordModel):
    id_semester: str
    semester_credit_semester: Uint64
    created_at: Uint64
    updated_at: Uint64

class PaymentReceipt(Student):
    kembalian: Uint64

# request bodies

class StudentCreate(RecordModel):
    name: str = ""
    semester: str = ""

class CourseCreate(RecordModel):
    name_course: str = ""
    credit_semester: Uint64 = 0

class PaymentIn(RecordModel):
    total: Uint64

class EnrollmentIn(RecordModel):
    id_course: str = ""
