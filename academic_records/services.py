"""Record handlers: create, list, fetch, pay and enroll.

Each handler is a single request/response unit. Handlers never call each
other and never raise for domain failures; they return ``Ok`` or ``Err``.
"""
import logging
import time
import uuid
from typing import Callable, List

from academic_records import config
from academic_records.repositories import RecordStore
from academic_records.results import Err, ErrorKind, Ok, Result
from academic_records.schemas import Course, PaymentReceipt, Semester, Student

logger = logging.getLogger(__name__)

CREATE_STUDENT_ERROR = "Error Creating Student"
CREATE_COURSE_ERROR = "Error Creating Course"
PAYMENT_ERROR = "Error Payment"
ENROLL_ERROR = "Error Exchange"

ENROLL_RULES_MESSAGE = "Error ID User/ ID Course/ Max Semester Credit Semester = 25 / Already Pay"


def _new_id() -> str:
    return str(uuid.uuid4())


class RecordService:
    def __init__(
        self,
        courses: RecordStore[Course],
        students: RecordStore[Student],
        semesters: RecordStore[Semester],
        clock: Callable[[], int] = time.time_ns,
        id_factory: Callable[[], str] = _new_id,
    ):
        self.courses = courses
        self.students = students
        self.semesters = semesters
        self.clock = clock
        self.id_factory = id_factory

    def create_student(self, name: str, semester: str) -> Result[Student]:
        if not name or not semester:
            logger.warning("Rejected student: name=%r semester=%r", name, semester)
            return Err.wrap(ErrorKind.VALIDATION, CREATE_STUDENT_ERROR, "Name/Semester must be added")

        now = self.clock()
        student = Student(
            id_student=self.id_factory(),
            name_student=name,
            semester_student=semester,
            course_student=[],
            semester_credit_semester_total=0,
            payment_student=config.INITIAL_TUITION,
            already_pay=False,
            created_at=now,
            updated_at=now,
        )
        self.students.insert(student.id_student, student)
        logger.info("Created student id=%s semester=%s", student.id_student, semester)
        return Ok(student)

    def create_course(self, name_course: str, credit_semester: int) -> Result[Course]:
        if not name_course:
            logger.warning("Rejected course with empty name")
            return Err.wrap(ErrorKind.VALIDATION, CREATE_COURSE_ERROR, "Name must be added")

        now = self.clock()
        course = Course(
            id_course=self.id_factory(),
            name_course=name_course,
            semester_credit_semester=credit_semester,
            created_at=now,
            updated_at=now,
        )
        self.courses.insert(course.id_course, course)
        logger.info("Created course id=%s credits=%s", course.id_course, credit_semester)
        return Ok(course)

    def get_all_students(self) -> List[Student]:
        return self.students.values()

    def get_all_courses(self) -> List[Course]:
        return self.courses.values()

    def get_all_semesters(self) -> List[Semester]:
        return self.semesters.values()

    def get_once_student(self, id_student: str) -> Result[Student]:
        student = self.students.get(id_student)
        if student is None:
            return Err(ErrorKind.NOT_FOUND, f"The Student with id={id_student} not found")
        return Ok(student)

    def payment(self, id_student: str, total: int) -> Result[PaymentReceipt]:
        """Settle a student's tuition.

        ``kembalian`` is computed after the owed amount has been zeroed, so it
        always equals ``total``.
        """
        student = self.students.get(id_student)
        if student is None:
            return Err.wrap(ErrorKind.NOT_FOUND, PAYMENT_ERROR, f"Student with id={id_student} not found")
        if total < student.payment_student:
            logger.warning("Payment too low for student=%s: total=%s owed=%s",
                           id_student, total, student.payment_student)
            return Err.wrap(ErrorKind.BUSINESS_RULE, PAYMENT_ERROR, "Please Check Your Money")

        student.payment_student = 0
        student.already_pay = True
        self.students.insert(student.id_student, student)
        logger.info("Payment confirmed for student=%s total=%s", id_student, total)
        return Ok(PaymentReceipt(**student.model_dump(), kembalian=total - student.payment_student))

    def add_course_student(self, id_user: str, id_course: str) -> Result[Student]:
        """Enroll a student in a course.

        The course credits are added to the running total before the rules are
        checked. On rejection the student is not written back, so the store
        keeps the previous total.
        """
        student = self.students.get(id_user)
        if student is None:
            return Err.wrap(ErrorKind.NOT_FOUND, ENROLL_ERROR, f"Student with id={id_user} not found")
        course = self.courses.get(id_course)
        if course is None:
            return Err.wrap(ErrorKind.NOT_FOUND, ENROLL_ERROR, f"Course with id={id_course} not found")
        semester = self.semesters.get(student.semester_student)
        if semester is None:
            logger.warning("Semester %s of student=%s does not exist", student.semester_student, id_user)
            return Err.wrap(ErrorKind.NOT_FOUND, ENROLL_ERROR,
                            f"Semester with id={student.semester_student} not found")

        student.semester_credit_semester_total += course.semester_credit_semester

        if (
            not id_user
            or not id_course
            or student.semester_credit_semester_total > config.MAX_SEMESTER_CREDIT
            or student.already_pay
        ):
            logger.warning("Rejected enrollment student=%s course=%s total=%s already_pay=%s",
                           id_user, id_course, student.semester_credit_semester_total, student.already_pay)
            return Err.wrap(ErrorKind.BUSINESS_RULE, ENROLL_ERROR, ENROLL_RULES_MESSAGE)

        if semester.semester_credit_semester < student.semester_credit_semester_total:
            student.payment_student += config.OVERLOAD_PENALTY

        student.course_student = [*student.course_student, course]
        self.students.insert(id_user, student)
        logger.info("Enrolled student=%s in course=%s total=%s",
                    id_user, id_course, student.semester_credit_semester_total)
        return Ok(student)
