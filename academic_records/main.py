# academic_records/main.py
from typing import List
from fastapi import FastAPI, HTTPException, BackgroundTasks, Depends
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.orm import Session
import logging

from academic_records import config, database, events, repositories, schemas
from academic_records.results import Err, ErrorKind
from academic_records.services import RecordService

# logging
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger("academic-records")

app = FastAPI(title="Academic Records Service")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_STATUS = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.BUSINESS_RULE: 422,
}

@app.on_event("startup")
def startup():
    logger.info("Initializing DB...")
    database.init_db(config.DATABASE_URL)
    logger.info("Startup complete.")

def get_db():
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_service(db: Session = Depends(get_db)) -> RecordService:
    return RecordService(
        courses=repositories.course_store(db),
        students=repositories.student_store(db),
        semesters=repositories.semester_store(db),
    )

def unwrap(result):
    if isinstance(result, Err):
        raise HTTPException(status_code=ERROR_STATUS[result.kind], detail=result.message)
    return result.value

def publish(background_tasks: BackgroundTasks, event: dict):
    if not config.EVENTS_ENABLED:
        return
    background_tasks.add_task(events.safe_publish, config.RABBITMQ_URL, config.EVENTS_ROUTING_KEY, event)

# Root + health endpoints
@app.get("/")
def root():
    return {"service": "Academic Records Service", "status": "running",
            "endpoints": ["/students", "/courses", "/semesters", "/docs", "/openapi.json"]}

@app.get("/health")
def health():
    db = database.SessionLocal()
    try:
        # quick check
        db.execute(text("SELECT 1"))
    except Exception as e:
        logger.exception("Health check failed: %s", e)
        raise HTTPException(status_code=503, detail="Database unreachable")
    finally:
        db.close()
    return {"status": "ok"}

@app.post("/students", response_model=schemas.Student, status_code=201)
def create_student(student_in: schemas.StudentCreate, background_tasks: BackgroundTasks,
                   service: RecordService = Depends(get_service)):
    student = unwrap(service.create_student(student_in.name, student_in.semester))
    publish(background_tasks, events.student_created(student))
    return student

@app.post("/courses", response_model=schemas.Course, status_code=201)
def create_course(course_in: schemas.CourseCreate, background_tasks: BackgroundTasks,
                  service: RecordService = Depends(get_service)):
    course = unwrap(service.create_course(course_in.name_course, course_in.credit_semester))
    publish(background_tasks, events.course_created(course))
    return course

@app.get("/students", response_model=List[schemas.Student])
def get_all_students(service: RecordService = Depends(get_service)):
    return service.get_all_students()

@app.get("/courses", response_model=List[schemas.Course])
def get_all_courses(service: RecordService = Depends(get_service)):
    return service.get_all_courses()

@app.get("/semesters", response_model=List[schemas.Semester])
def get_all_semesters(service: RecordService = Depends(get_service)):
    return service.get_all_semesters()

@app.get("/students/{id_student}", response_model=schemas.Student)
def get_once_student(id_student: str, service: RecordService = Depends(get_service)):
    return unwrap(service.get_once_student(id_student))

@app.post("/students/{id_student}/payment", response_model=schemas.PaymentReceipt)
def payment(id_student: str, payment_in: schemas.PaymentIn, background_tasks: BackgroundTasks,
            service: RecordService = Depends(get_service)):
    receipt = unwrap(service.payment(id_student, payment_in.total))
    publish(background_tasks, events.payment_confirmed(receipt))
    return receipt

@app.post("/students/{id_student}/courses", response_model=schemas.Student)
def add_course_student(id_student: str, enrollment_in: schemas.EnrollmentIn,
                       background_tasks: BackgroundTasks, service: RecordService = Depends(get_service)):
    student = unwrap(service.add_course_student(id_student, enrollment_in.id_course))
    publish(background_tasks, events.student_enrolled(student, enrollment_in.id_course))
    return student
