import pika, json
import logging

from academic_records import config

logger = logging.getLogger(__name__)

def publish_event(rabbitmq_url: str, routing_key: str, event: dict):
    params = pika.URLParameters(rabbitmq_url)
    connection = pika.BlockingConnection(params)
    try:
        channel = connection.channel()
        channel.exchange_declare(exchange=config.EVENTS_EXCHANGE, exchange_type="topic", durable=True)
        body = json.dumps(event)
        channel.basic_publish(exchange=config.EVENTS_EXCHANGE, routing_key=routing_key, body=body)
    finally:
        connection.close()

def safe_publish(rabbitmq_url: str, routing_key: str, event: dict):
    """Background-task entry point: a broker outage must not fail the request."""
    try:
        publish_event(rabbitmq_url, routing_key, event)
    except Exception:
        logger.exception("Failed to publish %s event", event.get("type"))

def build_event(etype: str, **payload) -> dict:
    return {"type": etype, "payload": payload}

def student_created(student) -> dict:
    return build_event("StudentCreated", student_id=student.id_student,
                       semester=student.semester_student,
                       payment_student=student.payment_student)

def course_created(course) -> dict:
    return build_event("CourseCreated", course_id=course.id_course,
                       credits=course.semester_credit_semester)

def payment_confirmed(receipt) -> dict:
    return build_event("PaymentConfirmed", student_id=receipt.id_student,
                       kembalian=receipt.kembalian)

def student_enrolled(student, course_id: str) -> dict:
    return build_event("StudentEnrolled", student_id=student.id_student,
                       course_id=course_id,
                       credit_total=student.semester_credit_semester_total,
                       payment_student=student.payment_student)
