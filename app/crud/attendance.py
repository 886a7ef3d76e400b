# app/crud/attendance.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, contains_eager

from app.core.exceptions import ValidationError
from app.db.models.attendance import Attendance, AttendanceStatus
from app.db.models.student import Student

logger = logging.getLogger(__name__)


def get_record(db: Session, student_id: int, date: str):
    return db.query(Attendance).filter(
        Attendance.student_id == student_id,
        Attendance.date == date,
    ).first()


def upsert_record(
    db: Session,
    student_id: int,
    date: str,
    status: AttendanceStatus,
    class_name: str,
    section: str,
) -> Attendance:
    """Insert one record; if the student already has one for ``date``, overwrite its status."""
    record = Attendance(
        student_id=student_id,
        date=date,
        status=status,
        class_name=class_name,
        section=section,
    )
    db.add(record)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        existing = get_record(db, student_id, date)
        if existing is None:
            # not a duplicate, so the student reference itself is bad
            raise ValidationError(f"Unknown student id: {student_id}")
        existing.status = status
        db.commit()
        record = existing
    db.refresh(record)
    return record


def mark_attendance(
    db: Session,
    class_name: str,
    section: str,
    date: str,
    records: dict[int, AttendanceStatus],
) -> int:
    """Write one record per student. Each write commits on its own, so a
    failure part way through leaves the earlier records in place."""
    count = 0
    for student_id, status in records.items():
        upsert_record(db, student_id, date, status, class_name, section)
        count += 1
    logger.info("Attendance marked for %s-%s on %s: %d records", class_name, section, date, count)
    return count


def _report_query(db: Session):
    return (
        db.query(Attendance)
        .join(Attendance.student)
        .options(contains_eager(Attendance.student))
    )


def get_records_by_date(db: Session, date: str):
    return (
        _report_query(db)
        .filter(Attendance.date == date)
        .order_by(Student.class_name, Student.section, Student.roll_number)
        .all()
    )


def get_records_by_month(db: Session, month: str):
    return (
        _report_query(db)
        .filter(Attendance.date.like(f"{month}-%"))
        .order_by(Attendance.date, Student.class_name, Student.section, Student.roll_number)
        .all()
    )


def get_statuses_for_student(db: Session, student_id: int) -> list[AttendanceStatus]:
    rows = db.query(Attendance.status).filter(Attendance.student_id == student_id).all()
    return [r[0] for r in rows]
