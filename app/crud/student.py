# app/crud/student.py
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import Conflict, NotFound
from app.db.base import MAX_ID
from app.db.models.student import Student
from app.services.roll_number import next_roll_number

logger = logging.getLogger(__name__)


def get_student(db: Session, student_id: int) -> Student:
    if not 1 <= student_id <= MAX_ID:
        raise NotFound("Student not found")
    student = db.query(Student).filter(Student.id == student_id).first()
    if not student:
        raise NotFound("Student not found")
    return student


def get_student_by_roll_number(db: Session, roll_number: str):
    return db.query(Student).filter(Student.roll_number == roll_number).first()


def get_all_students(db: Session):
    return (
        db.query(Student)
        .order_by(Student.class_name, Student.section, Student.roll_number)
        .all()
    )


def get_students_by_class_section(db: Session, class_name: str, section: str):
    return (
        db.query(Student)
        .filter(Student.class_name == class_name, Student.section == section)
        .order_by(Student.roll_number)
        .all()
    )


def get_last_roll_number(db: Session, class_name: str, section: str) -> Optional[str]:
    row = (
        db.query(Student.roll_number)
        .filter(Student.class_name == class_name, Student.section == section)
        .order_by(Student.roll_number.desc())
        .first()
    )
    return row[0] if row else None


def get_batches(db: Session) -> list[str]:
    rows = db.query(Student.class_name).distinct().all()
    return sorted(r[0] for r in rows)


def get_sections(db: Session, class_name: str) -> list[str]:
    rows = db.query(Student.section).filter(Student.class_name == class_name).distinct().all()
    return sorted(r[0] for r in rows)


def generate_roll_number(db: Session, class_name: str, section: str) -> str:
    return next_roll_number(class_name, section, get_last_roll_number(db, class_name, section))


def create_student(db: Session, name: str, class_name: str, section: str) -> Student:
    roll_number = generate_roll_number(db, class_name, section)

    if get_student_by_roll_number(db, roll_number):
        raise Conflict("Student with this roll number already exists")

    student = Student(
        roll_number=roll_number,
        name=name,
        class_name=class_name,
        section=section,
    )
    db.add(student)
    try:
        db.commit()
    except IntegrityError:
        # another request took the same number between the scan and the insert
        db.rollback()
        raise Conflict("Duplicate roll number found")
    db.refresh(student)
    logger.info("Student %s (%s) added to %s-%s", student.roll_number, student.name, class_name, section)
    return student


def update_student(db: Session, student_id: int, changes: dict) -> Student:
    """Apply name/class_name/section changes. The roll number never changes."""
    student = get_student(db, student_id)
    for field in ("name", "class_name", "section"):
        if changes.get(field) is not None:
            setattr(student, field, changes[field])
    db.commit()
    db.refresh(student)
    logger.info("Student %s updated", student.roll_number)
    return student


def delete_student(db: Session, student_id: int) -> None:
    student = get_student(db, student_id)
    roll_number = student.roll_number
    db.delete(student)
    db.commit()
    logger.info("Student %s deleted", roll_number)
