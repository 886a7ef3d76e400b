from sqlalchemy.orm import Session
from app.db.base import MAX_ID
from app.db.models.teacher import Teacher
from app.core.security import get_password_hash, verify_password


def get_teacher_by_username(db: Session, username: str):
    return db.query(Teacher).filter(Teacher.username == username).first()


def get_teacher_by_id(db: Session, teacher_id: int):
    if not 1 <= teacher_id <= MAX_ID:
        return None
    return db.query(Teacher).filter(Teacher.id == teacher_id).first()


def create_teacher(db: Session, username: str, password: str):
    db_teacher = Teacher(
        username=username,
        hashed_password=get_password_hash(password),
    )
    db.add(db_teacher)
    db.commit()
    db.refresh(db_teacher)
    return db_teacher


def authenticate(db: Session, username: str, password: str):
    teacher = get_teacher_by_username(db, username)
    if not teacher or not verify_password(password, teacher.hashed_password):
        return None
    return teacher
