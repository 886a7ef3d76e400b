# app/db/init_db.py
import logging

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from app.core.config import settings
from app.crud import teacher as crud_teacher
from app.db import Base

logger = logging.getLogger(__name__)


def create_tables(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)


def seed_default_teacher(db: Session) -> bool:
    """Create the bootstrap teacher account if it does not exist yet.

    Safe to run on every start. Returns True when an account was created.
    """
    username = settings.DEFAULT_TEACHER_USERNAME
    if crud_teacher.get_teacher_by_username(db, username):
        return False
    crud_teacher.create_teacher(db, username, settings.DEFAULT_TEACHER_PASSWORD)
    logger.info("Default teacher account '%s' created", username)
    return True


def init_db(engine: Engine, session_factory) -> None:
    create_tables(engine)
    db = session_factory()
    try:
        seed_default_teacher(db)
    finally:
        db.close()
