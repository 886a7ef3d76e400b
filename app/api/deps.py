# app/api/deps.py
import logging
from typing import Generator, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from app.core.exceptions import Unauthenticated
from app.core.security import decode_access_token
from app.crud import teacher as crud_teacher
from app.db.models.teacher import Teacher
from app.db.session import SessionLocal

logger = logging.getLogger(__name__)

# auto_error=False so a missing header goes through our 401, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def resolve_teacher(db: Session, token: str) -> Teacher:
    """Verify a token and load the teacher it names."""
    try:
        payload = decode_access_token(token)
    except JWTError:
        logger.debug("Rejected token: invalid or expired")
        raise Unauthenticated("Token is not valid")

    subject = payload.get("sub")
    try:
        teacher_id = int(subject)
    except (TypeError, ValueError):
        raise Unauthenticated("Token is not valid")

    teacher = crud_teacher.get_teacher_by_id(db, teacher_id)
    if not teacher:
        logger.debug("Rejected token: teacher %s no longer exists", teacher_id)
        raise Unauthenticated("Token is not valid - teacher not found")
    return teacher


def get_current_teacher(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> Teacher:
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise Unauthenticated("No token provided, authorization denied")
    return resolve_teacher(db, credentials.credentials)
