import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.api.deps import get_db, resolve_teacher
from app.core.exceptions import Unauthenticated, ValidationError
from app.core.security import create_access_token
from app.crud import teacher as crud_teacher
from app.schemas.teacher import LoginResponse, TeacherLogin, TokenVerify, TokenVerifyResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(form: TeacherLogin, db: Session = Depends(get_db)):
    teacher = crud_teacher.authenticate(db, form.username, form.password)
    if not teacher:
        logger.warning("Failed login for '%s'", form.username)
        raise ValidationError("Invalid credentials")

    token = create_access_token(data={"sub": str(teacher.id), "username": teacher.username})
    logger.info("Teacher '%s' logged in", teacher.username)
    return {"token": token, "teacher": teacher}


@router.post("/verify", response_model=TokenVerifyResponse)
def verify(body: TokenVerify, db: Session = Depends(get_db)):
    """Let the front end check whether a stored token is still usable."""
    if not body.token:
        raise ValidationError("Token is required")
    try:
        teacher = resolve_teacher(db, body.token)
    except Unauthenticated as exc:
        # the client reads "valid" on failure too
        return JSONResponse(status_code=exc.status_code, content={"valid": False, "detail": exc.detail})
    return {"valid": True, "teacher": teacher}
