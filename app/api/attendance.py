from datetime import date as date_type
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_teacher
from app.core.exceptions import ValidationError
from app.crud import attendance as crud_attendance
from app.crud import student as crud_student
from app.schemas.attendance import (
    DATE_PATTERN,
    MONTH_PATTERN,
    AttendanceMark,
    AttendanceOut,
    AttendanceReport,
    MarkResult,
    StudentPercentage,
)
from app.services import reports

router = APIRouter(dependencies=[Depends(get_current_teacher)])

Day = Annotated[str, Path(pattern=DATE_PATTERN, description="YYYY-MM-DD")]
Month = Annotated[str, Path(pattern=MONTH_PATTERN, description="YYYY-MM")]


def _check_day(day: str) -> str:
    try:
        date_type.fromisoformat(day)
    except ValueError:
        raise ValidationError(f"Invalid date: {day}")
    return day


def _build_report(period: str, records) -> AttendanceReport:
    summary = reports.summarize(records)
    return AttendanceReport(
        period=period,
        records=[AttendanceOut.model_validate(r) for r in records],
        overall=summary["overall"],
        classes=summary["classes"],
    )


def _csv_response(records, filename: str) -> Response:
    return Response(
        content=reports.to_csv(records),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/mark", response_model=MarkResult)
def mark_attendance(body: AttendanceMark, db: Session = Depends(get_db)):
    count = crud_attendance.mark_attendance(
        db,
        class_name=body.class_name,
        section=body.section,
        date=body.date,
        records=body.records,
    )
    return MarkResult(count=count)


@router.get("/report/date/{day}", response_model=AttendanceReport)
def report_by_date(day: Day, db: Session = Depends(get_db)):
    records = crud_attendance.get_records_by_date(db, _check_day(day))
    return _build_report(day, records)


@router.get("/report/date/{day}/export")
def export_by_date(day: Day, db: Session = Depends(get_db)):
    records = crud_attendance.get_records_by_date(db, _check_day(day))
    return _csv_response(records, f"attendance_report_daily_{day}.csv")


@router.get("/report/month/{month}", response_model=AttendanceReport)
def report_by_month(month: Month, db: Session = Depends(get_db)):
    records = crud_attendance.get_records_by_month(db, month)
    return _build_report(month, records)


@router.get("/report/month/{month}/export")
def export_by_month(month: Month, db: Session = Depends(get_db)):
    records = crud_attendance.get_records_by_month(db, month)
    return _csv_response(records, f"attendance_report_monthly_{month}.csv")


@router.get("/report/student/{student_id}", response_model=StudentPercentage)
def report_for_student(student_id: int, db: Session = Depends(get_db)):
    student = crud_student.get_student(db, student_id)
    summary = reports.student_summary(crud_attendance.get_statuses_for_student(db, student.id))
    return StudentPercentage.model_validate({"studentId": student.id, **summary})
