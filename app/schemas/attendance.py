from datetime import date as date_type
from typing import Annotated, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from app.db.base import MAX_ID
from app.db.models.attendance import AttendanceStatus

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"

StudentKey = Annotated[int, Field(ge=1, le=MAX_ID)]


class AttendanceMark(BaseModel):
    class_name: str = Field(alias="batch", min_length=1)
    section: str = Field(min_length=1)
    date: str = Field(pattern=DATE_PATTERN)
    records: Dict[StudentKey, AttendanceStatus] = Field(alias="attendanceRecords", min_length=1)

    @field_validator("date")
    @classmethod
    def real_calendar_day(cls, value: str) -> str:
        date_type.fromisoformat(value)
        return value

    class Config:
        populate_by_name = True


class MarkResult(BaseModel):
    message: str = "Attendance marked successfully"
    count: int


class ReportStudent(BaseModel):
    id: int
    roll_number: str = Field(alias="rollNumber")
    name: str
    class_name: str = Field(alias="className")
    section: str

    class Config:
        from_attributes = True
        populate_by_name = True


class AttendanceOut(BaseModel):
    id: int
    date: str
    status: AttendanceStatus
    class_name: str = Field(alias="className")
    section: str
    student: Optional[ReportStudent] = Field(default=None, alias="studentId")

    class Config:
        from_attributes = True
        populate_by_name = True


class Tally(BaseModel):
    present: int
    absent: int
    total: int
    percentage: float


class SectionSummary(Tally):
    section: str


class ClassSummary(Tally):
    class_name: str = Field(alias="className")
    sections: List[SectionSummary]

    class Config:
        populate_by_name = True


class AttendanceReport(BaseModel):
    period: str
    records: List[AttendanceOut]
    overall: Tally
    classes: List[ClassSummary]


class StudentPercentage(BaseModel):
    student_id: int = Field(alias="studentId")
    total_days: int = Field(alias="totalDays")
    present_days: int = Field(alias="presentDays")
    absent_days: int = Field(alias="absentDays")
    percentage: float

    class Config:
        populate_by_name = True
