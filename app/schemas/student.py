from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


def _strip_required(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


class StudentCreate(BaseModel):
    name: str
    class_name: str = Field(alias="className")
    section: str

    @field_validator("name", "class_name", "section")
    @classmethod
    def strip_required(cls, value: str) -> str:
        return _strip_required(value)

    class Config:
        populate_by_name = True


class StudentUpdate(BaseModel):
    # roll number is generated and cannot be changed
    name: Optional[str] = None
    class_name: Optional[str] = Field(default=None, alias="className")
    section: Optional[str] = None

    @field_validator("name", "class_name", "section")
    @classmethod
    def strip_if_given(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else _strip_required(value)

    class Config:
        populate_by_name = True


class StudentOut(BaseModel):
    id: int
    roll_number: str = Field(alias="rollNumber")
    name: str
    class_name: str = Field(alias="className")
    section: str
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class StudentMessage(BaseModel):
    message: str
    student: StudentOut


class StudentGroup(BaseModel):
    class_name: str = Field(alias="className")
    section: str
    students: List[StudentOut]

    class Config:
        populate_by_name = True


class RollNumberPreview(BaseModel):
    roll_number: str = Field(alias="rollNumber")

    class Config:
        populate_by_name = True
