from pydantic import BaseModel, Field


class TeacherLogin(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class TeacherOut(BaseModel):
    id: int
    username: str

    class Config:
        from_attributes = True


class LoginResponse(BaseModel):
    token: str
    teacher: TeacherOut
    message: str = "Login successful"


class TokenVerify(BaseModel):
    token: str | None = None


class TokenVerifyResponse(BaseModel):
    valid: bool
    teacher: TeacherOut
