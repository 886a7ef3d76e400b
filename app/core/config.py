# app/core/config.py
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    SECRET_KEY: str = "your-super-secret-jwt-key-change-in-prod"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 10080  # 7 days

    DATABASE_URL: str = "sqlite:///./attendance.db"
    SQL_ECHO: bool = False

    # Bootstrap account, created on startup when missing
    DEFAULT_TEACHER_USERNAME: str = "admin"
    DEFAULT_TEACHER_PASSWORD: str = "admin1"

    # Middle part of generated roll numbers: 23 + SW + A + 001
    ROLL_NUMBER_PROGRAM_CODE: str = "SW"

    CORS_ORIGINS: List[str] = [
        "http://localhost",
        "http://127.0.0.1",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
    ]

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

# Created once at import
settings = Settings()
