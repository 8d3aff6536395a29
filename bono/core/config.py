"""Application configuration management."""

from typing import Literal

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Storage
    storage_backend: Literal["memory", "sql", "redis"] = "sql"
    database_url: str = "sqlite+aiosqlite:///./bono.db"
    redis_url: str = "redis://localhost:6379/0"
    users_key: str = "bonoUsers"
    applications_key: str = "bonoApplications"

    # Seeded administrator
    admin_username: str = "adrian"
    admin_password: str = "admin123"
    admin_name: str = "Administrador"
    admin_email: str = "admin@bono.gob.do"
    admin_cedula: str = "001-0000000-0"
    admin_phone: str = "809-000-0000"

    # Benefit program
    benefit_amount: int = Field(default=5000, gt=0)
    initial_application_note: str = "Solicitud inicial registrada"

    # Sessions
    session_ttl_seconds: int = Field(default=3600 * 8, ge=60)
    cookie_secure: bool = Field(
        default=True,
        description="Set to False for local HTTP development",
    )

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
