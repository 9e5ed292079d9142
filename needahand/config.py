# needahand/config.py
from pydantic import Field
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # Database
    database_username: str = "postgres"
    database_password: str = "postgres"
    database_hostname: str = "localhost"
    database_port: str = "5432"
    database_name: str = "needahand"

    # Auth (tokens are issued elsewhere, we only decode them)
    secret_key: str
    algorithm: str = "HS256"

    # Worker roster feed
    roster_channel: str = "workers_changed"
    roster_listen: bool = True

    # Matching
    max_recommendations: int = Field(3, ge=1, le=3)

    # Intake sessions are dropped after this long without a request
    intake_idle_minutes: int = 30

    # Logging
    log_level: str = "INFO"

    # CORS
    allowed_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
