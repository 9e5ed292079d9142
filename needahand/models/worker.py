# needahand/models/worker.py
from pydantic import BaseModel, Field, field_validator
from typing import List, Literal, Optional

DEFAULT_RATING = 4.5
DEFAULT_HOURLY_RATE = 50.0

# Store documents may be partial; missing fields are defaulted, never rejected.
_WORKER_DEFAULTS = {
    "name": "Worker",
    "location": "Unknown",
    "specialty": "General",
    "bio": "",
    "rating": DEFAULT_RATING,
    "jobs_completed": 0,
    "available": True,
    "skills": [],
    "hourly_rate": DEFAULT_HOURLY_RATE,
}

class CustomerProfile(BaseModel):
    id: str
    name: str = "Customer"
    role: Literal["Customer"] = "Customer"
    location: str = "Unknown"

    @field_validator("name", "location", mode="before")
    @classmethod
    def default_missing(cls, v, info):
        if v is None or v == "":
            return cls.model_fields[info.field_name].default
        return v

class WorkerProfile(BaseModel):
    id: str
    name: str = _WORKER_DEFAULTS["name"]
    role: Literal["Worker"] = "Worker"
    location: str = _WORKER_DEFAULTS["location"]
    specialty: str = _WORKER_DEFAULTS["specialty"]
    bio: str = _WORKER_DEFAULTS["bio"]
    rating: float = DEFAULT_RATING
    jobs_completed: int = 0
    available: bool = True
    skills: List[str] = Field(default_factory=list)
    hourly_rate: float = DEFAULT_HOURLY_RATE

    @field_validator(
        "name", "location", "specialty", "bio", "rating",
        "jobs_completed", "available", "skills", "hourly_rate",
        mode="before"
    )
    @classmethod
    def default_missing(cls, v, info):
        if v is None:
            default = _WORKER_DEFAULTS[info.field_name]
            return list(default) if isinstance(default, list) else default
        if info.field_name in ("name", "location", "specialty") and v == "":
            return _WORKER_DEFAULTS[info.field_name]
        return v

    @field_validator("rating")
    @classmethod
    def clamp_rating(cls, v):
        return min(5.0, max(0.0, v))

    @field_validator("jobs_completed")
    @classmethod
    def non_negative_jobs(cls, v):
        return max(0, v)

    @field_validator("hourly_rate")
    @classmethod
    def positive_rate(cls, v):
        return v if v > 0 else DEFAULT_HOURLY_RATE

class WorkerProfileUpdate(BaseModel):
    name: Optional[str] = None
    location: Optional[str] = None
    specialty: Optional[str] = None
    bio: Optional[str] = None
    skills: Optional[List[str]] = None
    hourly_rate: Optional[float] = Field(None, gt=0)

class CustomerProfileUpdate(BaseModel):
    name: Optional[str] = None
    location: Optional[str] = None

class WorkerAvailability(BaseModel):
    available: bool

class WorkerEarnings(BaseModel):
    accepted_jobs: int
    week: float
    month: float
