# needahand/models/job.py
from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Dict, Optional
from enum import Enum

from .category import CategoryId

class JobStatus(str, Enum):
    PENDING = "Pending"
    ACCEPTED = "Accepted"
    COMPLETED = "Completed"
    CANCELED = "Canceled"

# The only moves a job may make; every other transition is rejected.
JOB_TRANSITIONS: Dict[JobStatus, JobStatus] = {
    JobStatus.ACCEPTED: JobStatus.PENDING,
    JobStatus.COMPLETED: JobStatus.ACCEPTED,
    JobStatus.CANCELED: JobStatus.PENDING,
}

def can_transition(current: JobStatus, target: JobStatus) -> bool:
    return JOB_TRANSITIONS.get(target) == current

class JobCreate(BaseModel):
    """A request to create a job; the store assigns id and timestamps."""
    customer_id: str
    worker_id: str
    category: CategoryId
    description: str
    status: JobStatus = JobStatus.PENDING

    @field_validator("status")
    @classmethod
    def always_pending(cls, v):
        if v != JobStatus.PENDING:
            raise ValueError("New jobs must start as Pending")
        return v

class JobOut(BaseModel):
    id: str
    customer_id: str
    worker_id: str
    category: CategoryId
    description: str
    status: JobStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class JobAccepted(BaseModel):
    message: str = Field(default="Booking request sent")
    worker_id: str
    category: CategoryId
    description: str
