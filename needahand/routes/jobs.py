# needahand/routes/jobs.py
from fastapi import APIRouter, Depends, HTTPException
from typing import List, Optional
import asyncpg
import logging

from ..database import get_db
from ..models.job import JOB_TRANSITIONS, JobOut, JobStatus, can_transition
from ..queries.job_queries import (
    create_notification,
    get_customer_jobs,
    get_job_by_id,
    get_worker_jobs,
    transition_job
)
from ..utils.auth import require_customer, require_worker

jobs_router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)

@jobs_router.get("", response_model=List[JobOut])
async def get_my_jobs(
    current_user: dict = Depends(require_customer),
    conn: asyncpg.Connection = Depends(get_db)
):
    return await get_customer_jobs(conn, current_user["id"])

@jobs_router.get("/assigned", response_model=List[JobOut])
async def get_assigned_jobs(
    status: Optional[JobStatus] = None,
    current_user: dict = Depends(require_worker),
    conn: asyncpg.Connection = Depends(get_db)
):
    return await get_worker_jobs(conn, current_user["id"], status.value if status else None)

async def move_job(
    conn: asyncpg.Connection,
    job_id: str,
    target: JobStatus,
    current_user: dict,
    owner_field: str,
    notify_field: str
) -> dict:
    job = await get_job_by_id(conn, job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    if str(job[owner_field]) != str(current_user["id"]):
        raise HTTPException(status_code=403, detail="Not your job")

    expected = JOB_TRANSITIONS[target]
    if not can_transition(JobStatus(job["status"]), target):
        raise HTTPException(
            status_code=400,
            detail=f"Job must be in '{expected.value}' status to become '{target.value}'"
        )

    updated = await transition_job(conn, job_id, expected.value, target.value)
    if not updated:
        # someone else moved it first
        raise HTTPException(status_code=400, detail="Job status changed, please refresh")

    await create_notification(
        conn,
        job[notify_field],
        f"Job status updated to {target.value}"
    )
    logger.info(f"Job {job_id} moved {expected.value} -> {target.value}")
    return updated

@jobs_router.put("/{job_id}/accept", response_model=JobOut)
async def accept_job(
    job_id: str,
    current_user: dict = Depends(require_worker),
    conn: asyncpg.Connection = Depends(get_db)
):
    return await move_job(conn, job_id, JobStatus.ACCEPTED, current_user, "worker_id", "customer_id")

@jobs_router.put("/{job_id}/complete", response_model=JobOut)
async def complete_job(
    job_id: str,
    current_user: dict = Depends(require_worker),
    conn: asyncpg.Connection = Depends(get_db)
):
    return await move_job(conn, job_id, JobStatus.COMPLETED, current_user, "worker_id", "customer_id")

@jobs_router.put("/{job_id}/cancel", response_model=JobOut)
async def cancel_job(
    job_id: str,
    current_user: dict = Depends(require_customer),
    conn: asyncpg.Connection = Depends(get_db)
):
    return await move_job(conn, job_id, JobStatus.CANCELED, current_user, "customer_id", "worker_id")
