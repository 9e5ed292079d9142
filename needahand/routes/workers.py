# needahand/routes/workers.py
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, status
from typing import List
import asyncpg
import logging

from ..database import get_db
from ..models.job import JobAccepted, JobStatus
from ..models.worker import WorkerAvailability, WorkerEarnings, WorkerProfile
from ..queries.job_queries import count_worker_jobs
from ..services import worker_roster
from ..services.booking import quick_book, submit_job
from ..services.profiles import earnings_summary, set_worker_availability
from ..utils.auth import get_current_user, require_customer, require_worker

workers_router = APIRouter(prefix="/workers", tags=["Workers"])
logger = logging.getLogger(__name__)

@workers_router.get("", response_model=List[WorkerProfile])
async def list_workers(
    available_only: bool = Query(False, description="Only workers currently taking jobs"),
    current_user: dict = Depends(get_current_user)
):
    if available_only:
        return worker_roster.available_workers
    return worker_roster.workers

@workers_router.post(
    "/{worker_id}/quick-book",
    response_model=JobAccepted,
    status_code=status.HTTP_202_ACCEPTED
)
async def quick_book_worker(
    worker_id: str,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(require_customer)
):
    worker = worker_roster.get(worker_id)
    if worker is None:
        raise HTTPException(status_code=404, detail="Worker not found")
    if not worker.available:
        raise HTTPException(status_code=400, detail="Worker is not available")

    request = quick_book(worker, current_user["id"])
    background_tasks.add_task(submit_job, request)
    return JobAccepted(
        worker_id=request.worker_id,
        category=request.category,
        description=request.description
    )

@workers_router.put(
    "/me/availability",
    response_model=WorkerAvailability,
    status_code=status.HTTP_202_ACCEPTED
)
async def update_availability(
    availability: WorkerAvailability,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(require_worker)
):
    background_tasks.add_task(set_worker_availability, current_user["id"], availability.available)
    return availability

@workers_router.get("/me/earnings", response_model=WorkerEarnings)
async def get_earnings(
    current_user: dict = Depends(require_worker),
    conn: asyncpg.Connection = Depends(get_db)
):
    try:
        accepted = await count_worker_jobs(conn, current_user["id"], JobStatus.ACCEPTED.value)
    except Exception as e:
        logger.error(f"Earnings lookup failed: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Earnings lookup failed: {str(e)}")
    return earnings_summary(accepted or 0)
