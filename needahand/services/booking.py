# needahand/services/booking.py
import logging
from typing import Dict, Union

from ..database import connect
from ..models.category import CategoryId
from ..models.job import JobCreate
from ..models.worker import WorkerProfile
from ..queries.job_queries import create_job, create_notification
from .catalog import coerce_category

logger = logging.getLogger(__name__)

DESCRIPTION_DELIMITER = " | "


def _render(value: Union[str, bool]) -> str:
    # yes/no answers are stored as true/false
    if isinstance(value, bool):
        return str(value).lower()
    return value


def build_description(problem: str, answers: Dict[str, Union[str, bool]]) -> str:
    """Problem text followed by every `key: value` answer, in answer order."""
    parts = [problem] + [f"{key}: {_render(value)}" for key, value in answers.items()]
    return DESCRIPTION_DELIMITER.join(parts)


def book(
    worker: WorkerProfile,
    category: Union[str, CategoryId],
    problem: str,
    answers: Dict[str, Union[str, bool]],
    customer_id: str
) -> JobCreate:
    return JobCreate(
        customer_id=customer_id,
        worker_id=worker.id,
        category=CategoryId(category),
        description=build_description(problem, answers)
    )


def quick_book(worker: WorkerProfile, customer_id: str) -> JobCreate:
    """Booking straight from a worker listing, without the intake wizard."""
    return JobCreate(
        customer_id=customer_id,
        worker_id=worker.id,
        category=coerce_category(worker.specialty),
        description=f"Quick booking for {worker.specialty}"
    )


async def submit_job(request: JobCreate) -> None:
    """
    Hand a job request to the store.

    Runs after the response has been sent, so a failed write can only be
    logged; the customer sees the outcome through their job list.
    """
    try:
        conn = await connect()
    except Exception:
        logger.exception(f"Could not reach the job store for worker {request.worker_id}")
        return

    try:
        async with conn.transaction():
            job_id = await create_job(
                conn,
                request.customer_id,
                request.worker_id,
                request.category.value,
                request.description
            )
            await create_notification(
                conn,
                request.worker_id,
                f"New {request.category.value} job request"
            )
        logger.info(f"Created job {job_id} for worker {request.worker_id}")
    except Exception:
        logger.exception(f"Failed to create job for worker {request.worker_id}")
    finally:
        await conn.close()
