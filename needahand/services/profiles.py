# needahand/services/profiles.py
import logging
from typing import Optional

from ..config import settings
from ..database import connect
from ..models.worker import WorkerEarnings, WorkerProfile, WorkerProfileUpdate
from ..queries.profile_queries import update_profile_availability
from ..queries.worker_queries import notify_roster_changed, update_worker_availability
from .catalog import SPECIALTY_SKILLS, coerce_category

logger = logging.getLogger(__name__)

# Flat demo rate until real pricing is recorded on jobs
EARNINGS_PER_ACCEPTED_JOB = 75.0


def build_worker_profile(
    user_id: str,
    update: WorkerProfileUpdate,
    existing: Optional[WorkerProfile] = None
) -> WorkerProfile:
    """Merge a profile update over the stored profile, seeding skills from the specialty."""
    base = existing or WorkerProfile(id=user_id, name=f"Worker {user_id[:6]}", location="Nearby")
    specialty = coerce_category(update.specialty or base.specialty)
    skills = update.skills
    if skills is None:
        skills = base.skills if existing and base.specialty == specialty.value else list(SPECIALTY_SKILLS[specialty])

    return base.model_copy(update={
        "name": update.name or base.name,
        "location": update.location or base.location,
        "specialty": specialty.value,
        "bio": update.bio if update.bio is not None else (base.bio or "Skilled and reliable. Ready to help!"),
        "skills": skills,
        "hourly_rate": update.hourly_rate or base.hourly_rate,
    })


def earnings_summary(accepted_jobs: int) -> WorkerEarnings:
    week = accepted_jobs * EARNINGS_PER_ACCEPTED_JOB
    return WorkerEarnings(accepted_jobs=accepted_jobs, week=week, month=week * 4)


async def set_worker_availability(worker_id: str, available: bool) -> None:
    """Write the availability flag to the private profile and the public roster."""
    try:
        conn = await connect()
    except Exception:
        logger.exception(f"Could not reach the profile store for worker {worker_id}")
        return

    try:
        async with conn.transaction():
            await update_profile_availability(conn, worker_id, available)
            await update_worker_availability(conn, worker_id, available)
        await notify_roster_changed(conn, settings.roster_channel)
        logger.info(f"Worker {worker_id} is now {'available' if available else 'offline'}")
    except Exception:
        logger.exception(f"Failed to update availability for worker {worker_id}")
    finally:
        await conn.close()
