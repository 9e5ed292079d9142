# needahand/routes/profiles.py
from fastapi import APIRouter, Depends, HTTPException
from typing import Union
import asyncpg
import logging

from ..config import settings
from ..database import get_db
from ..models.worker import (
    CustomerProfile,
    CustomerProfileUpdate,
    WorkerProfile,
    WorkerProfileUpdate
)
from ..queries.profile_queries import (
    get_profile,
    upsert_customer_profile,
    upsert_worker_profile
)
from ..queries.worker_queries import notify_roster_changed, upsert_worker
from ..services.profiles import build_worker_profile
from ..utils.auth import get_current_user

profiles_router = APIRouter(prefix="/profiles", tags=["Profiles"])
logger = logging.getLogger(__name__)

def to_profile(record: dict) -> Union[CustomerProfile, WorkerProfile]:
    if record.get("role") == "Worker":
        return WorkerProfile.model_validate(record)
    return CustomerProfile.model_validate(record)

@profiles_router.get("/me", response_model=Union[WorkerProfile, CustomerProfile])
async def get_my_profile(
    current_user: dict = Depends(get_current_user),
    conn: asyncpg.Connection = Depends(get_db)
):
    record = await get_profile(conn, current_user["id"])
    if not record:
        raise HTTPException(status_code=404, detail="Profile not found")
    return to_profile(record)

@profiles_router.put("/me/customer", response_model=CustomerProfile)
async def save_customer_profile(
    update: CustomerProfileUpdate,
    current_user: dict = Depends(get_current_user),
    conn: asyncpg.Connection = Depends(get_db)
):
    user_id = current_user["id"]
    profile = CustomerProfile(
        id=user_id,
        name=update.name or f"Customer {user_id[:6]}",
        location=update.location or "Nearby"
    )
    await upsert_customer_profile(conn, profile.id, profile.name, profile.location)
    return profile

@profiles_router.put("/me/worker", response_model=WorkerProfile)
async def save_worker_profile(
    update: WorkerProfileUpdate,
    current_user: dict = Depends(get_current_user),
    conn: asyncpg.Connection = Depends(get_db)
):
    record = await get_profile(conn, current_user["id"])
    existing = WorkerProfile.model_validate(record) if record and record.get("role") == "Worker" else None
    profile = build_worker_profile(current_user["id"], update, existing)

    document = profile.model_dump()
    try:
        async with conn.transaction():
            await upsert_worker_profile(conn, document)
            await upsert_worker(conn, document)
        await notify_roster_changed(conn, settings.roster_channel)
    except Exception as e:
        logger.error(f"Saving worker profile failed: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Saving worker profile failed: {str(e)}")
    return profile
