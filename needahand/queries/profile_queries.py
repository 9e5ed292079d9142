# needahand/queries/profile_queries.py
from typing import Optional, Dict, Any
import asyncpg

async def get_profile(
    conn: asyncpg.Connection,
    user_id: str
) -> Optional[Dict[str, Any]]:
    """Get a user's private profile record"""
    row = await conn.fetchrow(
        """
        SELECT
            user_id AS id, role, name, location, specialty, bio, rating,
            jobs_completed, available, skills, hourly_rate
        FROM user_profile
        WHERE user_id = $1
        """,
        user_id
    )
    return dict(row) if row else None

async def upsert_customer_profile(
    conn: asyncpg.Connection,
    user_id: str,
    name: str,
    location: str
) -> None:
    await conn.execute(
        """
        INSERT INTO user_profile (user_id, role, name, location)
        VALUES ($1, 'Customer', $2, $3)
        ON CONFLICT (user_id) DO UPDATE SET
            role = 'Customer',
            name = EXCLUDED.name,
            location = EXCLUDED.location
        """,
        user_id, name, location
    )

async def upsert_worker_profile(
    conn: asyncpg.Connection,
    worker: Dict[str, Any]
) -> None:
    """Write the private side of a worker profile"""
    await conn.execute(
        """
        INSERT INTO user_profile (
            user_id, role, name, location, specialty, bio, rating,
            jobs_completed, available, skills, hourly_rate
        )
        VALUES ($1, 'Worker', $2, $3, $4, $5, $6, $7, $8, $9, $10)
        ON CONFLICT (user_id) DO UPDATE SET
            role = 'Worker',
            name = EXCLUDED.name,
            location = EXCLUDED.location,
            specialty = EXCLUDED.specialty,
            bio = EXCLUDED.bio,
            skills = EXCLUDED.skills,
            hourly_rate = EXCLUDED.hourly_rate
        """,
        worker["id"], worker["name"], worker["location"], worker["specialty"],
        worker["bio"], worker["rating"], worker["jobs_completed"],
        worker["available"], worker["skills"], worker["hourly_rate"]
    )

async def update_profile_availability(
    conn: asyncpg.Connection,
    user_id: str,
    available: bool
) -> Optional[Dict[str, Any]]:
    row = await conn.fetchrow(
        """
        UPDATE user_profile
        SET available = $1
        WHERE user_id = $2 AND role = 'Worker'
        RETURNING user_id AS id, available
        """,
        available, user_id
    )
    return dict(row) if row else None
