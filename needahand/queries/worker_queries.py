# needahand/queries/worker_queries.py
from typing import Optional, Dict, Any, List
import asyncpg

async def fetch_workers(conn: asyncpg.Connection) -> List[Dict[str, Any]]:
    """Snapshot of the public worker roster"""
    rows = await conn.fetch(
        """
        SELECT
            worker_id AS id,
            name,
            location,
            specialty,
            bio,
            rating,
            jobs_completed,
            available,
            skills,
            hourly_rate
        FROM worker
        """
    )
    return [dict(row) for row in rows]

async def get_worker_by_id(
    conn: asyncpg.Connection,
    worker_id: str
) -> Optional[Dict[str, Any]]:
    """Get a single public worker record"""
    row = await conn.fetchrow(
        """
        SELECT
            worker_id AS id, name, location, specialty, bio, rating,
            jobs_completed, available, skills, hourly_rate
        FROM worker
        WHERE worker_id = $1
        """,
        worker_id
    )
    return dict(row) if row else None

async def upsert_worker(
    conn: asyncpg.Connection,
    worker: Dict[str, Any]
) -> None:
    """Create or merge the public worker record"""
    await conn.execute(
        """
        INSERT INTO worker (
            worker_id, name, location, specialty, bio, rating,
            jobs_completed, available, skills, hourly_rate
        )
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10)
        ON CONFLICT (worker_id) DO UPDATE SET
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

async def update_worker_availability(
    conn: asyncpg.Connection,
    worker_id: str,
    available: bool
) -> Optional[Dict[str, Any]]:
    """Update availability on the public worker record"""
    row = await conn.fetchrow(
        """
        UPDATE worker
        SET available = $1
        WHERE worker_id = $2
        RETURNING worker_id AS id, available
        """,
        available, worker_id
    )
    return dict(row) if row else None

async def notify_roster_changed(conn: asyncpg.Connection, channel: str) -> None:
    """Wake up roster listeners after a worker write"""
    await conn.execute("SELECT pg_notify($1, '')", channel)
