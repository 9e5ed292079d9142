# needahand/queries/job_queries.py
from typing import Optional, Dict, Any, List
import asyncpg

_JOB_COLUMNS = """
    job_id::text AS id, customer_id, worker_id, category,
    description, status, created_at, updated_at
"""

async def create_job(
    conn: asyncpg.Connection,
    customer_id: str,
    worker_id: str,
    category: str,
    description: str
) -> str:
    """Create a new Pending job; id and timestamps come from the database"""
    return await conn.fetchval(
        """
        INSERT INTO job (
            customer_id, worker_id, category, description,
            status, created_at, updated_at
        )
        VALUES ($1, $2, $3, $4, 'Pending', NOW(), NOW())
        RETURNING job_id::text
        """,
        customer_id, worker_id, category, description
    )

async def get_job_by_id(
    conn: asyncpg.Connection,
    job_id: str
) -> Optional[Dict[str, Any]]:
    row = await conn.fetchrow(
        f"SELECT {_JOB_COLUMNS} FROM job WHERE job_id::text = $1",
        job_id
    )
    return dict(row) if row else None

async def get_customer_jobs(
    conn: asyncpg.Connection,
    customer_id: str
) -> List[Dict[str, Any]]:
    """Jobs a customer has requested, newest first"""
    rows = await conn.fetch(
        f"""
        SELECT {_JOB_COLUMNS}
        FROM job
        WHERE customer_id = $1
        ORDER BY created_at DESC NULLS LAST
        """,
        customer_id
    )
    return [dict(row) for row in rows]

async def get_worker_jobs(
    conn: asyncpg.Connection,
    worker_id: str,
    status: Optional[str] = None
) -> List[Dict[str, Any]]:
    """Jobs assigned to a worker with optional status filter"""
    query = f"""
        SELECT {_JOB_COLUMNS}
        FROM job
        WHERE worker_id = $1
    """
    params = [worker_id]

    if status:
        query += " AND status = $2"
        params.append(status)

    query += " ORDER BY created_at DESC NULLS LAST"

    rows = await conn.fetch(query, *params)
    return [dict(row) for row in rows]

async def transition_job(
    conn: asyncpg.Connection,
    job_id: str,
    from_status: str,
    to_status: str
) -> Optional[Dict[str, Any]]:
    """Move a job forward only if it is still in the expected status"""
    row = await conn.fetchrow(
        f"""
        UPDATE job
        SET status = $1, updated_at = NOW()
        WHERE job_id::text = $2 AND status = $3
        RETURNING {_JOB_COLUMNS}
        """,
        to_status, job_id, from_status
    )
    return dict(row) if row else None

async def count_worker_jobs(
    conn: asyncpg.Connection,
    worker_id: str,
    status: str
) -> int:
    return await conn.fetchval(
        "SELECT COUNT(*) FROM job WHERE worker_id = $1 AND status = $2",
        worker_id, status
    )

async def create_notification(
    conn: asyncpg.Connection,
    recipient_id: str,
    message: str
) -> None:
    await conn.execute(
        """
        INSERT INTO notification (message, recipient_id)
        VALUES ($1, $2)
        """,
        message, recipient_id
    )
