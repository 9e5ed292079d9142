# needahand/queries/__init__.py
from .worker_queries import (
    fetch_workers,
    get_worker_by_id,
    upsert_worker,
    update_worker_availability,
    notify_roster_changed
)
from .profile_queries import (
    get_profile,
    upsert_customer_profile,
    upsert_worker_profile,
    update_profile_availability
)
from .job_queries import (
    create_job,
    get_job_by_id,
    get_customer_jobs,
    get_worker_jobs,
    transition_job,
    count_worker_jobs,
    create_notification
)

__all__ = [
    # Worker queries
    'fetch_workers',
    'get_worker_by_id',
    'upsert_worker',
    'update_worker_availability',
    'notify_roster_changed',

    # Profile queries
    'get_profile',
    'upsert_customer_profile',
    'upsert_worker_profile',
    'update_profile_availability',

    # Job queries
    'create_job',
    'get_job_by_id',
    'get_customer_jobs',
    'get_worker_jobs',
    'transition_job',
    'count_worker_jobs',
    'create_notification'
]
