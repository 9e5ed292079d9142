# needahand/routes/__init__.py
from .recommendations import recommendation_router
from .intake import intake_router
from .workers import workers_router
from .jobs import jobs_router
from .profiles import profiles_router

routers = [
    recommendation_router,
    intake_router,
    workers_router,
    jobs_router,
    profiles_router
]

__all__ = ["routers"]
