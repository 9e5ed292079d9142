# needahand/main.py
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import routers
from .services import worker_roster
from .config import settings
from .utils.logging import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.roster_listen:
        await worker_roster.start()
    else:
        # no change feed, but still serve the roster as it is now
        await worker_roster.load()
    yield
    await worker_roster.stop()


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(
        title="Need A Hand API",
        description="Problem intake and worker matching for the Need A Hand marketplace",
        version="1.0.0",
        lifespan=lifespan
    )

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include all routers
    for router in routers:
        app.include_router(router)

    @app.get("/")
    async def health_check():
        return {
            "status": "healthy",
            "version": app.version,
            "workers": len(worker_roster.workers)
        }

    return app


app = create_app()
