"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("ROSTER_LISTEN", "false")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from needahand.config import settings
from needahand.models.worker import WorkerProfile
from needahand.services import intake_sessions, worker_roster


def make_worker(**kwargs) -> WorkerProfile:
    defaults = {
        "id": "w-default",
        "name": "Worker",
        "location": "Nearby",
        "specialty": "General",
        "bio": "",
        "rating": 4.0,
        "jobs_completed": 10,
        "available": True,
        "skills": [],
        "hourly_rate": 50,
    }
    return WorkerProfile(**{**defaults, **kwargs})


@pytest.fixture
def worker_factory():
    """Factory for building worker profiles."""
    return make_worker


@pytest.fixture
def plumber():
    return make_worker(
        id="w-plumber",
        name="Pat Plumber",
        specialty="Plumber",
        skills=["plumbing", "leak repair"],
        rating=4.8,
        available=True,
    )


@pytest.fixture
def electrician():
    return make_worker(
        id="w-electrician",
        name="Eve Sparks",
        specialty="Electrician",
        skills=["wiring"],
        rating=4.9,
        available=True,
    )


@pytest.fixture
def roster_documents(plumber, electrician):
    """Raw store documents, as the roster feed delivers them."""
    return [
        electrician.model_dump(),
        plumber.model_dump(),
        {"id": "w-painter", "name": "Paula", "specialty": "Painter", "rating": 4.2,
         "skills": ["painting"], "available": False},
        {"id": "w-partial"},
    ]


@pytest.fixture
def loaded_roster(roster_documents):
    """Global roster holding the sample documents."""
    worker_roster.apply_snapshot(roster_documents, worker_roster.next_ticket())
    yield worker_roster
    worker_roster.apply_snapshot([], worker_roster.next_ticket())


@pytest.fixture(autouse=True)
def clear_sessions():
    yield
    for user_id in list(intake_sessions._sessions):
        intake_sessions.close(user_id)


def make_token(user_id: str, role: str) -> str:
    return jwt.encode({"sub": user_id, "role": role}, settings.secret_key, algorithm=settings.algorithm)


@pytest.fixture
def customer_headers():
    return {"Authorization": f"Bearer {make_token('customer-123456', 'Customer')}"}


@pytest.fixture
def worker_headers():
    return {"Authorization": f"Bearer {make_token('w-plumber', 'Worker')}"}


@pytest.fixture
def api_client():
    """FastAPI test client; the roster listener is not started."""
    from needahand.main import app

    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
