"""Unit tests for the worker roster feed."""

import asyncio

import pytest

from needahand.models.worker import DEFAULT_RATING
from needahand.services.roster import WorkerRoster, normalize_worker, order_roster


class FakeConnection:
    """Stands in for asyncpg; `fetch` can be held open until released."""

    def __init__(self, rows, gate: asyncio.Event = None):
        self.rows = rows
        self.gate = gate

    async def fetch(self, query, *args):
        if self.gate is not None:
            await self.gate.wait()
        return self.rows


class TestNormalization:
    """Partial worker documents are defaulted, never rejected."""

    @pytest.mark.unit
    def test_missing_fields_get_defaults(self):
        worker = normalize_worker({"id": "w1"})

        assert worker.name == "Worker"
        assert worker.location == "Unknown"
        assert worker.specialty == "General"
        assert worker.rating == DEFAULT_RATING
        assert worker.available is True
        assert worker.skills == []
        assert worker.jobs_completed == 0
        assert worker.hourly_rate == 50

    @pytest.mark.unit
    def test_null_fields_get_defaults(self):
        worker = normalize_worker(
            {"id": "w1", "rating": None, "skills": None, "available": None, "specialty": ""}
        )

        assert worker.rating == DEFAULT_RATING
        assert worker.skills == []
        assert worker.available is True
        assert worker.specialty == "General"

    @pytest.mark.unit
    def test_rating_is_clamped(self):
        assert normalize_worker({"id": "w1", "rating": 7}).rating == 5.0
        assert normalize_worker({"id": "w1", "rating": -1}).rating == 0.0


class TestSnapshots:
    """Ordering and freshness of roster snapshots."""

    @pytest.mark.unit
    def test_available_first_then_rating(self, roster_documents):
        roster = WorkerRoster()
        roster.apply_snapshot(roster_documents, roster.next_ticket())

        assert [w.id for w in roster.workers] == ["w-electrician", "w-plumber", "w-partial", "w-painter"]
        assert [w.id for w in roster.available_workers] == ["w-electrician", "w-plumber", "w-partial"]

    @pytest.mark.unit
    def test_order_is_stable_for_equal_keys(self, worker_factory):
        workers = [worker_factory(id="a"), worker_factory(id="b")]

        assert [w.id for w in order_roster(workers)] == ["a", "b"]

    @pytest.mark.unit
    def test_stale_snapshot_is_dropped(self):
        roster = WorkerRoster()
        older = roster.next_ticket()
        newer = roster.next_ticket()

        assert roster.apply_snapshot([{"id": "new"}], newer)
        assert not roster.apply_snapshot([{"id": "old"}], older)
        assert [w.id for w in roster.workers] == ["new"]

    @pytest.mark.unit
    def test_workers_returns_a_copy(self):
        roster = WorkerRoster()
        roster.apply_snapshot([{"id": "w1"}], roster.next_ticket())

        roster.workers.clear()

        assert roster.get("w1") is not None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_refresh_with_connection(self):
        roster = WorkerRoster()

        applied = await roster.refresh(FakeConnection([{"id": "w1", "rating": 4.1}]))

        assert applied
        assert roster.get("w1").rating == 4.1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_slow_older_refresh_does_not_win(self):
        roster = WorkerRoster()
        slow_gate = asyncio.Event()

        slow = asyncio.create_task(roster.refresh(FakeConnection([{"id": "stale"}], slow_gate)))
        await asyncio.sleep(0)
        fast = await roster.refresh(FakeConnection([{"id": "fresh"}]))
        slow_gate.set()
        slow_applied = await slow

        assert fast is True
        assert slow_applied is False
        assert [w.id for w in roster.workers] == ["fresh"]


class TestStartup:
    """Initial roster load when the app starts."""

    class RecordingRoster:
        def __init__(self):
            self.calls = []

        async def start(self):
            self.calls.append("start")

        async def load(self):
            self.calls.append("load")

        async def stop(self):
            self.calls.append("stop")

    @pytest.mark.unit
    @pytest.mark.asyncio
    @pytest.mark.parametrize("listen,expected", [
        (True, ["start", "stop"]),
        (False, ["load", "stop"]),
    ])
    async def test_roster_is_loaded_with_or_without_listener(self, monkeypatch, listen, expected):
        from needahand import main

        roster = self.RecordingRoster()
        monkeypatch.setattr(main, "worker_roster", roster)
        monkeypatch.setattr(main.settings, "roster_listen", listen)

        async with main.lifespan(main.app):
            pass

        assert roster.calls == expected

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_load_logs_failures(self, monkeypatch):
        roster = WorkerRoster()

        async def broken_connect():
            raise OSError("store down")

        monkeypatch.setattr("needahand.services.roster.connect", broken_connect)

        await roster.load()

        assert roster.workers == []
