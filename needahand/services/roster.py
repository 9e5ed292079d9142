# needahand/services/roster.py
import asyncio
import itertools
import logging
from typing import Any, Dict, Iterable, List, Optional

import asyncpg

from ..config import settings
from ..database import connect
from ..models.worker import WorkerProfile
from ..queries.worker_queries import fetch_workers

logger = logging.getLogger(__name__)


def normalize_worker(document: Dict[str, Any]) -> WorkerProfile:
    """Build a profile from a possibly partial store document."""
    return WorkerProfile.model_validate(document)


def order_roster(workers: Iterable[WorkerProfile]) -> List[WorkerProfile]:
    # available first, then rating descending
    return sorted(workers, key=lambda w: (not w.available, -w.rating))


class WorkerRoster:
    """
    Latest known snapshot of the public worker roster.

    Every refresh takes a ticket before it starts fetching. A snapshot is
    only applied when its ticket is newer than the one currently shown, so
    a slow fetch finishing late never replaces fresher data.
    """

    def __init__(self, channel: str = settings.roster_channel):
        self.channel = channel
        self._workers: List[WorkerProfile] = []
        self._applied_ticket = 0
        self._tickets = itertools.count(1)
        self._listener_conn: Optional[asyncpg.Connection] = None
        self._tasks: set = set()

    @property
    def workers(self) -> List[WorkerProfile]:
        return list(self._workers)

    @property
    def available_workers(self) -> List[WorkerProfile]:
        return [w for w in self._workers if w.available]

    def get(self, worker_id: str) -> Optional[WorkerProfile]:
        return next((w for w in self._workers if w.id == worker_id), None)

    def next_ticket(self) -> int:
        return next(self._tickets)

    def apply_snapshot(self, documents: Iterable[Dict[str, Any]], ticket: int) -> bool:
        if ticket <= self._applied_ticket:
            logger.debug(f"Dropping stale roster snapshot {ticket} (have {self._applied_ticket})")
            return False
        self._workers = order_roster(normalize_worker(doc) for doc in documents)
        self._applied_ticket = ticket
        logger.info(f"Roster snapshot {ticket} applied with {len(self._workers)} workers")
        return True

    async def refresh(self, conn: Optional[asyncpg.Connection] = None) -> bool:
        ticket = self.next_ticket()
        if conn is not None:
            return self.apply_snapshot(await fetch_workers(conn), ticket)

        conn = await connect()
        try:
            return self.apply_snapshot(await fetch_workers(conn), ticket)
        finally:
            await conn.close()

    def _on_notify(self, connection, pid, channel, payload) -> None:
        task = asyncio.create_task(self.load())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def load(self) -> None:
        """Refresh once, logging failures instead of raising."""
        try:
            await self.refresh()
        except Exception as e:
            logger.error(f"Roster refresh failed: {str(e)}")

    async def start(self) -> None:
        """Load the first snapshot and subscribe to change notifications."""
        await self.load()
        try:
            self._listener_conn = await connect()
            await self._listener_conn.add_listener(self.channel, self._on_notify)
            logger.info(f"Listening for roster changes on '{self.channel}'")
        except Exception as e:
            logger.error(f"Roster listener could not start: {str(e)}")
            self._listener_conn = None

    async def stop(self) -> None:
        if self._listener_conn is not None:
            await self._listener_conn.remove_listener(self.channel, self._on_notify)
            await self._listener_conn.close()
            self._listener_conn = None
        for task in list(self._tasks):
            task.cancel()


worker_roster = WorkerRoster()
