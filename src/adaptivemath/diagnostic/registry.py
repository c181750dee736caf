"""
Active Session Registry

Holds adaptive sessions between HTTP requests. One registry is created per
application instance and kept on ``app.state``; each tracked session has its
own lock so calls into a session are serialized.

Sessions nobody has touched for ``idle_timeout`` are dropped the next time a
session is added, whether they completed or were abandoned. Completed
diagnostic results are already in the database by then.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

if TYPE_CHECKING:
    from .session import AdaptiveSession

logger = logging.getLogger(__name__)

DEFAULT_IDLE_TIMEOUT = timedelta(hours=1)


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass
class TrackedSession:
    """An adaptive session plus the request-layer data that goes with it."""

    session: AdaptiveSession
    student_id: UUID
    id: UUID = field(default_factory=uuid4)
    started_at: datetime = field(default_factory=_utcnow)
    last_active: datetime = field(default_factory=_utcnow)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False)
    result_id: UUID | None = None


class SessionRegistry:
    """In-memory map of session id to tracked session.

    Args:
        idle_timeout: How long a session may go untouched before it is dropped
    """

    def __init__(self, idle_timeout: timedelta = DEFAULT_IDLE_TIMEOUT) -> None:
        self.idle_timeout = idle_timeout
        self._sessions: dict[UUID, TrackedSession] = {}

    def add(self, session: AdaptiveSession, student_id: UUID) -> TrackedSession:
        self.sweep()
        tracked = TrackedSession(session=session, student_id=student_id)
        self._sessions[tracked.id] = tracked
        logger.debug("Registered session %s for student %s", tracked.id, student_id)
        return tracked

    def get(self, session_id: UUID) -> TrackedSession | None:
        """Look up a session and mark it as active."""
        tracked = self._sessions.get(session_id)
        if tracked is not None:
            tracked.last_active = _utcnow()
        return tracked

    def remove(self, session_id: UUID) -> TrackedSession | None:
        return self._sessions.pop(session_id, None)

    def sweep(self, now: datetime | None = None) -> int:
        """Drop idle sessions. Sessions with a request in flight are kept.

        Returns:
            Number of sessions dropped
        """
        cutoff = (now or _utcnow()) - self.idle_timeout
        idle = [
            session_id
            for session_id, tracked in self._sessions.items()
            if tracked.last_active < cutoff and not tracked.lock.locked()
        ]
        for session_id in idle:
            del self._sessions[session_id]

        if idle:
            logger.info("Dropped %d idle sessions (%d active)", len(idle), len(self._sessions))
        return len(idle)

    def __len__(self) -> int:
        return len(self._sessions)
