"""
Unit Tests for the Active Session Registry
"""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

from adaptivemath.diagnostic import AdaptiveSession, SessionRegistry

IDLE = timedelta(minutes=30)


def make_idle(tracked):
    tracked.last_active = datetime.now(UTC) - IDLE - timedelta(seconds=1)


def test_add_get_remove():
    registry = SessionRegistry()
    student_id = uuid4()

    tracked = registry.add(AdaptiveSession(), student_id)

    assert registry.get(tracked.id) is tracked
    assert tracked.student_id == student_id
    assert len(registry) == 1

    assert registry.remove(tracked.id) is tracked
    assert registry.get(tracked.id) is None
    assert len(registry) == 0


def test_each_session_gets_its_own_id_and_lock():
    registry = SessionRegistry()
    student_id = uuid4()

    first = registry.add(AdaptiveSession(), student_id)
    second = registry.add(AdaptiveSession(), student_id)

    assert first.id != second.id
    assert first.lock is not second.lock
    assert len(registry) == 2


def test_unknown_session():
    assert SessionRegistry().get(uuid4()) is None
    assert SessionRegistry().remove(uuid4()) is None


class TestIdleSessions:
    def test_idle_session_dropped_when_another_is_added(self):
        registry = SessionRegistry(idle_timeout=IDLE)
        stale = registry.add(AdaptiveSession(), uuid4())
        make_idle(stale)

        fresh = registry.add(AdaptiveSession(), uuid4())

        assert registry.get(stale.id) is None
        assert registry.get(fresh.id) is fresh
        assert len(registry) == 1

    def test_get_keeps_session_alive(self):
        registry = SessionRegistry(idle_timeout=IDLE)
        tracked = registry.add(AdaptiveSession(), uuid4())
        make_idle(tracked)

        assert registry.get(tracked.id) is tracked
        assert registry.sweep() == 0
        assert len(registry) == 1

    async def test_session_in_use_is_kept(self):
        registry = SessionRegistry(idle_timeout=IDLE)
        tracked = registry.add(AdaptiveSession(), uuid4())
        make_idle(tracked)

        async with tracked.lock:
            assert registry.sweep() == 0

        assert registry.sweep() == 1
        assert len(registry) == 0

    def test_sweep_at_given_time(self):
        registry = SessionRegistry(idle_timeout=IDLE)
        tracked = registry.add(AdaptiveSession(), uuid4())

        assert registry.sweep(now=tracked.last_active + IDLE) == 0
        assert registry.sweep(now=tracked.last_active + IDLE * 2) == 1
