from types import SimpleNamespace

import pytest

from group_sweeper.tasks import reconcile_tasks
from group_sweeper.schemas.schemas_reconcile import ReconcileReport


class FakeSession:
    def __init__(self):
        self.rolled_back = False
        self.closed = False

    def rollback(self):
        self.rolled_back = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False


class DummyCounter:
    def __init__(self):
        self.calls = []

    def labels(self, **k):
        self.kw = k
        return self

    def inc(self):
        self.calls.append(self.kw)


@pytest.fixture
def runs(monkeypatch):
    counter = DummyCounter()
    monkeypatch.setattr(reconcile_tasks, "RECONCILE_RUNS_TOTAL", counter)
    return counter

def test_task_runs_reconciler_and_returns_report(monkeypatch, runs):
    session = FakeSession()
    used = {}
    monkeypatch.setattr(reconcile_tasks, "SessionLocal", lambda: session)

    def fake_build(db):
        used["db"] = db
        return SimpleNamespace(run=lambda: ReconcileReport(courses_scanned=2, memberships_removed=3, notifications_sent=1))

    monkeypatch.setattr(reconcile_tasks, "build_reconciler", fake_build)

    result = reconcile_tasks.remove_suspended_from_groups.run()

    assert used["db"] is session
    assert result["memberships_removed"] == 3
    assert result["notifications_sent"] == 1
    assert runs.calls == [{"status": "success"}]
    assert session.closed

def test_task_reports_skip_when_no_log_reader(monkeypatch, runs):
    monkeypatch.setattr(reconcile_tasks, "SessionLocal", FakeSession)
    monkeypatch.setattr(
        reconcile_tasks, "build_reconciler",
        lambda db: SimpleNamespace(run=lambda: ReconcileReport(skipped=True))
    )

    result = reconcile_tasks.remove_suspended_from_groups.run()

    assert result["skipped"] is True
    assert runs.calls == [{"status": "skipped"}]

def test_task_rolls_back_and_reraises(monkeypatch, runs):
    session = FakeSession()
    monkeypatch.setattr(reconcile_tasks, "SessionLocal", lambda: session)

    def boom():
        raise RuntimeError("db down")

    monkeypatch.setattr(reconcile_tasks, "build_reconciler", lambda db: SimpleNamespace(run=boom))

    with pytest.raises(RuntimeError):
        reconcile_tasks.remove_suspended_from_groups.run()

    assert session.rolled_back
    assert runs.calls == [{"status": "failure"}]

def test_build_reconciler_respects_disabled_log_store(monkeypatch):
    from group_sweeper.core.config import settings

    monkeypatch.setattr(settings, "LOG_STORE_ENABLED", False)
    reconciler = reconcile_tasks.build_reconciler(FakeSession())

    assert reconciler.log_reader is None
    assert reconciler.instructor_role == settings.INSTRUCTOR_ROLE_SHORTNAME

def test_build_reconciler_rolls_back_the_task_session():
    session = FakeSession()
    reconciler = reconcile_tasks.build_reconciler(session)

    reconciler.rollback()

    assert session.rolled_back
