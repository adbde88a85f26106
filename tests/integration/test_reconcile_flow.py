from datetime import timedelta

import pytest

from group_sweeper.crud.crud_notification_logs import get_notification_logs
from group_sweeper.enums.enums_enrolments import EnrolmentStatus
from group_sweeper.models import GroupMember, UserEnrolment
from group_sweeper.notifications import EmailNotifier, TemplateRenderer, get_noreply_sender
from group_sweeper.notifications.channels.base import NotificationChannel
from group_sweeper.services.providers import SqlLogReader, SqlSuspensionProvider, SqlMembershipStore, SqlRoleProvider
from group_sweeper.services.services_reconciler import SuspendedGroupReconciler

from .conftest import NOW


class RecordingChannel(NotificationChannel):
    def __init__(self, fail=False):
        self.sent = []
        self.fail = fail

    async def send_async(self, recipient, sender, subject, body_text, body_html=None):
        if self.fail:
            raise ConnectionError("smtp unreachable")
        self.sent.append((recipient.email, subject, body_text, body_html))
        return {"message_id": f"<{len(self.sent)}@test>"}


def _reconciler(db, channel, log_reader=True, clock=lambda: NOW, **kwargs):
    params = dict(
        log_reader=SqlLogReader(db) if log_reader else None,
        suspensions=SqlSuspensionProvider(db, clock=lambda: NOW),
        memberships=SqlMembershipStore(db),
        roles=SqlRoleProvider(db),
        notifier=EmailNotifier(db, channel),
        renderer=TemplateRenderer(),
        sender=get_noreply_sender(),
        lookback=timedelta(hours=1),
        event_pattern="user_enrolment_updated",
        instructor_role="instr",
        clock=clock,
    )
    params.update(kwargs)
    return SuspendedGroupReconciler(**params)


def test_full_run_removes_and_notifies(db_session, scenario):
    channel = RecordingChannel()

    report = _reconciler(db_session, channel).run()

    remaining = {(m.group_id, m.user_id) for m in db_session.query(GroupMember).all()}
    assert remaining == {(1, 2), (3, 2)}
    assert report.memberships_removed == 2
    assert report.courses_scanned == 2

    assert len(channel.sent) == 1
    to, subject, text, html = channel.sent[0]
    assert to == "ines@example.com"
    assert "C101" in subject
    assert text.count("Ana Silva") == 2
    assert "G1" in text and "G2" in text
    assert "<td>G2</td>" in html

    logs = get_notification_logs(db_session, recipient_id=10)
    assert len(logs) == 1
    assert logs[0].course_id == 101
    assert logs[0].success is True

def test_second_run_does_nothing(db_session, scenario):
    channel = RecordingChannel()
    reconciler = _reconciler(db_session, channel)
    reconciler.run()

    report = reconciler.run()

    assert report.memberships_removed == 0
    assert report.notifications_sent == 0
    assert len(channel.sent) == 1
    assert len(get_notification_logs(db_session)) == 1

def test_no_log_reader_touches_nothing(db_session, scenario):
    channel = RecordingChannel()

    report = _reconciler(db_session, channel, log_reader=False).run()

    assert report.skipped is True
    assert db_session.query(GroupMember).count() == 4
    assert channel.sent == []

def test_old_events_are_outside_the_window(db_session, scenario):
    channel = RecordingChannel()

    report = _reconciler(db_session, channel, clock=lambda: NOW + timedelta(hours=2)).run()

    assert report.courses_scanned == 0
    assert db_session.query(GroupMember).count() == 4

def test_failed_email_is_logged_and_isolated(db_session, scenario):
    channel = RecordingChannel(fail=True)

    report = _reconciler(db_session, channel, isolate_failures=True).run()

    assert report.failed_course_ids == [101]
    assert report.memberships_removed == 2
    logs = get_notification_logs(db_session, success=False)
    assert len(logs) == 1
    assert "smtp unreachable" in logs[0].error

def test_failed_email_aborts_when_not_isolated(db_session, scenario):
    with pytest.raises(ConnectionError):
        _reconciler(db_session, RecordingChannel(fail=True), isolate_failures=False).run()

class FlushFailingMembershipStore(SqlMembershipStore):
    """ Provoca erro de integridade ao remover participações do C101 """
    def remove_member(self, group_id, user_id):
        if group_id in (1, 2):
            #Participação duplicada viola uq_group_member no flush
            self.db.add(GroupMember(group_id=1, user_id=2))
            self.db.flush()
        return super().remove_member(group_id, user_id)

def test_database_error_in_one_course_does_not_poison_the_next(db_session, scenario):
    db_session.query(UserEnrolment).filter(
        UserEnrolment.user_id == 2, UserEnrolment.enrol_id == scenario.c102.enrol_instances[0].id
    ).update({"status": EnrolmentStatus.SUSPENDED}, synchronize_session=False)
    db_session.commit()
    channel = RecordingChannel()

    report = _reconciler(
        db_session, channel,
        isolate_failures=True,
        memberships=FlushFailingMembershipStore(db_session),
        rollback=db_session.rollback
    ).run()

    assert report.failed_course_ids == [101]
    assert report.memberships_removed == 1
    remaining = {(m.group_id, m.user_id) for m in db_session.query(GroupMember).all()}
    assert remaining == {(1, 1), (1, 2), (2, 1)}
    assert len(channel.sent) == 1
    assert "C102" in channel.sent[0][1]
