""" Remoção de usuários suspensos dos grupos de curso

A cada execução o serviço consulta o log de auditoria em busca de
atualizações de matrícula recentes, identifica os usuários suspensos dos
cursos afetados, remove esses usuários dos grupos e envia aos instrutores
de cada curso um resumo das remoções.

Cada remoção é confirmada isoladamente no colaborador de grupos. Uma
segunda execução dentro da mesma janela não encontra mais as
participações removidas, portanto não repete remoções nem avisos.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable

import structlog

from group_sweeper.core.config import settings
from group_sweeper.schemas.schemas_notifications import InstructorNotification, RemovalEntry, Sender
from group_sweeper.schemas.schemas_reconcile import ReconcileReport
from group_sweeper.services.contracts import (
    LogReader, SuspensionProvider, MembershipStore, RoleProvider, Notifier, NotificationRenderer
)
from group_sweeper.utils.clock import utcnow
from group_sweeper.utils.names import fullname
from group_sweeper import metrics


logger = structlog.get_logger("reconciler")


class SuspendedGroupReconciler:
    """ Remove usuários suspensos dos grupos dos cursos com matrículas atualizadas """

    def __init__(
        self,
        log_reader: LogReader | None,
        suspensions: SuspensionProvider,
        memberships: MembershipStore,
        roles: RoleProvider,
        notifier: Notifier,
        renderer: NotificationRenderer,
        sender: Sender,
        lookback: timedelta | None = None,
        event_pattern: str | None = None,
        instructor_role: str | None = None,
        isolate_failures: bool | None = None,
        clock: Callable[[], datetime] = utcnow,
        rollback: Callable[[], None] | None = None,
    ) -> None:
        self.log_reader = log_reader
        self.suspensions = suspensions
        self.memberships = memberships
        self.roles = roles
        self.notifier = notifier
        self.renderer = renderer
        self.sender = sender
        self.lookback = lookback if lookback is not None else timedelta(seconds=settings.RECONCILE_LOOKBACK_SECONDS)
        self.event_pattern = event_pattern or settings.RECONCILE_EVENT_PATTERN
        self.instructor_role = instructor_role or settings.INSTRUCTOR_ROLE_SHORTNAME
        self.isolate_failures = settings.RECONCILE_ISOLATE_FAILURES if isolate_failures is None else isolate_failures
        self.clock = clock
        #Descarta a transação pendente antes de seguir para o próximo curso
        self.rollback = rollback

    def run(self) -> ReconcileReport:
        """ Executa uma reconciliação completa e retorna o resumo """
        report = ReconcileReport()
        log = logger.bind(phase="remove_suspended_from_groups")

        #Sem leitor de log não há como descobrir os cursos afetados
        if self.log_reader is None:
            log.info("log_reader_unavailable_skipping", detail="Could not find any log readers, skipping")
            report.skipped = True
            return report

        cutoff = self.clock() - self.lookback
        course_ids = self.log_reader.get_distinct_course_ids_since(cutoff, self.event_pattern)
        log.info("enrolment_updates_found", courses=len(course_ids), cutoff=cutoff.isoformat())

        role = self.roles.get_role(self.instructor_role)
        if role is None:
            log.warning("instructor_role_not_found", shortname=self.instructor_role)

        #Ordem crescente apenas para execuções reproduzíveis
        for course_id in sorted(course_ids):
            report.courses_scanned += 1
            course_log = log.bind(course_id=course_id)
            try:
                self._reconcile_course(course_id, role, report, course_log)
            except Exception as exc:
                if not self.isolate_failures:
                    raise
                if self.rollback is not None:
                    self.rollback()
                metrics.RECONCILE_COURSE_FAILURES_TOTAL.inc()
                report.failed_course_ids.append(course_id)
                course_log.exception("course_reconcile_failed", error=str(exc))

        log.info(
            "reconcile_finished",
            courses_scanned=report.courses_scanned,
            memberships_removed=report.memberships_removed,
            notifications_sent=report.notifications_sent,
            failed_courses=len(report.failed_course_ids)
        )
        return report

    def _reconcile_course(self, course_id: int, role, report: ReconcileReport, log) -> None:
        course = self.suspensions.get_course(course_id)
        if course is None:
            log.warning("course_not_found")
            return

        suspended_ids = self.suspensions.get_suspended_user_ids(course)
        if not suspended_ids:
            log.debug("no_suspended_users")
            return

        removals: list[RemovalEntry] = []
        course_name: str | None = None
        for membership in self.memberships.find_memberships(course_id, suspended_ids):
            if course_name is None:
                course_name = membership.course_short_name

            if not self.memberships.remove_member(membership.group_id, membership.user_id):
                #Participação sumiu entre a consulta e a remoção
                log.info("membership_already_gone", group_id=membership.group_id, user_id=membership.user_id)
                continue

            report.memberships_removed += 1
            metrics.GROUP_MEMBERSHIPS_REMOVED_TOTAL.inc()
            removals.append(RemovalEntry(group_name=membership.group_name, user_name=membership.user_display_name))

        if not removals:
            return

        report.courses_with_removals += 1
        log.info("suspended_users_removed", removals=len(removals), suspended_users=len(suspended_ids))

        if role is None:
            metrics.NOTIFICATIONS_SKIPPED_TOTAL.labels(reason="role_not_found").inc()
            return

        report.notifications_sent += self._notify_instructors(course, course_id, course_name, role, removals, log)

    def _notify_instructors(self, course, course_id: int, course_name: str, role, removals: list[RemovalEntry], log) -> int:
        """ Envia um aviso por instrutor com a lista completa de remoções do curso """
        instructors = self.roles.get_users_with_role(role.id, course)
        if not instructors:
            log.info("no_instructors_to_notify", role=role.shortname)
            metrics.NOTIFICATIONS_SKIPPED_TOTAL.labels(reason="no_recipients").inc()
            return 0

        subject = self.renderer.render_subject(course_name)
        sent = 0
        for instructor in instructors:
            notification = InstructorNotification(
                instructor_name=fullname(instructor),
                course_name=course_name,
                removals=list(removals)
            )
            body_text, body_html = self.renderer.render(notification)
            if self.notifier.send(instructor, self.sender, subject, body_text, body_html, course_id=course_id):
                sent += 1

        log.info("instructors_notified", instructors=len(instructors), sent=sent)
        return sent
