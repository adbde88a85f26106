""" Tarefa agendada que remove usuários suspensos dos grupos

Executada pelo Celery Beat. Cada execução abre uma sessão de banco,
monta a reconciliação com os colaboradores SQL e registra o resumo.
Não há retentativa: uma falha é reportada como falha da tarefa.
"""

import time

import structlog
from sqlalchemy.orm import Session

from group_sweeper.core.celery_app import celery_app
from group_sweeper.infra.db import SessionLocal
from group_sweeper.notifications import EmailNotifier, TemplateRenderer, get_noreply_sender
from group_sweeper.services.providers import get_log_reader, SqlSuspensionProvider, SqlMembershipStore, SqlRoleProvider
from group_sweeper.services.services_reconciler import SuspendedGroupReconciler
from group_sweeper.metrics import RECONCILE_RUNS_TOTAL, RECONCILE_DURATION_SECONDS


logger = structlog.get_logger("reconcile_tasks")

#Nome descritivo exibido aos administradores
TASK_DISPLAY_NAME = "Remover usuários suspensos dos grupos"


def build_reconciler(db: Session) -> SuspendedGroupReconciler:
    """ Monta a reconciliação com os colaboradores baseados no banco """
    return SuspendedGroupReconciler(
        log_reader=get_log_reader(db),
        suspensions=SqlSuspensionProvider(db),
        memberships=SqlMembershipStore(db),
        roles=SqlRoleProvider(db),
        notifier=EmailNotifier(db),
        renderer=TemplateRenderer(),
        sender=get_noreply_sender(),
        rollback=db.rollback
    )

@celery_app.task(name="group_sweeper.tasks.reconcile_tasks.remove_suspended_from_groups", queue="maintenance")
def remove_suspended_from_groups() -> dict:
    """ Remove usuários suspensos dos grupos e avisa os instrutores """
    start = time.time()
    status = "success"
    log = logger.bind(task=TASK_DISPLAY_NAME)

    with SessionLocal() as db:
        try:
            report = build_reconciler(db).run()
            if report.skipped:
                status = "skipped"

            elapsed_ms = int((time.time() - start) * 1000)
            log.info(
                "reconcile_completed",
                status=status,
                duration_ms=elapsed_ms,
                courses=report.courses_scanned,
                removed=report.memberships_removed,
                notified=report.notifications_sent,
                failed_courses=report.failed_course_ids
            )
            return report.model_dump()

        except Exception as exc:
            status = "failure"
            db.rollback()
            elapsed_ms = int((time.time() - start) * 1000)
            log.error("reconcile_failed", message=str(exc), duration_ms=elapsed_ms)
            raise

        finally:
            #Metricas Prometheus
            RECONCILE_RUNS_TOTAL.labels(status=status).inc()
            RECONCILE_DURATION_SECONDS.observe(time.time() - start)
