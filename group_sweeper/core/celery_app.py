""" Configuração da aplicação Celery e registro de métricas """

import os
from datetime import timedelta

from kombu import Exchange, Queue
from celery import Celery
from celery.signals import task_success, task_failure, worker_ready, setup_logging
from celery.schedules import schedule
from prometheus_client import start_http_server

import group_sweeper.metrics as metrics_module
from group_sweeper.core.config import settings
from group_sweeper.core.logging import configure_logging


#Cria a aplicação Celery
celery_app = Celery(
    "group_sweeper",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=[
        "group_sweeper.tasks.reconcile_tasks"
    ]
)


@setup_logging.connect
def _configure_logging(**kwargs):
    """ Substitui a configuração de logs do Celery pelo structlog """
    configure_logging()

@worker_ready.connect
def _start_prometheus_server(**kwargs):
    """ Inicia o servidor Prometheus assim que o worker estiver pronto """
    start_http_server(port=settings.METRICS_PORT, addr="0.0.0.0")

@task_success.connect
def handle_task_success(sender=None, **kwargs):
    """ Métricas de contagem de sucesso """
    metrics_module.CELERY_TASKS_TOTAL.labels(task_name=sender.name, status="success").inc()

@task_failure.connect
def handle_task_failure(sender=None, **kwargs):
    """ Métricas de contagem de falha """
    metrics_module.CELERY_TASKS_TOTAL.labels(task_name=sender.name, status="failure").inc()


def interval_schedule(minutes: int) -> schedule:
    """ Agenda fixa a cada ``minutes`` minutos, mesmo quando não divide a hora """
    if minutes <= 0:
        raise ValueError("RECONCILE_INTERVAL_MINUTES deve ser positivo")
    return schedule(run_every=timedelta(minutes=minutes))


#Configurações adicionais do Celery
#Define serialização, fuso horário e limites
celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="America/Sao_Paulo",
    enable_utc=True,

    #Limites de tempo de execução
    task_soft_time_limit=600,
    task_time_limit=900,

    #A tarefa assume no máximo uma execução simultânea
    worker_concurrency=int(os.getenv("CELERY_WORKER_CONCURRENCY", "1")),
)

#Fila dedicada às rotinas de manutenção
maintenance_exchange = Exchange("maintenance", type="direct")

celery_app.conf.task_queues = (
    Queue("maintenance", maintenance_exchange, routing_key="maintenance"),
)

celery_app.conf.task_routes = {
    "group_sweeper.tasks.reconcile_tasks.remove_suspended_from_groups": {
        "queue": "maintenance", "routing_key": "maintenance"
    },
}

#Agendamentos periódicos (Celery Beat)
celery_app.conf.beat_schedule = {
    #Remove usuários suspensos dos grupos: a cada hora por padrão
    "remove-suspended-from-groups": {
        "task": "group_sweeper.tasks.reconcile_tasks.remove_suspended_from_groups",
        "schedule": interval_schedule(settings.RECONCILE_INTERVAL_MINUTES),
        "options": {"queue": "maintenance", "routing_key": "maintenance"}
    },
}
