"""Definições de métricas do serviço de limpeza de grupos

Este módulo centraliza todas as métricas Prometheus utilizadas
pela aplicação e as organiza por domínio:
- Tarefas e workers do Celery
- Execuções da reconciliação de grupos
- Envio de notificações aos instrutores
- Estado do pool de conexões com o banco de dados
- Volume de logs emitidos
"""

from prometheus_client import Counter, Gauge, Histogram

# ---------- CELERY METRICS ----------
CELERY_TASKS_TOTAL = Counter(
    "celery_tasks_total",
    "Total de tarefas executadas pelo Celery",
    ["task_name", "status"], #Labels para nome de task e status (success/failure)
)


# ---------- RECONCILE METRICS ----------
RECONCILE_RUNS_TOTAL = Counter(
    "reconcile_runs_total",
    "Execuções da remoção de suspensos dos grupos",
    ["status"], #success, skipped ou failure
)

RECONCILE_DURATION_SECONDS = Histogram(
    "reconcile_duration_seconds",
    "Duração de cada execução da reconciliação (segundos)",
    buckets=[0.05, 0.1, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0, 300.0],
)

GROUP_MEMBERSHIPS_REMOVED_TOTAL = Counter(
    "group_memberships_removed_total",
    "Total de participações em grupo removidas de usuários suspensos",
)

RECONCILE_COURSE_FAILURES_TOTAL = Counter(
    "reconcile_course_failures_total",
    "Cursos cujo processamento falhou durante a reconciliação",
)


# ---------- NOTIFICATION METRICS ----------
NOTIFICATIONS_SENT_TOTAL = Counter(
    "notifications_sent_total",
    "Total de notificações enviadas",
    ["channel", "success"],
)

NOTIFICATIONS_SKIPPED_TOTAL = Counter(
    "notifications_skipped_total",
    "Notificações ignoradas",
    ["reason"],
)

NOTIFICATION_SEND_DURATION_SECONDS = Histogram(
    "notification_send_duration_seconds",
    "Tempo de envio de cada notificação (segundos)",
    ["channel"],
)


# ---------- DATABASE METRICS ----------
DB_POOL_SIZE = Gauge(
    "db_pool_size",
    "Tamanho atual do pool de conexões",
)

DB_POOL_CHECKOUTS = Gauge(
    "db_pool_checkouts",
    "Conexões em uso no pool",
)


# ---------- LOG METRICS ----------
LOG_ENTRIES_TOTAL = Counter(
    "log_entries_total",
    "Total de entradas de log por nível",
    ["level"],
)
