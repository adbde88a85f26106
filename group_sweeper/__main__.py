""" Executa uma única reconciliação fora do Celery Beat

Uso: ``python -m group_sweeper``
"""

import json

from group_sweeper.core.logging import configure_logging
from group_sweeper.tasks.reconcile_tasks import remove_suspended_from_groups


def main() -> None:
    configure_logging()
    #Chamada direta executa a tarefa no processo atual
    report = remove_suspended_from_groups()
    print(json.dumps(report, ensure_ascii=False))


if __name__ == "__main__":
    main()
