""" Esquema do resumo de uma execução da reconciliação """

from pydantic import BaseModel, Field


class ReconcileReport(BaseModel):
    """ Contadores acumulados durante uma execução """

    skipped: bool = False
    courses_scanned: int = 0
    courses_with_removals: int = 0
    memberships_removed: int = 0
    notifications_sent: int = 0
    failed_course_ids: list[int] = Field(default_factory=list)
