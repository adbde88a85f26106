""" Consultas ao log de auditoria da plataforma """

from datetime import datetime

import structlog
from sqlalchemy.orm import Session

from group_sweeper.models.models_logs import LogEvent


logger = structlog.get_logger("crud.logs")

def get_course_ids_with_events_since(db: Session, since: datetime, event_pattern: str) -> set[int]:
    """ Retorna os IDs distintos de cursos com eventos cujo nome contém ``event_pattern`` após ``since`` """
    rows = (
        db.query(LogEvent.course_id)
        .filter(
            LogEvent.event_name.like(f"%{event_pattern}%"),
            LogEvent.created_at > since,
            LogEvent.course_id.is_not(None)
        )
        .distinct()
        .all()
    )
    course_ids = {row.course_id for row in rows}
    logger.debug("course_ids_with_events", pattern=event_pattern, since=since.isoformat(), count=len(course_ids))
    return course_ids
