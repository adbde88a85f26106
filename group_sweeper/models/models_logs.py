""" Modelo do log de auditoria da plataforma """

from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime

from group_sweeper.infra.db import Base


class LogEvent(Base):
    """ Evento registrado no log padrão da plataforma """

    __tablename__ = "log_events"

    id = Column(Integer, primary_key=True)
    #Nome completo da classe do evento, ex.: \core\event\user_enrolment_updated
    event_name = Column(String(255), nullable=False, index=True)
    course_id = Column(Integer, nullable=True, index=True)
    user_id = Column(Integer, nullable=True)
    related_user_id = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True)

    def __repr__(self) -> str:
        return f"<LogEvent id={self.id} event_name={self.event_name} course_id={self.course_id}>"
