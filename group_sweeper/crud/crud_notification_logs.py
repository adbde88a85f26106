""" Operações CRUD para "logs" de notificações """

from typing import List

from sqlalchemy.orm import Session

from group_sweeper.models.models_notifications import NotificationLog
from group_sweeper.enums.enums_notifications import ChannelType


def create_notification_log(db: Session, recipient_id: int, channel: ChannelType, subject: str, message: str,
                            course_id: int | None = None, success: bool = True, error: str | None = None) -> NotificationLog:
    """ Cria um registro de "log" de notificação no banco de dados """
    log = NotificationLog(
        recipient_id=recipient_id,
        course_id=course_id,
        channel=channel,
        subject=subject,
        message=message,
        success=success,
        error=error
    )
    db.add(log)
    db.commit()
    db.refresh(log)
    return log

def get_notification_logs(db: Session, recipient_id: int | None = None, course_id: int | None = None,
                          success: bool | None = None) -> List[NotificationLog]:
    """ Obtém os "logs" de notificação aplicando filtros opcionais """
    query = db.query(NotificationLog)

    if recipient_id is not None:
        query = query.filter(NotificationLog.recipient_id == recipient_id)
    if course_id is not None:
        query = query.filter(NotificationLog.course_id == course_id)
    if success is not None:
        query = query.filter(NotificationLog.success == success)

    return query.order_by(NotificationLog.id).all()
