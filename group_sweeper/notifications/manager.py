""" Gerenciador de envio dos avisos aos instrutores

Repassa cada aviso ao canal de email e registra o resultado no
histórico de notificações.
"""

from __future__ import annotations

import time

import structlog
from sqlalchemy.orm import Session

from group_sweeper.crud.crud_notification_logs import create_notification_log
from group_sweeper.enums.enums_notifications import ChannelType
from group_sweeper.schemas.schemas_notifications import Sender
from group_sweeper.services.contracts import Notifier
from group_sweeper.core.config import settings
from group_sweeper import metrics

from .channels import NotificationChannel
from .channels.email import EmailChannel

logger = structlog.get_logger("notifier")


def get_noreply_sender() -> Sender:
    """ Remetente padrão configurado em ``NOREPLY_ADDRESS`` """
    return Sender(email=settings.NOREPLY_ADDRESS, name="Não responda")


class EmailNotifier(Notifier):
    """ Envia avisos por email e guarda cada tentativa em ``notification_logs`` """
    def __init__(self, db: Session, channel: NotificationChannel | None = None) -> None:
        self.db = db
        self.channel = channel or EmailChannel()

    def send(self, recipient, sender, subject: str, body_text: str, body_html: str, course_id: int | None = None) -> bool:
        channel_type = ChannelType.EMAIL
        start = time.time()
        try:
            metadata = self.channel.send(recipient, sender, subject, body_text, body_html)
        except Exception as exc:
            metrics.NOTIFICATIONS_SENT_TOTAL.labels(channel=channel_type.value, success="False").inc()
            logger.error("notification_failed", channel=channel_type.value, recipient_id=recipient.id, error=str(exc))
            create_notification_log(
                self.db,
                recipient_id=recipient.id,
                channel=channel_type,
                subject=subject,
                message=body_text,
                course_id=course_id,
                success=False,
                error=str(exc)
            )
            #A falha sobe para a fronteira de erro do curso
            raise
        finally:
            metrics.NOTIFICATION_SEND_DURATION_SECONDS.labels(channel=channel_type.value).observe(time.time() - start)

        if metadata is None:
            return False

        metrics.NOTIFICATIONS_SENT_TOTAL.labels(channel=channel_type.value, success="True").inc()
        create_notification_log(
            self.db,
            recipient_id=recipient.id,
            channel=channel_type,
            subject=subject,
            message=body_text,
            course_id=course_id
        )
        return True
