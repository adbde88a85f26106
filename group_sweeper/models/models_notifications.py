""" Histórico de notificações enviadas aos instrutores """

from datetime import datetime, timezone

from sqlalchemy import Column, ForeignKey, Integer, DateTime, Boolean, Text, Enum as PgEnum
from sqlalchemy.orm import relationship

from group_sweeper.infra.db import Base
from group_sweeper.enums.enums_notifications import ChannelType


class NotificationLog(Base):
    """ Registro de cada tentativa de envio """

    __tablename__ = "notification_logs"

    id = Column(Integer, primary_key=True)
    recipient_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="SET NULL"), nullable=True, index=True)

    channel = Column(PgEnum(ChannelType, name="notification_channel_enum"), nullable=False)
    subject = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    sent_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    success = Column(Boolean, default=True, nullable=False)
    error = Column(Text, nullable=True)

    recipient = relationship("User")

    def __repr__(self) -> str:
        status = "ok" if self.success else "error"
        return (
            f"<NotificationLog id={self.id} recipient_id={self.recipient_id} status={status}>"
        )
