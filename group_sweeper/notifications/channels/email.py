from __future__ import annotations

from email.message import EmailMessage
from email.utils import formataddr, make_msgid
import aiosmtplib

from group_sweeper.core.config import settings
from group_sweeper.utils.logging_utils import mask_identifier
from group_sweeper import metrics
from .base import NotificationChannel, logger


class EmailChannel(NotificationChannel):
    """ Canal de envio por email utilizando SMTP """
    async def send_async(self, recipient, sender, subject: str, body_text: str, body_html: str | None = None) -> dict | None:
        if not getattr(recipient, "email", None):
            logger.warning("email_missing", user_id=str(getattr(recipient, "id", "?")))
            metrics.NOTIFICATIONS_SKIPPED_TOTAL.labels(reason="email_missing").inc()
            return None

        if not settings.SMTP_HOST:
            logger.warning("smtp_not_configured")
            metrics.NOTIFICATIONS_SKIPPED_TOTAL.labels(reason="smtp_not_configured").inc()
            return None

        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = formataddr((getattr(sender, "name", "") or "", sender.email))
        msg["To"] = recipient.email
        msg["Message-ID"] = make_msgid()
        msg.set_content(body_text)
        if body_html:
            #Versão HTML como alternativa ao texto puro
            msg.add_alternative(body_html, subtype="html")

        #STARTTLS é negociado no connect quando SMTP_TLS está habilitado
        smtp = aiosmtplib.SMTP(hostname=settings.SMTP_HOST, port=settings.SMTP_PORT, start_tls=settings.SMTP_TLS, timeout=10)
        await smtp.connect()
        try:
            if settings.SMTP_USERNAME:
                await smtp.login(settings.SMTP_USERNAME, settings.SMTP_PASSWORD or "")
            await smtp.send_message(msg)
        finally:
            await smtp.quit()

        logger.info("email_sent", to=mask_identifier(recipient.email), subject=subject)
        return {"message_id": msg["Message-ID"]}
