from __future__ import annotations

from abc import ABC, abstractmethod
import asyncio
import structlog

logger = structlog.get_logger("notifications")


class NotificationChannel(ABC):
    """ Interface base de envio de notificações """
    def send(self, recipient, sender, subject: str, body_text: str, body_html: str | None = None):
        """ Executa ``send_async`` de forma síncrona """
        return asyncio.run(self.send_async(recipient, sender, subject, body_text, body_html))

    @abstractmethod
    async def send_async(self, recipient, sender, subject: str, body_text: str, body_html: str | None = None) -> dict | None:
        """ Envia uma notificação ao destinatário de forma assíncrona

        Retorna um dicionário com metadados do envio ou ´None´
        caso o envio tenha sido ignorado
        """
        raise NotImplementedError
