""" Modelos de mensagens dos avisos utilizando Jinja2 """

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from group_sweeper.core.config import settings
from group_sweeper.schemas.schemas_notifications import InstructorNotification
from group_sweeper.services.contracts import NotificationRenderer

#Diretório de templates localizado em 'templates/notifications' dentro do pacote
TEMPLATE_DIR = Path(__file__).resolve().parents[1] / "templates" / "notifications"

env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html", "xml", "html.j2"]),
    undefined=StrictUndefined
)

def _render(template_base: str, context: dict[str, Any], html: bool = False) -> str:
    suffix = "html" if html else "txt"
    template_name = f"{template_base}.{suffix}.j2"
    template = env.get_template(template_name)
    return template.render(**context)

def render_suspended_removal(notification: InstructorNotification, html: bool = False) -> str:
    """ Renderiza o aviso de usuários suspensos removidos dos grupos """
    return _render("suspended_removal", {"notification": notification}, html)

def render_subject(course_name: str) -> str:
    """ Assunto do aviso para o curso informado """
    return settings.NOTIFICATION_SUBJECT_TEMPLATE.format(course_name=course_name)


class TemplateRenderer(NotificationRenderer):
    """ Produz os corpos em texto puro e HTML de um aviso """

    def render(self, notification: InstructorNotification) -> tuple[str, str]:
        return (
            render_suspended_removal(notification),
            render_suspended_removal(notification, html=True)
        )

    def render_subject(self, course_name: str) -> str:
        return render_subject(course_name)
