""" Renderização e envio dos avisos de remoção aos instrutores """

from .templates import TemplateRenderer, render_suspended_removal, render_subject
from .manager import EmailNotifier, get_noreply_sender

__all__ = ["TemplateRenderer", "render_suspended_removal", "render_subject", "EmailNotifier", "get_noreply_sender"]
