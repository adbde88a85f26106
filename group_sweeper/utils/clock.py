""" Relógio padrão usado nas consultas por janela de tempo """

from datetime import datetime, timezone


def utcnow() -> datetime:
    """ Data e hora atuais em UTC """
    return datetime.now(timezone.utc)
