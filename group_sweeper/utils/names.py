""" Montagem do nome exibido de um usuário """

from __future__ import annotations

import re
import string
from typing import Any

from group_sweeper.core.config import settings

#Campos de nome aceitos no formato configurado
NAME_FIELDS = (
    "firstname",
    "lastname",
    "middlename",
    "alternatename",
    "firstnamephonetic",
    "lastnamephonetic",
)

_WHITESPACE = re.compile(r"\s+")


def fullname(user: Any, template: str | None = None) -> str:
    """ Retorna o nome completo do usuário segundo ``FULLNAME_DISPLAY``

    Aceita qualquer objeto com os atributos de nome (modelo ORM, linha de
    consulta ou ``SimpleNamespace``). Campos ausentes viram texto vazio.
    """
    template = template or settings.FULLNAME_DISPLAY
    values = {field: (getattr(user, field, None) or "") for field in NAME_FIELDS}

    parts = []
    for literal, field, _spec, _conv in string.Formatter().parse(template):
        parts.append(literal)
        if field is None:
            continue
        if field not in values:
            raise ValueError(f"Campo de nome desconhecido no formato: {field}")
        parts.append(values[field])

    return _WHITESPACE.sub(" ", "".join(parts)).strip()
