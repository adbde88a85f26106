""" Interfaces dos colaboradores externos da reconciliação

A reconciliação não acessa banco, log ou SMTP diretamente: recebe
implementações destas interfaces no construtor.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Iterable

from group_sweeper.schemas.schemas_memberships import GroupMembership
from group_sweeper.schemas.schemas_notifications import InstructorNotification


class LogReader(ABC):
    """ Leitura de eventos históricos do log de auditoria """

    @abstractmethod
    def get_distinct_course_ids_since(self, since: datetime, event_pattern: str) -> set[int]:
        raise NotImplementedError

class SuspensionProvider(ABC):
    """ Resolve cursos e usuários suspensos em cada curso """

    @abstractmethod
    def get_course(self, course_id: int) -> Any | None:
        """ Retorna o curso ou ´None´ caso não exista mais """
        raise NotImplementedError

    @abstractmethod
    def get_suspended_user_ids(self, course: Any) -> set[int]:
        raise NotImplementedError

class MembershipStore(ABC):
    """ Consulta e remoção de participações em grupos """

    @abstractmethod
    def find_memberships(self, course_id: int, user_ids: Iterable[int]) -> list[GroupMembership]:
        """ Participações ordenadas por sobrenome e nome do membro """
        raise NotImplementedError

    @abstractmethod
    def remove_member(self, group_id: int, user_id: int) -> bool:
        """ Remove a participação, retornando ´False´ se ela já não existia """
        raise NotImplementedError

class RoleProvider(ABC):
    """ Papéis e usuários que os possuem em um curso """

    @abstractmethod
    def get_role(self, shortname: str) -> Any | None:
        raise NotImplementedError

    @abstractmethod
    def get_users_with_role(self, role_id: int, course: Any) -> list[Any]:
        raise NotImplementedError

class NotificationRenderer(ABC):
    """ Gera o assunto e os corpos em texto puro e HTML de um aviso """

    @abstractmethod
    def render_subject(self, course_name: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def render(self, notification: InstructorNotification) -> tuple[str, str]:
        raise NotImplementedError

class Notifier(ABC):
    """ Entrega de avisos aos destinatários """

    @abstractmethod
    def send(self, recipient, sender, subject: str, body_text: str, body_html: str, course_id: int | None = None) -> bool:
        """ Envia o aviso, retornando ´False´ quando o envio foi ignorado """
        raise NotImplementedError
