""" Implementações SQLAlchemy dos colaboradores da reconciliação """

from __future__ import annotations

from datetime import datetime
from typing import Callable, Iterable

import structlog
from sqlalchemy.orm import Session

from group_sweeper.core.config import settings
from group_sweeper.crud.crud_logs import get_course_ids_with_events_since
from group_sweeper.crud.crud_courses import get_course_by_id, get_suspended_user_ids
from group_sweeper.crud.crud_groups import get_group_memberships_for_users, remove_group_member
from group_sweeper.crud.crud_roles import get_role_by_shortname, get_users_with_role
from group_sweeper.schemas.schemas_memberships import GroupMembership
from group_sweeper.services.contracts import LogReader, SuspensionProvider, MembershipStore, RoleProvider
from group_sweeper.utils.clock import utcnow
from group_sweeper.utils.names import fullname


logger = structlog.get_logger("providers")


class SqlLogReader(LogReader):
    """ Lê o log padrão armazenado na tabela ``log_events`` """
    def __init__(self, db: Session) -> None:
        self.db = db

    def get_distinct_course_ids_since(self, since: datetime, event_pattern: str) -> set[int]:
        return get_course_ids_with_events_since(self.db, since, event_pattern)


def get_log_reader(db: Session) -> LogReader | None:
    """ Retorna o leitor de log configurado ou ´None´ quando não há nenhum """
    if not settings.LOG_STORE_ENABLED:
        logger.debug("log_store_disabled")
        return None
    return SqlLogReader(db)


class SqlSuspensionProvider(SuspensionProvider):
    def __init__(self, db: Session, clock: Callable[[], datetime] = utcnow) -> None:
        self.db = db
        self.clock = clock

    def get_course(self, course_id: int):
        return get_course_by_id(self.db, course_id)

    def get_suspended_user_ids(self, course) -> set[int]:
        return get_suspended_user_ids(self.db, course.id, self.clock())


class SqlMembershipStore(MembershipStore):
    def __init__(self, db: Session) -> None:
        self.db = db

    def find_memberships(self, course_id: int, user_ids: Iterable[int]) -> list[GroupMembership]:
        rows = get_group_memberships_for_users(self.db, course_id, user_ids)
        return [
            GroupMembership(
                group_id=row.group_id,
                user_id=row.user_id,
                group_name=row.group_name,
                course_short_name=row.course_short_name,
                user_display_name=fullname(row)
            )
            for row in rows
        ]

    def remove_member(self, group_id: int, user_id: int) -> bool:
        return remove_group_member(self.db, group_id, user_id)


class SqlRoleProvider(RoleProvider):
    def __init__(self, db: Session) -> None:
        self.db = db

    def get_role(self, shortname: str):
        return get_role_by_shortname(self.db, shortname)

    def get_users_with_role(self, role_id: int, course) -> list:
        return get_users_with_role(self.db, role_id, course.id)
