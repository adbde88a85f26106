""" Funções de acesso a papéis e atribuições """

import structlog
from sqlalchemy.orm import Session

from group_sweeper.models.models_roles import Role, RoleAssignment
from group_sweeper.models.models_users import User


logger = structlog.get_logger("crud.roles")

def get_role_by_shortname(db: Session, shortname: str) -> Role | None:
    """ Busca um papel pelo nome curto """
    role = db.query(Role).filter(Role.shortname == shortname).first()
    logger.debug("get_role_by_shortname", shortname=shortname, found=bool(role))
    return role

def get_users_with_role(db: Session, role_id: int, course_id: int) -> list[User]:
    """ Usuários que possuem o papel no contexto do curso """
    return (
        db.query(User)
        .join(RoleAssignment, RoleAssignment.user_id == User.id)
        .filter(
            RoleAssignment.role_id == role_id,
            RoleAssignment.course_id == course_id,
            User.deleted.is_(False)
        )
        .order_by(User.lastname, User.firstname, User.id)
        .all()
    )
