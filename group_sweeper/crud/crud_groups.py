""" Consultas e remoções de participações em grupos """

import structlog
from sqlalchemy.orm import Session

from group_sweeper.models.models_groups import Group, GroupMember
from group_sweeper.models.models_users import User
from group_sweeper.models.models_courses import Course


logger = structlog.get_logger("crud.groups")

def get_group_memberships_for_users(db: Session, course_id: int, user_ids) -> list:
    """ Participações dos usuários informados nos grupos do curso

    Cada linha traz o grupo, o usuário com todos os campos de nome e o nome
    curto do curso, ordenadas por sobrenome e nome.
    """
    user_ids = list(user_ids)
    if not user_ids:
        return []

    return (
        db.query(
            Group.id.label("group_id"),
            GroupMember.user_id.label("user_id"),
            Group.name.label("group_name"),
            User.firstname,
            User.lastname,
            User.middlename,
            User.firstnamephonetic,
            User.lastnamephonetic,
            User.alternatename,
            Course.shortname.label("course_short_name")
        )
        .select_from(GroupMember)
        .join(Group, Group.id == GroupMember.group_id)
        .join(User, User.id == GroupMember.user_id)
        .join(Course, Course.id == Group.course_id)
        .filter(GroupMember.user_id.in_(user_ids), Group.course_id == course_id)
        .order_by(User.lastname, User.firstname, User.id, Group.id)
        .all()
    )

def remove_group_member(db: Session, group_id: int, user_id: int) -> bool:
    """ Remove o usuário do grupo, retornando se havia participação """
    deleted = (
        db.query(GroupMember)
        .filter(GroupMember.group_id == group_id, GroupMember.user_id == user_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    logger.info("group_member_removed", group_id=group_id, user_id=user_id, removed=bool(deleted))
    return bool(deleted)
