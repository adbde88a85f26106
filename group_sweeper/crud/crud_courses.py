""" Funções de acesso a cursos e matrículas """

from datetime import datetime

import structlog
from sqlalchemy import or_
from sqlalchemy.orm import Session

from group_sweeper.models.models_courses import Course, EnrolInstance, UserEnrolment
from group_sweeper.models.models_users import User
from group_sweeper.enums.enums_enrolments import EnrolmentStatus, EnrolInstanceStatus


logger = structlog.get_logger("crud.courses")

def get_course_by_id(db: Session, course_id: int) -> Course | None:
    """ Busca um curso pelo ID """
    course = db.get(Course, course_id)
    logger.debug("get_course_by_id", course_id=course_id, found=bool(course))
    return course

def get_enrolled_user_ids(db: Session, course_id: int) -> set[int]:
    """ Usuários com qualquer matrícula no curso, ativa ou não """
    rows = (
        db.query(UserEnrolment.user_id)
        .join(EnrolInstance, EnrolInstance.id == UserEnrolment.enrol_id)
        .join(User, User.id == UserEnrolment.user_id)
        .filter(EnrolInstance.course_id == course_id, User.deleted.is_(False))
        .distinct()
        .all()
    )
    return {row.user_id for row in rows}

def get_active_user_ids(db: Session, course_id: int, now: datetime) -> set[int]:
    """ Usuários com ao menos uma matrícula ativa no momento ``now`` """
    rows = (
        db.query(UserEnrolment.user_id)
        .join(EnrolInstance, EnrolInstance.id == UserEnrolment.enrol_id)
        .join(User, User.id == UserEnrolment.user_id)
        .filter(
            EnrolInstance.course_id == course_id,
            EnrolInstance.status == EnrolInstanceStatus.ENABLED,
            UserEnrolment.status == EnrolmentStatus.ACTIVE,
            or_(UserEnrolment.time_start.is_(None), UserEnrolment.time_start <= now),
            or_(UserEnrolment.time_end.is_(None), UserEnrolment.time_end > now),
            User.suspended.is_(False),
            User.deleted.is_(False)
        )
        .distinct()
        .all()
    )
    return {row.user_id for row in rows}

def get_suspended_user_ids(db: Session, course_id: int, now: datetime) -> set[int]:
    """ Usuários matriculados no curso sem nenhuma matrícula ativa """
    suspended = get_enrolled_user_ids(db, course_id) - get_active_user_ids(db, course_id, now)
    logger.debug("get_suspended_user_ids", course_id=course_id, count=len(suspended))
    return suspended
