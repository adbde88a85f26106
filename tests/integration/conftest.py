""" Fixtures e utilidades para testes de integração """

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from group_sweeper.infra.db import Base
from group_sweeper.models import (
    User, Course, EnrolInstance, UserEnrolment, Group, GroupMember, Role, RoleAssignment, LogEvent
)
from group_sweeper.enums.enums_enrolments import EnrolmentStatus

#Utiliza banco SQLite em memória para testes
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def db_session():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


class Seeder:
    """ Cria registros da plataforma com o mínimo de campos """
    def __init__(self, db):
        self.db = db

    def user(self, uid, firstname, lastname, email=None, **extra):
        user = User(
            id=uid, username=f"user{uid}", firstname=firstname, lastname=lastname,
            email=email or f"user{uid}@example.com", **extra
        )
        self.db.add(user)
        self.db.commit()
        return user

    def course(self, cid, shortname):
        course = Course(id=cid, shortname=shortname, fullname=f"Curso {shortname}")
        instance = EnrolInstance(course=course, method="manual")
        self.db.add_all([course, instance])
        self.db.commit()
        return course

    def enrol(self, user, course, status=EnrolmentStatus.ACTIVE, time_start=None, time_end=None, instance=None):
        instance = instance or course.enrol_instances[0]
        enrolment = UserEnrolment(
            instance=instance, user_id=user.id, status=status,
            time_start=time_start, time_end=time_end
        )
        self.db.add(enrolment)
        self.db.commit()
        return enrolment

    def group(self, gid, course, name, members=()):
        group = Group(id=gid, course_id=course.id, name=name)
        self.db.add(group)
        for user in members:
            self.db.add(GroupMember(group=group, user_id=user.id))
        self.db.commit()
        return group

    def role(self, rid, shortname):
        role = Role(id=rid, shortname=shortname, name=shortname)
        self.db.add(role)
        self.db.commit()
        return role

    def assign(self, role, user, course):
        self.db.add(RoleAssignment(role_id=role.id, user_id=user.id, course_id=course.id))
        self.db.commit()

    def event(self, course, created_at, event_name="\\core\\event\\user_enrolment_updated"):
        self.db.add(LogEvent(event_name=event_name, course_id=course.id, created_at=created_at))
        self.db.commit()


@pytest.fixture()
def seed(db_session):
    return Seeder(db_session)


@pytest.fixture()
def scenario(seed):
    """ C101 com U1 suspenso nos grupos G1 e G2 e I1 como instrutor """
    c101 = seed.course(101, "C101")
    c102 = seed.course(102, "C102")
    u1 = seed.user(1, "Ana", "Silva")
    u2 = seed.user(2, "Bruno", "Costa")
    i1 = seed.user(10, "Ines", "Prado", email="ines@example.com")

    seed.enrol(u1, c101, status=EnrolmentStatus.SUSPENDED)
    seed.enrol(u2, c101)
    seed.enrol(u2, c102)
    seed.enrol(i1, c101)

    g1 = seed.group(1, c101, "G1", members=[u1, u2])
    g2 = seed.group(2, c101, "G2", members=[u1])
    seed.group(3, c102, "G3", members=[u2])

    instr = seed.role(3, "instr")
    seed.assign(instr, i1, c101)
    seed.assign(instr, i1, c102)

    seed.event(c101, NOW - timedelta(minutes=10))
    seed.event(c102, NOW - timedelta(minutes=20))

    return SimpleNamespace(c101=c101, c102=c102, u1=u1, u2=u2, i1=i1, g1=g1, g2=g2, instr=instr)
