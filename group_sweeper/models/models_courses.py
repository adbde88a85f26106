""" Modelos de cursos, métodos de inscrição e matrículas """

from sqlalchemy import Column, ForeignKey, Integer, String, DateTime, Enum as PgEnum, UniqueConstraint
from sqlalchemy.orm import relationship

from group_sweeper.infra.db import Base
from group_sweeper.enums.enums_enrolments import EnrolmentStatus, EnrolInstanceStatus


class Course(Base):
    """ Curso da plataforma, referenciado pelo ID """

    __tablename__ = "courses"

    id = Column(Integer, primary_key=True)
    shortname = Column(String(255), nullable=False, index=True)
    fullname = Column(String(255), nullable=False, default="")

    enrol_instances = relationship("EnrolInstance", back_populates="course", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<Course id={self.id} shortname={self.shortname}>"

class EnrolInstance(Base):
    """ Método de inscrição configurado no curso (manual, auto, etc.) """

    __tablename__ = "enrol_instances"

    id = Column(Integer, primary_key=True)
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)
    method = Column(String(20), nullable=False, default="manual")
    status = Column(PgEnum(EnrolInstanceStatus, name="enrol_instance_status_enum"), nullable=False, default=EnrolInstanceStatus.ENABLED)

    course = relationship("Course", back_populates="enrol_instances")
    enrolments = relationship("UserEnrolment", back_populates="instance", cascade="all, delete-orphan")

class UserEnrolment(Base):
    """ Matrícula de um usuário através de um método de inscrição """

    __tablename__ = "user_enrolments"
    __table_args__ = (UniqueConstraint("enrol_id", "user_id", name="uq_user_enrolment"),)

    id = Column(Integer, primary_key=True)
    enrol_id = Column(Integer, ForeignKey("enrol_instances.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(PgEnum(EnrolmentStatus, name="user_enrolment_status_enum"), nullable=False, default=EnrolmentStatus.ACTIVE)

    #Período de validade, NULL significa sem limite
    time_start = Column(DateTime(timezone=True), nullable=True)
    time_end = Column(DateTime(timezone=True), nullable=True)

    instance = relationship("EnrolInstance", back_populates="enrolments")
    user = relationship("User")
