""" Modelos de grupos de curso e seus membros """

from datetime import datetime, timezone

from sqlalchemy import Column, ForeignKey, Integer, String, DateTime, UniqueConstraint
from sqlalchemy.orm import relationship

from group_sweeper.infra.db import Base


class Group(Base):
    """ Grupo de alunos dentro de um curso """

    __tablename__ = "groups"

    id = Column(Integer, primary_key=True)
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(254), nullable=False)

    course = relationship("Course")
    members = relationship("GroupMember", back_populates="group", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<Group id={self.id} course_id={self.course_id} name={self.name}>"

class GroupMember(Base):
    """ Participação de um usuário em um grupo """

    __tablename__ = "groups_members"
    __table_args__ = (UniqueConstraint("group_id", "user_id", name="uq_group_member"),)

    id = Column(Integer, primary_key=True)
    group_id = Column(Integer, ForeignKey("groups.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    time_added = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    group = relationship("Group", back_populates="members")
    user = relationship("User")
