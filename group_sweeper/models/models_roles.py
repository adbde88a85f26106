""" Modelos de papéis e atribuições de papel por curso """

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from group_sweeper.infra.db import Base


class Role(Base):
    """ Papel da plataforma (ex.: ``instr`` para instrutores) """

    __tablename__ = "roles"

    id = Column(Integer, primary_key=True)
    shortname = Column(String(100), unique=True, nullable=False)
    name = Column(String(255), nullable=False, default="")

    def __repr__(self) -> str:
        return f"<Role id={self.id} shortname={self.shortname}>"

class RoleAssignment(Base):
    """ Atribuição de um papel a um usuário no contexto de um curso """

    __tablename__ = "role_assignments"
    __table_args__ = (UniqueConstraint("role_id", "user_id", "course_id", name="uq_role_assignment"),)

    id = Column(Integer, primary_key=True)
    role_id = Column(Integer, ForeignKey("roles.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)

    role = relationship("Role")
    user = relationship("User")
