"""Definição do modelo de usuários da plataforma."""

from sqlalchemy import Column, Integer, String, Boolean

from group_sweeper.infra.db import Base


class User(Base):
    """ Usuário da plataforma de ensino """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String(100), unique=True, nullable=False)
    email = Column(String(255), index=True, nullable=True)

    #Campos de nome usados na montagem do nome exibido
    firstname = Column(String(100), nullable=False, default="")
    lastname = Column(String(100), nullable=False, default="")
    middlename = Column(String(100), nullable=True)
    alternatename = Column(String(100), nullable=True)
    firstnamephonetic = Column(String(100), nullable=True)
    lastnamephonetic = Column(String(100), nullable=True)

    #Conta suspensa na plataforma inteira
    suspended = Column(Boolean, default=False, nullable=False)
    deleted = Column(Boolean, default=False, nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username})>"
