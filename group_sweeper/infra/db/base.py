""" Camada base de modelos da aplicação

Define a classe Base da qual todos os modelos SQLAlchemy herdam
"""

from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    """ Classe base para todos os modelos SQLAlchemy """
    pass
