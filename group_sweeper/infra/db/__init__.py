""" Inicializa o pacote de banco de dados

Reexporta utilidades de sessão e engine para uso nos demais módulos
"""

from .base import Base
from .database import SessionLocal, engine

#Define o que é exportado ao utilizar "from group_sweeper.infra.db import *"
__all__ = ["Base", "SessionLocal", "engine"]
