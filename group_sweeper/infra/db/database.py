"""Configuração de engine e sessões com SQLAlchemy.

Este módulo cria o engine do SQLAlchemy e a fábrica de sessões usadas
pela tarefa de reconciliação, além dos eventos de instrumentação do pool
de conexões
"""

import os

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from group_sweeper.core.config import settings
import group_sweeper.metrics as metrics


#Exibe as queries SQL no console quando a variável DEBUG está habilitada
DEBUG = os.getenv("DEBUG", "false").lower() == "true"

#Criação do engine que gerencia as conexões com o banco de dados
engine = create_engine(settings.DATABASE_URL, echo=DEBUG, pool_pre_ping=True)

#Configurando sessões de banco de Dados
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ---------- Instrumentação do pool de conexões ----------
@event.listens_for(engine, "connect")
def connect(dbapi_conn, connection_record):
    """ Atualiza o tamanho do pool a cada nova conexão """
    #Nem todo pool expõe size() (ex.: SQLite em memória)
    size = getattr(engine.pool, "size", None)
    if callable(size):
        metrics.DB_POOL_SIZE.set(size())

@event.listens_for(engine, "checkout")
def checkout(dbapi_conn, connection_record, connection_proxy):
    """ Registra o número de conexões ativas """
    checkedout = getattr(engine.pool, "checkedout", None)
    if callable(checkedout):
        metrics.DB_POOL_CHECKOUTS.set(checkedout())

@event.listens_for(engine, "checkin")
def checkin(dbapi_conn, connection_record):
    """ Atualiza o contador quando a conexão é devolvida ao pool """
    checkedout = getattr(engine.pool, "checkedout", None)
    if callable(checkedout):
        metrics.DB_POOL_CHECKOUTS.set(checkedout())

