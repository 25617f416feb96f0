# -*- coding: utf-8 -*-
"""
Banco de dados das APIs de blog e de despesas.

Posts, comentários, categorias e transações ficam no mesmo banco; cada
requisição recebe uma sessão própria por meio de get_db.
"""

import os
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

DEFAULT_DATABASE_URL = "sqlite:///./demo.db"


def normalize_database_url(url: str) -> str:
    """Aceita o prefixo legado postgres:// trocando-o por postgresql://."""
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


def build_engine(url: str):
    """
    Engine para a URL informada. SQLite é compartilhado entre as threads do
    servidor; o SQLite em memória usa uma única conexão para não perder as tabelas.
    """
    url = normalize_database_url(url)
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url, pool_pre_ping=True, pool_recycle=3600)


DATABASE_URL = normalize_database_url(os.environ.get("DATABASE_URL", DEFAULT_DATABASE_URL))

engine = build_engine(DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
