# cotacao/core/database.py

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

Base = declarative_base()


def make_engine(path: str) -> Engine:
    """Engine SQLite para o arquivo informado."""
    # Para SQLite, é importante usar connect_args={"check_same_thread": False}:
    # a mesma engine é compartilhada pelas threads que atendem as requisições.
    return create_engine(
        f"sqlite:///{path}",
        connect_args={"check_same_thread": False},
        echo=False,
        future=True,
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
