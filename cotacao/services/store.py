# cotacao/services/store.py

from __future__ import annotations

import logging
from typing import List, Tuple

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from cotacao.core.database import Base, make_engine, make_session_factory
from cotacao.core.deadline import Deadline, check_deadline
from cotacao.core.errors import StoreError
from cotacao.models.quotation import QuotationRecord
from cotacao.schemas.quotation import Quotation, QuotationEnvelope

logger = logging.getLogger(__name__)


class QuotationStore:
    """
    Histórico de cotações em SQLite (tabela `quotation`).

    Uma instância por processo: aberta no startup do servidor e
    compartilhada entre as requisições. Cada gravação usa a sua própria
    sessão, então não há trava explícita aqui.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._session_factory = make_session_factory(engine)

    @classmethod
    def open(cls, path: str) -> "QuotationStore":
        """Abre (e cria, se não existir) o arquivo do banco."""
        engine = make_engine(path)
        try:
            # A engine é preguiçosa: conecta agora para criar o arquivo
            with engine.connect():
                pass
        except SQLAlchemyError as e:
            engine.dispose()
            raise StoreError(f"não foi possível abrir o banco {path}", e) from e
        return cls(engine)

    def ensure_schema(self) -> None:
        # create_all usa checkfirst=True, então pode ser chamado várias vezes
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            logger.error("falha ao criar a tabela: %s", e)
            raise StoreError("falha ao criar a tabela quotation", e) from e

    def append(self, quotation: Quotation, timeout: float) -> int:
        """Grava a cotação completa como JSON. Retorna o id da nova linha."""
        deadline = Deadline.after(timeout)
        check_deadline(deadline, logger, "prazo esgotado ao gravar no banco.")

        payload = QuotationEnvelope(usdbrl=quotation).to_json()

        try:
            with self._session_factory() as db:
                record = QuotationRecord(json=payload)
                db.add(record)
                db.commit()
                db.refresh(record)
                return record.id
        except SQLAlchemyError as e:
            logger.error("falha ao inserir registro: %s", e)
            raise StoreError("falha ao gravar a cotação", e) from e

    def count(self) -> int:
        try:
            with self._session_factory() as db:
                return db.execute(select(func.count(QuotationRecord.id))).scalar_one()
        except SQLAlchemyError as e:
            raise StoreError("falha ao contar cotações", e) from e

    def records(self) -> List[Tuple[int, str]]:
        """Pares (id, json) em ordem de inserção."""
        try:
            with self._session_factory() as db:
                rows = db.execute(
                    select(QuotationRecord.id, QuotationRecord.json).order_by(QuotationRecord.id)
                ).all()
        except SQLAlchemyError as e:
            raise StoreError("falha ao ler cotações", e) from e
        return [(row.id, row.json) for row in rows]

    def close(self) -> None:
        self.engine.dispose()
