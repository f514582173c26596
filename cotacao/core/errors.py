# cotacao/core/errors.py

from __future__ import annotations

from typing import Optional


class CotacaoError(Exception):
    """Erro base do projeto. Guarda a causa original em `cause`."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        base = super().__str__()
        if self.cause is None:
            return base
        return f"{base}: {self.cause}"


class FetchError(CotacaoError):
    """Falha ao buscar a cotação na API externa."""


class NetworkError(FetchError):
    """Erro de rede ou estouro de prazo na chamada externa."""


class DecodeError(FetchError):
    """Corpo ilegível, JSON malformado ou campo com tipo errado."""


class StoreError(CotacaoError):
    """Falha ao abrir o banco, criar a tabela ou gravar a cotação."""


class RequestConstructionError(CotacaoError):
    """Não foi possível montar a requisição (URL inválida, etc.)."""
