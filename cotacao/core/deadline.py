# cotacao/core/deadline.py

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import httpx


@dataclass(frozen=True)
class Deadline:
    """Prazo absoluto baseado em time.monotonic()."""

    timeout: float
    expires_at: float

    @classmethod
    def after(cls, timeout: float) -> "Deadline":
        return cls(timeout=timeout, expires_at=time.monotonic() + timeout)

    def expired(self) -> bool:
        return time.monotonic() >= self.expires_at

    def remaining(self) -> float:
        return max(0.0, self.expires_at - time.monotonic())


def check_deadline(deadline: Deadline, logger: logging.Logger, timeout_message: str) -> None:
    """
    Verificação apenas informativa: registra no log se o prazo já estourou,
    mas não interrompe nada. Quem chama segue com a operação de qualquer jeito.
    """
    if deadline.expired():
        logger.warning(timeout_message)
    else:
        logger.info("processando...")


def http_timeout(deadline: Deadline) -> httpx.Timeout:
    # Nenhuma fase isolada (conexão, escrita, cada leitura) passa do que resta
    return httpx.Timeout(deadline.remaining())


def read_before_deadline(response: httpx.Response, deadline: Deadline) -> bytes:
    """
    Lê o corpo de uma resposta aberta com stream, abortando assim que o
    prazo total expira (entre um pedaço e outro). Estouro vira
    httpx.ReadTimeout, igual a um timeout de leitura do próprio httpx.
    """
    chunks = []
    if deadline.expired():
        raise httpx.ReadTimeout("prazo total esgotado antes da leitura", request=response.request)
    for chunk in response.iter_bytes():
        chunks.append(chunk)
        if deadline.remaining() <= 0:
            raise httpx.ReadTimeout("prazo total esgotado durante a leitura", request=response.request)
    return b"".join(chunks)
