# cotacao/api/deps.py

from typing import Iterator

import httpx
from fastapi import Request

from cotacao.services.store import QuotationStore


def get_store(request: Request) -> QuotationStore:
    # Instância aberta no startup (ver main.py)
    return request.app.state.store


def get_http_client() -> Iterator[httpx.Client]:
    """Cliente HTTP para a API de cotação, fechado ao fim da requisição."""
    client = httpx.Client()
    try:
        yield client
    finally:
        client.close()
