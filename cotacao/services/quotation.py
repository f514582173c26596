# cotacao/services/quotation.py

from __future__ import annotations

import httpx

from cotacao.core.config import settings
from cotacao.schemas.quotation import Quotation
from cotacao.services.exchange import fetch_quotation
from cotacao.services.store import QuotationStore


def fetch_and_store_quotation(
    http_client: httpx.Client,
    store: QuotationStore,
    *,
    fetch_timeout: float | None = None,
    store_timeout: float | None = None,
) -> Quotation:
    """
    Busca a cotação e grava no histórico, nessa ordem, cada etapa com o
    seu próprio prazo. Sem retentativas: qualquer FetchError/StoreError
    sobe para quem chamou e nada mais é feito.
    """
    if fetch_timeout is None:
        fetch_timeout = settings.upstream_timeout
    if store_timeout is None:
        store_timeout = settings.store_timeout

    quotation = fetch_quotation(http_client, timeout=fetch_timeout)
    store.append(quotation, timeout=store_timeout)
    return quotation
