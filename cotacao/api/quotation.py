# cotacao/api/quotation.py

import logging

import httpx
from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from cotacao.api.deps import get_http_client, get_store
from cotacao.core.errors import FetchError, StoreError
from cotacao.services.quotation import fetch_and_store_quotation
from cotacao.services.store import QuotationStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["cotacao"])


# Só GET: outros métodos recebem 405 (sem corpo, ver main.py)
@router.get("/cotacao")
def get_cotacao(
    store: QuotationStore = Depends(get_store),
    http_client: httpx.Client = Depends(get_http_client),
):
    """
    Busca o câmbio USD-BRL, grava no histórico e devolve só o bid,
    como string JSON pura (ex.: "5.4321"). Em caso de falha: 500 sem corpo.
    """
    try:
        quotation = fetch_and_store_quotation(http_client, store)
    except FetchError as e:
        logger.error("falha ao buscar cotação: %s", e)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    except StoreError as e:
        logger.error("falha ao gravar cotação: %s", e)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return JSONResponse(content=quotation.bid)
