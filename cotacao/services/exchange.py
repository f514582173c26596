from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from cotacao.core.config import settings
from cotacao.core.deadline import Deadline, check_deadline, http_timeout, read_before_deadline
from cotacao.core.errors import DecodeError, FetchError, NetworkError
from cotacao.schemas.quotation import Quotation, QuotationEnvelope

logger = logging.getLogger(__name__)


def fetch_quotation(
    http_client: httpx.Client,
    timeout: float,
    url: str | None = None,
) -> Quotation:
    """
    Busca a cotação atual do USD-BRL na AwesomeAPI.

    O prazo vale para a chamada inteira (conexão + leitura do corpo). A
    checagem anterior à chamada só registra no log; a chamada é feita
    mesmo assim.

    O status HTTP não é verificado: qualquer corpo JSON bem formado é
    aceito e campos ausentes ficam como "".
    """
    deadline = Deadline.after(timeout)
    check_deadline(deadline, logger, "prazo esgotado ao processar a requisição.")

    url = url or settings.UPSTREAM_URL

    try:
        with http_client.stream("GET", url, timeout=http_timeout(deadline)) as r:
            body = read_before_deadline(r, deadline)
    except httpx.HTTPError as e:
        raise NetworkError("falha de rede ao buscar cotação", e) from e
    except httpx.InvalidURL as e:
        raise FetchError("URL da API de cotação inválida", e) from e

    try:
        envelope = QuotationEnvelope.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError("resposta da API de cotação inválida", e) from e

    return envelope.usdbrl
