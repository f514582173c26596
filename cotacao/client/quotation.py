# cotacao/client/quotation.py

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx

from cotacao.core.config import settings
from cotacao.core.deadline import Deadline, http_timeout, read_before_deadline
from cotacao.core.errors import NetworkError, RequestConstructionError
from cotacao.core.logging import setup_logging

logger = logging.getLogger(__name__)

OUTPUT_PREFIX = "Dólar: "


def request_bid(
    url: str,
    timeout: float,
    http_client: Optional[httpx.Client] = None,
) -> bytes:
    """
    Chama GET /cotacao e devolve o corpo cru da resposta.

    O prazo vale para a chamada inteira, leitura do corpo incluída.

    Nenhum erro é propagado: cada falha é registrada no log e o que já
    foi lido (possivelmente nada) é devolvido. O status HTTP não é
    verificado.
    """
    deadline = Deadline.after(timeout)

    owns_client = http_client is None
    if http_client is None:
        http_client = httpx.Client()

    body = b""
    try:
        try:
            request = http_client.build_request("GET", url, timeout=http_timeout(deadline))
        except (httpx.InvalidURL, ValueError) as e:
            logger.error("%s", RequestConstructionError(f"requisição inválida para {url!r}", e))
            return body

        try:
            response = http_client.send(request, stream=True)
        except httpx.HTTPError as e:
            logger.error("%s", NetworkError("falha ao chamar o servidor", e))
            return body

        try:
            body = read_before_deadline(response, deadline)
        except httpx.HTTPError as e:
            logger.error("%s", NetworkError("falha ao ler a resposta", e))
        finally:
            response.close()
    finally:
        if owns_client:
            http_client.close()

    return body


def write_bid(path: str | Path, body: bytes) -> None:
    """Escreve `Dólar: <corpo>` no arquivo, sobrescrevendo o anterior."""
    try:
        Path(path).write_bytes(OUTPUT_PREFIX.encode("utf-8") + body)
    except OSError as e:
        logger.error("falha ao escrever %s: %s", path, e)


def run(
    url: str | None = None,
    output_path: str | Path | None = None,
    timeout: float | None = None,
    http_client: Optional[httpx.Client] = None,
) -> bytes:
    url = url or settings.CLIENT_URL
    output_path = output_path or settings.OUTPUT_PATH
    if timeout is None:
        timeout = settings.client_timeout

    body = request_bid(url, timeout, http_client=http_client)
    write_bid(output_path, body)
    return body


def main() -> None:
    setup_logging(settings.LOG_LEVEL)
    run()
