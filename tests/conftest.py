"""Fixtures compartilhadas: payload da AwesomeAPI, banco temporário e API com dependências trocadas."""

import json
import socket
import threading
import time

import httpx
import pytest
from fastapi.testclient import TestClient

from cotacao.api.deps import get_http_client, get_store
from cotacao.services.store import QuotationStore
from main import app

SAMPLE_USDBRL = {
    "code": "USD",
    "codein": "BRL",
    "name": "Dólar/Real",
    "high": "5.45",
    "low": "5.40",
    "varBid": "0.01",
    "pctChange": "0.2",
    "bid": "5.4321",
    "ask": "5.4325",
    "timestamp": "1700000000",
    "create_date": "2023-11-14 00:00:00",
}


@pytest.fixture
def sample_payload() -> dict:
    return {"USDBRL": dict(SAMPLE_USDBRL)}


@pytest.fixture
def store(tmp_path):
    """Banco SQLite novo para cada teste, já com a tabela criada."""
    s = QuotationStore.open(str(tmp_path / "cotacao.db"))
    s.ensure_schema()
    yield s
    s.close()


class UpstreamStub:
    """Simula a AwesomeAPI via httpx.MockTransport e conta as chamadas."""

    def __init__(self, handler):
        self.handler = handler
        self.calls = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        return self.handler(request)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))


@pytest.fixture
def upstream_ok(sample_payload):
    return UpstreamStub(lambda request: httpx.Response(200, json=sample_payload))


@pytest.fixture
def make_api(store):
    """Monta um TestClient com o banco temporário e a API externa simulada."""

    def _make(upstream: UpstreamStub, api_store=None) -> TestClient:
        http_client = upstream.client()
        app.dependency_overrides[get_store] = lambda: api_store or store
        app.dependency_overrides[get_http_client] = lambda: http_client
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


def stored_documents(s: QuotationStore) -> list:
    return [json.loads(raw) for _, raw in s.records()]


@pytest.fixture
def slow_server():
    """
    Servidor HTTP cru que responde a cotação de exemplo mandando o corpo
    em pedaços de 20 bytes a cada 100ms (mais de 1s no total).
    Devolve a URL.
    """
    body = json.dumps({"USDBRL": SAMPLE_USDBRL}).encode("utf-8")
    head = (
        b"HTTP/1.1 200 OK\r\n"
        b"Content-Type: application/json\r\n"
        b"Content-Length: %d\r\n"
        b"Connection: close\r\n\r\n" % len(body)
    )

    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen()
    sock.settimeout(5)

    def serve():
        while True:
            try:
                conn, _ = sock.accept()
            except OSError:
                return
            with conn:
                try:
                    conn.recv(65536)
                    conn.sendall(head)
                    for i in range(0, len(body), 20):
                        conn.sendall(body[i:i + 20])
                        time.sleep(0.1)
                except OSError:
                    # cliente desistiu no meio
                    pass

    thread = threading.Thread(target=serve, daemon=True)
    thread.start()

    host, port = sock.getsockname()
    yield f"http://{host}:{port}/json/last/USD-BRL"

    sock.close()
    thread.join(timeout=2)
