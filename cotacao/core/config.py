# cotacao/core/config.py

import os
from dotenv import load_dotenv

# Caminho da raiz do projeto (onde está o main.py e o .env)
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
ENV_PATH = os.path.join(BASE_DIR, ".env")

# Carrega variáveis do arquivo .env, se existir
if os.path.exists(ENV_PATH):
    load_dotenv(ENV_PATH)


class Settings:
    def __init__(self) -> None:
        # Banco SQLite local com o histórico de cotações
        self.DATABASE_PATH: str = os.getenv("DATABASE_PATH", "cotacao.db")

        # API de cotações (AwesomeAPI)
        self.UPSTREAM_URL: str = os.getenv(
            "UPSTREAM_URL",
            "https://economia.awesomeapi.com.br/json/last/USD-BRL",
        )

        # Prazos em milissegundos
        self.UPSTREAM_TIMEOUT_MS: int = int(os.getenv("UPSTREAM_TIMEOUT_MS", "200"))
        self.STORE_TIMEOUT_MS: int = int(os.getenv("STORE_TIMEOUT_MS", "200"))
        self.CLIENT_TIMEOUT_MS: int = int(os.getenv("CLIENT_TIMEOUT_MS", "300"))

        self.SERVER_HOST: str = os.getenv("SERVER_HOST", "0.0.0.0")
        self.SERVER_PORT: int = int(os.getenv("SERVER_PORT", "8080"))

        self.CLIENT_URL: str = os.getenv("CLIENT_URL", "http://localhost:8080/cotacao")
        self.OUTPUT_PATH: str = os.getenv("OUTPUT_PATH", "cotacao.txt")

        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def upstream_timeout(self) -> float:
        return self.UPSTREAM_TIMEOUT_MS / 1000

    @property
    def store_timeout(self) -> float:
        return self.STORE_TIMEOUT_MS / 1000

    @property
    def client_timeout(self) -> float:
        return self.CLIENT_TIMEOUT_MS / 1000


settings = Settings()
