# cotacao/core/logging.py

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configura o logging do processo (servidor ou cliente)."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
