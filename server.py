"""Serve the FastAPI responder under uvicorn using the same HOST/PORT settings."""

import logging
import socket

import uvicorn

from app.config import Settings, configure_logging
from app.main import app

LOGGER = logging.getLogger(__name__)


def bind_socket(settings: Settings) -> socket.socket:
    """Bind before handing over to uvicorn so a bind failure raises ``OSError``."""
    sock = socket.socket(settings.address_family(), socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((settings.host, settings.port))
    except OSError:
        sock.close()
        raise
    return sock


def run() -> None:
    configure_logging()
    settings = Settings.from_env()
    sock = bind_socket(settings)
    LOGGER.info("Server listening on %s", settings.url)
    config = uvicorn.Config(app=app, log_level="warning", lifespan="off")
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


if __name__ == "__main__":
    run()
