from __future__ import annotations

import logging
import os
import socket
import sys
from typing import Mapping, Optional

from pydantic import BaseModel

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


class Settings(BaseModel):
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Read ``HOST`` and ``PORT``; unset or empty values use the defaults.

        ``PORT`` is coerced to an int, so a non-numeric value raises
        ``pydantic.ValidationError`` before anything is bound.
        """
        env = os.environ if environ is None else environ
        return cls(
            host=env.get("HOST") or DEFAULT_HOST,
            port=env.get("PORT") or DEFAULT_PORT,
        )

    def address_family(self) -> socket.AddressFamily:
        """First family the resolver returns for ``host``, so ``::1`` binds IPv6."""
        return socket.getaddrinfo(self.host, self.port, type=socket.SOCK_STREAM)[0][0]

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"


def configure_logging(environ: Optional[Mapping[str, str]] = None) -> None:
    env = os.environ if environ is None else environ
    logging.basicConfig(
        level=env.get("LOG_LEVEL", "INFO").upper(),
        format="%(message)s",
        stream=sys.stdout,
    )
