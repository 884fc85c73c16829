import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

from app.config import Settings, configure_logging
from app.responder import HELLO_BODY, STATUS_CODE, response_headers

LOGGER = logging.getLogger(__name__)

DRAIN_CHUNK = 64 * 1024
MAX_DRAIN = 1024 * 1024


class Handler(BaseHTTPRequestHandler):
    protocol_version = "HTTP/1.1"

    def __getattr__(self, name: str):
        # http.server picks the handler with hasattr(self, "do_" + command),
        # so any method, standard or not, resolves to the same reply
        if name.startswith("do_"):
            return self._respond
        raise AttributeError(name)

    def log_message(self, format: str, *args) -> None:  # noqa: A002 - keep default signature
        LOGGER.debug("%s - %s", self.address_string(), format % args)

    def _body_length(self):
        """Declared body size, or None when the body can't be skipped safely."""
        if "chunked" in self.headers.get("Transfer-Encoding", "").lower():
            return None
        raw = self.headers.get("Content-Length")
        if raw is None:
            return 0
        if not raw.strip().isdigit():
            return None
        length = int(raw)
        return length if length <= MAX_DRAIN else None

    def _discard_body(self) -> None:
        length = self._body_length()
        if length is None:
            self.close_connection = True
            return
        while length > 0:
            chunk = self.rfile.read(min(length, DRAIN_CHUNK))
            if not chunk:
                self.close_connection = True
                return
            length -= len(chunk)

    def _respond(self) -> None:
        self.send_response(STATUS_CODE)
        for name, value in response_headers().items():
            self.send_header(name, value)
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(HELLO_BODY)
        # a kept-alive connection needs the body consumed before the next request
        self._discard_body()


class Server(ThreadingHTTPServer):
    def __init__(self, settings: Settings):
        self.address_family = settings.address_family()
        super().__init__((settings.host, settings.port), Handler)


def build_server(settings: Settings) -> ThreadingHTTPServer:
    """Bind the listener; ``OSError`` from the bind is left to the caller."""
    return Server(settings)


def run() -> None:
    configure_logging()
    settings = Settings.from_env()
    server = build_server(settings)
    LOGGER.info("Server listening on %s", settings.url)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()


if __name__ == "__main__":
    run()
