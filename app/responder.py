STATUS_CODE = 200
CONTENT_TYPE = "text/plain; charset=utf-8"
HELLO_TEXT = "Hello World"
HELLO_BODY = HELLO_TEXT.encode("utf-8")


def response_headers() -> dict[str, str]:
    """Headers sent with every response, regardless of the request."""
    return {
        "Content-Type": CONTENT_TYPE,
        "Content-Length": str(len(HELLO_BODY)),
    }
