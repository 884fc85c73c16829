from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from .responder import HELLO_TEXT, STATUS_CODE

app = FastAPI(title="Hello World", version="1.0.0", docs_url=None, redoc_url=None, openapi_url=None)


@app.middleware("http")
async def hello(request: Request, call_next) -> PlainTextResponse:
    # answers before routing, so no method or path can reach a 404/405
    # PlainTextResponse appends "; charset=utf-8" to text/plain
    return PlainTextResponse(HELLO_TEXT, status_code=STATUS_CODE, media_type="text/plain")
