"""
HTTP responder.

Serves a fixed greeting on the resolved endpoint until interrupted.
"""

import logging
import socket

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from lanbeam.config import APP_NAME, GREETING
from lanbeam.discovery.models import ResolvedEndpoint

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title=APP_NAME, docs_url=None, redoc_url=None, openapi_url=None)

    @app.get("/{path:path}", response_class=PlainTextResponse)
    async def greet(path: str):
        return GREETING

    return app


def bind_socket(endpoint: ResolvedEndpoint) -> socket.socket:
    """Bind a listening-ready TCP socket to the endpoint's socket address."""
    sock = socket.socket(endpoint.family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind(endpoint.socket_address)
    except OSError:
        sock.close()
        raise
    return sock


def serve(endpoint: ResolvedEndpoint) -> bool:
    """
    Run the server on `endpoint` until Ctrl+C.

    Returns False if the server could not be started or failed while
    running. The socket is bound here rather than by uvicorn, which
    exits the process when a bind fails.
    """
    server = uvicorn.Server(uvicorn.Config(create_app(), log_level="warning"))

    logger.info(f"Starting HTTP server on {endpoint.socket_address}")
    try:
        sock = bind_socket(endpoint)
    except OSError as e:
        logger.error(f"server error: {e}")
        return False

    with sock:
        try:
            # uvicorn installs its own SIGINT/SIGTERM handlers and exits gracefully
            server.run(sockets=[sock])
        except Exception as e:
            logger.error(f"server error: {e}", exc_info=True)
            return False

    if not server.started:
        logger.error("server error: the application failed to start")
        return False

    print("Shutting down server")
    return True
