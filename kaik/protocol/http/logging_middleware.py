from __future__ import annotations

import logging
import time
import uuid
from typing import Awaitable, Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "x-request-id"
BOARDS_PREFIX = "/api/boards/"


def board_id_from_path(path: str) -> Optional[str]:
    """Session id of a ``/api/boards/{id}[/...]`` path, else ``None``."""
    if not path.startswith(BOARDS_PREFIX):
        return None
    board_id = path[len(BOARDS_PREFIX):].split("/", 1)[0]
    return board_id or None


class RequestIDLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its id and, for session routes, its board id."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start = time.perf_counter()
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        board_id = board_id_from_path(request.url.path)

        logger.info(
            "request",
            extra={
                "request_id": request_id,
                "board_id": board_id,
                "method": request.method,
                "path": request.url.path,
            },
        )
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "response",
            extra={
                "request_id": request_id,
                "board_id": board_id,
                "status_code": response.status_code,
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return response
