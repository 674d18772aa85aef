"""Logging setup: JSON lines for production, request ids, calculation timing."""

from __future__ import annotations

import json
import logging
import time
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

ACCESS_LOGGER = "solarscope.access"

# Record attributes promoted to top-level JSON keys when present.
_EXTRA_FIELDS = (
    "method", "path", "status_code", "duration_ms", "client_ip",
    "calculation", "site", "scenario", "panel_count", "is_valid",
)

# Probes are logged at DEBUG so they do not flood the access log.
_QUIET_PATHS = frozenset({"/health"})


class JSONFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        request_id = request_id_var.get()
        if request_id:
            payload["request_id"] = request_id

        payload.update(
            (key, getattr(record, key))
            for key in _EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )

        if record.exc_info and record.exc_info[1]:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag every request with an ``X-Request-ID`` and log its status and duration."""

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:8]
        token = request_id_var.set(request_id)
        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
            elapsed = round((time.perf_counter() - started) * 1000, 1)
            response.headers["X-Request-ID"] = request_id

            path = request.url.path
            level = logging.DEBUG if path in _QUIET_PATHS else logging.INFO
            logging.getLogger(ACCESS_LOGGER).log(
                level,
                "%s %s -> %d (%.1f ms)",
                request.method, path, response.status_code, elapsed,
                extra={
                    "method": request.method,
                    "path": path,
                    "status_code": response.status_code,
                    "duration_ms": elapsed,
                    "client_ip": request.client.host if request.client else None,
                },
            )
            return response
        finally:
            request_id_var.reset(token)


@contextmanager
def calculation_timer(logger: logging.Logger, calculation: str, **fields: Any) -> Iterator[dict[str, Any]]:
    """Time an engine call and log it once it returns.

    The yielded dict is merged into the log record, so callers can attach
    results (e.g. ``panel_count``) that are only known after the call.
    """
    extra: dict[str, Any] = {"calculation": calculation, **fields}
    started = time.perf_counter()
    yield extra
    extra["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
    logger.info("%s finished in %.2f ms", calculation, extra["duration_ms"], extra=extra)


def setup_logging(json_format: bool = False, level: int = logging.INFO) -> None:
    """Install a single stream handler on the root logger."""
    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
