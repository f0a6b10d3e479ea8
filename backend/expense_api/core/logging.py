# expense_api/core/logging.py
import json
import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from expense_api.core.config import settings

log = logging.getLogger("req")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = None) -> None:
    """Set up root logging once; safe to call again (e.g. from tests)."""
    logging.basicConfig(level=level or settings.LOG_LEVEL, format=LOG_FORMAT)
    logging.getLogger().setLevel(level or settings.LOG_LEVEL)


class RequestLogMiddleware(BaseHTTPMiddleware):
    """One JSON line per request, tagged with X-Request-ID."""

    async def dispatch(self, request: Request, call_next):
        t0 = time.perf_counter()
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        response: Response = await call_next(request)
        dt_ms = int((time.perf_counter() - t0) * 1000)
        response.headers["X-Request-ID"] = rid

        payload = {
            "rid": rid,
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": dt_ms,
            "client_ip": request.client.host if request.client else "unknown",
        }
        log.info(json.dumps(payload, ensure_ascii=False))
        return response
