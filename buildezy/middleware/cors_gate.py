"""Origin allow-list gate — rejects unknown cross-origin callers before routing."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

from buildezy.core.exceptions import ForbiddenError, error_response

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type", "Authorization"]


@dataclass(frozen=True)
class CorsPolicy:
    """The set of origins allowed to call the API from a browser."""

    allow_origins: frozenset[str]

    @classmethod
    def from_origins(cls, origins) -> CorsPolicy:
        return cls(allow_origins=frozenset(o.rstrip("/") for o in origins))

    def allows(self, origin: str | None) -> bool:
        # Same-origin and server-to-server calls carry no Origin header
        return origin is None or origin in self.allow_origins

    def preflight_headers(self, origin: str | None) -> dict[str, str]:
        headers = {
            "Access-Control-Allow-Methods": ", ".join(ALLOWED_METHODS),
            "Access-Control-Allow-Headers": ", ".join(ALLOWED_HEADERS),
            "Vary": "Origin",
        }
        if origin is not None:
            headers["Access-Control-Allow-Origin"] = origin
            headers["Access-Control-Allow-Credentials"] = "true"
        return headers


class CorsGateMiddleware(BaseHTTPMiddleware):
    """Enforces the allow-list and answers OPTIONS for every path.

    Sits outside Starlette's CORSMiddleware: a blocked origin gets a 403
    before any handler (or the database) sees the request, and every OPTIONS
    request is answered here with 204 and the CORS headers. CORSMiddleware
    then only decorates actual requests from allowed origins.
    """

    def __init__(self, app, policy: CorsPolicy):
        super().__init__(app)
        self.policy = policy

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        origin = request.headers.get("origin")
        if not self.policy.allows(origin):
            logger.warning("Blocked by CORS: %s", origin)
            return error_response(ForbiddenError())

        if origin is not None:
            logger.debug("Allowed CORS request from: %s", origin)
        if request.method == "OPTIONS":
            return Response(
                status_code=status.HTTP_204_NO_CONTENT,
                headers=self.policy.preflight_headers(origin),
            )
        return await call_next(request)
