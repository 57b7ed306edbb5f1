"""Starlette middleware that sends policies as response headers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from cspguard.policy.model import Policy

logger = structlog.get_logger()


def build_policy_headers(policies: Iterable[Policy]) -> dict[str, str]:
    """Group policies by header name.

    Policies sharing a disposition are joined into one comma-separated
    field value, in the order given.
    """
    grouped: dict[str, list[str]] = {}
    for policy in policies:
        value = policy.serialize()
        if not value:
            continue
        grouped.setdefault(policy.header_name, []).append(value)
    return {name: ", ".join(values) for name, values in grouped.items()}


class PolicyHeaders(BaseHTTPMiddleware):
    """Attach Content-Security-Policy headers to every response.

    Headers computed once at construction; the policies are not re-read per
    request. A header already set by the app is kept unless ``override``.
    """

    def __init__(self, app: Any, policies: Iterable[Policy], override: bool = False) -> None:
        super().__init__(app)
        self.headers = build_policy_headers(policies)
        self.override = override
        logger.info("policy_headers_configured", headers=sorted(self.headers))

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        for name, value in self.headers.items():
            if name in response.headers and not self.override:
                continue
            response.headers[name] = value
        return response
