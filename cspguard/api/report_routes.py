"""Violation report intake endpoint."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from cspguard.config.loader import get_settings
from cspguard.models.report import parse_report_bytes
from cspguard.policy.errors import ReportError

logger = structlog.get_logger()

_ACCEPTED_CONTENT_TYPES = frozenset({
    "application/csp-report",
    "application/json",
})


async def receive_report(request: Request) -> Response:
    """Decode and log a CSP violation report.

    Returns 204 on success, 400 for an undecodable body, 413 when the body
    exceeds ``max_report_bytes`` and 415 for other content types.
    """
    settings = get_settings()

    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type not in _ACCEPTED_CONTENT_TYPES:
        logger.info("csp_report_rejected", reason="content_type", content_type=content_type)
        return Response(status_code=415)

    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > settings.max_report_bytes:
        logger.info("csp_report_rejected", reason="too_large", size=int(declared))
        return Response(status_code=413)

    body = await request.body()
    if len(body) > settings.max_report_bytes:
        logger.info("csp_report_rejected", reason="too_large", size=len(body))
        return Response(status_code=413)

    try:
        report = parse_report_bytes(body)
    except ReportError as exc:
        logger.info("csp_report_rejected", reason=exc.kind, detail=exc.detail)
        return JSONResponse({"error": exc.kind, "detail": exc.detail}, status_code=400)

    logger.warning("csp_violation_reported", **report.model_dump())
    return Response(status_code=204)


def create_report_router(path: str | None = None) -> APIRouter:
    """Build a router serving ``receive_report`` at ``path`` (default from settings)."""
    report_router = APIRouter(tags=["csp-report"])
    report_router.add_api_route(
        path or get_settings().report_path,
        receive_report,
        methods=["POST"],
        status_code=204,
    )
    return report_router
