"""Pydantic model and decoder for CSP violation reports."""

from __future__ import annotations

import json
from typing import IO, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

from cspguard.policy.errors import MalformedJson, MalformedReport


class Report(BaseModel):
    """Body of a ``csp-report`` violation report.

    Field values are taken as sent; every field defaults when absent or
    null. Integer fields must be JSON numbers.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    blocked_uri: str = Field("", alias="blocked-uri")
    document_uri: str = Field("", alias="document-uri")
    disposition: str = ""
    referrer: str = ""
    status_code: int = Field(0, alias="status-code", strict=True)
    original_policy: str = Field("", alias="original-policy")
    violated_directive: str = Field("", alias="violated-directive")
    effective_directive: str = Field("", alias="effective-directive")
    script_sample: str = Field("", alias="script-sample")
    source_file: str = Field("", alias="source-file")
    line_number: int = Field(0, alias="line-number", strict=True)
    column_number: int = Field(0, alias="column-number", strict=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


def _decode(payload: Any) -> Report:
    if not isinstance(payload, dict):
        raise MalformedReport("report body is not a JSON object")
    body = payload.get("csp-report")
    if body is None:
        raise MalformedReport("missing 'csp-report' object")
    try:
        return Report.model_validate(body)
    except ValidationError as exc:
        raise MalformedReport(f"'csp-report' has the wrong shape ({exc.error_count()} errors)") from exc


def parse_report_string(body: str | bytes) -> Report:
    """Decode a JSON violation report.

    Raises MalformedJson if the body is not JSON and MalformedReport if it
    lacks the ``csp-report`` wrapper object.
    """
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedJson(str(exc)) from exc
    return _decode(payload)


def parse_report_bytes(body: bytes) -> Report:
    return parse_report_string(body)


def parse_report(stream: IO[str] | IO[bytes]) -> Report:
    """Decode a violation report read from a file-like object."""
    return parse_report_string(stream.read())
