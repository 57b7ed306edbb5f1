"""Exceptions raised while parsing policies and decoding reports."""

from __future__ import annotations


class CSPError(Exception):
    """Base class for every error raised by cspguard."""

    kind = "csp error"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.detail:
            return f"{self.kind}: {self.detail}"
        return self.kind


class DirectiveError(CSPError):
    """A policy string or directive failed validation.

    ``token`` is the directive name or value token that caused the failure.
    """

    kind = "invalid directive"

    def __init__(self, token: str, detail: str = "") -> None:
        self.token = token
        super().__init__(detail)


class UnknownDirectiveName(DirectiveError):
    kind = "unknown directive name"


class RemovedDirectiveName(DirectiveError):
    kind = "deprecated directive name"


class DuplicateDirective(DirectiveError):
    kind = "duplicate directive"


class CommaInValue(DirectiveError):
    kind = "directive value contains comma"


class InvalidValueCharacter(DirectiveError):
    kind = "invalid characters in value"


class ReportError(CSPError):
    """A violation report body could not be decoded."""

    kind = "invalid report"


class MalformedReport(ReportError):
    kind = "json report malformed"


class MalformedJson(ReportError):
    kind = "malformed json"
