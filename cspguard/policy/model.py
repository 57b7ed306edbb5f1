"""Policies with a disposition, and the header names they travel under."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from cspguard.policy.directives import Directives
from cspguard.policy.parser import DuplicatePolicy, parse_directives

CONTENT_SECURITY_POLICY = "Content-Security-Policy"
CONTENT_SECURITY_POLICY_REPORT_ONLY = "Content-Security-Policy-Report-Only"


class Disposition(str, enum.Enum):
    """Whether a policy blocks violations or only reports them.

    Values match the ``disposition`` field of violation reports.
    """

    enforce = "enforce"
    report_only = "report"


_HEADER_NAMES: dict[Disposition, str] = {
    Disposition.enforce: CONTENT_SECURITY_POLICY,
    Disposition.report_only: CONTENT_SECURITY_POLICY_REPORT_ONLY,
}


def header_name_for(disposition: Disposition | str) -> str:
    """Return the response header a policy with ``disposition`` is sent in."""
    return _HEADER_NAMES[Disposition(disposition)]


@dataclass
class Policy:
    """A directive set plus its disposition."""

    directives: Directives = field(default_factory=Directives)
    disposition: Disposition = Disposition.enforce

    @classmethod
    def parse(
        cls,
        raw: str,
        disposition: Disposition | str = Disposition.enforce,
        *,
        duplicates: DuplicatePolicy = DuplicatePolicy.error,
    ) -> Policy:
        return cls(parse_directives(raw, duplicates=duplicates), Disposition(disposition))

    @property
    def header_name(self) -> str:
        return header_name_for(self.disposition)

    def serialize(self) -> str:
        return self.directives.serialize()

    def as_header(self) -> tuple[str, str]:
        """Return ``(header_name, header_value)`` for this policy."""
        return self.header_name, self.serialize()


def parse_policies(
    header_value: str,
    disposition: Disposition | str = Disposition.enforce,
    *,
    duplicates: DuplicatePolicy = DuplicatePolicy.error,
) -> list[Policy]:
    """Parse a header field value that may hold several comma-separated policies.

    Each policy is parsed on its own, so one directive may appear in more
    than one of them. Blank policies are skipped.
    """
    policies = []
    for raw in header_value.split(","):
        if not raw.strip():
            continue
        policies.append(Policy.parse(raw, disposition, duplicates=duplicates))
    return policies
