"""Policy string parser.

Follows the "parse a serialized CSP" algorithm of CSP Level 3, except that
a repeated directive aborts the parse unless the caller opts into the
lenient behaviour with ``DuplicatePolicy.ignore``.
"""

from __future__ import annotations

import enum
import re

import structlog

from cspguard.policy.charset import ASCII_WHITESPACE
from cspguard.policy.directive import Directive, validate_value
from cspguard.policy.directives import Directives
from cspguard.policy.errors import DuplicateDirective
from cspguard.policy.names import validate_name

logger = structlog.get_logger()

_WHITESPACE_RUN = re.compile(r"[\t\n\f\r ]+")


class DuplicatePolicy(str, enum.Enum):
    """What to do when a directive name repeats within one policy."""

    error = "error"
    ignore = "ignore"


def parse_directives(
    raw: str,
    *,
    duplicates: DuplicatePolicy = DuplicatePolicy.error,
) -> Directives:
    """Parse a serialized policy into an ordered ``Directives`` set.

    Any invalid name, duplicate or value token raises a DirectiveError and
    no partial result is returned.
    """
    duplicates = DuplicatePolicy(duplicates)
    entries: list[Directive] = []
    seen: set[str] = set()

    for segment in raw.split(";"):
        segment = segment.strip(ASCII_WHITESPACE)
        if not segment:
            continue

        parts = _WHITESPACE_RUN.split(segment, maxsplit=1)
        name = parts[0]
        rest = parts[1] if len(parts) > 1 else ""
        if not name:
            continue

        validate_name(name)

        key = name.lower()
        if key in seen:
            if duplicates is DuplicatePolicy.ignore:
                logger.warning("duplicate_directive_ignored", directive=name)
                continue
            raise DuplicateDirective(name, f"directive '{name}' is a duplicate")
        seen.add(key)

        values = [v for v in _WHITESPACE_RUN.split(rest) if v]
        for value in values:
            validate_value(value)

        entries.append(Directive(name, tuple(values)))

    return Directives(entries)
