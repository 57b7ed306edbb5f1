"""Known CSP directive names.

See https://www.w3.org/TR/CSP3/#csp-directives and
https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers/Content-Security-Policy
"""

from __future__ import annotations

import enum

from cspguard.policy.errors import RemovedDirectiveName, UnknownDirectiveName


class DirectiveStatus(str, enum.Enum):
    active = "active"
    deprecated = "deprecated"
    removed = "removed"
    unknown = "unknown"


ACTIVE_DIRECTIVES = frozenset({
    # Fetch directives
    "child-src",
    "connect-src",
    "default-src",
    "font-src",
    "frame-src",
    "img-src",
    "manifest-src",
    "media-src",
    "prefetch-src",
    "object-src",
    "script-src",
    "script-src-elem",
    "script-src-attr",
    "style-src",
    "style-src-elem",
    "style-src-attr",
    "worker-src",
    # Document directives
    "base-uri",
    "plugin-types",
    "sandbox",
    "disown-opener",
    # Navigation directives
    "form-action",
    "frame-ancestors",
    "navigate-to",
    # Reporting directives
    "report-uri",
    "report-to",
    # Other
    "upgrade-insecure-requests",
    "block-all-mixed-content",
    "require-sri-for",
})

# Still parsed without error.
DEPRECATED_DIRECTIVES = frozenset({
    "reflected-xss",  # CSP 2
    "referrer",       # superseded by the Referrer-Policy header
})

ACCEPTED_DIRECTIVES = ACTIVE_DIRECTIVES | DEPRECATED_DIRECTIVES

# Formally removed: directive name -> diagnostic detail.
REMOVED_DIRECTIVES: dict[str, str] = {
    "policy-uri": "policy-uri has been removed and is not supported",
}


def directive_status(name: str) -> DirectiveStatus:
    """Classify a directive name without raising."""
    key = name.lower()
    if key in ACTIVE_DIRECTIVES:
        return DirectiveStatus.active
    if key in DEPRECATED_DIRECTIVES:
        return DirectiveStatus.deprecated
    if key in REMOVED_DIRECTIVES:
        return DirectiveStatus.removed
    return DirectiveStatus.unknown


def is_deprecated(name: str) -> bool:
    return directive_status(name) is DirectiveStatus.deprecated


def validate_name(name: str) -> None:
    """Check a directive name, case-insensitively.

    Raises RemovedDirectiveName for names dropped from the standard and
    UnknownDirectiveName for anything not recognized at all.
    """
    status = directive_status(name)
    if status is DirectiveStatus.removed:
        raise RemovedDirectiveName(name, REMOVED_DIRECTIVES[name.lower()])
    if status is DirectiveStatus.unknown:
        raise UnknownDirectiveName(name, f"directive name '{name}' is unknown")
