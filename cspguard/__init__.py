"""
cspguard - Content-Security-Policy parsing, editing and violation report decoding
"""

__version__ = "0.1.0"

from cspguard.models.report import (
    Report,
    parse_report,
    parse_report_bytes,
    parse_report_string,
)
from cspguard.policy import *  # noqa: F401,F403
from cspguard.policy import __all__ as _policy_all
from cspguard.policy.errors import MalformedJson, MalformedReport, ReportError

__all__ = [
    *_policy_all,
    "MalformedJson",
    "MalformedReport",
    "Report",
    "ReportError",
    "parse_report",
    "parse_report_bytes",
    "parse_report_string",
]
