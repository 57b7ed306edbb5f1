"""Content-Security-Policy parsing, validation and editing."""

from cspguard.policy.charset import is_valid_value, is_valid_value_char
from cspguard.policy.directive import Directive
from cspguard.policy.directives import Directives
from cspguard.policy.errors import (
    CommaInValue,
    CSPError,
    DirectiveError,
    DuplicateDirective,
    InvalidValueCharacter,
    RemovedDirectiveName,
    UnknownDirectiveName,
)
from cspguard.policy.model import (
    CONTENT_SECURITY_POLICY,
    CONTENT_SECURITY_POLICY_REPORT_ONLY,
    Disposition,
    Policy,
    header_name_for,
    parse_policies,
)
from cspguard.policy.names import DirectiveStatus, directive_status, validate_name
from cspguard.policy.parser import DuplicatePolicy, parse_directives

__all__ = [
    "CONTENT_SECURITY_POLICY",
    "CONTENT_SECURITY_POLICY_REPORT_ONLY",
    "CommaInValue",
    "CSPError",
    "Directive",
    "DirectiveError",
    "Directives",
    "DirectiveStatus",
    "Disposition",
    "DuplicateDirective",
    "DuplicatePolicy",
    "InvalidValueCharacter",
    "Policy",
    "RemovedDirectiveName",
    "UnknownDirectiveName",
    "directive_status",
    "header_name_for",
    "is_valid_value",
    "is_valid_value_char",
    "parse_directives",
    "parse_policies",
    "validate_name",
]
