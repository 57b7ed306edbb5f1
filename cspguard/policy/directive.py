"""Single CSP directive value object."""

from __future__ import annotations

from dataclasses import dataclass

from cspguard.policy.charset import ASCII_WHITESPACE, is_valid_value
from cspguard.policy.errors import CommaInValue, InvalidValueCharacter
from cspguard.policy.names import validate_name


def validate_value(token: str) -> None:
    """Raise if ``token`` cannot appear as a directive value.

    A value is a single non-empty token, so whitespace that the parser
    splits on is rejected even where the character table allows it (HTAB
    and SPACE).
    """
    if not token:
        raise InvalidValueCharacter(token, "value is empty")
    if "," in token:
        raise CommaInValue(token, f"value '{token}' contains a comma")
    if any(ch in ASCII_WHITESPACE for ch in token) or not is_valid_value(token):
        raise InvalidValueCharacter(token, f"value {token!r} contains invalid characters")


@dataclass(frozen=True, slots=True)
class Directive:
    """A directive name plus its ordered value tokens.

    The name keeps the spelling it was given; comparisons between
    directives of a policy go through ``key``, which is case-insensitive.
    """

    name: str
    values: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.values, str):
            raise TypeError("values must be a sequence of tokens, not a str")
        if not isinstance(self.values, tuple):
            object.__setattr__(self, "values", tuple(self.values))

    @property
    def key(self) -> str:
        return self.name.lower()

    def validate(self) -> None:
        """Raise the first DirectiveError that applies to this directive."""
        validate_name(self.name)
        for value in self.values:
            validate_value(value)

    def __str__(self) -> str:
        return self.name + " " + " ".join(self.values)
