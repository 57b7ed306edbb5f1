"""Ordered directive set with case-insensitive names."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from cspguard.policy.directive import Directive
from cspguard.policy.errors import DuplicateDirective


class Directives:
    """Ordered collection holding at most one directive per name.

    Entries are only changed through ``merge_insert`` and ``remove_by_name``.
    Instances are not thread-safe; share one across threads only behind a lock.
    """

    def __init__(self, directives: Iterable[Directive] = ()) -> None:
        self._entries: list[Directive] = []
        for directive in directives:
            if directive.key in self:
                raise DuplicateDirective(
                    directive.name, f"directive '{directive.name}' is a duplicate"
                )
            self._entries.append(directive)

    def _index(self, name: str) -> int | None:
        key = name.lower()
        for i, entry in enumerate(self._entries):
            if entry.key == key:
                return i
        return None

    def get(self, name: str) -> Directive | None:
        """Return the directive matching ``name`` case-insensitively, if any."""
        i = self._index(name)
        return None if i is None else self._entries[i]

    def names(self) -> list[str]:
        return [entry.name for entry in self._entries]

    def merge_insert(self, directive: Directive) -> None:
        """Add a directive, or union its values into an existing one.

        The directive is validated first and the set is left untouched when
        validation fails. Values always end up sorted; a merged entry keeps
        its position and original name spelling.
        """
        directive.validate()

        i = self._index(directive.name)
        if i is None:
            self._entries.append(Directive(directive.name, tuple(sorted(directive.values))))
            return

        existing = self._entries[i]
        merged = set(existing.values) | set(directive.values)
        self._entries[i] = Directive(existing.name, tuple(sorted(merged)))

    def remove_by_name(self, name: str) -> None:
        """Remove the directive named ``name``; absent names are ignored."""
        key = name.lower()
        self._entries = [entry for entry in self._entries if entry.key != key]

    def serialize(self) -> str:
        """Render the set as a policy string, e.g. ``"default-src 'self'; img-src *"``."""
        return "; ".join(str(entry) for entry in self._entries)

    def copy(self) -> Directives:
        clone = Directives()
        clone._entries = list(self._entries)
        return clone

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return self._index(name) is not None

    def __iter__(self) -> Iterator[Directive]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> Directive:
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Directives):
            return NotImplemented
        return self._entries == other._entries

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"Directives({self._entries!r})"
