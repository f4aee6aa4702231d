"""Resource identifiers of the form ``namespace:path``."""

from __future__ import annotations

import re
from functools import total_ordering

__all__ = ["Ident", "IdentParseError", "ident"]

_DEFAULT_NAMESPACE = "minecraft"
_IDENT_RE = re.compile(r"(?:(?P<namespace>[a-z0-9_\-]+):)?(?P<path>[a-z0-9_/.\-]+)")


class IdentParseError(ValueError):
    """Raised when a string is not a valid resource identifier."""

    def __init__(self, string: str) -> None:
        super().__init__(f'invalid resource identifier "{string}"')
        self.string = string


@total_ordering
class Ident:
    """A resource identifier such as ``minecraft:apple``.

    A missing namespace is treated as ``minecraft`` for equality, ordering
    and hashing.
    """

    __slots__ = ("_string", "_namespace", "_path")

    def __init__(self, string: str | Ident) -> None:
        if isinstance(string, Ident):
            string = string.as_str()
        if not isinstance(string, str):
            raise TypeError(f"expected str, got {type(string).__name__}")
        match = _IDENT_RE.fullmatch(string)
        if match is None:
            raise IdentParseError(string)
        self._string = string
        self._namespace = match.group("namespace")
        self._path = match.group("path")

    @property
    def namespace(self) -> str:
        """The namespace part, ``minecraft`` when none was given."""
        return self._namespace if self._namespace is not None else _DEFAULT_NAMESPACE

    @property
    def path(self) -> str:
        """The path part."""
        return self._path

    def as_str(self) -> str:
        """The original string this identifier was parsed from."""
        return self._string

    def _key(self) -> tuple[str, str]:
        return (self.namespace, self.path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ident):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Ident):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return f"{self.namespace}:{self.path}"

    def __repr__(self) -> str:
        return f"Ident({self._string!r})"


def ident(string: str) -> Ident:
    """Parse ``string`` as an identifier, raising :class:`IdentParseError` if invalid."""
    return Ident(string)