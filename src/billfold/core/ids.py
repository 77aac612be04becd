#!/usr/bin/env python3
"""
Id Primitive Type

Filename-safe identifier used to name record files and to reference one
record from another. Human-facing records (clients, projects) use the name
typed by the user; `Id.random()` exists for internal identifiers.
"""

import base64
import secrets
from dataclasses import dataclass
from pathlib import Path

from .exceptions import IdError

FILE_EXTENSION = ".yaml"

_FORBIDDEN_CHARS = frozenset("/\\\0")


@dataclass(frozen=True)
class Id:
    """
    Immutable identifier, compared and hashed by its string value.

    Examples:
        >>> Id("Acme Co.").to_filename()
        'Acme Co..yaml'
        >>> Id.from_filename("clients/Acme Co..yaml")
        Id('Acme Co.')
    """

    value: str

    def __post_init__(self) -> None:
        _validate(self.value)

    @classmethod
    def random(cls) -> "Id":
        """Create a random identifier from 8 bytes, base32-encoded without padding."""
        encoded = base64.b32encode(secrets.token_bytes(8)).decode("ascii")
        return cls(encoded.rstrip("=").lower())

    @classmethod
    def from_filename(cls, path: str | Path) -> "Id":
        """
        Decode an Id from a record file path.

        Args:
            path: Path or bare filename such as "clients/Acme.yaml"

        Returns:
            Id named by the file's basename

        Raises:
            IdError: If the basename is missing, lacks the .yaml extension,
                or is not a valid Id
        """
        name = Path(path).name
        if not name.endswith(FILE_EXTENSION):
            raise IdError(f"Not a record filename: {str(path)!r}")
        return cls(name[: -len(FILE_EXTENSION)])

    def to_filename(self) -> str:
        """Filename for the record named by this Id."""
        return f"{self.value}{FILE_EXTENSION}"

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Id({self.value!r})"


def _validate(value: str) -> None:
    if not isinstance(value, str):
        raise IdError(f"Id must be a string, got {type(value).__name__}")
    if not value:
        raise IdError("Id must not be empty")
    if value != value.strip():
        raise IdError(f"Id must not start or end with whitespace: {value!r}")
    if value in (".", ".."):
        raise IdError(f"Id is not a valid filename: {value!r}")
    for char in value:
        if char in _FORBIDDEN_CHARS or not char.isprintable():
            raise IdError(f"Id contains a character that is unsafe in filenames: {value!r}")
