#!/usr/bin/env python3
"""
Flat-File Record Storage

One YAML file per record under a per-kind directory. The same repository class
serves clients and projects (keyed by Id) and invoices and receipts (keyed by
number); only the key codec differs.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, Generic, Protocol, TypeVar

from .exceptions import IdError, RecordNotFoundError
from .ids import FILE_EXTENSION, Id
from .yaml_utils import read_yaml, write_yaml

logger = logging.getLogger(__name__)

K = TypeVar("K")
R = TypeVar("R")


class KeyCodec(Protocol[K]):
    """Maps record keys to filenames and back."""

    def to_filename(self, key: K) -> str: ...

    def from_filename(self, path: Path) -> K: ...


class IdCodec:
    """Records named by an Id, e.g. `Acme Co..yaml`."""

    def to_filename(self, key: Id) -> str:
        return key.to_filename()

    def from_filename(self, path: Path) -> Id:
        return Id.from_filename(path)


class NumberCodec:
    """Records named by a non-negative integer, e.g. `42.yaml`."""

    def to_filename(self, key: int) -> str:
        return f"{key}{FILE_EXTENSION}"

    def from_filename(self, path: Path) -> int:
        name = Path(path).name
        stem = name[: -len(FILE_EXTENSION)] if name.endswith(FILE_EXTENSION) else ""
        if not (stem.isascii() and stem.isdigit()):
            raise IdError(f"Not a numbered record filename: {name!r}")
        return int(stem)


class YamlRepository(Generic[K, R]):
    """
    Load/save/list records of one kind.

    Args:
        directory: Callable returning the kind's directory (created on access)
        kind: Human-readable record kind for messages, e.g. "client"
        codec: Key codec
        to_dict: Serializer for a record
        from_dict: Strict deserializer for a record
        key_of: Returns a record's key
    """

    def __init__(
        self,
        directory: Callable[[], Path],
        kind: str,
        codec: KeyCodec[K],
        to_dict: Callable[[R], dict[str, Any]],
        from_dict: Callable[[Any], R],
        key_of: Callable[[R], K],
    ):
        self._directory = directory
        self.kind = kind
        self.codec = codec
        self._to_dict = to_dict
        self._from_dict = from_dict
        self._key_of = key_of

    @property
    def directory(self) -> Path:
        return self._directory()

    def path_for(self, key: K) -> Path:
        return self.directory / self.codec.to_filename(key)

    def exists(self, key: K) -> bool:
        return self.path_for(key).exists()

    def save(self, record: R) -> Path:
        """
        Write a record, replacing any existing file with the same key.

        Returns:
            Path of the written file
        """
        path = self.path_for(self._key_of(record))
        write_yaml(path, self._to_dict(record))
        logger.debug(f"Saved {self.kind} to {path}")
        return path

    def load(self, key: K) -> R:
        """
        Load the record with the given key.

        Raises:
            RecordNotFoundError: If no file exists for the key
            SchemaError: If the file is not valid YAML or fails the strict schema
        """
        path = self.path_for(key)
        if not path.exists():
            raise RecordNotFoundError(f"No {self.kind} named {str(key)!r} (expected {path})")

        logger.debug(f"Loading {self.kind} from {path}")
        return self._from_dict(read_yaml(path))

    def find_by_id(self, key: K) -> R:
        """Follow a reference from another record; same errors as `load`."""
        return self.load(key)

    def list(self) -> list[K]:
        """
        Keys of all stored records, sorted.

        Files whose names do not decode to a key are skipped.
        """
        keys = []
        for path in self.directory.iterdir():
            if not path.is_file():
                continue
            try:
                keys.append(self.codec.from_filename(path))
            except IdError:
                logger.debug(f"Skipping {path.name!r} in {self.directory}: not a {self.kind} file")
        return sorted(keys, key=_sort_key)


def _sort_key(key: Any) -> Any:
    return str(key).lower() if isinstance(key, Id) else key
