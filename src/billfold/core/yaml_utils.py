#!/usr/bin/env python3
"""
YAML Utilities Module

Centralized YAML reading and writing with consistent formatting. All record
files go through these helpers so they share block style and key order.
"""

import os
import tempfile
from pathlib import Path
from typing import Any

import yaml

from .exceptions import SchemaError


def format_yaml(data: Any) -> str:
    """
    Format data as a block-style YAML document.

    Keys keep their insertion order so records read top to bottom the same way
    they were prompted for.
    """
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)


def parse_yaml(text: str, source: str = "<string>") -> Any:
    """
    Parse a YAML document.

    Raises:
        SchemaError: If the text is not valid YAML
    """
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SchemaError(f"Invalid YAML in {source}: {e}") from e


def read_yaml(filepath: str | Path) -> Any:
    """Read and parse a YAML file."""
    filepath = Path(filepath)
    with open(filepath, encoding="utf-8") as f:
        text = f.read()
    return parse_yaml(text, source=str(filepath))


def write_yaml(filepath: str | Path, data: Any) -> None:
    """
    Write data to a YAML file, replacing any existing file.

    The document is written to a temporary file in the same directory and then
    moved into place, so a crash never leaves a half-written record.
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(dir=filepath.parent, prefix=".", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(format_yaml(data))
        os.replace(tmp_name, filepath)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
