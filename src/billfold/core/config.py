#!/usr/bin/env python3
"""
Configuration Management for billfold

Resolves the data directory and the document/ledger settings from an optional
TOML config file, with environment-variable overrides (a local .env file is
honoured via python-dotenv).

Config file (default: <app dir>/config.toml, override with BILLFOLD_CONFIG):

    data_dir = "~/Documents/billfold"   # optional, must be absolute after ~ expansion
    log_level = "INFO"

    [ledger]
    receivable_account = "Assets:AccountsReceivable"
    income_account_prefix = "Income"

    [latex]
    compiler = "pdflatex"
"""

import logging
import os
import sys
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import click
from dotenv import load_dotenv

from .exceptions import ConfigError

# Load environment variables from .env file
load_dotenv()

APP_NAME = "billfold"

_TOP_LEVEL_KEYS = {"data_dir", "log_level", "ledger", "latex"}


def default_config_path() -> Path:
    """Platform-standard location of config.toml."""
    return Path(click.get_app_dir(APP_NAME)) / "config.toml"


def default_data_dir() -> Path:
    """Platform-standard application data directory."""
    if sys.platform.startswith("linux"):
        xdg_data_home = os.getenv("XDG_DATA_HOME")
        base = Path(xdg_data_home) if xdg_data_home else Path.home() / ".local" / "share"
        return base / APP_NAME
    return Path(click.get_app_dir(APP_NAME))


def resolve_data_dir(raw: str | None) -> Path:
    """
    Resolve a configured data directory.

    Args:
        raw: Configured value, or None to use the platform default

    Raises:
        ConfigError: If the configured path is not absolute after ~ expansion
    """
    if raw is None:
        return default_data_dir()

    path = Path(raw).expanduser()
    if not path.is_absolute():
        raise ConfigError(f"data_dir must be an absolute path, got {raw!r}")
    return path


class DataPaths:
    """
    Directory layout under the data root.

    Every per-kind directory is created (with parents) when first requested.
    """

    def __init__(self, root: Path):
        self.root = Path(root)

    def _subdir(self, name: str) -> Path:
        directory = self.root / name
        directory.mkdir(parents=True, exist_ok=True)
        return directory

    @property
    def clients_dir(self) -> Path:
        return self._subdir("clients")

    @property
    def projects_dir(self) -> Path:
        return self._subdir("projects")

    @property
    def invoices_dir(self) -> Path:
        return self._subdir("invoices")

    @property
    def receipts_dir(self) -> Path:
        return self._subdir("receipts")

    @property
    def pdfs_dir(self) -> Path:
        return self._subdir("pdfs")

    @property
    def ledger_dir(self) -> Path:
        return self._subdir("ledger")

    @property
    def me_file(self) -> Path:
        self.root.mkdir(parents=True, exist_ok=True)
        return self.root / "me.yaml"

    def __repr__(self) -> str:
        return f"DataPaths(root={self.root!r})"


@dataclass
class LedgerConfig:
    """Accounts used for ledger export."""

    receivable_account: str = "Assets:AccountsReceivable"
    income_account_prefix: str = "Income"


@dataclass
class LatexConfig:
    """External document compiler settings."""

    compiler: str = "pdflatex"


@dataclass
class Config:
    """
    Main configuration class for billfold.

    Built from the TOML config file (if any) and then environment overrides.
    """

    data_dir: Path
    config_path: Path
    ledger: LedgerConfig = field(default_factory=LedgerConfig)
    latex: LatexConfig = field(default_factory=LatexConfig)
    log_level: str = "WARNING"

    @property
    def paths(self) -> DataPaths:
        return DataPaths(self.data_dir)

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """
        Load configuration.

        Args:
            config_path: Explicit config file; defaults to $BILLFOLD_CONFIG or
                the platform config directory. A missing file means defaults.

        Raises:
            ConfigError: If the file is not valid TOML or has invalid values
        """
        if config_path is None:
            env_path = os.getenv("BILLFOLD_CONFIG")
            config_path = Path(env_path).expanduser() if env_path else default_config_path()

        data = _read_toml(config_path) if config_path.exists() else {}
        return cls.from_dict(data, config_path)

    @classmethod
    def from_dict(cls, data: dict[str, Any], config_path: Path) -> "Config":
        unknown = sorted(set(data) - _TOP_LEVEL_KEYS)
        if unknown:
            raise ConfigError(f"Unknown config key(s) in {config_path}: {', '.join(unknown)}")

        file_data_dir = _string_value(data, "data_dir", config_path)
        file_log_level = _string_value(data, "log_level", config_path)
        ledger = _section(data, "ledger", LedgerConfig, config_path)
        latex = _section(data, "latex", LatexConfig, config_path)

        raw_data_dir = os.getenv("BILLFOLD_DATA_DIR") or file_data_dir
        log_level = (os.getenv("LOG_LEVEL") or file_log_level or "WARNING").upper()

        return cls(
            data_dir=resolve_data_dir(raw_data_dir),
            config_path=config_path,
            ledger=ledger,
            latex=latex,
            log_level=log_level,
        )

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.WARNING)
        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary for display."""
        return {
            "config_path": str(self.config_path),
            "data_dir": str(self.data_dir),
            "log_level": self.log_level,
            "ledger": {
                "receivable_account": self.ledger.receivable_account,
                "income_account_prefix": self.ledger.income_account_prefix,
            },
            "latex": {"compiler": self.latex.compiler},
        }


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def _string_value(data: dict[str, Any], key: str, config_path: Path, section: str | None = None) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        name = f"{section}.{key}" if section else key
        raise ConfigError(f"{name} in {config_path} must be a string, got {value!r}")
    return value


def _section(data: dict[str, Any], name: str, section_type: type, config_path: Path) -> Any:
    raw = data.get(name, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{name}] in {config_path} must be a table")
    try:
        section = section_type(**raw)
    except TypeError as e:
        raise ConfigError(f"Invalid [{name}] section in {config_path}: {e}") from e
    for section_field in fields(section):
        _string_value(raw, section_field.name, config_path, section=name)
    return section


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.load()
        _config.setup_logging()
    return _config


def reload_config() -> Config:
    """Reload configuration from disk and environment (useful for testing)."""
    global _config
    _config = None
    return get_config()
