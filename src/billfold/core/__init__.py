"""
Core Utilities Package

Shared building blocks used by every record kind.

This package provides:
- Primitive types (Id, PriceUSD, DateString) and address/contact records
- Configuration and data directory layout
- Flat-file YAML storage with strict record schemas
- Interactive prompt helpers and prefix autocompletion
"""

from .config import Config, DataPaths, LatexConfig, LedgerConfig, get_config, reload_config
from .contact import ContactInfo, MailingAddress
from .dates import DateString
from .exceptions import (
    BillfoldError,
    ConfigError,
    IdError,
    InvalidEditError,
    LatexCompileError,
    NothingToDoError,
    RecordNotFoundError,
    SchemaError,
    TemplateRenderError,
)
from .ids import Id
from .money import PriceUSD
from .storage import IdCodec, NumberCodec, YamlRepository

__all__ = [
    "BillfoldError",
    "Config",
    "ConfigError",
    "ContactInfo",
    "DataPaths",
    "DateString",
    "Id",
    "IdCodec",
    "IdError",
    "InvalidEditError",
    "LatexCompileError",
    "LatexConfig",
    "LedgerConfig",
    "MailingAddress",
    "NothingToDoError",
    "NumberCodec",
    "PriceUSD",
    "RecordNotFoundError",
    "SchemaError",
    "TemplateRenderError",
    "YamlRepository",
    "get_config",
    "reload_config",
]
