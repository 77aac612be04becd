#!/usr/bin/env python3
"""
Interactive Prompt Helpers

Thin wrappers over click's prompting used by every creation workflow.

Invalid input is reported and asked for again inside these helpers; only a
cancelled prompt (click.Abort) leaves them, which aborts the whole workflow.
"""

import sys
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

import click

from .completion import PrefixCompleter
from .dates import DateString
from .exceptions import InvalidEditError
from .money import PriceUSD
from .yaml_utils import format_yaml, parse_yaml

T = TypeVar("T")


def format_title(text: str) -> str:
    hbar = "=" * (len(text) + 4)
    return "\n".join(["", hbar, f"= {text} =", hbar, ""])


def format_header(text: str) -> str:
    return "\n".join(["", text, "=" * len(text), ""])


def print_title(text: str) -> None:
    click.echo(format_title(text))


def print_header(text: str) -> None:
    click.echo(format_header(text))


def prompt_required(message: str, default: str | None = None) -> str:
    """Prompt until a non-blank value is entered."""
    while True:
        value = click.prompt(message, default=default, type=str).strip()
        if value:
            return value
        click.echo("  A value is required.")


def prompt_optional(message: str) -> str | None:
    """Prompt for a value that may be skipped; blank input becomes None."""
    value = click.prompt(f"{message} (optional)", default="", show_default=False, type=str)
    return value.strip() or None


def prompt_non_negative_int(message: str, default: int | None = None) -> int:
    return click.prompt(message, default=default, type=click.IntRange(min=0))


def prompt_non_negative_float(message: str, default: float | None = None) -> float:
    return click.prompt(message, default=default, type=click.FloatRange(min=0))


def prompt_price(message: str) -> PriceUSD:
    """Prompt until the input parses as a non-negative dollar amount."""
    while True:
        text = click.prompt(message, type=str)
        try:
            return PriceUSD.parse(text)
        except ValueError as e:
            click.echo(f"  ❌ {e}")


def prompt_date(message: str, default: DateString | None = None) -> DateString:
    """Prompt for a YYYY-MM-DD date, defaulting to today."""
    if default is None:
        default = DateString.today()
    while True:
        text = click.prompt(f"{message} (YYYY-MM-DD)", default=str(default), type=str)
        try:
            return DateString(text.strip())
        except ValueError as e:
            click.echo(f"  ❌ {e}")


def prompt_select(message: str, options: Sequence[tuple[T, str]]) -> T:
    """
    Show a numbered list and return the value of the chosen option.

    Args:
        message: Prompt text
        options: (value, description) pairs, shown in the given order
    """
    if not options:
        raise ValueError("prompt_select requires at least one option")

    for index, (_value, description) in enumerate(options, start=1):
        click.echo(f"  {index}) {description}")

    choice = click.prompt(message, default=1, type=click.IntRange(1, len(options)))
    return options[choice - 1][0]


def prompt_name(message: str, candidates: Sequence[str]) -> str:
    """
    Prompt for a record name, completing from existing names.

    Live completion needs a terminal; when stdin is not one (scripts, tests)
    this falls back to a plain prompt.
    """
    if not sys.stdin.isatty():
        return prompt_required(message)

    from prompt_toolkit import prompt as toolkit_prompt

    completer = PrefixCompleter(candidates)
    while True:
        try:
            value = toolkit_prompt(f"{message}: ", completer=completer, complete_while_typing=True)
        except (KeyboardInterrupt, EOFError):
            raise click.Abort() from None
        value = value.strip()
        if value:
            return value
        click.echo("  A value is required.")


def _edit(text: str) -> str | None:
    return click.edit(text, extension=".yaml", require_save=True)


def review(record: T, parse: Callable[[Any], T], text: str | None = None) -> T:
    """
    Let the user hand-edit a record's YAML in their editor, once.

    Args:
        record: Record to review (must provide `to_dict()`)
        parse: Function turning parsed YAML into a record (e.g. `Client.from_dict`)
        text: YAML to pre-fill instead of the record's own serialization

    Returns:
        The parsed edited record, or `record` unchanged when the editor was
        closed without saving

    Raises:
        InvalidEditError: If the edited YAML does not match the record's schema
    """
    if text is None:
        text = format_yaml(record.to_dict())

    edited = _edit(text)
    if edited is None:
        return record
    try:
        return parse(parse_yaml(edited, source="edited YAML"))
    except ValueError as e:
        raise InvalidEditError(str(e), text=edited) from e


def review_until_valid(record: T, parse: Callable[[Any], T]) -> T:
    """
    Show a record's YAML, then call `review` until the edit is valid.

    Each retry starts from the user's last (invalid) text so nothing typed is lost.
    """
    text = format_yaml(record.to_dict())

    print_header("Final YAML")
    click.echo(text)

    while True:
        try:
            return review(record, parse, text)
        except InvalidEditError as e:
            click.echo(f"❌ {e}", err=True)
            click.echo("Please correct the YAML and save again.", err=True)
            text = e.text
