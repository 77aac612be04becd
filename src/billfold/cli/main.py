#!/usr/bin/env python3
"""
Main CLI Entry Point for billfold

Interactive commands to manage clients and projects and to issue invoices and
receipts. Errors from the library are reported here, and only here, with the
chain of causes that led to them.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any

import click

from ..clients.datastore import ClientStore, get_or_create_client
from ..core.config import Config, get_config
from ..core.exceptions import BillfoldError
from ..core.prompts import print_title
from ..core.yaml_utils import format_yaml
from ..invoices.aggregate import collect_invoice
from ..invoices.datastore import InvoiceStore, create_invoice
from ..me.datastore import load_or_create_me
from ..me.models import Me
from ..projects.datastore import ProjectStore, get_or_create_project
from ..receipts.aggregate import collect_receipt
from ..receipts.datastore import ReceiptStore, create_receipt

logger = logging.getLogger(__name__)


def format_error_chain(error: BaseException) -> str:
    """Render an exception and its causes, outermost first."""
    lines = [str(error) or type(error).__name__]
    cause = error.__cause__ or error.__context__
    while cause is not None:
        lines.append(f"  caused by: {cause}")
        cause = cause.__cause__ or cause.__context__
    return "\n".join(lines)


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Turn library errors into a ClickException (exit code 1, message on stderr)."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (BillfoldError, OSError, ValueError) as e:
            logger.debug("Command failed", exc_info=True)
            raise click.ClickException(format_error_chain(e)) from e

    return wrapper


def _startup(ctx: click.Context) -> tuple[Config, Me]:
    """Print the banner and make sure the operator profile exists."""
    config: Config = ctx.obj["config"]
    print_title("billfold")
    me = load_or_create_me(config.paths)
    return config, me


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """
    billfold - invoices and receipts from the command line.

    Clients, projects, invoices and receipts are stored as YAML files in the
    data directory; invoices and receipts are rendered to PDF with LaTeX.
    """
    ctx.ensure_object(dict)

    try:
        config = get_config()
    except BillfoldError as e:
        raise click.ClickException(format_error_chain(e)) from e

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("billfold").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Config file: {config.config_path}")
        click.echo(f"Data directory: {config.data_dir}")


@main.command()
@click.pass_context
@handle_errors
def client(ctx: click.Context) -> None:
    """Get or create a client."""
    config, _me = _startup(ctx)
    name = get_or_create_client(config.paths)
    click.echo(format_yaml(ClientStore(config.paths).load(name).to_dict()))


@main.command("list-clients")
@click.pass_context
@handle_errors
def list_clients(ctx: click.Context) -> None:
    """List all saved clients."""
    config, _me = _startup(ctx)
    for name in ClientStore(config.paths).list():
        click.echo(f"- {name}")


@main.command()
@click.pass_context
@handle_errors
def project(ctx: click.Context) -> None:
    """Get or create a project."""
    config, _me = _startup(ctx)
    name = get_or_create_project(config.paths)
    click.echo(format_yaml(ProjectStore(config.paths).load(name).to_dict()))


@main.command()
@click.option("--show-source", is_flag=True, help="Print the LaTeX source before rendering")
@click.pass_context
@handle_errors
def invoice(ctx: click.Context, show_source: bool) -> None:
    """Create an invoice and render it to PDF and a ledger entry."""
    config, _me = _startup(ctx)
    paths = config.paths

    new_invoice = create_invoice(paths)
    InvoiceStore(paths).save(new_invoice)

    full_invoice = collect_invoice(new_invoice, paths)

    click.echo("\nGenerating PDF...")
    pdf_path = full_invoice.save_pdf(paths, config.latex, show_source=show_source)
    click.echo(f"Invoice PDF saved to {pdf_path}")

    ledger_path = full_invoice.save_ledger(paths, config.ledger)
    click.echo(f"Invoice ledger entry saved to {ledger_path}")


@main.command()
@click.option("--show-source", is_flag=True, help="Print the LaTeX source before rendering")
@click.pass_context
@handle_errors
def receipt(ctx: click.Context, show_source: bool) -> None:
    """Record payment of an invoice and render a receipt PDF."""
    config, me = _startup(ctx)
    paths = config.paths

    new_receipt = create_receipt(paths, me)
    ReceiptStore(paths).save(new_receipt)

    full_receipt = collect_receipt(new_receipt, paths)

    click.echo("\nGenerating PDF...")
    pdf_path = full_receipt.save_pdf(paths, config.latex, show_source=show_source)
    click.echo(f"Receipt PDF saved to {pdf_path}")


@main.command("config")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Show current configuration."""
    click.echo("Current Configuration:")
    click.echo(format_yaml(ctx.obj["config"].to_dict()))


@main.command()
def version() -> None:
    """Show version information."""
    from billfold import __version__

    click.echo(f"billfold v{__version__}")


if __name__ == "__main__":
    main()
