#!/usr/bin/env python3
"""
Document Template Rendering

Fills the invoice and receipt LaTeX templates with Jinja2. The environment uses
LaTeX-friendly delimiters and escapes every plain string on output, so names,
addresses and descriptions cannot break the document structure:

    \\VAR{client.name}            expression
    \\BLOCK{for x in items} ...   statement
"""

from decimal import Decimal
from importlib import resources
from typing import Any

import jinja2

from ..core.dates import DateString
from ..core.exceptions import TemplateRenderError
from ..core.money import PriceUSD, to_cents
from .latex import Asset, LatexMarkup, escape_latex

TEMPLATE_PACKAGE = "billfold.documents"
TEMPLATE_DIR = "templates"
STYLE_FILENAME = "billfold.sty"


def _finalize(value: Any) -> Any:
    if isinstance(value, (LatexMarkup, int, float, Decimal)):
        return value
    if value is None:
        return ""
    return escape_latex(str(value))


def format_money(value: PriceUSD | Decimal | float) -> str:
    """Format an amount with exactly two decimals."""
    if isinstance(value, PriceUSD):
        return str(value)
    return str(to_cents(value))


def format_quantity(value: float) -> str:
    """Show whole quantities without a decimal part."""
    return f"{value:g}"


def format_long_date(value: DateString) -> str:
    return value.to_long_form()


def payment_latex(method: Any) -> LatexMarkup:
    return method.to_latex()


def _build_environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.PackageLoader(TEMPLATE_PACKAGE, TEMPLATE_DIR),
        block_start_string=r"\BLOCK{",
        block_end_string="}",
        variable_start_string=r"\VAR{",
        variable_end_string="}",
        comment_start_string=r"\#{",
        comment_end_string="}",
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,
        undefined=jinja2.StrictUndefined,
        finalize=_finalize,
    )
    env.filters["money"] = format_money
    env.filters["quantity"] = format_quantity
    env.filters["long_date"] = format_long_date
    env.filters["payment_latex"] = payment_latex
    return env


_environment: jinja2.Environment | None = None


def get_environment() -> jinja2.Environment:
    global _environment
    if _environment is None:
        _environment = _build_environment()
    return _environment


def render_template(template_name: str, **context: Any) -> str:
    """
    Render a LaTeX template.

    Raises:
        TemplateRenderError: If the template is missing, refers to an undefined
            value, or a field formatter fails
    """
    try:
        template = get_environment().get_template(template_name)
        return template.render(**context)
    except (jinja2.TemplateError, ValueError, TypeError, AttributeError) as e:
        raise TemplateRenderError(f"Could not render {template_name}: {e}") from e


def document_assets() -> list[Asset]:
    """Supporting files every document needs next to its .tex source."""
    style = resources.files(TEMPLATE_PACKAGE).joinpath(TEMPLATE_DIR, STYLE_FILENAME)
    return [Asset(filename=STYLE_FILENAME, data=style.read_bytes())]


def render_invoice(full_invoice: Any) -> str:
    """LaTeX source for a collected invoice."""
    return render_template(
        "invoice.tex",
        me=full_invoice.me,
        client=full_invoice.client,
        project=full_invoice.project,
        invoice=full_invoice.invoice,
        total=full_invoice.total(),
    )


def render_receipt(full_receipt: Any) -> str:
    """LaTeX source for a collected receipt."""
    return render_template(
        "receipt.tex",
        me=full_receipt.me,
        client=full_receipt.client,
        project=full_receipt.project,
        invoice=full_receipt.invoice,
        receipt=full_receipt.receipt,
        total=full_receipt.total(),
    )
