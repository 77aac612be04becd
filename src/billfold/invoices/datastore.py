#!/usr/bin/env python3
"""
Invoice DataStore and Creation Workflow

YAML storage for invoices under `<data_dir>/invoices/<number>.yaml` and the
interactive flow that builds a new invoice.

Numbers are allocated as max(existing) + 1 when the invoice is created and the
file is written later, with no lock in between.
"""

import logging

import click

from ..core.config import DataPaths
from ..core.prompts import (
    print_header,
    prompt_date,
    prompt_non_negative_float,
    prompt_non_negative_int,
    prompt_optional,
    prompt_price,
    review_until_valid,
)
from ..core.storage import NumberCodec, YamlRepository
from ..projects.datastore import get_or_create_project
from .models import Invoice, LineItem

logger = logging.getLogger(__name__)

DEFAULT_DAYS_TO_PAY = 7


class InvoiceStore(YamlRepository[int, Invoice]):
    """DataStore for invoice records."""

    def __init__(self, paths: DataPaths):
        super().__init__(
            directory=lambda: paths.invoices_dir,
            kind="invoice",
            codec=NumberCodec(),
            to_dict=Invoice.to_dict,
            from_dict=Invoice.from_dict,
            key_of=lambda invoice: invoice.number,
        )

    def next_number(self) -> int:
        """One more than the highest stored invoice number, or 1 when there are none."""
        return max(self.list(), default=0) + 1


def prompt_line_item() -> LineItem | None:
    """Prompt for one line item; a blank description ends the list."""
    description = prompt_optional("Item description (blank to finish)")
    if description is None:
        return None
    quantity = prompt_non_negative_float("Quantity", default=1.0)
    unit_price = prompt_price("Unit price (USD)")
    return LineItem(description=description, quantity=quantity, unit_price=unit_price)


def create_invoice(paths: DataPaths) -> Invoice:
    """
    Build a new invoice from user input.

    Prompts for the number (defaulting to the next free one), the project (got
    or created), the issue date and days to pay, then line items until a blank
    description, and finally lets the user review the YAML.
    """
    store = InvoiceStore(paths)

    number = prompt_non_negative_int("Invoice number", default=store.next_number())
    if store.exists(number):
        click.echo(f"⚠️  Invoice {number} already exists and will be overwritten.")

    print_header(f"Create invoice {number}")

    project_ref = get_or_create_project(paths)
    date = prompt_date("Invoice date")
    days_to_pay = prompt_non_negative_int("Days to pay", default=DEFAULT_DAYS_TO_PAY)
    due_date = date.add_days(days_to_pay)
    click.echo(f"Due date: {due_date.to_long_form()}")

    click.echo("Line items:")
    items = []
    while True:
        item = prompt_line_item()
        if item is None:
            break
        items.append(item)

    invoice = Invoice(number=number, project_ref=project_ref, date=date, due_date=due_date, items=items)
    return review_until_valid(invoice, Invoice.from_dict)
