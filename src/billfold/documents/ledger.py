#!/usr/bin/env python3
"""
Ledger Export

Writes each invoice as a balanced beancount transaction: the receivable
account is debited and a per-client income account credited for the invoice
total, on the invoice date.
"""

import logging
from decimal import Decimal
from pathlib import Path
from typing import Any

from beancount.core import data, flags
from beancount.core.amount import Amount
from beancount.parser import printer

from ..core.config import DataPaths, LedgerConfig
from ..core.money import to_cents

logger = logging.getLogger(__name__)

CURRENCY = "USD"


def invoice_total(invoice: Any) -> Decimal:
    """Invoice total rounded to cents, as an exact Decimal."""
    return to_cents(invoice.total())


def income_account(prefix: str, client_name: str) -> str:
    """
    Income account for a client, e.g. ("Income", "Acme Co.") -> "Income:AcmeCo".

    Raises:
        ValueError: If the client name has no letters or digits
    """
    component = "".join(char for char in str(client_name) if char.isalnum())
    if not component:
        raise ValueError(f"Cannot derive an income account from client name {client_name!r}")
    component = component[0].upper() + component[1:]
    return f"{prefix}:{component}"


def build_invoice_transaction(full_invoice: Any, ledger_config: LedgerConfig) -> data.Transaction:
    """Balanced transaction recording an issued invoice."""
    invoice = full_invoice.invoice
    total = invoice_total(invoice)
    meta = data.new_metadata(f"Invoice_{invoice.number}.ledger", 0)

    postings = [
        data.Posting(ledger_config.receivable_account, Amount(total, CURRENCY), None, None, None, None),
        data.Posting(
            income_account(ledger_config.income_account_prefix, full_invoice.client.name),
            Amount(-total, CURRENCY),
            None,
            None,
            None,
            None,
        ),
    ]

    return data.Transaction(
        meta,
        invoice.date.to_date(),
        flags.FLAG_OKAY,
        str(full_invoice.client.name),
        f"Invoice #{invoice.number} for {invoice.project_ref}",
        data.EMPTY_SET,
        data.EMPTY_SET,
        postings,
    )


def ledger_filename(invoice_number: int) -> str:
    return f"Invoice_{invoice_number}.ledger"


def write_ledger_entry(full_invoice: Any, paths: DataPaths, ledger_config: LedgerConfig) -> Path:
    """
    Write the invoice's transaction to `<data_dir>/ledger/Invoice_<number>.ledger`.

    Returns:
        Path of the written file
    """
    transaction = build_invoice_transaction(full_invoice, ledger_config)
    path = paths.ledger_dir / ledger_filename(full_invoice.invoice.number)
    path.write_text(printer.format_entry(transaction), encoding="utf-8")
    logger.debug(f"Wrote ledger entry to {path}")
    return path
