#!/usr/bin/env python3
"""
Receipt DataStore and Creation Workflow

YAML storage for receipts under `<data_dir>/receipts/<invoice number>.yaml`,
and the flow that records payment of an unpaid invoice.
"""

import logging

from ..core.config import DataPaths
from ..core.exceptions import BillfoldError, NothingToDoError
from ..core.prompts import print_header, prompt_date, prompt_required, prompt_select, review_until_valid
from ..core.storage import NumberCodec, YamlRepository
from ..invoices.datastore import InvoiceStore
from ..me.models import Me
from .models import Receipt

logger = logging.getLogger(__name__)


class ReceiptStore(YamlRepository[int, Receipt]):
    """DataStore for receipt records."""

    def __init__(self, paths: DataPaths):
        super().__init__(
            directory=lambda: paths.receipts_dir,
            kind="receipt",
            codec=NumberCodec(),
            to_dict=Receipt.to_dict,
            from_dict=Receipt.from_dict,
            key_of=lambda receipt: receipt.invoice_num,
        )


def unpaid_invoice_numbers(paths: DataPaths) -> set[int]:
    """Numbers of invoices that have no receipt yet."""
    return set(InvoiceStore(paths).list()) - set(ReceiptStore(paths).list())


def invoice_options(paths: DataPaths, numbers: set[int]) -> list[tuple[int, str]]:
    """
    Selectable (number, description) pairs, newest invoice first.

    Invoices that cannot be read are left out.
    """
    store = InvoiceStore(paths)
    options = []
    for number in sorted(numbers, reverse=True):
        try:
            invoice = store.load(number)
        except (BillfoldError, OSError) as e:
            logger.warning(f"Skipping unreadable invoice {number}: {e}")
            continue
        options.append((number, invoice.describe()))
    return options


def create_receipt(paths: DataPaths, me: Me) -> Receipt:
    """
    Record payment of an unpaid invoice from user input.

    Raises:
        NothingToDoError: If every invoice already has a receipt (no prompt is shown)
    """
    unpaid = unpaid_invoice_numbers(paths)
    if not unpaid:
        raise NothingToDoError("All invoices have been paid!")

    options = invoice_options(paths, unpaid)
    if not options:
        raise NothingToDoError("None of the unpaid invoices could be read")

    invoice_num = prompt_select("Invoice number", options)

    print_header(f"Create receipt {invoice_num}")

    date = prompt_date("Receipt date")

    payment_names = me.payment_names()
    if payment_names:
        payment_method = prompt_select("Payment method", [(name, name) for name in payment_names])
    else:
        payment_method = prompt_required("Payment method")

    receipt = Receipt(invoice_num=invoice_num, date=date, payment_method=payment_method)
    return review_until_valid(receipt, Receipt.from_dict)
