"""
Receipts Package
"""

from .aggregate import FullReceipt, collect_receipt
from .datastore import ReceiptStore, create_receipt, unpaid_invoice_numbers
from .models import Receipt

__all__ = ["FullReceipt", "Receipt", "ReceiptStore", "collect_receipt", "create_receipt", "unpaid_invoice_numbers"]
