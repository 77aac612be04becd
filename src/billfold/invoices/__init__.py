"""
Invoices Package

Invoice records, numbering, the creation workflow, and the collected
(fully resolved) invoice used for rendering.
"""

from .aggregate import FullInvoice, collect_invoice
from .datastore import InvoiceStore, create_invoice
from .models import Invoice, LineItem

__all__ = ["FullInvoice", "Invoice", "InvoiceStore", "LineItem", "collect_invoice", "create_invoice"]
