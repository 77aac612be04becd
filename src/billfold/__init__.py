"""
billfold - Personal Invoicing and Bookkeeping

Collects clients, projects, invoices and receipts through interactive prompts,
stores each record as a YAML file, renders invoices and receipts to PDF via
LaTeX, and exports invoices as beancount ledger entries.

Domain Packages:
- core: Primitive types, configuration, YAML storage, prompts, autocompletion
- clients / projects: Client and project records with get-or-create workflows
- invoices / receipts: Billing records, creation workflows, collected views
- me: The operator's own profile and payment methods
- documents: LaTeX rendering and compilation, ledger export
- cli: Command-line interface

Example Usage:
    from billfold.core import Config, Id
    from billfold.invoices import InvoiceStore, collect_invoice

    paths = Config.load().paths
    invoice = InvoiceStore(paths).load(1)
    full_invoice = collect_invoice(invoice, paths)
"""

__version__ = "0.1.0"

from .core.dates import DateString
from .core.ids import Id
from .core.money import PriceUSD

__all__ = ["DateString", "Id", "PriceUSD", "__version__"]
