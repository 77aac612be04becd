"""
Documents Package

Turns collected invoices and receipts into output files:
- LaTeX rendering (Jinja2 templates) and PDF compilation
- beancount ledger entries for invoices
"""

from .latex import Asset, LatexMarkup, compile_latex, escape_latex
from .ledger import build_invoice_transaction, income_account, invoice_total, write_ledger_entry
from .render import document_assets, render_invoice, render_receipt

__all__ = [
    "Asset",
    "LatexMarkup",
    "build_invoice_transaction",
    "compile_latex",
    "document_assets",
    "escape_latex",
    "income_account",
    "invoice_total",
    "render_invoice",
    "render_receipt",
    "write_ledger_entry",
]
