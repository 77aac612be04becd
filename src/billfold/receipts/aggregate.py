#!/usr/bin/env python3
"""
Collected Receipt

A receipt joined with its invoice and everything the invoice references.
"""

from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

import click

from ..clients.datastore import ClientStore
from ..clients.models import Client
from ..core.config import DataPaths, LatexConfig
from ..documents.latex import compile_latex
from ..documents.ledger import invoice_total
from ..documents.render import document_assets, render_receipt
from ..invoices.datastore import InvoiceStore
from ..invoices.models import Invoice
from ..me.datastore import MeStore
from ..me.models import Me
from ..projects.datastore import ProjectStore
from ..projects.models import Project
from .models import Receipt


@dataclass(frozen=True)
class FullReceipt:
    """A receipt with its invoice, project, client and the operator profile."""

    me: Me
    receipt: Receipt
    invoice: Invoice
    project: Project
    client: Client

    def total(self) -> Decimal:
        return invoice_total(self.invoice)

    def pdf_filename(self) -> str:
        return f"Receipt_{self.me.filename_name()}_{self.invoice.number}.pdf"

    def render_tex(self) -> str:
        return render_receipt(self)

    def render_pdf(self, pdf_output_path: Path, latex_config: LatexConfig, show_source: bool = False) -> Path:
        tex = self.render_tex()
        if show_source:
            click.echo(tex)
        return compile_latex(tex, pdf_output_path, document_assets(), compiler=latex_config.compiler)

    def save_pdf(self, paths: DataPaths, latex_config: LatexConfig, show_source: bool = False) -> Path:
        return self.render_pdf(paths.pdfs_dir / self.pdf_filename(), latex_config, show_source)


def collect_receipt(receipt: Receipt, paths: DataPaths) -> FullReceipt:
    """
    Resolve a receipt's invoice, then the invoice's project and client.

    Raises:
        RecordNotFoundError: If any referenced record or the profile is missing
    """
    me = MeStore(paths).load()
    invoice = InvoiceStore(paths).find_by_id(receipt.invoice_num)
    project = ProjectStore(paths).find_by_id(invoice.project_ref)
    client = ClientStore(paths).find_by_id(project.client_ref)
    return FullReceipt(me=me, receipt=receipt, invoice=invoice, project=project, client=client)
