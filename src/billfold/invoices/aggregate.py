#!/usr/bin/env python3
"""
Collected Invoice

Joins an invoice with its project, the project's client and the operator
profile so it can be rendered. Built on demand and never stored.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

import click

from ..clients.datastore import ClientStore
from ..clients.models import Client
from ..core.config import DataPaths, LatexConfig, LedgerConfig
from ..documents.latex import compile_latex
from ..documents.ledger import invoice_total, write_ledger_entry
from ..documents.render import document_assets, render_invoice
from ..me.datastore import MeStore
from ..me.models import Me
from ..projects.datastore import ProjectStore
from ..projects.models import Project
from .models import Invoice

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FullInvoice:
    """An invoice with every referenced record resolved."""

    me: Me
    invoice: Invoice
    project: Project
    client: Client

    def total(self) -> Decimal:
        return invoice_total(self.invoice)

    def pdf_filename(self) -> str:
        return f"Invoice_{self.me.filename_name()}_{self.invoice.number}.pdf"

    def render_tex(self) -> str:
        return render_invoice(self)

    def render_pdf(self, pdf_output_path: Path, latex_config: LatexConfig, show_source: bool = False) -> Path:
        tex = self.render_tex()
        if show_source:
            click.echo(tex)
        return compile_latex(tex, pdf_output_path, document_assets(), compiler=latex_config.compiler)

    def save_pdf(self, paths: DataPaths, latex_config: LatexConfig, show_source: bool = False) -> Path:
        """Render to `<data_dir>/pdfs/<pdf_filename>` and return the path."""
        return self.render_pdf(paths.pdfs_dir / self.pdf_filename(), latex_config, show_source)

    def save_ledger(self, paths: DataPaths, ledger_config: LedgerConfig) -> Path:
        return write_ledger_entry(self, paths, ledger_config)


def collect_invoice(invoice: Invoice, paths: DataPaths) -> FullInvoice:
    """
    Resolve an invoice's project, client and the operator profile.

    Raises:
        RecordNotFoundError: If the project, client or profile is missing
        SchemaError: If one of them is invalid
    """
    me = MeStore(paths).load()
    project = ProjectStore(paths).find_by_id(invoice.project_ref)
    client = ClientStore(paths).find_by_id(project.client_ref)
    logger.debug(f"Collected invoice {invoice.number} for {project.name} / {client.name}")
    return FullInvoice(me=me, invoice=invoice, project=project, client=client)
