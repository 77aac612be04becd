#!/usr/bin/env python3
"""Tests for the beancount ledger export."""

from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from billfold.core.config import LedgerConfig
from billfold.core.money import PriceUSD
from billfold.documents.ledger import build_invoice_transaction, income_account, invoice_total, write_ledger_entry
from billfold.invoices.aggregate import FullInvoice
from billfold.invoices.models import LineItem


@pytest.fixture
def full_invoice(sample_me, sample_invoice, sample_project, sample_client) -> FullInvoice:
    return FullInvoice(me=sample_me, invoice=sample_invoice, project=sample_project, client=sample_client)


@pytest.mark.currency
class TestInvoiceTotal:
    """Test conversion of invoice totals to exact amounts."""

    def test_total_is_rounded_decimal(self, sample_invoice):
        # 10.30 + 2 * 9.60 is not exact in binary floating point
        assert invoice_total(sample_invoice) == Decimal("29.50")

    def test_sub_cent_total_rounds_half_up(self, sample_invoice):
        invoice = replace(
            sample_invoice, items=[LineItem(description="Widget", quantity=1, unit_price=PriceUSD.parse("1.005"))]
        )

        assert invoice_total(invoice) == Decimal("1.01")
        assert str(invoice_total(invoice)) == str(invoice.items[0].unit_price)


class TestIncomeAccount:
    """Test per-client income account names."""

    @pytest.mark.parametrize(
        "client_name,expected",
        [
            ("Acme Co.", "Income:AcmeCo"),
            ("globex", "Income:Globex"),
            ("R&D 42", "Income:RD42"),
            ("Café Ltd", "Income:CaféLtd"),
            ("über GmbH", "Income:ÜberGmbH"),
        ],
    )
    def test_account_name(self, client_name, expected):
        assert income_account("Income", client_name) == expected

    def test_name_without_letters_fails(self):
        with pytest.raises(ValueError):
            income_account("Income", "&&&")


class TestBuildTransaction:
    """Test the generated transaction."""

    def test_postings_balance(self, full_invoice):
        txn = build_invoice_transaction(full_invoice, LedgerConfig())

        assert txn.date == date(2023, 2, 17)
        assert txn.payee == "Acme Co."
        assert txn.narration == "Invoice #1 for Website"
        assert [posting.account for posting in txn.postings] == ["Assets:AccountsReceivable", "Income:AcmeCo"]
        assert sum(posting.units.number for posting in txn.postings) == 0
        assert txn.postings[0].units.number == Decimal("29.50")
        assert txn.postings[0].units.currency == "USD"

    def test_configured_accounts(self, full_invoice):
        config = LedgerConfig(receivable_account="Assets:Receivable", income_account_prefix="Income:Consulting")

        txn = build_invoice_transaction(full_invoice, config)

        assert txn.postings[0].account == "Assets:Receivable"
        assert txn.postings[1].account == "Income:Consulting:AcmeCo"


class TestWriteLedgerEntry:
    """Test writing the ledger file."""

    def test_writes_file_per_invoice(self, full_invoice, paths, data_dir):
        path = write_ledger_entry(full_invoice, paths, LedgerConfig())

        assert path == data_dir / "ledger" / "Invoice_1.ledger"
        text = path.read_text()
        assert text.startswith("2023-02-17 *")
        assert '"Invoice #1 for Website"' in text
        assert "Assets:AccountsReceivable" in text
        assert "29.50 USD" in text
        assert "-29.50 USD" in text
