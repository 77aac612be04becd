"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from pathlib import Path
from unittest.mock import patch

import click
import pytest
from click.testing import CliRunner

from billfold.clients.datastore import ClientStore
from billfold.clients.models import Client
from billfold.core import config as config_module
from billfold.core.config import DataPaths
from billfold.core.contact import ContactInfo, MailingAddress
from billfold.core.dates import DateString
from billfold.core.ids import Id
from billfold.core.money import PriceUSD
from billfold.invoices.datastore import InvoiceStore
from billfold.invoices.models import Invoice, LineItem
from billfold.me.datastore import MeStore
from billfold.me.models import Me, PaymentMethod
from billfold.projects.datastore import ProjectStore
from billfold.projects.models import Project


@pytest.fixture
def data_dir(tmp_path) -> Path:
    """Data root used by the test (also exported as BILLFOLD_DATA_DIR)."""
    return tmp_path / "data"


@pytest.fixture
def paths(data_dir) -> DataPaths:
    return DataPaths(data_dir)


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path, data_dir):
    """Point configuration at a temporary data directory and a missing config file."""
    monkeypatch.setenv("BILLFOLD_CONFIG", str(tmp_path / "config.toml"))
    monkeypatch.setenv("BILLFOLD_DATA_DIR", str(data_dir))
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setattr(config_module, "_config", None)


@pytest.fixture
def run_interactive():
    """Run a prompting function under CliRunner; returns (result, return value)."""

    def run(func, input_text):
        captured = {}

        @click.command()
        def command():
            captured["value"] = func()

        result = CliRunner().invoke(command, input=input_text)
        return result, captured.get("value")

    return run


@pytest.fixture
def keep_edits():
    """Simulate closing the review editor without saving (record kept as-is)."""
    with patch("click.edit", return_value=None) as mock_edit:
        yield mock_edit


@pytest.fixture
def sample_address() -> MailingAddress:
    return MailingAddress(addr1="123 Happy Lane", city="Springfield", state="Ohio", zip="12345")


@pytest.fixture
def sample_me(sample_address) -> Me:
    return Me(
        name="Jane Q. Doe",
        address=sample_address,
        contact=ContactInfo(email="jane@example.com", phone="(412) 555-1827"),
        payment=[
            PaymentMethod(name="Check"),
            PaymentMethod(name="Venmo", display_text="Venmo @jane", url="https://venmo.com/jane"),
        ],
    )


@pytest.fixture
def sample_client() -> Client:
    return Client(
        name=Id("Acme Co."),
        address=MailingAddress(addr1="1 Road Runner Way", addr2="Suite 5", city="Phoenix", state="AZ", zip="85001"),
        contact=ContactInfo(email="billing@acme.example", phone="555-0100"),
    )


@pytest.fixture
def sample_project(sample_client) -> Project:
    return Project(name=Id("Website"), description="Website redesign", client_ref=sample_client.name)


@pytest.fixture
def sample_invoice(sample_project) -> Invoice:
    return Invoice(
        number=1,
        project_ref=sample_project.name,
        date=DateString("2023-02-17"),
        due_date=DateString("2023-02-24"),
        items=[
            LineItem(description="Design", quantity=1, unit_price=PriceUSD(10.30)),
            LineItem(description="Hosting", quantity=2, unit_price=PriceUSD(9.60)),
        ],
    )


@pytest.fixture
def populated_paths(paths, sample_me, sample_client, sample_project, sample_invoice) -> DataPaths:
    """Data directory holding a profile, one client, one project and invoice #1."""
    MeStore(paths).save(sample_me)
    ClientStore(paths).save(sample_client)
    ProjectStore(paths).save(sample_project)
    InvoiceStore(paths).save(sample_invoice)
    return paths


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for price handling and precision")
