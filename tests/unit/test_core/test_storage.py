#!/usr/bin/env python3
"""Tests for flat-file YAML record storage."""

import pytest

from billfold.clients.datastore import ClientStore
from billfold.core.exceptions import RecordNotFoundError, SchemaError
from billfold.core.ids import Id
from billfold.invoices.datastore import InvoiceStore


class TestDataPaths:
    """Test per-kind directory creation."""

    def test_directories_created_on_access(self, paths, data_dir):
        assert not data_dir.exists()

        for name in ["clients", "projects", "invoices", "receipts", "pdfs", "ledger"]:
            directory = getattr(paths, f"{name}_dir")
            assert directory == data_dir / name
            assert directory.is_dir()

    def test_directory_access_is_idempotent(self, paths):
        first = paths.clients_dir
        assert paths.clients_dir == first


class TestYamlRepository:
    """Test save/load/list through the client and invoice stores."""

    def test_save_and_load_client(self, paths, sample_client):
        store = ClientStore(paths)
        path = store.save(sample_client)

        assert path == paths.clients_dir / "Acme Co..yaml"
        assert store.load(Id("Acme Co.")) == sample_client

    def test_save_overwrites_existing_record(self, paths, sample_invoice):
        store = InvoiceStore(paths)
        store.save(sample_invoice)

        changed = sample_invoice.__class__(
            number=1,
            project_ref=sample_invoice.project_ref,
            date=sample_invoice.date,
            due_date=sample_invoice.due_date,
            items=[],
        )
        store.save(changed)

        assert store.load(1).items == []
        assert store.list() == [1]

    def test_load_missing_raises_not_found(self, paths):
        with pytest.raises(RecordNotFoundError):
            ClientStore(paths).load(Id("Nobody"))

    def test_find_by_id_missing_raises_not_found(self, paths):
        with pytest.raises(FileNotFoundError):
            InvoiceStore(paths).find_by_id(99)

    def test_load_malformed_yaml_raises_schema_error(self, paths):
        (paths.clients_dir / "Broken.yaml").write_text("name: [unclosed\n")

        with pytest.raises(SchemaError):
            ClientStore(paths).load(Id("Broken"))

    def test_load_rejects_unknown_fields(self, paths, sample_client):
        store = ClientStore(paths)
        path = store.save(sample_client)
        path.write_text(path.read_text() + "nickname: Roadrunner\n")

        with pytest.raises(SchemaError, match="unknown field"):
            store.load(sample_client.name)

    def test_load_rejects_missing_fields(self, paths):
        (paths.clients_dir / "Partial.yaml").write_text("name: Partial\n")

        with pytest.raises(SchemaError, match="missing field"):
            ClientStore(paths).load(Id("Partial"))

    def test_list_skips_undecodable_filenames(self, paths, sample_client):
        store = ClientStore(paths)
        store.save(sample_client)
        (paths.clients_dir / "Beta LLC.yaml").write_text("irrelevant: true\n")
        (paths.clients_dir / "notes.txt").write_text("not a record")
        (paths.clients_dir / ".yaml").write_text("")
        (paths.clients_dir / "subdir.yaml").mkdir()

        assert store.list() == [Id("Acme Co."), Id("Beta LLC")]

    def test_list_invoice_numbers(self, paths):
        for name in ["5.yaml", "7.yaml", "2.yaml", "draft.yaml", "3.yml"]:
            (paths.invoices_dir / name).write_text("")

        assert InvoiceStore(paths).list() == [2, 5, 7]

    def test_save_leaves_no_temp_files(self, paths, sample_client):
        ClientStore(paths).save(sample_client)
        assert [p.name for p in paths.clients_dir.iterdir()] == ["Acme Co..yaml"]


class TestNextInvoiceNumber:
    """Test invoice number allocation."""

    def test_first_invoice_is_one(self, paths):
        assert InvoiceStore(paths).next_number() == 1

    def test_next_is_max_plus_one(self, paths):
        for number in [5, 7, 2]:
            (paths.invoices_dir / f"{number}.yaml").write_text("")

        assert InvoiceStore(paths).next_number() == 8
