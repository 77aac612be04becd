#!/usr/bin/env python3
"""Tests for client records and the get-or-create workflow."""

import pytest

from billfold.clients.datastore import ClientStore, get_or_create_client
from billfold.clients.models import Client
from billfold.core.contact import MailingAddress
from billfold.core.exceptions import SchemaError
from billfold.core.ids import Id


class TestClientModel:
    """Test client serialization."""

    def test_round_trip(self, sample_client):
        assert Client.from_dict(sample_client.to_dict()) == sample_client

    def test_invalid_name_is_schema_error(self, sample_client):
        data = sample_client.to_dict()
        data["name"] = "a/b"

        with pytest.raises(SchemaError):
            Client.from_dict(data)

    def test_nested_unknown_field_rejected(self, sample_client):
        data = sample_client.to_dict()
        data["address"]["country"] = "US"

        with pytest.raises(SchemaError, match="country"):
            Client.from_dict(data)

    def test_blank_optional_address_lines_are_absent(self):
        address = MailingAddress(addr1="1 Main St", addr2="  ", city="Town", state="ST", zip="00001")

        assert address.addr2 is None
        assert address.lines() == ["1 Main St", "Town, ST 00001"]


class TestGetOrCreateClient:
    """Test the interactive get-or-create flow."""

    def test_creates_new_client(self, paths, run_interactive, keep_edits):
        answers = "\n".join(
            [
                "Acme Co.",
                "1 Road Runner Way",
                "Suite 5",
                "",
                "Phoenix",
                "AZ",
                "85001",
                "billing@acme.example",
                "555-0100",
            ]
        )
        result, name = run_interactive(lambda: get_or_create_client(paths), answers + "\n")

        assert result.exit_code == 0, result.output
        assert name == Id("Acme Co.")

        client = ClientStore(paths).load(name)
        assert client.address.addr2 == "Suite 5"
        assert client.address.addr3 is None
        assert client.contact.email == "billing@acme.example"
        keep_edits.assert_called_once()

    def test_address_line_three_skipped_without_line_two(self, paths, run_interactive, keep_edits):
        answers = "\n".join(["Solo", "9 Elm St", "", "Town", "ST", "00001", "solo@example.com", "555"])
        result, name = run_interactive(lambda: get_or_create_client(paths), answers + "\n")

        assert result.exit_code == 0, result.output
        assert "Address Line 3" not in result.output
        assert ClientStore(paths).load(name).address.addr2 is None

    def test_existing_client_is_returned_without_prompts(self, paths, sample_client, run_interactive, keep_edits):
        ClientStore(paths).save(sample_client)

        result, name = run_interactive(lambda: get_or_create_client(paths, Id("Acme Co.")), "")

        assert result.exit_code == 0
        assert name == Id("Acme Co.")
        keep_edits.assert_not_called()

    def test_invalid_name_is_asked_again(self, paths, sample_client, run_interactive):
        ClientStore(paths).save(sample_client)

        result, name = run_interactive(lambda: get_or_create_client(paths), "a/b\nAcme Co.\n")

        assert name == Id("Acme Co.")
        assert "unsafe" in result.output
