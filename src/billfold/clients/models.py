#!/usr/bin/env python3
"""
Client Record

A client is named by an Id that doubles as its display name and filename.
"""

from dataclasses import dataclass
from typing import Any

from ..core.contact import ContactInfo, MailingAddress
from ..core.exceptions import SchemaError
from ..core.ids import Id
from ..core.prompts import print_header, review_until_valid
from ..core.schema import check_fields, get_str


@dataclass(frozen=True)
class Client:
    """Someone who gets invoiced."""

    name: Id
    address: MailingAddress
    contact: ContactInfo

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": str(self.name),
            "address": self.address.to_dict(),
            "contact": self.contact.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Client":
        record = "Client"
        check_fields(data, record, required=["name", "address", "contact"])
        try:
            name = Id(get_str(data, "name", record))
        except ValueError as e:
            raise SchemaError(f"{record}.name: {e}") from e
        return cls(
            name=name,
            address=MailingAddress.from_dict(data["address"]),
            contact=ContactInfo.from_dict(data["contact"]),
        )

    @classmethod
    def create_from_user_input(cls, name: Id) -> "Client":
        """Prompt for a new client's details, then let the user review the YAML."""
        print_header(f"Create client {name}")

        address = MailingAddress.create_from_user_input()
        contact = ContactInfo.create_from_user_input()

        client = cls(name=name, address=address, contact=contact)
        return review_until_valid(client, cls.from_dict)
