#!/usr/bin/env python3
"""
Mailing Address and Contact Info

Plain value records shared by clients and the operator profile. No format
validation is applied beyond requiring the mandatory fields.
"""

from dataclasses import dataclass
from typing import Any

import click

from .prompts import prompt_optional, prompt_required
from .schema import check_fields, get_optional_str, get_str


@dataclass(frozen=True)
class MailingAddress:
    """Postal address; addr2/addr3 are optional extra lines."""

    addr1: str
    city: str
    state: str
    zip: str
    addr2: str | None = None
    addr3: str | None = None

    def __post_init__(self) -> None:
        # Blank optional lines are stored as absent
        for name in ("addr2", "addr3"):
            value = getattr(self, name)
            if value is not None and not value.strip():
                object.__setattr__(self, name, None)

    def lines(self) -> list[str]:
        """Display lines, skipping absent optional lines."""
        street = [line for line in (self.addr1, self.addr2, self.addr3) if line]
        return [*street, f"{self.city}, {self.state} {self.zip}"]

    def to_dict(self) -> dict[str, Any]:
        return {
            "addr1": self.addr1,
            "addr2": self.addr2,
            "addr3": self.addr3,
            "city": self.city,
            "state": self.state,
            "zip": self.zip,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "MailingAddress":
        record = "MailingAddress"
        check_fields(data, record, required=["addr1", "city", "state", "zip"], optional=["addr2", "addr3"])
        return cls(
            addr1=get_str(data, "addr1", record),
            addr2=get_optional_str(data, "addr2", record),
            addr3=get_optional_str(data, "addr3", record),
            city=get_str(data, "city", record),
            state=get_str(data, "state", record),
            zip=get_str(data, "zip", record),
        )

    @classmethod
    def create_from_user_input(cls) -> "MailingAddress":
        """Prompt for an address. Line 3 is only offered when line 2 was given."""
        click.echo("Mailing address:")
        addr1 = prompt_required("Address Line 1")
        addr2 = prompt_optional("Address Line 2")
        addr3 = prompt_optional("Address Line 3") if addr2 else None
        city = prompt_required("City")
        state = prompt_required("State")
        zip_code = prompt_required("Zipcode")
        return cls(addr1=addr1, addr2=addr2, addr3=addr3, city=city, state=state, zip=zip_code)


@dataclass(frozen=True)
class ContactInfo:
    """Email address and phone number."""

    email: str
    phone: str

    def to_dict(self) -> dict[str, Any]:
        return {"email": self.email, "phone": self.phone}

    @classmethod
    def from_dict(cls, data: Any) -> "ContactInfo":
        record = "ContactInfo"
        check_fields(data, record, required=["email", "phone"])
        return cls(email=get_str(data, "email", record), phone=get_str(data, "phone", record))

    @classmethod
    def create_from_user_input(cls) -> "ContactInfo":
        click.echo("Contact info:")
        email = prompt_required("Email")
        phone = prompt_required("Phone")
        return cls(email=email, phone=phone)
