#!/usr/bin/env python3
"""
Operator Profile

The operator's own name, address, contact info and accepted payment methods,
printed on every invoice and receipt. There is exactly one per data directory.
"""

from dataclasses import dataclass, field
from typing import Any

from ..core.contact import ContactInfo, MailingAddress
from ..core.exceptions import SchemaError
from ..core.schema import check_fields, get_list, get_optional_str, get_str
from ..documents.latex import LatexMarkup, escape_latex, href

_FILENAME_UNSAFE = frozenset("/\\\0")


@dataclass(frozen=True)
class PaymentMethod:
    """
    A way clients can pay, e.g. "Check" or "Venmo" with a profile link.

    `display_text` defaults to `name`; when `url` is set the text renders as a link.
    """

    name: str
    display_text: str | None = None
    url: str | None = None

    @property
    def text(self) -> str:
        return self.display_text or self.name

    def to_latex(self) -> LatexMarkup:
        """
        Render for the document template.

        Raises:
            ValueError: If the url is present but blank
        """
        if self.url is None:
            return escape_latex(self.text)
        if not self.url.strip():
            raise ValueError(f"Payment method {self.name!r} has a blank url")
        return href(self.url.strip(), self.text)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name}
        if self.display_text is not None:
            data["display_text"] = self.display_text
        if self.url is not None:
            data["url"] = self.url
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "PaymentMethod":
        record = "PaymentMethod"
        check_fields(data, record, required=["name"], optional=["display_text", "url"])
        return cls(
            name=get_str(data, "name", record),
            display_text=get_optional_str(data, "display_text", record),
            url=get_optional_str(data, "url", record),
        )


@dataclass(frozen=True)
class Me:
    """The operator's profile."""

    name: str
    address: MailingAddress
    contact: ContactInfo
    payment: list[PaymentMethod] = field(default_factory=list)

    def payment_names(self) -> list[str]:
        return [method.name for method in self.payment]

    def filename_name(self) -> str:
        """Name with whitespace and path separators removed, for output filenames."""
        return "".join(char for char in self.name if not char.isspace() and char not in _FILENAME_UNSAFE)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "address": self.address.to_dict(),
            "contact": self.contact.to_dict(),
            "payment": [method.to_dict() for method in self.payment],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Me":
        record = "Me"
        check_fields(data, record, required=["name", "address", "contact"], optional=["payment"])
        name = get_str(data, "name", record)
        if not name.strip():
            raise SchemaError(f"{record}.name: must not be blank")
        payment = get_list(data, "payment", record) if "payment" in data else []
        return cls(
            name=name,
            address=MailingAddress.from_dict(data["address"]),
            contact=ContactInfo.from_dict(data["contact"]),
            payment=[PaymentMethod.from_dict(item) for item in payment],
        )
