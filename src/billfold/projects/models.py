#!/usr/bin/env python3
"""
Project Record

A project belongs to one client, referenced by the client's name. The
reference is only checked when it is followed, not when the project is saved.
"""

from dataclasses import dataclass
from typing import Any

from ..core.exceptions import SchemaError
from ..core.ids import Id
from ..core.schema import check_fields, get_str


@dataclass(frozen=True)
class Project:
    """A piece of work invoiced to a client."""

    name: Id
    description: str
    client_ref: Id

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": str(self.name),
            "description": self.description,
            "client_ref": str(self.client_ref),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Project":
        record = "Project"
        check_fields(data, record, required=["name", "description", "client_ref"])
        try:
            name = Id(get_str(data, "name", record))
            client_ref = Id(get_str(data, "client_ref", record))
        except ValueError as e:
            raise SchemaError(f"{record}: {e}") from e
        return cls(name=name, description=get_str(data, "description", record), client_ref=client_ref)
