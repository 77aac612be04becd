"""
Clients Package

Client records, their YAML storage, and the get-or-create workflow.
"""

from .datastore import ClientStore, get_or_create_client
from .models import Client

__all__ = ["Client", "ClientStore", "get_or_create_client"]
