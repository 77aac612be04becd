#!/usr/bin/env python3
"""
Client DataStore

YAML storage for clients under `<data_dir>/clients/<name>.yaml`.
"""

import logging

import click

from ..core.config import DataPaths
from ..core.exceptions import IdError
from ..core.ids import Id
from ..core.prompts import prompt_name
from ..core.storage import IdCodec, YamlRepository
from .models import Client

logger = logging.getLogger(__name__)


class ClientStore(YamlRepository[Id, Client]):
    """DataStore for client records."""

    def __init__(self, paths: DataPaths):
        super().__init__(
            directory=lambda: paths.clients_dir,
            kind="client",
            codec=IdCodec(),
            to_dict=Client.to_dict,
            from_dict=Client.from_dict,
            key_of=lambda client: client.name,
        )


def prompt_client_name(store: ClientStore) -> Id:
    """Ask for a client name, completing from existing clients."""
    candidates = [str(name) for name in store.list()]
    while True:
        try:
            return Id(prompt_name("Client name", candidates))
        except IdError as e:
            click.echo(f"  ❌ {e}")


def get_or_create_client(paths: DataPaths, name: Id | None = None) -> Id:
    """
    Return an existing client's name, creating the client first if needed.

    Args:
        paths: Data directory layout
        name: Client name; prompted for (with autocompletion) when None

    Returns:
        Name of the existing or newly saved client
    """
    store = ClientStore(paths)
    if name is None:
        name = prompt_client_name(store)

    if name in store.list():
        logger.debug(f"Using existing client {name}")
        return name

    client = Client.create_from_user_input(name)
    store.save(client)
    click.echo(f"Saved client {client.name}")
    return client.name
