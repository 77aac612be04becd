#!/usr/bin/env python3
"""
Operator Profile DataStore

The profile lives in `<data_dir>/me.yaml`. When it is missing, the CLI runs the
creation workflow before doing anything else.
"""

import logging

import click

from ..core.config import DataPaths
from ..core.contact import ContactInfo, MailingAddress
from ..core.exceptions import RecordNotFoundError
from ..core.prompts import print_header, prompt_optional, prompt_required, review_until_valid
from ..core.yaml_utils import read_yaml, write_yaml
from .models import Me, PaymentMethod

logger = logging.getLogger(__name__)


class MeStore:
    """DataStore for the singleton operator profile."""

    def __init__(self, paths: DataPaths):
        self.paths = paths

    @property
    def path(self):
        return self.paths.me_file

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Me:
        """
        Load the profile.

        Raises:
            RecordNotFoundError: If me.yaml does not exist
            SchemaError: If me.yaml is invalid
        """
        if not self.exists():
            raise RecordNotFoundError(f"Personal info not found: {self.path}")
        return Me.from_dict(read_yaml(self.path))

    def save(self, me: Me) -> None:
        write_yaml(self.path, me.to_dict())
        logger.debug(f"Saved personal info to {self.path}")


def prompt_payment_method() -> PaymentMethod | None:
    """Prompt for one payment method; a blank name ends the list."""
    name = prompt_optional("Payment method name (blank to finish)")
    if name is None:
        return None
    display_text = prompt_optional("Display text")
    url = prompt_optional("Link URL")
    return PaymentMethod(name=name, display_text=display_text, url=url)


def create_me() -> Me:
    """Prompt for the operator's profile, then review the YAML."""
    print_header("Personal info")

    name = prompt_required("Your name")
    address = MailingAddress.create_from_user_input()
    contact = ContactInfo.create_from_user_input()

    click.echo("Payment methods:")
    payment = []
    while True:
        method = prompt_payment_method()
        if method is None:
            break
        payment.append(method)

    me = Me(name=name, address=address, contact=contact, payment=payment)
    return review_until_valid(me, Me.from_dict)


def load_or_create_me(paths: DataPaths) -> Me:
    """Load the profile, creating and saving it first if it does not exist."""
    store = MeStore(paths)
    if store.exists():
        return store.load()

    click.echo("No personal info found; let's set it up.")
    me = create_me()
    store.save(me)
    return me
