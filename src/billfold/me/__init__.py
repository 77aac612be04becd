"""
Operator Profile Package
"""

from .datastore import MeStore, create_me, load_or_create_me
from .models import Me, PaymentMethod

__all__ = ["Me", "MeStore", "PaymentMethod", "create_me", "load_or_create_me"]
