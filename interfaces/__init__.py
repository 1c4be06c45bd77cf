"""
Key Interfaces Package

Capability sets implemented by the key types.
"""

from .key_interfaces import PrivKey, PubKey

__all__ = [
    "PubKey",
    "PrivKey",
]
