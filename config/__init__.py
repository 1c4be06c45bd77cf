"""
Key Configuration Package

Centralizza le costanti del layer chiavi ECDSA.
"""

from .keys_config import (
    DIGEST_CURVE,
    DIGEST_POLICIES,
    DIGEST_SHA1,
    KEY_CONSTANTS,
    KeyConstants,
    load_key_constants,
)

__all__ = [
    'DIGEST_CURVE',
    'DIGEST_POLICIES',
    'DIGEST_SHA1',
    'KEY_CONSTANTS',
    'KeyConstants',
    'load_key_constants',
]
