"""
Key Capability Interfaces

Two small capability sets shared by every SSH key type:

- PubKey: read-only capabilities (size, keytype, blob, verify)
- PrivKey: signing capability (sign)

A key pair implements both; a public key implements only PubKey.
Capabilities are combined by multiple inheritance, not by a chain
from public key to key pair.

Author: SSH Keys Project
Date: October 2026
"""

from abc import ABC, abstractmethod


class PubKey(ABC):
    """
    Read-only key capability.

    Implementations: EcDsaPublicKey, EcDsaKeyPair
    """

    @abstractmethod
    def size(self) -> int:
        """Key size in bits."""

    @abstractmethod
    def keytype(self) -> str:
        """SSH algorithm name, e.g. "ecdsa-sha2-nistp256"."""

    @abstractmethod
    def blob(self) -> bytes:
        """
        Canonical SSH public key blob.

        Raises:
            EncodingError: If the key cannot be serialized
        """

    @abstractmethod
    def verify(self, data: bytes, signature: bytes) -> bool:
        """
        Verify a signature over ``data``.

        Returns:
            True if valid, False if the signature does not match

        Raises:
            CryptoError: If the signature cannot be evaluated at all
        """


class PrivKey(ABC):
    """
    Signing capability.

    Implementations: EcDsaKeyPair
    """

    @abstractmethod
    def sign(self, data: bytes) -> bytes:
        """
        Sign ``data``.

        Raises:
            CryptoError: If signing fails
        """
