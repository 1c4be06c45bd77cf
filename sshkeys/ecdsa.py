"""
ECDSA SSH Keys

Public key and key pair values for the NIST P-256/P-384/P-521 curves.

Both wrap a ``cryptography`` key object which exclusively owns the point
(and scalar); this module only decides which curve, which digest and how
the key is framed on the wire. Values are immutable after construction.

Standards Reference:
- RFC 5656 Section 3.1 - ECDSA Public Key Format
- RFC 5656 Section 3.1.2 - Signature Encoding
- RFC 4253 Section 6.6 - Public Key Algorithms

Author: SSH Keys Project
Date: October 2026
"""

import base64
import binascii
from typing import Optional

from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.ec import (
    EllipticCurvePrivateKey,
    EllipticCurvePublicKey,
)

from config.keys_config import DIGEST_POLICIES
from interfaces.key_interfaces import PrivKey, PubKey
from utils.logger import KeyLogger

from .crypto import sign_data_ecdsa, verify_signature_ecdsa
from .errors import InvalidFormatError
from .primitives import decode_ecdsa_blob, encode_ecdsa_blob, encode_point_uncompressed
from .types import EcCurve


logger = KeyLogger.get_logger("sshkeys.ecdsa")


def _check_digest_policy(digest_policy: Optional[str]):
    if digest_policy is not None and digest_policy not in DIGEST_POLICIES:
        raise ValueError(f"Unknown signature digest policy: {digest_policy} (expected one of {DIGEST_POLICIES})")


# ============================================================================
# PUBLIC KEY
# ============================================================================


class EcDsaPublicKey(PubKey):
    """
    ECDSA public key bound to one of the supported NIST curves.

    Text form: ``"<algorithm-name> <base64(blob)>"``.
    """

    def __init__(self, group, point: bytes, digest_policy: Optional[str] = None):
        """
        Build a public key from a curve group and an encoded point.

        Args:
            group: ``cryptography`` curve handle (e.g. ``ec.SECP256R1()``)
            point: X9.62 encoded point (``0x04 || X || Y``)
            digest_policy: Optional override of KEY_CONSTANTS.SIGNATURE_DIGEST

        Raises:
            InvalidFormatError: If the group is not a supported curve or
                the point is rejected by the provider
        """
        _check_digest_policy(digest_policy)
        curve = EcCurve.from_group(group)

        try:
            key = ec.EllipticCurvePublicKey.from_encoded_point(curve.group(), point)
        except (ValueError, TypeError) as e:
            logger.debug(f"Rejected {curve.ident} public point: {e}")
            raise InvalidFormatError(f"Invalid {curve.ident} public point: {e}") from e

        self._curve = curve
        self._key = key
        self._digest_policy = digest_policy

    @classmethod
    def from_public_key(
        cls, public_key: EllipticCurvePublicKey, digest_policy: Optional[str] = None
    ) -> "EcDsaPublicKey":
        """Wrap an existing ``cryptography`` public key."""
        if not isinstance(public_key, EllipticCurvePublicKey):
            raise InvalidFormatError(f"Expected an EC public key, got {type(public_key).__name__}")
        return cls(public_key.curve, encode_point_uncompressed(public_key), digest_policy)

    @classmethod
    def from_blob(cls, blob: bytes, digest_policy: Optional[str] = None) -> "EcDsaPublicKey":
        """
        Decode an SSH public key blob.

        Raises:
            UnsupportedCurveError: If the blob names an unknown algorithm
            InvalidFormatError: If the blob or its point is malformed
        """
        curve, point = decode_ecdsa_blob(blob)
        return cls(curve.group(), point, digest_policy)

    @classmethod
    def from_string(cls, text: str, digest_policy: Optional[str] = None) -> "EcDsaPublicKey":
        """
        Parse the text form ``"<algorithm-name> <base64>[ comment]"``.

        Raises:
            UnsupportedCurveError: If the algorithm name is unknown
            InvalidFormatError: If the text, base64 or blob is malformed,
                or the leading name disagrees with the blob
        """
        parts = text.split()
        if len(parts) < 2:
            raise InvalidFormatError("Public key text must be '<algorithm> <base64>'")

        name, body = parts[0], parts[1]
        curve = EcCurve.from_algorithm_name(name)

        try:
            blob = base64.b64decode(body, validate=True)
        except binascii.Error as e:
            raise InvalidFormatError(f"Invalid base64 in public key: {e}") from e

        key = cls.from_blob(blob, digest_policy)
        if key.curve is not curve:
            raise InvalidFormatError(
                f"Key type {name} does not match blob type {key.keytype()}"
            )
        return key

    @property
    def curve(self) -> EcCurve:
        return self._curve

    def size(self) -> int:
        return self._curve.size

    def keytype(self) -> str:
        return self._curve.algorithm_name

    def blob(self) -> bytes:
        return encode_ecdsa_blob(self._curve, self._key)

    def verify(self, data: bytes, signature: bytes) -> bool:
        return verify_signature_ecdsa(
            data, signature, self._key, self._curve, self._digest_policy
        )

    def __eq__(self, other):
        if not isinstance(other, EcDsaPublicKey):
            return NotImplemented
        # public numbers carry the named group, so this is group + point equality
        return (
            self._curve is other._curve
            and self._key.public_numbers() == other._key.public_numbers()
        )

    def __hash__(self):
        numbers = self._key.public_numbers()
        return hash((self._curve, numbers.x, numbers.y))

    def __str__(self):
        body = base64.b64encode(self.blob()).decode("ascii")
        return f"{self._curve.algorithm_name} {body}"

    def __repr__(self):
        return f"EcDsaPublicKey(curve={self._curve.ident})"


# ============================================================================
# KEY PAIR
# ============================================================================


class EcDsaKeyPair(PubKey, PrivKey):
    """
    ECDSA key pair: private scalar plus its public point.

    Verification always goes through a derived EcDsaPublicKey and never
    touches the private scalar.
    """

    def __init__(self, private_key: EllipticCurvePrivateKey, digest_policy: Optional[str] = None):
        """
        Wrap externally supplied private key material.

        Args:
            private_key: ``cryptography`` EC private key
            digest_policy: Optional override of KEY_CONSTANTS.SIGNATURE_DIGEST

        Raises:
            InvalidFormatError: If the key is not an EC key on a supported curve
        """
        _check_digest_policy(digest_policy)
        if not isinstance(private_key, EllipticCurvePrivateKey):
            raise InvalidFormatError(f"Expected an EC private key, got {type(private_key).__name__}")

        self._curve = EcCurve.from_group(private_key.curve)
        self._key = private_key
        self._digest_policy = digest_policy

    @classmethod
    def generate(cls, curve: EcCurve, digest_policy: Optional[str] = None) -> "EcDsaKeyPair":
        """Generate a fresh key pair on ``curve``."""
        return cls(ec.generate_private_key(curve.group()), digest_policy)

    @classmethod
    def from_private_value(
        cls, curve: EcCurve, private_value: int, digest_policy: Optional[str] = None
    ) -> "EcDsaKeyPair":
        """
        Build a key pair from a private scalar.

        Raises:
            InvalidFormatError: If the scalar is not in [1, n-1] for the curve
        """
        try:
            private_key = ec.derive_private_key(private_value, curve.group())
        except (ValueError, TypeError) as e:
            raise InvalidFormatError(f"Invalid {curve.ident} private value: {e}") from e
        return cls(private_key, digest_policy)

    @property
    def curve(self) -> EcCurve:
        return self._curve

    def clone_public_key(self) -> EcDsaPublicKey:
        """Detached public key for this pair's group and point."""
        public_key = self._key.public_key()
        return EcDsaPublicKey(
            public_key.curve,
            encode_point_uncompressed(public_key),
            self._digest_policy,
        )

    def size(self) -> int:
        return self._curve.size

    def keytype(self) -> str:
        return self._curve.algorithm_name

    def blob(self) -> bytes:
        return encode_ecdsa_blob(self._curve, self._key.public_key())

    def verify(self, data: bytes, signature: bytes) -> bool:
        return self.clone_public_key().verify(data, signature)

    def sign(self, data: bytes) -> bytes:
        """
        Sign ``data``.

        Returns:
            bytes: DER-encoded ECDSA signature; the digest is SHA-1 for every
                curve unless the "curve" digest policy is configured

        Raises:
            CryptoError: If signing fails
        """
        return sign_data_ecdsa(data, self._key, self._curve, self._digest_policy)

    def __repr__(self):
        return f"EcDsaKeyPair(curve={self._curve.ident})"
