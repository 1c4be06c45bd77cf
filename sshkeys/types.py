"""
SSH ECDSA Curve Registry

Defines the closed set of NIST curves usable as SSH ECDSA keys and the
names under which each curve appears on the wire.

Standards Reference:
- RFC 5656 Section 6.1 - ECDSA public key algorithm names
- RFC 5656 Section 10.1 - Required curves (nistp256, nistp384, nistp521)
- FIPS 186-4 Appendix D - NIST recommended elliptic curves

Author: SSH Keys Project
Date: October 2026
"""

from enum import Enum

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

from .errors import InvalidFormatError, UnsupportedCurveError


# ============================================================================
# SSH ALGORITHM NAMES (RFC 5656 Section 6.1)
# ============================================================================

NIST_P256_NAME = "ecdsa-sha2-nistp256"
NIST_P384_NAME = "ecdsa-sha2-nistp384"
NIST_P521_NAME = "ecdsa-sha2-nistp521"


# ============================================================================
# CURVE ENUMERATION
# ============================================================================


class EcCurve(Enum):
    """
    Supported SSH ECDSA curves.

    The enum value is the short curve identifier used inside the SSH blob
    and accepted as textual input.
    """

    NISTP256 = "nistp256"
    NISTP384 = "nistp384"
    NISTP521 = "nistp521"

    @property
    def size(self) -> int:
        """Curve size in bits (256, 384 or 521)."""
        return _CURVE_SIZES[self]

    @property
    def algorithm_name(self) -> str:
        """SSH algorithm name, e.g. ``ecdsa-sha2-nistp256``."""
        return _ALGORITHM_NAMES[self]

    @property
    def ident(self) -> str:
        """Short curve identifier, e.g. ``nistp256``."""
        return self.value

    def group(self) -> ec.EllipticCurve:
        """Provider curve handle for this curve."""
        return _GROUP_FACTORIES[self]()

    def hash_algorithm(self) -> hashes.HashAlgorithm:
        """
        Size-matched digest from RFC 5656 Section 6.2.1.

        Used only by the ``curve`` digest policy; the default signing
        digest is SHA-1 for every curve.
        """
        return _CURVE_HASHES[self]()

    @classmethod
    def parse(cls, text: str) -> "EcCurve":
        """
        Parse a short curve identifier.

        Args:
            text: Exactly ``nistp256``, ``nistp384`` or ``nistp521``

        Returns:
            EcCurve: Matching curve

        Raises:
            UnsupportedCurveError: For any other input (no case folding)
        """
        if isinstance(text, str):
            for curve in cls:
                if curve.value == text:
                    return curve
        raise UnsupportedCurveError(f"Unsupported curve identifier: {text!r}")

    @classmethod
    def from_algorithm_name(cls, name: str) -> "EcCurve":
        """
        Map an SSH algorithm name back to its curve.

        Raises:
            UnsupportedCurveError: If the name is not an ECDSA NIST algorithm
        """
        for curve, algorithm_name in _ALGORITHM_NAMES.items():
            if algorithm_name == name:
                return curve
        raise UnsupportedCurveError(f"Unsupported key algorithm: {name!r}")

    @classmethod
    def from_group(cls, group) -> "EcCurve":
        """
        Map a provider curve handle to a supported curve.

        The handle is identified by its standard curve designation
        (``secp256r1``, ``secp384r1``, ``secp521r1``).

        Args:
            group: ``cryptography`` EllipticCurve instance (or class)

        Returns:
            EcCurve: Matching curve

        Raises:
            InvalidFormatError: If the handle has no designation or names
                a curve outside the supported set
        """
        designation = getattr(group, "name", None)
        if not isinstance(designation, str):
            raise InvalidFormatError(
                f"Curve group {type(group).__name__} has no standard curve name"
            )

        curve = _GROUP_NAMES.get(designation)
        if curve is None:
            raise InvalidFormatError(f"Unsupported curve group: {designation}")
        return curve


# Lookup tables (una riga per curva, nessun'altra curva è valida)
_CURVE_SIZES = {
    EcCurve.NISTP256: 256,
    EcCurve.NISTP384: 384,
    EcCurve.NISTP521: 521,
}

_ALGORITHM_NAMES = {
    EcCurve.NISTP256: NIST_P256_NAME,
    EcCurve.NISTP384: NIST_P384_NAME,
    EcCurve.NISTP521: NIST_P521_NAME,
}

_GROUP_FACTORIES = {
    EcCurve.NISTP256: ec.SECP256R1,
    EcCurve.NISTP384: ec.SECP384R1,
    EcCurve.NISTP521: ec.SECP521R1,
}

_CURVE_HASHES = {
    EcCurve.NISTP256: hashes.SHA256,
    EcCurve.NISTP384: hashes.SHA384,
    EcCurve.NISTP521: hashes.SHA512,
}

# prime256v1 is the X9.62 / OpenSSL name of secp256r1
_GROUP_NAMES = {
    "secp256r1": EcCurve.NISTP256,
    "prime256v1": EcCurve.NISTP256,
    "secp384r1": EcCurve.NISTP384,
    "secp521r1": EcCurve.NISTP521,
}
