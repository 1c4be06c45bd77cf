"""
SSH Key Error Taxonomy

Exception hierarchy raised by the ECDSA key layer.

- UnsupportedCurveError: curve identifier not in {nistp256, nistp384, nistp521}
- InvalidFormatError: key material or blob rejected (untrusted input)
- CryptoError: signature could not be produced or evaluated
- EncodingError: public point could not be serialized

Input-rejection errors are also ValueError, so existing
``except ValueError`` handlers around key loading keep working.

Author: SSH Keys Project
Date: October 2026
"""


class SSHKeyError(Exception):
    """Base class for all key errors."""


class UnsupportedCurveError(SSHKeyError, ValueError):
    """Curve identifier is not one of the supported NIST curves."""


class InvalidFormatError(SSHKeyError, ValueError):
    """Key material, group or blob does not describe a supported ECDSA key."""


class CryptoError(SSHKeyError):
    """
    Signing or verification failed for a reason other than a clean mismatch.

    A verify that raises this means the signature could not even be
    evaluated, which is distinct from an invalid signature (``False``).
    """


class EncodingError(SSHKeyError):
    """Public key could not be serialized to its SSH wire form."""
