"""
SSH ECDSA Keys

ECDSA key values for the NIST P-256/P-384/P-521 curves, their SSH public
key blob encoding, and signing/verification bound to that representation.

Submodules:
- types: Curve registry (EcCurve) and SSH algorithm names
- primitives: SSH wire buffer and ECDSA blob codec
- crypto: ECDSA sign/verify with digest selection
- ecdsa: EcDsaPublicKey and EcDsaKeyPair
- errors: Exception taxonomy

Standards Reference:
- RFC 4251 - SSH Protocol Architecture (data types)
- RFC 5656 - Elliptic Curve Algorithm Integration in SSH

Author: SSH Keys Project
Date: October 2026
"""

from .types import (
    NIST_P256_NAME,
    NIST_P384_NAME,
    NIST_P521_NAME,
    EcCurve,
)

from .errors import (
    SSHKeyError,
    UnsupportedCurveError,
    InvalidFormatError,
    CryptoError,
    EncodingError,
)

from .primitives import (
    SshReader,
    SshWriter,
    encode_point_uncompressed,
    encode_ecdsa_blob,
    decode_ecdsa_blob,
)

from .crypto import (
    signature_hash_algorithm,
    sign_data_ecdsa,
    verify_signature_ecdsa,
)

from .ecdsa import EcDsaKeyPair, EcDsaPublicKey

__all__ = [
    # Curves
    "NIST_P256_NAME",
    "NIST_P384_NAME",
    "NIST_P521_NAME",
    "EcCurve",

    # Errors
    "SSHKeyError",
    "UnsupportedCurveError",
    "InvalidFormatError",
    "CryptoError",
    "EncodingError",

    # Encoding
    "SshReader",
    "SshWriter",
    "encode_point_uncompressed",
    "encode_ecdsa_blob",
    "decode_ecdsa_blob",

    # Crypto
    "signature_hash_algorithm",
    "sign_data_ecdsa",
    "verify_signature_ecdsa",

    # Keys
    "EcDsaPublicKey",
    "EcDsaKeyPair",
]
