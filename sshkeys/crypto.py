"""
SSH ECDSA Cryptographic Operations

Provides ECDSA signature generation and verification for SSH keys:
- digest selection (SHA-1 by default, size-matched on request)
- DER-encoded signatures, as produced by the crypto provider
- strict separation between "signature mismatch" and "signature unusable"

Standards Reference:
- RFC 5656 Section 6.2 - ECDSA Signature Algorithm
- FIPS 186-4 Section 6 - ECDSA
- RFC 3279 Section 2.2.3 - Ecdsa-Sig-Value (DER SEQUENCE of r, s)

Author: SSH Keys Project
Date: October 2026
"""

from typing import Optional

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.ec import (
    EllipticCurvePrivateKey,
    EllipticCurvePublicKey,
)
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature

from config.keys_config import DIGEST_CURVE, DIGEST_SHA1, KEY_CONSTANTS
from utils.logger import KeyLogger

from .errors import CryptoError
from .types import EcCurve


logger = KeyLogger.get_logger("sshkeys.crypto")


# ============================================================================
# DIGEST SELECTION (RFC 5656 Section 6.2.1)
# ============================================================================


def signature_hash_algorithm(
    curve: EcCurve,
    digest_policy: Optional[str] = None,
) -> hashes.HashAlgorithm:
    """
    Select the message digest for ECDSA on the given curve.

    Args:
        curve: Curve of the signing key
        digest_policy: "sha1" or "curve" (default: KEY_CONSTANTS.SIGNATURE_DIGEST)

    Returns:
        HashAlgorithm: SHA1 for "sha1", SHA256/384/512 for "curve"

    Raises:
        CryptoError: If the policy is unknown
    """
    if digest_policy is None:
        digest_policy = KEY_CONSTANTS.SIGNATURE_DIGEST

    if digest_policy == DIGEST_SHA1:
        return hashes.SHA1()
    if digest_policy == DIGEST_CURVE:
        return curve.hash_algorithm()
    raise CryptoError(f"Unknown signature digest policy: {digest_policy}")


# ============================================================================
# ECDSA SIGNATURE OPERATIONS
# ============================================================================


def sign_data_ecdsa(
    data: bytes,
    private_key: EllipticCurvePrivateKey,
    curve: EcCurve,
    digest_policy: Optional[str] = None,
) -> bytes:
    """
    Sign data with ECDSA.

    Args:
        data: Message to sign (hashed by the provider)
        private_key: ECDSA private key on ``curve``
        curve: Curve of the key, selects the digest under the "curve" policy
        digest_policy: Optional override of KEY_CONSTANTS.SIGNATURE_DIGEST

    Returns:
        bytes: DER-encoded ECDSA signature (SEQUENCE { r, s })

    Raises:
        CryptoError: If the provider cannot produce a signature
    """
    algorithm = signature_hash_algorithm(curve, digest_policy)

    try:
        return private_key.sign(data, ec.ECDSA(algorithm))
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        logger.warning(f"Signing failed on {curve.ident}: {e}")
        raise CryptoError(f"Failed to sign data: {e}") from e


def verify_signature_ecdsa(
    data: bytes,
    signature: bytes,
    public_key: EllipticCurvePublicKey,
    curve: EcCurve,
    digest_policy: Optional[str] = None,
) -> bool:
    """
    Verify a DER-encoded ECDSA signature.

    The signature is decoded before verification, because the provider
    reports unparseable DER and a wrong signature with the same exception.

    Args:
        data: Original message
        signature: DER-encoded ECDSA signature
        public_key: ECDSA public key on ``curve``
        curve: Curve of the key, selects the digest under the "curve" policy
        digest_policy: Optional override of KEY_CONSTANTS.SIGNATURE_DIGEST

    Returns:
        bool: True if the signature matches, False on a clean mismatch

    Raises:
        CryptoError: If the signature or message cannot be evaluated
    """
    algorithm = signature_hash_algorithm(curve, digest_policy)

    try:
        decode_dss_signature(signature)
    except (ValueError, TypeError) as e:
        logger.warning(f"Malformed ECDSA signature for {curve.ident}: {e}")
        raise CryptoError(f"Signature is not a valid ECDSA DER sequence: {e}") from e

    try:
        public_key.verify(signature, data, ec.ECDSA(algorithm))
        return True
    except InvalidSignature:
        logger.debug(f"Signature mismatch on {curve.ident} ({algorithm.name})")
        return False
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise CryptoError(f"Failed to verify signature: {e}") from e
