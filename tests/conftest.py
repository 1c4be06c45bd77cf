"""
Pytest Configuration and Shared Fixtures

Fornisce fixture condivise per tutti i test:
- Vettore di test P-256 (punto + forma testuale attesa)
- Key pair generate per ogni curva supportata
- Reset della cache dei logger tra i test

Author: SSH Keys Project
Date: October 2026
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cryptography.hazmat.primitives.asymmetric import ec

from sshkeys import EcCurve, EcDsaKeyPair, EcDsaPublicKey
from utils.logger import KeyLogger


# Known-answer vector: nistp256 public point and its SSH text form
P256_POINT = bytes.fromhex(
    "04"
    "ab5c2bcd9c128aa3897caa3e9c9002590e418b3c2cbe5d0da84f6a1e5daa8689"
    "7d51dc292e42258057d0ec3e0e58fdc4ab524110b225738212d271fa4e0b515d"
)
P256_TEXT = (
    "ecdsa-sha2-nistp256 "
    "AAAAE2VjZHNhLXNoYTItbmlzdHAyNTYAAAAIbmlzdHAyNTYAAABBBKtcK82cEoqjiXyqPpyQAlkOQYs8"
    "LL5dDahPah5dqoaJfVHcKS5CJYBX0Ow+Dlj9xKtSQRCyJXOCEtJx+k4LUV0="
)

ALL_CURVES = list(EcCurve)


@pytest.fixture
def p256_public_key():
    """Public key del vettore di test nistp256."""
    return EcDsaPublicKey(ec.SECP256R1(), P256_POINT)


@pytest.fixture(scope="session", params=ALL_CURVES, ids=[c.ident for c in ALL_CURVES])
def key_pair(request):
    """
    Key pair per ogni curva supportata.
    Scope: session (generazione chiavi una volta sola).
    """
    return EcDsaKeyPair.generate(request.param)


@pytest.fixture(scope="function", autouse=True)
def reset_logger_cache():
    """I test che configurano logger propri non devono influenzare gli altri."""
    yield
    KeyLogger.clear_cache()
