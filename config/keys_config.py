"""
Key Configuration - Costanti centralizzate

Centralizes the tunable behaviour of the ECDSA key layer. Every value can
be overridden from the environment with the SSHKEYS_ prefix.

Usage:
    from config.keys_config import KEY_CONSTANTS

    if KEY_CONSTANTS.SIGNATURE_DIGEST == "sha1":
        ...

Environment:
    SSHKEYS_SIGNATURE_DIGEST   "sha1" (default) or "curve"
    SSHKEYS_LOG_LEVEL          level name or number (default: WARNING)
    SSHKEYS_LOG_DIR            directory for <logger>.log files
    SSHKEYS_LOG_CONSOLE        "1" to also log to stdout
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional


# Digest policies
DIGEST_SHA1 = "sha1"  # SHA-1 for every curve (wire compatible default)
DIGEST_CURVE = "curve"  # SHA-256/384/512 by curve size (RFC 5656)

DIGEST_POLICIES = (DIGEST_SHA1, DIGEST_CURVE)


@dataclass(frozen=True)
class KeyConstants:
    """
    Costanti centralizzate per le chiavi ECDSA.

    Attributi:
        SIGNATURE_DIGEST: Digest policy for sign/verify
        LOG_LEVEL: Minimum level for key layer loggers
        LOG_DIR: Directory for log files (None = no file output)
        LOG_CONSOLE: Also log to stdout
    """
    SIGNATURE_DIGEST: str = DIGEST_SHA1

    # Logging
    LOG_LEVEL: int = logging.WARNING
    LOG_DIR: Optional[str] = None
    LOG_CONSOLE: bool = False


def _parse_level(value: str) -> int:
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"Livello di log non riconosciuto: {value}")
    return level


def load_key_constants(environ: Optional[Mapping[str, str]] = None) -> KeyConstants:
    """
    Build KeyConstants from defaults plus SSHKEYS_* environment overrides.

    Args:
        environ: Mapping to read (default: os.environ)

    Returns:
        KeyConstants: Resolved configuration

    Raises:
        ValueError: If a digest policy or log level is not recognized
    """
    if environ is None:
        environ = os.environ

    defaults = KeyConstants()

    digest = environ.get("SSHKEYS_SIGNATURE_DIGEST", defaults.SIGNATURE_DIGEST).lower()
    if digest not in DIGEST_POLICIES:
        raise ValueError(f"Unknown signature digest policy: {digest} (expected one of {DIGEST_POLICIES})")

    level = defaults.LOG_LEVEL
    if environ.get("SSHKEYS_LOG_LEVEL"):
        level = _parse_level(environ["SSHKEYS_LOG_LEVEL"])

    return KeyConstants(
        SIGNATURE_DIGEST=digest,
        LOG_LEVEL=level,
        LOG_DIR=environ.get("SSHKEYS_LOG_DIR") or defaults.LOG_DIR,
        LOG_CONSOLE=environ.get("SSHKEYS_LOG_CONSOLE", "0") == "1",
    )


# Istanza singleton globale
KEY_CONSTANTS = load_key_constants()
