"""
SSH Wire Primitives and ECDSA Blob Encoding

Provides the byte-buffer codec for SSH data types and the canonical
public key blob for ECDSA keys:

    string   algorithm-name      ("ecdsa-sha2-nistp256" | ...)
    string   curve-identifier    ("nistp256" | ...)
    string   Q                   (0x04 || X || Y)

Standards Reference:
- RFC 4251 Section 5 - Data Type Representations Used in the SSH Protocols
- RFC 5656 Section 3.1 - ECDSA Public Key Format
- SEC 1 v2 Section 2.3.3 - Elliptic-Curve-Point-to-Octet-String Conversion

Author: SSH Keys Project
Date: October 2026
"""

import struct
from io import BytesIO
from typing import Tuple

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ec import EllipticCurvePublicKey

from .errors import EncodingError, InvalidFormatError
from .types import EcCurve


# Tag byte of an uncompressed SEC 1 point
UNCOMPRESSED_POINT_TAG = 0x04


# ============================================================================
# SSH DATA TYPES (RFC 4251 Section 5)
# ============================================================================


class SshWriter:
    """
    Append-only buffer for SSH wire data types.

    Every ``string`` is a uint32 big-endian length followed by the raw bytes.
    """

    def __init__(self):
        self._buf = BytesIO()

    def write_uint32(self, value: int) -> "SshWriter":
        self._buf.write(struct.pack(">I", value))
        return self

    def write_string(self, data: bytes) -> "SshWriter":
        """Write a length-prefixed byte string."""
        data = bytes(data)
        self.write_uint32(len(data))
        self._buf.write(data)
        return self

    def write_utf8(self, text: str) -> "SshWriter":
        """Write a length-prefixed UTF-8 string."""
        return self.write_string(text.encode("utf-8"))

    def getvalue(self) -> bytes:
        return self._buf.getvalue()


class SshReader:
    """
    Sequential reader over SSH wire data.

    Truncated input raises InvalidFormatError: the data is always
    treated as untrusted.
    """

    def __init__(self, data: bytes):
        self._data = bytes(data)
        self._offset = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def _take(self, length: int) -> bytes:
        if length > self.remaining:
            raise InvalidFormatError(
                f"Truncated SSH data: need {length} bytes, {self.remaining} available"
            )
        chunk = self._data[self._offset:self._offset + length]
        self._offset += length
        return chunk

    def read_uint32(self) -> int:
        return struct.unpack(">I", self._take(4))[0]

    def read_string(self) -> bytes:
        """Read a length-prefixed byte string."""
        return self._take(self.read_uint32())

    def read_utf8(self) -> str:
        """Read a length-prefixed UTF-8 string."""
        raw = self.read_string()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidFormatError(f"Invalid UTF-8 in SSH string: {e}") from e


# ============================================================================
# ECDSA PUBLIC KEY BLOB (RFC 5656 Section 3.1)
# ============================================================================


def encode_point_uncompressed(public_key: EllipticCurvePublicKey) -> bytes:
    """
    Serialize a public point as ``0x04 || X || Y``.

    Coordinates are big-endian and padded to the field width of the curve
    (32, 48 or 66 bytes).

    Raises:
        EncodingError: If the provider cannot serialize the point
    """
    try:
        return public_key.public_bytes(
            encoding=serialization.Encoding.X962,
            format=serialization.PublicFormat.UncompressedPoint,
        )
    except (ValueError, TypeError, AttributeError) as e:
        raise EncodingError(f"Failed to serialize public point: {e}") from e


def encode_ecdsa_blob(curve: EcCurve, public_key: EllipticCurvePublicKey) -> bytes:
    """
    Build the canonical SSH public key blob for an ECDSA key.

    Args:
        curve: Curve the key belongs to
        public_key: Provider public key holding the point

    Returns:
        bytes: ``string name || string ident || string Q``

    Raises:
        EncodingError: If the point cannot be serialized
    """
    point = encode_point_uncompressed(public_key)

    writer = SshWriter()
    writer.write_utf8(curve.algorithm_name)
    writer.write_utf8(curve.ident)
    writer.write_string(point)
    return writer.getvalue()


def decode_ecdsa_blob(blob: bytes) -> Tuple[EcCurve, bytes]:
    """
    Parse an SSH ECDSA public key blob.

    Exact inverse of encode_ecdsa_blob(). The returned point is not
    validated against the curve here; key construction does that.

    Args:
        blob: SSH public key blob

    Returns:
        tuple: (EcCurve, encoded point bytes)

    Raises:
        UnsupportedCurveError: If the algorithm name is not a NIST ECDSA name
        InvalidFormatError: If the blob is truncated, has trailing bytes,
            or its curve identifier does not match the algorithm name
    """
    reader = SshReader(blob)

    curve = EcCurve.from_algorithm_name(reader.read_utf8())
    ident = reader.read_utf8()
    if ident != curve.ident:
        raise InvalidFormatError(
            f"Curve identifier {ident!r} does not match algorithm {curve.algorithm_name}"
        )

    point = reader.read_string()
    if reader.remaining:
        raise InvalidFormatError(f"Trailing data in ECDSA blob: {reader.remaining} bytes")
    if not point or point[0] != UNCOMPRESSED_POINT_TAG:
        raise InvalidFormatError("ECDSA blob point is not in uncompressed form")

    return curve, point
