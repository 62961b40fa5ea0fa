"""
Logic to read and write public keys and signatures in their binary forms

Public keys use the SEC1 compressed (33 byte) or uncompressed (65 byte)
encodings. Signatures use the 64 byte compact encoding r || s.
"""

from enum import Enum
from typing import Tuple


# SEC1 public key prefixes
PREFIX_EVEN = 0x02
PREFIX_ODD = 0x03
PREFIX_UNCOMPRESSED = 0x04

COMPRESSED_PUBKEY_LEN = 33
UNCOMPRESSED_PUBKEY_LEN = 65
COMPACT_SIGNATURE_LEN = 64

SCALAR_BYTES = 32


class VerificationError(Exception):
    """An error raised for inputs that cannot take part in a verification"""

    class ErrorType(Enum):
        """Types of verification errors"""
        DECODE = "decode"
        INVALID_PUBLIC_KEY = "invalid_public_key"
        INVALID_SIGNATURE = "invalid_signature"

    error_type: ErrorType

    def __init__(self, message: str = ""):
        super().__init__(f"{self.error_type.value}: {message}" if message else self.error_type.value)


class DecodeError(VerificationError):
    """The supplied text is not valid under the text encoding"""
    error_type = VerificationError.ErrorType.DECODE


class InvalidPublicKey(VerificationError):
    """Decoded bytes do not represent a point on the curve"""
    error_type = VerificationError.ErrorType.INVALID_PUBLIC_KEY


class InvalidSignature(VerificationError):
    """Decoded bytes do not represent a canonical, in-range scalar pair"""
    error_type = VerificationError.ErrorType.INVALID_SIGNATURE


def read_u256(data: bytes, offset: int) -> Tuple[int, int]:
    """Read a big-endian 256-bit integer at offset, return (value, new_offset)"""
    if offset + SCALAR_BYTES > len(data):
        raise ValueError("Not enough data for u256")
    return int.from_bytes(data[offset:offset + SCALAR_BYTES], byteorder='big'), offset + SCALAR_BYTES


def write_u256(value: int) -> bytes:
    return value.to_bytes(SCALAR_BYTES, byteorder='big')


def parse_pubkey_bytes(data: bytes) -> Tuple[int, int, bool]:
    """
    Split a SEC1 encoded public key into its parts.

    Returns (x, y_or_parity, compressed). For compressed keys the second
    element is the parity bit of y; for uncompressed keys it is y itself.
    Only the structure is checked here, not curve membership.
    """
    if len(data) == COMPRESSED_PUBKEY_LEN:
        if data[0] not in (PREFIX_EVEN, PREFIX_ODD):
            raise InvalidPublicKey(f"Bad prefix 0x{data[0]:02x} for compressed key")
        x, _ = read_u256(data, 1)
        return x, data[0] & 1, True

    if len(data) == UNCOMPRESSED_PUBKEY_LEN:
        if data[0] != PREFIX_UNCOMPRESSED:
            raise InvalidPublicKey(f"Bad prefix 0x{data[0]:02x} for uncompressed key")
        x, offset = read_u256(data, 1)
        y, _ = read_u256(data, offset)
        return x, y, False

    raise InvalidPublicKey(f"Public key must be 33 or 65 bytes, got {len(data)}")


def write_pubkey_bytes(x: int, y: int, compressed: bool) -> bytes:
    """Serialize affine coordinates in SEC1 form"""
    if compressed:
        return bytes([PREFIX_ODD if y & 1 else PREFIX_EVEN]) + write_u256(x)
    return bytes([PREFIX_UNCOMPRESSED]) + write_u256(x) + write_u256(y)


def parse_compact_signature(data: bytes) -> Tuple[int, int]:
    """Split a compact signature into (r, s). Range checks are left to the caller."""
    if len(data) != COMPACT_SIGNATURE_LEN:
        raise InvalidSignature(f"Compact signature must be {COMPACT_SIGNATURE_LEN} bytes, got {len(data)}")
    r, offset = read_u256(data, 0)
    s, _ = read_u256(data, offset)
    return r, s


def write_compact_signature(r: int, s: int) -> bytes:
    return write_u256(r) + write_u256(s)
