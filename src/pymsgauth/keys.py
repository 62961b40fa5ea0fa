"""
Value types taking part in a verification

Message, PublicKey and Signature are immutable and validate themselves on
construction, so an instance that exists is always usable by the verifier.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .crypto import ec
from .crypto.hash import DIGEST_LEN, HashResult, hash_bytes, hash_string
from .crypto.secp256k1 import SECP256K1, get_context
from .ser import (
    InvalidPublicKey,
    InvalidSignature,
    parse_compact_signature,
    parse_pubkey_bytes,
    write_compact_signature,
    write_pubkey_bytes,
)


@dataclass(frozen=True)
class Message:
    """A 32-byte digest accepted as the scalar input of a signature"""

    digest: bytes

    def __post_init__(self):
        if not isinstance(self.digest, bytes):
            object.__setattr__(self, "digest", bytes(self.digest))
        if len(self.digest) != DIGEST_LEN:
            raise ValueError(f"Message digest must be {DIGEST_LEN} bytes, got {len(self.digest)}")
        if int.from_bytes(self.digest, byteorder='big') >= SECP256K1.N:
            raise ValueError("Message digest is not below the group order")

    @classmethod
    def from_digest(cls, digest: Union[HashResult, bytes]) -> 'Message':
        if isinstance(digest, HashResult):
            return cls(digest.as_ref())
        return cls(bytes(digest))

    def to_int(self) -> int:
        return int.from_bytes(self.digest, byteorder='big')


def make_message_from_bytes(data: bytes) -> Message:
    """Hash a byte message with SHA-256 and wrap the digest for verification"""
    return Message.from_digest(hash_bytes(data))


def make_message_from_string(text: str) -> Message:
    """Hash a string message with SHA-256 and wrap the digest for verification"""
    return Message.from_digest(hash_string(text))


@dataclass(frozen=True)
class PublicKey:
    """
    A secp256k1 public key

    Holds the affine coordinates of a point on the curve together with the
    SEC1 form it was decoded from, so it re-serializes to the same bytes.
    """

    x: int
    y: int
    compressed: bool = True

    def __post_init__(self):
        if not get_context().is_on_curve(self.x, self.y):
            raise InvalidPublicKey("Point is not on the curve")

    @classmethod
    def from_bytes(cls, data: bytes) -> 'PublicKey':
        """
        Parse a SEC1 compressed or uncompressed public key.

        Raises:
            InvalidPublicKey: wrong length or prefix, coordinates out of range,
                or a point that is not on the curve
        """
        x, y_or_parity, compressed = parse_pubkey_bytes(bytes(data))
        if compressed:
            point = get_context().lift_x(x, bool(y_or_parity))
            if point is None:
                raise InvalidPublicKey("No curve point has this x coordinate")
            return cls(point.x, point.y, True)
        return cls(x, y_or_parity, False)

    def serialize(self, compressed: Optional[bool] = None) -> bytes:
        """Return the SEC1 encoding, by default in the form the key was created with"""
        if compressed is None:
            compressed = self.compressed
        return write_pubkey_bytes(self.x, self.y, compressed)

    def point(self) -> ec.Point:
        return ec.Point(self.x, self.y, 1, SECP256K1)


@dataclass(frozen=True)
class Signature:
    """
    An ECDSA signature in canonical form

    Both components lie in [1, n) and s is in the lower half of the range.
    A high-s signature is an equally valid mathematical signature, which is
    why it is rejected: accepting both would make signatures malleable.
    """

    r: int
    s: int

    def __post_init__(self):
        n = SECP256K1.N
        if not 0 < self.r < n:
            raise InvalidSignature("r is zero or not below the group order")
        if not 0 < self.s < n:
            raise InvalidSignature("s is zero or not below the group order")
        if self.s > n // 2:
            raise InvalidSignature("s is not in the lower half of the group order")

    @classmethod
    def from_compact(cls, data: bytes, normalize_s: bool = False) -> 'Signature':
        """
        Parse a 64-byte compact signature.

        With ``normalize_s`` a high-s signature is replaced by its low-s twin
        instead of being rejected.
        """
        r, s = parse_compact_signature(bytes(data))
        if normalize_s and 0 < s < SECP256K1.N and s > SECP256K1.N // 2:
            s = SECP256K1.N - s
        return cls(r, s)

    def serialize_compact(self) -> bytes:
        return write_compact_signature(self.r, self.s)
