"""
Base58 text encoding of public keys and signatures

Keys and signatures travel as base58 strings using the Bitcoin alphabet,
without padding. The codec itself is provided by the ``base58`` package; this
module only adds the mapping onto key and signature types and keeps decode
failures apart from cryptographic ones.
"""

import logging

import base58

from .keys import PublicKey, Signature
from .ser import DecodeError


logger = logging.getLogger(__name__)


def encode(data: bytes, checksum: bool = False) -> str:
    """
    Encode bytes into a base58 string

    Args:
        data: Bytes to encode
        checksum: Append a 4-byte double SHA-256 checksum (base58check)

    Returns:
        Base58 encoded string
    """
    if checksum:
        return base58.b58encode_check(data).decode('ascii')
    return base58.b58encode(data).decode('ascii')


def decode(text: str, checksum: bool = False) -> bytes:
    """
    Decode a base58 string into bytes

    The string must be in canonical form, i.e. encoding the result again
    must give back exactly the same string.

    Raises:
        DecodeError: If the string is not valid base58 (or has a bad checksum)
    """
    if not isinstance(text, str):
        raise DecodeError(f"Expected str, got {type(text).__name__}")
    if not text:
        raise DecodeError("Empty text")

    try:
        if checksum:
            data = base58.b58decode_check(text)
        else:
            data = base58.b58decode(text)
    except ValueError as e:
        logger.debug("Rejected base58 text %r: %s", text, e)
        raise DecodeError(str(e)) from e

    if encode(data, checksum) != text:
        logger.debug("Rejected non-canonical base58 text %r", text)
        raise DecodeError("Text is not in canonical base58 form")

    return data


def decode_public_key(text: str, checksum: bool = False) -> PublicKey:
    """
    Decode a base58 public key

    Raises:
        DecodeError: The text is not valid base58
        InvalidPublicKey: The decoded bytes are not a point on the curve
    """
    return PublicKey.from_bytes(decode(text, checksum))


def decode_signature(text: str, checksum: bool = False) -> Signature:
    """
    Decode a base58 compact signature

    Raises:
        DecodeError: The text is not valid base58
        InvalidSignature: The decoded bytes are not a canonical (r, s) pair
    """
    return Signature.from_compact(decode(text, checksum))


def encode_public_key(pubkey: PublicKey, compressed: bool = True, checksum: bool = False) -> str:
    return encode(pubkey.serialize(compressed), checksum)


def encode_signature(signature: Signature, checksum: bool = False) -> str:
    return encode(signature.serialize_compact(), checksum)
