"""
Python Message Authentication Library

Verification of secp256k1 ECDSA signatures over byte and text messages.
Messages are hashed with SHA-256; public keys and signatures are exchanged as
base58 strings.

Typical use::

    from pymsgauth import verify_string_message

    if verify_string_message("hello", signature_b58, pubkey_b58):
        ...

A signature that does not match returns False. Malformed text raises
DecodeError, a key that is not on the curve raises InvalidPublicKey and a
non-canonical signature raises InvalidSignature.
"""

import logging

from .validation import (
    verify,
    verify_raw,
    verify_bytes_message,
    verify_string_message,
)

from .keys import (
    Message,
    PublicKey,
    Signature,
    make_message_from_bytes,
    make_message_from_string,
)

from .encoding import (
    encode,
    decode,
    decode_public_key,
    decode_signature,
    encode_public_key,
    encode_signature,
)

from .ser import (
    VerificationError,
    DecodeError,
    InvalidPublicKey,
    InvalidSignature,
)

from .crypto import (
    Hasher,
    HashResult,
    hash_bytes,
    hash_string,
    get_context,
    init_context,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Verification
    "verify",
    "verify_raw",
    "verify_bytes_message",
    "verify_string_message",

    # Value types
    "Message",
    "PublicKey",
    "Signature",
    "make_message_from_bytes",
    "make_message_from_string",

    # Base58 functions
    "encode",
    "decode",
    "decode_public_key",
    "decode_signature",
    "encode_public_key",
    "encode_signature",

    # Errors
    "VerificationError",
    "DecodeError",
    "InvalidPublicKey",
    "InvalidSignature",

    # Hashing and curve context
    "Hasher",
    "HashResult",
    "hash_bytes",
    "hash_string",
    "get_context",
    "init_context",
]
