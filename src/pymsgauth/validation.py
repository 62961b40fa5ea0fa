"""
Verification of secp256k1 ECDSA signatures over messages

This module ties the digest engine, the base58 adapter and the curve
arithmetic together. A signature that does not match is a normal outcome and
yields False; inputs that cannot be decoded or are not valid keys or
signatures raise a VerificationError subclass instead.
"""

import logging
from typing import Optional

from .crypto import ec
from .crypto.secp256k1 import get_context
from .encoding import decode_public_key, decode_signature
from .keys import Message, PublicKey, Signature, make_message_from_bytes, make_message_from_string


logger = logging.getLogger(__name__)


def verify(message: Message, pubkey: PublicKey, signature: Signature,
           context: Optional[ec.CurveContext] = None) -> bool:
    """
    Check an ECDSA signature over a message digest

    Args:
        message: Digest that was signed
        pubkey: Public key of the signer
        signature: Signature to check
        context: Curve context to use, the shared one by default

    Returns:
        True if the signature was made over message by the key, False otherwise
    """
    if context is None:
        context = get_context()

    valid = ec.validate_ecdsa(context, pubkey.point(), signature.r, signature.s, message.to_int())
    if not valid:
        logger.debug("Signature mismatch for digest %s", message.digest.hex())
    return valid


def verify_raw(hash_input: bytes, sig: bytes, pk: bytes) -> bool:
    """
    Validates a compact signature against a SEC1 public key and a 32-byte digest

    Raises:
        InvalidPublicKey: pk is not a valid public key
        InvalidSignature: sig is not a canonical compact signature
        ValueError: hash_input is not a valid digest
    """
    return verify(Message.from_digest(hash_input), PublicKey.from_bytes(pk), Signature.from_compact(sig))


def verify_bytes_message(message: bytes, signature_text: str, pubkey_text: str,
                         checksum: bool = False) -> bool:
    """
    Verify a signature over a byte message

    The signature and public key are base58 encoded.

    Raises:
        DecodeError: Either text is not valid base58
        InvalidPublicKey: The public key is not a point on the curve
        InvalidSignature: The signature is not a canonical (r, s) pair
        ValueError: The message digest is not below the group order
    """
    digest = make_message_from_bytes(message)
    return _verify_encoded(digest, signature_text, pubkey_text, checksum)


def verify_string_message(message: str, signature_text: str, pubkey_text: str,
                          checksum: bool = False) -> bool:
    """
    Verify a signature over a string message, hashed as UTF-8

    Raises:
        DecodeError: Either text is not valid base58
        InvalidPublicKey: The public key is not a point on the curve
        InvalidSignature: The signature is not a canonical (r, s) pair
        ValueError: The message digest is not below the group order
    """
    digest = make_message_from_string(message)
    return _verify_encoded(digest, signature_text, pubkey_text, checksum)


def _verify_encoded(digest: Message, signature_text: str, pubkey_text: str, checksum: bool) -> bool:
    pubkey = decode_public_key(pubkey_text, checksum)
    signature = decode_signature(signature_text, checksum)
    return verify(digest, pubkey, signature)
