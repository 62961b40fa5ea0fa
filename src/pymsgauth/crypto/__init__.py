"""
Cryptographic primitives for message authentication

This module provides SHA-256 hashing and ECDSA signature validation over the
secp256k1 curve.
"""

from .hash import Hasher, HashResult, DIGEST_LEN, hash_bytes, hash_string
from .ec import CurveContext, Point, validate_ecdsa
from .secp256k1 import SECP256K1, Secp256k1Curve, get_context, init_context

__all__ = [
    'Hasher',
    'HashResult',
    'DIGEST_LEN',
    'hash_bytes',
    'hash_string',
    'CurveContext',
    'Point',
    'validate_ecdsa',
    'SECP256K1',
    'Secp256k1Curve',
    'get_context',
    'init_context',
]
