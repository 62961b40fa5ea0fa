"""
Shared fixtures: reference keys and signatures made with the ecdsa package
"""

import hashlib

import pytest
from ecdsa import SECP256k1, SigningKey
from ecdsa.util import sigdecode_string, sigencode_string

from pymsgauth import encode


ORDER = SECP256k1.order


def sign_digest(sk: SigningKey, digest: bytes) -> bytes:
    """Deterministically sign a digest, returning a low-s compact signature"""
    sig = sk.sign_digest_deterministic(digest, hashfunc=hashlib.sha256, sigencode=sigencode_string)
    r, s = sigdecode_string(sig, ORDER)
    if s > ORDER // 2:
        s = ORDER - s
    return r.to_bytes(32, 'big') + s.to_bytes(32, 'big')


def flip_bit(data: bytes, bit: int) -> bytes:
    out = bytearray(data)
    out[bit // 8] ^= 0x80 >> (bit % 8)
    return bytes(out)


class Signer:
    """A reference keypair with helpers producing base58 artifacts"""

    def __init__(self, secret: int):
        self.sk = SigningKey.from_secret_exponent(secret, curve=SECP256k1, hashfunc=hashlib.sha256)
        self.vk = self.sk.get_verifying_key()

    def pubkey_bytes(self, compressed: bool = True) -> bytes:
        return self.vk.to_string("compressed" if compressed else "uncompressed")

    def pubkey_text(self, compressed: bool = True) -> str:
        return encode(self.pubkey_bytes(compressed))

    def sign_bytes(self, message: bytes) -> bytes:
        return sign_digest(self.sk, hashlib.sha256(message).digest())

    def sign_text(self, message: bytes) -> str:
        return encode(self.sign_bytes(message))


@pytest.fixture(scope="session")
def signer() -> Signer:
    return Signer(0x1f2e3d4c5b6a79880123456789abcdef0fedcba9876543210a1b2c3d4e5f6071)


@pytest.fixture(scope="session")
def other_signer() -> Signer:
    return Signer(0xc0ffee)
