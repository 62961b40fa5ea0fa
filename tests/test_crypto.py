"""
Test cases for the crypto module: hashing, curve arithmetic and the shared context
"""

import dataclasses
import hashlib
import threading

import pytest

from pymsgauth.crypto import Hasher, HashResult, hash_bytes, hash_string, get_context, init_context
from pymsgauth.crypto import ec
from pymsgauth.crypto.secp256k1 import SECP256K1


HELLO_SHA256 = "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"


def test_hash_string_hello():
    """SHA-256 of "hello" matches the published value"""
    assert hash_string("hello").hex() == HELLO_SHA256


def test_hash_bytes_known_vectors():
    assert hash_bytes(b"").hex() == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    assert hash_bytes(b"abc").hex() == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


@pytest.mark.parametrize("data", [b"", b"\x00", b"hello", bytes(range(256)) * 5])
def test_hash_bytes_deterministic(data):
    first = hash_bytes(data)
    second = hash_bytes(data)
    assert first == second
    assert len(first) == 32
    assert first.as_ref() == hashlib.sha256(data).digest()


@pytest.mark.parametrize("text", ["", "hello", "héllo wörld", "日本語", "emoji \U0001F600"])
def test_hash_string_is_hash_of_utf8(text):
    assert hash_string(text) == hash_bytes(text.encode("utf-8"))


def test_hasher_incremental_matches_one_shot():
    hasher = Hasher.sha256()
    hasher.update(b"hel")
    hasher.update(b"lo")
    assert hasher.finish() == hash_string("hello")


def test_hasher_rejects_other_algorithms():
    with pytest.raises(ValueError):
        Hasher("sha1")


def test_hash_result_value_semantics():
    digest = hash_string("hello")
    assert bytes(digest) == bytes.fromhex(HELLO_SHA256)
    assert digest != hash_string("hello!")
    assert hash(digest) == hash(hash_string("hello"))
    with pytest.raises(AttributeError):
        digest._bytes = b"\x00" * 32
    with pytest.raises(ValueError):
        HashResult(b"\x00" * 31)


def test_generator_on_curve():
    assert ec.is_on_curve(SECP256K1, SECP256K1.G_X, SECP256K1.G_Y)
    assert not ec.is_on_curve(SECP256K1, SECP256K1.G_X, SECP256K1.G_Y + 1)
    assert not ec.is_on_curve(SECP256K1, SECP256K1.G_X + SECP256K1.P, SECP256K1.G_Y)


def test_group_order():
    g = ec.Point.generator(SECP256K1)
    assert g.scalar_mult(SECP256K1.N).is_infinity()
    assert g.scalar_mult(SECP256K1.N - 1).to_affine() == (SECP256K1.G_X, SECP256K1.P - SECP256K1.G_Y)


def test_double_matches_add():
    g = ec.Point.generator(SECP256K1)
    doubled = g.double().to_affine()
    assert g.add(g).to_affine() == doubled
    # Known value of 2G
    assert doubled[0] == 0xc6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5


def test_add_inverse_is_infinity():
    g = ec.Point.generator(SECP256K1)
    neg = ec.Point(SECP256K1.G_X, SECP256K1.P - SECP256K1.G_Y, 1, SECP256K1)
    assert g.add(neg).is_infinity()
    assert g.add(ec.Point.infinity(SECP256K1)) is g


def test_lift_x_recovers_generator():
    point = ec.lift_x(SECP256K1, SECP256K1.G_X, bool(SECP256K1.G_Y & 1))
    assert point.to_affine() == (SECP256K1.G_X, SECP256K1.G_Y)
    other = ec.lift_x(SECP256K1, SECP256K1.G_X, not (SECP256K1.G_Y & 1))
    assert other.to_affine() == (SECP256K1.G_X, SECP256K1.P - SECP256K1.G_Y)
    assert ec.lift_x(SECP256K1, SECP256K1.P, False) is None


def test_mod_inverse():
    n = SECP256K1.N
    for a in (1, 2, 12345, n - 1):
        assert (a * ec._mod_inverse(a, n)) % n == 1
    assert ec._mod_inverse(0, n) is None
    assert ec._mod_inverse(4, 8) is None


@pytest.mark.parametrize("k", [1, 2, 3, 15, 16, 17, 0xdeadbeef, SECP256K1.N - 1, SECP256K1.N // 3])
def test_context_mul_generator_matches_double_and_add(k):
    context = get_context()
    g = ec.Point.generator(SECP256K1)
    assert context.mul_generator(k).to_affine() == g.scalar_mult(k).to_affine()


def test_context_mul_generator_zero_and_order():
    context = get_context()
    assert context.mul_generator(0).is_infinity()
    assert context.mul_generator(SECP256K1.N).is_infinity()


def test_context_with_other_window_width():
    context = ec.CurveContext.build(SECP256K1, window_bits=2)
    assert len(context.table) == 128
    k = 0x1234567890abcdef1234567890abcdef
    assert context.mul_generator(k).to_affine() == get_context().mul_generator(k).to_affine()


def test_context_is_shared():
    assert get_context() is get_context()
    assert init_context() is get_context()


def test_context_is_immutable():
    context = get_context()
    with pytest.raises(dataclasses.FrozenInstanceError):
        context.window_bits = 8
    with pytest.raises(dataclasses.FrozenInstanceError):
        context.table = ()
    assert isinstance(context.table, tuple)
    assert all(isinstance(row, tuple) for row in context.table)


def test_context_shared_across_threads():
    seen = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        seen.append(get_context())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(seen) == 8
    assert all(context is seen[0] for context in seen)


def test_validate_ecdsa_rejects_out_of_range_components():
    context = get_context()
    g = ec.Point.generator(SECP256K1)
    assert not ec.validate_ecdsa(context, g, 0, 1, 1)
    assert not ec.validate_ecdsa(context, g, 1, 0, 1)
    assert not ec.validate_ecdsa(context, g, SECP256K1.N, 1, 1)
    assert not ec.validate_ecdsa(context, ec.Point.infinity(SECP256K1), 1, 1, 1)


def test_validate_ecdsa_known_signature():
    # With private key 1 and nonce 1, R = G, so r = Gx and s = (z + r) mod n
    context = get_context()
    n = SECP256K1.N
    z = int(HELLO_SHA256, 16)
    r = SECP256K1.G_X % n
    s = (z + r) % n
    g = ec.Point.generator(SECP256K1)
    assert ec.validate_ecdsa(context, g, r, s, z)
    assert not ec.validate_ecdsa(context, g, r, s, z + 1)


def test_context_point_validation():
    context = get_context()
    assert context.is_on_curve(SECP256K1.G_X, SECP256K1.G_Y)
    assert not context.is_on_curve(0, 0)
    assert context.lift_x(SECP256K1.G_X, False).to_affine() == (SECP256K1.G_X, SECP256K1.G_Y)
    assert ec.Point.from_affine(SECP256K1.G_X, SECP256K1.G_Y, SECP256K1) is not None
    assert ec.Point.from_affine(0, 0, SECP256K1) is None


def test_context_table_points_are_immutable():
    context = get_context()
    for i in range(len(context.table)):
        for j in range(1, 1 << context.window_bits):
            point = context.mul_generator(j << (context.window_bits * i))
            with pytest.raises(AttributeError):
                point.z = 0
            with pytest.raises(AttributeError):
                point.x = 1
            with pytest.raises(AttributeError):
                del point.y

    g = ec.Point.generator(SECP256K1)
    assert context.mul_generator(5).to_affine() == g.scalar_mult(5).to_affine()
