"""
ECDSA signature verification over short Weierstrass curves

This module implements the elliptic curve arithmetic used for verification
along with the precomputed computation context shared by every verification
call.
"""

from dataclasses import dataclass
from typing import Protocol, Optional, Tuple


# Width in bits of each window of the fixed-base generator table
WINDOW_BITS = 4


class CurveParams(Protocol):
    """Protocol defining the interface for elliptic curve parameters"""

    # Curve field prime (p)
    P: int

    # Scalar field prime (n)
    N: int

    # Curve parameters for y^2 = x^3 + ax + b
    A: int
    B: int

    # Generator point coordinates
    G_X: int
    G_Y: int

    # Coordinate byte length
    COORD_BYTES: int


def _mod_inverse(a: int, m: int) -> Optional[int]:
    """
    Compute modular inverse of a mod m using extended Euclidean algorithm.
    Returns None if inverse doesn't exist.
    """
    if a < 0:
        return None

    old_r, r = a % m, m
    old_x, x = 1, 0
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x

    if old_r != 1:
        return None
    return old_x % m


class Point:
    """Elliptic curve point in Jacobian coordinates"""

    __slots__ = ("x", "y", "z", "curve")

    def __init__(self, x: int, y: int, z: int, curve: CurveParams):
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "z", z)
        object.__setattr__(self, "curve", curve)

    def __setattr__(self, name, value):
        raise AttributeError("Point is immutable")

    def __delattr__(self, name):
        raise AttributeError("Point is immutable")

    @classmethod
    def from_affine(cls, x: int, y: int, curve: CurveParams) -> Optional['Point']:
        """Create point from affine coordinates, validating it's on the curve"""
        if not is_on_curve(curve, x, y):
            return None
        return cls(x, y, 1, curve)

    @classmethod
    def generator(cls, curve: CurveParams) -> 'Point':
        """Return the generator point for the curve"""
        return cls(curve.G_X, curve.G_Y, 1, curve)

    @classmethod
    def infinity(cls, curve: CurveParams) -> 'Point':
        return cls(0, 1, 0, curve)

    def is_infinity(self) -> bool:
        """Check if this is the point at infinity"""
        return self.z == 0

    def double(self) -> 'Point':
        """Point doubling in Jacobian coordinates"""
        if self.is_infinity() or self.y == 0:
            return Point.infinity(self.curve)

        # https://hyperelliptic.org/EFD/g1p/auto-shortw-jacobian.html#doubling-dbl-2007-bl
        p = self.curve.P

        xx = (self.x * self.x) % p
        yy = (self.y * self.y) % p
        yyyy = (yy * yy) % p
        zz = (self.z * self.z) % p
        s = (2 * ((self.x + yy) * (self.x + yy) - xx - yyyy)) % p
        m = (3 * xx + self.curve.A * zz * zz) % p
        x3 = (m * m - 2 * s) % p
        y3 = (m * (s - x3) - 8 * yyyy) % p
        z3 = ((self.y + self.z) * (self.y + self.z) - yy - zz) % p

        return Point(x3, y3, z3, self.curve)

    def add(self, other: 'Point') -> 'Point':
        """Point addition in Jacobian coordinates"""
        if self.is_infinity():
            return other
        if other.is_infinity():
            return self

        p = self.curve.P

        # https://hyperelliptic.org/EFD/g1p/auto-shortw-jacobian-3.html#addition-add-2007-bl
        z1z1 = (self.z * self.z) % p
        z2z2 = (other.z * other.z) % p
        u1 = (self.x * z2z2) % p
        u2 = (other.x * z1z1) % p
        s1 = (self.y * other.z * z2z2) % p
        s2 = (other.y * self.z * z1z1) % p

        if u1 == u2:
            if s1 != s2:
                return Point.infinity(self.curve)
            return self.double()

        h = (u2 - u1) % p
        i = (2 * h) % p
        i = (i * i) % p
        j = (h * i) % p
        r = (2 * (s2 - s1)) % p
        v = (u1 * i) % p
        x3 = (r * r - j - 2 * v) % p
        y3 = (r * (v - x3) - 2 * s1 * j) % p
        z3 = ((self.z + other.z) * (self.z + other.z) - z1z1 - z2z2) % p
        z3 = (z3 * h) % p

        return Point(x3, y3, z3, self.curve)

    def scalar_mult(self, k: int) -> 'Point':
        """Scalar multiplication using binary method"""
        if k < 0:
            raise ValueError("Scalar must be non-negative")

        result = Point.infinity(self.curve)
        addend = self

        while k > 0:
            if k & 1:
                result = result.add(addend)
            addend = addend.double()
            k >>= 1

        return result

    def to_affine(self) -> Optional[Tuple[int, int]]:
        """Convert to affine coordinates"""
        if self.is_infinity():
            return None

        z_inv = _mod_inverse(self.z, self.curve.P)
        if z_inv is None:
            return None

        z_inv_squared = (z_inv * z_inv) % self.curve.P
        z_inv_cubed = (z_inv_squared * z_inv) % self.curve.P

        x = (self.x * z_inv_squared) % self.curve.P
        y = (self.y * z_inv_cubed) % self.curve.P

        return (x, y)


def is_on_curve(curve: CurveParams, x: int, y: int) -> bool:
    """Check that (x, y) are reduced field elements satisfying the curve equation"""
    if not (0 <= x < curve.P and 0 <= y < curve.P):
        return False
    left = (y * y) % curve.P
    right = (x * x * x + curve.A * x + curve.B) % curve.P
    return left == right


def lift_x(curve: CurveParams, x: int, odd: bool) -> Optional[Point]:
    """
    Recover the point with the given x coordinate and y parity.

    Only curves with p = 3 (mod 4) are supported, where the square root is a
    single exponentiation. Returns None if x is not the abscissa of a point.
    """
    p = curve.P
    if p % 4 != 3:
        raise ValueError("Square roots are only supported for p = 3 mod 4")
    if not 0 <= x < p:
        return None

    y_squared = (x * x * x + curve.A * x + curve.B) % p
    y = pow(y_squared, (p + 1) // 4, p)
    if (y * y) % p != y_squared:
        return None
    if (y & 1) != odd:
        y = p - y if y else y
    if (y & 1) != odd:
        return None
    return Point(x, y, 1, curve)


def _normalize(point: Point) -> Point:
    affine = point.to_affine()
    if affine is None:
        return Point.infinity(point.curve)
    return Point(affine[0], affine[1], 1, point.curve)


@dataclass(frozen=True, eq=False)
class CurveContext:
    """
    Precomputed tables for a single curve.

    ``table[i][j]`` holds ``j * 2^(window_bits * i) * G`` in affine form, so a
    multiple of the generator is a sum of one table entry per window and needs
    no doublings at all. Instances are never mutated once built.
    """

    curve: CurveParams
    generator: Point
    window_bits: int
    table: Tuple[Tuple[Point, ...], ...]

    @classmethod
    def build(cls, curve: CurveParams, window_bits: int = WINDOW_BITS) -> 'CurveContext':
        """Compute the generator tables for the curve"""
        if window_bits < 1:
            raise ValueError("window_bits must be positive")

        generator = Point.generator(curve)
        n_windows = (curve.N.bit_length() + window_bits - 1) // window_bits

        rows = []
        base = generator
        for _ in range(n_windows):
            row = [Point.infinity(curve)]
            for _ in range((1 << window_bits) - 1):
                row.append(_normalize(row[-1].add(base)))
            rows.append(tuple(row))
            base = _normalize(row[-1].add(base))

        return cls(curve, generator, window_bits, tuple(rows))

    def mul_generator(self, k: int) -> Point:
        """Compute k * G using the precomputed table"""
        k %= self.curve.N
        mask = (1 << self.window_bits) - 1

        result = Point.infinity(self.curve)
        for row in self.table:
            if k == 0:
                break
            digit = k & mask
            if digit:
                result = result.add(row[digit])
            k >>= self.window_bits

        return result

    def mul(self, point: Point, k: int) -> Point:
        """Compute k * point for an arbitrary point"""
        return point.scalar_mult(k % self.curve.N)

    def add_two_mul(self, u_a: int, u_b: int, point: Point) -> Point:
        """Calculates u_a * G + u_b * point"""
        return self.mul_generator(u_a).add(self.mul(point, u_b))

    def is_on_curve(self, x: int, y: int) -> bool:
        return is_on_curve(self.curve, x, y)

    def lift_x(self, x: int, odd: bool) -> Optional[Point]:
        return lift_x(self.curve, x, odd)


def validate_ecdsa(context: CurveContext, pk: Point, r: int, s: int, z: int) -> bool:
    """
    Validates a signature (r, s) over the digest integer z against a public key.

    Args:
        context: Precomputed context of the curve pk lies on
        pk: Public key point, already checked to be on the curve
        r: First signature component
        s: Second signature component
        z: Message digest interpreted as a big-endian integer

    Returns:
        True if signature is valid, False otherwise
    """
    n = context.curve.N

    if not (0 < r < n and 0 < s < n):
        return False
    if pk.is_infinity():
        return False

    # Calculate s^(-1) mod n
    s_inv = _mod_inverse(s, n)
    if s_inv is None:
        return False

    # Calculate u_a = z * s^(-1) mod n and u_b = r * s^(-1) mod n
    u_a = (z * s_inv) % n
    u_b = (r * s_inv) % n

    # Calculate point V = u_a * G + u_b * PK
    V = context.add_two_mul(u_a, u_b, pk)
    if V.is_infinity():
        return False

    v_affine = V.to_affine()
    if v_affine is None:
        return False

    v_x, _ = v_affine

    # Verify that V.x = r (mod n)
    return (v_x % n) == r
