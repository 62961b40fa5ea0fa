"""
secp256k1 parameters and the process-wide computation context
"""

import logging
import threading
import time
from typing import Optional

from . import ec


logger = logging.getLogger(__name__)


class Secp256k1Curve:
    """secp256k1 curve parameters"""

    # Curve field prime (p)
    P = 0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f

    # Scalar field prime (n) - order of the base point
    N = 0xfffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364141

    # Curve parameters for y^2 = x^3 + ax + b
    A = 0
    B = 7

    # Generator point coordinates
    G_X = 0x79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798
    G_Y = 0x483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8

    # Coordinate byte length (32 bytes for secp256k1)
    COORD_BYTES = 32


SECP256K1 = Secp256k1Curve()

_context: Optional[ec.CurveContext] = None
_context_lock = threading.Lock()


def get_context() -> ec.CurveContext:
    """
    Return the shared secp256k1 context, building it on first use.

    Construction happens at most once per process. Threads racing on the first
    call wait on the lock and then all observe the same fully built instance.
    """
    global _context

    context = _context
    if context is None:
        with _context_lock:
            if _context is None:
                started = time.monotonic()
                _context = ec.CurveContext.build(SECP256K1)
                logger.info(
                    "Built secp256k1 context (%d windows of %d bits) in %.3fs",
                    len(_context.table), _context.window_bits, time.monotonic() - started
                )
            context = _context
    return context


def init_context() -> ec.CurveContext:
    """
    Build the shared context eagerly.

    Call this at process start to pay the precomputation cost before any
    concurrent verification begins. Calling it again is harmless.
    """
    return get_context()
