"""Arithmetic primitives the RSA core is built on.

Thin, explicit wrappers over modular arithmetic, so that the rest of the package consumes a small and swappable
surface rather than reaching into builtins directly.

Typical usage example:

    g, s, t = eea(240, 46)
    d = modinverse(65537, 3120)
    c = modexp(42, 65537, 3233)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math

U32_MAX: int = 2**32 - 1
U64_MAX: int = 2**64 - 1


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers. `gcd(a, 0) == a`."""
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """Least common multiple of two non-negative integers. `lcm(a, 0) == 0`."""
    return math.lcm(a, b)


def eea(a: int, b: int) -> tuple[int, int, int]:
    """Implements the Extended Euclidean Algorithm.

    Such a that a*s0 + b*t0 = r0 = gcd(a, b).

    Args:
        a: The first natural number.
        b: The second natural number.

    Returns:
        Greatest common divisor of two integers.
        As well as the Bezout coefficients.
    """
    r0, r1 = a, b
    s0, s1, t0, t1 = 1, 0, 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
    return r0, s0, t0


def modexp(base: int, exp: int, modulus: int) -> int:
    """Computes `base**exp mod modulus`.

    Args:
        base: Non-negative base.
        exp: Non-negative exponent.
        modulus: Positive modulus.

    Returns:
        The residue in range [0, modulus-1].

    Raises:
        ValueError: If any operand is out of range.
    """
    if modulus < 1:
        raise ValueError("Modulus must be >= 1")
    if base < 0 or exp < 0:
        raise ValueError("Base and exponent must be non-negative")
    return pow(base, exp, modulus)


def modinverse(a: int, m: int) -> int:
    """Computes the modular inverse of `a` modulo `m`.

    Uses the Extended Euclidean Algorithm, normalising the Bezout coefficient into [0, m-1].

    Args:
        a: The value to invert.
        m: The modulus. Must be >= 1.

    Returns:
        `d` such that `(a * d) % m == 1 % m`.

    Raises:
        ValueError: If `m` is not positive or no inverse exists, i.e. gcd(a, m) != 1.
    """
    if m < 1:
        raise ValueError("Modulus must be >= 1")
    g, s, _ = eea(a % m, m)
    if g != 1:
        raise ValueError(f"{a} is not invertible modulo {m} (gcd is {g})")
    return s % m


def to_u32(value: int, name: str = "value") -> int:
    """Checked conversion into the unsigned 32-bit range.

    Raises:
        ValueError: If `value` is outside [0, 2**32-1].
    """
    if not 0 <= value <= U32_MAX:
        raise ValueError(f"{name} {value:#x} does not fit in 32 bits" if value >= 0 else f"{name} must be >= 0")
    return value


def to_u64(value: int, name: str = "value") -> int:
    """Checked conversion into the unsigned 64-bit range.

    Raises:
        ValueError: If `value` is outside [0, 2**64-1].
    """
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{name} {value:#x} does not fit in 64 bits" if value >= 0 else f"{name} must be >= 0")
    return value
