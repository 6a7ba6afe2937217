"""Core Key Generation Utility, focusing on 32-bit primes and the validity of the pair against the fixed exponent.

This module is responsible for producing toy RSA key pairs: two primes in range `[2**31, 2**32)` whose reduced totient
admits the fixed public exponent. The arithmetic it relies on is bundled in `Primitives` so it can be replaced wholesale,
e.g. by a scripted prime source in tests.

Typical usage example:

    p, q = genkey()
    lam = lambda_(p, q)
    is_usable_totient(lam)
    check_prime(4294967291)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import itertools
import logging
import secrets
from typing import Callable, Iterable, NamedTuple

from toyrsa import arith

logger = logging.getLogger(__name__)

EXP: int = 65537
PRIME_BITS: int = 32
PRIME_LOW: int = 1 << (PRIME_BITS - 1)
PRIME_HIGH: int = 1 << PRIME_BITS

_SMALL_PRIMES: list[int] = []
_SMALL_PRIMES_CAP: int = 0
# Miller-Rabin with witnesses 2, 7 and 61 is exact below this bound, which covers every 32-bit candidate.
_DETERMINISTIC_LIMIT: int = 4_759_123_141
_DETERMINISTIC_WITNESSES: tuple[int, ...] = (2, 7, 61)
_PRIME_ATTEMPTS: int = PRIME_BITS * 20


def _sieve(n: int = 10000) -> list[int]:
    """Implements the Sieve of Eratosthenes.

    Uses the textbook Sieve of Eratosthenes to generate a set of primes up to `n`.
    Only odd candidates are stored and sieving stops at the root.

    Args:
        n: The number up to which to generate primes. Defaults to 10000. Must be >= 0.

    Returns:
        A list of primes up to `n`.
    """
    if n < 2:
        return []
    i_size = (n - 1) // 2
    candidate: list[bool] = [True] * i_size
    for i in range(int(n**0.5) // 2):
        if candidate[i]:
            r = 2 * i + 3
            for j in range((r * r - 3) // 2, i_size, r):
                candidate[j] = False
    return [2] + [(no * 2 + 3) for no, ele in enumerate(candidate) if ele]


def get_pre_primes(n: int = 10000, change: bool = False) -> list[int]:
    """Get the small primes, automatically generating if necessary.

    The module-level list acts as a cache. Regeneration occurs if the requested range is greater, is forced by
    `change` or the cache is empty. The cache is swapped in one assignment, so readers never see a partial list.

    Args:
        n: The number up to which to generate primes. Defaults to 10000. Must be >= 0.
        change: Whether to force a recomputation of primes. Defaults to False.

    Returns:
        List of primes in ascending order. All primes at least to `n` or more unless `change` is True.

    Raises:
        ValueError: If `n` is negative.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    global _SMALL_PRIMES
    global _SMALL_PRIMES_CAP
    if n > _SMALL_PRIMES_CAP or change or not _SMALL_PRIMES:
        logger.debug("Sieving small primes up to %d", n)
        _SMALL_PRIMES = _sieve(n)
        _SMALL_PRIMES_CAP = n
    return _SMALL_PRIMES


def _trial_division(no: int, n: int = 10000) -> bool:
    """Check the provided `no` against the known small primes.

    Args:
         no: The number to check. Must be integer and non-negative.
         n: The number up to which small primes are used. Passed to `get_pre_primes()`.

    Returns:
        False if `no` cannot be prime, True otherwise.
    """
    if no < 2:
        return False
    for prime in get_pre_primes(n):
        if prime**2 > no:
            return True
        if no % prime == 0:
            return False
    return True


def _miller_rabin(w: int, bases: Iterable[int]) -> bool:
    """Perform the Miller-Rabin primality test against the given witnesses.

    Args:
        w: Odd integer to be tested.
        bases: Witnesses to try. Witnesses that reduce to 0, 1 or w-1 carry no information and are skipped.

    Returns:
        True if `w` is probably prime, False otherwise.
    """
    if w <= 3:
        return w == 2 or w == 3
    if w % 2 == 0:
        return False
    tw = w - 1
    a = (tw & -tw).bit_length() - 1
    m = tw >> a
    for b in bases:
        b %= w
        if b in (0, 1, tw):
            continue
        z = pow(b, m, w)
        if z == 1 or z == tw:
            continue
        for _ in range(1, a):
            z = pow(z, 2, w)
            if z == tw:
                break
            if z == 1:
                return False
        else:
            return False
    return True


def check_prime(candidate: int, iters: None | int = None, n: int = 10000) -> bool:
    """Performs a composite primality test: a limited amount of trial divisions, then Miller-Rabin.

    Below `_DETERMINISTIC_LIMIT` the fixed witness set makes the answer exact, which covers every candidate this
    package generates. Above it random witnesses are drawn, `iters` of them.

    Args:
        candidate: The candidate prime to test.
        iters: Number of random Miller-Rabin iterations for large candidates. Defaults to 40.
        n: The number up to which to use small primes for trial division.

    Returns:
        True if `candidate` is (probably) prime, False otherwise.
    """
    if candidate < 2:
        return False
    if not _trial_division(candidate, n):
        return False
    if candidate < _DETERMINISTIC_LIMIT:
        return _miller_rabin(candidate, _DETERMINISTIC_WITNESSES)
    if iters is None:
        iters = 40
    return _miller_rabin(candidate, (secrets.randbelow(candidate - 3) + 2 for _ in range(iters)))


def random_prime() -> int:
    """Draw a random prime from `[PRIME_LOW, PRIME_HIGH)`.

    Odd candidates are sampled uniformly and tested until one is prime. Primes are dense enough in this range that
    running out of attempts means the random source is broken, not unlucky.

    Returns:
        A prime with exactly `PRIME_BITS` bits.

    Raises:
        RuntimeError: If no prime turned up within `_PRIME_ATTEMPTS` candidates.
    """
    for _ in range(_PRIME_ATTEMPTS):
        candidate = PRIME_LOW | secrets.randbits(PRIME_BITS - 1) | 1
        if check_prime(candidate):
            return candidate
    raise RuntimeError(
        f"Ran an improbable {_PRIME_ATTEMPTS} candidates with no prime found. Check system random number generator.")


class Primitives(NamedTuple):
    """The arithmetic capabilities the RSA core consumes.

    Defaults bind the real implementations. Replace single fields with `_replace` to stub them out.
    """
    gcd: Callable[[int, int], int] = arith.gcd
    lcm: Callable[[int, int], int] = arith.lcm
    modexp: Callable[[int, int, int], int] = arith.modexp
    modinverse: Callable[[int, int], int] = arith.modinverse
    random_prime: Callable[[], int] = random_prime


DEFAULT_PRIMITIVES = Primitives()


def lambda_(p: int, q: int, prims: Primitives = DEFAULT_PRIMITIVES) -> int:
    """Reduced totient of the pair, `lcm(p - 1, q - 1)`.

    Args:
        p: First prime. Must be >= 1.
        q: Second prime. Must be >= 1.
        prims: Arithmetic capabilities to use.

    Returns:
        The reduced totient.

    Raises:
        ValueError: If `p` or `q` is below 1.
    """
    if p < 1 or q < 1:
        raise ValueError("p and q must be >= 1")
    return prims.lcm(p - 1, q - 1)


def is_usable_totient(lam: int, prims: Primitives = DEFAULT_PRIMITIVES) -> bool:
    """Whether `EXP` is a valid public exponent against the reduced totient `lam`."""
    return lam > EXP and prims.gcd(EXP, lam) == 1


def genkey(prims: Primitives = DEFAULT_PRIMITIVES, max_attempts: int | None = None) -> tuple[int, int]:
    """Generates a toy RSA key pair.

    Keeps drawing prime pairs until one is distinct and its reduced totient is usable with `EXP`. Without
    `max_attempts` there is no upper bound: termination relies on the prime source not being degenerate.

    Args:
        prims: Arithmetic capabilities to use, notably the prime source.
        max_attempts: Optional cap on the number of pairs drawn. Unbounded if None.

    Returns:
        The private key as a pair of 32-bit primes (p, q).

    Raises:
        ValueError: If `max_attempts` is not positive, or the prime source yields a value wider than 32 bits.
        RuntimeError: If `max_attempts` pairs were drawn without finding a usable one.
    """
    if max_attempts is not None and max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")
    attempts = itertools.count(1) if max_attempts is None else range(1, max_attempts + 1)
    for attempt in attempts:
        p = arith.to_u32(prims.random_prime(), "p")
        q = arith.to_u32(prims.random_prime(), "q")
        if p != q and is_usable_totient(lambda_(p, q, prims), prims):
            logger.info("Found a usable key pair after %d attempt(s)", attempt)
            return p, q
        logger.debug("Rejected prime pair %#x, %#x", p, q)
    raise RuntimeError(f"No usable key pair found in {max_attempts} attempts.")
