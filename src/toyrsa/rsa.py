"""Provides the toy RSA primitives: encryption and decryption under the fixed public exponent.

Facilitates "textbook" RSA over a 64-bit modulus and 32-bit messages. Widths are enforced explicitly at every boundary,
as Python integers would otherwise silently grow past them. Nothing derived from a key is cached; the private exponent
is recomputed from the primes on every decryption.

Typical usage example:

    pk = ToyPrivKey.generate()
    c = pk.pub.encrypt(0x12345f)
    r = pk.decrypt(c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import warnings

from toyrsa import arith
from toyrsa import keygen
from toyrsa.keygen import DEFAULT_PRIMITIVES
from toyrsa.keygen import EXP
from toyrsa.keygen import Primitives

logger = logging.getLogger(__name__)


def encrypt(n: int, msg: int, strict: bool = False, prims: Primitives = DEFAULT_PRIMITIVES) -> int:
    """Encrypt the 32-bit plaintext `msg` under the public modulus `n`.

    A message >= `n` still encrypts, but cannot be recovered. That is the caller's contract to uphold; only `strict`
    mode checks it.

    Args:
        n: The public modulus. Must fit in 64 bits and be >= 1.
        msg: The plaintext. Must fit in 32 bits.
        strict: Whether to reject messages that are not below `n`. Defaults to False.
        prims: Arithmetic capabilities to use.

    Returns:
        The 64-bit ciphertext, `msg**EXP mod n`.

    Raises:
        ValueError: If `n` or `msg` are out of range.
    """
    n = arith.to_u64(n, "modulus")
    msg = arith.to_u32(msg, "message")
    if n < 1:
        raise ValueError("modulus must be >= 1")
    if strict and msg >= n:
        raise ValueError("Message representative must be in range [0, mod-1]")
    return prims.modexp(msg, EXP, n)


def decrypt(key: tuple[int, int], msg: int, strict: bool = True, prims: Primitives = DEFAULT_PRIMITIVES) -> int:
    """Decrypt the ciphertext `msg` using the private key `(p, q)`.

    The reduced totient and private exponent are derived from scratch. A key that never satisfied the `genkey`
    validity predicate may have no private exponent, in which case the modular inverse fails and so does this call.

    Args:
        key: The private key, two 32-bit primes.
        msg: The 64-bit ciphertext.
        strict: Whether a plaintext wider than 32 bits is an error. If False, it is truncated with a warning.
            Defaults to True.
        prims: Arithmetic capabilities to use.

    Returns:
        The 32-bit plaintext.

    Raises:
        ValueError: If the key or ciphertext are out of range, the key admits no private exponent, or the result does
            not fit in 32 bits under `strict`.
    """
    p, q = key
    p = arith.to_u32(p, "p")
    q = arith.to_u32(q, "q")
    msg = arith.to_u64(msg, "ciphertext")
    d = prims.modinverse(EXP, keygen.lambda_(p, q, prims))
    res = prims.modexp(msg, d, p * q)
    if res > arith.U32_MAX and not strict:
        warnings.warn(f"Decrypted value {res:#x} truncated to 32 bits.", RuntimeWarning)
        logger.warning("Truncating decrypted value %#x to 32 bits", res)
        return res & arith.U32_MAX
    return arith.to_u32(res, "plaintext")


class ToyKey:
    """Template for the parts every toy key shares.

    Attributes:
        mod: The modulus of the keypair.
        expo: The public exponent, always `EXP`.
    """

    def __init__(self, mod: int) -> None:
        self.mod = arith.to_u64(mod, "modulus")
        self.expo = EXP


class ToyPubKey(ToyKey):
    """The public half: just a modulus, as the exponent is fixed."""

    def encrypt(self, message: int, strict: bool = False) -> int:
        """Use the public key to encrypt the message. See `encrypt`."""
        return encrypt(self.mod, message, strict)


class ToyPrivKey(ToyKey):
    """The private key, holding only the two primes.

    Everything else (modulus, totient, private exponent) is derived on demand, so the object carries no secret
    beyond `p` and `q`.

    Attributes:
        p: Private Prime 1.
        q: Private Prime 2.
        mod: The modulus of the keypair.
    """

    def __init__(self, p: int, q: int) -> None:
        self.p = arith.to_u32(p, "p")
        self.q = arith.to_u32(q, "q")
        super().__init__(self.p * self.q)

    @property
    def pub(self) -> ToyPubKey:
        return ToyPubKey(self.mod)

    @property
    def key(self) -> tuple[int, int]:
        return self.p, self.q

    def private_exponent(self, prims: Primitives = DEFAULT_PRIMITIVES) -> int:
        """Derive the private exponent `d`, the inverse of `EXP` modulo the reduced totient.

        Raises:
            ValueError: If no such inverse exists for this key.
        """
        return prims.modinverse(EXP, keygen.lambda_(self.p, self.q, prims))

    def decrypt(self, ciphertext: int, strict: bool = True) -> int:
        """Decrypts the ciphertext using the private key. See `decrypt`."""
        return decrypt(self.key, ciphertext, strict)

    @classmethod
    def generate(cls, prims: Primitives = DEFAULT_PRIMITIVES, max_attempts: int | None = None) -> "ToyPrivKey":
        """Generates a toy private key, and with it its public key.

        Args:
            prims: Arithmetic capabilities to use.
            max_attempts: Optional cap on the number of prime pairs drawn. See `keygen.genkey`.

        Returns:
            A new generated private key.
        """
        p, q = keygen.genkey(prims, max_attempts)
        return cls(p, q)
