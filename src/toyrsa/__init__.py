"""A toy RSA cryptosystem in an Academic Sense.

Provides key generation, encryption and decryption over 32-bit primes with the fixed public exponent 65537. Meant to
demonstrate how the scheme is composed from modular arithmetic, not to protect anything.

Typical usage example:

    p, q = genkey()
    c = encrypt(p * q, 0x12345f)
    r = decrypt((p, q), c)
    pk = ToyPrivKey.generate()
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging

from toyrsa.arith import gcd
from toyrsa.arith import lcm
from toyrsa.arith import modexp
from toyrsa.arith import modinverse
from toyrsa.keygen import check_prime
from toyrsa.keygen import DEFAULT_PRIMITIVES
from toyrsa.keygen import EXP
from toyrsa.keygen import genkey
from toyrsa.keygen import is_usable_totient
from toyrsa.keygen import lambda_
from toyrsa.keygen import Primitives
from toyrsa.keygen import random_prime
from toyrsa.rsa import decrypt
from toyrsa.rsa import encrypt
from toyrsa.rsa import ToyPrivKey
from toyrsa.rsa import ToyPubKey

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "EXP",
    "DEFAULT_PRIMITIVES",
    "Primitives",
    "ToyPrivKey",
    "ToyPubKey",
    "check_prime",
    "decrypt",
    "encrypt",
    "gcd",
    "genkey",
    "is_usable_totient",
    "lambda_",
    "lcm",
    "modexp",
    "modinverse",
    "random_prime",
]
