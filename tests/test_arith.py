# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math

import pytest
import sympy

from toyrsa import arith

eea_cases = [
    (240, 46),
    (46, 240),
    (17, 0),
    (0, 17),
    (65537, 2 * 3 * 5 * 7),
    (2**64 - 1, 2**32 - 5),
]

inverse_cases = [
    (3, 11),
    (17, 30),
    (65537, 30),
    (65537, 3120),
    (65537, 0xed23e6cc),
    (65537, 2**64 - 59),
]


@pytest.mark.parametrize("a,b", eea_cases)
def test_eea_bezout(a, b):
    g, s, t = arith.eea(a, b)
    assert g == math.gcd(a, b)
    assert a * s + b * t == g


@pytest.mark.parametrize("a,b,expected", [(12, 18, 6), (17, 0, 17), (0, 17, 17), (65537, 65538, 1)])
def test_gcd(a, b, expected):
    assert arith.gcd(a, b) == expected


@pytest.mark.parametrize("a,b,expected", [(10, 15, 30), (20, 25, 100), (7, 0, 0), (2**32 - 2, 2**32 - 4, None)])
def test_lcm(a, b, expected):
    if expected is None:
        expected = a * b // math.gcd(a, b)
    assert arith.lcm(a, b) == expected


def test_modexp_matches_pow():
    assert arith.modexp(0x12345f, 65537, 0xde9c5816141c8ba9) == 0x6418280e0c4d7675
    assert arith.modexp(2, 65537, 2) == 0
    assert arith.modexp(5, 0, 1) == 0


@pytest.mark.parametrize("base,exp,modulus", [(2, 3, 0), (2, 3, -5), (-2, 3, 5), (2, -3, 5)])
def test_modexp_validates(base, exp, modulus):
    with pytest.raises(ValueError):
        arith.modexp(base, exp, modulus)


@pytest.mark.parametrize("a,m", inverse_cases)
def test_modinverse(a, m):
    d = arith.modinverse(a, m)
    assert 0 <= d < m
    assert (a * d) % m == 1
    assert d == sympy.mod_inverse(a, m)


def test_modinverse_trivial_modulus():
    assert arith.modinverse(65537, 1) == 0


@pytest.mark.parametrize("a,m", [(2, 4), (65537, 65537 * 2), (0, 7), (6, 9)])
def test_modinverse_non_invertible(a, m):
    with pytest.raises(ValueError):
        arith.modinverse(a, m)


@pytest.mark.parametrize("m", [0, -7])
def test_modinverse_validates(m):
    with pytest.raises(ValueError):
        arith.modinverse(3, m)


@pytest.mark.parametrize("value", [0, 1, 0x12345f, arith.U32_MAX])
def test_to_u32_accepts(value):
    assert arith.to_u32(value) == value


@pytest.mark.parametrize("value", [-1, arith.U32_MAX + 1, 2**64])
def test_to_u32_rejects(value):
    with pytest.raises(ValueError):
        arith.to_u32(value)


@pytest.mark.parametrize("value", [0, arith.U32_MAX + 1, 0xde9c5816141c8ba9, arith.U64_MAX])
def test_to_u64_accepts(value):
    assert arith.to_u64(value) == value


@pytest.mark.parametrize("value", [-1, arith.U64_MAX + 1])
def test_to_u64_rejects(value):
    with pytest.raises(ValueError, match="modulus"):
        arith.to_u64(value, "modulus")
