# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pytest

from toyrsa import __main__ as cli

GOOD_P, GOOD_Q = 0xed23e6cd, 0xf050a04d


def test_integer_bases():
    assert cli.integer("0x12345f") == 0x12345f
    assert cli.integer("42") == 42
    with pytest.raises(ValueError):
        cli.integer("nope")


def test_keygen_non_interactive(mocker, capsys):
    mocker.patch("toyrsa.keygen.genkey", return_value=(GOOD_P, GOOD_Q))
    cli.main(["-n", "keygen"])
    out = capsys.readouterr().out.splitlines()
    assert out == [f"{GOOD_P:#x} {GOOD_Q:#x}", "0xde9c5816141c8ba9"]


def test_keygen_max_attempts(mocker, capsys):
    genkey = mocker.patch("toyrsa.keygen.genkey", return_value=(GOOD_P, GOOD_Q))
    cli.main(["-n", "keygen", "--max-attempts", "7"])
    assert genkey.call_args.args[1] == 7
    capsys.readouterr()


def test_encrypt_non_interactive(capsys):
    cli.main(["-n", "encrypt", "--modulus", "0xde9c5816141c8ba9", "--message", "0x12345f"])
    assert capsys.readouterr().out.strip() == "0x6418280e0c4d7675"


def test_decrypt_non_interactive(capsys):
    cli.main(["-n", "decrypt", "-p", hex(GOOD_P), "-q", hex(GOOD_Q), "-m", "0x6418280e0c4d7675"])
    assert capsys.readouterr().out.strip() == "0x12345f"


def test_missing_argument_non_interactive():
    with pytest.raises(IOError):
        cli.main(["-n", "encrypt", "--modulus", "0xde9c5816141c8ba9"])


def test_error_exit(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["-n", "encrypt", "--modulus", "2", "--message", "3", "--strict"])
    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_interactive_prompts(mocker, capsys):
    mocker.patch("builtins.input", side_effect=["frobnicate", "encrypt", "", "zz", "0xde9c5816141c8ba9", "0x12345f"])
    cli.main([])
    out = capsys.readouterr().out
    assert "Please select an option from the list." in out
    assert "Please provide a value." in out
    assert "We could not convert your value to integer." in out
    assert "0x6418280e0c4d7675" in out
