"""The Command Line Interface for the toy RSA scheme, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that asks for whatever the command line
left out, including the subcommand itself. Keys are never written anywhere: keygen prints the primes and the modulus,
and the other subcommands take them back as arguments.

Typical usage example:

    toyrsa keygen
    toyrsa -n encrypt --modulus 0xde9c5816141c8ba9 --message 0x12345f
    python -m toyrsa
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import sys
import typing

import toyrsa

logger = logging.getLogger("toyrsa.cli")


def integer(text: str) -> int:
    """Parse an integer literal in any base Python understands, e.g. `0x1f` or `31`."""
    return int(text, 0)


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Callable = str
    choices: list[str] | None = None
    default: typing.Any = None


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in toyrsa.",
            choices=["keygen", "encrypt", "decrypt"],
        ),
    "keygen":
        HelpData("Key generation utility."),
    "encrypt":
        HelpData("Encryption utility."),
    "decrypt":
        HelpData("Decryption utility."),
    "modulus":
        HelpData(
            description="The public modulus n = p * q.",
            format=integer,
        ),
    "p":
        HelpData(
            description="First prime of the private key.",
            format=integer,
        ),
    "q":
        HelpData(
            description="Second prime of the private key.",
            format=integer,
        ),
    "message":
        HelpData(
            description="The message as an integer: 32-bit plaintext to encrypt or 64-bit ciphertext to decrypt.",
            format=integer,
        ),
    "max_attempts":
        HelpData(
            description="Give up after this many prime pairs. Unbounded if not given.",
            format=int,
        ),
    "strict":
        HelpData("Reject plaintexts that are not below the modulus."),
    "lenient":
        HelpData("Truncate decrypted values wider than 32 bits instead of failing."),
}

needs = {
    "keygen": (),
    "encrypt": ("modulus", "message"),
    "decrypt": ("p", "q", "message"),
}

payloads = argparse.ArgumentParser(add_help=False)
payloads.add_argument("--message", "-m", type=help_dict["message"].format, help=help_dict["message"].description)
corep = argparse.ArgumentParser(prog="toyrsa")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {toyrsa.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--verbose", "-V", action="count", default=0, help="Log more, repeat for debug output")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

keygen = commands.add_parser("keygen", help=help_dict["keygen"].description)
keygen.add_argument("--max-attempts", type=help_dict["max_attempts"].format, help=help_dict["max_attempts"].description)

encrypt = commands.add_parser("encrypt", parents=[payloads], help=help_dict["encrypt"].description)
encrypt.add_argument("--modulus", "-N", type=help_dict["modulus"].format, help=help_dict["modulus"].description)
encrypt.add_argument("--strict", "-s", action="store_true", help=help_dict["strict"].description)

decrypt = commands.add_parser("decrypt", parents=[payloads], help=help_dict["decrypt"].description)
decrypt.add_argument("--p", "-p", type=help_dict["p"].format, help=help_dict["p"].description)
decrypt.add_argument("--q", "-q", type=help_dict["q"].format, help=help_dict["q"].description)
decrypt.add_argument("--lenient", "-l", action="store_true", help=help_dict["lenient"].description)


def checkmodes(arg: str, non_interactive: bool):
    helper_data = help_dict[arg]
    if non_interactive:
        if helper_data.default is None:
            raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
        return helper_data.default
    return helper_data


def choice_handler(arg: str, non_interactive: bool, prntr: typing.Callable = print):
    helper_data = checkmodes(arg, non_interactive)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    vald = set(helper_data.choices)
    for choice in helper_data.choices:
        defstring = " (Default)" if choice == helper_data.default else ""
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}" + defstring)
        else:
            prntr(f"{choice}" + defstring)
    if helper_data.default is not None:
        prntr("To accept default just click enter. Otherwise specify value.")
    while True:
        ch = input(f"{arg}: ")
        if ch in vald:
            return ch
        if not ch and helper_data.default is not None:
            return helper_data.default
        prntr("Please select an option from the list.")


def input_handler(arg: str, non_interactive: bool, prntr: typing.Callable = print):
    helper_data = checkmodes(arg, non_interactive)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch and helper_data.default is not None:
            return helper_data.default
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def configure_logging(verbosity: int) -> None:
    """Map the count of `-V` flags onto a logging level."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: list[str] | None = None):
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    configure_logging(args.verbose)
    non_interactive = args.non_interactive

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not non_interactive:
            print(text)

    pspr("Welcome to toyrsa!\n")
    if not args.subcommand:
        args.subcommand = choice_handler("subcommand", non_interactive)
    for reqs in needs[args.subcommand]:
        if getattr(args, reqs, None) is None:
            if help_dict[reqs].choices is not None:
                res = choice_handler(reqs, non_interactive)
            else:
                res = input_handler(reqs, non_interactive)
            setattr(args, reqs, res)
        else:
            pspr(f"{reqs}: {getattr(args, reqs):#x}")
    pspr("\nInput Complete! Executing...")
    try:
        match args.subcommand:
            case "keygen":
                pk = toyrsa.ToyPrivKey.generate(max_attempts=getattr(args, "max_attempts", None))
                pspr("Private key (p, q):")
                print(f"{pk.p:#x} {pk.q:#x}")
                pspr("Public modulus:")
                print(f"{pk.mod:#x}")
            case "encrypt":
                ciph = toyrsa.encrypt(args.modulus, args.message, getattr(args, "strict", False))
                pspr("Ciphertext:")
                print(f"{ciph:#x}")
            case "decrypt":
                clear = toyrsa.decrypt((args.p, args.q), args.message, not getattr(args, "lenient", False))
                pspr("Cleartext:")
                print(f"{clear:#x}")
    except (ValueError, RuntimeError) as exc:
        logger.debug("%s failed", args.subcommand, exc_info=exc)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    pspr("Thank you for using toyrsa!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
