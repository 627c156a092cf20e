"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that prompts for whichever operands
were not given on the command line, unless non-interactive mode is requested.

Typical usage example:

    egcdutils 21 15
    OR
    python -m egcdutils --width
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import sys
import typing

import egcdutils


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = int


help_dict: dict[str, HelpData] = {
    "a": HelpData("The first signed integer."),
    "b": HelpData("The second signed integer. Must not be zero if the first is."),
}

corep = argparse.ArgumentParser(prog="egcdutils", description="Extended Greatest Common Divisor of two integers.")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {egcdutils.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--width", "-w", action="store_true", help="Also report the signed width of the intermediates")
corep.add_argument("a", nargs="?", type=help_dict["a"].format, help=help_dict["a"].description)
corep.add_argument("b", nargs="?", type=help_dict["b"].format, help=help_dict["b"].description)


def input_handler(arg: str, non_interactive: bool, prntr: typing.Callable = print):
    if non_interactive:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    helper_data = help_dict[arg]
    prntr(f"Please specify {arg}!")
    prntr("Description: " + helper_data.description)
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def main(argv: list[str] | None = None):
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not args.non_interactive:
            print(text)

    pspr("Welcome to EGCD Utils!\n")
    for reqs in ("a", "b"):
        if getattr(args, reqs) is None:
            setattr(args, reqs, input_handler(reqs, args.non_interactive))
        else:
            pspr(f"{reqs}: {getattr(args, reqs)}")
    pspr("\nInput Complete! Executing...")
    try:
        res = egcdutils.egcd(args.a, args.b)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        sys.exit(1)
    for field, value in zip(res._fields, res):
        print(f"{field}: {value}")
    if args.width:
        print(f"width: {egcdutils.signed_width(args.a, args.b)}")
    pspr("Thank you for using EGCD Utils!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
