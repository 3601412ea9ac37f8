"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that generates the INTERACTIVE part
on-the-fly from whatever the command line left out, including the option that nothing was given at all.

Typical usage example:

    ntutils
    OR
    python -m ntutils prime --digits 50
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import sys
import typing

import ntutils


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in NT Utils.",
            choices=["gcd", "lcm", "euclid", "general", "congruence", "isprime", "prime", "random", "range"],
        ),
    "gcd":
        HelpData("Greatest common divisor of x and y."),
    "lcm":
        HelpData("Least common multiple of x and y."),
    "euclid":
        HelpData("Extended Euclid: d, x, y with a*x + b*y = d."),
    "general":
        HelpData("General solution of a*x + b*y = gcd(a, b)."),
    "congruence":
        HelpData("Smallest x with a*x = b (mod m)."),
    "isprime":
        HelpData("Miller-Rabin primality test."),
    "prime":
        HelpData("Random prime generation."),
    "random":
        HelpData("Random number of a given digit count."),
    "range":
        HelpData("Random number in an inclusive range."),
    "x":
        HelpData(description="First non-negative operand.", format=int),
    "y":
        HelpData(description="Second non-negative operand.", format=int),
    "a":
        HelpData(description="Coefficient a.", format=int),
    "b":
        HelpData(description="Coefficient b.", format=int),
    "m":
        HelpData(description="Modulus m.", format=int),
    "n":
        HelpData(description="Number to test.", format=int),
    "digits":
        HelpData(description="Number of decimal digits.", format=int),
    "low":
        HelpData(description="Lower bound (inclusive).", format=int),
    "high":
        HelpData(description="Upper bound (inclusive).", format=int),
    "rounds":
        HelpData(
            description="Number of Miller-Rabin rounds.",
            format=int,
            advanced=True,
            default=ntutils.DEFAULT_ROUNDS,
        ),
    "max_attempts":
        HelpData(
            description="Maximum number of prime candidates to draw. 0 for no limit.",
            format=int,
            advanced=True,
            default=0,
        ),
}

needs = {
    "gcd": ("x", "y"),
    "lcm": ("x", "y"),
    "euclid": ("a", "b"),
    "general": ("a", "b"),
    "congruence": ("a", "b", "m"),
    "isprime": ("n", "rounds"),
    "prime": ("digits", "rounds", "max_attempts"),
    "random": ("digits",),
    "range": ("low", "high"),
}

operands = argparse.ArgumentParser(add_help=False)
operands.add_argument("-x", type=help_dict["x"].format, help=help_dict["x"].description)
operands.add_argument("-y", type=help_dict["y"].format, help=help_dict["y"].description)
coefficients = argparse.ArgumentParser(add_help=False)
coefficients.add_argument("-a", type=help_dict["a"].format, help=help_dict["a"].description)
coefficients.add_argument("-b", type=help_dict["b"].format, help=help_dict["b"].description)
rounds = argparse.ArgumentParser(add_help=False)
rounds.add_argument("--rounds", "-r", type=help_dict["rounds"].format, help=help_dict["rounds"].description)
digits = argparse.ArgumentParser(add_help=False)
digits.add_argument("--digits", "-d", type=help_dict["digits"].format, help=help_dict["digits"].description)
corep = argparse.ArgumentParser(prog="ntutils")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {ntutils.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Enable advanced mode, for interactive mode")
corep.add_argument("--verbose", "-V", action="store_true", help="Enable debug logging")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

commands.add_parser("gcd", parents=[operands], help=help_dict["gcd"].description)
commands.add_parser("lcm", parents=[operands], help=help_dict["lcm"].description)
commands.add_parser("euclid", parents=[coefficients], help=help_dict["euclid"].description)
commands.add_parser("general", parents=[coefficients], help=help_dict["general"].description)
congruence = commands.add_parser("congruence", parents=[coefficients], help=help_dict["congruence"].description)
congruence.add_argument("-m", type=help_dict["m"].format, help=help_dict["m"].description)
isprime = commands.add_parser("isprime", parents=[rounds], help=help_dict["isprime"].description)
isprime.add_argument("--number", dest="n", type=help_dict["n"].format, help=help_dict["n"].description)
prime = commands.add_parser("prime", parents=[digits, rounds], help=help_dict["prime"].description)
prime.add_argument("--max-attempts",
                   type=help_dict["max_attempts"].format,
                   help=help_dict["max_attempts"].description)
commands.add_parser("random", parents=[digits], help=help_dict["random"].description)
rng_range = commands.add_parser("range", help=help_dict["range"].description)
rng_range.add_argument("--low", "-l", type=help_dict["low"].format, help=help_dict["low"].description)
rng_range.add_argument("--high", "-H", type=help_dict["high"].format, help=help_dict["high"].description)


def checkmodes(arg: str, mode: tuple[bool, bool]):
    helper_data = help_dict[arg]
    if (mode[0] or (helper_data.advanced and not mode[1])) and helper_data.default is not None:
        return helper_data.default
    if mode[0]:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    choices = helper_data.choices
    vald = set(choices)
    for choice in choices:
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


def input_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
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


def execute(args: argparse.Namespace, pspr: typing.Callable = print) -> int:
    """Run the selected subcommand and print its result.

    Returns:
        The process exit status.
    """
    match args.subcommand:
        case "gcd":
            print(ntutils.gcd(args.x, args.y))
        case "lcm":
            print(ntutils.lcm(args.x, args.y))
        case "euclid":
            d, x, y = ntutils.extended_euclid(args.a, args.b)
            pspr("d x y:")
            print(d, x, y)
        case "general":
            xs, ys = ntutils.general_solution(args.a, args.b).as_strings()
            print(xs)
            print(ys)
        case "congruence":
            x = ntutils.solve_congruence(args.a, args.b, args.m)
            if x is None:
                print("No solution.")
                return 1
            print(x)
        case "isprime":
            if not ntutils.is_probable_prime(args.n, args.rounds):
                print("Composite.")
                return 1
            print("Probably prime.")
        case "prime":
            print(ntutils.generate_prime(args.digits, args.rounds, args.max_attempts or None))
        case "random":
            print(ntutils.random_digits(args.digits))
        case "range":
            print(ntutils.random_in_range(args.low, args.high))
    return 0


def main(argv: list[str] | None = None):
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    # Operands and results may run past the default int-to-str digit limit.
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)
    args = corep.parse_args(argv)
    pstatus = (args.non_interactive, args.advanced)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    pspr("Welcome to NT Utils!\n")
    if not args.subcommand:
        args.subcommand = choice_handler("subcommand", pstatus)
    for reqs in needs[args.subcommand]:
        if getattr(args, reqs, None) is None:
            if help_dict[reqs].choices is not None:
                res = choice_handler(reqs, pstatus)
            else:
                res = input_handler(reqs, pstatus)
            setattr(args, reqs, res)
        else:
            pspr(f"{reqs}: {getattr(args, reqs)}")
    pspr("\nInput Complete! Executing...")
    try:
        status = execute(args, pspr)
    except (ValueError, ZeroDivisionError, RuntimeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    pspr("Thank you for using NT Utils!")
    pspr("Goodbye!")
    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
