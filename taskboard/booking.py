"""Command line that books in a user by name and age."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from typing import Optional, Sequence

MIN_AGE = -128
MAX_AGE = 127


@dataclass(frozen=True)
class Booking:
    """The details given for one booking."""

    first_name: str
    last_name: str
    age: int


def _age(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid age: {text!r}") from None
    if not MIN_AGE <= value <= MAX_AGE:
        raise argparse.ArgumentTypeError(
            f"age must be between {MIN_AGE} and {MAX_AGE}, got {value}"
        )
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="booking", description="Books in a user")
    parser.add_argument("--version", action="version", version="%(prog)s 1.0")
    parser.add_argument(
        "--f", dest="first_name", required=True, help="first name of user"
    )
    parser.add_argument("--l", dest="last_name", required=True, help="last name of user")
    parser.add_argument("--a", dest="age", type=_age, required=True, help="age of the user")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> Booking:
    """Parse the command line; exit with a usage error if it is incomplete or invalid."""
    args = _parser().parse_args(argv)
    return Booking(first_name=args.first_name, last_name=args.last_name, age=args.age)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the booked name, surname and age."""
    booking = parse_args(argv)
    print(json.dumps(booking.first_name, ensure_ascii=False))
    print(json.dumps(booking.last_name, ensure_ascii=False))
    print(booking.age)
    return 0


if __name__ == "__main__":
    sys.exit(main())