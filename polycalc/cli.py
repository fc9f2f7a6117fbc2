"""Command line entry point: add two polynomials and print the sum."""

from __future__ import annotations

import argparse
import sys

from polycalc.polynomial import ParseError, Polynomial
from polycalc.term import TermError


def main(argv: list[str] | None = None) -> int:
    """Read two polynomials, add them, and print the simplified result."""
    parser = argparse.ArgumentParser(
        prog="polycalc",
        description="Add two polynomials, each ended with a semicolon.",
    )
    parser.add_argument("polynomials", nargs="*", metavar="POLYNOMIAL")
    args = parser.parse_args(argv)
    given = list(args.polynomials)
    if len(given) > 2:
        parser.error("at most two polynomials may be given")
    if len(given) < 2:
        print("Enter two polynomials ended with a semicolon:")
    while len(given) < 2:
        given.append(sys.stdin.readline().rstrip("\r\n"))
    try:
        first = Polynomial.parse(given[0])
        second = Polynomial.parse(given[1])
    except (ParseError, TermError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    first.extend(second)
    first.simplify()
    print(f"Result: {first}")
    return 0


if __name__ == "__main__":
    sys.exit(main())