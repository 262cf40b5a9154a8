"""Command that factorizes a list of integers and prints the results."""

from __future__ import annotations

import argparse
import sys
import threading
from typing import List, Optional, Sequence

from primefact.fact import Config, Factorization, FactorizationError

DEFAULT_NUMBERS = (100, -17, 25)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="primefact",
        description="Print the prime factorization of each number.",
    )
    parser.add_argument(
        "numbers",
        nargs="*",
        type=int,
        help="integers to factorize (default: %s)" % " ".join(map(str, DEFAULT_NUMBERS)),
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Factorize the given numbers, print one line each, then ``Finished``."""
    args = _parse_args(argv)
    numbers: List[int] = args.numbers or list(DEFAULT_NUMBERS)
    try:
        Factorization().do(
            threading.Event(),
            numbers,
            sys.stdout,
            Config(factorization_workers=2, write_workers=2),
        )
    except FactorizationError as exc:
        print(exc, file=sys.stderr)
        return 1
    print("Finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())