"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from typing import Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import sort_numbers


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; report bad input as 'Error' on stderr."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and args[0] == ""):
        return 1
    try:
        numbers = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for operation in sort_numbers(numbers):
        sys.stdout.write(f"{operation}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())