"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.sorter import solve
from pushswap.validate import InputError, parse_numbers


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program on argv (without program name); return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        numbers = parse_numbers(args)
    except InputError as error:
        if error.report:
            sys.stderr.write("Error\n")
        return 1
    for operation in solve(numbers):
        sys.stdout.write(operation + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())