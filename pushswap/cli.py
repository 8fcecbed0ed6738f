"""Command line: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import InputError, parse_values, split_words
from .sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sorter on ``argv`` and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        return 1
    if len(args) == 1:
        args = split_words(args[0], " ")
        if not args:
            return 1
    try:
        values = parse_values(args)
    except InputError:
        print("Error")
        return 1
    for operation in solve(values):
        print(operation)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())