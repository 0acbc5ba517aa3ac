"""Command that prints the moves sorting the integers given as arguments."""

from __future__ import annotations

import sys
from typing import Sequence

from pushswap.algorithm import solve
from pushswap.libft.output import printf, put_str
from pushswap.parsing import ParseError, parse_arguments


def main(argv: Sequence[str] | None = None) -> int:
    """Print one move per line that sorts the values; "Error" on bad input.

    argv holds the arguments without the program name and defaults to
    ``sys.argv[1:]``. With no arguments nothing is printed.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except ParseError:
        put_str("Error\n", file=sys.stderr)
        return 0
    for move in solve(values):
        printf("%s\n", move.value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())