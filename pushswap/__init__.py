"""Two-stack sorting puzzle: the stacks and their moves, a solver and its command."""

__version__ = "1.0.0"