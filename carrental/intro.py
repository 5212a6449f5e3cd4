"""Factorial helper and the introductory command."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def factorial(n: int) -> int:
    """Return n! for a non-negative integer n."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers: {n}")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Print a greeting followed by the factorials of 1 to 5."""
    del argv
    lines = ["Introduction project.", "", "Hello, world!"]
    lines.extend(f"factorial({n}) = {factorial(n)}" for n in range(1, 6))
    sys.stdout.write("\n".join(lines) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())