"""Number-theory helpers and the Tower of Hanoi solver."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass


def factorial(n: int) -> int:
    """Return n! for a non-negative integer."""
    if n < 0:
        raise ValueError("factorial() is not defined for negative numbers")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def n_choose_r(n: int, r: int) -> int:
    """Return the number of ways to choose r items from n."""
    if not 0 <= r <= n:
        raise ValueError(f"need 0 <= r <= n, got n={n}, r={r}")
    return factorial(n) // (factorial(r) * factorial(n - r))


def is_prime(n: int) -> bool:
    """Return True when n is a prime number."""
    if n <= 1:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def next_prime(n: int) -> int:
    """Return the smallest prime strictly greater than n."""
    candidate = n + 1
    while not is_prime(candidate):
        candidate += 1
    return candidate


@dataclass(frozen=True)
class Move:
    """One disk moved from one rod to another."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from rod {self.source} to rod {self.target}"


def _solve(n: int, source: str, target: str, spare: str) -> Iterator[Move]:
    if n == 1:
        yield Move(1, source, target)
        return
    yield from _solve(n - 1, source, spare, target)
    yield Move(n, source, target)
    yield from _solve(n - 1, spare, target, source)


def hanoi_moves(
    n: int, source: str = "A", target: str = "C", spare: str = "B"
) -> Iterator[Move]:
    """Yield the moves that carry n disks from ``source`` to ``target``."""
    if n < 1:
        raise ValueError("Number of disks must be at least 1!")
    return _solve(n, source, target, spare)


def main(argv: list[str] | None = None) -> int:
    """Print the Tower of Hanoi solution for a number of disks."""
    parser = argparse.ArgumentParser(
        prog="hanoi", description="Solve the Tower of Hanoi puzzle."
    )
    parser.add_argument("disks", nargs="?", type=int, help="number of disks")
    args = parser.parse_args(argv)
    disks = args.disks
    if disks is None:
        try:
            disks = int(input("Enter the number of disks: "))
        except (ValueError, EOFError):
            print("Number of disks must be at least 1!")
            return 1
    if disks < 1:
        print("Number of disks must be at least 1!")
        return 1
    print("\nSolution for Tower of Hanoi:\n")
    for move in hanoi_moves(disks):
        print(move)
    print(f"\nTotal moves: {2 ** disks - 1}")
    return 0