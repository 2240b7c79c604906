"""Three equivalent ways to sum the integers 1..n."""

from functools import reduce

from wallet.exceptions import InvalidInputError


def _check(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidInputError("n", f"expected an integer, got {n!r}")


def sum_to_n_a(n: int) -> int:
    """Accumulate with a for loop."""
    _check(n)
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def sum_to_n_b(n: int) -> int:
    """Accumulate with a while loop."""
    _check(n)
    total = 0
    i = 1
    while i <= n:
        total += i
        i += 1
    return total


def sum_to_n_c(n: int) -> int:
    """Fold over the range with reduce."""
    _check(n)
    return reduce(lambda acc, num: acc + num, range(1, n + 1), 0)


SUM_METHODS = {
    "a": sum_to_n_a,
    "b": sum_to_n_b,
    "c": sum_to_n_c,
}
