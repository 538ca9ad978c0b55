"""Direct solver for tridiagonal linear systems (Thomas algorithm)."""

from __future__ import annotations

from collections.abc import Sequence


def thomas(
    a: Sequence[float],
    c: Sequence[float],
    b: Sequence[float],
    f: Sequence[float],
) -> list[float]:
    """Solve ``a[i]*x[i-1] + c[i]*x[i] + b[i]*x[i+1] = f[i]`` for ``x``.

    ``a`` is the sub-diagonal, ``c`` the main diagonal and ``b`` the
    super-diagonal; ``a[0]`` and ``b[-1]`` are ignored. All four sequences
    must have the same, non-zero length. A zero pivot raises
    ``ZeroDivisionError``.
    """
    size = len(a)
    if size == 0:
        raise ValueError("tridiagonal system must not be empty")
    if not len(c) == len(b) == len(f) == size:
        raise ValueError(
            "coefficient sequences differ in length: "
            f"a={size}, c={len(c)}, b={len(b)}, f={len(f)}"
        )
    if size == 1:
        return [f[0] / c[0]]

    last = size - 1
    deltas = [-b[0] / c[0]]
    lambdas = [f[0] / c[0]]
    for a_i, c_i, b_i, f_i in zip(a[1:last], c[1:last], b[1:last], f[1:last]):
        denom = c_i + a_i * deltas[-1]
        deltas.append(-b_i / denom)
        lambdas.append((f_i - a_i * lambdas[-1]) / denom)

    solution = [0.0] * size
    solution[last] = (f[last] - a[last] * lambdas[-1]) / (c[last] + a[last] * deltas[-1])
    for i in reversed(range(last)):
        solution[i] = deltas[i] * solution[i + 1] + lambdas[i]
    return solution