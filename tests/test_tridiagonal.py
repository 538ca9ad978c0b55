import random

import pytest

from sphflow.tridiagonal import thomas


def _residuals(a, c, b, f, x):
    n = len(x)
    out = []
    for i in range(n):
        lhs = c[i] * x[i]
        if i > 0:
            lhs += a[i] * x[i - 1]
        if i < n - 1:
            lhs += b[i] * x[i + 1]
        out.append(lhs - f[i])
    return out


def test_small_system_known_solution():
    # [[2, 1], [1, 3]] x = [3, 4]  ->  x = [1, 1]
    x = thomas([0.0, 1.0], [2.0, 3.0], [1.0, 0.0], [3.0, 4.0])
    assert x == pytest.approx([1.0, 1.0])


def test_identity_returns_right_hand_side():
    f = [3.5, -2.0, 7.25, 0.0, 1.0]
    n = len(f)
    x = thomas([0.0] * n, [1.0] * n, [0.0] * n, f)
    assert x == pytest.approx(f)


def test_single_equation():
    assert thomas([5.0], [4.0], [9.0], [2.0]) == pytest.approx([0.5])


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
@pytest.mark.parametrize("n", [2, 3, 10, 50])
def test_random_diagonally_dominant_residual_vanishes(seed, n):
    rng = random.Random(seed * 100 + n)
    a = [rng.uniform(-1, 1) for _ in range(n)]
    b = [rng.uniform(-1, 1) for _ in range(n)]
    c = [rng.uniform(3, 5) * rng.choice([-1, 1]) for _ in range(n)]
    f = [rng.uniform(-10, 10) for _ in range(n)]
    x = thomas(a, c, b, f)
    assert len(x) == n
    assert max(abs(r) for r in _residuals(a, c, b, f, x)) < 1e-9


def test_recovers_chosen_solution():
    n = 8
    expected = [float(i) - 3.0 for i in range(n)]
    a = [0.0] + [-1.0] * (n - 1)
    b = [-1.0] * (n - 1) + [0.0]
    c = [4.0] * n
    f = []
    for i in range(n):
        value = c[i] * expected[i]
        if i > 0:
            value += a[i] * expected[i - 1]
        if i < n - 1:
            value += b[i] * expected[i + 1]
        f.append(value)
    assert thomas(a, c, b, f) == pytest.approx(expected)


def test_outer_coefficients_are_ignored():
    c = [4.0, 5.0, 6.0]
    f = [1.0, 2.0, 3.0]
    base = thomas([0.0, 1.0, 1.0], c, [1.0, 1.0, 0.0], f)
    other = thomas([99.0, 1.0, 1.0], c, [1.0, 1.0, -42.0], f)
    assert base == pytest.approx(other)


def test_inputs_are_not_modified():
    a = [0.0, 1.0, 1.0]
    c = [4.0, 4.0, 4.0]
    b = [1.0, 1.0, 0.0]
    f = [1.0, 2.0, 3.0]
    copies = [list(a), list(c), list(b), list(f)]
    thomas(a, c, b, f)
    assert [a, c, b, f] == copies


def test_accepts_tuples():
    x_list = thomas([0.0, 1.0, 1.0], [4.0, 4.0, 4.0], [1.0, 1.0, 0.0], [1.0, 2.0, 3.0])
    x_tuple = thomas((0.0, 1.0, 1.0), (4.0, 4.0, 4.0), (1.0, 1.0, 0.0), (1.0, 2.0, 3.0))
    assert x_list == x_tuple


def test_empty_system_raises():
    with pytest.raises(ValueError):
        thomas([], [], [], [])


@pytest.mark.parametrize(
    "a, c, b, f",
    [
        ([0.0, 1.0], [1.0], [1.0, 0.0], [1.0, 1.0]),
        ([0.0, 1.0], [1.0, 1.0], [1.0], [1.0, 1.0]),
        ([0.0, 1.0], [1.0, 1.0], [1.0, 0.0], [1.0, 1.0, 1.0]),
    ],
)
def test_length_mismatch_raises(a, c, b, f):
    with pytest.raises(ValueError):
        thomas(a, c, b, f)


def test_zero_leading_pivot_raises():
    with pytest.raises(ZeroDivisionError):
        thomas([0.0, 1.0, 1.0], [0.0, 2.0, 2.0], [1.0, 1.0, 0.0], [1.0, 1.0, 1.0])


def test_zero_elimination_pivot_raises():
    # c[1] + a[1] * delta[0] = 1 + 1 * (-1) = 0
    with pytest.raises(ZeroDivisionError):
        thomas([0.0, 1.0, 1.0], [1.0, 1.0, 2.0], [1.0, 1.0, 0.0], [1.0, 1.0, 1.0])