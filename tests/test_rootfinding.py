import math

import pytest
from pytest import approx

from effective_rate.utils.rootfinding import RootFindingError, RootResult, iterate


def quartic(x):
    return math.pow(x, 4) - 1


def quartic_prime(x):
    return 4 * math.pow(x, 3)


def test_iterate_finds_root_of_identity():
    result = iterate(lambda x: x, lambda _x: 1, 1.0, 1e-9, 4)
    assert result.converged
    assert result.root == approx(0.0, abs=1e-9)


def test_iterate_fails_on_quartic_with_four_iterations():
    result = iterate(quartic, quartic_prime, 2.0, 1e-9, 4)
    assert not result.converged
    assert result.root is None


def test_iterate_finds_quartic_root_with_eight_iterations():
    result = iterate(quartic, quartic_prime, 2.0, 1e-9, 8)
    assert result.converged
    assert result.root == approx(1.0, abs=1e-9)
    assert result.iterations <= 9


def test_iterate_returns_last_iterate_not_function_value():
    result = iterate(lambda x: x * x - 4, lambda x: 2 * x, 4.0, 1e-9, 8)
    assert result.root == approx(2.0, abs=1e-9)


def test_zero_iterations_still_allows_one_update():
    # linear functions converge on the second update
    assert not iterate(lambda x: x - 3, lambda _x: 1.0, 0.0, 1e-9, 0).converged
    assert iterate(lambda x: x - 3, lambda _x: 1.0, 0.0, 1e-9, 1).converged


def test_zero_derivative_ends_in_failure():
    result = iterate(lambda x: x * x + 1, lambda x: 2 * x, 0.0, 1e-9, 64)
    assert not result.converged
    assert result.root is None


def test_non_finite_iterate_ends_in_failure():
    result = iterate(lambda x: float("nan"), lambda x: 1.0, 1.0, 1e-9, 64)
    assert not result.converged


@pytest.mark.parametrize("tolerance, max_iterations", [(0.0, 4), (-1e-9, 4), (1e-9, -1)])
def test_invalid_parameters_raise(tolerance, max_iterations):
    with pytest.raises(ValueError):
        iterate(lambda x: x, lambda _x: 1.0, 1.0, tolerance, max_iterations)


def test_unwrap():
    assert RootResult(0.5, 3, True).unwrap() == 0.5
    with pytest.raises(RootFindingError):
        RootResult(None, 5, False).unwrap()
