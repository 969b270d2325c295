"""Root-finding utilities (plain Newton–Raphson with explicit failure)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import logging
import math

logger = logging.getLogger(__name__)

Func = Callable[[float], float]


class RootFindingError(RuntimeError):
    """Raised when root-finding fails to converge."""


@dataclass(frozen=True)
class RootResult:
    """Outcome of a root search.

    ``root`` is the last iterate when ``converged`` is true and ``None``
    otherwise; a failed search exposes no partial value.
    """

    root: float | None
    iterations: int
    converged: bool
    method: str = "newton"

    def unwrap(self) -> float:
        """Return the root or raise :class:`RootFindingError`."""
        if not self.converged or self.root is None:
            raise RootFindingError(
                f"{self.method} failed to converge after {self.iterations} iterations"
            )
        return self.root


def _failure(iterations: int) -> RootResult:
    return RootResult(None, iterations, False)


def iterate(
    func: Func,
    deriv: Func,
    start_value: float,
    tolerance: float,
    max_iterations: int,
) -> RootResult:
    """Run Newton's iteration ``x_{k+1} = x_k - f(x_k) / f'(x_k)``.

    Parameters
    ----------
    func:
        Function whose root is wanted.
    deriv:
        Derivative of ``func``.
    start_value:
        First iterate; usually a guess close to the wanted root.
    tolerance:
        Convergence threshold on the distance between two consecutive
        iterates. The iterate produced by the converging update is returned.
    max_iterations:
        Iteration cap. The counter starts at 0 and the search gives up once
        it exceeds the cap, so at most ``max_iterations + 1`` updates run.

    A vanishing derivative or a non-finite iterate cannot converge and ends
    the search with a failed result.
    """
    if tolerance <= 0.0:
        raise ValueError("tolerance must be positive")
    if max_iterations < 0:
        raise ValueError("max_iterations must be non-negative")

    x = float(start_value)
    count = 0
    while count <= max_iterations:
        value = func(x)
        slope = deriv(x)
        logger.debug("Newton iter %s: x=%s value=%s deriv=%s", count, x, value, slope)
        if slope == 0.0:
            logger.debug("Zero derivative; aborting Newton at iter %s", count)
            return _failure(count + 1)
        x_new = x - value / slope
        if not math.isfinite(x_new):
            logger.debug("Non-finite iterate %s; aborting Newton at iter %s", x_new, count)
            return _failure(count + 1)
        if abs(x_new - x) <= tolerance:
            return RootResult(float(x_new), count + 1, True)
        x = x_new
        count += 1

    logger.debug("Newton exhausted %s iterations without converging", max_iterations)
    return _failure(count)
