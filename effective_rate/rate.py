"""Effective interest rate of a stream of dated payments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import logging

from effective_rate.payment_stream import (
    PaymentLike,
    net_present_value,
    net_present_value_derivative,
    to_relative_payment_stream,
)
from effective_rate.utils.rootfinding import RootResult, iterate

logger = logging.getLogger(__name__)

DEFAULT_START_VALUE = -0.75
DEFAULT_TOLERANCE = 1e-9
DEFAULT_MAX_ITERATIONS = 64


@dataclass(frozen=True)
class NewtonSettings:
    """Start value, step tolerance and iteration cap for the rate search."""

    start_value: float = DEFAULT_START_VALUE
    tolerance: float = DEFAULT_TOLERANCE
    max_iterations: int = DEFAULT_MAX_ITERATIONS


DEFAULT_SETTINGS = NewtonSettings()


def effective_interest_rate(
    payment_stream: Iterable[PaymentLike],
    *,
    settings: NewtonSettings | None = None,
) -> RootResult:
    """Return the rate at which the net present value of the stream is zero.

    Parameters
    ----------
    payment_stream:
        Non-empty sequence of ``(amount, date)`` pairs or :class:`Payment`.
    settings:
        Newton parameters; defaults to start -0.75, tolerance 1e-9 and
        64 iterations.

    Returns
    -------
    RootResult
        ``converged`` with the rate in ``root``, or a failed result when
        Newton's method does not settle within the iteration budget.

    Raises
    ------
    EmptyPaymentStreamError
        If the stream holds no payment.
    RateDomainError
        If an iterate falls to -100% or below.

    Examples
    --------
    >>> from datetime import date
    >>> result = effective_interest_rate(
    ...     [(2000, date(2013, 6, 1)), (-1000, date(2014, 6, 1)), (-1000, date(2015, 6, 1))]
    ... )
    >>> result.converged, abs(result.root) < 1e-6
    (True, True)
    """
    cfg = settings or DEFAULT_SETTINGS
    relative_stream = to_relative_payment_stream(payment_stream)
    result = iterate(
        net_present_value(relative_stream),
        net_present_value_derivative(relative_stream),
        cfg.start_value,
        cfg.tolerance,
        cfg.max_iterations,
    )
    if result.converged:
        logger.debug("Effective rate %s after %s iterations", result.root, result.iterations)
    else:
        logger.debug("Effective rate search failed after %s iterations", result.iterations)
    return result
