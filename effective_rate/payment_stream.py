"""Payment streams, relative payment streams and their net present value.

A *payment* is a pair ``(amount, date)``; the amount is positive for an
inflow and negative for an outflow. A *payment stream* is a list of
payments in any order.

Let ``(a_f, t_f)`` be the earliest payment of a stream. The *relative
payment stream* replaces every date ``t_k`` by its distance ``r_k`` from
``t_f`` expressed in years. Each date is measured against the length of
its own year::

    r_k = (y_k - y_f) + (d_k / D(y_k) - d_f / D(y_f))

where ``d`` is the zero-based day of year and ``D(y)`` is 366 for a leap
year and 365 otherwise.

A relative payment stream defines the net present value function::

    npv(x)  = sum(a_k * (1 + x) ** -r_k)
    npv'(x) = sum(a_k * -r_k * (1 + x) ** (-r_k - 1))

whose root is the effective interest rate of the stream.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Iterable, List, NamedTuple, Sequence, Tuple, Union

import logging

import numpy as np
import pandas as pd

from effective_rate.utils.date import DateLike, to_date, year_offset

logger = logging.getLogger(__name__)


class EmptyPaymentStreamError(ValueError):
    """Raised when an operation needs at least one payment."""


class RateDomainError(ValueError):
    """Raised when a rate outside ``x > -1`` is discounted."""


class Payment(NamedTuple):
    amount: float
    date: date

    @classmethod
    def of(cls, amount: float, date_like: DateLike) -> "Payment":
        return cls(float(amount), to_date(date_like))


class RelativePayment(NamedTuple):
    amount: float
    offset: float


PaymentLike = Union[Payment, Tuple[float, DateLike]]


def as_payment(item: PaymentLike) -> Payment:
    """Coerce an ``(amount, date_like)`` pair into a :class:`Payment`."""
    if isinstance(item, Payment):
        return item
    amount, date_like = item
    return Payment.of(amount, date_like)


def _as_payments(stream: Iterable[PaymentLike]) -> List[Payment]:
    return [as_payment(item) for item in stream]


def earliest_payment(stream: Iterable[PaymentLike]) -> Payment:
    """Return the payment with the earliest date.

    Ties resolve to the first tied payment in input order.
    """
    payments = _as_payments(stream)
    if not payments:
        raise EmptyPaymentStreamError("payment stream must not be empty")
    return min(payments, key=lambda payment: payment.date)


def to_relative_payment_stream(
    stream: Iterable[PaymentLike],
) -> List[RelativePayment]:
    """Replace payment dates by their offset in years from the earliest payment."""
    payments = _as_payments(stream)
    first = earliest_payment(payments)
    logger.debug("Relative stream: %s payments, earliest %s", len(payments), first.date)
    return [
        RelativePayment(payment.amount, year_offset(first.date, payment.date))
        for payment in payments
    ]


def _as_arrays(relative_stream: Sequence[RelativePayment]) -> Tuple[np.ndarray, np.ndarray]:
    amounts = np.array([float(amount) for amount, _ in relative_stream], dtype=float)
    offsets = np.array([float(offset) for _, offset in relative_stream], dtype=float)
    return amounts, offsets


def _discount_base(x: float) -> float:
    base = 1.0 + float(x)
    if base <= 0.0:
        raise RateDomainError(f"rate must be greater than -100%, got {x!r}")
    return base


def net_present_value(relative_stream: Sequence[RelativePayment]) -> Callable[[float], float]:
    """Return ``npv(x)`` for a relative payment stream.

    >>> npv = net_present_value([(1000, 0.0), (-1000, 1.0)])
    >>> npv(0.0)
    0.0
    """
    amounts, offsets = _as_arrays(relative_stream)

    def npv(x: float) -> float:
        base = _discount_base(x)
        return float(np.sum(amounts * np.power(base, -offsets)))

    return npv


def net_present_value_derivative(
    relative_stream: Sequence[RelativePayment],
) -> Callable[[float], float]:
    """Return ``npv'(x)`` for a relative payment stream.

    >>> npv_prime = net_present_value_derivative([(1000, 0.0), (-1000, 1.0)])
    >>> npv_prime(0.0)
    1000.0
    """
    amounts, offsets = _as_arrays(relative_stream)

    def npv_prime(x: float) -> float:
        base = _discount_base(x)
        return float(np.sum(amounts * -offsets * np.power(base, -offsets - 1.0)))

    return npv_prime


def payment_stream_from_frame(
    frame: pd.DataFrame,
    amount: str = "amount",
    date: str = "date",
) -> List[Payment]:
    """Build a payment stream from the ``amount`` and ``date`` columns of a frame."""
    missing = [column for column in (amount, date) if column not in frame.columns]
    if missing:
        raise ValueError(f"Missing payment columns: {missing}")
    return [
        Payment.of(value, when)
        for value, when in zip(frame[amount].tolist(), frame[date].tolist())
    ]
