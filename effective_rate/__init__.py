"""Effective interest rate of irregularly dated payment streams.

Key modules:
- rate: effective interest rate of a payment stream
- payment_stream: payments, relative payment streams and net present value
- utils.rootfinding: Newton's method with explicit failure
- utils.date: date coercion, calendar queries and year offsets
"""

from .payment_stream import (
    EmptyPaymentStreamError,
    Payment,
    RateDomainError,
    RelativePayment,
    earliest_payment,
    net_present_value,
    net_present_value_derivative,
    payment_stream_from_frame,
    to_relative_payment_stream,
)
from .rate import NewtonSettings, effective_interest_rate
from .utils.date import year_fraction
from .utils.rootfinding import RootFindingError, RootResult, iterate

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Types
    "Payment",
    "RelativePayment",
    "RootResult",
    "NewtonSettings",
    # Main functions
    "effective_interest_rate",
    "earliest_payment",
    "to_relative_payment_stream",
    "net_present_value",
    "net_present_value_derivative",
    "payment_stream_from_frame",
    "iterate",
    "year_fraction",
    # Exceptions
    "RootFindingError",
    "EmptyPaymentStreamError",
    "RateDomainError",
]
