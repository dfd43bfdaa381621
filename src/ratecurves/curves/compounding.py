"""
Conversions between discount factors and rates under a compounding rule.

With growth factor C = 1/P over a year fraction tau:

    Simple                 r = (C - 1) / tau
    Compounded (freq f)    r = f * (C^(1/(f*tau)) - 1)
    Continuous             r = ln(C) / tau
    SimpleThenCompounded   Simple if tau <= 1/f, else Compounded
"""

from typing import Union
import numpy as np

from ..conventions import Compounding, Frequency
from ..errors import InvalidFrequencyError, InvalidTimeSpanError


def _validate(compounding: Compounding, frequency: Frequency) -> None:
    if compounding in (Compounding.COMPOUNDED, Compounding.SIMPLE_THEN_COMPOUNDED):
        if not frequency.is_periodic:
            raise InvalidFrequencyError(compounding, frequency)


def implied_rate(
    compound: float,
    tau: float,
    compounding: Union[Compounding, int, str] = Compounding.CONTINUOUS,
    frequency: Union[Frequency, int, str] = Frequency.ANNUAL,
) -> float:
    """
    Rate that grows 1 into `compound` over `tau` years.

    Args:
        compound: Growth factor 1/P (P = discount factor)
        tau: Year fraction, must be positive
        compounding: Compounding rule
        frequency: Periods per year, used by Compounded/SimpleThenCompounded

    Returns:
        Rate as a decimal (0.05 = 5%)

    Raises:
        InvalidFrequencyError: Periodic compounding without a periodic frequency
        InvalidTimeSpanError: tau <= 0
    """
    compounding = Compounding.coerce(compounding)
    frequency = Frequency.coerce(frequency)
    _validate(compounding, frequency)
    if not tau > 0:
        raise InvalidTimeSpanError(tau)

    f = float(frequency.value)
    with np.errstate(divide='ignore', invalid='ignore'):
        if compounding == Compounding.SIMPLE_THEN_COMPOUNDED:
            compounding = Compounding.SIMPLE if tau <= 1.0 / f else Compounding.COMPOUNDED

        if compounding == Compounding.SIMPLE:
            return float((compound - 1.0) / tau)
        elif compounding == Compounding.COMPOUNDED:
            return float(f * (np.power(compound, 1.0 / (f * tau)) - 1.0))
        elif compounding == Compounding.CONTINUOUS:
            return float(np.log(compound) / tau)
    raise ValueError(f"Unknown compounding: {compounding}")


def rate_from_discount(
    discount: float,
    tau: float,
    compounding: Union[Compounding, int, str] = Compounding.CONTINUOUS,
    frequency: Union[Frequency, int, str] = Frequency.ANNUAL,
) -> float:
    """implied_rate for growth factor 1/discount."""
    with np.errstate(divide='ignore'):
        compound = np.float64(1.0) / discount
    return implied_rate(compound, tau, compounding, frequency)


def compound_factor(
    rate: float,
    tau: float,
    compounding: Union[Compounding, int, str] = Compounding.CONTINUOUS,
    frequency: Union[Frequency, int, str] = Frequency.ANNUAL,
) -> float:
    """
    Growth factor of `rate` over `tau` years; inverse of implied_rate.

    Raises:
        InvalidFrequencyError: Periodic compounding without a periodic frequency
        InvalidTimeSpanError: tau < 0
    """
    compounding = Compounding.coerce(compounding)
    frequency = Frequency.coerce(frequency)
    _validate(compounding, frequency)
    if tau < 0:
        raise InvalidTimeSpanError(tau, "negative")

    f = float(frequency.value)
    if compounding == Compounding.SIMPLE_THEN_COMPOUNDED:
        compounding = Compounding.SIMPLE if tau <= 1.0 / f else Compounding.COMPOUNDED

    if compounding == Compounding.SIMPLE:
        return 1.0 + rate * tau
    elif compounding == Compounding.COMPOUNDED:
        return float(np.power(1.0 + rate / f, f * tau))
    elif compounding == Compounding.CONTINUOUS:
        return float(np.exp(rate * tau))
    raise ValueError(f"Unknown compounding: {compounding}")


def discount_factor_from_rate(
    rate: float,
    tau: float,
    compounding: Union[Compounding, int, str] = Compounding.CONTINUOUS,
    frequency: Union[Frequency, int, str] = Frequency.ANNUAL,
) -> float:
    """Discount factor 1/C for a rate over tau years."""
    return 1.0 / compound_factor(rate, tau, compounding, frequency)


def calculate_discount_factor(rate: float, time: float) -> float:
    """Continuously compounded discount factor exp(-rate * time)."""
    return float(np.exp(-rate * time))


__all__ = [
    "implied_rate",
    "rate_from_discount",
    "compound_factor",
    "discount_factor_from_rate",
    "calculate_discount_factor",
]
