"""Validated arithmetic operations."""

import math
from numbers import Real

from mathwatch.core.errors import ErrorKind, MathError
from mathwatch.core.models import Attempt


def _require_real(*values: object) -> None:
    """Raise INVALID_INPUT unless every value is a real number.

    bool is rejected even though it subclasses int, and so is NaN.
    """
    for value in values:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise MathError(ErrorKind.INVALID_INPUT)
        if math.isnan(value):
            raise MathError(ErrorKind.INVALID_INPUT)


def divide(a: float, b: float) -> float:
    """Divide a by b.

    The zero-divisor check runs before the sign check, so a negative
    dividend over zero reports DIVISION_BY_ZERO.

    Args:
        a: Dividend, must be non-negative.
        b: Divisor, must be positive.

    Returns:
        The quotient as a float.

    Raises:
        MathError: INVALID_INPUT, DIVISION_BY_ZERO or NEGATIVE_OPERAND.
    """
    _require_real(a, b)
    if b == 0:
        raise MathError(ErrorKind.DIVISION_BY_ZERO)
    if a < 0 or b < 0:
        raise MathError(ErrorKind.NEGATIVE_OPERAND)
    return float(a / b)


def square_root(x: float) -> float:
    """Return the non-negative square root of x.

    Raises:
        MathError: INVALID_INPUT or NEGATIVE_OPERAND.
    """
    _require_real(x)
    if x < 0:
        raise MathError(ErrorKind.NEGATIVE_OPERAND)
    return math.sqrt(x)


def attempt_division(a: float, b: float) -> Attempt:
    """Evaluate divide(a, b) and capture a domain failure as an Attempt.

    Errors other than MathError propagate to the caller.
    """
    try:
        result = divide(a, b)
    except MathError as exc:
        return Attempt(dividend=a, divisor=b, error=exc.kind)
    return Attempt(dividend=a, divisor=b, result=result)
