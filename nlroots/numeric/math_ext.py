"""
Math Extensions (:mod:`nlroots.numeric.math_ext`)
=================================================

.. currentmodule:: nlroots.numeric.math_ext

Small helpers for evaluating user-supplied functions that may be
undefined for some inputs.
"""
from __future__ import annotations

import math
from collections.abc import Callable

# Written for nlroots, 2024.

# ======================================================================


def all_finite(*values: float | None) -> bool:
    """
    Returns ``True`` if every value is a finite real number.  ``None``
    counts as not finite.

    Examples
    --------
    >>> all_finite(1.0, -2.5)
    True
    >>> all_finite(1.0, float('nan'))
    False
    """
    for v in values:
        if v is None or not math.isfinite(v):
            return False
    return True


def safe_eval(func: Callable[..., float], *args: float) -> float:
    """
    Evaluate ``func(*args)`` as a `float`.  If the function is undefined
    at this point and signals this by raising `ArithmeticError` (e.g.
    overflow, division by zero) or `ValueError` (e.g. ``math.log(-1)``),
    NaN is returned instead.  Other exceptions are not caught.
    """
    try:
        return float(func(*args))
    except (ArithmeticError, ValueError):
        return math.nan
