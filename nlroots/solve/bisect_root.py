from collections.abc import Callable

import numpy as np

from nlroots.numeric.math_ext import all_finite, safe_eval
from nlroots.solve.exception import SolverFlag
from nlroots.solve.results import MethodResult

# Written for nlroots, 2024.

# ----------------------------------------------------------------------

BISECT_MAXITS = 10000


def bisect_root(func: Callable[[float], float], x_a: float, x_b: float,
                eps: float, *, maxits: int = BISECT_MAXITS,
                verbose: bool = False) -> MethodResult:
    # noinspection PyUnresolvedReferences
    r"""
    Approximate solution of :math:`f(x) = 0` on interval :math:`x \in [x_a,
    x_b]` by the bisection method.  For bisection to work :math:`f(x)` must
    change sign across the interval, i.e. ``func(x_a)`` and ``func(x_b)`` must
    return values of opposite sign.

    The bracket is halved each iteration, so approximately
    :math:`\lceil \log_2((x_b - x_a) / \epsilon) \rceil` iterations are
    required.

    Examples
    --------
    >>> f = lambda x: x**2 - x - 1
    >>> res = bisect_root(f, 1.0, 2.0, 1e-6)
    >>> res.success, res.iterations
    (True, 20)

    Parameters
    ----------
    func : Callable[[float], float]
        Function which we are searching for root.
    x_a,x_b : float
        Each end of the search interval, requiring ``x_a < x_b`` (checked
        by the caller).
    eps : float
        End search when the half-width of the bracket :math:`< \epsilon`.
        Also, if there is no sign change but one end already satisfies
        :math:`|f(x)| < \epsilon` that end is accepted as the root.
    maxits : int, default = 10000
        Maximum number of iterations.
    verbose : bool
        If True, print progress statements.

    Returns
    -------
    result : MethodResult
        On success, the final midpoint and :math:`f` re-evaluated there.
        On failure the flag is one of ``FUNCTION_UNDEFINED``,
        ``NO_SIGN_CHANGE`` or ``MAX_ITERATIONS_EXCEEDED``.
    """
    if verbose:
        print(f"Bisecting Root:")

    f_a, f_b = safe_eval(func, x_a), safe_eval(func, x_b)
    if not all_finite(f_a, f_b):
        return MethodResult.failed(
            SolverFlag.FUNCTION_UNDEFINED,
            "Function value is undefined or infinite at the ends of the "
            "interval.")

    if np.sign(f_a) * np.sign(f_b) >= 0:
        if abs(f_a) < eps:
            return MethodResult.converged(x_a, f_a, 0)
        if abs(f_b) < eps:
            return MethodResult.converged(x_b, f_b, 0)
        return MethodResult.failed(
            SolverFlag.NO_SIGN_CHANGE,
            "Function values at the ends of the interval have the same "
            "sign.  The method cannot guarantee a root inside the interval.")

    it = 0
    width = abs(x_b - x_a)
    while width > eps:
        if it >= maxits:
            x_m = (x_a + x_b) / 2
            if verbose:
                print(f"... Reached {maxits} iteration limit.")
            return MethodResult.failed(
                SolverFlag.MAX_ITERATIONS_EXCEEDED,
                f"Maximum number of iterations ({maxits}) exceeded.",
                it, x_m, safe_eval(func, x_m))

        # Compute midpoint.
        x_m = x_a + (x_b - x_a) / 2
        f_m = safe_eval(func, x_m)
        it += 1

        if verbose:
            print(f"... Iteration {it}: x = [{x_a}, {x_m}, {x_b}], "
                  f"f = [{f_a}, {f_m}, {f_b}]")

        if not all_finite(f_m):
            return MethodResult.failed(
                SolverFlag.FUNCTION_UNDEFINED,
                f"Function value is undefined or infinite at x = {x_m}.",
                it, x_m, f_m)

        # Check stopping criteria.
        if f_m == 0.0 or abs(x_b - x_a) / 2 < eps:
            break

        # Check which side root is on, narrow interval.
        if np.sign(f_a) * np.sign(f_m) < 0:
            x_b, f_b = x_m, f_m
        else:
            x_a, f_a = x_m, f_m
        width = abs(x_b - x_a)

    x_root = (x_a + x_b) / 2
    f_root = safe_eval(func, x_root)  # Fresh value at returned point.
    if not all_finite(f_root):
        return MethodResult.failed(
            SolverFlag.FUNCTION_UNDEFINED,
            f"Function value is undefined or infinite at x = {x_root}.",
            it, x_root, f_root)

    if verbose:
        print(f"... Converged.")
    return MethodResult.converged(x_root, f_root, it)
