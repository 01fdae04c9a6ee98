from collections.abc import Callable

from nlroots.numeric.math_ext import all_finite, safe_eval
from nlroots.solve.exception import SolverFlag
from nlroots.solve.results import MethodResult

# Written for nlroots, 2024.

# ----------------------------------------------------------------------

SECANT_MAXITS = 1000
SECANT_DENOM_TINY = 1e-15


def secant_root(func: Callable[[float], float], x0: float, x1: float,
                eps: float, *, maxits: int = SECANT_MAXITS,
                verbose: bool = False) -> MethodResult:
    r"""
    Approximate solution of :math:`f(x) = 0` using the secant method,
    starting from two trial points.  No derivative is required and
    there is no requirement for a sign change between `x0` and `x1`.

    Each iteration computes:

        :math:`x_2 = x_1 - f(x_1) (x_1 - x_0) / (f(x_1) - f(x_0))`

    Parameters
    ----------
    func : Callable[[float], float]
        Function which we are searching for root.
    x0, x1 : float
        Starting points.  Any order is allowed.
    eps : float
        Converged when :math:`|x_2 - x_1| < \epsilon` or
        :math:`|f(x_2)| < \epsilon`.  A starting point with
        :math:`|f| < \epsilon` is returned immediately.
    maxits : int, default = 1000
        Maximum number of iterations.
    verbose : bool
        If True, print progress statements.

    Returns
    -------
    result : MethodResult
        Failures carry the last finite iterate where available, flagged
        ``FUNCTION_UNDEFINED``, ``STALLED_DENOMINATOR``,
        ``NON_FINITE_ITERATE`` or ``MAX_ITERATIONS_EXCEEDED``.
    """
    if verbose:
        print(f"Secant Method:")

    f0, f1 = safe_eval(func, x0), safe_eval(func, x1)
    if not all_finite(f0, f1):
        return MethodResult.failed(
            SolverFlag.FUNCTION_UNDEFINED,
            "Function value is undefined or infinite at the starting "
            "points.")

    if abs(f0) < eps:
        return MethodResult.converged(x0, f0, 0)
    if abs(f1) < eps:
        return MethodResult.converged(x1, f1, 0)

    it = 0
    while it < maxits:
        it += 1

        denom = f1 - f0
        if abs(denom) < SECANT_DENOM_TINY:
            if abs(f1) < eps:
                return MethodResult.converged(x1, f1, it)
            return MethodResult.failed(
                SolverFlag.STALLED_DENOMINATOR,
                "Denominator f(x1) - f(x0) is close to zero, the method "
                "cannot continue.", it, x1, f1)

        x2 = x1 - f1 * (x1 - x0) / denom
        f2 = safe_eval(func, x2)

        if verbose:
            print(f"... Iteration {it}: x = {x2:.10G}, f(x) = {f2:.5G}")

        if not all_finite(x2, f2):
            return MethodResult.failed(
                SolverFlag.NON_FINITE_ITERATE,
                f"Non-numeric value for x or f(x) at iteration {it}.",
                it, x1, f1)

        if abs(x2 - x1) < eps or abs(f2) < eps:
            if verbose:
                print(f"... Converged.")
            return MethodResult.converged(x2, f2, it)

        x0, f0 = x1, f1
        x1, f1 = x2, f2

    return MethodResult.failed(
        SolverFlag.MAX_ITERATIONS_EXCEEDED,
        f"Maximum number of iterations ({maxits}) exceeded.", it, x1, f1)
