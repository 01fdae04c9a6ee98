import warnings
from collections.abc import Callable

from nlroots.numeric.math_ext import all_finite, safe_eval
from nlroots.solve.exception import SolverFlag
from nlroots.solve.results import MethodResult

# Written for nlroots, 2024.

# ----------------------------------------------------------------------

SIMPLE_ITER_MAXITS = 50000
DERIV_TINY = 1e-12
MAX_LAMBDA = 1e6

_Func = Callable[[float], float]


class SimpleIteration:
    r"""
    Solve :math:`f(x) = 0` by fixed-point ('simple') iteration
    :math:`x' = \phi(x)` on a contraction map supplied by the caller.
    The usual way to build :math:`\phi` is with `relaxation_map`.

    Parameters
    ----------
    phi : Callable[[float], float]
        Fixed-point map, with :math:`\phi(x) = x` at the root of `f`.
    dphi : Callable[[float], float]
        Derivative :math:`\phi'(x)`.  This is only used to check that
        the map is well defined at the starting point and for progress
        output.
    """

    def __init__(self, phi: _Func, dphi: _Func):
        self.phi, self.dphi = phi, dphi

    def __call__(self, func: _Func, x_a: float, x_b: float, eps: float,
                 **kwargs) -> MethodResult:
        return self.solve(func, x_a, x_b, eps, **kwargs)

    def solve(self, func: _Func, x_a: float, x_b: float, eps: float, *,
              maxits: int = SIMPLE_ITER_MAXITS,
              verbose: bool = False) -> MethodResult:
        r"""
        Iterate from the middle of the interval :math:`[x_a, x_b]`.

        Iterates leaving the interval are reported with a
        `RuntimeWarning` but are not treated as a failure, since the
        iteration may return to the interval.  Stopping requires
        :math:`|x' - x| < \epsilon` and additionally either
        :math:`|f(x')| < 10\epsilon` or :math:`|x' - x| < 0.1\epsilon`.
        If only the step is small the iteration continues.

        Parameters
        ----------
        func : Callable[[float], float]
            Original function :math:`f(x)`, used for the residual check.
        x_a, x_b : float
            Interval :math:`x_a < x_b` (checked by the caller).
        eps : float
            Convergence tolerance.
        maxits : int, default = 50000
            Maximum number of iterations.  Linear convergence can be
            slow so this is generous.
        verbose : bool
            If True, print progress statements.

        Returns
        -------
        result : MethodResult
            Failures are flagged ``DERIVATIVE_UNDEFINED_AT_START``,
            ``NON_FINITE_ITERATE``, ``FUNCTION_UNDEFINED`` (residual
            undefined at a converged iterate) or
            ``MAX_ITERATIONS_EXCEEDED``.
        """
        x0 = x_a + (x_b - x_a) / 2
        dphi_0 = safe_eval(self.dphi, x0)

        if verbose:
            print(f"Simple Iteration: x0 = {x0:.6f}, φ'(x0) = {dphi_0:.4f}")

        if not all_finite(dphi_0):
            return MethodResult.failed(
                SolverFlag.DERIVATIVE_UNDEFINED_AT_START,
                f"Derivative φ'(x) is undefined or infinite at the starting "
                f"point x0 = {x0}.")

        x = x_next = x0
        error = float('inf')
        warned_exit, warned_plateau = False, False
        its = 0
        while its < maxits:
            its += 1
            x_next = safe_eval(self.phi, x)

            if verbose:
                print(f"... Iteration {its}: x = {x:.10f}, x' = {x_next:.10f}, "
                      f"|x' - x| = {abs(x_next - x):.3e}")

            if not all_finite(x_next):
                return MethodResult.failed(
                    SolverFlag.NON_FINITE_ITERATE,
                    f"Non-numeric value of φ(x) at iteration {its}.",
                    its, x, safe_eval(func, x))

            if not (x_a <= x_next <= x_b) and not warned_exit:
                warnings.warn(f"Simple iteration left the interval "
                              f"[{x_a}, {x_b}] at iteration {its}: "
                              f"x = {x_next}.", RuntimeWarning)
                warned_exit = True

            error = abs(x_next - x)
            if error < eps:
                f_next = safe_eval(func, x_next)
                if not all_finite(f_next):
                    return MethodResult.failed(
                        SolverFlag.FUNCTION_UNDEFINED,
                        f"Function value is undefined or infinite at "
                        f"x = {x_next}.", its, x_next, f_next)

                if abs(f_next) < 10 * eps or error < 0.1 * eps:
                    if verbose:
                        print(f"... Converged.")
                    return MethodResult.converged(x_next, f_next, its)

                if not warned_plateau:
                    warnings.warn(f"|x' - x| < {eps:.2e} but |f(x')| = "
                                  f"{abs(f_next):.2e} is still large at "
                                  f"iteration {its}.", RuntimeWarning)
                    warned_plateau = True

            x = x_next

        return MethodResult.failed(
            SolverFlag.MAX_ITERATIONS_EXCEEDED,
            f"Maximum number of iterations ({maxits}) exceeded.  Last error "
            f"estimate: {error:.3e}", its, x_next, safe_eval(func, x_next))


# ----------------------------------------------------------------------

def relaxation_map(func: _Func, dfunc: _Func, x_a: float, x_b: float, *,
                   max_lambda: float = MAX_LAMBDA,
                   deriv_tiny: float = DERIV_TINY
                   ) -> tuple[_Func, _Func, float]:
    r"""
    Build the relaxed fixed-point map for `SimpleIteration`:

        - :math:`\phi(x) = x + \lambda f(x)`
        - :math:`\phi'(x) = 1 + \lambda f'(x)`

    Where :math:`\lambda = -1 / f'(x_m)` and :math:`x_m` is the middle
    of :math:`[x_a, x_b]`.  This gives :math:`\phi'(x_m) = 0`.

    Returns
    -------
    phi, dphi, lam : Callable, Callable, float

    Raises
    ------
    ValueError
        If :math:`f'(x_m)` is undefined, :math:`|f'(x_m)| <` `deriv_tiny`
        or :math:`|\lambda| >` `max_lambda`.
    """
    x_m = (x_a + x_b) / 2
    df_m = safe_eval(dfunc, x_m)
    if not all_finite(df_m):
        raise ValueError(f"Derivative is undefined or infinite at the "
                         f"middle of the interval (x = {x_m}).")
    if abs(df_m) < deriv_tiny:
        raise ValueError(f"Derivative is close to zero at the middle of "
                         f"the interval (x = {x_m}), cannot choose λ.")

    lam = -1.0 / df_m
    if abs(lam) > max_lambda:
        raise ValueError(f"Relaxation parameter λ = {lam} is too large; "
                         f"the derivative may be close to zero.")

    def phi(x):
        return x + lam * func(x)

    def dphi(x):
        return 1 + lam * dfunc(x)

    return phi, dphi, lam
