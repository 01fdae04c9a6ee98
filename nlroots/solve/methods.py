"""
Selection of a scalar equation solver by method, with the argument
checks that must pass before any solver is run.
"""
from collections.abc import Callable
from enum import IntEnum

from nlroots.solve.bisect_root import bisect_root
from nlroots.solve.exception import SolverFlag
from nlroots.solve.newton_system import NewtonSystem
from nlroots.solve.results import MethodResult, SystemResult
from nlroots.solve.secant_root import secant_root
from nlroots.solve.simple_iteration import SimpleIteration, relaxation_map

# Written for nlroots, 2024.

# ======================================================================


class Method(IntEnum):
    """
    Scalar equation solution methods.  Values are the method indices
    used in parameter files.
    """
    BISECTION = 0
    SECANT = 1
    SIMPLE_ITERATION = 2

    @property
    def needs_bracket(self) -> bool:
        """True if the method requires ``a < b``."""
        return self != Method.SECANT


def _bisection(func, dfunc, a, b, eps, **kwargs) -> MethodResult:
    return bisect_root(func, a, b, eps, **kwargs)


def _secant(func, dfunc, a, b, eps, **kwargs) -> MethodResult:
    return secant_root(func, a, b, eps, **kwargs)


def _simple_iteration(func, dfunc, a, b, eps, **kwargs) -> MethodResult:
    try:
        phi, dphi, _ = relaxation_map(func, dfunc, a, b)
    except ValueError as e:
        return MethodResult.failed(SolverFlag.INVALID_INPUT, str(e))
    return SimpleIteration(phi, dphi).solve(func, a, b, eps, **kwargs)


_SOLVERS = {
    Method.BISECTION: _bisection,
    Method.SECANT: _secant,
    Method.SIMPLE_ITERATION: _simple_iteration,
}


# ----------------------------------------------------------------------

def solve_equation(method: Method | int,
                   func: Callable[[float], float],
                   dfunc: Callable[[float], float],
                   a: float, b: float, eps: float, *,
                   verbose: bool = False) -> MethodResult:
    """
    Solve :math:`f(x) = 0` using the given method.

    Parameters
    ----------
    method : Method or int
        Solution method (or its index).
    func, dfunc : Callable[[float], float]
        Function :math:`f(x)` and its derivative.  The derivative is
        only used by ``Method.SIMPLE_ITERATION``.
    a, b : float
        Interval :math:`[a, b]` for bracketing methods, or the two
        starting points for ``Method.SECANT``.
    eps : float
        Tolerance, must be > 0.
    verbose : bool
        Passed to the solver.

    Returns
    -------
    result : MethodResult
        Invalid arguments give a failure with flag ``INVALID_INPUT``
        and no solver is run.
    """
    try:
        method = Method(method)
    except ValueError:
        return MethodResult.failed(SolverFlag.INVALID_INPUT,
                                   f"Unknown method: {method}.")

    if not eps > 0:
        return MethodResult.failed(SolverFlag.INVALID_INPUT,
                                   "Tolerance ε must be a positive number.")

    if method.needs_bracket and not a < b:
        return MethodResult.failed(
            SolverFlag.INVALID_INPUT,
            "Left end 'a' must be strictly less than right end 'b'.")

    return _SOLVERS[method](func, dfunc, a, b, eps, verbose=verbose)


def solve_system(system: NewtonSystem, x0: float, y0: float, eps: float, *,
                 verbose: bool = False) -> SystemResult:
    """
    Solve a 2x2 system from starting point `(x0, y0)`.  An invalid
    tolerance gives a failure with flag ``INVALID_INPUT``.
    """
    if not eps > 0:
        return SystemResult.failed(SolverFlag.INVALID_INPUT,
                                   "Tolerance ε must be a positive number.")
    return system.solve(x0, y0, eps, verbose=verbose)
