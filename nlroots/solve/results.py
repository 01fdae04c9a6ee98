"""
Outcome records shared by all solvers.  Results are returned (not
raised) so that a caller can still display the last approximation
after a failure.
"""
from __future__ import annotations

from dataclasses import dataclass

from nlroots.solve.exception import SolverError, SolverFlag

# Written for nlroots, 2024.

# ======================================================================

_SUCCESS_MSG = "Solution found successfully."


@dataclass(frozen=True, kw_only=True)
class MethodResult:
    # noinspection PyUnresolvedReferences
    """
    Result of solving a scalar equation :math:`f(x) = 0`.

    Parameters
    ----------
    root : float or None
        On success, the root found.  On failure, the last approximation
        reached (if any).
    f_root : float or None
        Function value at `root`.  On success this is always evaluated
        at the returned `root`.
    iterations : int or None
        Number of iterations performed, or None if the failure occurred
        before any iterating was attempted.
    flag : SolverFlag, default = SolverFlag.CONVERGED
        Outcome of the solution.
    message : str
        Human readable description of the outcome.
    """
    root: float | None
    f_root: float | None
    iterations: int | None
    flag: SolverFlag = SolverFlag.CONVERGED
    message: str = _SUCCESS_MSG

    @classmethod
    def converged(cls, root: float, f_root: float,
                  iterations: int) -> MethodResult:
        """Successful result with ``f_root = f(root)``."""
        return cls(root=root, f_root=f_root, iterations=iterations)

    @classmethod
    def failed(cls, flag: SolverFlag, message: str, iterations: int = None,
               root: float = None, f_root: float = None) -> MethodResult:
        """Failed result, optionally carrying the last approximation."""
        if flag == SolverFlag.CONVERGED:
            raise ValueError("Failure result requires a failure flag.")
        return cls(root=root, f_root=f_root, iterations=iterations,
                   flag=flag, message=message)

    @property
    def success(self) -> bool:
        return self.flag == SolverFlag.CONVERGED

    def unwrap(self) -> float:
        """
        Returns `root` if the solution was successful, otherwise raises
        `SolverError` holding the flag and the last approximation.
        """
        if self.success:
            return self.root
        raise SolverError(self.message, flag=self.flag,
                          iterations=self.iterations, root=self.root,
                          f_root=self.f_root)

    def __str__(self):
        if self.success:
            return (f"Root: {self.root:.10f}\n"
                    f"f(root): {self.f_root:.2e}\n"
                    f"Iterations: {self.iterations}")

        s = f"Error: {self.message}" + _iter_info(self.iterations)
        if self.root is not None:
            s += f"\nLast approximation: {self.root:.10f}"
            if self.f_root is not None:
                s += f"\nf(approximation): {self.f_root:.2e}"
        return s


# ----------------------------------------------------------------------

@dataclass(frozen=True, kw_only=True)
class SystemResult:
    # noinspection PyUnresolvedReferences
    """
    Result of solving a 2x2 system :math:`f_1(x, y) = f_2(x, y) = 0`.

    Parameters
    ----------
    solution : (float, float) or None
        On success, the solution `(x, y)`.  On failure, the last
        approximation reached (if any).
    residuals : (float, float) or None
        Values `(f1, f2)` evaluated at `solution`.
    iterations : int or None
        Number of iterations performed (None if not started).
    flag : SolverFlag, default = SolverFlag.CONVERGED
        Outcome of the solution.
    message : str
        Human readable description of the outcome.
    """
    solution: tuple[float, float] | None
    residuals: tuple[float, float] | None
    iterations: int | None
    flag: SolverFlag = SolverFlag.CONVERGED
    message: str = _SUCCESS_MSG

    @classmethod
    def converged(cls, solution: tuple[float, float],
                  residuals: tuple[float, float],
                  iterations: int) -> SystemResult:
        return cls(solution=tuple(solution), residuals=tuple(residuals),
                   iterations=iterations)

    @classmethod
    def failed(cls, flag: SolverFlag, message: str, iterations: int = None,
               solution: tuple[float, float] = None,
               residuals: tuple[float, float] = None) -> SystemResult:
        if flag == SolverFlag.CONVERGED:
            raise ValueError("Failure result requires a failure flag.")
        return cls(solution=None if solution is None else tuple(solution),
                   residuals=None if residuals is None else tuple(residuals),
                   iterations=iterations, flag=flag, message=message)

    @property
    def success(self) -> bool:
        return self.flag == SolverFlag.CONVERGED

    def unwrap(self) -> tuple[float, float]:
        """
        Returns `solution` if the solution was successful, otherwise
        raises `SolverError`.
        """
        if self.success:
            return self.solution
        raise SolverError(self.message, flag=self.flag,
                          iterations=self.iterations, solution=self.solution,
                          residuals=self.residuals)

    def __str__(self):
        if self.success:
            x, y = self.solution
            r1, r2 = self.residuals
            return (f"Solution: x = {x:.8f}, y = {y:.8f}\n"
                    f"Residuals (f1, f2): [{r1:.2e}, {r2:.2e}]\n"
                    f"Iterations: {self.iterations}")

        s = f"Error: {self.message}" + _iter_info(self.iterations)
        if self.solution is not None:
            x, y = self.solution
            s += f"\nLast approximation: x = {x:.8f}, y = {y:.8f}"
        if self.residuals is not None:
            r1, r2 = self.residuals
            s += f"\nResiduals (f1, f2): [{r1:.2e}, {r2:.2e}]"
        return s


# ----------------------------------------------------------------------

def _iter_info(iterations: int | None) -> str:
    return f" (Iterations: {iterations})" if iterations is not None else ""
