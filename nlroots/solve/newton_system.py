from collections.abc import Callable

from nlroots.numeric.math_ext import all_finite, safe_eval
from nlroots.solve.exception import SolverFlag
from nlroots.solve.results import SystemResult

# Written for nlroots, 2024.

# ----------------------------------------------------------------------

NEWTON_MAXITS = 500
JACOBIAN_TINY = 1e-12

_Func2 = Callable[[float, float], float]


class NewtonSystem:
    r"""
    Solve the 2x2 nonlinear system :math:`f_1(x, y) = 0`,
    :math:`f_2(x, y) = 0` using the Newton-Raphson method with an
    analytic Jacobian:

    .. math::
        J = \begin{bmatrix}
            \partial f_1/\partial x & \partial f_1/\partial y \\
            \partial f_2/\partial x & \partial f_2/\partial y
            \end{bmatrix}

    The linear correction is found by Cramer's rule, which is exact for
    a 2x2 system and avoids any matrix solution step.

    Parameters
    ----------
    f1, f2 : Callable[[float, float], float]
        Equations of the system.
    f1_x, f1_y, f2_x, f2_y : Callable[[float, float], float]
        Partial derivatives of `f1` and `f2` with respect to `x` and `y`.
    """

    def __init__(self, f1: _Func2, f2: _Func2, f1_x: _Func2, f1_y: _Func2,
                 f2_x: _Func2, f2_y: _Func2):
        self.f1, self.f2 = f1, f2
        self.f1_x, self.f1_y = f1_x, f1_y
        self.f2_x, self.f2_y = f2_x, f2_y

    def residuals(self, x: float, y: float) -> tuple[float, float]:
        """Returns :math:`(f_1(x, y), f_2(x, y))`."""
        return safe_eval(self.f1, x, y), safe_eval(self.f2, x, y)

    def jacobian(self, x: float, y: float) -> tuple[float, float,
                                                    float, float]:
        """Returns the Jacobian elements ``(f1_x, f1_y, f2_x, f2_y)``."""
        return (safe_eval(self.f1_x, x, y), safe_eval(self.f1_y, x, y),
                safe_eval(self.f2_x, x, y), safe_eval(self.f2_y, x, y))

    def solve(self, x0: float, y0: float, eps: float, *,
              maxits: int = NEWTON_MAXITS,
              verbose: bool = False) -> SystemResult:
        r"""
        Iterate from the starting point `(x0, y0)`.

        Converged when both the step :math:`\max(|\Delta x|, |\Delta y|)`
        and the residual :math:`\max(|f_1|, |f_2|)` at the new point are
        below :math:`\epsilon`.

        Parameters
        ----------
        x0, y0 : float
            Starting point.
        eps : float
            Convergence tolerance.
        maxits : int, default = 500
            Maximum number of iterations.
        verbose : bool
            If True, print status updates during run.

        Returns
        -------
        result : SystemResult
            All failures carry the last point reached and its residuals.
            Failure flags are ``FUNCTION_UNDEFINED``,
            ``JACOBIAN_UNDEFINED``, ``SINGULAR_JACOBIAN``,
            ``NON_FINITE_ITERATE`` or ``MAX_ITERATIONS_EXCEEDED``.
        """
        def verbose_print(info):
            if verbose:
                print(info)

        verbose_print(f"Newton Method - Solving 2 Equations:")

        x, y = x0, y0
        it = 0
        while it < maxits:
            it += 1

            r1, r2 = self.residuals(x, y)
            if not all_finite(r1, r2):
                return SystemResult.failed(
                    SolverFlag.FUNCTION_UNDEFINED,
                    f"Function value is undefined or infinite at "
                    f"({x}, {y}).", it, (x, y), (r1, r2))

            a11, a12, a21, a22 = self.jacobian(x, y)
            if not all_finite(a11, a12, a21, a22):
                return SystemResult.failed(
                    SolverFlag.JACOBIAN_UNDEFINED,
                    f"Derivative value is undefined or infinite at "
                    f"({x}, {y}).", it, (x, y), (r1, r2))

            det = a11 * a22 - a12 * a21
            if abs(det) < JACOBIAN_TINY:
                msg = "Jacobian is close to zero (singular matrix). "
                if max(abs(r1), abs(r2)) < 10 * eps:
                    msg += "An approximate solution may have been found."
                else:
                    msg += "No solution could be found."
                return SystemResult.failed(SolverFlag.SINGULAR_JACOBIAN, msg,
                                           it, (x, y), (r1, r2))

            # Cramer's rule for J.[dx, dy] = -[f1, f2].
            dx = -(r1 * a22 - r2 * a12) / det
            dy = -(a11 * r2 - a21 * r1) / det
            x_prev, y_prev = x, y
            x, y = x + dx, y + dy

            if not all_finite(x, y):
                return SystemResult.failed(
                    SolverFlag.NON_FINITE_ITERATE,
                    f"Non-numeric value for x or y at iteration {it}.",
                    it, (x_prev, y_prev), (r1, r2))

            step = max(abs(dx), abs(dy))
            r1, r2 = self.residuals(x, y)
            r_norm = max(abs(r1), abs(r2))

            verbose_print(f"... Iteration {it}: max|F(x)| = {r_norm:.5G}, "
                          f"max|x' - x| = {step:.5G}, "
                          f"x* = {x:.6G}, {y:.6G}")

            if step < eps and r_norm < eps:
                verbose_print(f"... Converged.")
                return SystemResult.converged((x, y), (r1, r2), it)

        verbose_print(f"... Reached maximum iteration limit: {maxits}")
        return SystemResult.failed(
            SolverFlag.MAX_ITERATIONS_EXCEEDED,
            f"Maximum number of iterations ({maxits}) exceeded.", it,
            (x, y), self.residuals(x, y))
