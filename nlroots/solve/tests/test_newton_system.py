import math
from unittest import TestCase

from .scalar_tst_functions import (circ, parab, CIRC_PARAB_JACOBIAN,
                                   CIRC_PARAB_SOLNS)


# ======================================================================

def _circ_parab_system():
    from nlroots.solve import NewtonSystem
    return NewtonSystem(circ, parab, *CIRC_PARAB_JACOBIAN)


class TestNewtonSystem(TestCase):
    def test_newton_system(self):
        eps = 1e-8
        system = _circ_parab_system()
        res = system.solve(1.3, 0.3, eps)
        self.assertTrue(res.success)

        # Converges to one of the intersections.
        x, y = res.solution
        self.assertTrue(any(math.isclose(x, xs, abs_tol=1e-6) and
                            math.isclose(y, ys, abs_tol=1e-6)
                            for xs, ys in CIRC_PARAB_SOLNS))

        # Residuals are fresh values at the solution and below eps.
        self.assertEqual(res.residuals, (circ(x, y), parab(x, y)))
        self.assertLess(max(abs(r) for r in res.residuals), eps)

        # Re-solving from the solution takes at most one step.
        res2 = system.solve(x, y, eps)
        self.assertTrue(res2.success)
        self.assertLessEqual(res2.iterations, 1)

    def test_singular(self):
        from nlroots.solve import NewtonSystem, SolverFlag

        # At the origin only df2/dy is non-zero.
        res = _circ_parab_system().solve(0.0, 0.0, 1e-8)
        self.assertEqual(res.flag, SolverFlag.SINGULAR_JACOBIAN)
        self.assertEqual(res.iterations, 1)
        self.assertEqual(res.solution, (0.0, 0.0))
        self.assertEqual(res.residuals, (-4.0, 2.0))
        self.assertIn("No solution", res.message)

        # Singular exactly at a solution.
        system = NewtonSystem(lambda x, y: x ** 2, lambda x, y: y,
                              lambda x, y: 2 * x, lambda x, y: 0.0,
                              lambda x, y: 0.0, lambda x, y: 1.0)
        res = system.solve(0.0, 0.0, 1e-8)
        self.assertEqual(res.flag, SolverFlag.SINGULAR_JACOBIAN)
        self.assertIn("approximate solution", res.message)

    def test_undefined(self):
        from nlroots.solve import NewtonSystem, SolverFlag

        system = NewtonSystem(lambda x, y: math.log(x), parab,
                              *CIRC_PARAB_JACOBIAN)
        res = system.solve(-1.0, 0.0, 1e-8)
        self.assertEqual(res.flag, SolverFlag.FUNCTION_UNDEFINED)
        self.assertEqual(res.solution, (-1.0, 0.0))
        self.assertTrue(math.isnan(res.residuals[0]))

        system = NewtonSystem(circ, parab, lambda x, y: math.nan,
                              *CIRC_PARAB_JACOBIAN[1:])
        res = system.solve(1.3, 0.3, 1e-8)
        self.assertEqual(res.flag, SolverFlag.JACOBIAN_UNDEFINED)
        self.assertEqual(res.iterations, 1)

    def test_non_finite_step(self):
        from nlroots.solve import NewtonSystem, SolverFlag

        # det = 1e-10 is not singular but dx = -1e308 / 1e-10 overflows.
        system = NewtonSystem(lambda x, y: 1e308 * x, lambda x, y: y,
                              lambda x, y: 1e-10, lambda x, y: 0.0,
                              lambda x, y: 0.0, lambda x, y: 1.0)
        res = system.solve(1.0, 0.0, 1e-8)
        self.assertFalse(res.success)
        self.assertEqual(res.flag, SolverFlag.NON_FINITE_ITERATE)
        self.assertEqual(res.iterations, 1)

        # Reports the point before the step, with its residuals.
        self.assertEqual(res.solution, (1.0, 0.0))
        self.assertEqual(res.residuals, (1e308, 0.0))

    def test_max_iterations(self):
        from nlroots.solve import SolverFlag, SolverError

        system = _circ_parab_system()
        res = system.solve(1.3, 0.3, 1e-12, maxits=1)
        self.assertFalse(res.success)
        self.assertEqual(res.flag, SolverFlag.MAX_ITERATIONS_EXCEEDED)
        self.assertEqual(res.iterations, 1)

        # The last point and its residuals are still available.
        x, y = res.solution
        self.assertNotEqual((x, y), (1.3, 0.3))
        self.assertEqual(res.residuals, (circ(x, y), parab(x, y)))

        with self.assertRaises(SolverError):
            res.unwrap()
