from unittest import TestCase

from .scalar_tst_functions import (cubic, dcubic_dx, linear, dlinear_dx,
                                   circ, parab, CIRC_PARAB_JACOBIAN)


# ======================================================================

def _not_called(*args):
    raise AssertionError("Solver should not have been run.")


class TestSolveEquation(TestCase):
    def test_dispatch(self):
        from nlroots.solve import (Method, solve_equation, bisect_root,
                                   secant_root)

        res = solve_equation(Method.BISECTION, cubic, dcubic_dx, 1.0, 3.0,
                             1e-8)
        self.assertEqual(res, bisect_root(cubic, 1.0, 3.0, 1e-8))

        res = solve_equation(Method.SECANT, cubic, dcubic_dx, 1.0, 3.0, 1e-8)
        self.assertEqual(res, secant_root(cubic, 1.0, 3.0, 1e-8))

        # Method indices are accepted.
        res = solve_equation(2, linear, dlinear_dx, 0.0, 2.0, 1e-6)
        self.assertTrue(res.success)
        self.assertEqual(res.root, 1.5)

    def test_invalid_input(self):
        from nlroots.solve import Method, solve_equation, SolverFlag

        for method in Method:
            for eps in (0.0, -1e-6):
                res = solve_equation(method, _not_called, _not_called,
                                     1.0, 3.0, eps)
                self.assertEqual(res.flag, SolverFlag.INVALID_INPUT)
                self.assertIsNone(res.iterations)
                self.assertIsNone(res.root)

        # a >= b is only rejected for bracketing methods.
        for method in (Method.BISECTION, Method.SIMPLE_ITERATION):
            for a, b in ((3.0, 1.0), (2.0, 2.0)):
                res = solve_equation(method, _not_called, _not_called,
                                     a, b, 1e-6)
                self.assertEqual(res.flag, SolverFlag.INVALID_INPUT)

        res = solve_equation(Method.SECANT, cubic, dcubic_dx, 3.0, 1.0, 1e-8)
        self.assertTrue(res.success)
        self.assertAlmostEqual(res.root, 2.0, places=7)

        # Unknown method.
        res = solve_equation(7, cubic, dcubic_dx, 1.0, 3.0, 1e-8)
        self.assertEqual(res.flag, SolverFlag.INVALID_INPUT)

        # Relaxation parameter cannot be chosen, f'(0) = 0.
        res = solve_equation(Method.SIMPLE_ITERATION, lambda x: x ** 3,
                             lambda x: 3 * x ** 2, -1.0, 1.0, 1e-6)
        self.assertEqual(res.flag, SolverFlag.INVALID_INPUT)
        self.assertIn("close to zero", res.message)


class TestSolveSystem(TestCase):
    def test_solve_system(self):
        from nlroots.solve import NewtonSystem, solve_system, SolverFlag

        system = NewtonSystem(circ, parab, *CIRC_PARAB_JACOBIAN)
        res = solve_system(system, 1.3, 0.3, 1e-8)
        self.assertTrue(res.success)

        res = solve_system(system, 1.3, 0.3, 0.0)
        self.assertEqual(res.flag, SolverFlag.INVALID_INPUT)
        self.assertIsNone(res.solution)
