import math
from unittest import TestCase

from .scalar_tst_functions import f, F_EXACT, undefined_below_zero


# ======================================================================


class TestBisectRoot(TestCase):
    def test_bisect_root(self):
        from nlroots.solve import bisect_root, SolverFlag

        # Check normal operation.
        res = bisect_root(f, 1.0, 2.0, 1e-10)
        self.assertTrue(res.success)
        self.assertEqual(res.flag, SolverFlag.CONVERGED)
        self.assertAlmostEqual(res.root, F_EXACT, places=9)
        self.assertTrue(1.0 <= res.root <= 2.0)

        # Value is evaluated at the returned root.
        self.assertEqual(res.f_root, f(res.root))

        # Bracket halves each step: ceil(log2(1 / 1e-10)) = 34.
        self.assertEqual(res.iterations, math.ceil(math.log2(1 / 1e-10)))

    def test_end_points(self):
        from nlroots.solve import bisect_root, SolverFlag

        # Root exactly at an end, accepted with no iterations.
        res = bisect_root(lambda x: x - 1, 1.0, 2.0, 1e-6)
        self.assertTrue(res.success)
        self.assertEqual(res.root, 1.0)
        self.assertEqual(res.iterations, 0)

        res = bisect_root(lambda x: x - 2, 1.0, 2.0, 1e-6)
        self.assertEqual(res.root, 2.0)

        # No sign change.
        res = bisect_root(lambda x: x ** 2 + 1, -1.0, 1.0, 1e-6)
        self.assertFalse(res.success)
        self.assertEqual(res.flag, SolverFlag.NO_SIGN_CHANGE)
        self.assertIsNone(res.iterations)

    def test_undefined(self):
        from nlroots.solve import bisect_root, SolverFlag

        # Undefined at an end.
        res = bisect_root(undefined_below_zero, -1.0, 2.0, 1e-6)
        self.assertEqual(res.flag, SolverFlag.FUNCTION_UNDEFINED)

        # Undefined at the first midpoint.
        res = bisect_root(lambda x: 1 / x, -1.0, 1.0, 1e-6)
        self.assertEqual(res.flag, SolverFlag.FUNCTION_UNDEFINED)
        self.assertEqual(res.iterations, 1)
        self.assertEqual(res.root, 0.0)

        # Bracket already narrower than eps, undefined at the midpoint.
        res = bisect_root(lambda x: 1 / x, -1e-9, 1e-9, 1e-6)
        self.assertFalse(res.success)
        self.assertEqual(res.flag, SolverFlag.FUNCTION_UNDEFINED)
        self.assertEqual(res.iterations, 0)
        self.assertEqual(res.root, 0.0)
        self.assertTrue(math.isnan(res.f_root))

        # Width reaches exactly eps, undefined at the final midpoint.
        res = bisect_root(lambda x: 1 / (x - 0.75), 0.0, 1.0, 0.5)
        self.assertEqual(res.flag, SolverFlag.FUNCTION_UNDEFINED)
        self.assertEqual(res.iterations, 1)
        self.assertEqual(res.root, 0.75)
        self.assertTrue(math.isnan(res.f_root))

    def test_resolve_from_root(self):
        from nlroots.solve import bisect_root

        res = bisect_root(f, 1.0, 2.0, 1e-10)
        r = res.root

        # A narrow bracket about the root gives the same root.
        res2 = bisect_root(f, r - 1e-9, r + 1e-9, 1e-10)
        self.assertTrue(res2.success)
        self.assertLess(abs(res2.root - r), 1e-9)
        self.assertAlmostEqual(res2.root, F_EXACT, places=9)

    def test_max_iterations(self):
        from nlroots.solve import bisect_root, SolverFlag, SolverError

        # Check failure to converge is flagged.
        res = bisect_root(f, 1.0, 2.0, 1e-15, maxits=10)
        self.assertFalse(res.success)
        self.assertEqual(res.flag, SolverFlag.MAX_ITERATIONS_EXCEEDED)
        self.assertEqual(res.iterations, 10)

        # Last approximation is retained.
        self.assertTrue(1.0 <= res.root <= 2.0)
        self.assertEqual(res.f_root, f(res.root))
        self.assertAlmostEqual(res.root, F_EXACT, places=2)

        with self.assertRaises(SolverError) as cm:
            res.unwrap()
        self.assertEqual(cm.exception.flag,
                         SolverFlag.MAX_ITERATIONS_EXCEEDED)
        self.assertEqual(cm.exception.root, res.root)
