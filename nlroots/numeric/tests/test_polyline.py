from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose


# ======================================================================


class TestSegmentsToPolyline(TestCase):
    def test_segments_to_polyline(self):
        from nlroots.numeric import segments_to_polyline

        segs = [((0.0, 0.0), (1.0, 1.0)), ((2.0, 2.0), (3.0, 4.0))]
        xs, ys = segments_to_polyline(segs)
        self.assertEqual(len(xs), 6)
        assert_allclose(xs, [0.0, 1.0, np.nan, 2.0, 3.0, np.nan])
        assert_allclose(ys, [0.0, 1.0, np.nan, 2.0, 4.0, np.nan])

        xs, ys = segments_to_polyline([])
        self.assertEqual(len(xs), 0)
        self.assertEqual(len(ys), 0)

    def test_from_contour(self):
        from nlroots.numeric import contour_segments, segments_to_polyline

        segs = contour_segments(lambda x, y: x ** 2 + y ** 2 - 1,
                                -2, 2, -2, 2, resolution=16)
        xs, ys = segments_to_polyline(segs)
        self.assertEqual(len(xs), 3 * len(segs))
        self.assertTrue(np.all(np.isnan(ys[2::3])))


class TestSampleCurve(TestCase):
    def test_sample_curve(self):
        from nlroots.numeric import sample_curve

        xs, ys = sample_curve(lambda x: x ** 2, -1.0, 1.0, resolution=10)
        self.assertEqual(len(xs), 11)
        assert_allclose(ys, xs ** 2)

    def test_breaks(self):
        from nlroots.numeric import sample_curve

        # x = 0 is sampled, where 1/x is undefined.
        xs, ys = sample_curve(lambda x: 1 / x, -1.0, 1.0, resolution=200)
        self.assertEqual(np.sum(np.isnan(ys)), 1)
        ok = np.isfinite(ys)
        assert_allclose(ys[ok], 1 / xs[ok])

        # Large jump between samples.
        xs, ys = sample_curve(lambda x: 1000.0 if x > 0.005 else -1000.0,
                              -1.0, 1.0, resolution=200)
        self.assertEqual(np.sum(np.isnan(ys)), 1)
        i_break = int(np.nonzero(np.isnan(ys))[0][0])
        self.assertLess(ys[i_break - 1], 0.0)
        self.assertGreater(ys[i_break + 1], 0.0)

    def test_invalid_range(self):
        from nlroots.numeric import sample_curve

        with self.assertWarns(RuntimeWarning):
            xs, ys = sample_curve(lambda x: x, 2.0, 2.0, resolution=4)
        self.assertEqual(xs[0], 2.0)
        self.assertEqual(xs[-1], 3.0)
