"""
Plot Polylines (:mod:`nlroots.numeric.polyline`)
================================================

.. currentmodule:: nlroots.numeric.polyline

Prepare point sequences for plotting.  Discontinuities are marked by a
NaN point (a *break*), which plotting libraries such as Matplotlib
draw as a gap rather than joining across.
"""
from __future__ import annotations

import math
import warnings
from collections.abc import Callable, Iterable

import numpy as np
import numpy.typing as npt

from nlroots.numeric.contour import Segment
from nlroots.numeric.math_ext import all_finite, safe_eval

# Written for nlroots, 2024.

# ======================================================================

CURVE_RESOLUTION = 400
JUMP_FACTOR = 50.0


def segments_to_polyline(segments: Iterable[Segment]
                         ) -> tuple[npt.NDArray, npt.NDArray]:
    """
    Convert line segments (e.g. from `contour_segments`) to a single
    pair of coordinate arrays with a NaN break after each segment.

    Examples
    --------
    >>> xs, ys = segments_to_polyline([((0, 0), (1, 1)), ((2, 2), (3, 3))])
    >>> xs
    array([ 0.,  1., nan,  2.,  3., nan])
    """
    pts = []
    for p1, p2 in segments:
        pts.extend((p1, p2, (math.nan, math.nan)))
    if not pts:
        return np.empty(0), np.empty(0)
    xy = np.array(pts, dtype=float)
    return xy[:, 0], xy[:, 1]


def sample_curve(func: Callable[[float], float], xmin: float, xmax: float,
                 resolution: int = CURVE_RESOLUTION
                 ) -> tuple[npt.NDArray, npt.NDArray]:
    """
    Sample :math:`y = f(x)` at ``resolution + 1`` evenly spaced points
    for plotting.

    A break is inserted where `f` is undefined / non-finite, and where
    the jump between successive values exceeds
    ``max(1, xmax - xmin) * JUMP_FACTOR`` (e.g. across a pole).  If
    ``xmax <= xmin`` a `RuntimeWarning` is issued and the range
    ``[xmin, xmin + 1]`` is used.

    Returns
    -------
    xs, ys : ndarray, ndarray
        Coordinates, with breaks as NaN values of `ys`.
    """
    if not xmax > xmin:
        warnings.warn(f"Invalid range xmax = {xmax} <= xmin = {xmin}, using "
                      f"[{xmin}, {xmin + 1}].", RuntimeWarning)
        xmax = xmin + 1.0

    threshold = max(1.0, abs(xmax - xmin)) * JUMP_FACTOR
    xs_out, ys_out = [], []
    for x in np.linspace(xmin, xmax, resolution + 1):
        x = float(x)
        with np.errstate(all='ignore'):
            y = safe_eval(func, x)

        last_ok = bool(ys_out) and all_finite(ys_out[-1])
        if all_finite(y):
            if last_ok and abs(y - ys_out[-1]) > threshold:
                xs_out.append(x)
                ys_out.append(math.nan)
            xs_out.append(x)
            ys_out.append(y)
        elif last_ok:
            xs_out.append(x)
            ys_out.append(math.nan)

    return np.array(xs_out, dtype=float), np.array(ys_out, dtype=float)
