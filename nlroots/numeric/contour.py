"""
Zero Contours (:mod:`nlroots.numeric.contour`)
==============================================

.. currentmodule:: nlroots.numeric.contour

Approximate the zero level set :math:`f(x, y) = 0` of a function
sampled on a regular grid using marching squares.

Each grid cell has corners numbered by bit value (bit set when the
corner value is > 0)::

    v01 (8) ---- TOP ---- v11 (4)
       |                    |
     LEFT                 RIGHT
       |                    |
    v00 (1) --- BOTTOM --- v10 (2)

The zero crossing on each edge is found by linear interpolation and the
crossings are joined according to a lookup table indexed by the 4-bit
cell case.  Cases 5 and 10 (saddles) are resolved by an additional
sample at the cell centre.
"""
from __future__ import annotations

from collections.abc import Callable

import numpy as np
import numpy.typing as npt

from nlroots.numeric.math_ext import all_finite, safe_eval

# Written for nlroots, 2024.

# ======================================================================

CONTOUR_RESOLUTION = 400
ZERO_TOL = 1e-15

Point = tuple[float, float]
Segment = tuple[Point, Point]

LEFT, BOTTOM, RIGHT, TOP = range(4)

# Edge pairs to join for each unambiguous case.  A case and its
# complement (15 - case) give the same segments.
_EDGE_TABLE: dict[int, tuple[tuple[int, int], ...]] = {
    0: (),
    1: ((LEFT, BOTTOM),),
    2: ((BOTTOM, RIGHT),),
    3: ((LEFT, RIGHT),),
    4: ((RIGHT, TOP),),
    6: ((BOTTOM, TOP),),
    7: ((LEFT, TOP),),
}
_EDGE_TABLE.update({15 - k: v for k, v in _EDGE_TABLE.items()})

# Saddle cases keyed by whether the centre sample has the same sign as
# v00.  If so, the v00 / v11 diagonal is connected through the centre
# and the segments cut off corners v01 and v10.  Otherwise they cut off
# corners v00 and v11.
_SADDLE_TABLE: dict[bool, tuple[tuple[int, int], ...]] = {
    True: ((LEFT, TOP), (BOTTOM, RIGHT)),
    False: ((LEFT, BOTTOM), (RIGHT, TOP)),
}
SADDLE_CASES = (5, 10)


# ----------------------------------------------------------------------

def cell_case(v00: float, v10: float, v11: float, v01: float) -> int:
    """Returns the 4-bit marching squares case index for a cell."""
    case = 0
    if v00 > 0:
        case |= 1
    if v10 > 0:
        case |= 2
    if v11 > 0:
        case |= 4
    if v01 > 0:
        case |= 8
    return case


def cell_segments(case: int, centre_matches: bool = None
                  ) -> tuple[tuple[int, int], ...]:
    """
    Returns the edge pairs (``LEFT``, ``BOTTOM``, ``RIGHT``, ``TOP``) to
    be joined for a marching squares `case`.

    Parameters
    ----------
    case : int
        Cell case index in range 0-15.
    centre_matches : bool, optional
        Only used for saddle cases 5 and 10 where it is required: True
        if the sign of the cell centre value agrees with ``v00``.

    Raises
    ------
    ValueError
        If `case` is out of range or `centre_matches` is missing for a
        saddle case.
    """
    if case in SADDLE_CASES:
        if centre_matches is None:
            raise ValueError(f"Saddle case {case} requires 'centre_matches'.")
        return _SADDLE_TABLE[bool(centre_matches)]
    try:
        return _EDGE_TABLE[case]
    except KeyError:
        raise ValueError(f"Invalid cell case: {case}.") from None


def edge_crossing(p1: Point, p2: Point, v1: float, v2: float) -> Point | None:
    """
    Linearly interpolate the zero crossing between points `p1` and `p2`
    with function values `v1` and `v2`.  An endpoint value within
    ``ZERO_TOL`` of zero returns that endpoint directly.  Returns None
    if there is no sign change or either value is not finite.
    """
    if not all_finite(v1, v2) or np.sign(v1) == np.sign(v2):
        return None
    if abs(v1) < ZERO_TOL:
        return p1
    if abs(v2) < ZERO_TOL:
        return p2

    t = abs(v1) / (abs(v1) + abs(v2))
    return (p1[0] + t * (p2[0] - p1[0]),
            p1[1] + t * (p2[1] - p1[1]))


# ----------------------------------------------------------------------

def sample_grid(func: Callable[[float, float], float], xmin: float,
                xmax: float, ymin: float, ymax: float,
                resolution: int = CONTOUR_RESOLUTION
                ) -> tuple[npt.NDArray, npt.NDArray, npt.NDArray]:
    """
    Sample `func` on a ``(resolution + 1) x (resolution + 1)`` grid
    covering the rectangle.

    `func` is first called once with whole coordinate arrays (suitable
    for NumPy element-wise functions).  If this fails or gives the wrong
    shape, each point is evaluated separately.

    Returns
    -------
    xs, ys, values : ndarray, ndarray, ndarray
        Grid coordinates (1D) and values (2D, indexed ``[i, j]`` for
        ``xs[i], ys[j]``).  Non-finite or undefined samples are NaN.

    Raises
    ------
    ValueError
        If the range is empty or ``resolution < 1``.
    """
    if not (xmax > xmin and ymax > ymin):
        raise ValueError(f"Invalid plot range: x = [{xmin}, {xmax}], "
                         f"y = [{ymin}, {ymax}].")
    if resolution < 1:
        raise ValueError(f"Resolution must be >= 1, got {resolution}.")

    dx, dy = (xmax - xmin) / resolution, (ymax - ymin) / resolution
    xs = xmin + np.arange(resolution + 1) * dx
    ys = ymin + np.arange(resolution + 1) * dy
    xx, yy = np.meshgrid(xs, ys, indexing='ij')

    values = None
    with np.errstate(all='ignore'):
        try:
            values = np.asarray(func(xx, yy), dtype=float)
        except (TypeError, ValueError, ArithmeticError):
            values = None

        if values is None or values.shape != xx.shape:
            values = np.array([[safe_eval(func, x, y) for y in ys]
                               for x in xs], dtype=float)

    values[~np.isfinite(values)] = np.nan
    return xs, ys, values


def contour_segments(func: Callable[[float, float], float], xmin: float,
                     xmax: float, ymin: float, ymax: float,
                     resolution: int = CONTOUR_RESOLUTION) -> list[Segment]:
    """
    Approximate the curve :math:`f(x, y) = 0` over the rectangle
    :math:`[x_{min}, x_{max}] \\times [y_{min}, y_{max}]` using marching
    squares on a ``resolution x resolution`` grid of cells.

    Cells with any NaN / infinite corner are skipped, as are saddle
    cells with an undefined centre value.

    Examples
    --------
    >>> segs = contour_segments(lambda x, y: x ** 2 + y ** 2 - 4,
    ...                         -3, 3, -3, 3, resolution=40)
    >>> len(segs) > 0
    True

    Returns
    -------
    segments : list[((float, float), (float, float))]
        Unordered short line segments.  These are not joined into
        polylines; see `segments_to_polyline` for plotting.
    """
    xs, ys, values = sample_grid(func, xmin, xmax, ymin, ymax, resolution)
    dx, dy = float(xs[1] - xs[0]), float(ys[1] - ys[0])
    finite = np.isfinite(values)
    cell_ok = (finite[:-1, :-1] & finite[1:, :-1] &
               finite[:-1, 1:] & finite[1:, 1:])

    segments = []
    for i, j in zip(*np.nonzero(cell_ok)):
        v00, v10 = float(values[i, j]), float(values[i + 1, j])
        v01, v11 = float(values[i, j + 1]), float(values[i + 1, j + 1])
        case = cell_case(v00, v10, v11, v01)
        if case == 0 or case == 15:
            continue

        x, y = float(xs[i]), float(ys[j])
        if case in SADDLE_CASES:
            with np.errstate(all='ignore'):
                v_c = safe_eval(func, x + dx / 2, y + dy / 2)
            if not all_finite(v_c):
                continue
            pairs = cell_segments(case, (v_c > 0) == (v00 > 0))
        else:
            pairs = cell_segments(case)

        # Corners taken from the grid so neighbouring cells share them.
        x1, y1 = float(xs[i + 1]), float(ys[j + 1])
        p00, p10 = (x, y), (x1, y)
        p01, p11 = (x, y1), (x1, y1)
        edges = (edge_crossing(p00, p01, v00, v01),  # LEFT
                 edge_crossing(p00, p10, v00, v10),  # BOTTOM
                 edge_crossing(p10, p11, v10, v11),  # RIGHT
                 edge_crossing(p01, p11, v01, v11))  # TOP

        for e1, e2 in pairs:
            if edges[e1] is not None and edges[e2] is not None:
                segments.append((edges[e1], edges[e2]))

    return segments
