"""
Numeric (:mod:`nlroots.numeric`)
================================

.. currentmodule:: nlroots.numeric

Numeric helpers used for evaluating functions and preparing curves for
plotting.

.. autosummary::
    :toctree:

    contour
    math_ext
    polyline

"""
from .math_ext import all_finite, safe_eval
from .contour import (cell_case, cell_segments, contour_segments,
                      edge_crossing, sample_grid)
from .polyline import sample_curve, segments_to_polyline
