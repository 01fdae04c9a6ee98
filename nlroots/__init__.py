"""
.. This module acts as the top-level API documentation.

.. module: nlroots

**nlroots** finds roots of scalar nonlinear equations (bisection,
secant and simple iteration) and solutions of 2x2 nonlinear systems
(Newton's method), and traces implicit curves :math:`f(x, y) = 0` for
plotting.

.. autosummary::
    :toctree: generated/

    catalog
    numeric
    params
    solve

"""

__version__ = "0.1.0"

import sys

# Written for nlroots, 2024.

# ======================================================================

assert sys.version_info >= (3, 10)
