"""
=====================================
Solvers (:mod:`nlroots.solve`)
=====================================

.. currentmodule:: nlroots.solve

Functions and classes for finding roots of scalar nonlinear equations
and solutions of 2x2 nonlinear systems.  Solvers do not raise on
failure; they return a result record carrying a `SolverFlag` and the
last approximation reached.

Functions
---------

.. autosummary::
    :toctree:

    bisect_root
    secant_root
    relaxation_map
    solve_equation
    solve_system

Classes
-------

.. autosummary::
    :toctree:

    Method
    MethodResult
    NewtonSystem
    SimpleIteration
    SolverFlag
    SystemResult

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError

"""

from .exception import SolverError, SolverFlag
from .results import MethodResult, SystemResult
from .bisect_root import bisect_root
from .secant_root import secant_root
from .simple_iteration import SimpleIteration, relaxation_map
from .newton_system import NewtonSystem
from .methods import Method, solve_equation, solve_system
