"""
Catalog of equations and systems that can be selected for solution.
Functions are written using NumPy so they may be evaluated element-wise
on grids for plotting.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from nlroots.solve.newton_system import NewtonSystem

# Written for nlroots, 2024.

# ======================================================================

_Func = Callable[[float], float]
_Func2 = Callable[[float, float], float]


@dataclass(frozen=True)
class ScalarFunction:
    """A function :math:`f(x)` with its derivative :math:`f'(x)`."""
    description: str
    func: _Func
    deriv: _Func

    def __call__(self, x):
        return self.func(x)


@dataclass(frozen=True)
class SystemFunction:
    """
    A 2x2 system :math:`f_1(x, y) = 0`, :math:`f_2(x, y) = 0` with the
    partial derivatives of each equation.
    """
    description: str
    f1: _Func2
    f2: _Func2
    f1_x: _Func2
    f1_y: _Func2
    f2_x: _Func2
    f2_y: _Func2

    def solver(self) -> NewtonSystem:
        """Returns a `NewtonSystem` for this system."""
        return NewtonSystem(self.f1, self.f2, self.f1_x, self.f1_y,
                            self.f2_x, self.f2_y)


@dataclass(frozen=True)
class Catalog:
    """
    Ordered, index addressable collection of equations and systems.
    This is built once (e.g. by `default_catalog`) and passed to
    whatever needs it.
    """
    equations: tuple[ScalarFunction, ...]
    systems: tuple[SystemFunction, ...]

    def __post_init__(self):
        # Accept any sequences but always store as tuples.
        object.__setattr__(self, 'equations', tuple(self.equations))
        object.__setattr__(self, 'systems', tuple(self.systems))

    def equation(self, idx: int) -> ScalarFunction:
        """Returns equation `idx`, raising `IndexError` if invalid."""
        return self.equations[_check_index(idx, len(self.equations),
                                           'equation')]

    def system(self, idx: int) -> SystemFunction:
        """Returns system `idx`, raising `IndexError` if invalid."""
        return self.systems[_check_index(idx, len(self.systems), 'system')]

    def descriptions(self) -> tuple[list[str], list[str]]:
        """Returns descriptions of equations and systems, in order."""
        return ([eq.description for eq in self.equations],
                [sf.description for sf in self.systems])


def _check_index(idx: int, n: int, kind: str) -> int:
    # Negative indices are not allowed, unlike usual sequence indexing.
    if not 0 <= idx < n:
        raise IndexError(f"Invalid {kind} index: {idx}.")
    return idx


# ----------------------------------------------------------------------

def default_catalog() -> Catalog:
    """
    Returns the standard catalog of five equations and three systems.
    """
    equations = (
        ScalarFunction("f(x) = x^3 - 8",
                       lambda x: x ** 3 - 8.0,
                       lambda x: 3.0 * x * x),
        ScalarFunction("f(x) = exp(x) - 5",
                       lambda x: np.exp(x) - 5.0,
                       lambda x: np.exp(x)),
        ScalarFunction("f(x) = 2*x - 3",
                       lambda x: 2.0 * x - 3.0,
                       lambda x: 2.0 + 0.0 * x),
        ScalarFunction("f(x) = sin(x) - 0.5",
                       lambda x: np.sin(x) - 0.5,
                       lambda x: np.cos(x)),
        ScalarFunction("f(x) = 3*x^2 - 1",
                       lambda x: 3.0 * x * x - 1.0,
                       lambda x: 6.0 * x),
    )

    systems = (
        SystemFunction("sin(x) + 2y = 2; x + cos(y - 1) = 0.7",
                       lambda x, y: np.sin(x) + 2 * y - 2,
                       lambda x, y: x + np.cos(y - 1) - 0.7,
                       lambda x, y: np.cos(x),
                       lambda x, y: 2.0 + 0.0 * x,
                       lambda x, y: 1.0 + 0.0 * x,
                       lambda x, y: -np.sin(y - 1)),
        SystemFunction("x^2 + y^2 = 4; y = x^2 - 2",
                       lambda x, y: x * x + y * y - 4,
                       lambda x, y: y - x * x + 2,
                       lambda x, y: 2 * x,
                       lambda x, y: 2 * y,
                       lambda x, y: -2 * x,
                       lambda x, y: 1.0 + 0.0 * x),
        SystemFunction("e^(x - y) + x*y = 1; x^2 + y^2 = 4",
                       lambda x, y: np.exp(x - y) + x * y - 1,
                       lambda x, y: x * x + y * y - 4,
                       lambda x, y: np.exp(x - y) + y,
                       lambda x, y: -np.exp(x - y) + x,
                       lambda x, y: 2 * x,
                       lambda x, y: 2 * y),
    )

    return Catalog(equations=equations, systems=systems)
