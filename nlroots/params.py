"""
Solve requests and the text file format used to save and restore them.

A parameter file looks like::

    EQUATION_PARAMS
    0
    1
    1.0
    3.0
    1e-6

    --- Input ---
    ...

The first line is the marker (``EQUATION_PARAMS`` or ``SYSTEM_PARAMS``),
then the equation / system index, the method index (equations only)
and `a`, `b`, `eps`.  Blank lines and lines starting ``---`` are
ignored; reading stops once `eps` has been found so that anything after
it is free-form.
"""
from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from nlroots.catalog import Catalog
from nlroots.solve import (Method, MethodResult, SolverFlag, SystemResult,
                           solve_equation, solve_system)

# Written for nlroots, 2024.

# ======================================================================


class Task(Enum):
    """Kind of problem, valued by its parameter file marker."""
    EQUATION = 'EQUATION_PARAMS'
    SYSTEM = 'SYSTEM_PARAMS'


@dataclass(frozen=True, kw_only=True)
class SolveRequest:
    # noinspection PyUnresolvedReferences
    """
    A request to solve one catalog item.

    Parameters
    ----------
    task : Task
        Equation or system.
    item : int
        Index of the equation / system in the catalog.
    method : int or None
        Method index, for equations only (see `Method`).
    a, b, eps : str
        Decimal text.  For equations `a` and `b` are the interval (or
        the two starting points for the secant method), for systems they
        are the starting point `(x0, y0)`.
    """
    task: Task
    item: int
    method: int | None
    a: str
    b: str
    eps: str

    def parse_numbers(self) -> tuple[float, float, float]:
        """
        Returns `a`, `b`, `eps` as floats.  A comma is accepted as the
        decimal separator.

        Raises
        ------
        ValueError
            If any value is not a number.
        """
        vals = []
        for name, text in (('a', self.a), ('b', self.b), ('eps', self.eps)):
            try:
                vals.append(float(str(text).strip().replace(',', '.')))
            except ValueError:
                raise ValueError(f"Invalid number for '{name}': "
                                 f"{text!r}.") from None
        return tuple(vals)


# ----------------------------------------------------------------------

def read_params(source: str | os.PathLike | Iterable[str]) -> SolveRequest:
    """
    Read a `SolveRequest` from a parameter file (given by path) or from
    an iterable of lines.

    Raises
    ------
    ValueError
        If any required values are missing or the indices are not
        integers.
    """
    if isinstance(source, (str, os.PathLike)):
        with open(source, 'r', encoding='utf-8') as fh:
            return _parse_lines(fh)
    return _parse_lines(source)


def _parse_lines(lines: Iterable[str]) -> SolveRequest:
    task, item, method = None, None, None
    values = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith('---'):
            continue

        if line in (Task.EQUATION.value, Task.SYSTEM.value):
            task = Task(line)
            continue

        if task is None:
            continue  # Nothing is read before the marker.

        if item is None:
            item = int(line)
        elif task is Task.EQUATION and method is None:
            method = int(line)
        else:
            values.append(line)
            if len(values) == 3:
                break

    if (task is None or item is None or len(values) < 3 or
            (task is Task.EQUATION and method is None)):
        raise ValueError("Could not read all required parameters.")

    a, b, eps = values
    return SolveRequest(task=task, item=item, method=method, a=a, b=b,
                        eps=eps)


def write_params(path: str | os.PathLike, request: SolveRequest,
                 catalog: Catalog,
                 result: MethodResult | SystemResult = None) -> Path:
    """
    Write `request` to a parameter file, followed by a readable summary
    of the input and (if given) the `result`.  A ``.txt`` suffix is
    added if `path` has none.

    Returns
    -------
    path : Path
        Path of the file written.
    """
    path = Path(path)
    if not path.suffix:
        path = path.with_suffix('.txt')

    lines = [request.task.value, str(request.item)]
    if request.task is Task.EQUATION:
        lines.append(str(request.method))
    lines += [request.a, request.b, request.eps, '', '--- Input ---']

    if request.task is Task.EQUATION:
        eq = catalog.equation(request.item)
        lines += ["Task: equation",
                  f"Equation: {eq.description}",
                  f"Method: {_method_name(request.method)}",
                  "Parameters:",
                  f"  a/x0 = {request.a}",
                  f"  b/x1 = {request.b}",
                  f"  eps  = {request.eps}"]
    else:
        sf = catalog.system(request.item)
        lines += ["Task: system",
                  f"System: {sf.description}",
                  "Method: Newton",
                  "Parameters:",
                  f"  x0 = {request.a}",
                  f"  y0 = {request.b}",
                  f"  eps = {request.eps}"]

    if result is not None:
        lines += ['', '--- Result ---', str(result)]

    path.write_text('\n'.join(lines) + '\n', encoding='utf-8')
    return path


def _method_name(method: int | None) -> str:
    try:
        return Method(method).name.replace('_', ' ').lower()
    except ValueError:
        return f"unknown ({method})"


# ----------------------------------------------------------------------

def run_request(request: SolveRequest, catalog: Catalog, *,
                verbose: bool = False) -> MethodResult | SystemResult:
    """
    Look up the catalog item, convert the numeric values and run the
    solver.  Bad indices or numeric text give a failure result with
    flag ``INVALID_INPUT``.
    """
    result_type = (MethodResult if request.task is Task.EQUATION
                   else SystemResult)
    try:
        a, b, eps = request.parse_numbers()
        if request.task is Task.EQUATION:
            eq = catalog.equation(request.item)
        else:
            sf = catalog.system(request.item)
    except (ValueError, IndexError) as e:
        return result_type.failed(SolverFlag.INVALID_INPUT, str(e))

    if request.task is Task.EQUATION:
        return solve_equation(request.method, eq.func, eq.deriv, a, b, eps,
                              verbose=verbose)
    return solve_system(sf.solver(), a, b, eps, verbose=verbose)
