#!usr/bin/env python3

# Solve each catalog equation with each method, then each catalog
# system, printing the result.  Also plots the equations.

import matplotlib.pyplot as plt

from nlroots.catalog import default_catalog
from nlroots.numeric import sample_curve
from nlroots.solve import Method, solve_equation, solve_system

catalog = default_catalog()

# Intervals (or secant starting points) for each equation.
intervals = [(1.0, 3.0), (1.0, 2.0), (0.0, 2.0), (0.0, 1.0), (0.1, 1.0)]

for eq, (a, b) in zip(catalog.equations, intervals):
    print(f"\n{eq.description}, [a, b] = [{a}, {b}]")
    for method in Method:
        result = solve_equation(method, eq.func, eq.deriv, a, b, eps=1e-8)
        print(f"--- {method.name} ---")
        print(result)

# Bisection with progress output.
eq = catalog.equation(0)
solve_equation(Method.BISECTION, eq.func, eq.deriv, 1.0, 3.0, eps=1e-3,
               verbose=True)

# Systems from a common start point.
for sf in catalog.systems:
    print(f"\n{sf.description}, (x0, y0) = (1.0, 1.0)")
    print(solve_system(sf.solver(), 1.0, 1.0, eps=1e-10))

# ----------------------------------------------------------------------

plt.figure()
for eq, (a, b) in zip(catalog.equations, intervals):
    xs, ys = sample_curve(eq.func, a - 1.0, b + 1.0)
    plt.plot(xs, ys, label=eq.description)

plt.axhline(0.0, color='k', linewidth=0.8)
plt.grid(axis='both')
plt.legend()
plt.xlabel("$x$")
plt.ylabel("$f(x)$")
plt.title("CATALOG EQUATIONS")
plt.show()
