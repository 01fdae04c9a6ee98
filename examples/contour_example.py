#!usr/bin/env python3

# Plot the zero contours f1 = 0 and f2 = 0 of each catalog system with
# the Newton solution marked where the curves cross.

import matplotlib.pyplot as plt

from nlroots.catalog import default_catalog
from nlroots.numeric import contour_segments, segments_to_polyline

catalog = default_catalog()

# Start points chosen near one of the solutions of each system.
starts = [(0.0, 1.0), (1.3, 0.3), (-1.0, -1.5)]
x_range, y_range = (-3.0, 3.0), (-3.0, 3.0)

for sf, (x0, y0) in zip(catalog.systems, starts):
    result = sf.solver().solve(x0, y0, eps=1e-10)
    print(f"\n{sf.description}")
    print(result)

    plt.figure()
    for f, fmt, label in ((sf.f1, '-b', "$f_1 = 0$"),
                          (sf.f2, '--r', "$f_2 = 0$")):
        segs = contour_segments(f, *x_range, *y_range, resolution=200)
        xs, ys = segments_to_polyline(segs)
        plt.plot(xs, ys, fmt, label=label)

    if result.success:
        plt.plot(*result.solution, 'ok', label="SOLUTION")
    plt.plot(x0, y0, 'xk', label="START")

    plt.axis('equal')
    plt.grid(axis='both')
    plt.legend()
    plt.xlabel("$x$")
    plt.ylabel("$y$")
    plt.title(sf.description)

plt.show()
