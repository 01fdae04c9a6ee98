import math


# ======================================================================

# Define test functions, along with derivatives and exact roots.

def f(x):
    return x ** 2 - x - 1


def df_dx(x):
    return 2 * x - 1


F_EXACT = 1.618033988749895  # Golden ratio, root of f(x) on [1, 2].


def cubic(x):
    return x ** 3 - 8


def dcubic_dx(x):
    return 3 * x ** 2


def linear(x):
    return 2 * x - 3


def dlinear_dx(x):
    return 2.0


def undefined_below_zero(x):
    return math.log(x)


# 2x2 system: circle and parabola, with intersections at (±√3, 1) and
# (0, -2).

def circ(x, y):
    return x ** 2 + y ** 2 - 4


def parab(x, y):
    return y - x ** 2 + 2


CIRC_PARAB_JACOBIAN = (lambda x, y: 2 * x, lambda x, y: 2 * y,
                       lambda x, y: -2 * x, lambda x, y: 1.0)

CIRC_PARAB_SOLNS = ((math.sqrt(3), 1.0), (-math.sqrt(3), 1.0), (0.0, -2.0))
