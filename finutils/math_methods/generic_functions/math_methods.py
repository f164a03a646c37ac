# finutils/math_methods/generic_functions/math_methods.py
# Reference functions with known root-finding behaviour, paired with their derivatives.

def quadratic(x):
    """
    3x^2 + 5x + 2, with roots at -1 and -2/3.
    """
    return 3 * x * x + 5 * x + 2

def quadratic_prime(x):
    return 6.0 * x + 5.0

def cubic_cycle(x):
    """
    x^3 - 2x + 2. Newton iteration started at 0 or 1 cycles between the two:
    0 -> 0 - 2/-2 = 1 -> 1 - 1/1 = 0 -> ...
    """
    return x * x * x - 2.0 * x + 2.0

def cubic_cycle_prime(x):
    return 3.0 * x * x - 2.0

def inverted_parabola(x):
    """
    1 - x^2, with roots at +/-1 and a maximum at 0.
    The zero derivative at 0 sends any Newton step taken near 0 far away.
    """
    return 1.0 - x * x

def inverted_parabola_prime(x):
    return -2.0 * x
