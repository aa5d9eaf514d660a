"""
Scalar interpolation helpers shared by the noise kernels and modules.
"""


def cubic_s_curve(v: float) -> float:
    """Cubic ease curve: 3v^2 - 2v^3"""
    return v * v * (3.0 - 2.0 * v)


def quintic_s_curve(v: float) -> float:
    """Quintic ease curve: 6v^5 - 15v^4 + 10v^3"""
    v3 = v * v * v
    v4 = v3 * v
    v5 = v4 * v
    return (6.0 * v5) - (15.0 * v4) + (10.0 * v3)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b by factor t"""
    return a * (1.0 - t) + b * t
