"""
Cubic Bezier easing.
"""


def interpolate(t: float, x1: float, y1: float, x2: float, y2: float) -> float:
    """
    Evaluate a unit cubic Bezier easing curve at time ``t``.

    The curve runs from (0, 0) to (1, 1) with control points (x1, y1) and
    (x2, y2). The curve parameter matching ``t`` on the x axis is found with
    five Newton iterations, each clamped to [0, 1], then y is evaluated.
    Iteration stops early where the curve has a flat x slope.

    Args:
        t: Time in [0, 1].
        x1: First control point x.
        y1: First control point y.
        x2: Second control point x.
        y2: Second control point y.

    Returns:
        Eased value.
    """
    f0 = 1 - 3 * x2 + 3 * x1
    f1 = 3 * x2 - 6 * x1
    f2 = 3 * x1

    refined_t = t
    for _ in range(5):
        refined_t2 = refined_t * refined_t
        refined_t3 = refined_t2 * refined_t

        x = f0 * refined_t3 + f1 * refined_t2 + f2 * refined_t
        derivative = 3.0 * f0 * refined_t2 + 2.0 * f1 * refined_t + f2
        if derivative == 0.0:
            break
        refined_t -= (x - t) / derivative
        refined_t = min(1.0, max(0.0, refined_t))

    return (
        3 * (1 - refined_t) ** 2 * refined_t * y1
        + 3 * (1 - refined_t) * refined_t**2 * y2
        + refined_t**3
    )
