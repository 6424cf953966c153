"""Circle geometry helpers."""

import math


def area(radius):
    """Area of a circle with the given radius (pi * r^2)."""
    return math.pi * radius ** 2


def circumference(radius):
    """Circumference of a circle with the given radius (2 * pi * r)."""
    return 2 * math.pi * radius
