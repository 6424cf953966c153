"""Demonstration report combining the circle and add helpers."""

import inspect
from typing import List, Sequence

from starter_utils import add as add_module
from starter_utils import circle
from starter_utils.add import add


SAMPLE_RADIUS = 4
SAMPLE_ADDENDS = (2, 2)


def exported_functions(module) -> List[str]:
    """Names of the public functions defined in a module."""
    return [
        name for name, func in inspect.getmembers(module, inspect.isfunction)
        if not name.startswith('_') and func.__module__ == module.__name__
    ]


def build_report(
    radius: float = SAMPLE_RADIUS,
    addends: Sequence = SAMPLE_ADDENDS
) -> List[str]:
    """
    Build the demonstration report lines.

    Args:
        radius: Radius for the circle calculations
        addends: Pair of values passed to add()

    Returns:
        Report lines, with area and circumference rounded to 2 decimals
    """
    a, b = addends
    return [
        f"circle: {', '.join(exported_functions(circle))}",
        f"add: {', '.join(exported_functions(add_module))}",
        f"The area of a circle with a radius of {radius} is: {circle.area(radius):.2f}",
        f"The circumference of a circle with a radius of {radius} is: {circle.circumference(radius):.2f}",
        f"{a} + {b} = {add(a, b)}",
    ]


def main():
    """Print the demonstration report for the sample inputs."""
    for line in build_report():
        print(line)
