"""Compact axis-label formatting."""

from __future__ import annotations


def format_axis_value(value: float) -> str:
    """Format ``value`` for a narrow axis label.

    Magnitudes outside ``[1e-3, 1e6)`` use one-decimal scientific notation
    (``1.5e6``); otherwise precision shrinks as the magnitude grows.
    """
    if value == 0.0:
        return "0"
    magnitude = abs(value)
    if magnitude >= 1e6 or magnitude < 1e-3:
        mantissa, exponent = f"{value:.1e}".split("e")
        return f"{mantissa}e{int(exponent)}"
    if magnitude >= 1000.0:
        return f"{value:.0f}"
    if magnitude >= 1.0:
        return f"{value:.2f}"
    return f"{value:.3f}"


def axis_labels(low: float, high: float) -> tuple[str, str, str]:
    """Return min, midpoint, and max labels for one axis."""
    return (
        format_axis_value(low),
        format_axis_value((low + high) / 2.0),
        format_axis_value(high),
    )
