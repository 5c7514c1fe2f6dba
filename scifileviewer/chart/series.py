"""Two-column numeric data detection and chart bounds.

Turns raw file text into ordered ``(x, y)`` samples. Comment lines and lines
that do not start with two finite numbers are skipped individually; a file
only counts as chart data when at least two samples survive.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import NamedTuple

COMMENT_PREFIXES = ("#", ";")
MIN_CHART_SAMPLES = 2
BOUNDS_PADDING_FRACTION = 0.05

_FIELD_SPLIT_RE = re.compile(r"[\s,]+")


class NumericSample(NamedTuple):
    """One ``(x, y)`` pair read from a data line."""

    x: float
    y: float


@dataclass(frozen=True)
class ChartBounds:
    """Padded plotting window for both axes."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @property
    def x_bounds(self) -> tuple[float, float]:
        return (self.x_min, self.x_max)

    @property
    def y_bounds(self) -> tuple[float, float]:
        return (self.y_min, self.y_max)


DEFAULT_BOUNDS = ChartBounds(0.0, 1.0, 0.0, 1.0)


def _parse_float(token: str) -> float | None:
    # float() also accepts digit-group underscores and non-ASCII digits.
    if "_" in token or not token.isascii():
        return None
    try:
        return float(token)
    except ValueError:
        return None


def parse_sample_line(line: str) -> NumericSample | None:
    """Parse one text line into a sample, or ``None`` when it is not data."""
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIXES):
        return None
    parts = [part for part in _FIELD_SPLIT_RE.split(stripped) if part]
    if len(parts) < 2:
        return None
    x = _parse_float(parts[0])
    y = _parse_float(parts[1])
    if x is None or y is None:
        return None
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    return NumericSample(x, y)


def extract_samples(text: str) -> list[NumericSample]:
    """Return samples in source line order, or ``[]`` for non-chart text."""
    samples: list[NumericSample] = []
    for line in text.split("\n"):
        sample = parse_sample_line(line)
        if sample is not None:
            samples.append(sample)
    if len(samples) < MIN_CHART_SAMPLES:
        return []
    return samples


def _padded_axis(low: float, high: float) -> tuple[float, float]:
    if high == low:
        return (low - 1.0, high + 1.0)
    padding = abs(high - low) * BOUNDS_PADDING_FRACTION
    return (low - padding, high + padding)


def compute_bounds(samples: list[NumericSample]) -> ChartBounds:
    """Return extrema padded by 5% per axis.

    A zero-width axis is widened to ``value +/- 1`` instead of padded.
    """
    if not samples:
        return DEFAULT_BOUNDS
    xs = [sample.x for sample in samples]
    ys = [sample.y for sample in samples]
    x_min, x_max = _padded_axis(min(xs), max(xs))
    y_min, y_max = _padded_axis(min(ys), max(ys))
    return ChartBounds(x_min=x_min, x_max=x_max, y_min=y_min, y_max=y_max)


def extract_series(text: str) -> tuple[list[NumericSample], ChartBounds]:
    """Extract samples and their bounds; empty samples mean "no chart data"."""
    samples = extract_samples(text)
    if not samples:
        return [], DEFAULT_BOUNDS
    return samples, compute_bounds(samples)
