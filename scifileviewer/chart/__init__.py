"""Numeric chart pipeline: series extraction, downsampling, axis labels."""

from __future__ import annotations

from .axis import axis_labels, format_axis_value
from .downsample import chart_target_points, downsample
from .series import ChartBounds, DEFAULT_BOUNDS, NumericSample, compute_bounds, extract_samples, extract_series

__all__ = [
    "ChartBounds",
    "DEFAULT_BOUNDS",
    "NumericSample",
    "axis_labels",
    "chart_target_points",
    "compute_bounds",
    "downsample",
    "extract_samples",
    "extract_series",
    "format_axis_value",
]
