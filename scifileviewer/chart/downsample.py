"""Peak-preserving downsampling for scatter plots.

Long series are reduced to roughly ``target_count`` points by splitting the
interior into equal-width buckets and keeping each bucket's lowest and highest
sample. Bucket edges are truncated float positions, so rounding can leave a
bucket empty; such buckets are skipped and the result may come out slightly
short of the target.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from .series import NumericSample

T = TypeVar("T", bound=NumericSample)

MIN_TARGET_POINTS = 50
Y_LABEL_ALLOWANCE = 12


def chart_target_points(panel_width: int) -> int:
    """Return the point budget for a chart panel ``panel_width`` columns wide.

    Two points per plot column leave room for a min and a max per bucket.
    """
    chart_width = max(0, panel_width - Y_LABEL_ALLOWANCE)
    return max(chart_width * 2, MIN_TARGET_POINTS)


def downsample(samples: Sequence[T], target_count: int) -> list[T]:
    """Reduce ``samples`` to about ``target_count`` points keeping extrema.

    The first and last samples are always kept. Sequences that already fit are
    returned unchanged (as a list).
    """
    n = len(samples)
    if n <= target_count:
        return list(samples)
    if target_count < 3:
        return [samples[0], samples[-1]]

    result: list[T] = [samples[0]]
    bucket_size = (n - 2) / (target_count - 2)

    for i in range(1, target_count - 1):
        start = int(1.0 + (i - 1) * bucket_size)
        end = min(int(1.0 + i * bucket_size), n - 1)
        if start >= end:
            continue

        min_idx = max_idx = start
        min_y = max_y = samples[start].y
        for j in range(start, end):
            y = samples[j].y
            if y < min_y:
                min_y = y
                min_idx = j
            if y > max_y:
                max_y = y
                max_idx = j

        # Emit in sequence order.
        first, second = sorted((min_idx, max_idx))
        result.append(samples[first])
        if first != second:
            result.append(samples[second])

    result.append(samples[-1])
    return result
