"""Uniform-stride decimation of long traces for rendering."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

from .constants import MAX_CHART_SAMPLES

T = TypeVar("T")


def decimation_stride(length: int, cap: int = MAX_CHART_SAMPLES) -> int:
    """Return the sampling stride: 1 when *length* fits within *cap*."""
    if cap < 1:
        raise ValueError("cap must be at least 1")
    if length <= cap:
        return 1
    return math.ceil(length / cap)


def decimate_indices(length: int, cap: int = MAX_CHART_SAMPLES) -> range:
    """Indices retained from a sequence of *length* items."""
    return range(0, length, decimation_stride(length, cap))


def decimate(items: Sequence[T], cap: int = MAX_CHART_SAMPLES) -> list[T]:
    """Keep every stride-th item, starting with the first.

    Sequences no longer than *cap* come back unchanged. Retained items are
    verbatim; nothing is averaged or interpolated, and the result may be
    shorter than *cap*.
    """
    return [items[i] for i in decimate_indices(len(items), cap)]
