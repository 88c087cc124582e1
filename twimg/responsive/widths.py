"""Candidate image width resolution and device pixel ratio expansion"""

from __future__ import annotations

import math
from typing import Mapping, Sequence

from twimg.common.config import ScalingOptions
from twimg.common.types import SizeOverride

__all__ = [
    "candidateWidths_expand",
    "distinct_ordered",
    "widths_resolve",
]


def widths_resolve(
    options: ScalingOptions,
    overrides: Mapping[str, SizeOverride],
) -> dict[str, int]:
    """
    Resolve one candidate width per configured breakpoint.

    A breakpoint without an override uses its own threshold as the width.
    Overrides naming unknown breakpoints are never consulted.

    Args:
        options: Breakpoint table in configuration order.
        overrides: Breakpoint name -> SizeOverride for this element.

    Returns:
        Breakpoint name -> width in pixels, in configuration order.
    """
    widths: dict[str, int] = {}
    for breakpoint in options.breakpoints:
        override = overrides.get(breakpoint.name)
        if override is None:
            widths[breakpoint.name] = breakpoint.min_width
        else:
            widths[breakpoint.name] = override.width_resolve(breakpoint.min_width)
    return widths


def distinct_ordered(values: Sequence[int]) -> list[int]:
    """Drop repeated values, keeping the first occurrence of each"""
    return list(dict.fromkeys(values))


def candidateWidths_expand(
    resolved_widths: Mapping[str, int],
    device_pixel_ratios: Sequence[float],
) -> list[int]:
    """
    Expand resolved widths across device pixel ratios.

    Ratios form the outer loop and widths the inner loop, so with ratios
    (1, 2) every 1x width precedes every 2x width. An empty ratio set
    leaves the distinct widths unscaled.

    Args:
        resolved_widths: Output of widths_resolve.
        device_pixel_ratios: Supported ratios in configured order.

    Returns:
        Distinct candidate widths in first-occurrence order.
    """
    widths = distinct_ordered(list(resolved_widths.values()))
    if not device_pixel_ratios:
        return widths

    scaled: list[int] = []
    for ratio in device_pixel_ratios:
        scaled.extend(math.ceil(width * ratio) for width in widths)
    return distinct_ordered(scaled)
