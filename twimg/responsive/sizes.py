"""Builds the `sizes` attribute value"""

from __future__ import annotations

from typing import Mapping

from twimg.common.config import ScalingOptions
from twimg.common.types import PixelCount, SizeOverride, ViewportFraction

__all__ = [
    "number_format",
    "sizeDescriptor_format",
    "sizes_build",
]

SIZES_SEPARATOR = ", "


def number_format(value: float) -> str:
    """
    Format a number without locale grouping; whole values drop the fraction.

    Args:
        value: Number to format.

    Returns:
        e.g. 50.0 -> "50", 33.5 -> "33.5".
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def sizeDescriptor_format(override: SizeOverride) -> str:
    """
    Format one override as a CSS length.

    Args:
        override: Parsed override.

    Returns:
        "{fraction*100}vw" or "{pixels}px".
    """
    if isinstance(override, ViewportFraction):
        return f"{number_format(override.fraction * 100.0)}vw"
    if isinstance(override, PixelCount):
        return f"{number_format(override.pixels)}px"
    raise TypeError(f"Unsupported size override: {override!r}")


def sizes_build(
    options: ScalingOptions,
    overrides: Mapping[str, SizeOverride],
    fallback_size: str,
) -> str:
    """
    Build the `sizes` attribute.

    Only breakpoints with an explicit override contribute a media condition;
    the fallback size always closes the list.

    Args:
        options: Breakpoint table in configuration order.
        overrides: Breakpoint name -> SizeOverride for this element.
        fallback_size: Size used when no media condition matches.

    Returns:
        e.g. "(min-width: 768px) 50vw, 100vw".
    """
    entries: list[str] = []
    for breakpoint in options.breakpoints:
        override = overrides.get(breakpoint.name)
        if override is None:
            continue
        entries.append(
            f"(min-width: {breakpoint.min_width}px) {sizeDescriptor_format(override)}"
        )

    entries.append(fallback_size)
    return SIZES_SEPARATOR.join(entries)
