"""
Per-element size override parsing.

Turns `size-{breakpoint}` attribute pairs into typed overrides:
    size-md="0.5"  -> ViewportFraction(0.5)
    size-sm="300"  -> PixelCount(300)
    size-lg="1"    -> ViewportFraction(1.0)   (whole number 1 is a fraction)
    size-lg="1.5"  -> OUT_OF_RANGE_VALUE
"""

from __future__ import annotations

import logging
import math
import re
from typing import Iterable, Optional

from twimg.common.errors import ErrorKind, RenderError, Result
from twimg.common.types import PixelCount, SizeOverride, ViewportFraction

__all__ = [
    "decimal_parse",
    "sizeOverride_classify",
    "sizeOverrides_parse",
]

logger = logging.getLogger(__name__)

# Invariant-culture decimal literal: sign, digits with "," group separators,
# optional fraction and exponent; also the infinity and NaN symbols
DECIMAL_RE = re.compile(
    r"^\s*[+-]?(?:\d[\d,]*(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$"
    r"|^\s*[+-]?(?:infinity|nan)\s*$",
    re.IGNORECASE,
)

RANGE_MESSAGE = "size-* attributes must be a decimal between 0 and 1, or a whole number greater than 1"


def decimal_parse(raw: Optional[str]) -> Optional[float]:
    """
    Parse a culture-invariant decimal string.

    Args:
        raw: Attribute value, possibly None for a value-less attribute.

    Returns:
        Parsed float, or None when the text is not a decimal literal.
    """
    if raw is None or not DECIMAL_RE.match(raw):
        return None
    return float(raw.replace(",", ""))


def sizeOverride_classify(value: float) -> Optional[SizeOverride]:
    """
    Classify a parsed number as a pixel count or viewport fraction.

    Args:
        value: Parsed attribute value.

    Returns:
        The override, or None when the value is out of range.
    """
    if not math.isfinite(value) or value <= 0:
        return None
    if value.is_integer() and int(value) != 1:
        return PixelCount(int(value))
    if value > 1:
        return None
    return ViewportFraction(value)


def sizeOverrides_parse(
    attributes: Iterable[tuple[str, Optional[str]]],
    prefix: str = "size-",
) -> Result[dict[str, SizeOverride]]:
    """
    Parse `{prefix}{breakpoint}` attributes into an override mapping.

    Later attributes for the same breakpoint replace earlier ones. The first
    invalid attribute aborts parsing.

    Args:
        attributes: (name, value) pairs, all expected to carry the prefix.
        prefix: Attribute name prefix preceding the breakpoint name.

    Returns:
        Result holding breakpoint name -> SizeOverride, or the first error.
    """
    overrides: dict[str, SizeOverride] = {}
    for name, raw_value in attributes:
        head, separator, breakpoint_name = name.partition(prefix)
        if not separator or head:
            return Result.fail(RenderError(
                kind=ErrorKind.MALFORMED_ATTRIBUTE_NAME,
                attribute_name=name,
                attribute_value=raw_value,
                message=f"{prefix} attributes must be in the format {prefix}{{breakpoint}}",
            ))

        value = decimal_parse(raw_value)
        if value is None:
            return Result.fail(RenderError(
                kind=ErrorKind.NON_NUMERIC_VALUE,
                attribute_name=name,
                attribute_value=raw_value,
                message=f"{prefix}* attributes must be a number",
            ))

        override = sizeOverride_classify(value)
        if override is None:
            return Result.fail(RenderError(
                kind=ErrorKind.OUT_OF_RANGE_VALUE,
                attribute_name=name,
                attribute_value=raw_value,
                message=RANGE_MESSAGE,
            ))

        logger.debug(f"Size override {breakpoint_name!r}: {override}")
        overrides[breakpoint_name] = override

    return Result.ok(overrides)
