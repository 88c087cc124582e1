"""Builds the `srcset` attribute value"""

from __future__ import annotations

from typing import Sequence

from twimg.scaling.provider import ScalingProvider

__all__ = ["srcset_build"]

# No space after the comma, unlike `sizes`
SRCSET_SEPARATOR = ","


def srcset_build(
    base_url: str,
    candidate_widths: Sequence[int],
    provider: ScalingProvider,
) -> str:
    """
    Build the `srcset` attribute from candidate widths.

    Args:
        base_url: Source image URL.
        candidate_widths: Output of candidateWidths_expand.
        provider: Rewrites the base URL for each width; no format is passed.

    Returns:
        e.g. "/a.jpg?width=640 640w,/a.jpg?width=1280 1280w".
    """
    return SRCSET_SEPARATOR.join(
        f"{provider.url_get(base_url, width)} {width}w" for width in candidate_widths
    )
