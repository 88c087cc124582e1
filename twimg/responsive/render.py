"""
Responsive attribute rendering entry points.

`output_render` is the pure core: typed inputs in, `sizes`/`srcset` out.
`rawAttributes_render` recovers the typed inputs from an element's raw
attribute pairs first and returns a Result, so validation failures reach the
caller as values rather than exceptions.

Both functions only read the shared ScalingOptions and keep all per-element
state local, so any number of renders may run concurrently.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from twimg.common.config import ScalingOptions
from twimg.common.errors import Result
from twimg.common.settings import settings
from twimg.common.types import RenderInput, RenderOutput
from twimg.responsive.overrides import sizeOverrides_parse
from twimg.responsive.sizes import sizes_build
from twimg.responsive.srcset import srcset_build
from twimg.responsive.widths import candidateWidths_expand, widths_resolve
from twimg.scaling.provider import ScalingProvider

__all__ = [
    "flag_parse",
    "output_render",
    "rawAttributes_render",
    "renderInput_build",
]

logger = logging.getLogger(__name__)


def output_render(
    options: ScalingOptions,
    render_input: RenderInput,
    provider: ScalingProvider,
) -> RenderOutput:
    """
    Render `sizes` and `srcset` for one element.

    Args:
        options: Breakpoints and device pixel ratios.
        render_input: Typed per-element inputs.
        provider: URL rewriter for each candidate width.

    Returns:
        RenderOutput with both attribute values.
    """
    sizes = sizes_build(options, render_input.overrides, render_input.fallback_size)
    resolved = widths_resolve(options, render_input.overrides)
    candidates = candidateWidths_expand(resolved, options.device_pixel_ratios)
    srcset = srcset_build(render_input.base_url, candidates, provider)

    logger.debug(f"Rendered {render_input.base_url!r}: widths={candidates}")
    return RenderOutput(sizes=sizes, srcset=srcset)


def flag_parse(raw: Optional[str]) -> bool:
    """
    Interpret a boolean attribute that is present.

    Args:
        raw: Attribute value; None for a value-less attribute.

    Returns:
        False only for an explicit "false", True otherwise.
    """
    return raw is None or raw.strip().lower() != "false"


def renderInput_build(attributes: Iterable[tuple[str, Optional[str]]]) -> Result[RenderInput]:
    """
    Recover a RenderInput from raw attribute pairs.

    Recognised attributes are `src`, `fallback-size`, `conserve-src` and any
    `size-{breakpoint}`; everything else is ignored here.

    Args:
        attributes: (name, value) pairs in element order.

    Returns:
        Result holding the RenderInput, or the first size attribute error.
    """
    base_url = ""
    fallback_size = settings.DEFAULT_FALLBACK_SIZE
    conserve_src = False
    size_attributes: list[tuple[str, Optional[str]]] = []

    for name, value in attributes:
        if name.startswith(settings.SIZE_ATTRIBUTE_PREFIX):
            size_attributes.append((name, value))
        elif name == settings.SRC_ATTRIBUTE:
            base_url = value or ""
        elif name == settings.FALLBACK_SIZE_ATTRIBUTE:
            fallback_size = value or ""
        elif name == settings.CONSERVE_SRC_ATTRIBUTE:
            conserve_src = flag_parse(value)

    parsed = sizeOverrides_parse(size_attributes, settings.SIZE_ATTRIBUTE_PREFIX)
    if not parsed.isOk():
        return Result.fail(parsed.error)  # type: ignore[arg-type]

    return Result.ok(RenderInput(
        base_url=base_url,
        fallback_size=fallback_size,
        conserve_src=conserve_src,
        overrides=parsed.value_unwrap(),
    ))


def rawAttributes_render(
    options: ScalingOptions,
    attributes: Iterable[tuple[str, Optional[str]]],
    provider: ScalingProvider,
) -> Result[RenderOutput]:
    """
    Render `sizes` and `srcset` straight from an element's raw attributes.

    Args:
        options: Breakpoints and device pixel ratios.
        attributes: (name, value) pairs in element order.
        provider: URL rewriter for each candidate width.

    Returns:
        Result holding the RenderOutput, or the validation error.
    """
    built = renderInput_build(attributes)
    if not built.isOk():
        logger.debug(f"Render rejected: {built.error}")
        return Result.fail(built.error)  # type: ignore[arg-type]
    return Result.ok(output_render(options, built.value_unwrap(), provider))
