"""
Host-side adapter for `<tw-img>` elements.

Maps a template engine's element attributes onto the render entry point
and back:

    <tw-img src="/a.jpg" size-md="0.5" alt="A">
        ->
    <img alt="A" sizes="(min-width: 768px) 50vw, 100vw" srcset="...">

The adapter fails the element on any size attribute error; hosts wanting a
softer policy can call `twimg.responsive.render.rawAttributes_render` directly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from twimg.common.config import ScalingOptions
from twimg.common.settings import settings
from twimg.responsive.render import output_render, renderInput_build
from twimg.scaling.factory import scalingProvider_create
from twimg.scaling.provider import ScalingProvider

__all__ = [
    "Attribute",
    "ImageElementAdapter",
    "RewrittenElement",
]

logger = logging.getLogger(__name__)

Attribute = tuple[str, Optional[str]]


@dataclass(frozen=True)
class RewrittenElement:
    """Element produced by the adapter"""

    tag_name: str
    attributes: tuple[Attribute, ...]

    def attribute_get(self, name: str) -> Optional[str]:
        """Value of the named attribute, None when absent or value-less"""
        for attr_name, value in self.attributes:
            if attr_name == name:
                return value
        return None

    def hasAttribute(self, name: str) -> bool:
        """Check if the element carries the named attribute"""
        return any(attr_name == name for attr_name, _ in self.attributes)


class ImageElementAdapter:
    """Rewrites responsive image elements using shared scaling options"""

    BOUND_ATTRIBUTES = (
        settings.SRC_ATTRIBUTE,
        settings.FALLBACK_SIZE_ATTRIBUTE,
        settings.CONSERVE_SRC_ATTRIBUTE,
    )
    GENERATED_ATTRIBUTES = ("sizes", "srcset")

    def __init__(
        self,
        options: ScalingOptions,
        provider_factory: Optional[Callable[[], ScalingProvider]] = None,
    ) -> None:
        """
        Initialize adapter

        Args:
            options: Breakpoints and device pixel ratios, read-only
            provider_factory: Builds a provider per element; defaults to the
                provider named in the options
        """
        self._options = options
        self._provider_factory = provider_factory or (
            lambda: scalingProvider_create(options.provider_name)
        )

    @staticmethod
    def fromSettings_create() -> "ImageElementAdapter":
        """
        Create an adapter over the process-wide loaded configuration

        Returns:
            Adapter using `settings.config.scaling`

        Raises:
            RuntimeError: If settings have not been initialized
        """
        return ImageElementAdapter(settings.config.scaling)

    @property
    def options(self) -> ScalingOptions:
        """Get configured scaling options"""
        return self._options

    def element_rewrite(self, attributes: Sequence[Attribute]) -> RewrittenElement:
        """
        Rewrite one element's attributes.

        Args:
            attributes: (name, value) pairs in element order

        Returns:
            RewrittenElement with tag `img`: passthrough attributes and a
            conserved `src` in authored order, then `sizes` and `srcset`

        Raises:
            ResponsiveImageError: If a size attribute is invalid
        """
        built = renderInput_build(attributes)
        if not built.isOk():
            logger.warning(f"Responsive image rejected: {built.error}")
        render_input = built.value_unwrap()
        output = output_render(self._options, render_input, self._provider_factory())

        passthrough: list[Attribute] = []
        for name, value in attributes:
            if name == settings.SRC_ATTRIBUTE:
                # Conserved src keeps its authored position, once
                if render_input.conserve_src and not any(n == name for n, _ in passthrough):
                    passthrough.append((name, render_input.base_url))
            elif not (
                name.startswith(settings.SIZE_ATTRIBUTE_PREFIX)
                or name in self.BOUND_ATTRIBUTES
                or name in self.GENERATED_ATTRIBUTES
            ):
                passthrough.append((name, value))

        passthrough.extend(output.attributes_get().items())

        logger.debug(f"Rewrote {settings.SOURCE_ELEMENT_NAME} -> {settings.OUTPUT_ELEMENT_NAME}: sizes={output.sizes!r}")
        return RewrittenElement(
            tag_name=settings.OUTPUT_ELEMENT_NAME,
            attributes=tuple(passthrough),
        )

