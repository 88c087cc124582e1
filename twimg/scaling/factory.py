"""Scaling provider factory functions."""

from __future__ import annotations

from typing import Callable

from twimg.scaling.provider import QueryStringScalingProvider, ScalingProvider

PROVIDERS: dict[str, Callable[[], ScalingProvider]] = {
    "imagesharp": QueryStringScalingProvider,
    "querystring": QueryStringScalingProvider,
}


def scalingProvider_create(provider_name: str) -> ScalingProvider:
    """
    Create a new scaling provider instance.

    Every call returns a fresh instance.

    Args:
        provider_name: Provider identifier (e.g., "imagesharp", "querystring")

    Returns:
        ScalingProvider instance
    """
    name = provider_name.lower()
    if name in PROVIDERS:
        return PROVIDERS[name]()

    supported = ", ".join(sorted(PROVIDERS))
    raise ValueError(f"Unsupported scaling provider '{provider_name}'. Supported: {supported}.")
