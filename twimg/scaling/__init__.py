"""Pluggable URL rewriting for scaled image candidates."""

from twimg.scaling.factory import scalingProvider_create
from twimg.scaling.provider import QueryStringScalingProvider, ScalingProvider

__all__ = [
    "QueryStringScalingProvider",
    "ScalingProvider",
    "scalingProvider_create",
]
