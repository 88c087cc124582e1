"""
twimg: responsive image attributes for Tailwind-style breakpoints
Builds `sizes` and `srcset` values from configured breakpoints and per-image size overrides
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("twimg")
except PackageNotFoundError:
    # Running from a source checkout that was never installed
    __version__ = "0.0.0.dev"

__author__ = "twimg contributors"
