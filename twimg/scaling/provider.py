"""Scaling provider protocol and the query-string implementation."""

from __future__ import annotations

from typing import Optional, Protocol


class ScalingProvider(Protocol):
    """Rewrites a source image URL into a URL for a given width/format."""

    def url_get(self, url: str, width: int, format: Optional[str] = None) -> str:
        """
        Build the URL of the scaled image.

        Args:
            url: Source image URL.
            width: Requested width in pixels.
            format: Optional output format, e.g. "webp".

        Returns:
            Rewritten URL.
        """


class QueryStringScalingProvider:
    """Appends `width` and `format` query parameters.

    Suits image middleware that resizes on request, such as ImageSharp.Web
    or imgproxy-style CDNs reading `?width=`. Holds no state, so a single
    instance may serve concurrent renders.
    """

    def url_get(self, url: str, width: int, format: Optional[str] = None) -> str:
        """
        Append `width` (and `format` when given) to the URL query.

        Args:
            url: Source image URL.
            width: Requested width in pixels.
            format: Optional output format; blank values are ignored.

        Returns:
            e.g. "/img/a.jpg?width=640" or "/img/a.jpg?v=2&width=640&format=webp".
        """
        separator = "&" if "?" in url else "?"
        scaled = f"{url}{separator}width={width}"
        if format and format.strip():
            scaled += f"&format={format}"
        return scaled
