"""Small helpers for assembling deep-link query strings."""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import quote

type QueryPair = tuple[str, str | None]


def format_coordinate(value: float) -> str:
    """Render a coordinate using the shortest round-tripping float repr.

    Integral values drop the trailing ``.0`` (``121.0`` renders as ``121``).
    """
    return repr(float(value)).removesuffix(".0")


def encode_text(value: str) -> str:
    """Percent-encode free text (UTF-8) so it cannot break the query string."""
    return quote(value, safe="")


def latlng(lat: float, lng: float) -> str:
    return f"{format_coordinate(lat)},{format_coordinate(lng)}"


def build_url(base: str, pairs: Iterable[QueryPair]) -> str:
    """Join ``base`` with ``key=value`` pairs, dropping pairs whose value is ``None``.

    Values are emitted as given; callers encode free text with
    :func:`encode_text` and keep provider delimiters (``:``, ``,``, ``|``) raw.
    """
    query = "&".join(f"{key}={value}" for key, value in pairs if value is not None)
    return f"{base}?{query}" if query else base
