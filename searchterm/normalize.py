from __future__ import annotations
import re
from dataclasses import dataclass
from urllib.parse import urlsplit

_SCHEME_RE = re.compile(r'^[a-zA-Z][a-zA-Z0-9+.-]*://')


@dataclass(frozen=True)
class Uri:
    """The parts of a navigation URI the resolver looks at.

    ``path`` starts with ``/`` and carries the query string, if any.
    """
    host: str
    path: str = "/"


def parse_uri(u: str) -> Uri:
    """Normalize: strip fragments, default scheme to https, lowercase host.

    Raises ValueError for URLs urllib cannot split (e.g. a broken IPv6 literal).
    """
    raw = (u or "").strip()
    if "#" in raw:
        raw = raw.split("#", 1)[0]

    if not _SCHEME_RE.match(raw):
        raw = "https://" + raw.lstrip("/")

    parts = urlsplit(raw)
    host = parts.hostname or ""
    path = parts.path or "/"
    # keep a bare trailing "?" so "/search?" still matches a provider prefix
    if parts.query or raw.endswith("?"):
        path = f"{path}?{parts.query}"
    return Uri(host=host, path=path)
