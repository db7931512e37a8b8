"""
Path resolution and URL validation helpers.

Resolution is plain string algebra against a *folder* base URL: no
network access, no ``//`` collapsing, no special handling of query
strings or fragments.  Anything malformed that comes out of it is
rejected later by :func:`validate_url`.
"""

import urllib.parse
from typing import TYPE_CHECKING

from js_outlinks.config import ALLOWED_SCHEMES, NETWORK_SCHEMES
from js_outlinks.utils.log import log

if TYPE_CHECKING:
    from js_outlinks.extraction.patterns import PatternRegistry

ASCEND = "../"


def folder_base(url: str) -> str:
    """Strip the last path component: ``http://h/a/b/tree.js`` -> ``http://h/a/b``.

    A URL with no path keeps its ``scheme://authority`` root, and a
    string without any ``/`` is returned unchanged.
    """
    cut = url.rfind("/")
    if cut == -1:
        return url
    root = _root_length(url)
    if cut < root:
        return url[:root]
    return url[:cut]


def _root_length(base: str) -> int:
    """Length of the ``scheme://authority`` prefix of *base* (0 if none)."""
    scheme_end = base.find("://")
    if scheme_end == -1:
        return 0
    slash = base.find("/", scheme_end + 3)
    return len(base) if slash == -1 else slash


def resolve_path(base: str, path: str, registry: "PatternRegistry") -> str:
    """
    Join *path* onto the folder URL *base*.

    Paths matching the registry's absolute-URL pattern are returned as-is.
    Each leading ``../`` removes one segment from *base*; once only the
    ``scheme://authority`` part is left, further ``../`` markers are
    dropped without shortening it.
    """
    if registry.is_absolute(path):
        return path

    root = _root_length(base)
    while path.startswith(ASCEND):
        cut = base.rfind("/")
        if cut >= root and cut != -1:
            base = base[:cut]
        else:
            log.debug("[CLAMP] '%s' is already at the root, ignoring '../'", base)
        path = path[len(ASCEND):]

    return base + "/" + path


def validate_url(url: str) -> str:
    """
    Check *url* against the outlink URL rules and return its canonical form.

    Raises ``ValueError`` for strings without an accepted scheme, network
    URLs without a host, bad ports, and embedded whitespace or control
    characters.
    """
    if not url:
        raise ValueError("empty URL")
    if any(ch.isspace() or ord(ch) < 0x20 for ch in url):
        raise ValueError(f"whitespace or control character in {url!r}")

    parts = urllib.parse.urlsplit(url)
    scheme = parts.scheme.lower()
    if not scheme:
        raise ValueError(f"no scheme in {url!r}")
    if scheme not in ALLOWED_SCHEMES:
        raise ValueError(f"unsupported scheme {scheme!r} in {url!r}")
    if scheme in NETWORK_SCHEMES and not parts.hostname:
        raise ValueError(f"no host in {url!r}")
    # Accessing .port validates it
    parts.port

    return urllib.parse.urlunsplit(parts)
