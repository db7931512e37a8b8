"""
Page-level entry points and the content-type dispatcher.

* :func:`filter_html` adds links from inline JavaScript to an HTML page's
  existing outlinks.
* :func:`parse_standalone_js` handles a resource that is JavaScript
  through and through.
* :func:`extract_links` picks one of the two from the Content-Type.
"""

import enum
import urllib.parse
from dataclasses import dataclass, field
from typing import Sequence

from bs4.element import PageElement

from js_outlinks.config import HTML_CONTENT_TYPES, JS_CONTENT_TYPES, MAX_TITLE_LEN
from js_outlinks.errors import TreeTooDeepError
from js_outlinks.extraction.html_parser import parse_html, walk
from js_outlinks.extraction.javascript import extract_js_links
from js_outlinks.extraction.patterns import PatternRegistry
from js_outlinks.outlink import Outlink
from js_outlinks.utils.log import log


class ParseStatusCode(enum.Enum):
    SUCCESS = "success"
    FAILED_INVALID_FORMAT = "failed_invalid_format"


@dataclass(frozen=True)
class ParseStatus:
    code: ParseStatusCode
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.code is ParseStatusCode.SUCCESS


STATUS_SUCCESS = ParseStatus(ParseStatusCode.SUCCESS)


@dataclass(frozen=True)
class ParseResult:
    """Text, title and outlinks of a parsed standalone script."""

    text: str
    title: str
    outlinks: list[Outlink] = field(default_factory=list)
    status: ParseStatus = STATUS_SUCCESS


def script_title(script: str) -> str:
    """First line of *script*, capped at ``MAX_TITLE_LEN`` characters."""
    idx = script.find("\n")
    if idx == -1:
        idx = len(script)
    return script[:min(idx, MAX_TITLE_LEN)]


def filter_html(
    base_url: str,
    tree: PageElement,
    existing_links: Sequence[Outlink],
    registry: PatternRegistry,
) -> list[Outlink]:
    """
    Return *existing_links* with the links from inline JavaScript in
    *tree* put in front of them.

    Pages whose base URL fails the eligibility pattern, and pages without
    any new link, get *existing_links* back unchanged.
    """
    existing = list(existing_links)
    if not registry.is_eligible(base_url):
        return existing

    try:
        found = walk(tree, base_url, registry)
    except TreeTooDeepError as exc:
        log.warning("[DEPTH] Skipping inline scripts of %s: %s", base_url, exc)
        return existing

    if not found:
        return existing
    log.info("Found %d JavaScript outlink(s) in %s", len(found), base_url)
    return found + existing


def parse_standalone_js(
    base_url: str,
    raw: str | bytes,
    registry: PatternRegistry,
    content_type: str = "",
) -> ParseResult:
    """
    Extract outlinks from a whole JavaScript resource.

    An ineligible *base_url* yields an empty result with a
    ``FAILED_INVALID_FORMAT`` status, whatever the content.
    """
    if not registry.is_eligible(base_url):
        return ParseResult(
            text="",
            title="",
            outlinks=[],
            status=ParseStatus(
                ParseStatusCode.FAILED_INVALID_FORMAT,
                f"Content not JavaScript: '{content_type}'",
            ),
        )

    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")

    outlinks = extract_js_links(raw, "", base_url, registry)
    return ParseResult(
        text=raw,
        title=script_title(raw),
        outlinks=outlinks,
        status=STATUS_SUCCESS,
    )


def extract_links(
    content: bytes | str,
    content_type: str,
    url: str,
    registry: PatternRegistry,
    existing_links: Sequence[Outlink] = (),
) -> list[Outlink]:
    """
    Return the outlinks of *content*, handled according to *content_type*.

    A ``.js`` path goes through the standalone parser whatever the server
    claims, as does a JavaScript content type.  HTML (or ``.html``,
    ``.htm``, ``.php``, ``.asp`` paths) goes through the document walk.
    Anything else returns *existing_links* unchanged.
    """
    ct = content_type.split(";")[0].strip().lower()
    path_lower = urllib.parse.urlparse(url).path.lower()

    if path_lower.endswith(".js") or ct in JS_CONTENT_TYPES:
        parse = parse_standalone_js(url, content, registry, content_type)
        if not parse.status.ok:
            log.debug("[SKIP] %s: %s", url, parse.status.message)
        return parse.outlinks + list(existing_links)

    if ct in HTML_CONTENT_TYPES or path_lower.endswith((".html", ".htm", ".php", ".asp")):
        if isinstance(content, bytes):
            content = content.decode("utf-8", errors="replace")
        return filter_html(url, parse_html(content), existing_links, registry)

    return list(existing_links)
