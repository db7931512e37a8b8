"""Outlink extraction from JavaScript resources and inline scripts."""

from js_outlinks.extraction.patterns import PatternRegistry
from js_outlinks.extraction.javascript import extract_js_links
from js_outlinks.extraction.html_parser import parse_html, walk
from js_outlinks.extraction.links import (
    ParseResult,
    ParseStatus,
    ParseStatusCode,
    extract_links,
    filter_html,
    parse_standalone_js,
)

__all__ = [
    "PatternRegistry",
    "extract_js_links",
    "parse_html",
    "walk",
    "ParseResult",
    "ParseStatus",
    "ParseStatusCode",
    "extract_links",
    "filter_html",
    "parse_standalone_js",
]
