"""
js_outlinks
===========
Heuristic outlink extraction from JavaScript for crawl pipelines.

Recovers link targets that anchor-tag parsing misses: string literals
in standalone ``.js`` resources, inline ``<script>`` blocks, ``on*``
event handlers and ``javascript:`` hrefs.  Extraction is regex based;
nothing is parsed as JavaScript or fetched while resolving.

Package structure
-----------------
js_outlinks/
├── __init__.py       – package init and public API
├── config.py         – defaults and ExtractorConfig
├── errors.py         – ConfigurationError, TreeTooDeepError
├── outlink.py        – Outlink record
├── session.py        – requests.Session factory for the CLI
├── cli.py            – argparse CLI (``python -m js_outlinks``)
├── extraction/       – sub-package: registry, extractor, walker, entry points
└── utils/            – path resolution, URL validation, logging

Quick start
-----------
    from js_outlinks import ExtractorConfig, PatternRegistry, parse_standalone_js

    registry = PatternRegistry.from_config(
        ExtractorConfig(outlink_pattern=r'"([^"]+\\.html?)"')
    )
    parse = parse_standalone_js("http://host/app/tree.js", script, registry)
    for link in parse.outlinks:
        print(link.to_url)
"""

from .config     import ExtractorConfig
from .errors     import ConfigurationError, TreeTooDeepError
from .outlink    import Outlink
from .extraction import (
    PatternRegistry,
    ParseResult,
    ParseStatus,
    ParseStatusCode,
    extract_js_links,
    extract_links,
    filter_html,
    parse_html,
    parse_standalone_js,
    walk,
)
from .utils      import resolve_path, validate_url

__all__ = [
    "ExtractorConfig",
    "ConfigurationError",
    "TreeTooDeepError",
    "Outlink",
    "PatternRegistry",
    "ParseResult",
    "ParseStatus",
    "ParseStatusCode",
    "extract_js_links",
    "extract_links",
    "filter_html",
    "parse_html",
    "parse_standalone_js",
    "walk",
    "resolve_path",
    "validate_url",
]
