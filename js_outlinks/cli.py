"""
Command-line interface: print the outlinks found in JavaScript files,
HTML pages or URLs.
"""

import argparse
import dataclasses
import os
import sys
import time
from pathlib import Path

import requests

from js_outlinks.config import ExtractorConfig, QUOTED_PATH_OUTLINK_PATTERN
from js_outlinks.errors import ConfigurationError, TreeTooDeepError
from js_outlinks.extraction.html_parser import parse_html, walk
from js_outlinks.extraction.links import extract_links
from js_outlinks.extraction.patterns import PatternRegistry
from js_outlinks.outlink import Outlink
from js_outlinks.session import build_session, fetch_text
from js_outlinks.utils.log import setup_logging, log

try:
    from tqdm import tqdm as _tqdm
    _TQDM_AVAILABLE = True
except ImportError:
    _TQDM_AVAILABLE = False

_HTML_SUFFIXES = (".html", ".htm", ".php", ".asp", ".aspx")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract outlinks from JavaScript sources and from the "
                    "inline scripts and event handlers of HTML pages.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m js_outlinks tree_nodes.js --base-url http://host/app/tree_nodes.js\n"
            "  python -m js_outlinks https://example.com/js/menu.js\n"
            "  python -m js_outlinks page.html --html --base-url https://example.com/docs/page.html\n"
            "\n"
            "Patterns not given on the command line are read from the\n"
            "JS_OUTLINKS_* environment variables.\n"
        ),
    )
    parser.add_argument(
        "sources", nargs="+", metavar="SOURCE",
        help="Local file or http(s):// URL to scan",
    )
    parser.add_argument(
        "--base-url",
        help="URL the sources were served from (default: the source URL, "
             "or the file:// URI of a local file)",
    )
    parser.add_argument(
        "--html", action="store_true", default=False,
        help="Treat sources as HTML and scan <script> blocks, on* handlers "
             "and javascript: hrefs",
    )
    parser.add_argument(
        "--outlink-pattern",
        help="Regex whose group 1 is a candidate link "
             "(default: quoted paths with a web file extension)",
    )
    parser.add_argument(
        "--include-pattern",
        help="Regex a base URL must match to be scanned (default: every URL)",
    )
    parser.add_argument(
        "--absolute-pattern",
        help="Regex identifying candidates that are already absolute URLs",
    )
    parser.add_argument(
        "--budget-ms", type=int,
        help="Wall-clock budget per source in milliseconds",
    )
    parser.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification when fetching URLs",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging (shows skipped candidates)",
    )
    parser.add_argument(
        "--log-file",
        help="Write detailed logs to this file (always at DEBUG level)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ExtractorConfig:
    """Environment settings overridden by whatever was given on the command line."""
    config = ExtractorConfig.from_env()
    overrides: dict[str, object] = {}
    if args.include_pattern:
        overrides["file_include_pattern"] = args.include_pattern
    elif "JS_OUTLINKS_FILE_INCLUDE_PATTERN" not in os.environ:
        overrides["file_include_pattern"] = ".*"
    if args.absolute_pattern:
        overrides["absolute_url_pattern"] = args.absolute_pattern
    if args.outlink_pattern:
        overrides["outlink_pattern"] = args.outlink_pattern
    elif not config.outlink_pattern:
        overrides["outlink_pattern"] = QUOTED_PATH_OUTLINK_PATTERN
    if args.budget_ms is not None:
        if args.budget_ms <= 0:
            raise ConfigurationError("--budget-ms must be positive")
        overrides["time_budget_ms"] = args.budget_ms
    return dataclasses.replace(config, **overrides)


def read_source(source: str, session: requests.Session | None) -> tuple[str, str, str]:
    """Return ``(text, content_type, default_base_url)`` for a file path or URL.

    Local files get their content type from the file suffix.
    """
    if source.startswith(("http://", "https://")):
        if session is None:
            raise ValueError(f"no HTTP session to fetch {source}")
        text, content_type = fetch_text(session, source)
        return text, content_type, source
    path = Path(source)
    if path.suffix.lower() in _HTML_SUFFIXES:
        content_type = "text/html"
    else:
        content_type = "application/javascript"
    text = path.read_text(encoding="utf-8", errors="replace")
    return text, content_type, path.resolve().as_uri()


def scan(
    text: str,
    content_type: str,
    base: str,
    registry: PatternRegistry,
    html: bool,
) -> list[Outlink]:
    """Dispatch on *content_type*; ``--html`` forces the document walk."""
    if html:
        return walk(parse_html(text), base, registry)
    return extract_links(text, content_type, base, registry)


def _emit(line: str) -> None:
    if _TQDM_AVAILABLE:
        _tqdm.write(line)
    else:
        print(line)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    setup_logging(debug=args.debug, log_file=args.log_file)

    try:
        registry = PatternRegistry.from_config(build_config(args))
    except ConfigurationError as exc:
        log.error("[CONFIG] %s", exc)
        sys.exit(2)

    session = None
    if any(s.startswith(("http://", "https://")) for s in args.sources):
        session = build_session(verify_ssl=args.verify_ssl)
        if not args.verify_ssl:
            log.warning("TLS certificate verification is DISABLED (--no-verify-ssl)")

    sources = args.sources
    if _TQDM_AVAILABLE and len(sources) > 1:
        sources = _tqdm(sources, desc="Scanning", unit="src")

    failed = 0
    t0 = time.monotonic()
    for source in sources:
        try:
            text, content_type, default_base = read_source(source, session)
        except (OSError, ValueError, requests.RequestException) as exc:
            log.error("[ERR] Cannot read %s: %s", source, exc)
            failed += 1
            continue

        try:
            links = scan(
                text, content_type, args.base_url or default_base, registry, args.html
            )
        except TreeTooDeepError as exc:
            log.error("[DEPTH] %s: %s", source, exc)
            failed += 1
            continue

        if len(args.sources) > 1:
            _emit(f"{source}:")
        _emit(f"Outlinks extracted: {len(links)}")
        for link in links:
            _emit(f" - {link}")

    log.debug("Scanned %d source(s) in %.2f s", len(args.sources), time.monotonic() - t0)
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
