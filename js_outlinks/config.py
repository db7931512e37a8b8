"""
Configuration constants and the extractor configuration object.
"""

import os
from dataclasses import dataclass
from typing import Mapping

from js_outlinks.errors import ConfigurationError

# ---------------------------------------------------------------------------
# Pattern defaults
# ---------------------------------------------------------------------------
# Matched against the whole base URL of a page
DEFAULT_FILE_INCLUDE_PATTERN = r".*\.js"
# Matched against the whole candidate path (case-insensitive)
DEFAULT_ABSOLUTE_URL_PATTERN = r"^(?:[a-z][a-z0-9+.\-]*://|www\.).*"

# Ready-made outlink pattern: quoted literals that look like paths to a
# web resource.  Group 1 is the path without its quotes.
QUOTED_PATH_OUTLINK_PATTERN = (
    r"""['"]([^'"\s<>()]+\.(?:"""
    r"html|htm|shtml|php|asp|aspx|jsp|do|action|cgi|"
    r"js|css|json|xml|txt|pdf|doc|docx|xls|xlsx|zip"
    r""")(?:[?#][^'"\s<>]*)?)['"]"""
)

# ---------------------------------------------------------------------------
# Extraction tuning
# ---------------------------------------------------------------------------
DEFAULT_TIME_BUDGET_MS = 60000   # wall-clock budget for one scan
DEFAULT_MAX_TREE_DEPTH = 256     # nesting limit for the document walk
MAX_TITLE_LEN = 80               # title of a standalone script

# Schemes accepted when validating a resolved outlink
ALLOWED_SCHEMES = frozenset({"http", "https", "ftp", "file"})
# Schemes that must carry a host
NETWORK_SCHEMES = frozenset({"http", "https", "ftp"})

# Content types handled by the dispatcher in extraction.links
HTML_CONTENT_TYPES = frozenset({
    "text/html",
    "application/xhtml+xml",
    "application/x-httpd-php",
    "text/x-php",
})
JS_CONTENT_TYPES = frozenset({
    "application/javascript",
    "application/x-javascript",
    "text/javascript",
    "text/ecmascript",
    "application/ecmascript",
})

# ---------------------------------------------------------------------------
# Configuration keys
# ---------------------------------------------------------------------------
KEY_FILE_INCLUDE_PATTERN = "ext.js.file.include.pattern"
KEY_ABSOLUTE_URL_PATTERN = "ext.js.absolute.url.pattern"
KEY_OUTLINK_PATTERN = "ext.js.extract.outlink.pattern"
KEY_TIME_BUDGET_MS = "ext.js.time.budget.ms"
KEY_MAX_TREE_DEPTH = "ext.js.max.tree.depth"

# Environment variable -> configuration key
ENV_KEYS = {
    "JS_OUTLINKS_FILE_INCLUDE_PATTERN": KEY_FILE_INCLUDE_PATTERN,
    "JS_OUTLINKS_ABSOLUTE_URL_PATTERN": KEY_ABSOLUTE_URL_PATTERN,
    "JS_OUTLINKS_OUTLINK_PATTERN":      KEY_OUTLINK_PATTERN,
    "JS_OUTLINKS_TIME_BUDGET_MS":       KEY_TIME_BUDGET_MS,
    "JS_OUTLINKS_MAX_TREE_DEPTH":       KEY_MAX_TREE_DEPTH,
}

# ---------------------------------------------------------------------------
# HTTP (CLI fetcher only)
# ---------------------------------------------------------------------------
REQUEST_TIMEOUT = 30
MAX_RETRIES = 3

USER_AGENTS = [
    # Chrome (Windows)
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
    # Chrome (Linux)
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
    # Firefox (Linux)
    "Mozilla/5.0 (X11; Linux x86_64; rv:133.0) Gecko/20100101 Firefox/133.0",
    # Safari (macOS)
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.6 Safari/605.1.15",
]


def _positive_int(conf: Mapping[str, str], key: str, default: int) -> int:
    raw = conf.get(key)
    if raw is None or not str(raw).strip():
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"{key} must be positive, got {value}")
    return value


def _pattern(conf: Mapping[str, str], key: str, default: str | None) -> str | None:
    raw = conf.get(key)
    if raw is None or not str(raw).strip():
        return default
    return str(raw)


@dataclass(frozen=True)
class ExtractorConfig:
    """Settings the pattern registry and the extractors are built from.

    Construct once at start-up and share; nothing mutates it afterwards.
    ``outlink_pattern`` of ``None`` disables extraction entirely.
    """

    file_include_pattern: str = DEFAULT_FILE_INCLUDE_PATTERN
    absolute_url_pattern: str = DEFAULT_ABSOLUTE_URL_PATTERN
    outlink_pattern: str | None = None
    time_budget_ms: int = DEFAULT_TIME_BUDGET_MS
    max_tree_depth: int = DEFAULT_MAX_TREE_DEPTH

    @classmethod
    def from_mapping(cls, conf: Mapping[str, str]) -> "ExtractorConfig":
        """Build a config from ``ext.js.*`` property keys.

        Missing or blank keys fall back to the defaults.
        """
        return cls(
            file_include_pattern=_pattern(
                conf, KEY_FILE_INCLUDE_PATTERN, DEFAULT_FILE_INCLUDE_PATTERN),
            absolute_url_pattern=_pattern(
                conf, KEY_ABSOLUTE_URL_PATTERN, DEFAULT_ABSOLUTE_URL_PATTERN),
            outlink_pattern=_pattern(conf, KEY_OUTLINK_PATTERN, None),
            time_budget_ms=_positive_int(
                conf, KEY_TIME_BUDGET_MS, DEFAULT_TIME_BUDGET_MS),
            max_tree_depth=_positive_int(
                conf, KEY_MAX_TREE_DEPTH, DEFAULT_MAX_TREE_DEPTH),
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ExtractorConfig":
        """Build a config from ``JS_OUTLINKS_*`` environment variables."""
        if environ is None:
            environ = os.environ
        conf = {key: environ[var] for var, key in ENV_KEYS.items() if var in environ}
        return cls.from_mapping(conf)
