"""Utility helpers for path resolution, URL validation and logging."""

from js_outlinks.utils.url import folder_base, resolve_path, validate_url
from js_outlinks.utils.log import setup_logging, log

__all__ = [
    "folder_base",
    "resolve_path",
    "validate_url",
    "setup_logging",
    "log",
]
