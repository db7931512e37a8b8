"""
Logging for the link extractor.

Every message goes through the ``js-outlinks`` logger and starts with a
``[TAG]`` naming the event: ``[LINK]`` for an accepted outlink, ``[SKIP]``
for a dropped candidate, ``[BUDGET]`` when a scan runs out of time, and so
on.  The console formatter colours the tag; under GitHub Actions warnings
and errors also become workflow annotations, so budget overruns and
failed scans show up on the run summary.
"""

import logging
import os
from pathlib import Path

try:
    import colorlog
    _COLORLOG_AVAILABLE = True
except ImportError:
    _COLORLOG_AVAILABLE = False

log = logging.getLogger("js-outlinks")

RESET = "\033[0m"
TAG_COLOURS: dict[str, str] = {
    "[LINK]":   "\033[32m",
    "[SCAN]":   "\033[36m",
    "[SKIP]":   "\033[90m",
    "[CLAMP]":  "\033[90m",
    "[BUDGET]": "\033[1;33m",
    "[DEPTH]":  "\033[1;33m",
    "[FETCH]":  "\033[34m",
    "[CONFIG]": "\033[35m",
    "[ERR]":    "\033[1;31m",
}

_LEVEL_COLOURS = {
    "DEBUG":    "cyan",
    "INFO":     "green",
    "WARNING":  "yellow",
    "ERROR":    "red",
    "CRITICAL": "bold_red",
}

_ANNOTATIONS = {
    logging.WARNING:  "::warning::",
    logging.ERROR:    "::error::",
    logging.CRITICAL: "::error::",
}

_CONSOLE_FMT = "%(asctime)s %(levelname)-7s %(message)s"
_FILE_FMT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def in_github_actions(environ=os.environ) -> bool:
    return environ.get("GITHUB_ACTIONS") == "true"


class ConsoleFormatter(colorlog.ColoredFormatter if _COLORLOG_AVAILABLE else logging.Formatter):  # type: ignore[misc]
    """
    Console output: level colours when ``colorlog`` is installed, the
    message's ``[TAG]`` coloured with :data:`TAG_COLOURS`, and with
    *annotate* a ``::warning::`` / ``::error::`` prefix for GitHub Actions.
    """

    def __init__(self, fmt: str | None = None, annotate: bool = False, colour: bool = True):
        fmt = fmt or _CONSOLE_FMT
        if _COLORLOG_AVAILABLE:
            if colour and fmt == _CONSOLE_FMT:
                fmt = "%(log_color)s%(asctime)s %(levelname)-7s%(reset)s %(message)s"
            super().__init__(
                fmt, datefmt="%H:%M:%S", log_colors=_LEVEL_COLOURS,
                reset="%(log_color)s" in fmt,
            )
        else:
            super().__init__(fmt, datefmt="%H:%M:%S")
        self.annotate = annotate
        self.colour = colour

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        if self.colour:
            for tag, style in TAG_COLOURS.items():
                if tag in line:
                    line = line.replace(tag, f"{style}{tag}{RESET}", 1)
                    break
        if self.annotate:
            line = _ANNOTATIONS.get(record.levelno, "") + line
        return line


def log_scan_summary(
    base: str,
    matches: int,
    links: int,
    skipped: int,
    budget_ms: int | None = None,
) -> None:
    """
    Report how one scan of *base* ended.

    *budget_ms* is given only when the time budget cut the scan short;
    that is a WARNING.  A scan that ran to the end is a DEBUG ``[SCAN]``
    line, so it only reaches the log file or ``--debug`` output.
    """
    if budget_ms is not None:
        log.warning("[BUDGET] Time limit of %d ms exceeded for %s after %d match(es) – "
                    "returning %d link(s), %d skipped", budget_ms, base, matches, links, skipped)
    else:
        log.debug("[SCAN] %s: %d match(es), %d link(s), %d skipped",
                  base, matches, links, skipped)


def setup_logging(debug: bool = False, log_file: str | None = None) -> None:
    """
    Attach the console handler (and an optional file handler) to :data:`log`.

    The console shows INFO, or DEBUG with *debug*.  The file handler always
    records DEBUG, so skipped candidates and per-scan summaries end up in
    *log_file* even when the console stays quiet.  ``NO_COLOR`` in the
    environment turns tag colours off.
    """
    console_level = logging.DEBUG if debug else logging.INFO
    log.handlers.clear()

    handler = colorlog.StreamHandler() if _COLORLOG_AVAILABLE else logging.StreamHandler()
    handler.setLevel(console_level)
    handler.setFormatter(ConsoleFormatter(
        annotate=in_github_actions(),
        colour="NO_COLOR" not in os.environ,
    ))
    log.addHandler(handler)

    if not log_file:
        log.setLevel(console_level)
        return

    log.setLevel(logging.DEBUG)
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    fh = logging.FileHandler(str(log_path), encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(_FILE_FMT, datefmt="%Y-%m-%d %H:%M:%S"))
    log.addHandler(fh)
    log.info("Logging to file: %s", log_path.resolve())
