"""
Heuristic outlink extraction from JavaScript text.

The configured outlink pattern is run over the text; group 1 of every
match is a candidate path that gets resolved against the folder of the
base URL and validated.  The scan is bounded by a wall-clock budget and
never raises for malformed input.
"""

import time
from typing import Callable

from js_outlinks.extraction.patterns import PatternRegistry
from js_outlinks.outlink import Outlink
from js_outlinks.utils.log import log, log_scan_summary
from js_outlinks.utils.url import folder_base, resolve_path, validate_url


def extract_js_links(
    text: str,
    anchor: str,
    base: str,
    registry: PatternRegistry,
    budget_ms: int | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> list[Outlink]:
    """
    Return the outlinks found in *text*, in match order.

    *base* is the URL of the resource the text came from; its last path
    component is dropped before resolving.  When *budget_ms* (default:
    the registry's budget) runs out, the links found so far are returned.
    """
    outlinks: list[Outlink] = []
    if registry.outlink is None or not text:
        return outlinks

    if budget_ms is None:
        budget_ms = registry.time_budget_ms
    budget = budget_ms / 1000.0
    start = clock()
    base = folder_base(base)
    matches = skipped = 0
    overrun = None

    try:
        for match in registry.outlink.finditer(text):
            # Cooperative: a single slow match attempt can still overshoot
            if clock() - start >= budget:
                overrun = budget_ms
                break
            matches += 1

            raw = match.group(1)
            if raw is None:
                skipped += 1
                continue
            try:
                url = validate_url(resolve_path(base, raw, registry))
            except ValueError as exc:
                log.debug("[SKIP] failed URL parse '%s' against '%s': %s", raw, base, exc)
                skipped += 1
                continue

            try:
                outlinks.append(Outlink(url, anchor))
            except ValueError as exc:
                log.warning("[SKIP] Invalid outlink '%s': %s", url, exc)
                skipped += 1
                continue
            log.debug("[LINK] %s (base %s)", url, base)
    except Exception:
        log.exception("[ERR] Outlink scan failed for %s", base)

    log_scan_summary(base, matches, len(outlinks), skipped, overrun)
    return outlinks
