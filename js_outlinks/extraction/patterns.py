"""
Compiled pattern registry shared by every extraction call.
"""

import re
from dataclasses import dataclass

from js_outlinks.config import ExtractorConfig
from js_outlinks.errors import ConfigurationError
from js_outlinks.utils.log import log


def _compile(name: str, pattern: str, flags: int) -> re.Pattern[str]:
    try:
        return re.compile(pattern, flags)
    except re.error as exc:
        raise ConfigurationError(f"malformed {name} pattern {pattern!r}: {exc}") from exc


@dataclass(frozen=True)
class PatternRegistry:
    """The eligibility, absolute-URL and outlink patterns.

    Build with :meth:`from_config`.  Instances are immutable so one
    registry can serve concurrent extraction calls.
    """

    file_include: re.Pattern[str]
    absolute_url: re.Pattern[str]
    outlink: re.Pattern[str] | None
    time_budget_ms: int
    max_tree_depth: int

    @classmethod
    def from_config(cls, config: ExtractorConfig) -> "PatternRegistry":
        """Compile every pattern in *config*.

        Raises ``ConfigurationError`` on malformed syntax, or when the
        outlink pattern has no capturing group to take the candidate from.
        """
        file_include = _compile(
            "file include", config.file_include_pattern, re.DOTALL)
        absolute_url = _compile(
            "absolute URL", config.absolute_url_pattern, re.IGNORECASE | re.DOTALL)

        outlink = None
        if config.outlink_pattern and config.outlink_pattern.strip():
            outlink = _compile("outlink", config.outlink_pattern, re.MULTILINE)
            if outlink.groups < 1:
                raise ConfigurationError(
                    f"outlink pattern {config.outlink_pattern!r} has no capturing group"
                )
        else:
            log.info("[CONFIG] No outlink pattern configured – extraction disabled")

        return cls(
            file_include=file_include,
            absolute_url=absolute_url,
            outlink=outlink,
            time_budget_ms=config.time_budget_ms,
            max_tree_depth=config.max_tree_depth,
        )

    @property
    def enabled(self) -> bool:
        return self.outlink is not None

    def is_eligible(self, url: str) -> bool:
        """True when *url* names a resource this engine should handle."""
        return self.file_include.fullmatch(url) is not None

    def is_absolute(self, path: str) -> bool:
        return self.absolute_url.fullmatch(path) is not None
