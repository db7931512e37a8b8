"""
The outlink record produced by every extractor.
"""

from dataclasses import dataclass

from js_outlinks.utils.url import validate_url


@dataclass(frozen=True)
class Outlink:
    """An absolute link target plus its anchor text.

    Construction fails with ``ValueError`` when *to_url* does not pass
    :func:`~js_outlinks.utils.url.validate_url`.
    """

    to_url: str
    anchor: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.to_url, str):
            raise ValueError(f"outlink URL must be a string, got {type(self.to_url).__name__}")
        if not isinstance(self.anchor, str):
            raise ValueError(f"anchor must be a string, got {type(self.anchor).__name__}")
        validate_url(self.to_url)

    def __str__(self) -> str:
        return f"toUrl: {self.to_url} anchor: {self.anchor}"
