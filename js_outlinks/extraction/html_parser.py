"""
Document walk over a BeautifulSoup tree, feeding every piece of inline
JavaScript to the outlink extractor.
"""

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PageElement

from js_outlinks.errors import TreeTooDeepError
from js_outlinks.extraction.javascript import extract_js_links
from js_outlinks.extraction.patterns import PatternRegistry
from js_outlinks.outlink import Outlink

try:
    import lxml  # noqa: F401
    _BS4_PARSER = "lxml"
except ImportError:
    _BS4_PARSER = "html.parser"


def parse_html(markup: str | bytes) -> BeautifulSoup:
    """Parse *markup* into the tree :func:`walk` expects."""
    return BeautifulSoup(markup, _BS4_PARSER)


def _node_text(node: PageElement) -> str:
    if isinstance(node, NavigableString):
        return str(node)
    if isinstance(node, Tag):
        return node.get_text()
    return ""


def _attr_value(value) -> str:
    # bs4 hands multi-valued attributes (class, rel, ...) back as lists
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return value or ""


def _script_links(tag: Tag, base: str, registry: PatternRegistry) -> list[Outlink]:
    script = "\n".join(_node_text(child) for child in tag.contents)
    return extract_js_links(script, "", base, registry)


def _attribute_links(tag: Tag, base: str, registry: PatternRegistry) -> list[Outlink]:
    """Links from ``on*`` event handlers and ``javascript:`` hrefs."""
    found: list[Outlink] = []
    for name, value in tag.attrs.items():
        lname = name.lower()
        value = _attr_value(value)
        if lname.startswith("on"):
            found.extend(extract_js_links(value, "", base, registry))
        elif lname == "href" and "javascript:" in value.lower():
            found.extend(extract_js_links(value, "", base, registry))
    return found


def walk(
    node: PageElement,
    base: str,
    registry: PatternRegistry,
    max_depth: int | None = None,
) -> list[Outlink]:
    """
    Collect outlinks from every ``<script>`` body, event-handler attribute
    and ``javascript:`` href under *node*, in document order.

    ``<script>`` children are consumed as one blob and not visited again.
    Raises ``TreeTooDeepError`` when the tree nests deeper than
    *max_depth* (default: the registry's limit).  The tree is only read.
    """
    if max_depth is None:
        max_depth = registry.max_tree_depth
    outlinks: list[Outlink] = []

    # Explicit stack: nesting depth never touches the interpreter's call stack
    pending: list[tuple[PageElement, int]] = [(node, 0)]
    while pending:
        current, depth = pending.pop()
        if depth > max_depth:
            raise TreeTooDeepError(depth, max_depth)

        if isinstance(current, Tag):
            if current.name.lower() == "script":
                if current.contents:
                    outlinks.extend(_script_links(current, base, registry))
                    # body already consumed as a whole
                    continue
            else:
                outlinks.extend(_attribute_links(current, base, registry))

        children = getattr(current, "contents", ())
        pending.extend((child, depth + 1) for child in reversed(children))

    return outlinks
