"""Safe rendering of the restricted Markdown dialect used for resume content.

Two passes:
1. Parse Markdown to HTML with raw HTML passthrough disabled, then read that
   HTML into a generic BeautifulSoup tree.
2. Filter the tree into ``SanitizedNode`` objects against an allow-list of
   tags, attributes and URL schemes.

Dropped content is a policy decision, not an error: it is only logged at debug.
"""

from typing import ClassVar

import markdown
from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from resumekit.logging.logger import Log
from resumekit.sanitizer.models import SanitizedNode
from resumekit.sanitizer.renderer import render_nodes
from resumekit.sanitizer.urls import DEFAULT_BASE_URL, is_safe_url, normalize_url


class ContentSanitizer:
    """Turns semi-trusted Markdown into a safe display tree."""

    DROPPED_TAGS: ClassVar[frozenset[str]] = frozenset(
        {"script", "style", "iframe", "object", "embed"}
    )
    ALLOWED_TAGS: ClassVar[frozenset[str]] = frozenset(
        {
            "p", "h1", "h2", "h3", "h4", "h5", "h6",
            "ul", "ol", "li", "em", "strong", "code", "pre",
            "blockquote", "hr", "br", "a", "img",
        }
    )
    LINK_ATTRS: ClassVar[tuple[str, ...]] = ("href", "title")
    IMAGE_ATTRS: ClassVar[tuple[str, ...]] = ("src", "alt", "title")

    def __init__(self, base_url: str = DEFAULT_BASE_URL) -> None:
        self._base_url = base_url

    def sanitize(self, content: object) -> list[SanitizedNode]:
        """Build the safe display tree. Non-string or empty input yields ``[]``."""
        if not isinstance(content, str) or not content:
            return []
        return self.filter_tree(self.parse(content))

    def render_html(self, content: object) -> str:
        return render_nodes(self.sanitize(content))

    def parse(self, content: str) -> BeautifulSoup:
        """Parse Markdown into a generic tree; literal markup stays text."""
        md = markdown.Markdown()
        md.preprocessors.deregister("html_block")
        md.inlinePatterns.deregister("html")
        return BeautifulSoup(md.convert(content), "html.parser")

    def filter_tree(self, root: Tag) -> list[SanitizedNode]:
        return self._filter_children(root)

    def _filter_children(self, parent: Tag) -> list[SanitizedNode]:
        nodes: list[SanitizedNode] = []
        for child in parent.children:
            nodes.extend(self._filter(child))
        return nodes

    def _filter(self, element: PageElement) -> list[SanitizedNode]:
        if isinstance(element, NavigableString):
            # Comments, CDATA, doctypes and processing instructions.
            if isinstance(element, PreformattedString):
                return []
            return [SanitizedNode(tag=None, text=str(element))]
        if not isinstance(element, Tag):
            return []

        name = element.name.lower()
        if name in self.DROPPED_TAGS:
            Log.debug(f"Sanitizer dropped <{name}> element")
            return []
        if name == "a":
            return self._filter_link(element)
        if name == "img":
            return self._filter_image(element)

        children = self._filter_children(element)
        if name not in self.ALLOWED_TAGS:
            return children
        return [SanitizedNode(tag=name, children=tuple(children))]

    def _filter_link(self, element: Tag) -> list[SanitizedNode]:
        children = self._filter_children(element)
        href = self._attr(element, "href")
        if not is_safe_url(href, self._base_url):
            Log.debug("Sanitizer unwrapped link with unsafe target")
            return children
        attrs = self._copy_attrs(element, self.LINK_ATTRS)
        attrs["target"] = "_blank"
        attrs["rel"] = "noopener noreferrer"
        return [SanitizedNode(tag="a", attrs=attrs, children=tuple(children), safe_url=True)]

    def _filter_image(self, element: Tag) -> list[SanitizedNode]:
        src = self._attr(element, "src")
        if not is_safe_url(src, self._base_url):
            Log.debug("Sanitizer dropped image with unsafe source")
            return []
        attrs = self._copy_attrs(element, self.IMAGE_ATTRS)
        attrs.setdefault("alt", "")
        return [SanitizedNode(tag="img", attrs=attrs, safe_url=True)]

    def _copy_attrs(self, element: Tag, names: tuple[str, ...]) -> dict[str, str]:
        attrs: dict[str, str] = {}
        for name in names:
            value = self._attr(element, name)
            if value is None:
                continue
            attrs[name] = normalize_url(value) if name in ("href", "src") else value
        return attrs

    @staticmethod
    def _attr(element: Tag, name: str) -> str | None:
        value = element.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value
