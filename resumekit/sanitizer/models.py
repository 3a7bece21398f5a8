from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class SanitizedNode:
    """One node of the safe display tree.

    Text nodes have ``tag`` set to ``None``. Link and image nodes carry
    ``safe_url=True``; unsafe ones never make it into the tree.
    """

    tag: str | None
    text: str = ""
    attrs: dict[str, str] = field(default_factory=dict)
    children: tuple["SanitizedNode", ...] = ()
    safe_url: bool | None = None

    @property
    def is_text(self) -> bool:
        return self.tag is None

    def text_content(self) -> str:
        if self.tag is None:
            return self.text
        return "".join(child.text_content() for child in self.children)

    def iter_nodes(self) -> Iterator["SanitizedNode"]:
        yield self
        for child in self.children:
            yield from child.iter_nodes()
