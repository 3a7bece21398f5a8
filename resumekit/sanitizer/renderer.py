import html

from resumekit.sanitizer.models import SanitizedNode

VOID_TAGS = frozenset({"br", "hr", "img"})


def render_nodes(nodes: list[SanitizedNode]) -> str:
    return "".join(render_node(node) for node in nodes)


def render_node(node: SanitizedNode) -> str:
    """Serialize a sanitized node, escaping every text and attribute value."""
    if node.tag is None:
        return html.escape(node.text, quote=False)
    attrs = "".join(
        f' {name}="{html.escape(value, quote=True)}"' for name, value in node.attrs.items()
    )
    if node.tag in VOID_TAGS:
        return f"<{node.tag}{attrs}>"
    return f"<{node.tag}{attrs}>{render_nodes(list(node.children))}</{node.tag}>"
