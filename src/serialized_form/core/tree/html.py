"""Render document trees as HTML."""

import html
import io

from serialized_form.models.node import DocumentNode, Role

_TAGS: dict[Role, str] = {
    Role.BODY: "body",
    Role.HEADER: "header",
    Role.MAIN: "main",
    Role.FOOTER: "footer",
    Role.NAVIGATION: "nav",
    Role.SECTION: "section",
    Role.LIST: "ul",
    Role.LIST_ITEM: "li",
    Role.DEFINITION_LIST: "dl",
    Role.DEFINITION_TERM: "dt",
    Role.DEFINITION_VALUE: "dd",
    Role.DIVISION: "div",
    Role.LINK: "a",
    Role.PREFORMATTED: "pre",
}

# Elements rendered without a line break after the closing tag.
_INLINE_TAGS = {"a"}


def _tag_for(node: DocumentNode) -> str:
    if node.role == Role.HEADING:
        return f"h{min(max(node.level or 1, 1), 6)}"
    return _TAGS[node.role]


def _start_tag(node: DocumentNode, tag: str) -> str:
    attrs: list[str] = []
    if node.anchor is not None:
        attrs.append(f'id="{html.escape(node.anchor)}"')
    if node.styles:
        attrs.append(f'class="{html.escape(" ".join(node.styles))}"')
    if node.href is not None:
        attrs.append(f'href="{html.escape(node.href)}"')
    return f"<{tag}{''.join(' ' + a for a in attrs)}>"


def render_tree_as_html(root: DocumentNode) -> str:
    """Render a node and its descendants as an HTML fragment.

    Args:
        root: The node to start rendering from.

    Returns:
        HTML text; block elements end with a newline.
    """
    out = io.StringIO()
    # Work items are nodes to open, text to escape, or closing tags (tag, is_inline).
    stack: list[DocumentNode | str | tuple[str, bool]] = [root]
    while stack:
        item = stack.pop()
        if isinstance(item, tuple):
            tag, inline = item
            out.write(f"</{tag}>" if inline else f"</{tag}>\n")
        elif isinstance(item, str):
            out.write(html.escape(item, quote=False))
        else:
            tag = _tag_for(item)
            out.write(_start_tag(item, tag))
            stack.append((tag, tag in _INLINE_TAGS))
            stack.extend(reversed(item.children))
    return out.getvalue()


def render_document_as_html(body: DocumentNode, *, title: str, lang: str = "en") -> str:
    """Render a page body as a complete HTML document."""
    out = io.StringIO()
    out.write("<!DOCTYPE html>\n")
    out.write(f'<html lang="{html.escape(lang)}">\n')
    out.write("<head>\n")
    out.write('<meta charset="utf-8">\n')
    out.write(f"<title>{html.escape(title, quote=False)}</title>\n")
    out.write("</head>\n")
    out.write(render_tree_as_html(body))
    out.write("</html>\n")
    return out.getvalue()
