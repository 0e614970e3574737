"""Tree navigation: anchors, breadcrumbs, outlines."""

from collections import Counter
from dataclasses import dataclass

from serialized_form.models.node import DocumentNode, Role


@dataclass(frozen=True)
class OutlineEntry:
    """A heading found in the page, with the anchor of its nearest anchored ancestor."""

    level: int
    text: str
    anchor: str | None = None


def find_by_anchor(root: DocumentNode, anchor: str) -> DocumentNode | None:
    """Return the first node in document order carrying the anchor."""
    for node in root.iter_tree():
        if node.anchor == anchor:
            return node
    return None


def find_all(root: DocumentNode, role: Role) -> tuple[DocumentNode, ...]:
    """Return all nodes of a role in document order."""
    return tuple(node for node in root.iter_tree() if node.role == role)


def get_breadcrumbs(node: DocumentNode) -> tuple[DocumentNode, ...]:
    """Get ancestors of a node from the root down to its immediate parent."""
    return tuple(reversed(list(node.ancestors())))


def duplicate_anchors(root: DocumentNode) -> list[str]:
    """Return anchors that occur more than once, sorted."""
    counts = Counter(node.anchor for node in root.iter_tree() if node.anchor is not None)
    return sorted(anchor for anchor, count in counts.items() if count > 1)


def outline(root: DocumentNode) -> tuple[OutlineEntry, ...]:
    """List the headings of a tree in document order."""
    entries: list[OutlineEntry] = []
    for node in root.iter_tree():
        if node.role != Role.HEADING:
            continue
        anchor = node.anchor
        if anchor is None:
            anchor = next((a.anchor for a in node.ancestors() if a.anchor is not None), None)
        entries.append(OutlineEntry(level=node.level or 0, text=node.text(), anchor=anchor))
    return tuple(entries)
