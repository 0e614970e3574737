"""Domain models for the Serialized Form page."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum

from serialized_form.errors import ContractViolation, SuperclassCycleError


class Role(StrEnum):
    """Semantic kind of a document node."""

    BODY = "body"
    HEADER = "header"
    MAIN = "main"
    FOOTER = "footer"
    NAVIGATION = "navigation"
    SECTION = "section"
    LIST = "list"
    LIST_ITEM = "list-item"
    DEFINITION_LIST = "definition-list"
    DEFINITION_TERM = "definition-term"
    DEFINITION_VALUE = "definition-value"
    HEADING = "heading"
    DIVISION = "division"
    LINK = "link"
    PREFORMATTED = "preformatted"


class Style(StrEnum):
    """Style labels used by this package. The renderer treats them as opaque."""

    BLOCK_LIST = "blockList"
    NAME_VALUE = "nameValue"
    HEADER = "header"
    TITLE = "title"
    SERIALIZED_FORM_CONTAINER = "serializedFormContainer"
    MEMBER_SIGNATURE = "memberSignature"
    BLOCK = "block"
    NAV_LIST = "navList"
    NAV_BAR_CELL = "navBarCell1Rev"
    ABOUT_LANGUAGE = "aboutLanguage"


class LinkKind(StrEnum):
    """What a resolved hyperlink should point at."""

    DEFAULT = "default"
    SERIALIZED_FORM = "serialized-form"


@dataclass(eq=False)
class DocumentNode:
    """A style-tagged node of the output document tree.

    Children and styles are append-only. A child node belongs to exactly one
    parent: appending a node that is already attached somewhere raises
    ContractViolation. Once ``freeze()`` is called the whole subtree rejects
    further changes, attribute assignment included.
    """

    role: Role
    anchor: str | None = None
    href: str | None = None
    level: int | None = None
    _styles: list[str] = field(default_factory=list, init=False, repr=False)
    _children: list[DocumentNode | str] = field(default_factory=list, init=False, repr=False)
    _parent: DocumentNode | None = field(default=None, init=False, repr=False)
    _frozen: bool = field(default=False, init=False, repr=False)

    def __setattr__(self, name: str, value: object) -> None:
        if getattr(self, "_frozen", False):
            msg = f"Cannot set {name!r} on {self.role} node after the page was handed off"
            raise ContractViolation(msg)
        super().__setattr__(name, value)

    @property
    def styles(self) -> tuple[str, ...]:
        return tuple(self._styles)

    @property
    def children(self) -> tuple[DocumentNode | str, ...]:
        return tuple(self._children)

    @property
    def parent(self) -> DocumentNode | None:
        return self._parent

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def add_style(self, style: str) -> DocumentNode:
        """Tag the node with a style label and return it for chaining."""
        self._check_mutable()
        self._styles.append(str(style))
        return self

    def append(self, *children: DocumentNode | str) -> DocumentNode:
        """Append children in order and return self for chaining."""
        self._check_mutable()
        for child in children:
            if isinstance(child, DocumentNode):
                if child is self or any(a is child for a in self.ancestors()):
                    msg = f"Appending {child.role} node would create a cycle"
                    raise ContractViolation(msg)
                if child._parent is not None:
                    msg = f"{child.role} node is already attached to a {child._parent.role} node"
                    raise ContractViolation(msg)
                if child._frozen:
                    msg = f"Cannot attach frozen {child.role} node"
                    raise ContractViolation(msg)
                child._parent = self
            elif not isinstance(child, str):
                msg = f"Expected DocumentNode or str, got {type(child).__name__}"
                raise TypeError(msg)
            self._children.append(child)
        return self

    def ancestors(self) -> Iterator[DocumentNode]:
        """Yield the parent chain, nearest first."""
        node = self._parent
        while node is not None:
            yield node
            node = node._parent

    def iter_tree(self) -> Iterator[DocumentNode]:
        """Yield this node and all descendant nodes in depth-first pre-order."""
        stack: list[DocumentNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(c for c in reversed(node._children) if isinstance(c, DocumentNode))

    def text(self) -> str:
        """Concatenated text of the subtree, in document order."""
        parts: list[str] = []
        stack: list[DocumentNode | str] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            else:
                stack.extend(reversed(item._children))
        return "".join(parts)

    def freeze(self) -> None:
        """Make the whole subtree immutable."""
        for node in self.iter_tree():
            if not node._frozen:
                node._frozen = True

    def _check_mutable(self) -> None:
        if self._frozen:
            msg = f"Cannot modify {self.role} node after the page was handed off"
            raise ContractViolation(msg)


@dataclass(frozen=True)
class SerialField:
    """A field written by default serialization."""

    name: str
    type_name: str
    type: ClassDescriptor | None = None
    description: str = ""


@dataclass(frozen=True)
class SerialMethod:
    """A method taking part in serialization (readObject, writeReplace, ...)."""

    name: str
    signature: str
    description: str = ""


@dataclass(frozen=True)
class ClassDescriptor:
    """A serializable class being documented.

    Identity is the qualified name plus the symbol handle, which defaults to the
    qualified name. The superclass chain and the member lists do not take part in
    equality or hashing.
    """

    qualified_name: str
    superclass: ClassDescriptor | None = field(default=None, compare=False, repr=False)
    symbol: str | None = None
    serial_version_uid: str | None = field(default=None, compare=False)
    fields: tuple[SerialField, ...] = field(default=(), compare=False, repr=False)
    methods: tuple[SerialMethod, ...] = field(default=(), compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.symbol:
            object.__setattr__(self, "symbol", self.qualified_name)

    @property
    def handle(self) -> str:
        return self.symbol or self.qualified_name

    @property
    def package_name(self) -> str:
        package, _, _ = self.qualified_name.rpartition(".")
        return package

    @property
    def simple_name(self) -> str:
        return self.qualified_name.rpartition(".")[2]

    def iter_superclasses(self) -> Iterator[ClassDescriptor]:
        """Yield superclasses nearest first.

        Raises:
            SuperclassCycleError: If the chain revisits a class.
        """
        seen = {id(self)}
        current = self.superclass
        while current is not None:
            if id(current) in seen:
                msg = f"Superclass chain of {self.qualified_name!r} loops at {current.qualified_name!r}"
                raise SuperclassCycleError(msg)
            seen.add(id(current))
            yield current
            current = current.superclass
