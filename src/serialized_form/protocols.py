"""Protocols for the collaborators the page assembler depends on."""

from collections.abc import Set
from typing import Protocol, runtime_checkable

from serialized_form.models.node import ClassDescriptor, DocumentNode, LinkKind


@runtime_checkable
class ConfigurationProtocol(Protocol):
    """Facts about the current documentation run."""

    def included_types(self) -> Set[ClassDescriptor]:
        """Return every type eligible for documentation in this run."""
        ...

    def is_generated_doc(self, cls: ClassDescriptor) -> bool:
        """Return True if documentation output was actually produced for the type."""
        ...

    def display_name(self, cls: ClassDescriptor) -> str:
        """Return the label to show for a visible class."""
        ...


@runtime_checkable
class LinkResolverProtocol(Protocol):
    """Builds clickable references to documented classes."""

    def resolve_hyperlink(
        self,
        cls: ClassDescriptor,
        kind: LinkKind,
        *,
        label: str | None = None,
    ) -> DocumentNode:
        """Return a fresh link node pointing at the class."""
        ...


@runtime_checkable
class NavigationProtocol(Protocol):
    """Builds the navigation chrome for the top and bottom of the page."""

    def navigation_content(self, *, header: bool) -> DocumentNode:
        """Return a fresh navigation node for the header (True) or footer (False)."""
        ...


@runtime_checkable
class MessagesProtocol(Protocol):
    """Localized message lookup."""

    def get_text(self, key: str) -> str:
        """Return the plain text of a message."""
        ...

    def get_content(self, key: str, *args: DocumentNode | str) -> tuple[DocumentNode | str, ...]:
        """Return the message with each placeholder replaced by the matching argument."""
        ...


@runtime_checkable
class PrinterProtocol(Protocol):
    """Receives the finished page. May raise OSError."""

    def print_document(self, body: DocumentNode, *, title: str) -> None:
        """Serialize and output the page."""
        ...
