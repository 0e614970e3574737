"""Class header and serial UID blocks of the Serialized Form page."""

from collections import deque

from loguru import logger

from serialized_form.config import (
    CLASS_HEADING,
    MSG_EXTENDS_IMPLEMENTS_SERIALIZABLE,
    MSG_IMPLEMENTS_SERIALIZABLE,
)
from serialized_form.core.visibility import VisibilityOracle
from serialized_form.errors import ContractViolation
from serialized_form.models.node import (
    ClassDescriptor,
    DocumentNode,
    LinkKind,
    Role,
    Style,
)
from serialized_form.protocols import (
    ConfigurationProtocol,
    LinkResolverProtocol,
    MessagesProtocol,
)


class ClassSectionBuilder:
    """Build the heading block that opens each serializable class."""

    def __init__(
        self,
        oracle: VisibilityOracle,
        configuration: ConfigurationProtocol,
        links: LinkResolverProtocol,
        messages: MessagesProtocol,
    ) -> None:
        self._oracle = oracle
        self._configuration = configuration
        self._links = links
        self._messages = messages

    def class_link(self, cls: ClassDescriptor) -> DocumentNode | str:
        """Link to the class if it is documented, otherwise its qualified name."""
        if self._oracle.is_visible(cls):
            return self._links.resolve_hyperlink(
                cls, LinkKind.DEFAULT, label=self._configuration.display_name(cls)
            )
        return cls.qualified_name

    def superclass_link(self, cls: ClassDescriptor) -> DocumentNode | str | None:
        """Link to the superclass's serialized form, judged by the superclass's own visibility."""
        superclass = cls.superclass
        if superclass is None:
            return None
        if self._oracle.is_visible(superclass):
            return self._links.resolve_hyperlink(superclass, LinkKind.SERIALIZED_FORM)
        return superclass.qualified_name

    def build_class_header(self, cls: ClassDescriptor) -> DocumentNode:
        """Return a block-list item holding the class heading, anchored at the qualified name.

        Raises:
            ContractViolation: If no class is given.
            SuperclassCycleError: If the superclass chain loops.
        """
        if cls is None:
            msg = "build_class_header() needs a class descriptor, got None"
            raise ContractViolation(msg)
        # Exhaust the chain so a looping hierarchy fails before any node is built.
        deque(cls.iter_superclasses(), maxlen=0)

        class_link = self.class_link(cls)
        superclass_link = self.superclass_link(cls)
        if superclass_link is None:
            phrase = self._messages.get_content(MSG_IMPLEMENTS_SERIALIZABLE, class_link)
        else:
            phrase = self._messages.get_content(
                MSG_EXTENDS_IMPLEMENTS_SERIALIZABLE, class_link, superclass_link
            )

        heading = DocumentNode(Role.HEADING, level=CLASS_HEADING).append(*phrase)
        item = DocumentNode(Role.LIST_ITEM, anchor=cls.qualified_name)
        item.add_style(Style.BLOCK_LIST)
        logger.debug("Class header built for {}", cls.qualified_name)
        return item.append(heading)


def serial_uid_block() -> DocumentNode:
    """Return an empty name/value list for serial UID entries."""
    return DocumentNode(Role.DEFINITION_LIST).add_style(Style.NAME_VALUE)


def add_serial_uid(block: DocumentNode, label: str, value: str) -> None:
    """Append one label/value pair to a serial UID block, after any existing pairs."""
    block.append(
        DocumentNode(Role.DEFINITION_TERM).append(label),
        DocumentNode(Role.DEFINITION_VALUE).append(value),
    )
