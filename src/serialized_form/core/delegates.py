"""Per-class writers for serializable fields and serialization methods."""

from enum import StrEnum

from serialized_form.config import (
    CLASS_HEADING,
    MEMBER_HEADING,
    MSG_SERIALIZATION_METHODS,
    MSG_SERIALIZED_FIELDS,
)
from serialized_form.core.visibility import VisibilityOracle
from serialized_form.models.node import (
    ClassDescriptor,
    DocumentNode,
    LinkKind,
    Role,
    SerialField,
    SerialMethod,
    Style,
)
from serialized_form.protocols import LinkResolverProtocol, MessagesProtocol


class MemberKind(StrEnum):
    """The fixed set of member writers."""

    FIELD = "field"
    METHOD = "method"


def _member_item(name: str, signature: list[DocumentNode | str], description: str) -> DocumentNode:
    item = DocumentNode(Role.LIST_ITEM).add_style(Style.BLOCK_LIST)
    item.append(DocumentNode(Role.HEADING, level=MEMBER_HEADING).append(name))
    item.append(
        DocumentNode(Role.PREFORMATTED).add_style(Style.MEMBER_SIGNATURE).append(*signature)
    )
    if description:
        item.append(DocumentNode(Role.DIVISION).add_style(Style.BLOCK).append(description))
    return item


def _titled_section(title: str, members: list[DocumentNode]) -> DocumentNode:
    section = DocumentNode(Role.SECTION)
    section.append(DocumentNode(Role.HEADING, level=CLASS_HEADING).append(title))
    member_list = DocumentNode(Role.LIST).add_style(Style.BLOCK_LIST)
    member_list.append(*members)
    return section.append(member_list)


class SerialFieldWriter:
    """Render the serializable fields of one class."""

    kind = MemberKind.FIELD

    def __init__(
        self,
        cls: ClassDescriptor,
        oracle: VisibilityOracle,
        links: LinkResolverProtocol,
        messages: MessagesProtocol,
    ) -> None:
        self.cls = cls
        self._oracle = oracle
        self._links = links
        self._messages = messages

    def field_type(self, field: SerialField) -> DocumentNode | str:
        """Link to the field's type when that type is documented, else its name."""
        if field.type is not None and self._oracle.is_visible(field.type):
            return self._links.resolve_hyperlink(field.type, LinkKind.DEFAULT, label=field.type_name)
        return field.type_name

    def build_member(self, field: SerialField) -> DocumentNode:
        return _member_item(field.name, [self.field_type(field), " ", field.name], field.description)

    def build_section(self) -> DocumentNode | None:
        """Return the "Serialized Fields" section, or None if the class declares none."""
        if not self.cls.fields:
            return None
        title = self._messages.get_text(MSG_SERIALIZED_FIELDS)
        return _titled_section(title, [self.build_member(f) for f in self.cls.fields])


class SerialMethodWriter:
    """Render the serialization methods of one class."""

    kind = MemberKind.METHOD

    def __init__(self, cls: ClassDescriptor, messages: MessagesProtocol) -> None:
        self.cls = cls
        self._messages = messages

    def build_member(self, method: SerialMethod) -> DocumentNode:
        return _member_item(method.name, [method.signature], method.description)

    def build_section(self) -> DocumentNode | None:
        """Return the "Serialization Methods" section, or None if the class declares none."""
        if not self.cls.methods:
            return None
        title = self._messages.get_text(MSG_SERIALIZATION_METHODS)
        return _titled_section(title, [self.build_member(m) for m in self.cls.methods])


class DelegateFactory:
    """Create member writers scoped to a single class.

    Every call returns a new writer; writers for different classes share no state.
    """

    def __init__(
        self,
        oracle: VisibilityOracle,
        links: LinkResolverProtocol,
        messages: MessagesProtocol,
    ) -> None:
        self._oracle = oracle
        self._links = links
        self._messages = messages

    def field_writer_for(self, cls: ClassDescriptor) -> SerialFieldWriter:
        return SerialFieldWriter(cls, self._oracle, self._links, self._messages)

    def method_writer_for(self, cls: ClassDescriptor) -> SerialMethodWriter:
        return SerialMethodWriter(cls, self._messages)

    def writer_for(
        self, cls: ClassDescriptor, kind: MemberKind
    ) -> SerialFieldWriter | SerialMethodWriter:
        if kind is MemberKind.FIELD:
            return self.field_writer_for(cls)
        if kind is MemberKind.METHOD:
            return self.method_writer_for(cls)
        msg = f"Unknown member kind: {kind!r}"
        raise ValueError(msg)
