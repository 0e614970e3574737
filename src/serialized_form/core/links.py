"""Relative hyperlinks between pages of the documentation set."""

from serialized_form.config import SERIALIZED_FORM_FILENAME
from serialized_form.models.node import ClassDescriptor, DocumentNode, LinkKind, Role


class RelativeLinkResolver:
    """Resolve links relative to the documentation root.

    Class pages live at ``pkg/path/Name.html``; serialized form links point at
    the class's anchor on the Serialized Form page.
    """

    def __init__(self, *, page_filename: str = SERIALIZED_FORM_FILENAME) -> None:
        self.page_filename = page_filename

    def class_path(self, cls: ClassDescriptor) -> str:
        package = cls.package_name
        if not package:
            return f"{cls.simple_name}.html"
        return f"{package.replace('.', '/')}/{cls.simple_name}.html"

    def resolve_hyperlink(
        self,
        cls: ClassDescriptor,
        kind: LinkKind,
        *,
        label: str | None = None,
    ) -> DocumentNode:
        if kind is LinkKind.SERIALIZED_FORM:
            href = f"{self.page_filename}#{cls.qualified_name}"
        else:
            href = self.class_path(cls)
        return DocumentNode(Role.LINK, href=href).append(label or cls.simple_name)
