"""Assemble the document tree of the Serialized Form page."""

from enum import Enum

from loguru import logger

from serialized_form.config import MSG_PACKAGE, MSG_WINDOW_TITLE, PACKAGE_HEADING, PAGE_TITLE_HEADING
from serialized_form.core.delegates import DelegateFactory, SerialFieldWriter, SerialMethodWriter
from serialized_form.core.sections import ClassSectionBuilder, add_serial_uid, serial_uid_block
from serialized_form.core.tree.navigation import duplicate_anchors
from serialized_form.core.visibility import VisibilityOracle
from serialized_form.errors import ContractViolation, DocumentOutputFailure
from serialized_form.models.node import ClassDescriptor, DocumentNode, Role, Style
from serialized_form.protocols import (
    ConfigurationProtocol,
    LinkResolverProtocol,
    MessagesProtocol,
    NavigationProtocol,
    PrinterProtocol,
)


class PageState(Enum):
    CREATED = "created"
    HEADER_OPEN = "header-open"
    BODY_ACCUMULATING = "body-accumulating"
    FINALIZED = "finalized"


class PageAssembler:
    """Build one Serialized Form page and hand it to the printer.

    Callers go through a fixed sequence:

    - ``open_header(title)`` once;
    - build package and class containers with the constructor methods
      (``open_*``, ``build_*``), which never touch the page itself;
    - ``attach_serialized_content(tree)`` one or more times;
    - ``close_footer()`` once, then ``hand_off()`` once.

    The page body belongs to this assembler alone. Calling a mutator out of
    order, or anything that mutates after ``hand_off()``, raises ContractViolation.
    """

    def __init__(
        self,
        configuration: ConfigurationProtocol,
        *,
        links: LinkResolverProtocol,
        navigation: NavigationProtocol,
        messages: MessagesProtocol,
        printer: PrinterProtocol,
    ) -> None:
        self._navigation = navigation
        self._messages = messages
        self._printer = printer
        self.oracle = VisibilityOracle(configuration)
        self.sections = ClassSectionBuilder(self.oracle, configuration, links, messages)
        self.delegates = DelegateFactory(self.oracle, links, messages)

        self.state = PageState.CREATED
        self.window_title: str | None = None
        self._body: DocumentNode | None = None
        self._content: DocumentNode | None = None
        self._footer_closed = False
        self._attached = 0

    @property
    def body(self) -> DocumentNode:
        if self._body is None:
            msg = "Page body does not exist before open_header()"
            raise ContractViolation(msg)
        return self._body

    @property
    def content(self) -> DocumentNode:
        """The main region that collects attached serialized content."""
        if self._content is None:
            msg = "Page content does not exist before open_header()"
            raise ContractViolation(msg)
        return self._content

    def _require(self, *states: PageState, action: str) -> None:
        if self.state not in states:
            expected = " or ".join(s.value for s in states)
            msg = f"{action} is not allowed in state {self.state.value!r} (expected {expected})"
            raise ContractViolation(msg)

    def _transition(self, state: PageState) -> None:
        logger.debug("Page state: {} -> {}", self.state.value, state.value)
        self.state = state

    # ------------------------------------------------------------------
    # Page-level mutators
    # ------------------------------------------------------------------
    def open_header(self, title: str) -> DocumentNode:
        """Create the page body with its header chrome and title. Returns the body."""
        self._require(PageState.CREATED, action="open_header()")
        self.window_title = "".join(
            p if isinstance(p, str) else p.text()
            for p in self._messages.get_content(MSG_WINDOW_TITLE, title)
        )

        body = DocumentNode(Role.BODY)
        header = DocumentNode(Role.HEADER).append(self._navigation.navigation_content(header=True))
        body.append(header)

        heading = DocumentNode(Role.HEADING, level=PAGE_TITLE_HEADING).add_style(Style.TITLE)
        heading.append(title)
        content = DocumentNode(Role.MAIN).append(
            DocumentNode(Role.DIVISION).add_style(Style.HEADER).append(heading)
        )
        body.append(content)

        self._body = body
        self._content = content
        self._transition(PageState.HEADER_OPEN)
        return body

    def attach_serialized_content(self, tree: DocumentNode) -> DocumentNode:
        """Append a finished content tree to the page. Returns the content region."""
        self._require(
            PageState.HEADER_OPEN, PageState.BODY_ACCUMULATING, action="attach_serialized_content()"
        )
        if self._footer_closed:
            msg = "attach_serialized_content() is not allowed after close_footer()"
            raise ContractViolation(msg)
        container = DocumentNode(Role.DIVISION).add_style(Style.SERIALIZED_FORM_CONTAINER)
        container.append(tree)
        self.content.append(container)
        self._attached += 1
        if self.state is PageState.HEADER_OPEN:
            self._transition(PageState.BODY_ACCUMULATING)
        return self.content

    def close_footer(self) -> None:
        """Append the footer chrome. Allowed once, after content was attached."""
        self._require(PageState.BODY_ACCUMULATING, action="close_footer()")
        if self._footer_closed:
            msg = "close_footer() called twice"
            raise ContractViolation(msg)
        footer = DocumentNode(Role.FOOTER).append(self._navigation.navigation_content(header=False))
        self.body.append(footer)
        self._footer_closed = True

    def hand_off(self) -> DocumentNode:
        """Freeze the page and pass it to the printer, exactly once.

        Raises:
            ContractViolation: If the footer is missing or the page was already handed off.
            DocumentOutputFailure: If the printer fails with an OSError.
        """
        self._require(PageState.BODY_ACCUMULATING, action="hand_off()")
        if not self._footer_closed:
            msg = "hand_off() requires close_footer() first"
            raise ContractViolation(msg)

        body = self.body
        for anchor in duplicate_anchors(body):
            logger.warning("Anchor {!r} appears more than once on the page", anchor)
        body.freeze()
        self._transition(PageState.FINALIZED)

        title = self.window_title or ""
        try:
            self._printer.print_document(body, title=title)
        except OSError as e:
            msg = f"Cannot output page {title!r}: {e}"
            raise DocumentOutputFailure(msg, cause=e) from e
        logger.info("Handed off page {!r} with {} content block(s)", title, self._attached)
        return body

    # ------------------------------------------------------------------
    # Container constructors
    # ------------------------------------------------------------------
    def open_summaries_section(self) -> DocumentNode:
        return DocumentNode(Role.LIST).add_style(Style.BLOCK_LIST)

    def open_package_section(self) -> DocumentNode:
        return DocumentNode(Role.SECTION)

    def build_package_heading(self, package_name: str) -> DocumentNode:
        heading = DocumentNode(Role.HEADING, level=PACKAGE_HEADING)
        return heading.append(self._messages.get_text(MSG_PACKAGE), " ", package_name)

    def open_class_section(self) -> DocumentNode:
        return DocumentNode(Role.LIST).add_style(Style.BLOCK_LIST)

    def open_class_content(self) -> DocumentNode:
        return DocumentNode(Role.LIST).add_style(Style.BLOCK_LIST)

    def build_class_header(self, cls: ClassDescriptor) -> DocumentNode:
        return self.sections.build_class_header(cls)

    def serial_uid_block(self) -> DocumentNode:
        return serial_uid_block()

    def add_serial_uid(self, block: DocumentNode, label: str, value: str) -> None:
        add_serial_uid(block, label, value)

    def add_package_section(self, summaries: DocumentNode, package_section: DocumentNode) -> None:
        """Wrap a package section in a list item of the summaries list."""
        item = DocumentNode(Role.LIST_ITEM).add_style(Style.BLOCK_LIST)
        summaries.append(item.append(package_section))

    # ------------------------------------------------------------------
    # Queries and delegates
    # ------------------------------------------------------------------
    def is_visible_class(self, cls: ClassDescriptor) -> bool:
        return self.oracle.is_visible(cls)

    def field_writer_for(self, cls: ClassDescriptor) -> SerialFieldWriter:
        return self.delegates.field_writer_for(cls)

    def method_writer_for(self, cls: ClassDescriptor) -> SerialMethodWriter:
        return self.delegates.method_writer_for(cls)
