"""Navigation bar chrome for the top and bottom of the page."""

from serialized_form.config import NAVIGATION_ENTRIES
from serialized_form.models.node import DocumentNode, Role, Style
from serialized_form.protocols import MessagesProtocol


class NavigationBar:
    """Build the navigation bar shown in the page header and footer.

    The entry without a target is the current page; it is highlighted instead of linked.
    """

    def __init__(
        self,
        messages: MessagesProtocol,
        *,
        entries: list[tuple[str, str | None]] | None = None,
        user_header: str | None = None,
        user_footer: str | None = None,
    ) -> None:
        self._messages = messages
        self._entries = NAVIGATION_ENTRIES if entries is None else entries
        self.user_header = user_header
        self.user_footer = user_footer

    def navigation_content(self, *, header: bool) -> DocumentNode:
        nav = DocumentNode(Role.NAVIGATION, anchor="navbar.top" if header else "navbar.bottom")
        items = DocumentNode(Role.LIST).add_style(Style.NAV_LIST)
        for key, target in self._entries:
            label = self._messages.get_text(key)
            item = DocumentNode(Role.LIST_ITEM)
            if target is None:
                item.add_style(Style.NAV_BAR_CELL).append(label)
            else:
                item.append(DocumentNode(Role.LINK, href=target).append(label))
            items.append(item)
        nav.append(items)

        user_text = self.user_header if header else self.user_footer
        if user_text:
            nav.append(DocumentNode(Role.DIVISION).add_style(Style.ABOUT_LANGUAGE).append(user_text))
        return nav
