"""Classification tags for org-mode source lines."""

from enum import Enum


class OrgLineKind(Enum):
    """Enumeration of possible line (and block) kinds."""
    START = "start"
    BLANK = "blank"
    PARAGRAPH = "paragraph"
    ORDERED_LIST = "ordered_list"
    UNORDERED_LIST = "unordered_list"
    HEADING = "heading"
    TABLE_ROW = "table_row"
    TABLE_SEPARATOR = "table_separator"
    COMMENT = "comment"
    METADATA = "metadata"
    HORIZONTAL_RULE = "horizontal_rule"

    def is_list(self) -> bool:
        """Return True if this kind is an ordered or unordered list item."""
        return self in (OrgLineKind.ORDERED_LIST, OrgLineKind.UNORDERED_LIST)
