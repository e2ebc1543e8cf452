"""
Classifier that tags org-mode source lines with a kind and an indentation depth.
"""

import re

from orgtextile.org_line import OrgLine
from orgtextile.org_line_kind import OrgLineKind


class OrgLineClassifier:
    """
    Stateless classifier for individual org-mode lines.

    Each line is examined in isolation; nothing about earlier lines is remembered.
    """

    def __init__(self, tab_size: int = 8) -> None:
        """
        Initialize the classifier with regex patterns for org-mode line types.

        Args:
            tab_size: Column width used when expanding tabs to measure indentation
        """
        self._tab_size = tab_size

        self._metadata_pattern = re.compile(r'^\s*#\+\S+')
        self._comment_pattern = re.compile(r'^\s*#(?:\s(.*))?$')
        self._heading_pattern = re.compile(r'^(\*+)\s+(.*?)\s*$')
        self._table_separator_pattern = re.compile(r'^\s*\|-')
        self._table_row_pattern = re.compile(r'^\s*\|')
        self._horizontal_rule_pattern = re.compile(r'^\s*-{5,}\s*$')
        self._unordered_list_pattern = re.compile(r'^(\s*)([-+])\s+(.*?)\s*$')
        self._indented_star_list_pattern = re.compile(r'^(\s+)(\*)\s+(.*?)\s*$')
        self._ordered_list_pattern = re.compile(r'^(\s*)(\d+)[.)]\s+(.*?)\s*$')

    def classify(self, line: str) -> OrgLine:
        """
        Identify the type of an org-mode line.

        Args:
            line: The line to identify, with or without its line terminator

        Returns:
            The classified line
        """
        raw = line.rstrip('\r\n')
        expanded = raw.expandtabs(self._tab_size)
        content = expanded.strip()
        indent = len(expanded) - len(expanded.lstrip())

        if not content:
            return OrgLine(OrgLineKind.BLANK, 0, "", raw)

        if self._metadata_pattern.match(expanded):
            return OrgLine(OrgLineKind.METADATA, indent, content, raw)

        comment_match = self._comment_pattern.match(expanded)
        if comment_match:
            return OrgLine(OrgLineKind.COMMENT, indent, (comment_match.group(1) or "").strip(), raw)

        heading_match = self._heading_pattern.match(expanded)
        if heading_match:
            level = len(heading_match.group(1))
            return OrgLine(OrgLineKind.HEADING, 0, heading_match.group(2), raw, level)

        if self._table_separator_pattern.match(expanded):
            return OrgLine(OrgLineKind.TABLE_SEPARATOR, indent, content, raw)

        if self._table_row_pattern.match(expanded):
            return OrgLine(OrgLineKind.TABLE_ROW, indent, content, raw)

        if self._horizontal_rule_pattern.match(expanded):
            return OrgLine(OrgLineKind.HORIZONTAL_RULE, indent, content, raw)

        unordered_match = (
            self._unordered_list_pattern.match(expanded) or
            self._indented_star_list_pattern.match(expanded)
        )
        if unordered_match:
            return OrgLine(OrgLineKind.UNORDERED_LIST, indent, unordered_match.group(3), raw)

        ordered_match = self._ordered_list_pattern.match(expanded)
        if ordered_match:
            return OrgLine(OrgLineKind.ORDERED_LIST, indent, ordered_match.group(3), raw)

        return OrgLine(OrgLineKind.PARAGRAPH, indent, content, raw)
