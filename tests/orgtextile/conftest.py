"""Shared fixtures and utilities for orgtextile tests."""

from typing import List

import pytest

from orgtextile.org_line import OrgLine
from orgtextile.org_line_kind import OrgLineKind
from orgtextile.org_output_buffer import OrgOutputBuffer


class RecordingSink:
    """Sink that records every block written to it."""

    def __init__(self) -> None:
        self.writes: List[str] = []

    def __call__(self, block: str) -> None:
        self.writes.append(block)

    def text(self) -> str:
        """Get everything written so far as one string."""
        return ''.join(self.writes)


class OrgTestHelpers:
    """Helper utilities for output buffer testing."""

    @staticmethod
    def blank() -> OrgLine:
        """Create a blank line."""
        return OrgLine(OrgLineKind.BLANK, 0)

    @staticmethod
    def paragraph(indent: int = 0, text: str = "") -> OrgLine:
        """Create a paragraph line."""
        return OrgLine(OrgLineKind.PARAGRAPH, indent, text)

    @staticmethod
    def ordered(indent: int = 0, text: str = "") -> OrgLine:
        """Create an ordered list item line."""
        return OrgLine(OrgLineKind.ORDERED_LIST, indent, text)

    @staticmethod
    def unordered(indent: int = 0, text: str = "") -> OrgLine:
        """Create an unordered list item line."""
        return OrgLine(OrgLineKind.UNORDERED_LIST, indent, text)

    @staticmethod
    def heading(text: str = "", level: int = 1) -> OrgLine:
        """Create a heading line."""
        return OrgLine(OrgLineKind.HEADING, 0, text, level=level)

    @staticmethod
    def feed(output_buffer: OrgOutputBuffer, *lines: OrgLine) -> None:
        """Prepare and append each line in turn, as a driver would."""
        for line in lines:
            output_buffer.prepare(line)
            output_buffer.append(line.text)


@pytest.fixture
def sink():
    """Provide a recording sink."""
    return RecordingSink()


@pytest.fixture
def output_buffer(sink):
    """Provide an output buffer bound to the recording sink."""
    return OrgOutputBuffer(sink)


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return OrgTestHelpers
