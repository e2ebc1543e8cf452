"""
Utility for converting org-mode text to Textile.

This module drives the line classifier and the output buffer: each source line
is classified, handed to the buffer so it can decide on block boundaries, and
then its text is accumulated with any list or heading marker it needs.
"""

import logging
from typing import Callable, Iterable, List

from orgtextile.org_line import OrgLine
from orgtextile.org_line_classifier import OrgLineClassifier
from orgtextile.org_line_kind import OrgLineKind
from orgtextile.org_output_buffer import OrgOutputBuffer, identity_transform
from orgtextile.org_textile_settings import OrgTextileSettings
from orgtextile.textile_substitution import TextileSubstitution


class OrgTextileConverter:
    """Converts org-mode text into Textile markup."""

    def __init__(self, settings: OrgTextileSettings | None = None) -> None:
        """
        Initialize the converter.

        Args:
            settings: Conversion settings; defaults are used if not given
        """
        self._settings = settings or OrgTextileSettings()
        self._classifier = OrgLineClassifier(self._settings.tab_size)
        self._formatter: Callable[[str], str] = (
            TextileSubstitution() if self._settings.inline_substitution else identity_transform
        )
        self._logger = logging.getLogger("OrgTextileConverter")

    def convert(self, text: str) -> str:
        """
        Convert a whole org-mode document.

        Args:
            text: The org-mode source

        Returns:
            The Textile output
        """
        blocks: List[str] = []
        self.convert_lines(text.splitlines(), blocks.append)
        return ''.join(blocks)

    def convert_lines(self, lines: Iterable[str], sink: Callable[[str], None]) -> None:
        """
        Convert org-mode lines, writing each finished block to a sink.

        Args:
            lines: Source lines, with or without line terminators
            sink: Callable receiving each newline-terminated output block
        """
        block_count = 0

        def counting_sink(block: str) -> None:
            nonlocal block_count
            block_count += 1
            sink(block)

        output_buffer = OrgOutputBuffer(counting_sink, self._formatter)
        line_count = 0

        for raw_line in lines:
            line_count += 1
            line = self._classifier.classify(raw_line)
            output_buffer.prepare(line)
            self._accumulate(output_buffer, line)

        output_buffer.flush()
        self._logger.debug("converted %d lines into %d blocks", line_count, block_count)

    def _accumulate(self, output_buffer: OrgOutputBuffer, line: OrgLine) -> None:
        """
        Add the text of a prepared line to the output buffer.

        Args:
            output_buffer: Buffer that has just been prepared for this line
            line: The classified line
        """
        kind = line.kind

        if kind == OrgLineKind.PARAGRAPH:
            if output_buffer.buffer:
                output_buffer.append(self._settings.paragraph_join)

            else:
                output_buffer.prefix = None

            output_buffer.append(line.text)
            return

        if kind == OrgLineKind.ORDERED_LIST:
            output_buffer.prefix = "#" * output_buffer.current_list_depth() + " "
            output_buffer.append(line.text)
            return

        if kind == OrgLineKind.UNORDERED_LIST:
            output_buffer.prefix = "*" * output_buffer.current_list_depth() + " "
            output_buffer.append(line.text)
            return

        if kind == OrgLineKind.HEADING:
            prefix: str | None = f"h{line.level}. "

        elif kind == OrgLineKind.TABLE_ROW:
            prefix = None

        elif kind == OrgLineKind.COMMENT and self._settings.emit_comments:
            prefix = "###. "

        else:
            # Blank lines, metadata, table separators, rules and hidden comments contribute no text
            return

        output_buffer.prefix = prefix
        output_buffer.append(line.text)

        # Flush now so a following paragraph cannot merge into this line
        output_buffer.flush()
