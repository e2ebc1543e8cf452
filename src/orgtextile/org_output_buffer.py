"""
Block accumulation for org-mode to Textile conversion.

The output buffer collects the text of consecutive source lines that belong to
the same logical block and emits each finished block in one go, after running
it through an inline formatting transform.
"""

import logging
from typing import Callable, List

from orgtextile.org_line import OrgLine
from orgtextile.org_line_kind import OrgLineKind


def identity_transform(text: str) -> str:
    """Return text unchanged."""
    return text


class OrgOutputBuffer:
    """
    Accumulates classified lines into blocks and flushes them to a sink.

    A driver calls `prepare()` and then `append()` once per source line, and
    must call `flush()` one final time after the last line.  Consecutive blank
    lines collapse into one blank block, and a paragraph only continues a list
    item when it is indented deeper than the innermost open list level.

    Instances hold unsynchronized mutable state and must not be shared between
    threads.
    """

    BLOCK_SEPARATOR = "\n"

    def __init__(
        self,
        sink: Callable[[str], None],
        formatter: Callable[[str], str] = identity_transform
    ) -> None:
        """
        Initialize the output buffer.

        Args:
            sink: Callable receiving each finished, newline-terminated block
            formatter: Inline formatting transform applied to each flushed block
        """
        self._sink = sink
        self._formatter = formatter
        self._buffer = ""
        self._current_kind = OrgLineKind.START
        self._indent_stack: List[int] = []
        self._logger = logging.getLogger("OrgOutputBuffer")

        # Optional string emitted ahead of the block text on flush.  It is not
        # cleared by flush; callers reset it between blocks.
        self.prefix: str | None = None

    @property
    def buffer(self) -> str:
        """Text accumulated for the block currently being built."""
        return self._buffer

    @property
    def current_kind(self) -> OrgLineKind:
        """Kind of the last line absorbed by `prepare()`."""
        return self._current_kind

    @property
    def indent_stack(self) -> List[int]:
        """Copy of the currently open list indentation levels, outermost first."""
        return list(self._indent_stack)

    def prepare(self, line: OrgLine) -> None:
        """
        Prepare the buffer to receive the content of a line.

        As a side effect this may flush the block accumulated so far.

        Args:
            line: The classified line about to be appended
        """
        if not self._should_accumulate(line):
            self.flush()

        self._current_kind = line.kind
        self._update_indent_stack(line)

    def append(self, text: str) -> None:
        """
        Accumulate text verbatim into the current block.

        Args:
            text: Text to add; no separator is inserted
        """
        self._buffer += text

    def flush(self, formatter: Callable[[str], str] | None = None) -> None:
        """
        Emit the current block to the sink and reset the buffer.

        Args:
            formatter: Optional transform overriding the one given at construction

        Raises:
            Any exception raised by the formatting transform; the buffer is left intact
        """
        if self._current_kind == OrgLineKind.BLANK:
            self._sink(self.BLOCK_SEPARATOR * 2)
            self._logger.debug("flushed blank block")

        elif self._buffer:
            transform = formatter if formatter is not None else self._formatter
            formatted = transform(self._buffer)
            self._sink(f"{self.prefix or ''}{formatted}{self.BLOCK_SEPARATOR}")
            self._logger.debug("flushed %s block (%d chars)", self._current_kind.value, len(self._buffer))

        self._buffer = ""

    def current_list_depth(self) -> int:
        """
        Get the number of currently open list levels.

        Returns:
            The depth of list nesting, 0 when outside any list
        """
        return len(self._indent_stack)

    def _update_indent_stack(self, line: OrgLine) -> None:
        """Track list nesting; any non-list line closes every open level."""
        if not line.kind.is_list():
            self._indent_stack = []
            return

        while self._indent_stack and self._indent_stack[-1] > line.indent:
            self._indent_stack.pop()

        if not self._indent_stack or self._indent_stack[-1] < line.indent:
            self._indent_stack.append(line.indent)

        assert all(
            lower < upper for lower, upper in zip(self._indent_stack, self._indent_stack[1:])
        ), f"List indent stack must be strictly increasing: {self._indent_stack}"

    def _should_accumulate(self, line: OrgLine) -> bool:
        """
        Test if a line continues the current block.

        Args:
            line: The line about to be absorbed

        Returns:
            True if the line should be merged into the current block
        """
        # Runs of blank lines collapse into a single blank block
        if line.kind == OrgLineKind.BLANK and self._current_kind == OrgLineKind.BLANK:
            return True

        # Only paragraphs are ever merged with earlier output
        if line.kind != OrgLineKind.PARAGRAPH:
            return False

        # A blank block is complete; the paragraph after it starts a new one
        if self._current_kind == OrgLineKind.BLANK:
            return False

        # A paragraph belongs to a list item only if it is indented deeper than the item
        if self._current_kind.is_list():
            if not self._indent_stack:
                return False

            return line.indent > self._indent_stack[-1]

        return True
