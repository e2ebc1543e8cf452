"""
Inline formatting transform from org-mode markup to Textile markup.
"""

import re
from typing import Dict, List


class TextileSubstitution:
    """
    Rewrites org-mode emphasis and links in a block of text as Textile.

    Instances are pure callables: the same input always yields the same output.
    """

    # Org emphasis marker -> Textile marker
    EMPHASIS_MAP: Dict[str, str] = {
        '*': '*',
        '/': '_',
        '_': '+',
        '=': '@',
        '~': '@',
        '+': '-',
    }

    # Markers whose body is emitted literally, without nested substitution
    VERBATIM_MARKERS = ('=', '~')

    def __init__(self) -> None:
        """Initialize the substitution with regex patterns for inline markup."""
        self._link_pattern = re.compile(r'\[\[([^\[\]]+)\](?:\[([^\[\]]+)\])?\]')
        self._emphasis_pattern = re.compile(
            r'(^|[\s({\'"])'
            r'([*/_=~+])'
            r'(\S|\S.*?\S)'
            r'\2'
            r'(?=[\s\-.,:!?;\'")}]|$)'
        )

    def __call__(self, text: str) -> str:
        """
        Convert org-mode inline markup in text to Textile.

        Args:
            text: Accumulated block text

        Returns:
            The text with emphasis and links rewritten
        """
        parts: List[str] = []
        position = 0

        # Link targets must not be touched by emphasis rewriting
        for match in self._link_pattern.finditer(text):
            parts.append(self._substitute_emphasis(text[position:match.start()]))
            parts.append(self._format_link(match.group(1), match.group(2)))
            position = match.end()

        parts.append(self._substitute_emphasis(text[position:]))
        return ''.join(parts)

    def _format_link(self, target: str, description: str | None) -> str:
        """
        Format a link in Textile syntax.

        Args:
            target: The link target as written in org-mode
            description: Optional link text

        Returns:
            The Textile link
        """
        if target.startswith('file:'):
            target = target[len('file:'):]

        if description is None:
            description = target

        else:
            description = self._substitute_emphasis(description)

        return f'"{description}":{target}'

    def _substitute_emphasis(self, text: str) -> str:
        """Rewrite emphasis markers, recursing into non-verbatim bodies."""
        def replace(match: re.Match) -> str:
            leading, marker, body = match.group(1), match.group(2), match.group(3)
            if marker not in self.VERBATIM_MARKERS:
                body = self._substitute_emphasis(body)

            textile_marker = self.EMPHASIS_MAP[marker]
            return f"{leading}{textile_marker}{body}{textile_marker}"

        return self._emphasis_pattern.sub(replace, text)
