"""A single classified org-mode source line."""

from dataclasses import dataclass

from orgtextile.org_line_kind import OrgLineKind
from orgtextile.orgtextile_exceptions import OrgLineError


@dataclass(frozen=True)
class OrgLine:
    """Represents one source line after classification."""

    kind: OrgLineKind
    indent: int  # Leading whitespace width, tabs expanded
    text: str = ""  # Content with any list or heading marker removed
    raw: str = ""  # The original line without its terminator
    level: int = 0  # Heading level, 0 for anything that is not a heading

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise OrgLineError(
                f"Line indent must be non-negative, got {self.indent}",
                {'kind': self.kind.value, 'indent': self.indent, 'raw': self.raw}
            )
