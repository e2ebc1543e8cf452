"""
Conversion of org-mode text to Textile markup.

Source lines are classified, accumulated into logical blocks, and each block
is emitted after inline formatting has been applied to it.
"""

from orgtextile.org_line import OrgLine
from orgtextile.org_line_classifier import OrgLineClassifier
from orgtextile.org_line_kind import OrgLineKind
from orgtextile.org_output_buffer import OrgOutputBuffer, identity_transform
from orgtextile.org_textile_converter import OrgTextileConverter
from orgtextile.org_textile_settings import OrgTextileSettings
from orgtextile.orgtextile_exceptions import (
    OrgLineError,
    OrgTextileConfigError,
    OrgTextileError,
)
from orgtextile.textile_substitution import TextileSubstitution


__version__ = "0.1.0"

__all__ = [
    # Exceptions
    'OrgTextileError',
    'OrgLineError',
    'OrgTextileConfigError',
    # Types
    'OrgLineKind',
    'OrgLine',
    'OrgTextileSettings',
    # Core classes
    'OrgLineClassifier',
    'OrgOutputBuffer',
    'TextileSubstitution',
    'OrgTextileConverter',
    'identity_transform',
]
