"""
Configuration management for org-mode to Textile conversion.
"""

import os
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, List

import yaml

from orgtextile.orgtextile_exceptions import OrgTextileConfigError


@dataclass
class OrgTextileSettings:
    """Settings controlling how org-mode text is converted."""

    tab_size: int = 8
    paragraph_join: str = " "
    inline_substitution: bool = True
    emit_comments: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OrgTextileSettings':
        """
        Create settings from a dictionary, rejecting unknown keys.

        Args:
            data: Mapping of setting names to values

        Returns:
            The settings

        Raises:
            OrgTextileConfigError: If the data contains non-string or unknown keys, or invalid values
        """
        non_string = [key for key in data if not isinstance(key, str)]
        if non_string:
            raise OrgTextileConfigError(
                f"Setting names must be strings, got: {', '.join(repr(key) for key in non_string)}",
                {'invalid_keys': non_string}
            )

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise OrgTextileConfigError(
                f"Unknown settings: {', '.join(unknown)}",
                {'unknown_keys': unknown, 'known_keys': sorted(known)}
            )

        settings = cls(**data)
        errors = settings.validate()
        if errors:
            raise OrgTextileConfigError(
                f"Invalid settings: {'; '.join(errors)}",
                {'errors': errors}
            )

        return settings

    @classmethod
    def load_from_file(cls, config_path: str) -> 'OrgTextileSettings':
        """
        Load settings from a YAML file.

        Args:
            config_path: Path to the YAML file

        Returns:
            The loaded settings

        Raises:
            OrgTextileConfigError: If the file is missing, unreadable, or invalid
        """
        if not os.path.exists(config_path):
            raise OrgTextileConfigError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)

        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise OrgTextileConfigError(
                f"Failed to read configuration file {config_path}: {e}",
                {'path': config_path}
            ) from e

        if data is None:
            return cls()

        if not isinstance(data, dict):
            raise OrgTextileConfigError(
                f"Configuration file {config_path} must contain a mapping",
                {'path': config_path}
            )

        return cls.from_dict(data)

    def save_to_file(self, config_path: str) -> None:
        """Save settings to a YAML file."""
        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(asdict(self), f, default_flow_style=False, sort_keys=True)

    def validate(self) -> List[str]:
        """Validate the settings and return any errors."""
        errors = []

        if not isinstance(self.tab_size, int) or isinstance(self.tab_size, bool) or self.tab_size < 1:
            errors.append(f"tab_size must be a positive integer, got {self.tab_size!r}")

        if not isinstance(self.paragraph_join, str):
            errors.append(f"paragraph_join must be a string, got {self.paragraph_join!r}")

        if not isinstance(self.inline_substitution, bool):
            errors.append(f"inline_substitution must be a boolean, got {self.inline_substitution!r}")

        if not isinstance(self.emit_comments, bool):
            errors.append(f"emit_comments must be a boolean, got {self.emit_comments!r}")

        return errors
