"""Configuration validation for the mpf launcher.

Validates launcher.yml keys and value types. Problems are reported as
warnings and the offending value is ignored; nothing here raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from typing import Any, Dict, List, Optional, Set

from moshpf.core.logging import get_logger

LOGGER = get_logger(__name__)

# Valid top-level keys and the type each must have
VALID_KEY_TYPES: Dict[str, type] = {
    "release_host": str,
    "repository": str,
    "max_redirects": int,
}

VALID_TOP_LEVEL_KEYS: Set[str] = set(VALID_KEY_TYPES)


@dataclass
class ConfigValidationWarning:
    """A validation warning for configuration."""

    message: str
    source: str
    key: Optional[str] = None
    suggestion: Optional[str] = None


def validate_config(
    data: Any,
    source: str,
) -> List[ConfigValidationWarning]:
    """Validate a launcher configuration mapping.

    Args:
        data: Parsed YAML document.
        source: Source file path for warning messages.

    Returns:
        List of validation warnings.
    """
    warnings: List[ConfigValidationWarning] = []

    if not isinstance(data, dict):
        warning = ConfigValidationWarning(
            message=f"Config must be a mapping, got {type(data).__name__}",
            source=source,
        )
        warnings.append(warning)
        _log_warning(warning)
        return warnings

    for key, value in data.items():
        if key not in VALID_TOP_LEVEL_KEYS:
            warning = ConfigValidationWarning(
                message=f"Unknown top-level key '{key}'",
                source=source,
                key=str(key),
                suggestion=_suggest_key(str(key), VALID_TOP_LEVEL_KEYS),
            )
            warnings.append(warning)
            _log_warning(warning)
            continue

        expected = VALID_KEY_TYPES[key]
        # bool is an int subclass but never a valid redirect count
        if not isinstance(value, expected) or isinstance(value, bool):
            warning = ConfigValidationWarning(
                message=f"'{key}' must be {_type_label(expected)}, got {type(value).__name__}",
                source=source,
                key=key,
            )
            warnings.append(warning)
            _log_warning(warning)
            continue

        if key == "max_redirects" and value < 0:
            warning = ConfigValidationWarning(
                message=f"'max_redirects' must not be negative, got {value}",
                source=source,
                key=key,
            )
            warnings.append(warning)
            _log_warning(warning)
        elif key == "repository" and value.count("/") != 1:
            warning = ConfigValidationWarning(
                message=f"'repository' must look like 'org/repo', got '{value}'",
                source=source,
                key=key,
            )
            warnings.append(warning)
            _log_warning(warning)
        elif key == "release_host" and ("/" in value or not value):
            warning = ConfigValidationWarning(
                message=f"'release_host' must be a bare host name, got '{value}'",
                source=source,
                key=key,
            )
            warnings.append(warning)
            _log_warning(warning)

    return warnings


def _type_label(expected: type) -> str:
    return {str: "a string", int: "an integer"}.get(expected, expected.__name__)


def _suggest_key(key: str, valid_keys: Set[str]) -> Optional[str]:
    """Suggest a similar valid key for typos."""
    matches = get_close_matches(key, sorted(valid_keys), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _log_warning(warning: ConfigValidationWarning) -> None:
    message = f"{warning.source}: {warning.message}"
    if warning.suggestion:
        message += f" (did you mean '{warning.suggestion}'?)"
    LOGGER.warning(message)
