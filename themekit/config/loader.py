"""
Load theme options from YAML.

The options file location comes from the explicit path, or from the
THEMEKIT_OPTIONS_PATH environment variable; with neither, defaults apply.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from themekit.components.theme import ThemeOptions

from .models import ThemeOptionsDocument

logger = logging.getLogger(__name__)

OPTIONS_PATH_ENV = "THEMEKIT_OPTIONS_PATH"


class ThemeOptionsError(ValueError):
    """Raised when a theme options document is malformed."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Theme options validation failed: {'; '.join(errors)}")


def _format_validation_errors(exc: ValidationError) -> list[str]:
    """Flatten pydantic errors into 'field: message' strings."""
    errors: list[str] = []
    for error in exc.errors():
        loc = error.get("loc", ())
        field = ".".join(str(part) for part in loc) if loc else "_schema"
        errors.append(f"{field}: {error.get('msg', 'Invalid value')}")
    return errors


def _extract_yaml(content: str) -> str:
    """Return the first ```yaml fenced block, or the whole text if none."""
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break

        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content


def parse_theme_options(data: Any) -> ThemeOptions:
    """
    Build ThemeOptions from a parsed document.

    Args:
        data: Mapping with optional `name`, `palette`, `spacing`, `shape`
            keys, or None for an empty document.

    Raises:
        ThemeOptionsError: If the document has the wrong shape.
    """
    if data is None:
        return ThemeOptions()
    if not isinstance(data, Mapping):
        raise ThemeOptionsError(
            [f"Theme options must be a mapping, got {type(data).__name__}"]
        )

    try:
        document = ThemeOptionsDocument.model_validate(dict(data))
    except ValidationError as e:
        raise ThemeOptionsError(_format_validation_errors(e)) from e

    return document.to_options()


def load_theme_options(
    path: Path | str | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ThemeOptions:
    """
    Load and validate a theme options file.

    Args:
        path: File to read. Falls back to $THEMEKIT_OPTIONS_PATH.
        env: Environment to read the fallback from (os.environ if None).

    Returns:
        ThemeOptions from the file, or empty options if no path is configured.

    Raises:
        FileNotFoundError: If the file does not exist.
        ThemeOptionsError: If the YAML is invalid or has the wrong shape.
    """
    if path is None:
        environ = os.environ if env is None else env
        env_path = environ.get(OPTIONS_PATH_ENV)
        if not env_path:
            logger.debug("No theme options path configured, using defaults")
            return ThemeOptions()
        path = env_path

    options_path = Path(path)
    if not options_path.exists():
        raise FileNotFoundError(f"Theme options file not found at: {options_path}")

    content = options_path.read_text(encoding="utf-8")

    try:
        data = yaml.safe_load(_extract_yaml(content))
    except yaml.YAMLError as e:
        raise ThemeOptionsError([f"Invalid YAML syntax: {e}"]) from e

    options = parse_theme_options(data)
    logger.info("Loaded theme options from %s", options_path)
    return options
