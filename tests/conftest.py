from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def options_dir(tmp_path: Path) -> Path:
    return tmp_path


@pytest.fixture
def write_options(options_dir: Path) -> Callable[[str, str], Path]:
    """
    Writes a theme options document into the temporary directory and returns
    its path.
    """

    def _write(content: str, filename: str = "theme.yaml") -> Path:
        path = options_dir / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write
