"""Pytest configuration and fixtures for cmdsort tests."""

from collections.abc import Callable
from pathlib import Path
from textwrap import dedent

import pytest

from cmdsort.config import CmdsortConfig

SOURCES_DIR = Path(__file__).parent / "fixtures" / "sources"


@pytest.fixture
def sources_dir() -> Path:
    """Directory holding the sample source files."""
    return SOURCES_DIR


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing dedented source text to a file under tmp_path.

    Returns:
        Function taking (text, name="commands.py") and returning the path
    """

    def _write(text: str, name: str = "commands.py") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(text).lstrip(), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_config() -> CmdsortConfig:
    """Create a sample cmdsort configuration.

    Returns:
        Sample CmdsortConfig instance
    """
    return CmdsortConfig(paths=["src"], exclude=["build"], jobs=2)


@pytest.fixture
def enum_source() -> Callable[..., str]:
    """Factory building a marked enum with one ``auto()`` member per name."""

    def _build(*members: str, name: str = "Commands", marker: str = "@subcommands") -> str:
        lines = [
            "from enum import Enum, auto",
            "from cmdsort import subcommands",
            "",
            marker,
            f"class {name}(Enum):",
        ]
        lines.extend(f"    {member} = auto()" for member in members)
        if not members:
            lines.append("    pass")
        return "\n".join(lines) + "\n"

    return _build
