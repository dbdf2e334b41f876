"""Expand CLI path arguments into Python source files."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from cmdsort.constants import DEFAULT_EXCLUDES, SOURCE_SUFFIX


def iter_source_files(root: Path, exclude_dirs: Iterable[str] = DEFAULT_EXCLUDES) -> list[Path]:
    """Collect Python files below a directory.

    Directories named in *exclude_dirs*, hidden directories, and
    ``*.egg-info`` directories are skipped.

    Args:
        root: Directory to traverse.
        exclude_dirs: Directory names to skip.

    Returns:
        Sorted list of file paths.
    """
    excluded = set(exclude_dirs)
    files: list[Path] = []

    for entry in root.rglob(f"*{SOURCE_SUFFIX}"):
        if not entry.is_file():
            continue
        try:
            rel_parts = entry.relative_to(root).parts
        except ValueError:
            continue
        if any(
            part in excluded or part.startswith(".") or part.endswith(".egg-info")
            for part in rel_parts[:-1]
        ):
            continue
        files.append(entry)

    return sorted(files)


def expand_paths(paths: Iterable[str | Path], exclude_dirs: Iterable[str] = DEFAULT_EXCLUDES) -> list[Path]:
    """Expand files and directories into a de-duplicated file list.

    Explicit files are kept whatever their suffix, and so are paths that
    do not exist, so the caller reports them as unreadable. Order follows
    the arguments.
    """
    excluded = tuple(exclude_dirs)
    seen: set[Path] = set()
    result: list[Path] = []

    for raw in paths:
        path = Path(raw)
        candidates = iter_source_files(path, excluded) if path.is_dir() else [path]
        for candidate in candidates:
            if candidate not in seen:
                seen.add(candidate)
                result.append(candidate)

    return result
