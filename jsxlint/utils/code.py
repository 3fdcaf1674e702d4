"""Source code helper utilities."""

from __future__ import annotations

from fnmatch import fnmatch
from pathlib import Path
from typing import Generator, Iterable


def is_ignored(path: Path, ignore_patterns: Iterable[str]) -> bool:
    posix = path.as_posix()
    return any(fnmatch(posix, pattern) for pattern in ignore_patterns)


def iter_code_files(
    root_paths: Iterable[str],
    extensions: tuple[str, ...] = (".jsx", ".tsx"),
    ignore_patterns: Iterable[str] = (),
) -> Generator[Path, None, None]:
    """Yield code files named directly or found beneath the provided directories."""

    ignore_patterns = tuple(ignore_patterns)
    for root in root_paths:
        root_path = Path(root)
        if root_path.is_file():
            if not is_ignored(root_path, ignore_patterns):
                yield root_path
            continue
        for path in sorted(root_path.rglob("*")):
            if path.suffix in extensions and path.is_file() and not is_ignored(path, ignore_patterns):
                yield path
