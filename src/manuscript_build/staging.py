"""Output tree preparation: clobber, directories, merge and asset copy."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Iterable, List

from .errors import MissingAssetError
from .orchestrator.logging import get_logger


log = get_logger("manuscript_build.staging")


def clobber(output_dir: Path) -> None:
    """Remove everything under `output_dir`. A missing directory is fine."""
    if not output_dir.exists():
        return
    for child in output_dir.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()


def make_directories(output_dir: Path, formats: Iterable[str]) -> List[Path]:
    created = []
    for fmt in formats:
        d = output_dir / fmt
        d.mkdir(parents=True, exist_ok=True)
        created.append(d)
    return created


def chapter_files(text_dir: Path, extension: str) -> List[Path]:
    """Chapter sources under `text_dir`, sorted by relative path."""
    if not text_dir.is_dir():
        raise MissingAssetError(text_dir, "chapter directory")
    files = [p for p in text_dir.rglob(f"*.{extension}") if p.is_file()]
    return sorted(files, key=lambda p: p.relative_to(text_dir).as_posix())


def merge(chapters: List[Path], target: Path) -> Path:
    """Concatenate `chapters` into `target` byte for byte, one blank line between chapters."""
    if not chapters:
        raise MissingAssetError(target.parent, "chapter files")
    parts = []
    for chapter in chapters:
        if not chapter.is_file():
            raise MissingAssetError(chapter, "chapter file")
        data = chapter.read_bytes()
        if not data.endswith(b"\n"):
            data += b"\n"
        parts.append(data)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(b"\n".join(parts))
    log.info("Merged %d chapters into %s", len(chapters), target)
    return target


def copy_file(source: Path, dest: Path, what: str = "file") -> Path:
    if not source.is_file():
        raise MissingAssetError(source, what)
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(source, dest)
    return dest


def copy_tree_contents(source: Path, dest: Path, what: str = "directory") -> List[Path]:
    if not source.is_dir():
        raise MissingAssetError(source, what)
    copied = []
    for child in sorted(source.iterdir()):
        target = dest / child.name
        if child.is_dir():
            shutil.copytree(child, target, dirs_exist_ok=True)
        else:
            dest.mkdir(parents=True, exist_ok=True)
            shutil.copy2(child, target)
        copied.append(target)
    return copied


def remove_matching(
    directory: Path, patterns: Iterable[str], keep: Iterable[Path] = ()
) -> List[Path]:
    """Delete files in `directory` (not recursive) matching any glob in `patterns`.

    Paths in `keep` are left alone even when a pattern matches them.
    """
    kept = {Path(k).resolve() for k in keep}
    removed = []
    for pattern in patterns:
        for p in sorted(directory.glob(pattern)):
            if p.is_file() and p.resolve() not in kept:
                p.unlink()
                removed.append(p)
    if removed:
        log.debug("Removed transient files: %s", ", ".join(p.name for p in removed))
    return removed
