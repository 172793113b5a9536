# tests/test_staging.py

from __future__ import annotations

from pathlib import Path

import pytest

from manuscript_build import staging
from manuscript_build.errors import MissingAssetError


FORMATS = ["html", "pdf", "tex", "markdown"]


def test_clobber_missing_directory_is_fine(tmp_path: Path):
    staging.clobber(tmp_path / "output")
    assert not (tmp_path / "output").exists()


def test_clobber_then_make_directories_leaves_empty_format_dirs(tmp_path: Path):
    out = tmp_path / "output"
    (out / "html").mkdir(parents=True)
    (out / "html" / "old.html").write_text("stale")
    (out / "leftover.txt").write_text("stale")
    (out / "junk" / "deep").mkdir(parents=True)

    staging.clobber(out)
    staging.make_directories(out, FORMATS)

    assert sorted(p.name for p in out.iterdir()) == sorted(FORMATS)
    assert all(not any(d.iterdir()) for d in out.iterdir())


def test_make_directories_twice_is_fine(tmp_path: Path):
    staging.make_directories(tmp_path, FORMATS)
    staging.make_directories(tmp_path, FORMATS)
    assert (tmp_path / "tex").is_dir()


def test_chapter_files_sorted_and_filtered(project: Path):
    files = staging.chapter_files(project / "text", "mdown")
    assert [p.name for p in files] == ["welcome.mdown", "routes.mdown"]


def test_chapter_files_missing_text_dir(tmp_path: Path):
    with pytest.raises(MissingAssetError):
        staging.chapter_files(tmp_path / "text", "mdown")


def test_merge_keeps_all_content_in_order(tmp_path: Path):
    text = tmp_path / "text"
    text.mkdir()
    a = text / "a.mdown"
    b = text / "b.mdown"
    a.write_text("Hello", encoding="utf-8")
    b.write_text("World", encoding="utf-8")
    target = tmp_path / "out" / "merged.mdown"

    staging.merge(staging.chapter_files(text, "mdown"), target)
    first = target.read_bytes()
    staging.merge(staging.chapter_files(text, "mdown"), target)

    assert first == b"Hello\n\nWorld\n"
    assert target.read_bytes() == first


def test_merge_without_chapters_fails(tmp_path: Path):
    with pytest.raises(MissingAssetError):
        staging.merge([], tmp_path / "merged.mdown")


def test_merge_missing_chapter_fails(tmp_path: Path):
    with pytest.raises(MissingAssetError):
        staging.merge([tmp_path / "gone.mdown"], tmp_path / "merged.mdown")


def test_copy_file_missing_source(tmp_path: Path):
    with pytest.raises(MissingAssetError) as excinfo:
        staging.copy_file(tmp_path / "style.css", tmp_path / "out.css", "stylesheet")
    assert "stylesheet" in str(excinfo.value)


def test_copy_tree_contents(project: Path, tmp_path: Path):
    dest = tmp_path / "dest"
    copied = staging.copy_tree_contents(project / "src" / "images", dest)
    assert [p.name for p in copied] == ["cover.png"]
    assert (dest / "cover.png").read_bytes() == b"\x89PNG fake"


def test_remove_matching_only_touches_patterns(tmp_path: Path):
    for name in ["book.aux", "book.log", "keep.mdown", "preamble.tex"]:
        (tmp_path / name).write_text("x")
    removed = staging.remove_matching(tmp_path, ["*.aux", "*.log", "preamble.tex"])
    assert sorted(p.name for p in removed) == ["book.aux", "book.log", "preamble.tex"]
    assert [p.name for p in tmp_path.iterdir()] == ["keep.mdown"]


def test_merge_keeps_non_utf8_bytes(tmp_path: Path):
    text = tmp_path / "text"
    text.mkdir()
    (text / "a.mdown").write_bytes("café".encode("latin-1"))
    (text / "b.mdown").write_bytes(b"plain\r\n")
    target = tmp_path / "merged.mdown"

    staging.merge(staging.chapter_files(text, "mdown"), target)

    assert target.read_bytes() == b"caf\xe9\n\nplain\r\n"


def test_remove_matching_keeps_listed_files(tmp_path: Path):
    (tmp_path / "ysat.log").write_text("x")
    (tmp_path / "ysat.aux").write_text("x")
    removed = staging.remove_matching(tmp_path, ["ysat.*"], keep=[tmp_path / "ysat.log"])
    assert [p.name for p in removed] == ["ysat.aux"]
    assert (tmp_path / "ysat.log").exists()
