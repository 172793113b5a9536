# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from manuscript_build.orchestrator.cli import discover_tasks
from manuscript_build.orchestrator.core import TaskGraph

from .fakes import FakeConverter


def write_chapter(root: Path, rel: str, text: str) -> Path:
    p = root / "text" / rel
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    """
    A tiny manuscript laid out like the real one:
    text/<section>/*.mdown plus src/style.css, src/images/, src/preamble.tex.
    """
    write_chapter(tmp_path, "02_routing/routes.mdown", "# Routing\n\nRoutes.\n")
    write_chapter(tmp_path, "01_intro/welcome.mdown", "# Welcome\n\nHello.\n")
    write_chapter(tmp_path, "01_intro/notes.txt", "not a chapter\n")
    src = tmp_path / "src"
    (src / "images").mkdir(parents=True)
    (src / "style.css").write_text("body { margin: 0 }\n", encoding="utf-8")
    (src / "images" / "cover.png").write_bytes(b"\x89PNG fake")
    (src / "preamble.tex").write_text("\\usepackage{graphicx}\n", encoding="utf-8")
    return tmp_path


@pytest.fixture()
def converter() -> FakeConverter:
    return FakeConverter()


@pytest.fixture()
def params(project: Path, converter: FakeConverter) -> dict:
    return {"runtime": {"root": project, "converter": converter}}


@pytest.fixture(scope="session")
def graph() -> TaskGraph:
    return discover_tasks()
