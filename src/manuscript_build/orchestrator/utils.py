from __future__ import annotations

"""Small helpers for reading paths and commands out of config params."""

from pathlib import Path
from typing import Dict, List


FORMATS = ["html", "pdf", "tex", "markdown"]

DEFAULT_CONVERTERS: Dict[str, List[str]] = {
    "html": ["maruku", "--html", "--output={output}", "{input}"],
    "pdf": ["maruku", "--pdf", "--output={output}", "{input}"],
    "latex": ["maruku", "--tex", "--output={output}", "{input}"],
    "html_pdf": ["prince", "-i", "html", "{input}", "-o", "{output}"],
}

# {book} is replaced by the book name
DEFAULT_CLEANUP = ["{book}.aux", "{book}.log", "{book}.out", "preamble.tex"]


def _get(d: Dict, *keys, default=None):
    cur = d
    for k in keys:
        if not isinstance(cur, dict):
            return default
        cur = cur.get(k)
        if cur is None:
            return default
    return cur


def root(p: Dict) -> Path:
    return Path(_get(p, "runtime", "root", default=_get(p, "project", "root", default=".")))


def _under_root(p: Dict, rel: str) -> Path:
    path = Path(rel)
    return path if path.is_absolute() else root(p) / path


def book_name(p: Dict) -> str:
    return _get(p, "project", "book_name", default="ysat")


def text_dir(p: Dict) -> Path:
    return _under_root(p, _get(p, "project", "text_dir", default="text"))


def extension(p: Dict) -> str:
    return _get(p, "project", "extension", default="mdown").lstrip(".")


def output_dir(p: Dict) -> Path:
    return _under_root(p, _get(p, "project", "output_dir", default="output"))


def formats(p: Dict) -> List[str]:
    return list(_get(p, "project", "formats", default=FORMATS))


def merged_path(p: Dict) -> Path:
    return output_dir(p) / "markdown" / f"merged.{extension(p)}"


def html_path(p: Dict) -> Path:
    return output_dir(p) / "html" / f"{book_name(p)}.html"


def pdf_path(p: Dict) -> Path:
    return output_dir(p) / "pdf" / f"{book_name(p)}.pdf"


def html_pdf_path(p: Dict) -> Path:
    return output_dir(p) / "pdf" / f"{book_name(p)}_html.pdf"


def tex_path(p: Dict) -> Path:
    return output_dir(p) / "tex" / f"{book_name(p)}.tex"


def stylesheet(p: Dict) -> Path:
    return _under_root(p, _get(p, "assets", "stylesheet", default="src/style.css"))


def images_dir(p: Dict) -> Path:
    return _under_root(p, _get(p, "assets", "images", default="src/images"))


def preamble(p: Dict) -> Path:
    return _under_root(p, _get(p, "assets", "preamble", default="src/preamble.tex"))


def preamble_dest(p: Dict) -> Path:
    return _under_root(p, _get(p, "assets", "preamble_dest", default="preamble.tex"))


def converter_commands(p: Dict) -> Dict[str, List[str]]:
    commands = dict(DEFAULT_CONVERTERS)
    commands.update(_get(p, "converters", default={}) or {})
    return commands


def cleanup_patterns(p: Dict) -> List[str]:
    patterns = _get(p, "cleanup", default=DEFAULT_CLEANUP)
    return [pat.replace("{book}", book_name(p)) for pat in patterns]


def wc_command(p: Dict) -> List[str]:
    return list(_get(p, "stats", "wc_command", default=["wc", "-w"]))


def stats_pdf(p: Dict) -> Path:
    configured = _get(p, "stats", "pdf")
    return _under_root(p, configured) if configured else html_pdf_path(p)
