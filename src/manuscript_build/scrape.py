"""Parsers for the text the stats tools print.

Word count (`wc -w FILE...`)::

    <ws>* <count> <ws>+ <path>      one line per file
    <ws>* <total> <ws>+ total       only when more than one file was given

The `total` line wins; with a single file its own line is the total.

Page count: the raw bytes of a PDF contain `/Count <n>` entries. The page tree
root carries the document's page count, which is the largest of them; outline
dictionaries also use `/Count` and may be negative.
"""

from __future__ import annotations

import re

from .errors import ParseError


_WC_LINE = re.compile(r"^\s*(\d+)\s+(.+?)\s*$")
_PDF_COUNT = re.compile(rb"/Count\s+(-?\d+)")


def parse_word_count(output: str) -> int:
    lines = [ln for ln in output.splitlines() if ln.strip()]
    if not lines:
        raise ParseError("word count output is empty")
    matches = []
    for ln in lines:
        m = _WC_LINE.match(ln)
        if not m:
            raise ParseError(f"unexpected word count line: {ln!r}")
        matches.append((int(m.group(1)), m.group(2)))
    count, label = matches[-1]
    if len(matches) == 1 or label == "total":
        return count
    raise ParseError("word count output has no 'total' line")


def parse_page_count(data: bytes) -> int:
    counts = [int(m.group(1)) for m in _PDF_COUNT.finditer(data)]
    counts = [c for c in counts if c >= 0]
    if not counts:
        raise ParseError("no /Count marker found in PDF")
    return max(counts)
