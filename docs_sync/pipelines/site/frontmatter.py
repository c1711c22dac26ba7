"""Frontmatter parsing for documentation markdown."""

import logging
import re
from pathlib import PurePosixPath
from typing import Optional, Tuple

from .base import DocMetadata

logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r"\A---\n(.*?)\n---(?:\n(.*))?\Z", re.DOTALL)
KEY_VALUE_RE = re.compile(r"^(\w+):\s*(.+)$")
SURROUNDING_QUOTES_RE = re.compile(r"^[\"']|[\"']$")
HEADING_RE = re.compile(r"^#[ \t]+(.+)$", re.MULTILINE)
HEADING_START_RE = re.compile(r"^#+[ \t]")
LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")


def strip_links(text: str) -> str:
    """Reduce inline links ``[text](url)`` to their text."""
    return LINK_RE.sub(r"\1", text)


def first_paragraph(text: str) -> Tuple[str, str]:
    """Split off the first paragraph of ``text``.

    Leading whitespace is skipped. The paragraph ends at a blank line or at a
    heading line. Returns ``(paragraph, rest)``; the paragraph is empty when the
    text starts with a heading or is empty.
    """
    lines = text.lstrip().split("\n")
    paragraph = []
    for line in lines:
        if not line.strip() or HEADING_START_RE.match(line):
            break
        paragraph.append(line)
    rest = "\n".join(lines[len(paragraph) :])
    return "\n".join(paragraph), rest


def normalize_paragraph(paragraph: str) -> str:
    """Collapse a paragraph to a single trimmed line without link markup."""
    return " ".join(line.strip() for line in strip_links(paragraph).split("\n")).strip()


def _filename_title(filename: Optional[str]) -> str:
    if not filename:
        return ""
    return PurePosixPath(filename).stem


def _heading_title(content: str) -> Optional[str]:
    match = HEADING_RE.search(content)
    if match:
        return match.group(1).strip()
    return None


def parse_frontmatter(content: str, filename: Optional[str] = None) -> Tuple[DocMetadata, str]:
    """Extract metadata and body from a markdown document.

    A leading ``---`` block is read as ``key: value`` lines (only ``title`` and
    ``description`` are kept). Without one, the title comes from the first
    ``#`` heading (or the file name) and the description from the paragraph
    that follows it. Never raises.
    """
    match = FRONTMATTER_RE.match(content)

    if not match:
        heading = HEADING_RE.search(content)
        title = heading.group(1).strip() if heading else _filename_title(filename)
        after_heading = content[heading.end() :] if heading else content
        paragraph, _ = first_paragraph(after_heading)
        metadata = DocMetadata(title=title, description=normalize_paragraph(paragraph))
        return metadata, content

    block, body = match.group(1), match.group(2) or ""
    metadata = DocMetadata()
    for line in block.split("\n"):
        kv = KEY_VALUE_RE.match(line)
        if not kv:
            continue
        key, value = kv.groups()
        clean = SURROUNDING_QUOTES_RE.sub("", value.strip())
        if key == "title":
            metadata.title = clean
        elif key == "description":
            metadata.description = clean
        else:
            logger.debug(f"Ignoring frontmatter key: {key}")

    if not metadata.title:
        metadata.title = _heading_title(body) or _filename_title(filename)

    return metadata, body
