"""Markdown to page component transformation."""

import re
from typing import Iterable

from .base import DocMetadata
from .frontmatter import first_paragraph, normalize_paragraph

HEADING_LINE_RE = re.compile(r"^#[ \t]+.*\n*", re.MULTILINE)

PROSE_CLASSES = (
    "prose prose-invert max-w-none prose-headings:text-foreground "
    "prose-p:text-muted-foreground prose-a:text-primary prose-strong:text-foreground "
    "prose-code:text-foreground prose-code:bg-muted prose-code:px-1.5 prose-code:py-0.5 "
    "prose-code:rounded prose-code:text-sm prose-pre:bg-card prose-pre:border "
    "prose-pre:border-border prose-pre:rounded-lg prose-pre:p-4"
)


def capitalize_word(word: str) -> str:
    # Only the first character changes: "api" -> "Api", "ioRedis" -> "IoRedis"
    return word[:1].upper() + word[1:]


def to_identifier(name: str) -> str:
    """Turn a hyphenated file or directory name into an identifier.

    >>> to_identifier("getting-started")
    'GettingStarted'
    """
    return "".join(capitalize_word(word) for word in name.split("-"))


def path_identifier(parts: Iterable[str]) -> str:
    """Concatenate the identifiers of each path part, skipping ``index``."""
    return "".join(to_identifier(part) for part in parts if part != "index")


def strip_redundant_content(metadata: DocMetadata, body: str) -> str:
    """Drop the parts of ``body`` that the page renders from metadata.

    The first ``#`` heading is removed, and when a description is set, the
    leading paragraph is removed too if it says the same thing.
    """
    text = HEADING_LINE_RE.sub("", body, count=1)

    if metadata.description:
        text = text.lstrip()
        paragraph, rest = first_paragraph(text)
        if paragraph and normalize_paragraph(paragraph) == normalize_paragraph(
            metadata.description
        ):
            text = rest.lstrip()

    return text


def escape_template_literal(text: str) -> str:
    # Backslash first so the escapes added below are not escaped again
    return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def render_page_component(metadata: DocMetadata, body: str, component_name: str) -> str:
    """Render the page component source for one document."""
    markdown = escape_template_literal(strip_redundant_content(metadata, body))

    description_block = ""
    if metadata.description:
        description_block = (
            f'<p className="text-xl text-muted-foreground mb-8">{metadata.description}</p>'
        )

    return f"""/**
 * {metadata.title}
 * {metadata.description}
 * Auto-generated from markdown. Do not edit directly.
 */

import ReactMarkdown from "react-markdown";
import remarkGfm from "remark-gfm";
import {{ markdownComponents }} from "@/components/markdown-components";

const {component_name} = () => {{
  const markdown = `{markdown}`;
  return (
    <article className="max-w-none">
      <h1 className="text-4xl font-bold text-foreground mb-4">{metadata.title}</h1>
      {description_block}
      <div className="{PROSE_CLASSES}">
        <ReactMarkdown remarkPlugins={{[remarkGfm]}} components={{markdownComponents}}>
          {{markdown}}
        </ReactMarkdown>
      </div>
    </article>
  );
}};

export default {component_name};
"""
