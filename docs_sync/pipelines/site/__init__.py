"""Site build pipeline.

Converts the markdown in guides/ and packages/ into page components:
- frontmatter: metadata + body extraction
- transformer: content cleanup, escaping and component rendering
- paths: output placement and identifiers
- builder: tree traversal and per-document processing
- index: re-export manifest
"""
