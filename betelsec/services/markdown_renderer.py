"""
Renderer for the markdown subset produced in briefings.

Each input line becomes exactly one block, in input order:
- "* item"            -> bullet("item")
- blank / whitespace  -> spacer
- anything else       -> paragraph(line)

Nothing else is interpreted; **bold** and _italic_ markers stay literal.
"""

from typing import List

from betelsec.schemas.risk_assessment import BlockKind, MarkdownBlock

BULLET_PREFIX = "* "


def classify_line(line: str) -> BlockKind:
    """Return the block kind for a single line."""
    if line.startswith(BULLET_PREFIX):
        return "bullet"
    if not line.strip():
        return "spacer"
    return "paragraph"


def render_line(line: str) -> MarkdownBlock:
    kind = classify_line(line)
    if kind == "bullet":
        return MarkdownBlock.bullet(line[len(BULLET_PREFIX):])
    if kind == "spacer":
        return MarkdownBlock.spacer()
    return MarkdownBlock.paragraph(line)


def render_markdown(text: str) -> List[MarkdownBlock]:
    """
    Render briefing markdown into display blocks.

    The empty string renders as a single empty paragraph, matching how the
    form displays a section the generator left blank.
    """
    if text == "":
        return [MarkdownBlock.paragraph("")]
    return [render_line(line) for line in text.split("\n")]
