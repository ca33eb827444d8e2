"""
Tests for the briefing markdown renderer.
"""

import pytest

from betelsec.schemas.risk_assessment import MarkdownBlock
from betelsec.services.markdown_renderer import classify_line, render_markdown


def _kinds_and_text(blocks):
    return [(block.kind, block.text) for block in blocks]


class TestClassifyLine:
    """Tests for classify_line precedence."""

    @pytest.mark.parametrize("line,expected", [
        ("* item", "bullet"),
        ("* ", "bullet"),
        ("*  indented", "bullet"),
        ("", "spacer"),
        ("   ", "spacer"),
        ("\t", "spacer"),
        ("plain text", "paragraph"),
        ("*no space", "paragraph"),
        (" * leading space", "paragraph"),
        ("- dash bullet", "paragraph"),
        ("**bold**", "paragraph"),
    ])
    def test_classification(self, line, expected):
        assert classify_line(line) == expected


class TestRenderMarkdown:
    """Tests for render_markdown."""

    def test_mixed_lines_in_order(self):
        blocks = render_markdown("* a\nb\n\n* c")

        assert blocks == [
            MarkdownBlock.bullet("a"),
            MarkdownBlock.paragraph("b"),
            MarkdownBlock.spacer(),
            MarkdownBlock.bullet("c"),
        ]

    def test_empty_string_is_single_empty_paragraph(self):
        assert render_markdown("") == [MarkdownBlock.paragraph("")]

    def test_one_block_per_line_no_merging(self):
        text = "first\nsecond\n\n\n* x\n* y"
        blocks = render_markdown(text)

        assert len(blocks) == len(text.split("\n"))
        assert _kinds_and_text(blocks) == [
            ("paragraph", "first"),
            ("paragraph", "second"),
            ("spacer", None),
            ("spacer", None),
            ("bullet", "x"),
            ("bullet", "y"),
        ]

    def test_inline_markers_pass_through(self):
        blocks = render_markdown("* **PRISM** protects _everything_\n**Note:** read this")

        assert blocks[0].text == "**PRISM** protects _everything_"
        assert blocks[1] == MarkdownBlock.paragraph("**Note:** read this")

    def test_bullet_prefix_stripped_only_once(self):
        assert render_markdown("* * nested")[0] == MarkdownBlock.bullet("* nested")

    def test_trailing_newline_yields_trailing_spacer(self):
        blocks = render_markdown("line\n")

        assert _kinds_and_text(blocks) == [("paragraph", "line"), ("spacer", None)]

    def test_whitespace_only_line_is_spacer_not_paragraph(self):
        assert render_markdown("a\n   \nb")[1] == MarkdownBlock.spacer()

    def test_reclassifying_source_lines_matches_blocks(self):
        text = "Intro\n* one\n\n* two\nOutro **bold**\n  "
        blocks = render_markdown(text)

        for line, block in zip(text.split("\n"), blocks):
            assert classify_line(line) == block.kind
