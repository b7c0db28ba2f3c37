from MarkDoc import markdown_parser
from MarkDoc.model import (
    Blank,
    BlockQuote,
    BulletList,
    CodeBlock,
    Heading,
    OrderedList,
    Paragraph,
    TableBlock,
)
from MarkDoc.renderer_html import STYLESHEET, render_html, render_page, to_tokens, to_tree
from MarkDoc.sample import SAMPLE_MARKDOWN

TREE_TYPES = {
    Heading: "heading",
    Paragraph: "paragraph",
    BlockQuote: "blockquote",
    BulletList: "bullet_list",
    OrderedList: "ordered_list",
    CodeBlock: "code_container",
    TableBlock: "table",
    Blank: "spacer",
}


def _html(text):
    return render_html(markdown_parser.parse_markdown(text))


def test_end_to_end_fragment():
    html = _html("# Title\n\nPlain text with **bold**.")
    assert html == (
        '<div class="markdoc-preview">\n'
        "<h1>Title</h1>\n"
        '<div class="spacer"></div>\n'
        "<p>Plain text with <strong>bold</strong>.</p>\n"
        "</div>\n"
    )


def test_inline_kinds_map_to_tags():
    html = _html("a *b* `c<d>`")
    assert "<p>a <em>b</em> <code>c&lt;d&gt;</code></p>" in html


def test_text_is_escaped():
    assert "&lt;script&gt;" in _html("<script>alert(1)</script>")


def test_lists_render_items_in_order():
    html = _html("9. first\n3. second\n\n- x\n- y")
    assert "<ol>\n<li>first</li>\n<li>second</li>\n</ol>" in html
    assert "<ol start" not in html
    assert "<ul>\n<li>x</li>\n<li>y</li>\n</ul>" in html


def test_blockquote_wraps_joined_paragraph():
    assert "<blockquote>\n<p>one two</p>\n</blockquote>" in _html("> one\n> two")


def test_code_block_has_label_and_stays_raw():
    html = _html("```python\n# not a heading\n**x**\n```")
    assert '<div class="code-label">python</div>' in html
    assert '<pre><code class="language-python"># not a heading\n**x**\n</code></pre>' in html
    assert "<h1>" not in html
    assert "<strong>" not in html


def test_code_block_without_language():
    html = _html("```\nraw\n```")
    assert '<div class="code-label">code</div>' in html
    assert "<pre><code>raw\n</code></pre>" in html


def test_table_cells_carry_column_alignment():
    html = _html("| a | b | c |\n|:--|:-:|--:|\n| 1 | 2 | 3 | 4 |\n| 5 |")
    assert '<th style="text-align:left">a</th>' in html
    assert '<th style="text-align:center">b</th>' in html
    assert '<td style="text-align:right">3</td>' in html
    # Extra cells fall back to left; short rows render only what they have.
    assert '<td style="text-align:left">4</td>' in html
    assert '<tr>\n<td style="text-align:left">5</td>\n</tr>' in html


def test_table_without_rows_has_no_body():
    html = _html("| a |\n|---|")
    assert "<thead>" in html
    assert "<tbody>" not in html


def test_empty_span_sequence_renders_nothing():
    assert "<p></p>" in _html("**dropped")


def test_tokens_are_balanced():
    depth = 0
    for token in to_tokens(markdown_parser.parse_markdown(SAMPLE_MARKDOWN)):
        depth += token.nesting
        assert depth >= 0
    assert depth == 0


def test_tree_mirrors_block_sequence():
    document = markdown_parser.parse_markdown(SAMPLE_MARKDOWN)
    tree = to_tree(document)
    assert [node.type for node in tree.children] == [TREE_TYPES[type(b)] for b in document.blocks]


def test_render_page_includes_stylesheet_and_escaped_title():
    page = render_page(markdown_parser.parse_markdown("hi"), title="A & B")
    assert page.startswith("<!DOCTYPE html>")
    assert "<title>A &amp; B</title>" in page
    assert STYLESHEET in page
    assert '<div class="markdoc-preview">' in page
