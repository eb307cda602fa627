from gridtext import Table
from gridtext.renderers.html import html_escape
from gridtext.renderers.latex import latex_escape


def test_markdown_scenario(sample_table):
    assert sample_table.render_markdown() == "\n".join(
        [
            "| A | B |",
            "| --- | --- |",
            "| foo | 123 |",
            "| bar | 456 |",
        ]
    )


def test_markdown_ignores_alignment(sample_table):
    before = sample_table.render_markdown()
    sample_table.set_align_all("r")
    assert sample_table.render_markdown() == before


def test_markdown_no_fields():
    assert Table().render_markdown() == "(no fields)"


def test_html(sample_table):
    sample_table.add_row(['<a href="x">', "&"])
    assert sample_table.render_html() == "\n".join(
        [
            '<table border="1">',
            "<tr><th>A</th><th>B</th></tr>",
            "<tr><td>foo</td><td>123</td></tr>",
            "<tr><td>bar</td><td>456</td></tr>",
            "<tr><td>&lt;a href=&quot;x&quot;&gt;</td><td>&amp;</td></tr>",
            "</table>",
        ]
    )


def test_html_escape_leaves_apostrophe():
    assert html_escape("it's") == "it's"


def test_latex(sample_table):
    assert sample_table.render_latex() == "\n".join(
        [
            r"\begin{tabular}{|l|l|}",
            r"\hline",
            r"A & B \\ \hline",
            r"foo & 123 \\ \hline",
            r"bar & 456 \\ \hline",
            r"\end{tabular}",
        ]
    )


def test_latex_escaping_is_single_pass():
    assert latex_escape("a\\b") == r"a\textbackslash{}b"
    assert latex_escape("50% of $x_1 & #{y}") == r"50\% of \$x\_1 \& \#\{y\}"
    assert latex_escape("~^") == r"\textasciitilde{}\textasciicircum{}"


def test_mediawiki(sample_table):
    sample_table.add_row(["<b>", "a|b"])
    assert sample_table.render_mediawiki() == "\n".join(
        [
            '{| class="wikitable"',
            "|-",
            "! A !! B",
            "|-",
            "| foo || 123",
            "|-",
            "| bar || 456",
            "|-",
            "| <b> || a|b",
            "|}",
        ]
    )


def test_mediawiki_empty_table():
    assert Table().render_mediawiki() == '{| class="wikitable"\n|}'
