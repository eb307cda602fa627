"""LaTeX ``tabular`` rendering."""

from __future__ import annotations

from typing import Sequence

from .base import TableView

# Single pass so the braces of ``\textbackslash{}`` are not escaped again.
_LATEX_ESCAPES = str.maketrans(
    {
        "\\": r"\textbackslash{}",
        "_": r"\_",
        "&": r"\&",
        "%": r"\%",
        "$": r"\$",
        "#": r"\#",
        "{": r"\{",
        "}": r"\}",
        "~": r"\textasciitilde{}",
        "^": r"\textasciicircum{}",
    }
)

ROW_END = r" \\ \hline"


def latex_escape(text: str) -> str:
    return text.translate(_LATEX_ESCAPES)


def _latex_line(cells: Sequence[str]) -> str:
    return " & ".join(latex_escape(cell) for cell in cells) + ROW_END


def render_latex(view: TableView) -> str:
    spec = "|" + "l|" * len(view.field_names)
    lines = [
        r"\begin{tabular}{" + spec + "}",
        r"\hline",
        _latex_line(view.field_names),
    ]
    lines.extend(_latex_line(row) for row in view.text_rows())
    lines.append(r"\end{tabular}")
    return "\n".join(lines)
