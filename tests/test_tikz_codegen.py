from __future__ import annotations

import pytest

from frame_hanger import LayoutRequest, render, solve
from frame_hanger.tikz_codegen import (
    generate_tikz_code,
    generate_tikz_document,
    latex_escape,
)


@pytest.fixture
def model():
    result = solve(LayoutRequest.from_values(100, 80, 20, 15, 3, 60))
    return render(result, 60.0, 440)


def test_generate_tikz_document_minimal_preamble(model) -> None:
    document = generate_tikz_document(model, title="Living room & hall")

    assert document.startswith("\\documentclass[border=2pt]{standalone}")
    assert "\\usepackage{tikz}" in document
    assert "\\textbf{Living room \\& hall}" in document
    assert document.rstrip().endswith("\\end{document}")


def test_generate_tikz_code_flips_y_axis(model) -> None:
    tikz = generate_tikz_code(model)

    first = tikz.splitlines()[0]
    assert first.startswith("\\begin{tikzpicture}[x=")
    assert ", y=-" in first
    assert tikz.endswith("\\end{tikzpicture}")
    assert "\\path[use as bounding box] (0, 0) rectangle (440, 440);" in tikz


def test_wall_and_pictures_are_emitted(model) -> None:
    tikz = generate_tikz_code(model)

    assert "\\draw[wall, draw=fh0" in tikz
    assert "(20, 20) rectangle (420, 340);" in tikz
    assert "(60, 100) rectangle (140, 160);" in tikz
    assert tikz.count(" rectangle ") == 1 + 1 + 3


def test_labels_are_escaped(model) -> None:
    tikz = generate_tikz_code(model)

    assert "{P1};" in tikz and "{P3};" in tikz
    assert "{Gap: 10.00''};" in tikz
    assert "{Hanging Height: 60.00''};" in tikz
    assert "anchor=base west" in tikz


def test_colors_are_defined_once(model) -> None:
    tikz = generate_tikz_code(model)

    definitions = [line for line in tikz.splitlines() if "\\definecolor" in line]
    assert len(definitions) == len(set(definitions))
    assert "\\definecolor{fh0}{RGB}{55,65,81}" in tikz
    assert "draw opacity=0.1" in tikz


def test_generate_tikz_code_requires_render_model() -> None:
    with pytest.raises(TypeError):
        generate_tikz_code({"primitives": []})


def test_latex_escape() -> None:
    assert latex_escape('50% of 10"') == "50\\% of 10''"
    assert latex_escape("$5 & b_2") == "\\$5 \\& b\\_2"
    assert latex_escape("{x}~^") == "\\{x\\}\\textasciitilde{}\\textasciicircum{}"
