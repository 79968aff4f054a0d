"""TikZ emitter for wall diagrams."""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Tuple

from .utils import latex_escape
from ..render.colors import parse_color
from ..render.primitives import Line, Primitive, Rect, RenderModel, Text

# Canvas pixels are CSS pixels: 96 per inch, 72.27 TeX points per inch.
PT_PER_PX = 72.27 / 96.0

TEXT_ANCHORS = {
    "left": "base west",
    "center": "base",
    "right": "base east",
}

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage[utf8]{inputenc}
\usepackage{adjustbox}
\usepackage{tikz}
\tikzset{
  wall/.style={line join=miter},
  lbl/.style={inner sep=0pt},
}
\begin{document}
\begin{minipage}[t]{\linewidth}
%s
\begin{adjustbox}{max width=\linewidth, max totalheight=\textheight, keepaspectratio}
%s
\end{adjustbox}
\end{minipage}
\end{document}
"""


def generate_tikz_document(model: RenderModel, *, title: Optional[str] = None) -> str:
    """Render a standalone LaTeX document for ``model``."""

    header = ""
    if title:
        header = (
            "\\noindent\\textbf{"
            + latex_escape(title.strip())
            + "}\\par\\vspace{4pt}\n"
        )
    return standalone_tpl % (header, generate_tikz_code(model))


def generate_tikz_code(model: RenderModel) -> str:
    """Emit a ``tikzpicture`` whose y axis points down like the display surface."""

    if not isinstance(model, RenderModel):
        raise TypeError("model must be an instance of RenderModel")

    palette: Dict[str, Tuple[str, float]] = {}
    definitions: List[str] = []
    body: List[str] = []

    def color_ref(spec: str) -> Tuple[str, float]:
        if spec not in palette:
            r, g, b, alpha = parse_color(spec)
            name = f"fh{len(palette)}"
            definitions.append(
                "  \\definecolor{%s}{RGB}{%d,%d,%d}"
                % (name, round(r * 255), round(g * 255), round(b * 255))
            )
            palette[spec] = (name, alpha)
        return palette[spec]

    for prim in model.primitives:
        body.append("  " + _emit_primitive(prim, color_ref))

    lines = [
        "\\begin{tikzpicture}[x=%spt, y=-%spt]" % (_format_float(PT_PER_PX), _format_float(PT_PER_PX))
    ]
    lines.extend(definitions)
    # whole surface, footer included
    lines.append(
        "  \\path[use as bounding box] (0, 0) rectangle (%s, %s);"
        % (_format_float(model.width), _format_float(model.height))
    )
    lines.extend(body)
    lines.append("\\end{tikzpicture}")
    return "\n".join(lines)


def _emit_primitive(prim: Primitive, color_ref) -> str:
    if isinstance(prim, Rect):
        tokens = ["wall"] if prim.role == "wall" else []
        if prim.fill:
            name, alpha = color_ref(prim.fill)
            tokens.append(f"fill={name}")
            if alpha < 1.0:
                tokens.append(f"fill opacity={_format_float(alpha)}")
        if prim.stroke:
            name, alpha = color_ref(prim.stroke)
            tokens.append(f"draw={name}")
            tokens.append(f"line width={_format_float(prim.line_width * PT_PER_PX)}pt")
            if alpha < 1.0:
                tokens.append(f"draw opacity={_format_float(alpha)}")
        command = "\\path" if prim.role != "wall" else "\\draw"
        return "%s[%s] (%s, %s) rectangle (%s, %s);" % (
            command,
            ", ".join(tokens),
            _format_float(prim.x),
            _format_float(prim.y),
            _format_float(prim.x + prim.width),
            _format_float(prim.y + prim.height),
        )
    if isinstance(prim, Line):
        name, alpha = color_ref(prim.stroke)
        tokens = [f"draw={name}", f"line width={_format_float(prim.line_width * PT_PER_PX)}pt"]
        if alpha < 1.0:
            tokens.append(f"draw opacity={_format_float(alpha)}")
        return "\\draw[%s] (%s, %s) -- (%s, %s);" % (
            ", ".join(tokens),
            _format_float(prim.x1),
            _format_float(prim.y1),
            _format_float(prim.x2),
            _format_float(prim.y2),
        )
    if isinstance(prim, Text):
        name, _ = color_ref(prim.fill)
        anchor = TEXT_ANCHORS.get(prim.align, "base")
        size_pt = prim.font_size * PT_PER_PX
        font = "\\fontsize{%s}{%s}\\selectfont" % (
            _format_float(size_pt),
            _format_float(size_pt * 1.2),
        )
        return "\\node[lbl, anchor=%s, text=%s, font=%s] at (%s, %s) {%s};" % (
            anchor,
            name,
            font,
            _format_float(prim.x),
            _format_float(prim.y),
            latex_escape(prim.text),
        )
    raise TypeError(f"unsupported primitive {prim!r}")


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.4f}"
    formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted
