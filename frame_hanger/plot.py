"""Raster output of a :class:`RenderModel` through matplotlib."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .render.colors import parse_color
from .render.primitives import Line, Rect, RenderModel, Text

logger = logging.getLogger(__name__)

BACKGROUND = "#1F2937"


def render_png(model: RenderModel, path: Union[str, Path], *, dpi: int = 96) -> Path:
    """Draw ``model`` and save it as a PNG at ``path``."""

    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    from matplotlib.patches import Rectangle

    # one display pixel per figure pixel; matplotlib sizes are in points
    px_to_pt = 72.0 / dpi
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fig = plt.figure(figsize=(model.width / dpi, model.height / dpi), dpi=dpi)
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    ax.set_xlim(0, model.width)
    ax.set_ylim(model.height, 0)  # display y grows downward
    ax.set_axis_off()
    fig.patch.set_facecolor(BACKGROUND)

    for z, prim in enumerate(model.primitives):
        if isinstance(prim, Rect):
            ax.add_patch(
                Rectangle(
                    (prim.x, prim.y),
                    prim.width,
                    prim.height,
                    facecolor=parse_color(prim.fill) if prim.fill else "none",
                    edgecolor=parse_color(prim.stroke) if prim.stroke else "none",
                    linewidth=prim.line_width * px_to_pt,
                    zorder=z,
                )
            )
        elif isinstance(prim, Line):
            ax.plot(
                [prim.x1, prim.x2],
                [prim.y1, prim.y2],
                color=parse_color(prim.stroke),
                linewidth=prim.line_width * px_to_pt,
                solid_capstyle="butt",
                zorder=z,
            )
        elif isinstance(prim, Text):
            ax.text(
                prim.x,
                prim.y,
                prim.text,
                color=parse_color(prim.fill),
                fontsize=prim.font_size * px_to_pt,
                ha=prim.align,
                va="baseline",
                zorder=z,
            )

    fig.savefig(path, dpi=dpi, facecolor=fig.get_facecolor())
    plt.close(fig)
    logger.info("Wrote %dx%d px diagram to %s", round(model.width), round(model.height), path)
    return path
