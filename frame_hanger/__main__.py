import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from frame_hanger import (
    Rejection,
    check_layout,
    format_layout,
    format_rejection,
    generate_tikz_document,
    render,
    render_png,
    solve,
)
from frame_hanger.model import LayoutRequest
from frame_hanger.offsets import coerce_offset
from frame_hanger.render import DegenerateGeometryError

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_offsets(value: Optional[str]) -> Optional[List[float]]:
    if value is None:
        return None
    offsets: List[float] = []
    for part in value.split(","):
        try:
            offsets.append(coerce_offset(float(part)))
        except ValueError:
            logger.warning("Offset %r is not a number; using 0", part.strip())
            offsets.append(0.0)
    return offsets


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Evenly space a row of pictures on a wall")
    parser.add_argument("--wall-width", type=float, required=True, help="Wall width (in)")
    parser.add_argument("--wall-height", type=float, required=True, help="Wall height (in)")
    parser.add_argument("--picture-width", type=float, required=True, help="Picture width (in)")
    parser.add_argument("--picture-height", type=float, required=True, help="Picture height (in)")
    parser.add_argument("--quantity", type=float, required=True, help="Number of pictures (a whole number)")
    parser.add_argument(
        "--hanging-height",
        type=float,
        required=True,
        help="Distance from floor to the top of each picture (in)",
    )
    parser.add_argument(
        "--offsets",
        help="Comma separated vertical offsets per picture, + for up, - for down",
    )
    parser.add_argument(
        "--surface-width",
        type=int,
        default=800,
        help="Width of the rendered diagram in pixels (default: 800)",
    )
    parser.add_argument("--tikz-output-path", help="Write a standalone TikZ document to the given path")
    parser.add_argument("--png-output-path", help="Write a PNG diagram to the given path")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    request = LayoutRequest.from_values(
        args.wall_width,
        args.wall_height,
        args.picture_width,
        args.picture_height,
        args.quantity,
        args.hanging_height,
    )
    outcome = solve(request)
    if isinstance(outcome, Rejection):
        print(format_rejection(outcome), file=sys.stderr)
        raise SystemExit(1)
    check_layout(outcome)

    offsets = _parse_offsets(args.offsets)
    if offsets is not None:
        if len(offsets) != outcome.quantity:
            parser.error(f"--offsets needs {outcome.quantity} value(s), got {len(offsets)}")
        outcome.commit_offsets(offsets)

    print(format_layout(outcome))

    if args.tikz_output_path or args.png_output_path:
        try:
            model = render(outcome, request.hanging_height, args.surface_width)
        except DegenerateGeometryError as exc:
            parser.error(str(exc))
        if args.tikz_output_path:
            output_path = Path(args.tikz_output_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            logger.info("Writing TikZ document to %s", output_path)
            output_path.write_text(generate_tikz_document(model), encoding="utf-8")
            print(f"TikZ document written to {output_path}")
        if args.png_output_path:
            png_path = render_png(model, args.png_output_path)
            print(f"PNG diagram written to {png_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
