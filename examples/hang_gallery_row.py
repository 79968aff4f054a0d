"""Example pipeline: solve a gallery row, nudge two frames, export a TikZ diagram."""

from pathlib import Path

from frame_hanger import LayoutSession, Rejection, format_layout, generate_tikz_document


def main() -> None:
    session = LayoutSession()
    outcome = session.calculate(
        wall_width=144,
        wall_height=96,
        picture_width=18,
        picture_height=24,
        quantity=5,
        hanging_height=66,
    )
    if isinstance(outcome, Rejection):
        print(outcome.message)
        return

    editor = session.edit_offsets()
    editor.set_offset(1, 3)
    editor.set_offset(3, 3)
    session.apply_offsets()

    print(format_layout(session.result))
    out = Path("gallery_row.tex")
    out.write_text(generate_tikz_document(session.render(900), title="Gallery row"), encoding="utf-8")
    print(f"TikZ document written to {out}")


if __name__ == "__main__":
    main()
