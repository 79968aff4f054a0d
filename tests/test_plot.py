from frame_hanger import LayoutRequest, render, render_png, solve

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def test_render_png_writes_image(tmp_path):
    result = solve(LayoutRequest.from_values(100, 80, 20, 15, 3, 60))
    result.commit_offsets([0.0, 4.0, -4.0])
    model = render(result, 60.0, 480)

    path = render_png(model, tmp_path / "nested" / "wall.png")

    assert path == tmp_path / "nested" / "wall.png"
    assert path.read_bytes().startswith(PNG_MAGIC)
