import pytest

import frame_hanger.__main__ as cli

BASE_ARGS = [
    "--wall-width", "100",
    "--wall-height", "80",
    "--picture-width", "20",
    "--picture-height", "15",
    "--quantity", "3",
    "--hanging-height", "60",
]


def test_main_prints_layout(capsys):
    cli.main(BASE_ARGS)

    out = capsys.readouterr().out
    assert 'Evenly distributed gap between pictures: 10.00"' in out
    assert 'Picture 2 Center: 50.00"' in out


def test_main_applies_offsets(capsys):
    cli.main(BASE_ARGS + ["--offsets", "1.5,oops,-2"])

    out = capsys.readouterr().out
    assert 'Picture 1 Top: 61.50"' in out
    assert 'Picture 2 Top: 60.00"' in out
    assert 'Picture 3 Top: 58.00"' in out


def test_main_rejects_offset_count(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(BASE_ARGS + ["--offsets", "1,2"])

    assert exc.value.code == 2


def test_main_reports_rejection(capsys):
    args = list(BASE_ARGS)
    args[args.index("--quantity") + 1] = "6"

    with pytest.raises(SystemExit) as exc:
        cli.main(args)

    assert exc.value.code == 1
    assert "too wide" in capsys.readouterr().err


def test_main_accepts_integral_float_quantity(capsys):
    args = list(BASE_ARGS)
    args[args.index("--quantity") + 1] = "3.0"

    cli.main(args)

    assert 'Picture 3 Center: 80.00"' in capsys.readouterr().out


def test_main_rejects_fractional_quantity(capsys):
    args = list(BASE_ARGS)
    args[args.index("--quantity") + 1] = "2.5"

    with pytest.raises(SystemExit) as exc:
        cli.main(args)

    assert exc.value.code == 1
    assert "Please enter valid positive numbers" in capsys.readouterr().err


def test_main_writes_outputs(tmp_path, monkeypatch):
    written = []

    def _render_png(model, path):
        written.append((model.width, str(path)))
        return path

    monkeypatch.setattr(cli, "render_png", _render_png)
    tikz_path = tmp_path / "out" / "wall.tex"
    png_path = tmp_path / "out" / "wall.png"

    cli.main(
        BASE_ARGS
        + [
            "--surface-width", "640",
            "--tikz-output-path", str(tikz_path),
            "--png-output-path", str(png_path),
        ]
    )

    assert tikz_path.read_text(encoding="utf-8").startswith("\\documentclass")
    assert written == [(640.0, str(png_path))]


def test_main_rejects_tiny_surface(tmp_path):
    with pytest.raises(SystemExit) as exc:
        cli.main(BASE_ARGS + ["--surface-width", "30", "--tikz-output-path", str(tmp_path / "x.tex")])

    assert exc.value.code == 2
