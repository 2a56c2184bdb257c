"""Tests for the command-line entry point."""

import pytest
from PIL import Image

from pic2term import cli
from pic2term.core.render import FULL_BLOCK, LOWER_HALF_BLOCK


@pytest.fixture
def image_path(tmp_path):
    path = tmp_path / "wide.png"
    Image.new("RGB", (40, 20), (0, 128, 255)).save(path)
    return path


class TestParser:
    def test_defaults(self):
        args = cli._build_parser().parse_args(["a.png"])
        assert args.width is None
        assert args.height is None
        assert args.filter == "nearest"
        assert args.color == "256"

    def test_rejects_zero_width(self):
        with pytest.raises(SystemExit):
            cli._build_parser().parse_args(["a.png", "--width", "0"])

    def test_rejects_non_integer_height(self):
        with pytest.raises(SystemExit):
            cli._build_parser().parse_args(["a.png", "--height", "ten"])

    def test_rejects_unknown_filter(self):
        with pytest.raises(SystemExit):
            cli._build_parser().parse_args(["a.png", "--filter", "bicubic"])


class TestMain:
    def test_prints_lines(self, image_path, capsys):
        cli.main([str(image_path), "--width", "10", "--color", "none"])
        out = capsys.readouterr().out.splitlines()
        # 10 x 5 pixels -> 3 lines
        assert out == [LOWER_HALF_BLOCK * 10] * 2 + [FULL_BLOCK * 10]

    def test_colored_lines(self, image_path, capsys):
        cli.main([str(image_path), "--width", "4", "--height", "1"])
        out = capsys.readouterr().out.splitlines()
        assert len(out) == 1
        assert "\033[38;5;" in out[0]

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main([str(tmp_path / "missing.png"), "--width", "10"])
        assert exc.value.code == 1
        assert "File not found" in capsys.readouterr().err

    def test_unresolved_geometry(self, image_path, capsys, monkeypatch):
        monkeypatch.setattr("pic2term.utils.terminal.get_terminal_size", lambda: None)
        with pytest.raises(SystemExit) as exc:
            cli.main([str(image_path)])
        assert exc.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "--width or --height" in captured.err

    def test_uses_terminal_size(self, image_path, capsys, monkeypatch):
        monkeypatch.setattr(
            "pic2term.utils.terminal.get_terminal_size", lambda: (20, 10)
        )
        cli.main([str(image_path), "--color", "none"])
        out = capsys.readouterr().out.splitlines()
        # rows 10 -> 20; 20 cols is not < 20 so height limits; width 40 > 20,
        # shrink: (20, int(20 * 20 / 40)) = (20, 10) -> 5 lines
        assert len(out) == 5
        assert all(len(line) == 20 for line in out)
