"""Tests for the command line entry point."""

import random
import xml.etree.ElementTree as ET

import pytest

from blob_glass.cli import build_parser, main, parse_palette
from blob_glass.config import DEFAULT_PALETTE


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.output == []
        assert (args.width, args.height) == (5120, 2880)
        assert args.png is None

    def test_short_options(self):
        args = build_parser().parse_args(["-w", "300", "-h", "200", "out.svg"])
        assert (args.width, args.height) == (300, 200)
        assert args.output == ["out.svg"]

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--help"])
        assert exc.value.code == 0
        assert "--width" in capsys.readouterr().out

    @pytest.mark.parametrize("value", ["0", "-5", "abc"])
    def test_bad_dimensions(self, value):
        with pytest.raises(SystemExit) as exc:
            main(["-w", value])
        assert exc.value.code == 2

    def test_bad_scale(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "a.svg"), "--scale", "0"])
        assert exc.value.code == 2


class TestParsePalette:
    def test_default(self):
        assert parse_palette(None, None) == DEFAULT_PALETTE

    def test_list(self):
        assert parse_palette("#fff, 000 ,", None) == ("#fff", "000")

    def test_random(self):
        palette = parse_palette("random", random.Random(1))
        assert len(palette) == 5


class TestMain:
    def test_too_many_outputs(self, tmp_path, capsys):
        a, b = tmp_path / "a.svg", tmp_path / "b.svg"
        assert main([str(a), str(b)]) == 1
        assert "usage" in capsys.readouterr().out
        assert not a.exists() and not b.exists()

    def test_writes_svg(self, tmp_path, capsys):
        out = tmp_path / "art.svg"
        assert main([str(out), "-w", "200", "-h", "100", "--seed", "4"]) == 0

        root = ET.fromstring(out.read_bytes())
        assert (root.get("width"), root.get("height")) == ("200", "100")
        printed = capsys.readouterr().out
        assert "Creating SVG (200 x 100)" in printed
        assert "Saved SVG" in printed

    def test_seed_is_repeatable(self, tmp_path):
        first, second = tmp_path / "1.svg", tmp_path / "2.svg"
        main([str(first), "-w", "150", "-h", "90", "--seed", "12"])
        main([str(second), "-w", "150", "-h", "90", "--seed", "12"])
        assert first.read_bytes() == second.read_bytes()

    def test_invalid_palette_writes_nothing(self, tmp_path, capsys):
        out = tmp_path / "art.svg"
        assert main([str(out), "-w", "200", "-h", "100", "--palette", "#454d66,zzz"]) == 1
        assert not out.exists()
        assert "Invalid color" in capsys.readouterr().err

    def test_invalid_background_keeps_existing_file(self, tmp_path):
        out = tmp_path / "art.svg"
        out.write_text("previous")
        assert main([str(out), "-w", "200", "-h", "100", "--background", "nope"]) == 1
        assert out.read_text() == "previous"

    def test_unwritable_output(self, tmp_path, capsys):
        out = tmp_path / "missing" / "art.svg"
        assert main([str(out), "-w", "50", "-h", "50"]) == 1
        assert "Could not write output" in capsys.readouterr().err

    def test_debug_prints_palette(self, tmp_path, capsys):
        out = tmp_path / "art.svg"
        assert main([str(out), "-w", "120", "-h", "80", "--seed", "1", "--debug"]) == 0
        printed = capsys.readouterr().out
        assert "Palette: #454d66" in printed
        assert "Blobs:" in printed
