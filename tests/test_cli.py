"""
Tests for the huehash command line: root inspector and subcommand routing.
"""

import pytest

from huehash import __version__
from huehash.logic.identicon.engine import IdenticonSession
from huehash.logic.identicon.seed import encode_payload
from huehash.main import main


def _run(capsys):
    """Run main and return (exit code, stdout, stderr)."""
    code = 0
    try:
        main()
    except SystemExit as exc:
        code = exc.code
    out, err = capsys.readouterr()
    return code, out, err


class TestInspector:

    def test_basic(self, cli_argv, capsys):
        cli_argv("-H", "ff0000")
        code, out, _ = _run(capsys)
        assert code == 0
        assert "#ff0000" in out

    def test_all_tech_infos(self, cli_argv, capsys):
        cli_argv("-H", "#336699", "-all", "-hb")
        code, out, _ = _run(capsys)
        assert code == 0
        for key in ("luminance", "rgb", "hsl", "hsb", "xyz", "lab", "contrast"):
            assert key in out
        assert "█" not in out

    def test_hsl_only(self, cli_argv, capsys):
        cli_argv("-H", "336699", "-hsl")
        _, out, _ = _run(capsys)
        assert "hsl(210.00deg, 50.00%, 40.00%)" in out
        assert "lab(" not in out

    def test_missing_hex(self, cli_argv, capsys):
        cli_argv()
        code, _, err = _run(capsys)
        assert code == 2
        assert "-H/--hex" in err

    def test_invalid_hex(self, cli_argv, capsys):
        cli_argv("-H", "xyz")
        code, _, err = _run(capsys)
        assert code == 2
        assert "invalid hex value" in err

    def test_misplaced_command(self, cli_argv, capsys):
        cli_argv("-H", "ff0000", "mix")
        code, _, err = _run(capsys)
        assert code == 2
        assert "must be the first argument" in err

    def test_version(self, cli_argv, capsys):
        cli_argv("--version")
        code, out, _ = _run(capsys)
        assert code == 0
        assert __version__ in out


class TestSubcommands:

    def test_identicon_cells(self, cli_argv, capsys):
        cli_argv("identicon", "-t", "hello", "-S", "5", "--cells")
        code, out, _ = _run(capsys)
        assert code == 0
        session = IdenticonSession(encode_payload("hello"), size=5, scale=2)
        for row in session.cells:
            assert " ".join(str(int(v)) for v in row) in out

    def test_identicon_palette_override(self, cli_argv, capsys):
        cli_argv("identicon", "-t", "hello", "-fg", "ff0000", "-p")
        code, out, _ = _run(capsys)
        assert code == 0
        assert "#ff0000" in out

    def test_identicon_requires_text(self, cli_argv, capsys):
        cli_argv("identicon")
        code, _, err = _run(capsys)
        assert code == 2
        assert "--text" in err

    def test_mix(self, cli_argv, capsys):
        cli_argv("mix", "-H", "000000", "-H", "ffffff")
        code, out, _ = _run(capsys)
        assert code == 0
        assert "#808080" in out

    def test_mix_needs_two_colors(self, cli_argv, capsys):
        cli_argv("mix", "-H", "000000")
        code, _, err = _run(capsys)
        assert code == 2
        assert "exactly two colors" in err

    def test_contrast(self, cli_argv, capsys):
        cli_argv("contrast", "-H", "ffffff", "-H", "000000")
        code, out, _ = _run(capsys)
        assert code == 0
        assert "21.00:1" in out

    def test_adjust(self, cli_argv, capsys):
        cli_argv("adjust", "-H", "ff0000", "--invert", "-v")
        code, out, _ = _run(capsys)
        assert code == 0
        assert "#00ffff" in out
        assert "invert" in out

    def test_level(self, cli_argv, capsys):
        cli_argv("level", "error", "--dark")
        code, out, _ = _run(capsys)
        assert code == 0
        assert "#dbb79a66" in out

    @pytest.mark.parametrize("name", ["identicon", "mix", "adjust", "contrast", "level"])
    def test_help(self, cli_argv, capsys, name):
        cli_argv(name, "--help")
        code, out, _ = _run(capsys)
        assert code == 0
        assert f"huehash {name}" in out
