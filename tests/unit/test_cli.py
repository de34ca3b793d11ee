"""
Unit tests for the command line entry point.
"""

import json

from main import main


class TestCli:
    """Tests for main()."""

    def test_generate(self, capsys):
        assert main(["generate", "--count", "3", "--seed", "5"]) == 0
        out = capsys.readouterr().out
        assert out.count("[artifact_") == 3
        assert " of " in out

    def test_generate_is_seeded(self, capsys):
        main(["generate", "--seed", "11"])
        first = capsys.readouterr().out
        from artifacts.registry import clear_registry
        clear_registry()
        main(["generate", "--seed", "11"])
        assert capsys.readouterr().out == first

    def test_generate_natural_with_property(self, capsys):
        assert main(["generate", "--kind", "natural", "--property", "glowing", "--seed", "1"]) == 0
        assert "glowing " in capsys.readouterr().out

    def test_unknown_property(self, capsys):
        assert main(["generate", "--kind", "natural", "--property", "sparkly"]) == 2
        assert "Unknown property" in capsys.readouterr().err

    def test_generate_debug_and_save(self, tmp_path, capsys):
        path = tmp_path / "artifacts.json"
        assert main(["generate", "--kind", "debug", "--save", str(path)]) == 0
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data[0]["description"] == "The architect's cube."

    def test_show(self, tmp_path, capsys):
        path = tmp_path / "artifacts.json"
        main(["generate", "--count", "2", "--seed", "3", "--save", str(path)])
        capsys.readouterr()
        assert main(["show", str(path)]) == 0
        assert capsys.readouterr().out.count("[artifact_") == 2

    def test_show_missing(self, tmp_path, capsys):
        assert main(["show", str(tmp_path / "none.json")]) == 0
        assert "No artifacts" in capsys.readouterr().out

    def test_show_corrupted(self, tmp_path, capsys):
        path = tmp_path / "artifacts.json"
        path.write_text("[{]", encoding="utf-8")
        assert main(["show", str(path)]) == 1
        assert "corrupted" in capsys.readouterr().err

    def test_show_invalid_utf8(self, tmp_path, capsys):
        path = tmp_path / "artifacts.json"
        path.write_bytes(b"\xff[]")
        assert main(["show", str(path)]) == 1
        assert "corrupted" in capsys.readouterr().err

    def test_validate(self, capsys):
        assert main(["validate"]) == 0
        assert "All artifact tables are valid" in capsys.readouterr().out
