import json
from pathlib import Path
from keypad.__main__ import main

def _seed(tmp: Path) -> str:
    path = tmp / "words.txt"
    path.write_text("wt\nwu\nxu\nyt\n", encoding="utf-8")
    return str(path)


def test_cli_resolve_json(tmp_path: Path, capsys):
    rc = main(["--words", _seed(tmp_path), "--q", "981", "--json"])
    assert rc == 0
    out = json.loads(capsys.readouterr().out)
    assert out["validPermutations"] == {"98": ["WT", "WU", "XU", "YT"], "1": ["1"]}
    assert out["finalResults"] == ["WT 1", "WU 1", "XU 1", "YT 1"]


def test_cli_valid_table(tmp_path: Path, capsys):
    rc = main(["--words", _seed(tmp_path), "--mode", "valid", "--q", "98"])
    assert rc == 0
    assert "WT, WU, XU, YT" in capsys.readouterr().out


def test_cli_expand_skips_dictionary(capsys):
    rc = main(["--words", "/does/not/exist.txt", "--mode", "expand", "--q", "2", "--json"])
    assert rc == 0
    assert json.loads(capsys.readouterr().out) == {"2": ["A", "B", "C"]}


def test_cli_dictionary_failure_exit_code(tmp_path: Path, capsys):
    rc = main(["--words", str(tmp_path / "missing.txt"), "--q", "98"])
    assert rc == 2
    assert "dictionary unavailable" in capsys.readouterr().err


def test_cli_strict_rejects_letters(tmp_path: Path, capsys):
    rc = main(["--words", _seed(tmp_path), "--strict", "--q", "9x"])
    assert rc == 1
    assert "unmapped" in capsys.readouterr().err


def test_cli_renders_nested_splits(tmp_path: Path, capsys):
    path = tmp_path / "letters.txt"
    path.write_text("a\nd\ng\nh\n", encoding="utf-8")
    rc = main(["--words", str(path), "--q", "234"])
    assert rc == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("2 ") and lines[0].endswith("A")
    assert lines[1].startswith("34") and lines[1].endswith("-> split")
    assert lines[2].startswith("  3 ") and lines[2].endswith("D")
    assert lines[3].startswith("  4 ") and lines[3].endswith("G, H")
    assert "[" not in "\n".join(lines[:4])
    assert lines[-2:] == ["A D G", "A D H"]
