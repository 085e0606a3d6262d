import io

import pytest

from rangelist.cli import main

EXAMPLE = """\
# worked example
add 4 21 A
add 28 42 B
add 72 85 I

add 7 13 C
add 18 30 D
add 38 51 E
add 54 66 F
add 1 24 G
add 36 69 H
"""

@pytest.fixture
def ops_file(tmp_path):
    def write(text):
        path = tmp_path / "ops.txt"
        path.write_text(text)
        return str(path)
    return write

def test_replay(ops_file, capsys):
    assert main([ops_file(EXAMPLE)]) == 0
    assert capsys.readouterr().out.strip() == "[(1,24),G][(25,30),D][(31,35),B][(36,69),H][(72,85),I]"

def test_multiword_values_and_remove(ops_file, capsys):
    assert main([ops_file("add 1 10 hello world\nremove 3 4\n")]) == 0
    assert capsys.readouterr().out.strip() == "[(1,2),hello world][(5,10),hello world]"

def test_strict_remove_flag(ops_file, capsys):
    path = ops_file("add 1 10 a\nremove 1 10\n")
    assert main([path]) == 0
    assert capsys.readouterr().out.strip() == ""
    assert main(["--strict-remove", path]) == 0
    assert capsys.readouterr().out.strip() == "[(1,10),a]"

def test_table(ops_file, capsys):
    assert main(["--table", ops_file(EXAMPLE)]) == 0
    out = capsys.readouterr().out
    assert "Start" in out and "Value" in out
    assert "| H " in out

def test_debug(ops_file, capsys):
    assert main(["-d", ops_file("add 4 21 A\nadd 7 13 C\n")]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "1: add 4 21 A -> [(4,21),A]"
    assert out[1] == "2: add 7 13 C -> [(4,6),A][(7,13),C][(14,21),A]"

def test_progress(ops_file, capsys):
    assert main(["--progress", ops_file(EXAMPLE)]) == 0
    assert capsys.readouterr().out.strip().endswith("[(72,85),I]")

def test_date_keys_from_env(ops_file, capsys, monkeypatch):
    monkeypatch.setenv("RANGELIST_KEYS", "date")
    assert main([ops_file("add 2024-01-01 2024-01-31 jan\nadd 2024-01-10 2024-01-10 x\n")]) == 0
    assert capsys.readouterr().out.strip() == (
        "[(2024-01-01,2024-01-09),jan][(2024-01-10,2024-01-10),x][(2024-01-11,2024-01-31),jan]")

def test_malformed_line(ops_file, capsys):
    assert main([ops_file("add 1 5 a\nadd 7 x\n")]) == 1
    assert capsys.readouterr().out.startswith("ERROR line 2:")

def test_unknown_op(ops_file, capsys):
    assert main([ops_file("move 1 5\n")]) == 1
    assert "unknown operation 'move'" in capsys.readouterr().out

def test_invalid_range(ops_file, capsys):
    assert main([ops_file("add 1 5 a\nadd 9 3 b\n")]) == 1
    out = capsys.readouterr().out
    assert out.startswith("ERROR line 2:")
    assert "start 9 > end 3" in out

def test_unknown_key_type_from_env(ops_file, capsys, monkeypatch):
    monkeypatch.setenv("RANGELIST_KEYS", "hex")
    assert main([ops_file("add 1 5 a\n")]) == 1
    out = capsys.readouterr().out
    assert out.startswith("ERROR unknown key type 'hex'")
    assert "date, int" in out

def test_stdin_left_open(capsys, monkeypatch):
    stdin = io.StringIO("add 4 21 A\nadd 7 13 C\n")
    monkeypatch.setattr("sys.stdin", stdin)
    assert main(["-"]) == 0
    assert capsys.readouterr().out.strip() == "[(4,6),A][(7,13),C][(14,21),A]"
    assert not stdin.closed
