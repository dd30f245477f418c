import io

from msgboard.board import Board, Direction
from msgboard.cli import extend, main


def _seven_space_board():
    board = Board()
    for width in range(7):
        board.post(0, width, Direction.HORIZONTAL, " ")
    return board


def test_extend_adds_rows():
    board = _seven_space_board()
    extend(board, 2, 0, 0)
    assert board.max_row == 3
    assert board.read(3, 0, Direction.HORIZONTAL, 8) == " " * 8


def test_extend_noop_when_fits():
    board = _seven_space_board()
    before = board.render()
    extend(board, 0, 0, 3)
    assert board.render() == before


def _run(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return main([])


def test_exit_on_other_letter(monkeypatch, capsys):
    assert _run(monkeypatch, "N\n") == 0
    assert "Welcome to the text board." in capsys.readouterr().out


def test_exit_on_end_of_input(monkeypatch):
    assert _run(monkeypatch, "") == 0


def test_manual_post_and_save(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    assert _run(monkeypatch, "Y\nhi\n0\n0\nS\nout.txt\nQ\n") == 0
    saved = (tmp_path / "out.txt").read_text(encoding="utf-8")
    assert saved == "hi" + " " * 5 + "\n"


def test_manual_post_shown(monkeypatch, capsys, tmp_path):
    monkeypatch.chdir(tmp_path)
    assert _run(monkeypatch, "Y\nhello\n0\n0\nQ\n") == 0
    assert "hello  \n" in capsys.readouterr().out


def test_file_post(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "in.txt").write_text("ab\ncd\n", encoding="utf-8")
    assert _run(monkeypatch, "P\nin.txt\n1\n0\nS\nout.txt\nQ\n") == 0
    lines = (tmp_path / "out.txt").read_text(encoding="utf-8").splitlines()
    assert lines[1].startswith("ab")
    assert lines[2].startswith("cd")
    assert len(lines) == 3


def test_missing_file_is_created(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    assert _run(monkeypatch, "P\nnew.txt\n0\n0\nQ\n") == 0
    assert (tmp_path / "new.txt").read_text(encoding="utf-8") == ""