from boggle_solver import make_boggle_dict, perf, solve
from boggle_solver.test_utils import TESTDATA, WORDS_FILE


def test_solve(capsys):
    q_board = str(TESTDATA / "board-q.txt")
    one_board = str(TESTDATA / "board-1x1.txt")
    solve.main(["--dictionary", WORDS_FILE, q_board, one_board])
    captured = capsys.readouterr()
    assert captured.out == f"{q_board}: 12\n{one_board}: 0\n"
    assert captured.err.startswith("2 boards in ")


def test_solve_print_words(capsys):
    q_board = str(TESTDATA / "board-q.txt")
    solve.main(["--dictionary", WORDS_FILE, "--print_words", q_board])
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        f"{q_board}: 12",
        "DEN",
        "EST",
        "QUEST",
        "QUIT",
        "QUITS",
        "RAT",
        "RATS",
        "SAT",
        "STAR",
        "TAR",
    ]


def test_perf(capsys):
    perf.main(["--dictionary", WORDS_FILE, "--size", "33", "--random_seed", "808813", "10"])
    out = capsys.readouterr().out
    assert "Generating 10 3x3 boards..." in out
    assert "total_score=" in out


def test_normalize_word():
    assert make_boggle_dict.normalize_word("quest\n") == "QUEST"
    assert make_boggle_dict.normalize_word("  Boggle ") == "BOGGLE"
    assert make_boggle_dict.normalize_word("qi") is None
    assert make_boggle_dict.normalize_word("don't") is None
    assert make_boggle_dict.normalize_word("café") is None
    assert make_boggle_dict.normalize_word("\n") is None


def test_make_boggle_dict(tmp_path, monkeypatch, capsys):
    path = tmp_path / "raw.txt"
    path.write_text("apple\nIs\nco-op\nZebra\n\nquiz\n")
    monkeypatch.setattr("sys.argv", ["make_boggle_dict", str(path)])
    make_boggle_dict.main()
    assert capsys.readouterr().out == "APPLE\nZEBRA\nQUIZ\n"
