import pytest

from splendorui.leaderboard import (
    Leaderboard,
    LeaderboardEntry,
    is_win_line,
    player_in_line,
)

DATE = "2023-01-05 12:34:56.1"
PREFIX = "[Win]    "


def win_line(name, date=DATE):
    return PREFIX + date + " " + name + " won the game"


def test_is_win_line():
    assert is_win_line(win_line("Adrian")) is True
    assert is_win_line("[Info] game started") is False


def test_player_in_line_order():
    assert player_in_line("Bogdan beat Adrian") == "Adrian"
    assert player_in_line("Teodor") == "Teodor"
    assert player_in_line("nobody here") is None


def test_empty_board_defaults():
    board = Leaderboard.from_lines([])
    assert len(board) == 5
    assert all(entry.wins == 0 and entry.last_win == "None" for entry in board)


def test_counts_wins_and_last_date():
    later = "2023-02-07 08:00:00.9"
    board = Leaderboard.from_lines([win_line("Adrian"), win_line("Adrian", later), win_line("Eugen")])
    assert board["Adrian"] == LeaderboardEntry("Adrian", 2, later)
    assert board["Eugen"] == LeaderboardEntry("Eugen", 1, DATE)
    assert board["Bogdan"].wins == 0


def test_non_win_and_unknown_lines_ignored():
    board = Leaderboard.from_lines(["[Info] Adrian joined", win_line("Stranger")])
    assert sum(entry.wins for entry in board) == 0


def test_short_win_line_raises():
    with pytest.raises(ValueError):
        Leaderboard.from_lines(["[Win]"])


def test_ranked_orders_by_wins_then_name():
    board = Leaderboard.from_lines([win_line("Teodor"), win_line("Teodor"), win_line("Bogdan")])
    names = [entry.name for entry in board.ranked()]
    assert names[:2] == ["Teodor", "Bogdan"]
    assert names[2:] == ["?", "Adrian", "Eugen"]
    wins = [entry.wins for entry in board.ranked()]
    assert wins == sorted(wins, reverse=True)


def test_load_from_file(tmp_path):
    log = tmp_path / "game.log"
    log.write_text(win_line("Eugen") + "\n" + win_line("Adrian") + "\n", encoding="utf-8")
    board = Leaderboard.load(log)
    assert board["Eugen"].wins == 1
    assert board["Adrian"].last_win == DATE


def test_load_missing_file_gives_defaults(tmp_path):
    board = Leaderboard.load(tmp_path / "missing.log")
    assert [entry.wins for entry in board] == [0] * 5