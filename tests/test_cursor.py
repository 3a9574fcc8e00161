import pytest

from rgbterm import cursor
from rgbterm.cursor import Cursor


@pytest.mark.parametrize("n, expected", [
    (5, "\x1b[5A"),
    (-5, "\x1b[5B"),
    (0, "\x1b[0A"),
    (1, "\x1b[1A"),
])
def test_move_vertical(term, n, expected):
    cursor.move_vertical(n, term)
    assert term.output == expected


@pytest.mark.parametrize("n, expected", [
    (10, "\x1b[10C"),
    (-15, "\x1b[15D"),
    (0, "\x1b[0C"),
])
def test_move_horizontal(term, n, expected):
    cursor.move_horizontal(n, term)
    assert term.output == expected


def test_move_to(term):
    cursor.move_to(1, 1, term)
    cursor.move_to(24, 80, term)
    assert term.output == "\x1b[1;1H\x1b[24;80H"


@pytest.mark.parametrize("operation, expected", [
    (cursor.move_to_home, "\x1b[H"),
    (cursor.move_to_next_line, "\x1b[E"),
    (cursor.scroll_up, "\x1bD"),
    (cursor.scroll_down, "\x1bM"),
    (cursor.clear_line_right, "\x1b[K"),
    (cursor.clear_line_left, "\x1b[1K"),
    (cursor.clear_line, "\x1b[2K"),
    (cursor.clear_screen_down, "\x1b[J"),
    (cursor.clear_screen_up, "\x1b[1J"),
    (cursor.clear_screen, "\x1b[2J"),
    (cursor.save_position, "\x1b7"),
    (cursor.restore_position, "\x1b8"),
])
def test_fixed_sequences(term, operation, expected):
    operation(term)
    assert term.output == expected


def test_each_call_writes_again(term):
    cursor.clear_line(term)
    cursor.clear_line(term)
    assert term.output == "\x1b[2K\x1b[2K"


def test_builders_and_aliases():
    assert Cursor.t(3, 4) == Cursor.to(3, 4) == "\x1b[3;4H"
    assert Cursor.u(2) == "\x1b[2A"
    assert Cursor.d(2) == "\x1b[2B"
    assert Cursor.r(2) == "\x1b[2C"
    assert Cursor.l(2) == "\x1b[2D"
    assert Cursor.vertical(-3) == Cursor.down(3)
    assert Cursor.horizontal(-3) == Cursor.left(3)


def test_writes_to_stdout_by_default(capsys):
    cursor.move_vertical(-2)
    cursor.save_position()
    assert capsys.readouterr().out == "\x1b[2B\x1b7"


def test_query_position(make_term):
    term = make_term("\x1b[24;80R\n")
    assert cursor.query_position(term) == (24, 80)
    assert term.output == "\x1b[6n\n"
