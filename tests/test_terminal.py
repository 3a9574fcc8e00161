import io
import logging
import os
import select
import termios
import threading

import pytest

from rgbterm import terminal
from rgbterm.terminal import ParseError, Terminal, TerminalIOError, parse_position


@pytest.mark.parametrize("row, col", [(1, 1), (24, 80), (999, 12345)])
def test_query_position_parses_reply(make_term, row, col):
    term = make_term(f"\x1b[{row};{col}R\n")
    assert term.query_position() == (row, col)


def test_reply_may_carry_surrounding_input(make_term):
    term = make_term("typed\x1b[7;3Rmore\n")
    assert term.query_position() == (7, 3)


def test_garbage_reply_raises_parse_error(make_term):
    term = make_term("garbage\n")
    with pytest.raises(ParseError) as excinfo:
        term.query_position()
    assert excinfo.value.reply == "garbage\n"


@pytest.mark.parametrize("reply", ["\x1b[24;R\n", "\x1b[;80R\n", "\x1b24;80R\n", "\x1b[24;80\n"])
def test_partial_reply_raises_parse_error(reply):
    with pytest.raises(ParseError):
        parse_position(reply)


def test_closed_input_raises_parse_error(make_term):
    term = make_term("")
    with pytest.raises(ParseError):
        term.query_position()


def test_query_times_out(monkeypatch):
    class Piped(io.StringIO):
        def fileno(self):
            return 42

    monkeypatch.setattr(terminal, "select", lambda r, w, x, timeout: ([], [], []))
    term = Terminal(stdout=io.StringIO(), stdin=Piped("\x1b[1;1R\n"), timeout=0.5)
    with pytest.raises(ParseError, match="0.5 seconds"):
        term.query_position()


def test_query_waits_for_ready_input(monkeypatch):
    class Piped(io.StringIO):
        def fileno(self):
            return 42

    calls = []

    def fake_select(r, w, x, timeout):
        calls.append((r, timeout))
        return (r, [], [])

    monkeypatch.setattr(terminal, "select", fake_select)
    term = Terminal(stdout=io.StringIO(), stdin=Piped("\x1b[2;9R\n"), timeout=0.5)
    assert term.query_position() == (2, 9)
    assert calls == [([42], 0.5)]


def test_write_flushes_immediately():
    class Recording(io.StringIO):
        flushes = 0

        def flush(self):
            self.flushes += 1
            super().flush()

    out = Recording()
    Terminal(stdout=out, stdin=io.StringIO()).write("\x1b[", "2J")
    assert out.getvalue() == "\x1b[2J"
    assert out.flushes == 1


def test_write_to_closed_stream_raises_io_error():
    out = io.StringIO()
    out.close()
    with pytest.raises(TerminalIOError):
        Terminal(stdout=out, stdin=io.StringIO()).write("\x1b[2J")


def test_broken_pipe_raises_io_error():
    class Broken(io.StringIO):
        def write(self, s):
            raise BrokenPipeError("pipe closed")

    with pytest.raises(TerminalIOError) as excinfo:
        Terminal(stdout=Broken(), stdin=io.StringIO()).write("x")
    assert isinstance(excinfo.value, OSError)
    assert isinstance(excinfo.value.__cause__, BrokenPipeError)


def test_read_from_closed_stream_raises_io_error():
    stdin = io.StringIO("\x1b[1;1R\n")
    stdin.close()
    with pytest.raises(TerminalIOError):
        Terminal(stdout=io.StringIO(), stdin=stdin, timeout=None).query_position()


def test_stdio_binds_current_streams(monkeypatch):
    out, inp = io.StringIO(), io.StringIO()
    monkeypatch.setattr("sys.stdout", out)
    monkeypatch.setattr("sys.stdin", inp)
    term = Terminal.stdio()
    assert term.stdout is out
    assert term.stdin is inp
    assert term.timeout == terminal.DEFAULT_QUERY_TIMEOUT


@pytest.fixture
def pty_term():
    """Terminal whose input is the slave end of a pseudo terminal, yields (master fd, terminal)."""

    pty = pytest.importorskip("pty")
    master, slave = pty.openpty()
    stdin = open(slave, "r", closefd=False)

    yield master, Terminal(stdout=io.StringIO(), stdin=stdin, timeout=2.0)

    stdin.close()
    os.close(slave)
    os.close(master)


def answer_later(master: int, reply: bytes, delay: float = 0.2) -> threading.Timer:
    timer = threading.Timer(delay, os.write, (master, reply))
    timer.start()
    return timer


def drain(master: int, wait: float = 0.3) -> bytes:
    out = b""
    while select.select([master], [], [], wait)[0]:
        try:
            chunk = os.read(master, 1024)
        except OSError:
            break
        if not chunk:
            break
        out += chunk
        wait = 0.05
    return out


def test_tty_query_reads_whole_reply(pty_term):
    master, term = pty_term
    timer = answer_later(master, b"\x1b[24;80R")
    assert term.query_position() == (24, 80)
    timer.join()
    assert term.stdout.getvalue() == "\x1b[6n\n"


def test_tty_reply_in_pieces(pty_term):
    master, term = pty_term
    first = answer_later(master, b"\x1b[24", delay=0.1)
    second = answer_later(master, b";80R", delay=0.3)
    assert term.query_position() == (24, 80)
    first.join()
    second.join()


def test_tty_reply_is_not_echoed(pty_term):
    master, term = pty_term
    timer = answer_later(master, b"\x1b[24;80R")
    term.query_position()
    timer.join()
    echoed = drain(master)
    assert b"24;80R" not in echoed
    assert b"^[" not in echoed


def test_tty_typed_ahead_r_before_report(pty_term):
    master, term = pty_term
    timer = answer_later(master, b"R\x1b[3;4R")
    assert term.query_position() == (3, 4)
    timer.join()


def test_tty_query_times_out(pty_term):
    _, term = pty_term
    term.timeout = 0.2
    with pytest.raises(ParseError, match="0.2 seconds"):
        term.query_position()


def test_tty_mode_restored_after_query(pty_term):
    master, term = pty_term
    before = termios.tcgetattr(term.stdin)
    timer = answer_later(master, b"\x1b[1;1R")
    term.query_position()
    timer.join()
    assert termios.tcgetattr(term.stdin) == before


def test_io_errors_are_not_logged_by_the_library(caplog):
    out = io.StringIO()
    out.close()
    with caplog.at_level(logging.DEBUG, logger="rgbterm"):
        with pytest.raises(TerminalIOError):
            Terminal(stdout=out, stdin=io.StringIO()).write("x")
        with pytest.raises(ParseError):
            parse_position("garbage\n")
    assert [r for r in caplog.records if r.levelno >= logging.WARNING] == []
