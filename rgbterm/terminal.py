# indent = tab
# tab-size = 4

# Copyright 2020 Aristocratos (jakob@qvantnet.com)

# Copyright 2021 Sklavit

#    Licensed under the Apache License, Version 2.0 (the "License");
#    you may not use this file except in compliance with the License.
#    You may obtain a copy of the License at

#        http://www.apache.org/licenses/LICENSE-2.0

#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS,
#    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#    See the License for the specific language governing permissions and
#    limitations under the License.

import codecs
import io
import os
import re
import sys
import termios
import tty
from select import select
from time import monotonic
from typing import Optional, TextIO, Tuple

from rgbterm.config import errlog

DEFAULT_QUERY_TIMEOUT: Optional[float] = 1.0

DSR_REQUEST: str = "\033[6n"
DSR_REPLY = re.compile(r"\x1b\[(\d+);(\d+)R")


class TerminalIOError(OSError):
	"""Writing to or reading from the terminal streams failed"""


class ParseError(ValueError):
	"""The terminal reply did not match the cursor position report format"""
	def __init__(self, message: str, reply: str = ""):
		super().__init__(message)
		self.reply = reply


class Raw(object):
	"""Set raw input mode for device"""
	def __init__(self, stream):
		self.stream = stream
		self.fd = self.stream.fileno()
	def __enter__(self):
		self.original_stty = termios.tcgetattr(self.stream)
		tty.setcbreak(self.stream)
	def __exit__(self, type, value, traceback):
		termios.tcsetattr(self.stream, termios.TCSANOW, self.original_stty)


def parse_position(reply: str) -> Tuple[int, int]:
	"""Extract (row, column) from a cursor position report: ESC [ row ; col R"""
	match = DSR_REPLY.search(reply)
	if match is None:
		raise ParseError(f'Malformed cursor position reply: {reply!r}', reply)
	return int(match.group(1)), int(match.group(2))


class Terminal:
	"""Handle on the terminal streams every escape sequence goes through
	* .write(*args) : Write all arguments as one string and flush
	* .query_position() : Ask the terminal for the cursor position, returns (row, column)
	* .stdio() : New handle on the current sys.stdout and sys.stdin
	"""
	stdout: TextIO
	stdin: TextIO
	timeout: Optional[float]

	def __init__(self, stdout: Optional[TextIO] = None, stdin: Optional[TextIO] = None, timeout: Optional[float] = DEFAULT_QUERY_TIMEOUT):
		self.stdout = stdout if stdout is not None else sys.stdout
		self.stdin = stdin if stdin is not None else sys.stdin
		self.timeout = timeout

	@classmethod
	def stdio(cls) -> "Terminal":
		return cls()

	def write(self, *args: str):
		out: str = "".join(args)
		try:
			self.stdout.write(out)
			self.stdout.flush()
		except (OSError, ValueError) as e:
			raise TerminalIOError(f'Failed writing {out!r} to terminal: {e}') from e

	def query_position(self) -> Tuple[int, int]:
		'''Request a Device Status Report and parse the reply into (row, column)'''
		try:
			if self._isatty():
				#* Echo and line buffering are off before the request goes out
				with Raw(self.stdin):
					self.write(DSR_REQUEST, "\n")
					reply: str = self._read_tty_reply()
			else:
				self.write(DSR_REQUEST, "\n")
				self._wait_input(self._fileno(), self.timeout)
				reply = self.stdin.readline()
		except (ParseError, TerminalIOError):
			raise
		except (OSError, ValueError) as e:
			raise TerminalIOError(f'Failed reading from terminal: {e}') from e
		errlog.debug(f'Cursor position reply: {reply!r}')
		if not reply:
			raise ParseError("No cursor position reply, input stream closed", reply)
		return parse_position(reply)

	def _isatty(self) -> bool:
		try:
			return self.stdin.isatty()
		except ValueError:
			return False

	def _fileno(self) -> Optional[int]:
		try:
			return self.stdin.fileno()
		except (AttributeError, io.UnsupportedOperation):
			return None

	def _wait_input(self, fd: Optional[int], timeout: Optional[float]):
		#* Streams without a file descriptor and a None timeout always block
		if timeout is None or fd is None:
			return
		if not select([fd], [], [], max(timeout, 0))[0]:
			raise ParseError(f'No cursor position reply within {self.timeout} seconds')

	def _read_tty_reply(self) -> str:
		"""Read straight from the descriptor until a full report arrived, bytes typed ahead are kept in the reply"""
		fd: int = self.stdin.fileno()
		decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
		deadline: Optional[float] = None if self.timeout is None else monotonic() + self.timeout
		reply: str = ""
		while DSR_REPLY.search(reply) is None:
			self._wait_input(fd, None if deadline is None else deadline - monotonic())
			chunk: bytes = os.read(fd, 64)
			if not chunk:
				break
			reply += decoder.decode(chunk)
		return reply
