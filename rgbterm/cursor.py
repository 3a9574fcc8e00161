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

from typing import Optional, Tuple

from rgbterm.terminal import DSR_REQUEST, Terminal


class Cursor:
	"""
	Class with collection of cursor movement and clearing sequences:
	.t[o](line, column) | .r[ight](columns) | .l[eft](columns) | .u[p](lines) | .d[own](lines)
	| .vertical(lines) | .horizontal(columns) | .save | .restore | .clear_* | .scroll_*
	"""
	@staticmethod
	def to(line: int, col: int) -> str:
		return f'\033[{line};{col}H'	#* Move cursor to line, column
	@staticmethod
	def right(x: int) -> str:			#* Move cursor right x columns
		return f'\033[{x}C'
	@staticmethod
	def left(x: int) -> str:			#* Move cursor left x columns
		return f'\033[{x}D'
	@staticmethod
	def up(x: int) -> str:				#* Move cursor up x lines
		return f'\033[{x}A'
	@staticmethod
	def down(x: int) -> str:			#* Move cursor down x lines
		return f'\033[{x}B'

	@classmethod
	def vertical(cls, n: int) -> str:
		"""Up n lines for n >= 0, down -n lines otherwise.
		Zero is sent as is and most terminals move one line for it."""
		return cls.up(n) if n >= 0 else cls.down(-n)

	@classmethod
	def horizontal(cls, n: int) -> str:
		"""Right n columns for n >= 0, left -n columns otherwise, zero as in vertical()"""
		return cls.right(n) if n >= 0 else cls.left(-n)

	home: str = "\033[H"				#* Move cursor to line 1, column 1
	next_line: str = "\033[E"			#* Move cursor to start of next line
	scroll_up: str = "\033D"			#* Index, scroll up one line at bottom margin
	scroll_down: str = "\033M"			#* Reverse index, scroll down one line at top margin
	clear_line_right: str = "\033[K"
	clear_line_left: str = "\033[1K"
	clear_line: str = "\033[2K"
	clear_screen_down: str = "\033[J"
	clear_screen_up: str = "\033[1J"
	clear_screen: str = "\033[2J"
	save: str = "\0337" 				#* Save cursor position
	restore: str = "\0338" 				#* Restore saved cursor postion
	query: str = DSR_REQUEST
	t = to
	r = right
	l = left
	u = up
	d = down


def _out(seq: str, term: Optional[Terminal]):
	(term or Terminal.stdio()).write(seq)


def move_vertical(n: int, term: Optional[Terminal] = None):
	_out(Cursor.vertical(n), term)

def move_horizontal(n: int, term: Optional[Terminal] = None):
	_out(Cursor.horizontal(n), term)

def move_to_home(term: Optional[Terminal] = None):
	_out(Cursor.home, term)

def move_to(row: int, col: int, term: Optional[Terminal] = None):
	_out(Cursor.to(row, col), term)

def move_to_next_line(term: Optional[Terminal] = None):
	_out(Cursor.next_line, term)

def scroll_up(term: Optional[Terminal] = None):
	_out(Cursor.scroll_up, term)

def scroll_down(term: Optional[Terminal] = None):
	_out(Cursor.scroll_down, term)

def clear_line_right(term: Optional[Terminal] = None):
	_out(Cursor.clear_line_right, term)

def clear_line_left(term: Optional[Terminal] = None):
	_out(Cursor.clear_line_left, term)

def clear_line(term: Optional[Terminal] = None):
	_out(Cursor.clear_line, term)

def clear_screen_down(term: Optional[Terminal] = None):
	_out(Cursor.clear_screen_down, term)

def clear_screen_up(term: Optional[Terminal] = None):
	_out(Cursor.clear_screen_up, term)

def clear_screen(term: Optional[Terminal] = None):
	_out(Cursor.clear_screen, term)

def save_position(term: Optional[Terminal] = None):
	_out(Cursor.save, term)

def restore_position(term: Optional[Terminal] = None):
	_out(Cursor.restore, term)

def query_position(term: Optional[Terminal] = None) -> Tuple[int, int]:
	"""Blocks until the terminal reports (row, column) or the handle's timeout expires"""
	return (term or Terminal.stdio()).query_position()
