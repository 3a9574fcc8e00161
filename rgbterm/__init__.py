"""24-bit colour and cursor control escape sequences for ANSI terminals"""

from rgbterm.config import VERSION
from rgbterm.terminal import ParseError, Terminal, TerminalIOError
from rgbterm.colours import RGB, Colour, Gradient, Plane
from rgbterm.cursor import Cursor
