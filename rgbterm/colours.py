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

from enum import IntEnum
from typing import List, NamedTuple, Optional

from rgbterm.terminal import Terminal

RESET: str = "\033[0m"


class Plane(IntEnum):
	"""Which part of a character cell a colour is set on, value is the SGR code"""
	FG = 38
	BG = 48

	@property
	def reset(self) -> str:
		return "\033[39m" if self is Plane.FG else "\033[49m"


class RGB(NamedTuple):
	'''24-bit colour value
	-- RGB(red, green, blue) with channels 0-255
	-- RGB.from_hex accepts 6 digit hexadecimal "#RRGGBB" or 2 digit greyscale "#FF"
	-- RGB.from_dec accepts decimal RGB "255 255 255" as a string
	* Values:  .red: int  |  .green: int  |  .blue: int  |  .hexa: str
	'''
	red: int
	green: int
	blue: int

	@classmethod
	def from_hex(cls, hexa: str) -> "RGB":
		try:
			if len(hexa) == 3 and hexa.startswith("#"):
				c = int(hexa[1:3], base=16)
				return cls(c, c, c)
			elif len(hexa) == 7 and hexa.startswith("#"):
				return cls(int(hexa[1:3], base=16), int(hexa[3:5], base=16), int(hexa[5:7], base=16))
		except ValueError:
			pass
		raise ValueError(f'Incorrectly formatted hexadecimal rgb string: {hexa}')

	@classmethod
	def from_dec(cls, dec: str) -> "RGB":
		c_t = tuple(map(int, dec.split()))
		if len(c_t) != 3:
			raise ValueError(f'RGB dec should be "0-255 0-255 0-255", got "{dec}"')
		if any(c < 0 or c > 255 for c in c_t):
			raise ValueError(f'RGB values out of range: {dec}')
		return cls(*c_t)

	@property
	def hexa(self) -> str:
		return f'#{self.red:02x}{self.green:02x}{self.blue:02x}'

	def body(self, plane: Plane) -> str:
		return f'{int(plane)};2;{self.red};{self.green};{self.blue}'


def colour_escape(body: str) -> str:
	return f'\033[{body}m'


class Colour(NamedTuple):
	'''Foreground and/or background colour applied as one SGR sequence
	-- Colour.fg(rgb), Colour.bg(rgb) and Colour.fg_bg(fg, bg) bind one or both planes
	__str__ returns escape sequence to set the colour
	__call__(*args) joins str arguments to a string and paints it
	'''
	fg_rgb: Optional[RGB] = None
	bg_rgb: Optional[RGB] = None

	@classmethod
	def fg(cls, rgb: RGB) -> "Colour":
		return cls(fg_rgb=rgb)

	@classmethod
	def bg(cls, rgb: RGB) -> "Colour":
		return cls(bg_rgb=rgb)

	@classmethod
	def fg_bg(cls, fg: RGB, bg: RGB) -> "Colour":
		return cls(fg_rgb=fg, bg_rgb=bg)

	def render_body(self) -> str:
		bodies: List[str] = []
		if self.fg_rgb is not None:
			bodies.append(self.fg_rgb.body(Plane.FG))
		if self.bg_rgb is not None:
			bodies.append(self.bg_rgb.body(Plane.BG))
		return ";".join(bodies)

	def escape(self) -> str:
		return colour_escape(self.render_body())

	def paint(self, *args: str) -> str:
		"""Wrap text in this colour followed by a full reset"""
		return f'{self.escape()}{"".join(args)}{RESET}'

	def apply(self, term: Optional[Terminal] = None):
		"""Write the escape sequence, the caller is responsible for resetting later"""
		(term or Terminal.stdio()).write(self.escape())

	def __str__(self) -> str:
		return self.escape()

	def __call__(self, *args: str) -> str:
		return self.paint(*args)


class Gradient:
	"""Linear interpolation between two colours, indexed 0 to steps - 1"""
	start: RGB
	end: RGB
	colours: List[RGB]

	def __init__(self, start: RGB, end: RGB, steps: int = 101):
		if steps < 2:
			raise ValueError(f'Gradient needs at least 2 steps, got {steps}')
		self.start = start
		self.end = end
		self.colours = []
		for i in range(steps):
			self.colours.append(RGB(*(round(s + (e - s) * i / (steps - 1)) for s, e in zip(start, end))))

	def __getitem__(self, index: int) -> RGB:
		return self.colours[index]

	def __len__(self) -> int:
		return len(self.colours)


def make_foreground(rgb: RGB) -> Colour:
	return Colour.fg(rgb)

def make_background(rgb: RGB) -> Colour:
	return Colour.bg(rgb)

def make_foreground_background(fg_rgb: RGB, bg_rgb: RGB) -> Colour:
	return Colour.fg_bg(fg_rgb, bg_rgb)

def render_body(colour: Colour) -> str:
	return colour.render_body()

def escape(colour: Colour) -> str:
	return colour.escape()

def paint(colour: Colour, text: str) -> str:
	return colour.paint(text)

def apply(colour: Colour, term: Optional[Terminal] = None):
	colour.apply(term)


def reset(plane: Optional[Plane] = None, term: Optional[Terminal] = None):
	"""Reset one plane to the terminal default, or both if plane is None"""
	(term or Terminal.stdio()).write(RESET if plane is None else plane.reset)

def reset_all(term: Optional[Terminal] = None):
	reset(None, term)

def reset_foreground(term: Optional[Terminal] = None):
	reset(Plane.FG, term)

def reset_background(term: Optional[Terminal] = None):
	reset(Plane.BG, term)
