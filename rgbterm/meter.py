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

from typing import Dict, Union

from rgbterm.colours import RGB, Colour, Gradient, Plane


class Symbol:
	meter: str = "■"


class Meter:
	"""
	Creates a percentage meter
	__init__(width, gradient, inactive) to create new meter
	__call__(value) to set value and return meter as a string
	__str__ returns last set meter as a string
	"""
	out: str
	gradient: Gradient
	color_inactive: Colour
	width: int
	saved: Dict[int, str]

	def __init__(self, width: int, gradient: Gradient, inactive: RGB = RGB(64, 64, 64)):
		if len(gradient) != 101:
			raise ValueError(f'Meter gradient needs 101 steps, got {len(gradient)}')
		self.gradient = gradient
		self.color_inactive = Colour.fg(inactive)
		self.width = width
		self.saved = {}
		self.out = self._create(0)

	def __call__(self, value: Union[int, float, None]) -> str:
		if value is None:
			return self.out
		value = min(max(round(value), 0), 100)
		if value in self.saved:
			self.out = self.saved[value]
		else:
			self.out = self._create(value)
		return self.out

	def __str__(self) -> str:
		return self.out

	def __repr__(self):
		return repr(self.out)

	def _create(self, value: int) -> str:
		out: str = ""
		for i in range(1, self.width + 1):
			step: int = round(i * 100 / self.width)
			if value >= step:
				out += f'{Colour.fg(self.gradient[step])}{Symbol.meter}'
			else:
				out += f'{self.color_inactive}{Symbol.meter * (self.width + 1 - i)}'
				break
		out += Plane.FG.reset
		self.saved[value] = out
		return out
