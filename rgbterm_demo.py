#!/usr/bin/env python3
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

import argparse
import os
import logging
import logging.handlers
from time import sleep
from typing import List, Optional

import psutil # type: ignore

from rgbterm import colours, cursor, named_colours
from rgbterm.colours import RGB, Colour, Gradient
from rgbterm.config import VERSION, Config, errlog
from rgbterm.meter import Meter
from rgbterm.terminal import ParseError, Terminal, TerminalIOError

# Setup config directory
CONFIG_DIR: str = f'{os.environ.get("XDG_CONFIG_HOME") or os.path.expanduser("~/.config")}/rgbterm'
CONFIG_FILE: str = f'{CONFIG_DIR}/rgbterm.conf'


def setup_logger(debug: bool):
	"""Error log in the config directory, rotated at 1 MiB"""
	try:
		os.makedirs(CONFIG_DIR, exist_ok=True)
		eh = logging.handlers.RotatingFileHandler(f'{CONFIG_DIR}/error.log', maxBytes=1048576, backupCount=4)
	except PermissionError:
		print(f'ERROR!\nNo permission to write to "{CONFIG_DIR}" directory!')
		raise SystemExit(1)
	eh.setLevel(logging.DEBUG)
	eh.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s: %(message)s", datefmt="%d/%m/%y (%X)"))
	errlog.addHandler(eh)
	errlog.setLevel(logging.DEBUG if debug else logging.WARNING)


def load_config(debug: bool) -> Config:
	config = Config(CONFIG_FILE)
	errlog.setLevel(logging.DEBUG if debug else getattr(logging, config.log_level))
	errlog.info(f'New instance of rgbterm version {VERSION} started with pid {os.getpid()}')
	errlog.info(f'Loglevel set to {"DEBUG" if debug else config.log_level}')
	errlog.debug(f'Using psutil version {".".join(str(x) for x in psutil.version_info)}')
	for info in config.info:
		errlog.info(info)
	for warning in config.warnings:
		errlog.warning(warning)
	return config


def show_colours(term: Terminal):
	"""Every named colour as a swatch followed by its name in that colour"""
	for name, rgb in named_colours.NAMED_COLOURS.items():
		swatch: str = Colour.bg(rgb).paint("    ")
		term.write(f'{swatch} {Colour.fg(rgb).paint(name)} {rgb.hexa}\n')


def show_diagonal(term: Terminal):
	for i in range(8):
		cursor.move_horizontal(i, term)
		term.write(f'{chr(i + 65)}\n')
	term.write("\n")


def show_position(term: Terminal):
	row, col = cursor.query_position(term)
	term.write(f'Cursor was at row {row}, column {col}\n')


def show_meter(term: Terminal, config: Config):
	"""Live cpu usage meter redrawn in place until interrupted"""
	gradient = Gradient(named_colours.get(config.meter_low), named_colours.get(config.meter_high))
	meter = Meter(config.meter_width, gradient)
	label = Colour.fg(RGB.from_hex("#cc"))
	cursor.save_position(term)
	try:
		while True:
			usage: float = psutil.cpu_percent(interval=None)
			cursor.restore_position(term)
			cursor.clear_line(term)
			term.write(f'{label("CPU")} {meter(usage)} {usage:5.1f}%')
			sleep(config.update_ms / 1000)
	except KeyboardInterrupt:
		term.write("\n")
	finally:
		colours.reset_all(term)
		if config.clear_on_exit:
			cursor.clear_screen(term)
			cursor.move_to_home(term)


def main(argv: Optional[List[str]] = None) -> int:
	args = argparse.ArgumentParser(description="Truecolor and cursor control demo")
	args.add_argument("-c", "--colours", action="store_true", help="Show all named colours [default]")
	args.add_argument("-d", "--diagonal", action="store_true", help="Draw a staircase with horizontal cursor moves")
	args.add_argument("-p", "--position", action="store_true", help="Query and print the cursor position")
	args.add_argument("-m", "--meter", action="store_true", help="Show a live cpu meter, Ctrl-C to quit")
	args.add_argument("-v", "--version", action="store_true", help="Show version info and exit")
	args.add_argument("--debug", action="store_true", help="Start with loglevel set to DEBUG overriding value set in config")
	stdargs = args.parse_args(argv)

	if stdargs.version:
		print(f'rgbterm version: {VERSION}\n'
			f'psutil version: {".".join(str(x) for x in psutil.version_info)}')
		return 0

	setup_logger(stdargs.debug)
	config = load_config(stdargs.debug)
	term = Terminal(timeout=config.query_timeout)

	try:
		if stdargs.diagonal:
			show_diagonal(term)
		if stdargs.position:
			show_position(term)
		if stdargs.meter:
			show_meter(term, config)
		if not (stdargs.diagonal or stdargs.position or stdargs.meter) or stdargs.colours:
			show_colours(term)
	except (TerminalIOError, ParseError) as e:
		errlog.exception(f'{e}')
		print(f'ERROR! {e}')
		return 1
	finally:
		config.save_config()
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
