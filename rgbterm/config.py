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

from string import Template

import os
import logging
from typing import Dict, List, Optional, Union


errlog = logging.getLogger("rgbterm")


VERSION: str = "0.3.0"

#*?This is the template used to create the config file
DEFAULT_CONF: Template = Template(f'#? Config file for rgbterm v. {VERSION}' + '''

#* Set loglevel for the error.log in the config directory, levels are: "ERROR" "WARNING" "INFO" "DEBUG".
#* The level set includes all lower levels, i.e. "DEBUG" will show all logging info.
log_level=$log_level

#* Milliseconds to wait for the terminal to answer a cursor position query, 0 waits forever.
query_timeout_ms=$query_timeout_ms

#* Redraw interval of the cpu meter in milliseconds, can't be lower than 100.
update_ms=$update_ms

#* Width of the cpu meter in columns.
meter_width=$meter_width

#* Named colours for the low and high end of the meter gradient, i.e. "Green" or "DarkOrange".
meter_low="$meter_low"
meter_high="$meter_high"

#* Clear the screen when the demo exits, True or False.
clear_on_exit=$clear_on_exit
''')

_TRUE: List[str] = ["true", "yes", "on", "1", "y", "t"]
_FALSE: List[str] = ["false", "no", "off", "0", "n", "f"]


def str_to_bool(value: str) -> bool:
	if value.lower() in _TRUE:
		return True
	if value.lower() in _FALSE:
		return False
	raise ValueError(f'invalid truth value {value!r}')


class Config:
	'''Holds all config variables and functions for loading from and saving to disk'''
	keys: List[str] = ["log_level", "query_timeout_ms", "update_ms", "meter_width", "meter_low", "meter_high", "clear_on_exit"]
	log_level: str = "WARNING"
	query_timeout_ms: int = 1000
	update_ms: int = 1000
	meter_width: int = 30
	meter_low: str = "Green"
	meter_high: str = "Red"
	clear_on_exit: bool = True

	log_levels: List[str] = ["ERROR", "WARNING", "INFO", "DEBUG"]

	_initialized: bool = False

	def __init__(self, config_file_path: str):
		object.__setattr__(self, "config_file_path", config_file_path)
		object.__setattr__(self, "conf_dict", {})
		object.__setattr__(self, "warnings", [])
		object.__setattr__(self, "info", [])
		object.__setattr__(self, "changed", False)
		object.__setattr__(self, "recreate", False)
		self.init()

	def init(self):
		self.conf: Dict[str, Union[str, int, bool]] = self.load_config()
		if not "version" in self.conf.keys():
			self.recreate = True
			self.info.append(f'Config file malformatted or missing, will be recreated on exit!')
		elif self.conf["version"] != VERSION:
			self.recreate = True
			self.info.append(f'Config file version and rgbterm version missmatch, will be recreated on exit!')
		for key in self.keys:
			if key in self.conf.keys() and self.conf[key] != "_error_":
				setattr(self, key, self.conf[key])
			else:
				self.recreate = True
				self.conf_dict[key] = getattr(self, key)
		self._initialized = True

	def __setattr__(self, name, value):
		if self._initialized:
			object.__setattr__(self, "changed", True)
		object.__setattr__(self, name, value)
		if name in self.keys:
			self.conf_dict[name] = value

	@property
	def query_timeout(self) -> Optional[float]:
		return self.query_timeout_ms / 1000 if self.query_timeout_ms > 0 else None

	def load_config(self) -> Dict[str, Union[str, int, bool]]:
		'''Load config from file, set correct types for values and return a dict'''
		from rgbterm import named_colours

		new_config: Dict[str, Union[str, int, bool]] = {}
		if not os.path.isfile(self.config_file_path):
			return new_config
		try:
			with open(self.config_file_path, "r") as f:
				for line in f:
					line = line.strip()
					if line.startswith("#? Config"):
						new_config["version"] = line[line.find("v. ") + 3:]
					for key in self.keys:
						if line.startswith(key + "="):
							line = line.replace(key + "=", "", 1)
							if line.startswith('"'):
								line = line.strip('"')
							if type(getattr(self, key)) == int:
								try:
									new_config[key] = int(line)
								except ValueError:
									self.warnings.append(f'Config key "{key}" should be an integer!')
							if type(getattr(self, key)) == bool:
								try:
									new_config[key] = str_to_bool(line)
								except ValueError:
									self.warnings.append(f'Config key "{key}" can only be True or False!')
							if type(getattr(self, key)) == str:
								new_config[key] = str(line)
		except OSError as e:
			errlog.exception(str(e))
		if "log_level" in new_config and not new_config["log_level"] in self.log_levels:
			new_config["log_level"] = "_error_"
			self.warnings.append(f'Config key "log_level" didn\'t get an acceptable value!')
		if isinstance(new_config.get("update_ms"), int) and new_config["update_ms"] < 100:
			new_config["update_ms"] = 100
			self.warnings.append(f'Config key "update_ms" can\'t be lower than 100!')
		if isinstance(new_config.get("query_timeout_ms"), int) and new_config["query_timeout_ms"] < 0:
			new_config["query_timeout_ms"] = "_error_"
			self.warnings.append(f'Config key "query_timeout_ms" can\'t be negative!')
		if isinstance(new_config.get("meter_width"), int) and new_config["meter_width"] < 1:
			new_config["meter_width"] = "_error_"
			self.warnings.append(f'Config key "meter_width" should be at least 1!')
		for colour_name in ["meter_low", "meter_high"]:
			if colour_name in new_config:
				try:
					named_colours.get(str(new_config[colour_name]))
				except KeyError:
					new_config[colour_name] = "_error_"
					self.warnings.append(f'Config key "{colour_name}" is not a known colour name!')
		return new_config

	def save_config(self):
		"""
		Save current config to config file if difference in values or version,
		creates a new file if not found.
		"""
		if not self.changed and not self.recreate:
			return

		try:
			with open(self.config_file_path, "w") as f:
				f.write(DEFAULT_CONF.substitute(self.conf_dict))
		except OSError as e:
			errlog.exception(str(e))
