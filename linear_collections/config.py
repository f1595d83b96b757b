import json
import os
from pathlib import Path
import typing as t

from dotenv import find_dotenv, load_dotenv
from loguru import logger
from schema import And, Schema

from linear_collections.core.linked_list import DEFAULT_DELIMITER


ENV_DELIMITER = "LINCOL_DELIMITER"
ENV_DEBUG_LEVEL = "LINCOL_DEBUG_LEVEL"

MAX_DEBUG_LEVEL = 2


class Config:
	"""
	Stores configuration for the demo driver.

	`delimiter`: String placed between values when rendering a linked
		list.
	`debug_level`: 0 only shows warnings, 1 shows the demo output, 2
		additionally shows trace logs and verifies linked list
		integrity after every demo step.
	"""

	SCHEMA = Schema(
		{
			"delimiter": str,
			"debug_level": And(
				int,
				lambda v: not isinstance(v, bool),
				lambda v: 0 <= v <= MAX_DEBUG_LEVEL,
			),
		},
		ignore_extra_keys = True,
	)

	def __init__(self, delimiter: str, debug_level: int) -> None:
		self.delimiter = delimiter
		self.debug_level = debug_level

	@classmethod
	def from_dict(cls, data: t.Dict) -> "Config":
		"""
		Creates config from a json dict, probably read out of a
		saved file.

		:raises SchemaError: When the schema library fails validating
		the dict.
		"""
		data = cls.SCHEMA.validate(data)
		return cls(data["delimiter"], data["debug_level"])

	def to_dict(self) -> t.Dict:
		"""
		Converts a Config object to a dict that is readable by
		`Config.from_dict` and can be written to disk with the
		json module.
		"""
		return {
			"delimiter": self.delimiter,
			"debug_level": self.debug_level,
		}

	@classmethod
	def get_default(cls) -> "Config":
		return cls(delimiter=DEFAULT_DELIMITER, debug_level=MAX_DEBUG_LEVEL)

	@classmethod
	def from_env(cls) -> "Config":
		"""
		Creates config from environment variables, loading a `.env`
		file first if one can be found. Missing variables fall back to
		the defaults, as do unusable debug levels.
		"""
		# Looked up from the working directory upwards
		load_dotenv(find_dotenv(usecwd=True))
		cfg = cls.get_default()

		delimiter = os.getenv(ENV_DELIMITER)
		if delimiter is not None:
			cfg.delimiter = delimiter

		raw_level = os.getenv(ENV_DEBUG_LEVEL)
		if raw_level is not None:
			try:
				level = int(raw_level)
			except ValueError:
				level = -1
			if 0 <= level <= MAX_DEBUG_LEVEL:
				cfg.debug_level = level
			else:
				logger.warning(
					f"Ignoring {ENV_DEBUG_LEVEL}={raw_level!r}, "
					f"must be an integer from 0 to {MAX_DEBUG_LEVEL}."
				)

		logger.debug(f"Resolved config from environment: {cfg.to_dict()}")
		return cfg

	@classmethod
	def load(cls, path: Path) -> "Config":
		"""
		Loads config from a json file, or returns the default config
		if it does not exist.

		:raises JSONDecodeError: If the file is not valid json.
		:raises SchemaError: If the file contents are invalid.
		:raises OSError: On failure opening or reading the file.
		"""
		if not path.exists():
			logger.info("Config file does not exist, using default.")
			return cls.get_default()

		with path.open("r") as f:
			return cls.from_dict(json.load(f))

	def save(self, path: Path) -> None:
		"""
		Writes the config to a json file.

		:raises OSError: On any file system-related failure.
		"""
		with path.open("w") as f:
			json.dump(self.to_dict(), f)

	def __repr__(self) -> str:
		return f"Config(delimiter={self.delimiter!r}, debug_level={self.debug_level})"
