#!/usr/bin/env python3

import argparse


def main(argv=None):
	argparser = argparse.ArgumentParser()
	argparser.add_argument(
		"--less-debug",
		"-l",
		action = "count",
		default = 0,
		help = (
			"Lowers the debug level. If this flag isn't specified, trace logs are shown and "
			"linked list integrity is verified after every demo step. If specified once, only "
			"the demo output is logged. If specified more often than that, only warnings are."
		),
	)

	argparser.add_argument(
		"--delimiter",
		"-d",
		default = None,
		help = "String placed between values when rendering a linked list.",
	)

	argparser.add_argument(
		"--only",
		"-o",
		default = None,
		help = "Name of a single demo to run: linked_list, stack, queue or priority_queue.",
	)

	argparser.add_argument(
		"--config",
		"-c",
		default = None,
		help = (
			"Path to a json config file. If given, it replaces the environment variables "
			"as the source of the delimiter and debug level."
		),
	)

	result = argparser.parse_args(argv)

	from json import JSONDecodeError
	from pathlib import Path

	from schema import SchemaError

	from linear_collections.config import Config
	from linear_collections.demo import DEMOS, run_all, setup_logging

	if result.only is not None and result.only not in DEMOS:
		argparser.error(f"Unknown demo {result.only!r}, choose from {', '.join(DEMOS)}")

	if result.config is not None:
		try:
			cfg = Config.load(Path(result.config))
		except (JSONDecodeError, OSError, SchemaError) as e:
			argparser.error(f"Could not load config {result.config!r}: {e}")
	else:
		cfg = Config.from_env()
	if result.less_debug:
		cfg.debug_level = max(0, cfg.debug_level - result.less_debug)
	if result.delimiter is not None:
		cfg.delimiter = result.delimiter

	setup_logging(cfg.debug_level)
	run_all(cfg, result.only)


if __name__ == "__main__":
	main()
