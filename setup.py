#!/usr/bin/env python3

from setuptools import find_packages, setup


if __name__ == "__main__":
	setup(
		name = "linear_collections",
		version = "0.1.0",
		packages = find_packages(include=["linear_collections", "linear_collections.*"]),
		python_requires = ">=3.8",
		install_requires = [
			"loguru",
			"python-dotenv",
			"schema",
		],
		extras_require = {
			"test": ["pytest"],
		},
	)
