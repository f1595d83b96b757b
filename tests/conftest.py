import typing as t

from loguru import logger
import pytest

from linear_collections import LinkedList


@pytest.fixture
def log_messages() -> t.Iterator[t.List[str]]:
	"""
	Collects everything the package logs at TRACE or above while the
	test runs, formatted as "LEVEL message".
	"""
	messages: t.List[str] = []
	logger.enable("linear_collections")
	sink_id = logger.add(lambda m: messages.append(m.rstrip("\n")), format="{level} {message}", level="TRACE")
	yield messages
	logger.remove(sink_id)
	logger.disable("linear_collections")


@pytest.fixture
def abcde() -> LinkedList[str]:
	return LinkedList(["a", "b", "c", "d", "e"])
