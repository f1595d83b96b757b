from loguru import logger
import pytest

from linear_collections.config import Config
from linear_collections.demo import (
	DEMOS, demo_linked_list, demo_priority_queue, demo_queue, demo_stack, run_all,
	setup_logging,
)


def test_demo_linked_list():
	assert demo_linked_list(verify=True) == [
		"is_empty: False",
		"pop: e, new tail: d",
		"get(1): b, chain from there: b => c => d",
		"delete(1): b",
		"print: a => c => d",
	]


def test_demo_linked_list_delimiter():
	assert demo_linked_list(" | ")[-1] == "print: a | c | d"


def test_demo_stack():
	assert demo_stack() == [
		"is_empty: True",
		"peek: shoes",
		"peek after pop: pants",
		"peek after pop: socks",
		"length: 2",
	]


def test_demo_queue():
	assert demo_queue() == [
		"is_empty: True",
		"peek: Make an egghead",
		"peek after dequeue: Help others to learn",
		"peek after dequeue: Be happy",
		"peek after dequeue: None",
		"length: 0",
	]


def test_demo_priority_queue():
	assert demo_priority_queue() == [
		"peek: A fix here",
		"dequeue: A fix here",
		"peek: Emergency task!",
		"dequeue: Emergency task!",
		"peek: A bug there",
		"length: 2",
	]


def test_run_all(log_messages):
	results = run_all(Config(", ", 1))
	assert list(results) == list(DEMOS)
	assert results["linked_list"][-1] == "print: a, c, d"
	assert "INFO --- stack ---" in log_messages
	assert "INFO peek: shoes" in log_messages


def test_run_only():
	results = run_all(Config.get_default(), "queue")
	assert list(results) == ["queue"]


def test_run_unknown():
	with pytest.raises(KeyError):
		run_all(Config.get_default(), "heap")


def test_setup_logging(capsys):
	setup_logging(0)
	try:
		logger.info("should not show")
		logger.warning("should show")
	finally:
		logger.remove()
		logger.disable("linear_collections")

	err = capsys.readouterr().err
	assert "should show" in err
	assert "should not show" not in err


@pytest.mark.parametrize("debug_level, shown, hidden", [
	(-1, "warned", "informed"),
	(7, "traced", None),
])
def test_setup_logging_clamps_level(capsys, debug_level, shown, hidden):
	setup_logging(debug_level)
	try:
		logger.trace("traced")
		logger.info("informed")
		logger.warning("warned")
	finally:
		logger.remove()
		logger.disable("linear_collections")

	err = capsys.readouterr().err
	assert shown in err
	if hidden is not None:
		assert hidden not in err
