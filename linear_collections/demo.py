"""
Small usage examples for each collection.
Nothing in here runs on import; `run.py` calls into it.
"""

import sys
import typing as t

from loguru import logger

from linear_collections.config import MAX_DEBUG_LEVEL, Config
from linear_collections.core import (
	DEFAULT_DELIMITER, LinkedList, linked_list_iter, verify_linked_list
)
from linear_collections.core.utils import clamp
from linear_collections.priority_queue import PriorityQueue
from linear_collections.queue import Queue
from linear_collections.stack import Stack


_LOG_LEVELS = ("WARNING", "INFO", "TRACE")

_STDERR_FMT = (
	"<green>{time:MMM DD HH:mm:ss.SSS}</green> | <level>{level:<8}</level> | "
	"<cyan>{name}</cyan>:<cyan>{function}</cyan>@<cyan>{line}</cyan> - "
	"<level>{message}</level>"
)


def setup_logging(debug_level: int) -> None:
	"""
	Replaces loguru's default sink with a stderr sink filtered to the
	level belonging to `debug_level` and enables this package's
	logging. Levels outside the valid range are clamped into it.
	"""
	level = _LOG_LEVELS[clamp(debug_level, 0, MAX_DEBUG_LEVEL)]
	logger.remove()
	if sys.stderr:
		logger.add(sys.stderr, format=_STDERR_FMT, level=level)
	logger.enable("linear_collections")


def _emit(lines: t.List[str], line: str) -> None:
	lines.append(line)
	logger.info(line)


def demo_linked_list(delimiter: str = DEFAULT_DELIMITER, verify: bool = False) -> t.List[str]:
	lines: t.List[str] = []
	lst: LinkedList[str] = LinkedList(delimiter=delimiter)

	def step() -> None:
		if verify:
			verify_linked_list(lst)

	for v in ("a", "b", "c", "d", "e"):
		lst.push(v)
		step()
	_emit(lines, f"is_empty: {lst.is_empty()}")

	popped = lst.pop()
	step()
	_emit(lines, f"pop: {popped.value}, new tail: {lst.tail.value}")

	node = lst.get(1)
	chain = delimiter.join(str(n.value) for n in linked_list_iter(node))
	_emit(lines, f"get(1): {node.value}, chain from there: {chain}")

	deleted = lst.delete(1)
	step()
	_emit(lines, f"delete(1): {deleted.value}")
	_emit(lines, f"print: {lst.print()}")

	return lines


def demo_stack() -> t.List[str]:
	lines: t.List[str] = []
	lower_body: Stack[str] = Stack()
	_emit(lines, f"is_empty: {lower_body.is_empty()}")

	for item in ("underwear", "socks", "pants", "shoes"):
		lower_body.push(item)
	_emit(lines, f"peek: {lower_body.peek()}")

	lower_body.pop()
	_emit(lines, f"peek after pop: {lower_body.peek()}")

	lower_body.pop()
	_emit(lines, f"peek after pop: {lower_body.peek()}")
	_emit(lines, f"length: {lower_body.length}")

	return lines


def demo_queue() -> t.List[str]:
	lines: t.List[str] = []
	q: Queue[str] = Queue()
	_emit(lines, f"is_empty: {q.is_empty()}")

	for item in ("Make an egghead", "Help others to learn", "Be happy"):
		q.enqueue(item)
	_emit(lines, f"peek: {q.peek()}")

	while not q.is_empty():
		q.dequeue()
		_emit(lines, f"peek after dequeue: {q.peek()}")
	_emit(lines, f"length: {q.length}")

	return lines


def demo_priority_queue() -> t.List[str]:
	lines: t.List[str] = []
	q: PriorityQueue[str] = PriorityQueue()

	for item in ("A fix here", "A bug there", "A new feature"):
		q.enqueue(item)
	_emit(lines, f"peek: {q.peek()}")
	_emit(lines, f"dequeue: {q.dequeue()}")

	q.enqueue("Emergency task!", True)
	_emit(lines, f"peek: {q.peek()}")
	_emit(lines, f"dequeue: {q.dequeue()}")
	_emit(lines, f"peek: {q.peek()}")
	_emit(lines, f"length: {q.length}")

	return lines


DEMOS: t.Dict[str, t.Callable[[Config], t.List[str]]] = {
	"linked_list": lambda cfg: demo_linked_list(cfg.delimiter, cfg.debug_level >= 2),
	"stack": lambda _: demo_stack(),
	"queue": lambda _: demo_queue(),
	"priority_queue": lambda _: demo_priority_queue(),
}


def run_all(cfg: Config, only: t.Optional[str] = None) -> t.Dict[str, t.List[str]]:
	"""
	Runs all demos, or just the one named `only`, and returns the
	lines each of them produced by name.

	:raises KeyError: If `only` does not name a demo.
	"""
	names = list(DEMOS) if only is None else [only]
	results = {}
	for name in names:
		demo = DEMOS[name]
		logger.info(f"--- {name} ---")
		results[name] = demo(cfg)
	return results
