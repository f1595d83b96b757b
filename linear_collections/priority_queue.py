import typing as t

from linear_collections.queue import Queue

T = t.TypeVar("T")


class PriorityQueue(t.Generic[T]):
	"""
	Two-tier priority queue made of a high and a low priority `Queue`.
	Anything in the high priority lane is served before anything in
	the low priority one; within a lane, items are served FIFO.
	"""

	def __init__(self) -> None:
		self._high: Queue[T] = Queue()
		self._low: Queue[T] = Queue()

	def enqueue(self, item: T, high_priority: bool = False) -> None:
		(self._high if high_priority else self._low).enqueue(item)

	def _serving_lane(self) -> Queue[T]:
		return self._low if self._high.is_empty() else self._high

	def dequeue(self) -> t.Optional[T]:
		"""
		Removes and returns the next item, preferring the high priority
		lane. Returns `None` if both lanes are empty.
		"""
		return self._serving_lane().dequeue()

	def peek(self) -> t.Optional[T]:
		return self._serving_lane().peek()

	@property
	def length(self) -> int:
		return self._high.length + self._low.length

	def is_empty(self) -> bool:
		return self._high.is_empty() and self._low.is_empty()

	def __len__(self) -> int:
		return self.length

	def __iter__(self) -> t.Iterator[T]:
		yield from self._high
		yield from self._low

	def __repr__(self) -> str:
		return f"PriorityQueue(high={list(self._high)!r}, low={list(self._low)!r})"
