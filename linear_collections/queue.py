from collections import deque
import typing as t

T = t.TypeVar("T")


class Queue(t.Generic[T]):
	"""
	First in, first out collection.
	Items are enqueued at the back and dequeued from the front of a
	deque, so both ends are O(1).
	"""

	def __init__(self) -> None:
		self._items: t.Deque[T] = deque()

	def enqueue(self, item: T) -> None:
		self._items.append(item)

	def dequeue(self) -> t.Optional[T]:
		"""
		Removes and returns the item at the front of the queue, or
		`None` if it is empty.
		"""
		if not self._items:
			return None
		return self._items.popleft()

	def peek(self) -> t.Optional[T]:
		if not self._items:
			return None
		return self._items[0]

	@property
	def length(self) -> int:
		return len(self._items)

	def is_empty(self) -> bool:
		return not self._items

	def __len__(self) -> int:
		return len(self._items)

	def __iter__(self) -> t.Iterator[T]:
		return iter(self._items)

	def __repr__(self) -> str:
		return f"Queue({list(self._items)!r})"
