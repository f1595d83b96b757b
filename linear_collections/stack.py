import typing as t

T = t.TypeVar("T")


class Stack(t.Generic[T]):
	"""
	Last in, first out collection.
	Popping or peeking an empty stack gives `None`.
	"""

	def __init__(self) -> None:
		self._items: t.List[T] = []

	def push(self, item: T) -> None:
		self._items.append(item)

	def pop(self) -> t.Optional[T]:
		"""
		Removes and returns the most recently pushed item.
		"""
		if not self._items:
			return None
		return self._items.pop()

	def peek(self) -> t.Optional[T]:
		"""
		Returns the top item without removing it.
		"""
		if not self._items:
			return None
		return self._items[-1]

	@property
	def length(self) -> int:
		return len(self._items)

	def is_empty(self) -> bool:
		return not self._items

	def __len__(self) -> int:
		return len(self._items)

	def __iter__(self) -> t.Iterator[T]:
		# Top to bottom, in the order `pop` would return them
		return reversed(self._items)

	def __repr__(self) -> str:
		return f"Stack({self._items!r})"
