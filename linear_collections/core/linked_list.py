"""
Singly linked list.

Each node owns its value and a reference to the node following it.
The list keeps `head`, `tail` and `length` around as bookkeeping;
they are kept consistent with the actual node chain after every
mutation. Appending is O(1), removing from the end is O(n) since
there's no back reference to find the penultimate node with.
"""

import typing as t

from loguru import logger

from .utils import linked_list_iter

T = t.TypeVar("T")


DEFAULT_DELIMITER = " => "


class LinkedListNode(t.Generic[T]):
	__slots__ = ("value", "next")

	def __init__(self, value: T, next: t.Optional["LinkedListNode[T]"] = None) -> None:
		self.value = value
		self.next = next

	def __repr__(self) -> str:
		return f"LinkedListNode({self.value!r})"


class LinkedList(t.Generic[T]):
	"""
	A singly linked list.

	None of the methods raise on an empty list or an out-of-range
	index; `pop`, `get` and `delete` return `None` instead.
	Not safe for concurrent mutation, callers must serialize
	`push`/`pop`/`delete` themselves.
	"""

	def __init__(
		self,
		values: t.Optional[t.Iterable[T]] = None,
		delimiter: str = DEFAULT_DELIMITER,
	) -> None:
		self._head: t.Optional[LinkedListNode[T]] = None
		self._tail: t.Optional[LinkedListNode[T]] = None
		self._length = 0
		self.delimiter = delimiter

		if values is not None:
			for v in values:
				self.push(v)

	@property
	def head(self) -> t.Optional[LinkedListNode[T]]:
		return self._head

	@property
	def tail(self) -> t.Optional[LinkedListNode[T]]:
		return self._tail

	@property
	def length(self) -> int:
		return self._length

	def push(self, value: T) -> LinkedListNode[T]:
		"""
		Appends a new node holding `value` to the end of the list and
		returns it.
		"""
		node = LinkedListNode(value)
		if self._tail is None:
			self._head = node
		else:
			self._tail.next = node
		self._tail = node
		self._length += 1
		return node

	def pop(self) -> t.Optional[LinkedListNode[T]]:
		"""
		Removes the last node and returns it, or `None` if the list is
		empty.
		"""
		if self._tail is None:
			return None

		node = self._tail
		if self._head is node:
			self._head = None
			self._tail = None
			self._length = 0
			return node

		# Need to walk the entire thing to find the penultimate node
		penultimate = self._head
		while penultimate.next is not node:
			penultimate = penultimate.next
		logger.trace(f"Found new tail after walking {self._length - 1} nodes")

		penultimate.next = None
		self._tail = penultimate
		self._length -= 1
		return node

	def _in_bounds(self, index: int) -> bool:
		if 0 <= index < self._length:
			return True
		logger.trace(f"Index {index} out of bounds for length {self._length}")
		return False

	def get(self, index: int) -> t.Optional[LinkedListNode[T]]:
		"""
		Returns the node at the 0-based `index`, or `None` if the index
		is not in `[0, length)`. Negative indices don't count from the
		back.
		"""
		if not self._in_bounds(index):
			return None

		if index == self._length - 1:
			return self._tail

		current = self._head
		for _ in range(index):
			current = current.next
		return current

	def delete(self, index: int) -> t.Optional[LinkedListNode[T]]:
		"""
		Removes the node at `index` and returns it, or returns `None`
		without touching the list if the index is out of bounds.
		The removed node is detached from the chain.
		"""
		if not self._in_bounds(index):
			return None

		if index == 0:
			deleted = self._head
			self._head = deleted.next
			if self._head is None:
				self._tail = None
		else:
			previous = self._head
			for _ in range(index - 1):
				previous = previous.next
			deleted = previous.next
			previous.next = deleted.next
			if deleted is self._tail:
				self._tail = previous

		deleted.next = None
		self._length -= 1
		return deleted

	def is_empty(self) -> bool:
		return self._length == 0

	def iter_nodes(self) -> t.Iterator[LinkedListNode[T]]:
		return linked_list_iter(self._head)

	def print(self) -> str:
		"""
		Renders all values in order, joined by the list's delimiter.
		Does not modify the list.
		"""
		return self.delimiter.join(str(v) for v in self)

	def __iter__(self) -> t.Iterator[T]:
		c = self._head
		while c is not None:
			yield c.value
			c = c.next

	def __len__(self) -> int:
		return self._length

	def __bool__(self) -> bool:
		return self._length != 0

	def __str__(self) -> str:
		return self.print()

	def __repr__(self) -> str:
		return f"LinkedList({list(self)!r})"
