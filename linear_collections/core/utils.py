import sys
import typing as t


if t.TYPE_CHECKING:
	from linear_collections.core.linked_list import LinkedList

T = t.TypeVar("T")
U = t.TypeVar("U")
V = t.TypeVar("V")


ADDRESS_PADDING = (sys.maxsize.bit_length() + 1) // 4
ADDRESS_FSTR = f"0x{{:0>{ADDRESS_PADDING}x}}"


class LinkedListIntegrityError(Exception):
	pass


class _Has_next(t.Protocol[T]):
	next: t.Optional[T]

_Has_nextT = t.TypeVar("_Has_nextT", bound="_Has_next")

def linked_list_iter(head: t.Optional[_Has_nextT]) -> t.Iterator[_Has_nextT]:
	c = head
	while c is not None:
		yield c
		c = c.next


def clamp(value: T, min_: U, max_: V) -> t.Union[T, U, V]:
	return min_ if value < min_ else (max_ if value > max_ else value)


def dump_id(x: object) -> str:
	return ADDRESS_FSTR.format(id(x))

def dump_list_info(l: "LinkedList") -> None:
	head = l.head
	tail = l.tail
	print(f"Head: {dump_id(head)} ({head.value!r})" if head is not None else "Head: None")
	print(f"Tail: {dump_id(tail)} ({tail.value!r})" if tail is not None else "Tail: None")
	print(f"Length: {l.length}")
	print(f"Contents: {l.print()}")
	print()


def verify_linked_list(l: "LinkedList") -> None:
	"""
	Walks the node chain of a linked list and checks it against the
	list's head, tail and length bookkeeping.

	:raises LinkedListIntegrityError: Naming the first inconsistency
	found.
	"""
	head = l.head
	tail = l.tail
	length = l.length

	if length < 0:
		raise LinkedListIntegrityError(f"Negative length {length}")

	if length == 0:
		if head is not None or tail is not None:
			raise LinkedListIntegrityError("Empty list still references a head or tail")
		return

	if head is None or tail is None:
		raise LinkedListIntegrityError(f"List of length {length} is missing its head or tail")

	if length == 1 and head is not tail:
		raise LinkedListIntegrityError("Head and tail differ in a list of length 1")

	if tail.next is not None:
		raise LinkedListIntegrityError("Tail links to another node")

	seen: t.Set[int] = set()
	last = None
	count = 0
	for node in linked_list_iter(head):
		if id(node) in seen:
			raise LinkedListIntegrityError(f"Cycle detected at node {count}")
		seen.add(id(node))
		count += 1
		if count > length:
			raise LinkedListIntegrityError(f"Chain is longer than the recorded length {length}")
		last = node

	if count != length:
		raise LinkedListIntegrityError(f"Chain has {count} nodes, recorded length is {length}")

	if last is not tail:
		raise LinkedListIntegrityError("Chain does not end at the tail")
