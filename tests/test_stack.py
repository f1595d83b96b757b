from linear_collections import Stack


def test_empty_stack():
	s = Stack()
	assert s.is_empty()
	assert s.length == 0
	assert s.pop() is None
	assert s.peek() is None
	assert s.length == 0


def test_lifo():
	s = Stack()
	for item in ("underwear", "socks", "pants", "shoes"):
		s.push(item)

	assert s.peek() == "shoes"
	assert s.length == 4
	assert list(s) == ["shoes", "pants", "socks", "underwear"]

	assert s.pop() == "shoes"
	assert s.peek() == "pants"
	assert s.pop() == "pants"
	assert s.peek() == "socks"
	assert s.length == 2
	assert len(s) == 2
	assert not s.is_empty()


def test_drain():
	s = Stack()
	s.push(1)
	s.push(2)
	assert [s.pop(), s.pop(), s.pop()] == [2, 1, None]
	assert s.is_empty()


def test_repr():
	s = Stack()
	s.push(1)
	assert repr(s) == "Stack([1])"
