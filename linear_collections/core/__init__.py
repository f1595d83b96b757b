"""
linear_collections core submodule.
Contains the linked list, the only structure in here that manages
its own node chain, and the helpers used to walk, dump and verify
such chains.
"""
from .linked_list import DEFAULT_DELIMITER, LinkedList, LinkedListNode
from .utils import (
	LinkedListIntegrityError, dump_id, dump_list_info, linked_list_iter, verify_linked_list
)

__all__ = (
	"DEFAULT_DELIMITER", "LinkedList", "LinkedListIntegrityError", "LinkedListNode",
	"dump_id", "dump_list_info", "linked_list_iter", "verify_linked_list",
)
