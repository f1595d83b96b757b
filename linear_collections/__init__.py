"""
Foundational linear collections: a singly linked list plus the stack,
queue and two-tier priority queue that sit next to it.
"""
from loguru import logger

from .core import LinkedList, LinkedListNode
from .priority_queue import PriorityQueue
from .queue import Queue
from .stack import Stack

__version__ = "0.1.0"

__all__ = ("LinkedList", "LinkedListNode", "PriorityQueue", "Queue", "Stack")

# Silent unless an application opts in
logger.disable("linear_collections")
