"""Linked lists, stacks, queues, heaps, binary search, trees and N-queens in plain Python."""

__version__ = "0.1.0"