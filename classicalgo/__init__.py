"""Classic algorithms and data structures: containers, sorting, searching,
bit tricks, heaps, a trie, linked lists and binary trees."""

__version__ = "0.1.0"