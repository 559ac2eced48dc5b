"""Textbook linked lists (singly, headed, circular, doubly) and sequential and linked strings."""

__version__ = "0.1.0"