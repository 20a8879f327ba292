"""A deck of playing cards backed by a singly linked list, with a printing command."""

__version__ = "0.1.0"
__all__ = ["card", "deck", "linked_list", "cli"]