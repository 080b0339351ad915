"""Concrete implementations of the interfaces in ``musicmap.interfaces``."""
