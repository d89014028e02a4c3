"""nmclean - find, measure, count or delete node_modules folders."""

__version__ = "0.1.0"
