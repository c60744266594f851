"""Notebook reading and parsing."""

from nbtohtml.parsing.notebook import MIN_NBFORMAT, NotebookParser, read_notebook

__all__ = ["MIN_NBFORMAT", "NotebookParser", "read_notebook"]
