"""Annotation options for entity schema fields, in the ``options`` module."""

__version__ = "0.1.0"
__all__ = ["options"]