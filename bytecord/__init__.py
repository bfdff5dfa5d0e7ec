"""Bounds-checked, alignment-aware byte reading (cord, reader) and building (builder)."""

__version__ = "0.0.2"
__all__ = ["builder", "cord", "reader"]