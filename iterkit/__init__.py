"""Pipeable iteration tools (iterbase, windows, mapping) and a text-rendered image toolkit (image)."""

__version__ = "0.1.0"

__all__ = ["iterbase", "windows", "mapping", "image"]