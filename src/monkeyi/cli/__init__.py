"""
monkeyi Command-Line Interface
==============================

- **monkeyi**: token printer for monkey source, interactive or from a file

Implemented as a Click application with help and error reporting.
"""

__all__ = ["monkeyi"]
