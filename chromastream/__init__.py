"""Colored and styled terminal output through chainable stream manipulators.

Modules: codes (escape sequences), console (console attribute words),
stream (ColorStream and manipulators), demo (sample output command).
"""

__version__ = "0.1.0"

__all__ = ["codes", "console", "stream", "demo"]