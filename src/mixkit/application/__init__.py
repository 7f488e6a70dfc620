"""mixkit application layer.

Console abstraction and test reporters, themselves built from modules.
"""

from mixkit.application.console import CONSOLE, ConsoleConfig

__all__ = ["CONSOLE", "ConsoleConfig"]
