"""Console abstraction as an includable module.

CONSOLE is a pure mixin: classes that include it get styled text output
rendered with rich, environment lookup, colour detection, terminal size
probing and process exit. echo() is the single output sink, so including
modules can redirect all output by overriding it.
"""

from __future__ import annotations

import os
import shutil
import sys
from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING, TextIO

from rich.console import Console as RichConsole
from rich.text import Text

from mixkit.domain.model import MethodBag, Module

if TYPE_CHECKING:
    from typing import Any

# Style names accepted by console_format()
STYLES: frozenset[str] = frozenset(
    {
        "bold",
        "dim",
        "italic",
        "underline",
        "black",
        "red",
        "green",
        "yellow",
        "blue",
        "magenta",
        "cyan",
        "white",
    }
)


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console output.

    All fields have defaults.
    Immutable (frozen dataclass).

    Attributes:
        output: Stream written by echo(). None = sys.stdout at write time.
        width: Fixed width. None = probe the terminal.
        height: Fixed height. None = probe the terminal.
        color: Allow ANSI styling.
        no_color_var: Environment variable that disables colour when set.
    """

    output: TextIO | None = None
    width: int | None = None
    height: int | None = None
    color: bool = True
    no_color_var: str = "NO_COLOR"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width is not None and self.width < 1:
            raise ValueError(f"width must be >= 1, got {self.width}")
        if self.height is not None and self.height < 1:
            raise ValueError(f"height must be >= 1, got {self.height}")
        if not self.no_color_var:
            raise ValueError("no_color_var must not be empty")


def _echo(self: Any, text: str) -> None:
    output = self.console_config.output or sys.stdout
    output.write(text)


def _envvar(self: Any, name: str) -> str | None:
    return os.environ.get(name) or None


def _coloring(self: Any) -> bool:
    if self.envvar(self.console_config.no_color_var):
        return False
    return self.console_config.color


def _exit(self: Any, status: int) -> None:
    raise SystemExit(status)


def _dimensions(self: Any) -> tuple[int, int]:
    """Terminal (width, height); configured values win over probing."""
    config = self.console_config
    size = shutil.get_terminal_size()
    return (config.width or size.columns, config.height or size.lines)


def _console_format(self: Any, *styles: str) -> None:
    unknown = [s for s in styles if s not in STYLES]
    if unknown:
        raise ValueError(f"unknown console styles: {', '.join(unknown)}")
    self._console_styles = styles


def _reset(self: Any) -> None:
    self._console_styles = ()


def _print(self: Any, text: str) -> None:
    """Render text in the current format and pass it to echo()."""
    colored = self.coloring()
    width, _ = self.dimensions()
    buffer = StringIO()
    console = RichConsole(
        file=buffer,
        width=width,
        force_terminal=colored,
        color_system="standard" if colored else None,
        no_color=not colored,
        highlight=False,
        soft_wrap=True,
    )
    style = " ".join(getattr(self, "_console_styles", ()))
    console.print(Text(text, style=style), end="")
    self.echo(buffer.getvalue())


def _puts(self: Any, text: str = "") -> None:
    self.print(text)
    self.echo("\n")


CONSOLE = Module(
    "Console",
    MethodBag(
        methods={
            "console_config": ConsoleConfig(),
            "echo": _echo,
            "envvar": _envvar,
            "coloring": _coloring,
            "exit": _exit,
            "dimensions": _dimensions,
            "console_format": _console_format,
            "reset": _reset,
            "print": _print,
            "puts": _puts,
        }
    ),
)
