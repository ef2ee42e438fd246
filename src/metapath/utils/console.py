"""Themed Rich console used by the command-line interface."""

from dataclasses import asdict, dataclass
from typing import IO, Optional

from rich.console import Console
from rich.theme import Theme


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    info: str
    warning: str
    error: str
    success: str
    highlight: str
    header: str
    path: str
    number: str
    dim: str
    kind: str             # For component kind labels


THEMES = {
    'manhattan': ThemeColors(
        info='cyan',
        warning='yellow',
        error='red',
        success='green',
        highlight='bright_cyan',
        header='bold bright_cyan',
        path='white',
        number='bright_blue',
        dim='bright_black',
        kind='gold1',
    ),
    'green': ThemeColors(
        info='green',
        warning='yellow',
        error='red',
        success='bright_green',
        highlight='bold green',
        header='bold green',
        path='bright_green',
        number='green',
        dim='green',
        kind='bright_yellow',
    ),
    'matrix': ThemeColors(
        info='bright_green',
        warning='yellow',
        error='red',
        success='green',
        highlight='bold bright_green',
        header='bold bright_green',
        path='green',
        number='bright_green',
        dim='green',
        kind='bright_cyan',
    ),
    'sunset': ThemeColors(
        info='orange3',
        warning='yellow',
        error='red3',
        success='green',
        highlight='bold orange1',
        header='bold orange1',
        path='wheat1',
        number='orange1',
        dim='grey50',
        kind='gold1',
    ),
}


def make_console(theme: str = "manhattan", file: Optional[IO[str]] = None,
                 stderr: bool = False) -> Console:
    """
    Build a Rich console with one of the named themes.

    Args:
        theme: Theme name from THEMES
        file: Output file (defaults to sys.stdout)
        stderr: Write to stderr instead of stdout

    Returns:
        Configured Console
    """
    colors = THEMES.get(theme, THEMES['manhattan'])
    return Console(theme=Theme(asdict(colors)), file=file, stderr=stderr, highlight=False)
