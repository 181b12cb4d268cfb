"""Console presentation for CSS Variables."""

import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Iterable, Optional, TextIO

import colorama
import orjson
from colorama import Fore, Style

class NotificationStyle(Enum):
    """Kinds of transient notifications."""

    SUCCESS = 'success'
    FAILURE = 'failure'
    INFO = 'info'

class Notifier(ABC):
    """Receives transient notifications from the search service."""

    @abstractmethod
    def notify(self, style: NotificationStyle, title: str, message: str = '') -> None:
        pass

class UserInterface(Notifier):
    """Handles console output and notifications"""

    _STYLE_COLORS = {
        NotificationStyle.SUCCESS: Fore.GREEN,
        NotificationStyle.FAILURE: Fore.RED,
        NotificationStyle.INFO: Fore.BLUE,
    }

    def __init__(self, stream: Optional[TextIO] = None, error_stream: Optional[TextIO] = None):
        self.verbose = False
        self.quiet = False
        self.output_format = 'text'
        self.stream = stream or sys.stdout
        self.error_stream = error_stream or sys.stderr
        colorama.init()

    def set_verbosity(self, verbose: bool, quiet: bool):
        """Set verbosity level"""
        self.verbose = verbose
        self.quiet = quiet

    def set_output_format(self, format: str):
        """Set output format"""
        self.output_format = format

    def notify(self, style: NotificationStyle, title: str, message: str = '') -> None:
        """Show a notification on the error stream"""
        if self.quiet:
            return
        color = self._STYLE_COLORS[style]
        text = f"{title}: {message}" if message else title
        print(f"{color}{text}{Style.RESET_ALL}", file=self.error_stream)

    def print_error(self, message: str):
        """Print error message"""
        if not self.quiet:
            print(f"{Fore.RED}Error: {message}{Style.RESET_ALL}", file=self.error_stream)

    def print_debug(self, message: str):
        """Print debug message"""
        if self.verbose and not self.quiet:
            print(f"{Fore.CYAN}Debug: {message}{Style.RESET_ALL}", file=self.error_stream)

    def write(self, line: str = ''):
        print(line, file=self.stream)

    def render_error(self, error) -> None:
        """Render the error entry that replaces the listing"""
        if self.output_format == 'json':
            self.write(orjson.dumps({
                'error': {'title': error.title, 'message': error.message, 'actions': list(error.actions)}
            }, option=orjson.OPT_INDENT_2).decode())
            return
        self.write(f"{Fore.RED}{Style.BRIGHT}! {error.title}{Style.RESET_ALL}")
        self.write(f"  {error.message}")
        self.write(f"  Actions: {', '.join(a.replace('_', ' ') for a in error.actions)}")

    def render_sections(self, sections: Iterable, color_for: Callable[[object], Optional[str]]) -> None:
        """Render grouped variables.

        Args:
            sections: Sections in display order
            color_for: Returns the swatch color of a variable, or None
        """
        sections = list(sections)
        if self.output_format == 'json':
            payload = [
                {
                    'category': section.category,
                    'variables': [
                        {'name': v.name, 'value': v.value, 'category': v.category, 'color': color_for(v)}
                        for v in section.variables
                    ],
                }
                for section in sections
            ]
            self.write(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode())
            return

        for section in sections:
            self.write(f"{Style.BRIGHT}{section.category}{Style.RESET_ALL} ({len(section.variables)})")
            for variable in section.variables:
                self.write(f"  {self._swatch(color_for(variable))}{Fore.CYAN}{variable.name}{Style.RESET_ALL}  {variable.value}")

    def render_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write(line)

    @staticmethod
    def _swatch(color: Optional[str]) -> str:
        if color is None:
            return ''
        if len(color) == 7 and color.startswith('#'):
            r, g, b = (int(color[i:i + 2], 16) for i in (1, 3, 5))
            return f"\x1b[38;2;{r};{g};{b}m●{Style.RESET_ALL} "
        return f"[{color}] "

# Exported classes
__all__ = ['NotificationStyle', 'Notifier', 'UserInterface']
