"""ANSI styling for console output.

Only presentation: callers decide *what* a colour means, this module
only wraps text.
"""

from __future__ import annotations

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
BOLD = "\033[1m"
RESET = "\033[0m"


class Styler:
    """Wrap text in ANSI sequences, or pass it through when disabled."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def _c(self, text: str, *codes: str) -> str:
        if not self.enabled:
            return text
        return f"{''.join(codes)}{text}{RESET}"

    def red(self, text: str) -> str:
        return self._c(text, RED)

    def green(self, text: str) -> str:
        return self._c(text, GREEN)

    def bold_green(self, text: str) -> str:
        return self._c(text, GREEN, BOLD)

    def yellow(self, text: str) -> str:
        return self._c(text, YELLOW)

    def blue(self, text: str) -> str:
        return self._c(text, BLUE)


PLAIN = Styler(enabled=False)
