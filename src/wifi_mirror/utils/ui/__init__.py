"""
Terminal UI helpers for the capture simulation.
"""

from rich.console import Console

from .prompts import print_banner, print_capabilities, print_reply, print_session
from .theme import ICONS, THEME

console = Console()

__all__ = [
    "ICONS",
    "THEME",
    "console",
    "print_banner",
    "print_capabilities",
    "print_reply",
    "print_session",
]
