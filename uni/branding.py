"""
Console output helpers for uni.

All user-facing messages go through the shared rich console so colour
handling (NO_COLOR, non-tty output) is decided in one place.
"""

from rich.console import Console

VERSION = "0.2.0"

console = Console()

STATUS_STYLES = {
    "info": "cyan",
    "success": "green",
    "warning": "yellow",
    "error": "red",
    "command": "bright_black",
}


def uni_print(message: str, status: str = "info") -> None:
    """
    Print a status message in the colour associated with ``status``.

    Args:
        message: Text to print. Rich markup is not interpreted.
        status: One of info, success, warning, error or command.
    """
    style = STATUS_STYLES.get(status, "white")
    console.print(message, style=style, markup=False, highlight=False)


def uni_header(title: str) -> None:
    console.print()
    console.print(f"[bold cyan]{title}[/bold cyan]")
    console.print()
