"""Shared utility functions for the React Component Factory.

Provides identifier normalisation for component and folder names, plus the
Rich-based status output used by every stage of the tool.  Status lines are
prefixed with a glyph so success, failure and information are recognisable
at a glance even without colour.
"""

from __future__ import annotations

import re

from rich.console import Console
from rich.markup import escape

console = Console()

GREEN_CHECK = "[bright_green]✓[/bright_green]"
RED_X = "[red]✗[/red]"
BLUE_INFO = "[blue]ℹ[/blue]"


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def pascal_case(text: str) -> str:
    """Convert free text to an upper-camel-case identifier.

    Anything that is not a (Unicode) letter or digit separates words.  The first character of each
    word is upper-cased and the rest is kept as typed, so an already
    normalised name passes through unchanged.

    Examples::

        pascal_case("my button")    -> "MyButton"
        pascal_case("user-profile") -> "UserProfile"
        pascal_case("MyButton")     -> "MyButton"
    """
    words = re.split(r"[\W_]+", text)
    return "".join(word[0].upper() + word[1:] for word in words if word)


def folder_name(text: str) -> str:
    """Normalise a new directory name typed by the user.

    * Strips surrounding whitespace and lowercases the input.
    * Replaces the first run of whitespace/underscores with a hyphen.

    Examples::

        folder_name("Form Fields")   -> "form-fields"
        folder_name("date_pickers")  -> "date-pickers"
    """
    return re.sub(r"[\s_]+", "-", text.strip().lower(), count=1)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_heading(message: str) -> None:
    """Print a bright yellow heading line."""
    console.print(f"[bright_yellow]{escape(message)}[/bright_yellow]")


def print_success(message: str) -> None:
    """Print a status line prefixed with a green check mark."""
    console.print(f"{GREEN_CHECK} [bright_yellow]{escape(message)}[/bright_yellow]")


def print_error(message: str) -> None:
    """Print a status line prefixed with a red cross."""
    console.print(f"{RED_X} {escape(message)}")


def print_info(message: str) -> None:
    """Print a status line prefixed with a blue information sign."""
    console.print(f"{BLUE_INFO} {escape(message)}")


def print_content(content: str) -> None:
    """Echo generated source verbatim (no markup, no highlighting)."""
    console.print(content, markup=False, highlight=False, emoji=False, soft_wrap=True)
