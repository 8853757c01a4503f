"""Input line and help overlay renderers for BarnacleTUI."""

from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText

from interface.constants import HELP_ENTRIES
from interface.tui_display import display_width, pad_display


def build_mode_title(controller) -> FormattedText:
    return FormattedText([("class:title", controller.mode_name)])


def build_input_text(controller) -> FormattedText:
    return FormattedText([("class:input", controller.buffer_text)])


def build_help_text(width: int) -> FormattedText:
    key_width = max(display_width(key) for key, _ in HELP_ENTRIES) + 2
    inner = max(20, width - 4)
    parts: List[Tuple[str, str]] = [("class:border", "+" + "-" * (inner + 2) + "+\n")]
    for key, desc in HELP_ENTRIES:
        row = pad_display(key, key_width) + desc
        parts.append(("class:border", "| "))
        parts.append(("class:help", pad_display(row, inner)))
        parts.append(("class:border", " |\n"))
    parts.append(("class:border", "+" + "-" * (inner + 2) + "+"))
    return FormattedText(parts)


__all__ = ["build_mode_title", "build_input_text", "build_help_text"]
