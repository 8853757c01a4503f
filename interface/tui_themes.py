"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark": {
        "": "#d7dfe6",
        "status.todo": "#d7dfe6",
        "status.started": "#e5c07b bold",
        "status.finished": "#9ad974",
        "status.wontfix": "#7a7f85",
        "status.fail": "#e06c75 bold",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "selected": "bg:#3b3b3b bold",
        "header": "#ffb347 bold",
        "title": "#61afef bold",
        "border": "#4b525a",
        "input": "#e8eaec",
        "icon.check": "#9ad974 bold",
        "icon.warn": "#f9ac60 bold",
        "help": "bg:#22262b #d7dfe6",
    },
    "light": {
        "": "#24292f",
        "status.todo": "#24292f",
        "status.started": "#9a6700 bold",
        "status.finished": "#1a7f37",
        "status.wontfix": "#8c959f",
        "status.fail": "#cf222e bold",
        "text": "#24292f",
        "text.dim": "#57606a",
        "selected": "bg:#d0d7de bold",
        "header": "#bc4c00 bold",
        "title": "#0969da bold",
        "border": "#afb8c1",
        "input": "#24292f",
        "icon.check": "#1a7f37 bold",
        "icon.warn": "#9a6700 bold",
        "help": "bg:#f6f8fa #24292f",
    },
}

DEFAULT_THEME = "dark"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme) or THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    return Style.from_dict(get_theme_palette(theme))


__all__ = ["THEMES", "DEFAULT_THEME", "get_theme_palette", "build_style"]
