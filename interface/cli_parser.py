"""CLI parser construction for barnacle."""

import argparse
from typing import Any, Mapping

from config import STORE_KINDS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser(commands: Any, themes: Mapping[str, Any]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="barnacle",
        description="barnacle: terminal task tracker synced to a GitHub gist",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", help="path to client.yml (default: $BARNACLE_CONFIG or ~/.config/barnacle/client.yml)")
    parser.add_argument("--log-level", choices=LOG_LEVELS, type=str.upper, help="file log level")
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    parser.set_defaults(func=commands.cmd_tui, project=None, store=None, theme=None)

    sub = parser.add_subparsers(dest="command", help="Commands")

    tui_p = sub.add_parser("tui", help="Run the task TUI (default)")
    tui_p.add_argument("--project", help="project to open instead of the configured one")
    tui_p.add_argument("--store", choices=STORE_KINDS, help="force the gist or local store")
    tui_p.add_argument("--theme", choices=list(themes.keys()), help="colour palette")
    tui_p.set_defaults(func=commands.cmd_tui)

    auth_p = sub.add_parser("auth", help="Store the GitHub token and gist id")
    auth_p.add_argument("--token", help="GitHub personal access token with the gist scope")
    auth_p.add_argument("--gist-id", help="id of the gist that holds the projects")
    auth_p.set_defaults(func=commands.cmd_auth)

    projects_p = sub.add_parser("projects", help="List projects in the store")
    projects_p.add_argument("--store", choices=STORE_KINDS, help="force the gist or local store")
    projects_p.set_defaults(func=commands.cmd_projects)

    return parser


__all__ = ["build_parser", "LOG_LEVELS"]
