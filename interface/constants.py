"""Interface-level constants for the barnacle CLI/TUI."""

BANNER = r"""
888                                            888
888                                            888
888                                            888
88888b.  8888b. 888d88888888b.  8888b.  .d8888b888 .d88b.
888 "88b    "88b888P"  888 "88b    "88bd88P"   888d8P  Y8b
888  888.d888888888    888  888.d888888888     88888888888
888 d88P888  888888    888  888888  888Y88b.   888Y8b.
88888P" "Y888888888    888  888"Y888888 "Y8888P888 "Y8888
"""

SETUP_INSTRUCTIONS = (
    "Go to the Github dashboard - https://github.com/settings/tokens",
    "Click `Generate New Token` and select the gist scope",
    "Create a secret gist at https://gist.github.com and copy its id from the URL",
    "Run `barnacle auth` and paste the token and gist id at the prompts",
)

TABLE_COLUMNS = ("Id", "Content", "Started", "Days")
STARTED_FORMAT = "%Y-%m-%d %H:%M"
NO_VALUE = "-"

HELP_ENTRIES = (
    ("i", "insert a new task"),
    (":", "command line"),
    ("s / f / w", "start / finish / won't fix"),
    ("d, Ctrl-D", "delete (kept for paste)"),
    ("p", "paste deleted task"),
    ("j k, ↑ ↓", "move selection"),
    ("Tab", "cycle filter"),
    ("o", "save in background"),
    ("r", "reload from remote"),
    ("?", "toggle this help"),
    ("q, Ctrl-C", "quit"),
    (":w  :wq  :q", "save / save and quit / quit"),
    (":tmod N text", "rename row N"),
    (":tdel N", "delete row N"),
    (":pnew NAME", "create project"),
    (":popen NAME", "open project"),
    (":sfin on|off", "show finished tasks"),
    (":stoday on|off", "only today's tasks"),
    ("Esc", "leave insert/command mode"),
)
