#!/usr/bin/env python3
"""
barnacle: terminal task tracker with a modal editor.

Wires configuration, logging, the remote store and the TUI together.
"""

import logging
import sys
from importlib.metadata import PackageNotFoundError, version as pkg_version
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Tuple

from application.context import AppContext
from application.ports import ProjectRef, RemoteStore, RemoteStoreError
from application.sync_service import SyncCoordinator
from application.task_store import TaskStore
from config import ClientConfig, config_path, load_client_config, persist_view_state, set_credentials
from infrastructure.directory_store import DirectoryStore
from infrastructure.gist import GistClient
from infrastructure.gist_store import GistStore
from interface.cli_parser import build_parser as build_cli_parser
from interface.constants import BANNER, SETUP_INSTRUCTIONS
from interface.tui_themes import DEFAULT_THEME, THEMES

LOG_FILE_NAME = "barnacle.log"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUPS = 3

logger = logging.getLogger("barnacle")


def setup_logging(level: str, log_path: Path) -> None:
    """Send `barnacle.*` records to a rotating file; the terminal belongs to the TUI."""
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        if isinstance(handler, RotatingFileHandler):
            logger.removeHandler(handler)
            handler.close()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    fh = RotatingFileHandler(log_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8")
    fh.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))
    fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(fh)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def build_remote_store(config: ClientConfig, override: Optional[str] = None) -> Tuple[RemoteStore, str]:
    kind = override or config.store_kind()
    if kind == "gist":
        if not config.gist_id or not config.resolved_token():
            raise ValueError("gist store needs a token and gist id; run `barnacle auth`")
        client = GistClient(config.gist_id, None, config.resolved_token)
        return GistStore(client), "Gist"
    return DirectoryStore(config.projects_path()), "Local"


def build_context(config: ClientConfig, store: RemoteStore, cfg_path: Optional[Path] = None) -> AppContext:
    tasks = TaskStore()
    sync = SyncCoordinator(store, tasks)
    return AppContext(
        tasks=tasks,
        sync=sync,
        config=config,
        config_writer=lambda cfg: persist_view_state(cfg, cfg_path),
    )


def open_initial_project(ctx: AppContext) -> None:
    name = ctx.config.current_project
    if not name:
        ctx.set_status_message("No project yet: :pnew <name> creates one")
        return
    if ctx.sync.load(ProjectRef(name)) is None:
        ctx.set_status_message(ctx.sync.status.last_error or f"Could not open {name}", ttl=8)


def _config_file(args) -> Path:
    return Path(args.config).expanduser() if getattr(args, "config", None) else config_path()


def prompt(question: str, default: str = "") -> str:
    """Request a single line of input with optional default."""
    shown = f"{question} [{default}]" if default else question
    try:
        response = input(f"{shown}: ").strip()
    except (EOFError, KeyboardInterrupt):
        print("\naborted")
        sys.exit(1)
    return response or default


def cmd_tui(args) -> int:
    from interface.tui_app import BarnacleTUI

    cfg_path = _config_file(args)
    config = load_client_config(cfg_path)
    if getattr(args, "project", None):
        config.current_project = args.project
    try:
        store, label = build_remote_store(config, getattr(args, "store", None))
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    ctx = build_context(config, store, cfg_path)
    open_initial_project(ctx)
    tui = BarnacleTUI(ctx, store_label=label, theme=getattr(args, "theme", None) or config.theme or DEFAULT_THEME)
    try:
        tui.run()
    finally:
        ctx.sync.shutdown()
    return 0


def cmd_auth(args) -> int:
    cfg_path = _config_file(args)
    config = load_client_config(cfg_path)
    print(BANNER)
    print(f"Config will be saved to {cfg_path}")
    print("\nHow to get setup:\n")
    for number, item in enumerate(SETUP_INSTRUCTIONS, start=1):
        print(f"  {number}. {item}")
    print()
    token = args.token or prompt("Github personal token", "***" if config.token else "")
    if token == "***":
        token = config.token
    gist_id = args.gist_id or prompt("Gist id", config.gist_id)
    set_credentials(token, gist_id, cfg_path)
    print(f"\nSaved credentials to {cfg_path}")
    return 0


def cmd_projects(args) -> int:
    config = load_client_config(_config_file(args))
    try:
        store, label = build_remote_store(config, getattr(args, "store", None))
        projects: List[ProjectRef] = store.list_projects()
    except (ValueError, RemoteStoreError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if not projects:
        print(f"No projects in {label} store")
        return 0
    for ref in projects:
        marker = "*" if ref.name == config.current_project else " "
        print(f"{marker} {ref.name}")
    return 0


def build_parser():
    """Build CLI argument parser."""
    return build_cli_parser(commands=sys.modules[__name__], themes=THEMES)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "version", False):
        try:
            print(pkg_version("barnacle"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    cfg_path = _config_file(args)
    config = load_client_config(cfg_path)
    setup_logging(args.log_level or config.log_level, cfg_path.parent / LOG_FILE_NAME)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
