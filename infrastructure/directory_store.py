"""Projects stored as ``<name>.json`` files in a local directory."""

import logging
import os
import tempfile
from pathlib import Path
from typing import List

from application.ports import ProjectRef, RemoteStoreError

PROJECT_SUFFIX = ".json"

logger = logging.getLogger("barnacle.store")


class DirectoryStoreError(RemoteStoreError):
    pass


class ProjectNameError(ValueError):
    pass


class DirectoryStore:
    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def _path(self, name: str) -> Path:
        # SEC: project names are file names, never paths
        if not name or name in {".", ".."} or "/" in name or "\\" in name or "\x00" in name:
            raise ProjectNameError(f"invalid project name: {name!r}")
        filename = name if name.endswith(PROJECT_SUFFIX) else f"{name}{PROJECT_SUFFIX}"
        resolved = (self.root / filename).resolve()
        if resolved.parent != self.root.resolve():
            raise ProjectNameError(f"project path escapes {self.root}: {name!r}")
        return resolved

    def list_projects(self) -> List[ProjectRef]:
        if not self.root.is_dir():
            return []
        return [
            ProjectRef(name=path.stem, location=str(path))
            for path in sorted(self.root.glob(f"*{PROJECT_SUFFIX}"))
            if path.is_file()
        ]

    def fetch(self, project: ProjectRef) -> bytes:
        path = self._path(project.name)
        try:
            return path.read_bytes()
        except FileNotFoundError as exc:
            raise DirectoryStoreError(f"project {project.name} not found in {self.root}") from exc
        except OSError as exc:
            raise DirectoryStoreError(f"cannot read {path}: {exc}") from exc

    def replace(self, project: ProjectRef, content: bytes) -> None:
        path = self._path(project.name)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{path.stem}.", suffix=".tmp", dir=str(self.root))
            try:
                with os.fdopen(fd, "wb") as handle:
                    handle.write(content)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise DirectoryStoreError(f"cannot write {path}: {exc}") from exc
        logger.debug("wrote %d bytes to %s", len(content), path)


__all__ = ["DirectoryStore", "DirectoryStoreError", "ProjectNameError", "PROJECT_SUFFIX"]
