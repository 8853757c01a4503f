"""Projects stored as files of a single GitHub gist."""

import logging
from typing import Any, Dict, List, Optional

from application.ports import ProjectRef
from infrastructure.gist import GistClient, GistClientError, GistNotFoundError

logger = logging.getLogger("barnacle.gist")


class GistStore:
    """RemoteStore over one gist; each file is one project document."""

    def __init__(self, client: GistClient) -> None:
        self.client = client

    def list_projects(self) -> List[ProjectRef]:
        files = self._files(self.client.get_gist())
        return [
            ProjectRef(name=name, location=meta.get("raw_url"))
            for name, meta in sorted(files.items())
            if isinstance(meta, dict)
        ]

    def fetch(self, project: ProjectRef) -> bytes:
        # raw_url pins a revision, so the file is looked up on a fresh gist read.
        meta = self._files(self.client.get_gist()).get(project.name)
        if not isinstance(meta, dict):
            raise GistNotFoundError(f"project {project.name} not found in gist {self.client.gist_id}")
        content = meta.get("content")
        if content is not None and not meta.get("truncated"):
            return str(content).encode("utf-8")
        raw_url = meta.get("raw_url") or project.location
        if not raw_url:
            raise GistClientError(f"project {project.name} has no downloadable content")
        logger.debug("fetching truncated file %s from raw url", project.name)
        return self.client.get_raw(raw_url)

    def replace(self, project: ProjectRef, content: bytes) -> None:
        text = content.decode("utf-8") if isinstance(content, (bytes, bytearray)) else str(content)
        self.client.update_files({project.name: text})

    @staticmethod
    def _files(gist: Dict[str, Any]) -> Dict[str, Any]:
        files: Optional[Dict[str, Any]] = gist.get("files")
        return files if isinstance(files, dict) else {}


__all__ = ["GistStore"]
