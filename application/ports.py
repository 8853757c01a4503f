from dataclasses import dataclass
from typing import List, Optional, Protocol


class RemoteStoreError(RuntimeError):
    """Base error for remote document store failures."""


@dataclass(frozen=True)
class ProjectRef:
    """A project file inside the remote store.

    `location` is store specific (a raw URL for gists, a path for the
    directory store) and may be unknown for a project that is about to be
    created.
    """

    name: str
    location: Optional[str] = None


class RemoteStore(Protocol):
    def list_projects(self) -> List[ProjectRef]:
        ...

    def fetch(self, project: ProjectRef) -> bytes:
        ...

    def replace(self, project: ProjectRef, content: bytes) -> None:
        ...
