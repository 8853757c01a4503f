import logging
import random
import time
from typing import Any, Callable, Dict, Optional

import requests

from application.ports import RemoteStoreError
from infrastructure.gist.rate_limiter import RateLimiter

GIST_API_URL = "https://api.github.com/gists"
GITHUB_API_VERSION = "2022-11-28"

logger = logging.getLogger("barnacle.gist")


class GistClientError(RemoteStoreError):
    pass


class GistPermissionError(GistClientError):
    pass


class GistNotFoundError(GistClientError):
    pass


class GistClient:
    """Minimal REST client for a single gist."""

    def __init__(
        self,
        gist_id: str,
        session: Optional[requests.Session],
        token_provider: Callable[[], Optional[str]],
        rate_limiter: Optional[RateLimiter] = None,
        api_url: str = GIST_API_URL,
        timeout: int = 30,
        max_attempts: int = 3,
    ) -> None:
        self.gist_id = gist_id
        self.session = session or requests.Session()
        self.token_provider = token_provider
        self.rate_limiter = rate_limiter or RateLimiter()
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.max_attempts = max_attempts

    @property
    def gist_url(self) -> str:
        return f"{self.api_url}/{self.gist_id}"

    def get_gist(self) -> Dict[str, Any]:
        return self._json(self.request("get", self.gist_url))

    def update_files(self, files: Dict[str, str]) -> Dict[str, Any]:
        payload = {"files": {name: {"content": content} for name, content in files.items()}}
        return self._json(self.request("patch", self.gist_url, payload))

    def get_raw(self, url: str) -> bytes:
        return self.request("get", url).content

    def request(self, method: str, url: str, payload: Optional[Dict[str, Any]] = None) -> requests.Response:
        token = self.token_provider()
        if not token:
            raise GistPermissionError("GitHub token missing")
        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        attempt = 0
        delay = 1.0
        while True:
            attempt += 1
            self.rate_limiter.acquire()
            try:
                resp = self.session.request(method.upper(), url, json=payload, headers=headers, timeout=self.timeout)
            except requests.RequestException as exc:
                if attempt >= self.max_attempts:
                    raise GistClientError(f"GitHub API network error: {exc}") from exc
                logger.debug("%s %s failed (%s), retrying", method.upper(), url, exc)
                self._sleep(delay)
                delay *= 2
                continue
            self.rate_limiter.update(resp.headers)
            if resp.status_code >= 500 and attempt < self.max_attempts:
                logger.debug("%s %s returned %s, retrying", method.upper(), url, resp.status_code)
                self._sleep(delay)
                delay *= 2
                continue
            self._raise_for_status(resp)
            return resp

    def _raise_for_status(self, resp: requests.Response) -> None:
        status = resp.status_code
        if status in (401, 403):
            if str(resp.headers.get("X-RateLimit-Remaining", "")) == "0":
                raise GistClientError("GitHub API rate limit exceeded")
            raise GistPermissionError(f"HTTP {status}: token rejected or lacks the gist scope")
        if status == 404:
            raise GistNotFoundError(f"gist {self.gist_id} not found")
        if status >= 400:
            raise GistClientError(f"GitHub API error: {status} {resp.text[:200]}")

    @staticmethod
    def _json(resp: requests.Response) -> Dict[str, Any]:
        try:
            data = resp.json()
        except ValueError as exc:
            raise GistClientError(f"GitHub API returned invalid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise GistClientError("GitHub API returned an unexpected payload")
        return data

    def _sleep(self, base_delay: float) -> None:
        time.sleep(base_delay + random.uniform(0, base_delay))


__all__ = ["GIST_API_URL", "GistClient", "GistClientError", "GistPermissionError", "GistNotFoundError"]
