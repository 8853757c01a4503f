from .gist_client import GIST_API_URL, GistClient, GistClientError, GistNotFoundError, GistPermissionError
from .rate_limiter import RateLimiter

__all__ = [
    "GIST_API_URL",
    "GistClient",
    "GistClientError",
    "GistNotFoundError",
    "GistPermissionError",
    "RateLimiter",
]
