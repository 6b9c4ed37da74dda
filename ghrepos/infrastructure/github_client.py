"""GitHub REST API client for listing a user's repositories."""

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests
from requests.utils import parse_header_links

from ghrepos.domain.repository import Repository

logger = logging.getLogger(__name__)


class RepoFetchError(Exception):
    """Base class for failures while fetching repositories."""

    exit_code = 4
    message = "HTTP Error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class UsernameNotFound(RepoFetchError):
    """Raised when GitHub answers 404 for the user."""

    exit_code = 2
    message = "No such username"


class RateLimitExceeded(RepoFetchError):
    """Raised when GitHub API rate limit is exceeded."""

    exit_code = 3
    message = "Rate limit exceeded"


class HTTPFailure(RepoFetchError):
    """Raised when the request could not be completed."""

    exit_code = 4
    message = "HTTP Error"


class DecodeFailure(RepoFetchError):
    """Raised when a response body is not a JSON array of repositories."""

    exit_code = 5
    message = "Failed to decode JSON response"


def get_link(header_values: List[str], rel: str = "next") -> Optional[str]:
    """
    Find the URL for a link relation in raw Link header values.

    Args:
        header_values: Link header values, one per header line. Each may hold
            several comma separated `<url>; rel="..."` entries.
        rel: Relation type to look for

    Returns:
        URL of the first matching entry, or None
    """
    for value in header_values:
        for link in parse_header_links(value):
            # rel may hold several space separated relation types
            if rel in link.get("rel", "").split():
                return link.get("url")
    return None


def _field(item: Dict[str, Any], key: str, kind: type, default: Any) -> Any:
    """Read a typed field, giving the zero value for missing or null."""
    value = item.get(key)
    if value is None:
        return default
    # bool is an int subclass but not a JSON number
    if isinstance(value, bool) or not isinstance(value, kind):
        raise DecodeFailure()
    return value


def decode_repositories(data: Any) -> List[Repository]:
    """Decode a parsed JSON page into repositories."""
    # null decodes to an empty page
    if data is None:
        return []
    if not isinstance(data, list):
        raise DecodeFailure()

    repositories = []
    for item in data:
        if item is None:
            item = {}
        if not isinstance(item, dict):
            raise DecodeFailure()
        repositories.append(
            Repository(
                id=_field(item, "id", int, 0),
                name=_field(item, "name", str, ""),
                ssh_url=_field(item, "ssh_url", str, ""),
            )
        )
    return repositories


class GitHubRESTClient:
    """Client for the GitHub REST "list repositories for a user" endpoint."""

    USER_REPOS_ENDPOINT = "https://api.github.com/users/{username}/repos"

    def __init__(self, timeout: Optional[float] = None):
        """
        Initialize GitHub REST client.

        Args:
            timeout: Request timeout in seconds. If None, no timeout.
        """
        self.timeout = timeout
        self.headers = {
            "Accept": "application/vnd.github+json",
        }

    def user_repos_url(self, username: str) -> str:
        """Build the first page URL for a user's repositories."""
        return self.USER_REPOS_ENDPOINT.format(username=username)

    def get_repositories(self, url: str) -> Tuple[List[Repository], Optional[str]]:
        """
        Fetch one page of repositories.

        Args:
            url: Page URL, either from user_repos_url or a previous "next" link

        Returns:
            Tuple of (list of repositories, next page URL or None)

        Raises:
            UsernameNotFound: On a 404 response
            RateLimitExceeded: On a 403 response
            HTTPFailure: If the request fails
            DecodeFailure: If the body is not a JSON array of repositories
        """
        logger.debug(f"GET {url}")
        try:
            with requests.get(url, headers=self.headers, timeout=self.timeout) as response:
                if response.status_code == 404:
                    raise UsernameNotFound()
                if response.status_code == 403:
                    raise RateLimitExceeded()

                try:
                    data = response.json()
                except ValueError as e:
                    logger.debug(f"Invalid JSON from {url} (status {response.status_code}): {e}")
                    raise DecodeFailure() from e

                link = response.headers.get("Link")
        except requests.exceptions.RequestException as e:
            logger.debug(f"Request to {url} failed: {e}")
            raise HTTPFailure() from e

        repositories = decode_repositories(data)
        next_url = get_link([link]) if link else None
        return repositories, next_url
