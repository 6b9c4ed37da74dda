"""Application service for fetching all repositories of a GitHub user."""

import logging
from typing import List

from ghrepos.infrastructure.github_client import GitHubRESTClient
from ghrepos.domain.repository import Repository

logger = logging.getLogger(__name__)


class RepositoryFetcher:
    """Service that follows Link header pagination for a user's repositories."""

    def __init__(self, github_client: GitHubRESTClient):
        """
        Initialize repository fetcher.

        Args:
            github_client: GitHub API client
        """
        self.github_client = github_client

    def fetch_all(self, username: str) -> List[Repository]:
        """
        Fetch every repository of a user, page after page.

        Errors from any page propagate and nothing fetched so far is returned.

        Args:
            username: GitHub username

        Returns:
            Repositories in pagination order
        """
        logger.info(f"Fetching repositories for user {username}")

        repositories: List[Repository] = []
        url = self.github_client.user_repos_url(username)
        page = 0

        while url:
            repos, url = self.github_client.get_repositories(url)
            repositories.extend(repos)
            page += 1
            logger.info(f"Fetched page {page}: {len(repos)} repositories ({len(repositories)} total)")

        logger.info(f"Fetch completed. Total repositories: {len(repositories)}")
        return repositories
