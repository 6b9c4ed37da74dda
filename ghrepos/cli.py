"""Command line entry point: print the SSH URL of every repository of a user."""

import logging
import sys
from typing import List, Optional

from ghrepos.infrastructure.github_client import GitHubRESTClient, RepoFetchError
from ghrepos.application.fetcher_service import RepositoryFetcher

logger = logging.getLogger(__name__)

USAGE = "Usage: getgithubrepos <username>"
MISSING_USERNAME_EXIT_CODE = 1


def main(argv: Optional[List[str]] = None) -> int:
    """List a user's repositories on stdout and return the exit code."""
    if argv is None:
        argv = sys.argv[1:]

    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    username = argv[0] if argv else ""
    if not username:
        logger.error(USAGE)
        return MISSING_USERNAME_EXIT_CODE

    try:
        fetcher = RepositoryFetcher(GitHubRESTClient())
        repositories = fetcher.fetch_all(username)
    except RepoFetchError as e:
        logger.error(str(e))
        return e.exit_code

    for repo in repositories:
        print(repo.ssh_url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
