"""Snapshot and restore of the server's repository set around tests.

The snapshot is an explicit value: the setup step returns it and the
teardown step takes it back, so nothing is captured in shared state.
"""

import logging
from collections.abc import Iterable

from .client import RepoLike, TemplateClient
from .models import RepoSnapshot
from .samples import SAMPLE_REPOS

logger = logging.getLogger(__name__)


def save_repos(client: TemplateClient) -> RepoSnapshot:
    snapshot = RepoSnapshot(repositories=tuple(client.list_template_repos()))
    logger.info(f"Saved {len(snapshot.repositories)} template repositories")
    return snapshot


def restore_repos(client: TemplateClient, snapshot: RepoSnapshot) -> None:
    logger.info(f"Restoring {len(snapshot.repositories)} template repositories")
    client.set_template_repos_to(snapshot.repositories)


def setup_repos_for_testing(client: TemplateClient, repos: Iterable[RepoLike] = (SAMPLE_REPOS.codewind,)) -> RepoSnapshot:
    """Save the current repositories and replace them with ``repos``.

    Returns the snapshot to hand to :func:`restore_repos` afterwards.
    """
    snapshot = save_repos(client)
    client.set_template_repos_to(repos)
    return snapshot
