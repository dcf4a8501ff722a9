from .client import TemplateClient
from .constants import DEFAULT_TEMPLATES_SOURCE, TEMPLATE_REPOSITORY_URL, VALID_URL_NOT_POINTING_TO_INDEX_JSON
from .exceptions import RequestError, TemplateClientError, UnexpectedStatusError
from .lifecycle import restore_repos, save_repos, setup_repos_for_testing
from .models import BatchOperation, IndexEntry, RepoSnapshot, Template, TemplateRepository
from .samples import SAMPLE_REPOS, STYLED_TEMPLATES
from .settings import Settings

__all__ = [
    "BatchOperation",
    "DEFAULT_TEMPLATES_SOURCE",
    "IndexEntry",
    "RepoSnapshot",
    "RequestError",
    "SAMPLE_REPOS",
    "STYLED_TEMPLATES",
    "Settings",
    "TEMPLATE_REPOSITORY_URL",
    "Template",
    "TemplateClient",
    "TemplateClientError",
    "TemplateRepository",
    "UnexpectedStatusError",
    "VALID_URL_NOT_POINTING_TO_INDEX_JSON",
    "restore_repos",
    "save_repos",
    "setup_repos_for_testing",
]
