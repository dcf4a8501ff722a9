import logging
import time
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from http import HTTPMethod, HTTPStatus
from typing import Any, Self

import httpx
from pydantic import BaseModel, TypeAdapter

from .constants import DEFAULT_TEMPLATES_SOURCE, TEMPLATE_REPOSITORY_URL, Endpoints
from .exceptions import RequestError, UnexpectedStatusError
from .models import BatchOperation, IndexEntry, Template, TemplateRepository
from .settings import Settings

logger = logging.getLogger(__name__)

_REPOSITORIES = TypeAdapter(list[TemplateRepository])
_INDEX = TypeAdapter(list[IndexEntry])

RepoLike = TemplateRepository | Mapping[str, Any]


def _to_payload(value: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(value, TemplateRepository):
        return value.to_payload()
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json")
    return dict(value)


class TemplateClient:
    """HTTP client for the template repository API.

    Query and mutation helpers return the raw ``httpx.Response`` so tests can
    assert on status and body themselves. Only the count helpers and
    :meth:`list_template_repos` interpret status codes.
    """

    def __init__(
        self,
        base_url: str,
        admin_cookie: str = "",
        *,
        timeout: float = 30.0,
        index_url: str = TEMPLATE_REPOSITORY_URL,
        transport: httpx.BaseTransport | None = None,
    ):
        headers = {"Cookie": admin_cookie} if admin_cookie else {}
        self._client = httpx.Client(base_url=base_url, headers=headers, transport=transport)
        # the third-party index is fetched without the admin cookie
        self._external_client = httpx.Client(transport=transport)
        self.index_url = index_url
        self.timeout = timeout
        self._deadline: float | None = None
        self.last_request: httpx.Request | None = None
        self.last_response: httpx.Response | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        return cls(
            settings.base_url,
            settings.admin_cookie,
            timeout=settings.timeout_short,
            index_url=settings.index_url,
        )

    def close(self) -> None:
        self._client.close()
        self._external_client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @contextmanager
    def timeout_budget(self, seconds: float) -> Iterator[Self]:
        """Give every request made inside the block ``seconds`` in total.

        Each request gets the time left until the deadline as its timeout. A
        request issued after the deadline raises :class:`RequestError` unsent.
        """
        previous = self._deadline
        self._deadline = time.monotonic() + seconds
        try:
            yield self
        finally:
            self._deadline = previous

    def _remaining_timeout(self, method: HTTPMethod, url: str) -> float:
        if self._deadline is None:
            return self.timeout
        remaining = self._deadline - time.monotonic()
        if remaining <= 0:
            logger.error(f"{method} {url} not sent, timeout budget exhausted")
            raise RequestError(f"Timeout budget exhausted before {method} {url}")
        return remaining

    def _request(self, method: HTTPMethod, url: str, *, external: bool = False, **kwargs: Any) -> httpx.Response:
        client = self._external_client if external else self._client
        self.last_request = None
        self.last_response = None
        timeout = self._remaining_timeout(method, url)
        logger.info(f"{method} {url}")
        try:
            response = client.request(method, url, timeout=timeout, **kwargs)
        except httpx.TimeoutException as e:
            logger.error(f"{method} {url} timed out after {timeout:.2f}s")
            raise RequestError(f"HTTP request timed out: {str(e)}") from None
        except httpx.ConnectError as e:
            logger.error(f"{method} {url} could not connect")
            raise RequestError(f"HTTP connection error: {str(e)}") from None
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed")
            raise RequestError(f"HTTP request failed: {str(e)}") from None

        self.last_request = response.request
        self.last_response = response
        logger.info(f"{method} {url} -> {response.status_code}")
        return response

    # queries

    def get_template_repos(self) -> httpx.Response:
        return self._request(HTTPMethod.GET, Endpoints.REPOSITORIES)

    def list_template_repos(self) -> list[TemplateRepository]:
        response = self.get_template_repos()
        match response.status_code:
            case HTTPStatus.NO_CONTENT:
                return []
            case HTTPStatus.OK:
                return _REPOSITORIES.validate_python(response.json()) if response.content else []
        raise UnexpectedStatusError("list_template_repos", response.status_code)

    def get_templates(self, query_params: Mapping[str, Any] | None = None) -> httpx.Response:
        return self._request(HTTPMethod.GET, Endpoints.TEMPLATES, params=query_params)

    def get_enabled_templates(self, query_params: Mapping[str, Any] | None = None) -> httpx.Response:
        # the caller cannot switch the enabled-only flag off
        params = {**(query_params or {}), "showEnabledOnly": "true"}
        return self._request(HTTPMethod.GET, Endpoints.ENABLED_TEMPLATES, params=params)

    def get_number_of_templates(self, query_params: Mapping[str, Any] | None = None) -> int:
        return self._count_templates("get_number_of_templates", self.get_templates(query_params))

    def get_number_of_enabled_templates(self, query_params: Mapping[str, Any] | None = None) -> int:
        return self._count_templates("get_number_of_enabled_templates", self.get_enabled_templates(query_params))

    @staticmethod
    def _count_templates(operation: str, response: httpx.Response) -> int:
        # 204, or a 200 without a body, means the server has no templates to report
        match response.status_code:
            case HTTPStatus.NO_CONTENT:
                return 0
            case HTTPStatus.OK:
                return len(response.json()) if response.content else 0
        raise UnexpectedStatusError(operation, response.status_code)

    def get_template_styles(self) -> httpx.Response:
        return self._request(HTTPMethod.GET, Endpoints.STYLES)

    # mutations

    def add_template_repo(self, repo: RepoLike) -> httpx.Response:
        return self._request(HTTPMethod.POST, Endpoints.REPOSITORIES, json=_to_payload(repo))

    def delete_template_repo(self, repo_url: str) -> httpx.Response:
        return self._request(HTTPMethod.DELETE, Endpoints.REPOSITORIES, json={"url": repo_url})

    def batch_patch_template_repos(self, operations: Iterable[BatchOperation | Mapping[str, Any]]) -> httpx.Response:
        payload = [_to_payload(operation) for operation in operations]
        return self._request(HTTPMethod.PATCH, Endpoints.BATCH_REPOSITORIES, json=payload)

    def enable_template_repos(self, repo_urls: Iterable[str]) -> httpx.Response:
        return self.batch_patch_template_repos(BatchOperation(url=url, value="true") for url in repo_urls)

    def disable_template_repos(self, repo_urls: Iterable[str]) -> httpx.Response:
        return self.batch_patch_template_repos(BatchOperation(url=url, value="false") for url in repo_urls)

    def set_template_repos_to(self, repos: Iterable[RepoLike]) -> None:
        """Remove every repository known to the server, then add ``repos`` in order.

        Requests are issued one at a time. The reset is not atomic: a failing
        request raises and leaves the server with whatever was done so far.
        """
        current = self.list_template_repos()
        logger.info(f"Resetting template repositories, removing {len(current)}")
        for repo in current:
            response = self.delete_template_repo(repo.url)
            if response.is_error:
                logger.warning(f"Delete of repository {repo.url} returned {response.status_code}")

        for repo in repos:
            payload = _to_payload(repo)
            response = self.add_template_repo(payload)
            if response.is_error:
                logger.warning(f"Add of repository {payload.get('url')} returned {response.status_code}")

    # third-party index

    def get_default_templates_from_github(self) -> list[Template]:
        """Fetch the default template index and reshape it into template records."""
        response = self._request(HTTPMethod.GET, self.index_url, external=True)
        assert response.status_code == HTTPStatus.OK, f"Template index {self.index_url} returned {response.status_code}"

        entries = _INDEX.validate_python(response.json())
        return [
            Template(
                label=entry.display_name,
                description=entry.description,
                language=entry.language,
                url=entry.location,
                project_type=entry.project_type,
                source=DEFAULT_TEMPLATES_SOURCE,
                source_url=self.index_url,
            )
            for entry in entries
        ]
