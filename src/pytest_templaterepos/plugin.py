"""Pytest plugin for template repository API testing.

This module registers the plugin's ini options, builds the shared
:class:`TemplateClient` and provides the fixtures that save the server's
template repositories before tests and restore them afterwards.
"""

from collections.abc import Iterator
from typing import Any

import pytest
from _pytest import config, nodes, reports, runner
from _pytest.config import argparsing

from .client import TemplateClient
from .constants import ConfigOptions
from .lifecycle import restore_repos, save_repos, setup_repos_for_testing
from .models import RepoSnapshot
from .report_formatter import format_request, format_response
from .settings import Settings


_SETTINGS_KEY = pytest.StashKey[Settings]()

_INI_FIELDS = {
    ConfigOptions.BASE_URL: "base_url",
    ConfigOptions.ADMIN_COOKIE: "admin_cookie",
    ConfigOptions.TIMEOUT_SHORT: "timeout_short",
    ConfigOptions.TIMEOUT_MED: "timeout_med",
    ConfigOptions.INDEX_URL: "index_url",
}


def pytest_addoption(parser: argparsing.Parser) -> None:
    """Add ini options for the plugin.

    Every option is optional; an unset option falls back to the matching
    ``TEMPLATEREPOS_*`` environment variable and then to the built-in default.

    Args:
        parser: Pytest's argument parser to add options to
    """
    parser.addini(name=ConfigOptions.BASE_URL, help="Base url of the template API.", type="string", default="")
    parser.addini(name=ConfigOptions.ADMIN_COOKIE, help="Cookie header value authenticating the admin user.", type="string", default="")
    parser.addini(name=ConfigOptions.TIMEOUT_SHORT, help="Timeout budget (seconds) of hooks doing a single fetch or restore.", type="string", default="")
    parser.addini(name=ConfigOptions.TIMEOUT_MED, help="Timeout budget (seconds) of hooks replacing the repository set.", type="string", default="")
    parser.addini(name=ConfigOptions.INDEX_URL, help="Url of the default template index.", type="string", default="")


def load_settings(config: config.Config) -> Settings:
    overrides: dict[str, Any] = {}
    for option, field_name in _INI_FIELDS.items():
        value = str(config.getini(option)).strip()
        if value:
            overrides[field_name] = value
    return Settings(**overrides)


def pytest_configure(config: config.Config) -> None:
    """Validate configuration settings and keep them on the config stash.

    Raises:
        ValueError: If a url is not http(s), a budget is not positive, or the
            short budget exceeds the med budget
    """
    config.stash[_SETTINGS_KEY] = load_settings(config)


@pytest.fixture(scope="session")
def templaterepos_settings(pytestconfig: pytest.Config) -> Settings:
    return pytestconfig.stash[_SETTINGS_KEY]


@pytest.fixture(scope="session")
def template_client(templaterepos_settings: Settings) -> Iterator[TemplateClient]:
    with TemplateClient.from_settings(templaterepos_settings) as client:
        yield client


@pytest.fixture(scope="module")
def template_repos_saved(template_client: TemplateClient, templaterepos_settings: Settings) -> Iterator[RepoSnapshot]:
    """Save the repositories before the module's tests and restore them after."""
    with template_client.timeout_budget(templaterepos_settings.timeout_short):
        snapshot = save_repos(template_client)
    yield snapshot
    with template_client.timeout_budget(templaterepos_settings.timeout_short):
        restore_repos(template_client, snapshot)


@pytest.fixture
def template_repos_saved_each(template_client: TemplateClient, templaterepos_settings: Settings) -> Iterator[RepoSnapshot]:
    """Save the repositories before each test and restore them after it."""
    with template_client.timeout_budget(templaterepos_settings.timeout_short):
        snapshot = save_repos(template_client)
    yield snapshot
    with template_client.timeout_budget(templaterepos_settings.timeout_short):
        restore_repos(template_client, snapshot)


@pytest.fixture(scope="module")
def template_repos_for_testing(template_client: TemplateClient, templaterepos_settings: Settings) -> Iterator[RepoSnapshot]:
    """Replace the repositories with the sample repository for the module's tests."""
    with template_client.timeout_budget(templaterepos_settings.timeout_med):
        snapshot = setup_repos_for_testing(template_client)
    yield snapshot
    with template_client.timeout_budget(templaterepos_settings.timeout_med):
        restore_repos(template_client, snapshot)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_call(item: nodes.Item) -> Any:
    """Forget the exchanges made by fixtures, so reports only show the test's own."""
    client = getattr(item, "funcargs", {}).get("template_client")
    if isinstance(client, TemplateClient):
        client.last_request = None
        client.last_response = None
    yield


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: nodes.Item, call: runner.CallInfo[Any]) -> Any:
    """Attach the last request/response of the test's template client to its report.

    Args:
        item: The test item being reported on
        call: Information about the test call

    Yields:
        The report with additional sections added
    """
    outcome = yield
    report: reports.TestReport = outcome.get_result()

    if call.when == "call":
        client = getattr(item, "funcargs", {}).get("template_client")
        if isinstance(client, TemplateClient):
            if client.last_request is not None:
                report.sections.append(("HTTP Request", format_request(client.last_request)))
            if client.last_response is not None:
                report.sections.append(("HTTP Response", format_response(client.last_response)))
