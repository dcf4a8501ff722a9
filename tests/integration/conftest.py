import pytest

from pytest_templaterepos import TemplateClient

from .fake_api import HOST, PORT, SERVER_URL, FakeTemplateApi, app, state


@pytest.fixture(scope="session")
def server():
    with app.run(HOST, PORT):
        yield SERVER_URL


@pytest.fixture(scope="session")
def template_client(server, template_client: TemplateClient) -> TemplateClient:
    # the plugin's client, used only once the fake server is up
    return template_client


@pytest.fixture
def fake_api() -> FakeTemplateApi:
    """Fake server state, reset after the test."""
    yield state
    state.reset()
