import pytest
from pydantic import ValidationError

from pytest_templaterepos import (
    SAMPLE_REPOS,
    STYLED_TEMPLATES,
    TEMPLATE_REPOSITORY_URL,
    VALID_URL_NOT_POINTING_TO_INDEX_JSON,
    BatchOperation,
    IndexEntry,
    RepoSnapshot,
    TemplateRepository,
)


def test_repository_from_wire_names():
    repo = TemplateRepository.model_validate(
        {
            "url": "https://example.com/index.json",
            "name": "Example",
            "description": "Example templates",
            "enabled": False,
            "protected": False,
            "projectStyles": ["Codewind", "Appsody"],
        }
    )

    assert repo.project_styles == ("Codewind", "Appsody")
    assert repo.enabled is False


def test_repository_payload_skips_unset_fields():
    repo = TemplateRepository(url="https://example.com/index.json", description="Only a description")

    assert repo.to_payload() == {"url": "https://example.com/index.json", "description": "Only a description"}


def test_repository_keeps_server_fields():
    repo = TemplateRepository.model_validate({"url": "https://example.com/index.json", "id": "abc", "enabled": True})

    assert repo.to_payload() == {"url": "https://example.com/index.json", "enabled": True, "id": "abc"}


def test_repository_is_immutable():
    with pytest.raises(ValidationError):
        SAMPLE_REPOS.codewind.enabled = False


def test_repository_requires_url():
    with pytest.raises(ValidationError):
        TemplateRepository.model_validate({"name": "No url"})


@pytest.mark.parametrize("value", ["true", "false"])
def test_batch_operation(value):
    operation = BatchOperation(url="https://example.com/index.json", value=value)

    assert operation.model_dump() == {"url": "https://example.com/index.json", "op": "enable", "value": value}


@pytest.mark.parametrize(
    "data",
    [
        {"url": "https://example.com/index.json", "value": True},
        {"url": "https://example.com/index.json", "value": "yes"},
        {"url": "https://example.com/index.json", "op": "delete", "value": "true"},
        {"url": "https://example.com/index.json", "value": "true", "extra": 1},
    ],
)
def test_batch_operation_invalid(data):
    with pytest.raises(ValidationError):
        BatchOperation.model_validate(data)


def test_index_entry_ignores_unknown_fields():
    entry = IndexEntry.model_validate(
        {
            "displayName": "X",
            "description": "D",
            "language": "go",
            "projectType": "docker",
            "location": "L",
            "links": {"self": "/devfiles/x/devfile.yaml"},
        }
    )

    assert entry.display_name == "X"
    assert entry.location == "L"
    assert entry.model_extra is None


def test_snapshot_urls():
    snapshot = RepoSnapshot(repositories=(SAMPLE_REPOS.codewind, TemplateRepository(url="https://example.com/index.json")))

    assert snapshot.urls == [TEMPLATE_REPOSITORY_URL, "https://example.com/index.json"]
    assert RepoSnapshot().urls == []


def test_sample_repos():
    assert SAMPLE_REPOS.codewind.url == SAMPLE_REPOS.disabled_codewind.url == TEMPLATE_REPOSITORY_URL
    assert SAMPLE_REPOS.codewind.enabled is True
    assert SAMPLE_REPOS.disabled_codewind.enabled is False
    assert SAMPLE_REPOS.codewind.to_payload()["projectStyles"] == ["Codewind"]


def test_styled_templates():
    assert STYLED_TEMPLATES.codewind.project_style is None
    assert STYLED_TEMPLATES.appsody.to_payload() == {
        "label": "Appsody template",
        "description": "Appsody stack",
        "language": "nodejs",
        "url": "https://github.com/appsody/template/repo",
        "projectType": "nodejs",
        "projectStyle": "Appsody",
    }


def test_url_not_pointing_to_index_json():
    assert VALID_URL_NOT_POINTING_TO_INDEX_JSON.startswith("https://")
    assert not VALID_URL_NOT_POINTING_TO_INDEX_JSON.endswith("index.json")
