from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class TemplateRepository(BaseModel):
    """A server-registered source of project templates, keyed by url.

    Fields the server adds on top of the documented ones are kept, so a
    repository read back from the server can be re-added unchanged.
    """

    url: str = Field(description="Location of the repository index. Unique key.")
    name: str | None = Field(default=None, description="Display name.")
    description: str | None = Field(default=None, description="Human readable description.")
    enabled: bool | None = Field(default=None, description="Whether templates from this repository are offered.")
    protected: bool | None = Field(default=None, description="Protected repositories cannot be removed through the UI.")
    project_styles: tuple[str, ...] | None = Field(default=None, alias="projectStyles", description="Project styles served by the repository.")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class Template(BaseModel):
    label: str
    description: str
    language: str
    url: str
    project_type: str = Field(alias="projectType")
    source: str | None = None
    source_url: str | None = Field(default=None, alias="sourceURL")
    project_style: str | None = Field(default=None, alias="projectStyle")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class BatchOperation(BaseModel):
    """Single enable/disable instruction of a batch patch request."""

    url: str
    op: Literal["enable"] = "enable"
    value: Literal["true", "false"]

    model_config = ConfigDict(frozen=True, extra="forbid")


class IndexEntry(BaseModel):
    """One entry of a third-party template index (``index.json``)."""

    display_name: str = Field(alias="displayName")
    description: str
    language: str
    project_type: str = Field(alias="projectType")
    location: str

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class RepoSnapshot(BaseModel):
    """Repositories captured by a setup hook, to be restored by its teardown."""

    repositories: tuple[TemplateRepository, ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def urls(self) -> list[str]:
        return [repo.url for repo in self.repositories]
