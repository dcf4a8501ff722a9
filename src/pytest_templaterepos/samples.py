"""Literal fixture data for template API tests."""

from pydantic import BaseModel, ConfigDict

from .constants import DEFAULT_TEMPLATES_SOURCE, TEMPLATE_REPOSITORY_URL
from .models import Template, TemplateRepository


class StyledTemplates(BaseModel):
    codewind: Template
    appsody: Template

    model_config = ConfigDict(frozen=True)


class SampleRepos(BaseModel):
    codewind: TemplateRepository
    disabled_codewind: TemplateRepository

    model_config = ConfigDict(frozen=True)


STYLED_TEMPLATES = StyledTemplates(
    # no projectStyle, the server defaults it to "Codewind"
    codewind=Template(
        label="Codewind template",
        description="Codewind template",
        language="go",
        url="https://github.com/codewind-resources/goTemplate",
        project_type="docker",
        source=DEFAULT_TEMPLATES_SOURCE,
    ),
    appsody=Template(
        label="Appsody template",
        description="Appsody stack",
        language="nodejs",
        url="https://github.com/appsody/template/repo",
        project_type="nodejs",
        project_style="Appsody",
    ),
)

SAMPLE_REPOS = SampleRepos(
    codewind=TemplateRepository(
        url=TEMPLATE_REPOSITORY_URL,
        description="The default set of templates for new projects in Codewind.",
        enabled=True,
        protected=True,
        project_styles=("Codewind",),
        name="Default templates",
    ),
    disabled_codewind=TemplateRepository(
        url=TEMPLATE_REPOSITORY_URL,
        description="The disabled default set of templates for new projects in Codewind.",
        enabled=False,
        protected=True,
        project_styles=("Codewind",),
        name="Default disabled templates",
    ),
)
