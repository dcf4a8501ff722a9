from typing import Annotated, Self

from pydantic import AfterValidator, Field, PositiveFloat, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import TEMPLATE_REPOSITORY_URL


def validate_http_url(v: str) -> str:
    if not v.startswith(("http://", "https://")):
        raise ValueError("url must start with http:// or https://")
    return v.rstrip("/")


class Settings(BaseSettings):
    """Connection settings and hook timeout budgets.

    Values come from ``TEMPLATEREPOS_*`` environment variables; keyword
    arguments (the pytest ini options) take precedence.
    """

    base_url: Annotated[str, AfterValidator(validate_http_url)] = Field(default="http://localhost:9090")
    admin_cookie: str = Field(default="")
    timeout_short: PositiveFloat = Field(default=30.0, description="Budget in seconds for a single fetch or restore.")
    timeout_med: PositiveFloat = Field(default=60.0, description="Budget in seconds for hooks that replace the repository set.")
    index_url: Annotated[str, AfterValidator(validate_http_url)] = Field(default=TEMPLATE_REPOSITORY_URL)

    model_config = SettingsConfigDict(env_prefix="TEMPLATEREPOS_")

    @model_validator(mode="after")
    def validate_budgets(self) -> Self:
        if self.timeout_short > self.timeout_med:
            raise ValueError("short timeout budget must not exceed the med budget")
        return self
