from enum import StrEnum


class ConfigOptions(StrEnum):
    """Configuration option names for the pytest-templaterepos plugin."""

    BASE_URL = "templaterepos_base_url"
    ADMIN_COOKIE = "templaterepos_admin_cookie"
    TIMEOUT_SHORT = "templaterepos_timeout_short"
    TIMEOUT_MED = "templaterepos_timeout_med"
    INDEX_URL = "templaterepos_index_url"


class Endpoints(StrEnum):
    """Paths of the template API, relative to the base url."""

    REPOSITORIES = "/api/v1/templates/repositories"
    BATCH_REPOSITORIES = "/api/v1/batch/templates/repositories"
    TEMPLATES = "/api/v1/templates"
    ENABLED_TEMPLATES = "/api/v1/templates/"
    STYLES = "/api/v1/templates/styles"


TEMPLATE_REPOSITORY_URL = "https://raw.githubusercontent.com/codewind-resources/codewind-templates/master/devfiles/index.json"

VALID_URL_NOT_POINTING_TO_INDEX_JSON = "https://support.oneskyapp.com/hc/en-us/article_attachments/202761627/example_1.json"

DEFAULT_TEMPLATES_SOURCE = "Default templates"
