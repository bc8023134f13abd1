"""
Exporter settings using Pydantic.

Reads the same environment variables the CI workflow exports for the
Terraform steps (TERRAFORM_*, PUSHGATEWAY_*, GITHUB_*).
"""

from functools import lru_cache

from pydantic import ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tfexporter.core.errors import ConfigurationError

DEFAULT_PUSHGATEWAY_PORT = 9091


class Settings(BaseSettings):
    """Exporter settings."""

    # Run artifacts
    terraform_plan_path: str | None = None
    terraform_apply_log_path: str | None = None
    terraform_refresh_log_path: str | None = None

    # Unix seconds; kept as text so a malformed value degrades to zero duration
    terraform_start_time: str | None = None

    # Pushgateway
    pushgateway_url: str | None = None
    pushgateway_port: int = DEFAULT_PUSHGATEWAY_PORT
    pushgateway_job: str = "terraform"
    push_timeout: float = 30.0

    # Grouping labels
    github_run_id: str = ""
    github_workflow: str = ""
    commit_message: str = ""

    strict_plan: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator(
        "terraform_plan_path",
        "terraform_apply_log_path",
        "terraform_refresh_log_path",
        "terraform_start_time",
        "pushgateway_url",
        mode="before",
    )
    @classmethod
    def _blank_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("pushgateway_port", "push_timeout", "strict_plan", mode="before")
    @classmethod
    def _blank_is_default(cls, value, info: ValidationInfo):
        if isinstance(value, str) and not value.strip():
            return cls.model_fields[info.field_name].default
        return value

    def pushgateway_address(self) -> str | None:
        """Return the gateway base URL, adding scheme and port to a bare host."""
        if not self.pushgateway_url:
            return None
        url = self.pushgateway_url.rstrip("/")
        if "://" in url:
            return url
        if ":" in url:
            return f"http://{url}"
        return f"http://{url}:{self.pushgateway_port}"

    def grouping_labels(self) -> dict[str, str]:
        """Labels that identify this run's batch at the gateway.

        The job name is not included; it is part of the push path.
        """
        labels = {
            "instance": self.github_run_id,
            "commit_message": self.commit_message,
            "workflow_name": self.github_workflow,
        }
        return {key: value for key, value in labels.items() if value}


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def load_settings() -> Settings:
    """Get settings, reporting invalid environment values as ConfigurationError."""
    try:
        return get_settings()
    except ValidationError as e:
        invalid = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        raise ConfigurationError(
            "Invalid settings in environment",
            details={"fields": ", ".join(invalid)},
        ) from e
