"""Comparison server configuration via environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class CompareServerSettings(BaseSettings):
    """Server settings, read from ``COMPARE_*`` variables.

    Build metadata reported by /health comes from the unprefixed
    ``APP_VERSION`` and ``GIT_COMMIT`` variables set by deployments.
    """

    model_config = {"env_prefix": "COMPARE_", "validate_by_name": True}

    database_path: str = "data.db"
    log_dir: str = "backend/logs/compare"
    host: str = "127.0.0.1"
    port: int = 8099
    app_version: str = Field("dev", validation_alias="APP_VERSION")
    git_commit: str = Field("dev", validation_alias="GIT_COMMIT")
