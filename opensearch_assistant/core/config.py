"""
Configuration Settings.

This module defines the toolkit configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Search Cluster Configuration Model
# =====================================================================


class OpenSearchConfig(BaseModel):
    """OpenSearch cluster connection configuration."""

    url: str = Field(
        default="http://localhost:9200", alias="OPENSEARCH_URL", description="Base URL of the OpenSearch cluster"
    )
    username: Optional[str] = Field(
        default=None, alias="OPENSEARCH_USERNAME", description="Username for HTTP basic authentication"
    )
    password: Optional[str] = Field(
        default=None, alias="OPENSEARCH_PASSWORD", description="Password for HTTP basic authentication"
    )
    verify_certs: bool = Field(
        default=True, alias="OPENSEARCH_VERIFY_CERTS", description="Verify TLS certificates of the cluster"
    )
    request_timeout: float = Field(
        default=10.0, alias="OPENSEARCH_REQUEST_TIMEOUT", description="HTTP timeout in seconds for cluster requests"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Toolkit settings model.

    All properties are automatically bound from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # OpenSearch Cluster Configuration
    # =====================================================================
    opensearch_url: str = Field(
        default="http://localhost:9200",
        description="Base URL of the OpenSearch cluster",
        alias="OPENSEARCH_URL",
    )
    opensearch_username: Optional[str] = Field(
        default=None,
        description="Username for HTTP basic authentication",
        alias="OPENSEARCH_USERNAME",
    )
    opensearch_password: Optional[str] = Field(
        default=None,
        description="Password for HTTP basic authentication",
        alias="OPENSEARCH_PASSWORD",
    )
    opensearch_verify_certs: bool = Field(
        default=True,
        description="Verify TLS certificates of the cluster",
        alias="OPENSEARCH_VERIFY_CERTS",
    )
    opensearch_request_timeout: float = Field(
        default=10.0,
        description="HTTP timeout in seconds for cluster requests",
        alias="OPENSEARCH_REQUEST_TIMEOUT",
    )

    # =====================================================================
    # Capability Invocation Configuration
    # =====================================================================
    tool_timeout: Optional[float] = Field(
        default=30.0,
        description="Deadline in seconds for a single capability invocation (empty or 'none' disables it)",
        alias="ASSISTANT_TOOL_TIMEOUT",
    )
    log_level: str = Field(
        default="INFO",
        description="Toolkit logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="ASSISTANT_LOG_LEVEL",
    )

    @field_validator("tool_timeout", mode="before")
    @classmethod
    def _disable_tool_timeout(cls, value):
        if isinstance(value, str) and value.strip().lower() in ("", "none"):
            return None
        return value

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def opensearch(self) -> OpenSearchConfig:
        """Get OpenSearch configuration from environment variables."""
        return OpenSearchConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
