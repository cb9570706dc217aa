from __future__ import annotations

from uuid import uuid4

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-level settings read by the bootstrap helpers.

    Cached repositories never read settings directly; everything they need
    is passed through their builder options.
    """

    model_config = SettingsConfigDict(env_prefix="CACHEGRAPH_", env_file=".env", extra="ignore")

    app_name: str = "cachegraph"
    env: str = "dev"

    # Instance ID for distributed deployments
    instance_id: str = Field(default_factory=lambda: str(uuid4())[:8])

    # Redis (central cache)
    redis_url: str = Field(default="redis://localhost:6379/0", validation_alias="REDIS_URL")
    redis_socket_timeout: float = Field(default=3.0, validation_alias="REDIS_SOCKET_TIMEOUT")
    redis_connect_timeout: float = Field(default=5.0, validation_alias="REDIS_CONNECT_TIMEOUT")
    redis_max_connections: int = Field(default=50, validation_alias="REDIS_MAX_CONNECTIONS")

    # Default maximum age of cached records, in seconds
    cache_ttl: int = Field(default=3600, gt=0)

    # Observability
    enable_tracing: bool = True
    otlp_endpoint: str | None = Field(default=None, validation_alias="OTEL_EXPORTER_OTLP_ENDPOINT")
    log_level: str = "INFO"
    log_json: bool = True


settings = Settings()
