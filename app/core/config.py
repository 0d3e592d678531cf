"""
core/config.py
----------------

Application configuration module.

Defines strongly‑typed settings loaded from the environment using
``pydantic-settings``. These settings point the catalog at the remote
product store and control the cache lifetime and HTTP behaviour. The
values provided here are sensible defaults for local development and
can be overridden via environment variables at deployment time.
"""

from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The settings structure is flat and uses environment variables
    prefixed with ``APP_``.  For example, to shorten the catalog cache
    lifetime you can set ``APP_CATALOG_TTL_SECONDS=60``.

    See :class:`pydantic_settings.BaseSettings` for details on how
    environment variables are mapped onto fields.
    """

    # Remote product store (PostgREST / Supabase REST endpoint)
    store_url: str = Field("http://localhost:54321", description="Base URL of the product store.")
    store_api_key: str = Field("", description="Anonymous API key sent as apikey and bearer token.")
    store_table: str = Field("products", description="Table holding the product catalog.")

    # Catalog cache
    catalog_ttl_seconds: float = Field(600.0, gt=0, description="Lifetime of the cached product list in seconds.")

    # HTTP client settings
    http_timeout: float = Field(10.0, description="Hard timeout for HTTP requests in seconds.")
    http_max_retries: int = Field(0, ge=0, description="Retries for GET requests. The catalog itself never retries.")
    http_backoff_factor: float = Field(0.5, description="Backoff factor for exponential retry delays.")

    model_config = SettingsConfigDict(env_prefix="APP_", env_file=None, case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of the application settings.

    Using a cache prevents expensive environment parsing on every call.
    The returned object is immutable and safe to share across threads.
    """
    return Settings()
