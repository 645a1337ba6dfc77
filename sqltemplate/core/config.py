"""
Settings for sqltemplate, read from the environment (prefix ``SQLTEMPLATE_``)
or a ``.env`` file.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SQLTEMPLATE_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Quotation used by get_engine()
    DIALECT: Literal["postgres", "mysql", "passthrough"] = "postgres"

    # Log every bound statement at DEBUG level (may contain sensitive data)
    LOG_SQL: bool = False


settings = Settings()  # type: ignore
