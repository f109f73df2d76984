"""
Runtime settings for sparser

Uses pydantic-settings so behaviour can be switched through environment
variables with the SPARSER_ prefix (e.g. SPARSER_TRACE=true), or a .env
file in the working directory.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SParserSettings(BaseSettings):
    """
    sparser configuration via environment variables.

    Examples:
        SPARSER_TRACE=true
        SPARSER_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="SPARSER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    trace: bool = Field(
        default=False,
        description="Log every rule application and its result at TRACE level",
    )

    log_level: str = Field(
        default="WARNING",
        description="Minimum level for the stderr sink installed by log.configure()",
    )


# Singleton instance - read by the engine at the start of every run
settings = SParserSettings()
