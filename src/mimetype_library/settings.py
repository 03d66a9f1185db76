import logging
from functools import cached_property
from typing import Annotated, Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_utils import LogLevel


class MixinLoggingSettings:
    @classmethod
    def validate_log_level(cls, value: str) -> LogLevel:
        """Standard implementation for @field_validator("*_LOGLEVEL")"""
        try:
            getattr(logging, value.upper())
        except AttributeError as err:
            msg = f"{value.upper()} is not a valid level"
            raise ValueError(msg) from err
        return LogLevel(value.upper())


class MimeTypeLibrarySettings(BaseSettings, MixinLoggingSettings):
    MIMETYPE_LIBRARY_LOGLEVEL: Annotated[
        LogLevel,
        Field(
            validation_alias=AliasChoices(
                "MIMETYPE_LIBRARY_LOGLEVEL", "LOG_LEVEL", "LOGLEVEL"
            ),
        ),
    ] = LogLevel.INFO

    MIMETYPE_LIBRARY_LOG_FORMAT_LOCAL_DEV_ENABLED: Annotated[
        bool,
        Field(
            validation_alias=AliasChoices(
                "MIMETYPE_LIBRARY_LOG_FORMAT_LOCAL_DEV_ENABLED",
                "LOG_FORMAT_LOCAL_DEV_ENABLED",
            ),
            description="Enables local development log format. WARNING: make sure it is disabled if you want to have structured logs!",
        ),
    ] = False

    model_config = SettingsConfigDict(
        case_sensitive=True,  # All must be capitalized
        extra="forbid",
        frozen=True,
        validate_default=True,
        ignored_types=(cached_property,),
        env_parse_none_str="null",
    )

    @cached_property
    def log_level(self) -> int:
        """Can be used in logging.setLogLevel()"""
        level: int = getattr(logging, self.MIMETYPE_LIBRARY_LOGLEVEL)
        return level

    @field_validator("MIMETYPE_LIBRARY_LOGLEVEL", mode="before")
    @classmethod
    def _validate_loglevel(cls, value: Any) -> str:
        return cls.validate_log_level(f"{value}")

    @classmethod
    def create_from_envs(cls, **overrides):
        # Identical to the constructor. More explicit to read
        return cls(**overrides)
