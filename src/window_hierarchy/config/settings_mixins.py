# mixin settings for ambient concerns like logging
from typing import Any, Literal
from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

class LoggingSettingsMixin(BaseModel):
    """
    Model for the package logger settings.
    """
    LOG_LEVEL: LogLevel = Field(default="WARNING", description="Level of the window_hierarchy logger.")
    LOG_FORMAT: str = Field(
        default="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        description="logging.Formatter format string for the package handler.",
    )
    LOG_PROPAGATE: bool = Field(default=False, description="Forward records to the root logger as well.")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> Any:
        # accept "debug" as well as "DEBUG" from the environment
        return value.upper() if isinstance(value, str) else value
