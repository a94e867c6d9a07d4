from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings


class LogLevel(str, Enum):
    info = "INFO"
    debug = "DEBUG"
    warning = "WARNING"
    error = "ERROR"


class Config(BaseSettings):
    log_level: LogLevel = Field(LogLevel.info, validation_alias="LOG_LEVEL")

    force: bool = Field(
        False, validation_alias="FORCE_WRITE",
        description="Rewrite the output file even if it was modified after the feed was updated"
    )

    escape_xml: bool = Field(
        False, validation_alias="ESCAPE_XML",
        description="Escape markup characters in feed values instead of copying them verbatim"
    )


settings = None


def get_conf():
    global settings
    if settings is not None:
        return settings
    else:
        settings = Config()
        return settings
