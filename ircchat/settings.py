"""Client runtime settings."""

from __future__ import annotations

import codecs
import os
from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from .constants import DEFAULT_ENCODING, DEFAULT_TIME_FORMAT


class ClientSettings(BaseModel):
    """Explicit replacements for ambient process state.

    Attributes:
        encoding: Charset used to decode lines received from the server.
        time_format: ``strftime`` pattern for console timestamps.
        log_file: Optional path of an additional log file.
    """

    model_config = ConfigDict(frozen=True)

    encoding: str = DEFAULT_ENCODING
    time_format: str = DEFAULT_TIME_FORMAT
    log_file: str | None = None

    @field_validator("encoding")
    @classmethod
    def known_encoding(cls, v: str) -> str:
        try:
            return codecs.lookup(v).name
        except LookupError as e:
            raise ValueError(f"unknown encoding {v!r}") from e

    @field_validator("time_format")
    @classmethod
    def usable_time_format(cls, v: str) -> str:
        datetime(2000, 1, 1).strftime(v)
        return v


def load_settings() -> ClientSettings:
    """Build settings from ``IRC_ENCODING``, ``IRC_TIME_FORMAT`` and ``IRC_LOG_FILE``."""
    values: dict[str, str] = {}
    for key, env_name in (
        ("encoding", "IRC_ENCODING"),
        ("time_format", "IRC_TIME_FORMAT"),
        ("log_file", "IRC_LOG_FILE"),
    ):
        value = os.environ.get(env_name, "").strip()
        if value:
            values[key] = value
    return ClientSettings(**values)
