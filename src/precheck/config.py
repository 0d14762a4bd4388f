"""Validator configuration shared by every subject."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DATE_FORMAT = "%Y-%m-%d"
DATE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class ValidatorConfig(BaseModel):
    """Immutable settings consulted by the validators.

    Attributes:
        encoding: Codec used to measure string length in storage units.
        directory_mode: Permission bits for directories created by
            ``DirectoryValidator.ensure_exists``.
        date_format: Format used by ``DateValidator`` when none is given.
    """

    model_config = ConfigDict(frozen=True)

    encoding: str = "utf-8"
    directory_mode: int = Field(default=0o755, ge=0, le=0o7777)
    date_format: str = Field(default=DATE_FORMAT, min_length=1)


DEFAULT_CONFIG = ValidatorConfig()
