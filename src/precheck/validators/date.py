"""DateValidator: strict, round-trip date format checks."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any, ClassVar

from pydantic import model_validator

from ..config import DATE_FORMAT, DATE_TIME_FORMAT, ValidatorConfig
from ..exceptions import DateError
from .base import Subject

_DIRECTIVE = re.compile(r"%(.)", re.DOTALL)


def parse_strict(value: str, date_format: str) -> datetime | None:
    """Parse *value* with *date_format*, or ``None`` if it does not fit."""
    try:
        return datetime.strptime(value, date_format)
    except ValueError:
        return None


def format_strict(moment: datetime, date_format: str) -> str:
    """Format *moment* with *date_format*, always writing ``%Y`` as four digits.

    The C library leaves years below 1000 unpadded, which would make
    ``0999-01-01`` fail to reproduce itself.
    """
    year = f"{moment.year:04d}"
    padded = _DIRECTIVE.sub(
        lambda directive: year if directive.group(1) == "Y" else directive.group(0),
        date_format,
    )
    return moment.strftime(padded)


class DateValidator(Subject):
    """
    Checks that a string is a date in an exact format.

    A value is valid only if it parses with ``date_format`` *and* formatting
    the parsed result with the same format reproduces the value exactly, so
    unpadded or otherwise normalised inputs are rejected. Without an explicit
    ``date_format`` the subject uses ``config.date_format``.
    """

    DATE_FORMAT: ClassVar[str] = DATE_FORMAT
    DATE_TIME_FORMAT: ClassVar[str] = DATE_TIME_FORMAT

    value: str | None = None
    date_format: str = DATE_FORMAT

    @model_validator(mode="before")
    @classmethod
    def _default_format(cls, data: Any) -> Any:
        if not isinstance(data, Mapping) or data.get("date_format") is not None:
            return data
        config = data.get("config")
        if isinstance(config, ValidatorConfig):
            date_format = config.date_format
        elif isinstance(config, Mapping):
            date_format = config.get("date_format", DATE_FORMAT)
        else:
            date_format = DATE_FORMAT
        return {**data, "date_format": date_format}

    @classmethod
    def of(
        cls,
        field: str,
        value: str | None = None,
        date_format: str | None = None,
        **options: Any,
    ) -> DateValidator:
        return cls(field=field, value=value, date_format=date_format, **options)

    def _is_valid(self, value: str) -> bool:
        parsed = parse_strict(value, self.date_format)
        return parsed is not None and format_strict(parsed, self.date_format) == value

    def must_be_valid_date(self) -> DateValidator:
        if self.value is None or self._is_blank(self.value):
            self._fail(DateError.empty_value(self.field))
        if not self._is_valid(self.value):
            self._fail(
                DateError.invalid_date(self.field, self.value, self.date_format)
            )
        return self
