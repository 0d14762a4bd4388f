"""Subject: the immutable (field, value) pair every validator checks."""

from __future__ import annotations

import logging
import os
from typing import Any, NoReturn

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..adapters.local import LocalFileSystem
from ..config import DEFAULT_CONFIG, ValidatorConfig
from ..exceptions import PreconditionError
from ..ports.filesystem import IFileSystem

logger = logging.getLogger("precheck.validators")


class Subject(BaseModel):
    """
    Immutable holder of a named input value.

    Check methods on subclasses either return the subject itself, so that
    further checks can be chained, or raise the family's
    :class:`~precheck.exceptions.PreconditionError` subclass. The first
    violation aborts the chain.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    field: str
    config: ValidatorConfig = DEFAULT_CONFIG

    def _fail(
        self, error: PreconditionError, cause: BaseException | None = None
    ) -> NoReturn:
        logger.debug(
            "Precondition %s failed for field %r (%s)",
            error.code.value,
            error.field,
            error.family,
        )
        if cause is not None:
            raise error from cause
        raise error

    @staticmethod
    def _is_blank(value: str | None) -> bool:
        return value is None or not value.strip()


class PathSubject(Subject):
    """Subject whose value is a filesystem path queried through a port."""

    filesystem: IFileSystem = Field(default_factory=LocalFileSystem)

    @field_validator("value", mode="before", check_fields=False)
    @classmethod
    def _coerce_path(cls, value: Any) -> Any:
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value
