"""StringValidator: length, equality and pattern checks on a string value."""

from __future__ import annotations

import re
from typing import Any

from ..exceptions import StringError
from ..patterns import match_all, pattern_text, search
from .base import Subject

_ALPHANUMERIC = re.compile(r"^[a-zA-Z0-9]+$")
_ALPHABETIC = re.compile(r"^[a-zA-Z]+$")


class StringValidator(Subject):
    """
    Fluent checks over an optional string.

    Every check except :meth:`not_empty` first requires a non-empty value and
    raises ``EMPTY_VALUE`` otherwise. Lengths are counted in encoded storage
    units (bytes of ``config.encoding``), not code points.

    Usage::

        StringValidator.of("username", name).length_between(3, 32).alphanumeric()
    """

    value: str | None = None

    @classmethod
    def of(
        cls, field: str, value: str | None = None, **options: Any
    ) -> StringValidator:
        return cls(field=field, value=value, **options)

    @property
    def length(self) -> int:
        """Length of the value in storage units; ``0`` when absent."""
        if self.value is None:
            return 0
        return len(self.value.encode(self.config.encoding))

    def _require_value(self) -> str:
        if self.value is None or self.value == "":
            self._fail(StringError.empty_value(self.field))
        return self.value

    def not_empty(self) -> StringValidator:
        self._require_value()
        return self

    def min_length(self, min_length: int) -> StringValidator:
        value = self._require_value()
        if self.length < min_length:
            self._fail(
                StringError.too_short(min_length, value, self.field, self.length)
            )
        return self

    def max_length(self, max_length: int) -> StringValidator:
        value = self._require_value()
        if self.length > max_length:
            self._fail(
                StringError.too_long(max_length, value, self.field, self.length)
            )
        return self

    def length_between(self, min_length: int, max_length: int) -> StringValidator:
        return self.min_length(min_length).max_length(max_length)

    def equals(self, expected: str) -> StringValidator:
        value = self._require_value()
        if value != expected:
            self._fail(StringError.not_equal(expected, value, self.field))
        return self

    def matches(self, pattern: str | re.Pattern[str]) -> StringValidator:
        """Require *pattern* to match somewhere in the value."""
        value = self._require_value()
        if not search(pattern, value):
            self._fail(StringError.not_match(pattern_text(pattern), value, self.field))
        return self

    def not_matches(self, pattern: str | re.Pattern[str]) -> StringValidator:
        """
        Reject the value if *pattern* matches it at all.

        The error reports every matched substring (whole match, then its
        groups), space-joined in match order.
        """
        value = self._require_value()
        found = match_all(pattern, value)
        if found:
            characters = " ".join(" ".join(groups) for groups in found)
            self._fail(StringError.invalid_characters(characters, value, self.field))
        return self

    def alphanumeric(self) -> StringValidator:
        value = self._require_value()
        if not _ALPHANUMERIC.search(value):
            self._fail(
                StringError.invalid_characters(
                    "Non-alphanumeric characters", value, self.field
                )
            )
        return self

    def alphabetic(self) -> StringValidator:
        value = self._require_value()
        if not _ALPHABETIC.search(value):
            self._fail(
                StringError.invalid_characters(
                    "Non-alphabetic characters", value, self.field
                )
            )
        return self
