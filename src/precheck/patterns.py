"""
Pattern compilation and matching for string checks.

Patterns may be given as compiled ``re.Pattern`` objects, as plain Python
regular expressions, or as PCRE-style delimited literals such as
``/^[a-z]+$/i``. Delimited literals are translated to Python flags so that
patterns written for PCRE engines keep working unchanged.
"""

from __future__ import annotations

import re
import string
from functools import lru_cache

from .exceptions import PatternError

# Bracket pairs are not accepted as delimiters: "(a)" or "[ab]" are ordinary
# Python patterns and must stay that way.
_DELIMITERS = frozenset(string.punctuation) - frozenset("\\()[]{}<>")

_MODIFIERS = re.compile(r"[A-Za-z]*")

_FLAGS: dict[str, re.RegexFlag] = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    # Python str patterns are always unicode-aware.
    "u": re.UNICODE,
}

# Rewritten in the pattern source rather than mapped to a flag.
_ANCHORED = "A"
_DOLLAR_ENDONLY = "D"
# Study hint, no effect on what matches.
_STUDY = "S"


def compile_pattern(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    """Return a compiled pattern for *pattern*.

    A string is read as a delimited literal when it opens with an ASCII
    punctuation delimiter (brackets and backslash excepted) and the first
    unescaped repeat of that delimiter is followed by letters only. Those
    letters are modifiers: ``imsxu`` map to ``re`` flags, ``A`` anchors the
    pattern at the start, ``D`` makes ``$`` match only at the very end and
    ``S`` is ignored. Any other string is compiled as a Python pattern.

    Raises:
        PatternError: If the pattern is not a valid regular expression or
            carries a modifier with no Python equivalent.
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    return _compile(pattern)


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    source, flags = pattern, 0
    delimited = _split_delimited(pattern)
    if delimited is not None:
        source, modifiers = delimited
        for letter in modifiers:
            if letter in _FLAGS:
                flags |= _FLAGS[letter]
            elif letter not in (_ANCHORED, _DOLLAR_ENDONLY, _STUDY):
                raise PatternError(pattern, f"unsupported modifier {letter!r}")
        if _DOLLAR_ENDONLY in modifiers and "m" not in modifiers:
            source = _dollar_to_end(source)
        if _ANCHORED in modifiers:
            tail = "\n" if "x" in modifiers else ""
            source = rf"\A(?:{source}{tail})"
    try:
        return re.compile(source, flags)
    except re.error as exc:
        raise PatternError(pattern, str(exc)) from exc


def _split_delimited(pattern: str) -> tuple[str, str] | None:
    """Split a delimited literal into its body and modifiers."""
    if not pattern or pattern[0] not in _DELIMITERS:
        return None
    delimiter = pattern[0]
    index = 1
    while index < len(pattern):
        char = pattern[index]
        if char == "\\":
            index += 2
            continue
        if char == delimiter:
            modifiers = pattern[index + 1 :]
            if _MODIFIERS.fullmatch(modifiers) is None:
                return None
            return pattern[1:index], modifiers
        index += 1
    return None


def _dollar_to_end(source: str) -> str:
    """Replace ``$`` anchors outside character classes with ``\\Z``."""
    out: list[str] = []
    in_class = False
    index = 0
    while index < len(source):
        char = source[index]
        if char == "\\":
            out.append(source[index : index + 2])
            index += 2
            continue
        if in_class:
            if char == "]":
                in_class = False
        elif char == "[":
            in_class = True
            out.append(char)
            index += 1
            # "^" and a leading "]" belong to the class.
            if source.startswith("^", index):
                out.append("^")
                index += 1
            if source.startswith("]", index):
                out.append("]")
                index += 1
            continue
        elif char == "$":
            char = r"\Z"
        out.append(char)
        index += 1
    return "".join(out)


def pattern_text(pattern: str | re.Pattern[str]) -> str:
    """Human-readable form of *pattern* for error payloads."""
    if isinstance(pattern, re.Pattern):
        return pattern.pattern
    return pattern


def search(pattern: str | re.Pattern[str], text: str) -> bool:
    """True if *pattern* matches anywhere in *text*."""
    return compile_pattern(pattern).search(text) is not None


def match_all(pattern: str | re.Pattern[str], text: str) -> list[tuple[str, ...]]:
    """Return every match of *pattern* in *text*, in order.

    Each entry holds the whole match followed by its capture groups.
    Groups that did not participate are reported as ``""`` unless they
    trail the last participating group, in which case they are dropped.
    """
    results: list[tuple[str, ...]] = []
    for match in compile_pattern(pattern).finditer(text):
        groups = [match.group(0), *match.groups()]
        while len(groups) > 1 and groups[-1] is None:
            groups.pop()
        results.append(tuple(g if g is not None else "" for g in groups))
    return results
