"""
Compiler for the SWIFT expressions used in the IBAN registry.

A SWIFT expression is a sequence of groups such as ``4!n`` (exactly four
digits) or ``12!c`` (exactly twelve alphanumerics). Only fixed-length
groups are supported: ``4n`` (up to four digits) is rejected.

Compiled patterns match in linear time without regular expressions:

    >>> compile("4!n4!n12!c").length
    20
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Tuple

from bankident.charclass import CharacterClass

_GROUP_REGEX = r"[0-9]{1,3}!?[ance]"
_FORMAT_PATTERN = re.compile(r"(?:" + _GROUP_REGEX + r"){1,1000}")
_GROUPS_PATTERN = re.compile(_GROUP_REGEX)


class PatternSyntaxError(ValueError):
    """Raised when a SWIFT expression cannot be compiled."""

    def __init__(self, expression: str, message: str) -> None:
        super().__init__(f"invalid SWIFT expression '{expression}': {message}")
        self.expression = expression


@dataclass(frozen=True)
class PatternGroup:
    characters: CharacterClass
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    def matches(self, s: str) -> bool:
        # length is checked by Pattern.matches
        has = self.characters.has
        for i in range(self.start, self.end):
            if not has(s[i]):
                return False
        return True

    def can_be_merged_to(self, group: "PatternGroup") -> bool:
        return self.characters is group.characters and self.end == group.start

    def merge(self, group: "PatternGroup") -> "PatternGroup":
        return PatternGroup(self.characters, self.start, self.length + group.length)


class Pattern:
    """
    An immutable compiled SWIFT expression.

    ``groups`` lists the groups as written in the expression. Matching runs
    over a merged copy where contiguous groups of the same class are joined.
    """

    __slots__ = ("expression", "groups", "length", "_spans")

    def __init__(self, expression: str, groups: Tuple[PatternGroup, ...]) -> None:
        object.__setattr__(self, "expression", expression)
        object.__setattr__(self, "groups", groups)
        object.__setattr__(self, "length", sum(g.length for g in groups))
        object.__setattr__(self, "_spans", _merge(groups))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def matches(self, s: str) -> bool:
        if not isinstance(s, str) or len(s) != self.length:
            return False
        return all(span.matches(s) for span in self._spans)

    @property
    def regex(self) -> str:
        """The equivalent anchored regular expression."""
        return "^" + "".join(f"{g.characters.regex}{{{g.length}}}" for g in self.groups) + "$"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return self.expression == other.expression

    def __hash__(self) -> int:
        return hash(self.expression)

    def __str__(self) -> str:
        return self.expression

    def __repr__(self) -> str:
        return f"Pattern({self.expression!r})"


def compile(expression: str) -> Pattern:  # noqa: A001
    """
    Compile ``expression`` into a Pattern.

    Raises:
        TypeError:          expression is not a string.
        PatternSyntaxError: expression does not follow the grammar or
                            contains a non fixed-length group.
    """
    if not isinstance(expression, str):
        raise TypeError("the expression argument must be a string")
    return _compile(expression)


@lru_cache(maxsize=None)
def _compile(expression: str) -> Pattern:
    if not _FORMAT_PATTERN.fullmatch(expression):
        raise PatternSyntaxError(expression, f"expression must match {_FORMAT_PATTERN.pattern}")
    return Pattern(expression, _to_groups(expression))


def _to_groups(expression: str) -> Tuple[PatternGroup, ...]:
    groups: List[PatternGroup] = []
    start = 0
    for token in _GROUPS_PATTERN.findall(expression):
        group = _transform(expression, token, start)
        start += group.length
        groups.append(group)
    return tuple(groups)


def _merge(groups: Tuple[PatternGroup, ...]) -> Tuple[PatternGroup, ...]:
    merged: List[PatternGroup] = []
    for group in groups:
        if merged and merged[-1].can_be_merged_to(group):
            group = merged.pop().merge(group)
        merged.append(group)
    return tuple(merged)


def _transform(expression: str, token: str, start: int) -> PatternGroup:
    characters = CharacterClass.from_qualifier(token[-1])
    if characters is None:
        # unreachable once the expression matched the grammar
        raise PatternSyntaxError(expression, f"illegal qualifier '{token[-1]}' in group '{token}'")

    if token[-2] != "!":
        raise PatternSyntaxError(expression, f"non-fixed length group '{token}' is not supported")

    try:
        length = int(token[:-2])
    except ValueError:
        raise PatternSyntaxError(expression, f"could not extract length from '{token}'") from None
    if length < 1:
        raise PatternSyntaxError(expression, f"group '{token}' must have a length of at least 1")

    return PatternGroup(characters, start, length)
