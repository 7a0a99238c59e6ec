"""Filter pattern compilation and matching.

Without `*` the filter text is an unanchored, case-insensitive substring.
With `*` it is a glob anchored at both ends where `*` matches any run of
characters and everything else is literal.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from termpick.models import Item


@dataclass(frozen=True)
class FilterPattern:
    kind: Literal["substring", "glob"]
    needle: str = ""
    regex: re.Pattern[str] | None = None


@lru_cache(maxsize=256)
def compile_pattern(text: str) -> FilterPattern:
    """Compile raw filter text into a pattern."""
    folded = text.casefold()
    if "*" not in folded:
        return FilterPattern("substring", needle=folded)
    body = ".*".join(re.escape(part) for part in folded.split("*"))
    return FilterPattern("glob", regex=re.compile(body, re.DOTALL))


def matches(label: str, pattern: FilterPattern) -> bool:
    if pattern.regex is None:
        return not pattern.needle or pattern.needle in label.casefold()
    return pattern.regex.fullmatch(label.casefold()) is not None


def matching_indices(items: Sequence[Item], text: str) -> tuple[int, ...]:
    """Absolute indices of items whose label matches `text`, in order."""
    if not text:
        return tuple(range(len(items)))
    pattern = compile_pattern(text)
    return tuple(i for i, item in enumerate(items) if matches(item.label, pattern))


def filter_items(items: Sequence[Item], text: str) -> list[Item]:
    return [items[i] for i in matching_indices(items, text)]
