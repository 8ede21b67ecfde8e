"""Argument validation shared by the search entry points."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class InvalidArgumentError(ValueError):
    """Raised when a search or table builder is called with unusable input.

    Validation happens before any table is built, so a caller never sees
    a partial result alongside this error.
    """


def check_search_args(
    name: str,
    pattern: Sequence[Any] | None,
    text: Sequence[Any] | None,
    comparator: Any,
) -> None:
    """Validate the (pattern, text, comparator) triple for `name`."""
    if pattern is None or len(pattern) == 0:
        raise InvalidArgumentError(f"{name}: pattern must be non-empty")
    if text is None:
        raise InvalidArgumentError(f"{name}: text must not be None")
    if comparator is None:
        raise InvalidArgumentError(f"{name}: comparator must not be None")
