"""Index resolution - multi-index expressions against a snapshot's indices."""

import re
from functools import lru_cache

from ..action.indices_options import IndicesOptions
from ..action.restore.request import ALL_INDICES
from ..core.errors import IndexMissingError


def is_simple_match_pattern(expression: str) -> bool:
    return "*" in expression


@lru_cache(maxsize=256)
def _compile_simple(pattern: str) -> re.Pattern[str]:
    return re.compile(".*".join(re.escape(part) for part in pattern.split("*")))


def simple_match(pattern: str, name: str) -> bool:
    """Match ``name`` against a pattern where ``*`` matches any run of characters."""
    if not is_simple_match_pattern(pattern):
        return pattern == name
    return _compile_simple(pattern).fullmatch(name) is not None


def filter_indices(
    available: list[str], selected: list[str], options: IndicesOptions
) -> list[str]:
    """
    Resolve index expressions against the indices of a snapshot.

    Expressions are evaluated in order, so later entries override earlier
    ones for the same name. A leading ``-`` on the first expression starts
    from every available index; a leading ``+`` starts from none.

    Args:
        available: Indices present in the snapshot, in snapshot order
        selected: Index names, ``*`` wildcards, ``+``/``-`` prefixed entries
        options: Handling for missing names and empty wildcard matches

    Returns:
        Selected indices in snapshot order

    Raises:
        IndexMissingError: For a missing name when ``ignore_unavailable`` is
            off, or an unmatched wildcard when ``allow_no_indices`` is off
    """
    if not selected or selected == [ALL_INDICES]:
        return list(available)

    known = set(available)
    result: set[str] | None = None

    for i, expression in enumerate(selected):
        add = True
        if expression:
            if expression in known:
                if result is None:
                    result = set()
                result.add(expression)
                continue
            if expression[0] == "+":
                expression = expression[1:]
                if i == 0:
                    result = set()
            elif expression[0] == "-":
                add = False
                expression = expression[1:]
                if i == 0:
                    result = set(available)

        if expression == ALL_INDICES:
            expression = "*"

        if (
            not expression
            or not is_simple_match_pattern(expression)
            or not options.expands_wildcards
        ):
            if expression not in known:
                if not options.ignore_unavailable:
                    raise IndexMissingError(expression or selected[i])
                if result is None:
                    result = set(selected[:i])
            elif result is not None:
                if add:
                    result.add(expression)
                else:
                    result.discard(expression)
            continue

        if result is None:
            result = set(selected[:i])

        found = False
        for name in available:
            if simple_match(expression, name):
                found = True
                if add:
                    result.add(name)
                else:
                    result.discard(name)
        if not found and not options.allow_no_indices:
            raise IndexMissingError(expression)

    if result is None:
        return list(selected)
    return [name for name in available if name in result]
