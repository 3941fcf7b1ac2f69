"""Index renaming for restores."""

import re
from typing import Callable

Expander = Callable[[re.Match[str]], str]


def compile_replacement(replacement: str, pattern: re.Pattern[str]) -> Expander:
    """
    Compile a replacement string into a match expander.

    ``$n`` references a numbered group, ``${name}`` a named group and a
    backslash escapes the next character (``\\$`` for a literal dollar).
    Multi-digit references are consumed while they stay a valid group
    number. Groups that did not participate expand to an empty string.

    Raises:
        ValueError: On dangling escapes or malformed group references
    """
    parts: list[str | int] = []
    literal: list[str] = []
    i = 0

    def flush() -> None:
        if literal:
            parts.append("".join(literal))
            literal.clear()

    while i < len(replacement):
        ch = replacement[i]
        if ch == "\\":
            if i + 1 >= len(replacement):
                raise ValueError("character to be escaped is missing")
            literal.append(replacement[i + 1])
            i += 2
        elif ch == "$":
            i += 1
            if i >= len(replacement):
                raise ValueError("Illegal group reference: group index is missing")
            if replacement[i] == "{":
                end = replacement.find("}", i)
                if end == -1:
                    raise ValueError("named capturing group is missing trailing '}'")
                name = replacement[i + 1 : end]
                if name not in pattern.groupindex:
                    raise ValueError(f"No group with name {{{name}}}")
                flush()
                parts.append(pattern.groupindex[name])
                i = end + 1
            elif replacement[i].isdigit():
                group = int(replacement[i])
                i += 1
                while i < len(replacement) and replacement[i].isdigit():
                    candidate = group * 10 + int(replacement[i])
                    if candidate > pattern.groups:
                        break
                    group = candidate
                    i += 1
                if group > pattern.groups:
                    raise ValueError(f"No group {group}")
                flush()
                parts.append(group)
            else:
                raise ValueError("Illegal group reference")
        else:
            literal.append(ch)
            i += 1
    flush()

    def expand(match: re.Match[str]) -> str:
        return "".join(
            part if isinstance(part, str) else (match.group(part) or "") for part in parts
        )

    return expand


def rename_indices(
    indices: list[str], rename_pattern: str | None, rename_replacement: str | None
) -> dict[str, str]:
    """
    Map each index to the name it is restored under.

    Renaming only happens when both a pattern and a replacement are set;
    otherwise every index keeps its name. Every match within a name is
    replaced.

    Args:
        indices: Resolved indices to restore
        rename_pattern: Regular expression
        rename_replacement: Replacement with ``$n``/``${name}`` references

    Returns:
        Source index name -> target index name, in input order

    Raises:
        ValueError: If the pattern or replacement is invalid, or two indices
            would be renamed to the same name
    """
    if rename_pattern is None or rename_replacement is None:
        return {index: index for index in indices}

    try:
        pattern = re.compile(rename_pattern)
    except re.error as e:
        raise ValueError(f"invalid rename pattern [{rename_pattern}]: {e}") from e
    expand = compile_replacement(rename_replacement, pattern)

    renamed: dict[str, str] = {}
    targets: dict[str, str] = {}
    for index in indices:
        target = pattern.sub(expand, index)
        if target in targets:
            raise ValueError(
                f"indices [{targets[target]}] and [{index}] are renamed into the same index [{target}]"
            )
        targets[target] = index
        renamed[index] = target
    return renamed
