"""In-memory key-value store."""

import re
from typing import Dict, List, Optional

from translation_kv.kvstore.base import KeyValueStore


def glob_to_regex(pattern: str) -> "re.Pattern[str]":
    """Compile a Redis-style glob pattern into a regular expression.

    Supports ``*``, ``?``, ``[...]`` character classes (with ``^`` negation)
    and backslash escapes.

    Args:
        pattern: Glob pattern.

    Returns:
        Compiled pattern matching whole keys.
    """
    parts = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "\\" and i + 1 < len(pattern):
            parts.append(re.escape(pattern[i + 1]))
            i += 2
            continue
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        elif char == "[":
            end = pattern.find("]", i + 1)
            body = pattern[i + 1 : end] if end != -1 else ""
            negate = body.startswith("^")
            if negate:
                body = body[1:]
            if not body:
                parts.append(re.escape(char))
            else:
                escaped = "".join(c if c == "-" else re.escape(c) for c in body)
                parts.append(f"[{'^' if negate else ''}{escaped}]")
                i = end
        else:
            parts.append(re.escape(char))
        i += 1
    return re.compile("".join(parts), re.DOTALL)


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store for tests and single-process use.

    Not shared between processes; the contents live as long as the instance.
    """

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def keys(self, pattern: str = "*") -> List[str]:
        if pattern == "*":
            return list(self._data)
        regex = glob_to_regex(pattern)
        return [key for key in self._data if regex.fullmatch(key)]

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)
