"""Helpers for narrowing untyped TOML/JSON data.

Both the tool config (``yr.toml``) and the language config
(``language-config.json``) arrive as plain dicts. These helpers validate
shapes at runtime and give the type checker something to narrow on.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]
ObjList = list[object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value, stripping whitespace.

    Returns None if missing, not a str, or empty after stripping.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    return as_str_dict(table.get(key))


def get_str_list(table: Mapping[str, object], key: str) -> list[str] | None:
    """Get a list of non-empty strings.

    Returns None if the key is missing or any item is not a non-empty str.
    """
    value = table.get(key)
    if not isinstance(value, list):
        return None
    out: list[str] = []
    for item in cast(list[object], value):
        if not isinstance(item, str) or not item.strip():
            return None
        out.append(item.strip())
    return out


def get_command(table: Mapping[str, object], key: str) -> tuple[str, ...] | None:
    """Get a command line (argv list) as a tuple."""
    argv = get_str_list(table, key)
    if not argv:
        return None
    return tuple(argv)


def get_command_list(table: Mapping[str, object], key: str) -> tuple[tuple[str, ...], ...] | None:
    """Get a list of command lines, e.g. ``[["cargo", "publish"], ["git", "push"]]``."""
    value = table.get(key)
    if not isinstance(value, list):
        return None
    commands: list[tuple[str, ...]] = []
    for item in cast(list[object], value):
        argv = get_command({"argv": item}, "argv")
        if argv is None:
            return None
        commands.append(argv)
    return tuple(commands)
