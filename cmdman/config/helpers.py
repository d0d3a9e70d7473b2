"""Utility helpers shared by the cmdman configuration loader."""

from __future__ import annotations

import datetime as dt
import typing as typ

from cmdman.command import ArgumentPolicy, Command, Flag

from .models import ConfigError


def _text(value: object | None) -> str:
    """Return ``value`` as a string, mapping ``None`` to an empty string."""
    if value is None:
        return ""
    return str(value)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _normalize_annotations(value: object | None, *, owner: str) -> dict[str, list[str]]:
    """Normalize an annotation mapping so every value is a list of strings."""
    if value is None:
        return {}
    if not isinstance(value, typ.Mapping):
        msg = f"Annotations for '{owner}' must be a mapping."
        raise ConfigError(msg)
    normalized: dict[str, list[str]] = {}
    for key, raw in value.items():
        match raw:
            case None:
                normalized[str(key)] = []
            case list() | tuple():
                normalized[str(key)] = [_text(item) for item in raw]
            case _:
                normalized[str(key)] = [_text(raw)]
    return normalized


def parse_timestamp(value: object | None) -> dt.datetime | None:
    """Return a timezone-aware UTC datetime parsed from ``value``, or None."""
    match value:
        case dt.datetime():
            parsed = value
        case dt.date():
            parsed = dt.datetime(value.year, value.month, value.day)
        case str() as text:
            sanitized = text.strip()
            if not sanitized:
                return None
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                parsed = dt.datetime.fromisoformat(sanitized)
            except ValueError as exc:
                msg = f"Invalid date '{text}'; expected an ISO 8601 value."
                raise ConfigError(msg) from exc
        case None:
            return None
        case _:
            msg = f"Invalid date '{value}'; expected an ISO 8601 value."
            raise ConfigError(msg)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


def _parse_bool(
    payload: typ.Mapping[str, typ.Any], key: str, *, default: bool, owner: str
) -> bool:
    """Return the boolean stored under ``key``, rejecting any other type."""
    value = payload.get(key, default)
    if value is None:
        return default
    if not isinstance(value, bool):
        msg = f"'{key}' of '{owner}' must be true or false, not {value!r}."
        raise ConfigError(msg)
    return value


def _parse_argument_policy(value: object | None, *, owner: str) -> ArgumentPolicy:
    """Map the ``args`` key of a command onto an :class:`ArgumentPolicy`."""
    if value is None:
        return ArgumentPolicy.ANY
    try:
        return ArgumentPolicy(str(value).strip().lower())
    except ValueError as exc:
        choices = ", ".join(policy.value for policy in ArgumentPolicy)
        msg = f"Command '{owner}' has unknown args policy '{value}' (use {choices})."
        raise ConfigError(msg) from exc


def _build_flag(payload: object, *, owner: str) -> Flag:
    """Build a Flag from its YAML mapping."""
    if not isinstance(payload, typ.Mapping):
        msg = f"Flags of command '{owner}' must be mappings."
        raise ConfigError(msg)
    name = _optional_str(payload.get("name"))
    if not name:
        msg = f"A flag of command '{owner}' is missing 'name'."
        raise ConfigError(msg)
    return Flag(
        name=name,
        shorthand=_text(payload.get("shorthand")),
        usage=_text(payload.get("usage")),
        default=_text(payload.get("default")),
        no_opt_default=_text(payload.get("no_opt_default")),
        deprecated=_text(payload.get("deprecated")),
        shorthand_deprecated=_text(payload.get("shorthand_deprecated")),
        hidden=_parse_bool(payload, "hidden", default=False, owner=f"{owner} --{name}"),
        persistent=_parse_bool(
            payload, "persistent", default=False, owner=f"{owner} --{name}"
        ),
        annotations=_normalize_annotations(
            payload.get("annotations"), owner=f"{owner} --{name}"
        ),
    )


def _build_command(payload: object, *, parent_path: str = "") -> Command:
    """Build a Command and its descendants from a nested YAML mapping."""
    if not isinstance(payload, typ.Mapping):
        location = f" under '{parent_path}'" if parent_path else ""
        msg = f"Command definitions{location} must be mappings."
        raise ConfigError(msg)
    use = payload.get("use")
    if use is None:
        location = f" under '{parent_path}'" if parent_path else ""
        msg = f"A command{location} is missing 'use'."
        raise ConfigError(msg)
    use = _text(use)
    owner = f"{parent_path} {use.split()[0] if use.split() else ''}".strip()

    command = Command(
        use=use,
        short=_text(payload.get("short")),
        long=_text(payload.get("long")),
        example=_text(payload.get("example")),
        args=_parse_argument_policy(payload.get("args"), owner=owner),
        annotations=_normalize_annotations(payload.get("annotations"), owner=owner),
        flags=[_build_flag(item, owner=owner) for item in payload.get("flags") or []],
        hidden=_parse_bool(payload, "hidden", default=False, owner=owner),
        deprecated=_text(payload.get("deprecated")),
        runnable=_parse_bool(payload, "runnable", default=True, owner=owner),
    )
    children = payload.get("commands") or []
    if not isinstance(children, list):
        msg = f"'commands' of '{owner}' must be a list."
        raise ConfigError(msg)
    command.add_command(
        *(_build_command(child, parent_path=owner) for child in children)
    )
    return command


__all__ = [
    "_build_command",
    "_build_flag",
    "_normalize_annotations",
    "_optional_str",
    "_parse_argument_policy",
    "_parse_bool",
    "_text",
    "parse_timestamp",
]
