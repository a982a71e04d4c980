"""Path, query and body builders shared by every request."""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from urllib.parse import quote

from .errors import GoCardlessConfigurationError

_PLACEHOLDER_RE = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")


def wire_value(value: object) -> object:
    """Convert a scalar to the value sent on the wire."""

    if isinstance(value, Enum):
        return value.value
    return value


def _query_text(value: object) -> str:
    value = wire_value(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def path_placeholders(template: str) -> tuple[str, ...]:
    return tuple(_PLACEHOLDER_RE.findall(template))


def build_path(template: str, path_params: Mapping[str, object]) -> str:
    """Substitute ``:name`` tokens with URL-escaped path params."""

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        value = path_params.get(name)
        if value is None or value == "":
            raise GoCardlessConfigurationError(
                f"path parameter {name!r} is not bound for {template!r}"
            )
        return quote(str(wire_value(value)), safe="")

    return _PLACEHOLDER_RE.sub(_substitute, template)


def build_query_params(params: Mapping[str, object]) -> dict[str, str]:
    return {
        key: _query_text(value)
        for key, value in params.items()
        if value is not None
    }


def build_body(fields: Mapping[str, object]) -> dict[str, object]:
    """Build a JSON object body, dropping unset fields and empty sub-objects."""

    body: dict[str, object] = {}
    for key, value in fields.items():
        if value is None:
            continue
        if isinstance(value, Mapping):
            nested = build_body(value)
            if not nested:
                continue
            body[key] = nested
            continue
        body[key] = wire_value(value)
    return body


__all__ = [
    "wire_value",
    "path_placeholders",
    "build_path",
    "build_query_params",
    "build_body",
]
