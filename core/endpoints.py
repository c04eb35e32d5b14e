"""Declarative Confluence endpoint bindings.

Every tool is an `Endpoint`: a name, an HTTP method, a path template and the
wire-level (Confluence) names of its parameters. Tools expose camelCase names
(`bodyFormat`) and the endpoint translates them back to the names Confluence
expects (`body-format`) when a call is bound.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

from core.errors import ToolInputError

logger = logging.getLogger(__name__)

PATH_PARAM_RE = re.compile(r"\{([^{}]+)\}")

QUERY_METHODS = frozenset({"GET", "DELETE"})
BODY_METHODS = frozenset({"POST", "PUT"})


def camelize(wire_name: str) -> str:
    """`include-favorited-by-current-user-status` -> `includeFavoritedByCurrentUserStatus`."""
    head, *rest = wire_name.split("-")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


@dataclass(frozen=True)
class BoundRequest:
    method: str
    path: str
    params: dict[str, str] | None = None
    json: dict[str, Any] | None = None


@dataclass(frozen=True)
class Endpoint:
    name: str
    method: str
    path: str
    title: str
    required: tuple[str, ...] = ()
    params: tuple[str, ...] = ()
    path_params: tuple[str, ...] = field(init=False)
    rename_table: dict[str, str] = field(init=False, compare=False)

    def __post_init__(self):
        method = self.method.upper()
        if method not in QUERY_METHODS | BODY_METHODS:
            raise ValueError(f"{self.name}: unsupported HTTP method {self.method}")
        object.__setattr__(self, "method", method)
        path_params = tuple(PATH_PARAM_RE.findall(self.path))
        object.__setattr__(self, "path_params", path_params)

        wire_names = path_params + self.required + self.params
        if len(set(wire_names)) != len(wire_names):
            raise ValueError(f"{self.name}: parameter declared twice in {wire_names}")
        renames = {camelize(w): w for w in wire_names}
        if len(renames) != len(wire_names):
            raise ValueError(f"{self.name}: parameters collide after camelCasing: {wire_names}")
        object.__setattr__(self, "rename_table", renames)

    @property
    def accepts_body(self) -> bool:
        return self.method in BODY_METHODS

    @property
    def required_names(self) -> list[str]:
        """External names of the parameters a caller must supply."""
        return [camelize(w) for w in self.path_params + self.required]

    @property
    def description(self) -> str:
        text = f"{self.title.rstrip('.')}. Calls {self.method} {self.path} on the Confluence REST API v2."
        if self.accepts_body:
            text += " Undeclared arguments are sent unchanged as fields of the JSON request body."
        return text

    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the tool arguments, keyed by external (camelCase) names."""
        properties = {}
        for external, wire in self.rename_table.items():
            if wire in self.path_params:
                description = f"Path parameter `{wire}`."
            elif self.accepts_body:
                description = f"Sent in the request body as `{wire}`."
            else:
                description = f"Sent as query parameter `{wire}`."
            properties[external] = {"type": "string", "description": description}
        schema: dict[str, Any] = {
            "type": "object",
            "properties": properties,
            "additionalProperties": True,
        }
        if self.required_names:
            schema["required"] = self.required_names
        return schema

    def bind(self, arguments: dict[str, Any] | None) -> BoundRequest:
        """Validate `arguments` and turn them into the outbound request.

        Raises ToolInputError when a required parameter is missing or a declared
        parameter is not a string. Undeclared parameters of a GET/DELETE tool
        are dropped.
        """
        arguments = dict(arguments or {})

        missing = [n for n in self.required_names if arguments.get(n) is None]
        if missing:
            raise ToolInputError(f"{self.name}: missing required parameter(s): {', '.join(missing)}")

        declared: dict[str, str] = {}
        extra: dict[str, Any] = {}
        for key, value in arguments.items():
            if key not in self.rename_table:
                extra[key] = value
                continue
            if value is None:
                continue
            if not isinstance(value, str):
                raise ToolInputError(
                    f"{self.name}: parameter {key} must be a string, got {type(value).__name__}"
                )
            declared[key] = value

        if extra and not self.accepts_body:
            logger.debug(f"{self.name}: ignoring undeclared parameter(s): {', '.join(sorted(extra))}")

        path = self.path
        for wire in self.path_params:
            value = declared.pop(camelize(wire))
            if not value:
                raise ToolInputError(f"{self.name}: path parameter {camelize(wire)} must not be empty")
            path = path.replace("{" + wire + "}", quote(value, safe=""))

        renamed = {self.rename_table[k]: v for k, v in declared.items()}
        if self.accepts_body:
            return BoundRequest(self.method, path, json={**extra, **renamed})
        return BoundRequest(self.method, path, params=renamed)
