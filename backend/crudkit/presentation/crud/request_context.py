"""Immutable per-request view of the inbound parameters."""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from fastapi import Request

_KEY_RE = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]+\])*)$")
_PART_RE = re.compile(r"\[([^\[\]]+)\]")


def nest_params(items: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """Decode bracket-notation keys into nested dicts.

    ``[("Article[title]", "x"), ("id", "3")]`` becomes
    ``{"Article": {"title": "x"}, "id": "3"}``. The last value of a repeated
    key wins.
    """
    result: dict[str, Any] = {}
    for raw_key, value in items:
        match = _KEY_RE.match(raw_key)
        if match is None:
            result[raw_key] = value
            continue

        path = [match.group(1), *_PART_RE.findall(match.group(2))]
        node = result
        for part in path[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[path[-1]] = value
    return result


@dataclass(frozen=True)
class RequestContext:
    """Everything a CRUD controller may read from the request.

    Controllers never reach for the framework request object directly; the
    router builds one of these and threads it through.
    """

    url: str
    query: Mapping[str, Any] = field(default_factory=dict)
    body: Mapping[str, Any] = field(default_factory=dict)
    is_ajax: bool = False

    @classmethod
    async def from_request(cls, request: Request) -> "RequestContext":
        body: dict[str, Any] = {}
        if request.method == "POST":
            form = await request.form()
            body = nest_params(form.multi_items())

        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"

        return cls(
            url=url,
            query=nest_params(request.query_params.multi_items()),
            body=body,
            is_ajax=request.headers.get("x-requested-with", "").lower() == "xmlhttprequest",
        )
