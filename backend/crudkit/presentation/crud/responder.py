"""Turns controller outcomes into HTTP responses."""

from typing import Any, Protocol

from fastapi import Request, status
from fastapi.responses import JSONResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from crudkit.presentation.crud.flash import pop_flashes


class Responder(Protocol):
    def render(self, view: str, context: dict[str, Any]) -> Response: ...

    def redirect(self, url: str) -> Response: ...

    def json(self, payload: Any) -> Response: ...


class TemplateResponder:
    """Renders ``<view_dir>/<view>.html`` with Jinja2.

    Templates get a ``flashes()`` callable; only the layout calls it, so
    partial renders leave pending flashes in the session.
    """

    def __init__(self, templates: Jinja2Templates, request: Request, view_dir: str):
        self._templates = templates
        self._request = request
        self._view_dir = view_dir

    def render(self, view: str, context: dict[str, Any]) -> Response:
        context = {**context, "flashes": lambda: pop_flashes(self._request)}
        return self._templates.TemplateResponse(
            self._request, f"{self._view_dir}/{view}.html", context
        )

    def redirect(self, url: str) -> Response:
        return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)

    def json(self, payload: Any) -> Response:
        return JSONResponse(payload)
