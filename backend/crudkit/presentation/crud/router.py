"""Mounts a CrudActionController subclass on a FastAPI router."""

from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from crudkit.application.services import CrudService
from crudkit.domain.exceptions import NotFoundError
from crudkit.infrastructure.dependencies import get_templates
from crudkit.presentation.crud.controller import CrudActionController
from crudkit.presentation.crud.flash import SessionFlashSink
from crudkit.presentation.crud.request_context import RequestContext
from crudkit.presentation.crud.responder import TemplateResponder
from crudkit.presentation.crud.urls import UrlBuilder

_ROUTES: tuple[tuple[str, list[str]], ...] = (
    ("list", ["GET"]),
    ("edit", ["GET", "POST"]),
    ("view", ["GET"]),
    ("delete", ["GET", "POST"]),
)


def build_crud_router(
    controller_cls: type[CrudActionController],
    *,
    prefix: str,
    service_dependency: Callable[..., Any],
    tags: list[str] | None = None,
) -> APIRouter:
    """Register ``<prefix>/``, ``/list``, ``/edit``, ``/view`` and ``/delete``.

    Each request gets its own controller instance. NotFound errors become
    HTTP 404 responses.
    """
    router = APIRouter(prefix=prefix, tags=tags or [controller_cls.__name__])
    route_name = controller_cls.__name__

    def _endpoint(action: str | None) -> Callable[..., Any]:
        async def endpoint(
            request: Request,
            service: CrudService = Depends(service_dependency),
            templates: Jinja2Templates = Depends(get_templates),
        ):
            context = await RequestContext.from_request(request)
            controller = controller_cls(
                context=context,
                service=service,
                responder=TemplateResponder(templates, request, controller_cls.view_dir),
                flash=SessionFlashSink(request),
                urls=UrlBuilder(
                    lambda name: str(request.app.url_path_for(f"{route_name}.{name}"))
                ),
            )
            try:
                return await controller.dispatch(action)
            except NotFoundError as e:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

        endpoint.__name__ = f"{route_name}_{action or 'index'}"
        return endpoint

    router.add_api_route(
        "",
        _endpoint(None),
        methods=["GET"],
        response_class=HTMLResponse,
        name=f"{route_name}.index",
        include_in_schema=False,
    )
    for action, methods in _ROUTES:
        router.add_api_route(
            f"/{action}",
            _endpoint(action),
            methods=methods,
            response_class=HTMLResponse,
            name=f"{route_name}.{action}",
        )
    return router
