from .action_config import ACTIONS, ActionConfig
from .controller import CrudActionController
from .flash import FlashSink, SessionFlashSink, pop_flashes
from .memo import Memo
from .request_context import RequestContext, nest_params
from .responder import Responder, TemplateResponder
from .router import build_crud_router
from .urls import UrlBuilder, is_safe_return_url

__all__ = [
    "ACTIONS",
    "ActionConfig",
    "CrudActionController",
    "FlashSink",
    "SessionFlashSink",
    "pop_flashes",
    "Memo",
    "RequestContext",
    "nest_params",
    "Responder",
    "TemplateResponder",
    "build_crud_router",
    "UrlBuilder",
    "is_safe_return_url",
]
