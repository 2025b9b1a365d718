"""Base controller serving list/edit/view/delete for one entity type.

A concrete controller names its entity type and, optionally, a distinct
filter type, a view directory and an ActionConfig::

    class ArticleController(CrudActionController[Article]):
        entity_type = Article
        view_dir = "articles"

One controller instance handles exactly one request. The entity and the
filter entity are resolved lazily on first access and cached for the rest of
the request.

Requests handled:

    GET  list                 render the list view with items and filter form
    GET  list (ajax)          render only the items partial
    GET  edit                 render the create form
    GET  edit?id=..           render the update form
    POST edit (ajax marker)   validate the submitted form and return JSON errors
    POST edit                 save (create/update) and redirect to the return URL
    GET  view?id=..           render the detail view
    GET/POST delete?id=..     delete and redirect to the return URL
"""

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

from fastapi.responses import Response

from crudkit.application.services import CrudService
from crudkit.domain.entities import Entity
from crudkit.domain.exceptions import (
    ActionNotFoundError,
    DuplicateEntityError,
    EntityNotFoundError,
    EntityValidationError,
    PersistenceError,
    UnsupportedConfigurationError,
)
from crudkit.presentation.crud.action_config import ACTIONS, ActionConfig
from crudkit.presentation.crud.flash import FlashSink
from crudkit.presentation.crud.memo import Memo
from crudkit.presentation.crud.request_context import RequestContext
from crudkit.presentation.crud.responder import Responder
from crudkit.presentation.crud.urls import UrlBuilder, is_safe_return_url

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)

# Return-URL values that mean "the page of the record just saved"
_ITEM_RETURN_TOKENS = ("edit", "view")


class CrudActionController(Generic[E]):
    entity_type: ClassVar[type[Entity]]
    filter_type: ClassVar[type[Entity] | None] = None
    view_dir: ClassVar[str] = ""
    config: ClassVar[ActionConfig] = ActionConfig()

    def __init__(
        self,
        context: RequestContext,
        service: CrudService[E],
        responder: Responder,
        flash: FlashSink,
        urls: UrlBuilder,
    ):
        self.context = context
        self._service = service
        self._responder = responder
        self._flash = flash
        self._urls = urls
        self._model: Memo[E] = Memo()
        # set once the current record has been deleted in this request
        self._deleted = False
        self._filter_model: Memo[Entity] = Memo()
        # (current page URL, key field name), fixed for one render pass
        self._item_url_parts: tuple[str, str] | None = None

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def type_name(self) -> str:
        return self.entity_type.type_name()

    @property
    def form_id(self) -> str:
        """Value of the ``ajax`` body field that asks for validation only."""
        return f"{self.type_name.lower()}-form"

    @property
    def url(self) -> str:
        """URL of the current page."""
        return self.context.url

    @property
    def list_url(self) -> str:
        return self.create_url("list")

    def create_url(self, action: str, params: Mapping[str, Any] | None = None) -> str:
        return self._urls.build(action, params)

    # ── Dispatch ─────────────────────────────────────────────────────

    async def dispatch(self, action: str | None = None) -> Response:
        """Run one action. Unknown and disabled actions raise ActionNotFoundError."""
        action = action or self.config.default_action
        if action not in ACTIONS:
            raise ActionNotFoundError(self.name, action)
        logger.debug("Dispatching %s.%s", self.name, action)
        handler = getattr(self, f"action_{action}")
        return await handler()

    def _require_action(self, action: str) -> None:
        if not self.config.is_enabled(action):
            logger.info("Rejected disabled action %s.%s", self.name, action)
            raise ActionNotFoundError(self.name, action)

    # ── Actions ──────────────────────────────────────────────────────

    async def action_list(self) -> Response:
        """Render the items and filter form, or just the items for AJAX refreshes."""
        self._require_action("list")
        filter_model = self.get_filter_model()
        items = await self._service.search(filter_model)
        view = self.config.list_partial if self.context.is_ajax else self.config.list_view
        return self.render(view, filter_model=filter_model, items=items)

    async def action_edit(self) -> Response:
        """Render the create/update form, validate it via AJAX, or save it."""
        self._require_action("edit")
        model = await self.get_model()

        if self.context.body.get("ajax") == self.form_id:
            return self.validate_ajax(model)

        errors: dict[str, list[str]] = {}
        data = self.context.body.get(self.type_name)
        if isinstance(data, Mapping):
            self._service.validator.assign(model, data)
            was_new = model.is_new
            try:
                await self._service.save(model)
            except EntityValidationError as exc:
                errors = exc.errors
            except DuplicateEntityError as exc:
                errors = {exc.field: [str(exc)]}
            except PersistenceError as exc:
                logger.warning("Could not save %s: %s", self.type_name, exc)
                errors = {"__all__": [str(exc)]}
            else:
                flash_key = f"{self.type_name}-{'created' if was_new else 'updated'}"
                self._flash.set_flash(flash_key, True)
                return self._responder.redirect(await self.get_return_url())

        return self.render(self.config.form_view, model=model, errors=errors)

    async def action_view(self) -> Response:
        self._require_action("view")
        model = await self.get_model()
        if model.is_new:
            raise EntityNotFoundError(self.type_name, "")
        return self.render(self.config.detail_view, model=model)

    async def action_delete(self) -> Response:
        self._require_action("delete")
        model = await self.get_model()
        if model.is_new:
            # no id in the request, so there is nothing to delete
            raise EntityNotFoundError(self.type_name, "")
        await self._service.delete(model)
        self._deleted = True
        return self._responder.redirect(await self.get_return_url())

    def validate_ajax(self, model: E) -> Response:
        """Validate submitted attributes without saving and answer with JSON.

        Errors are keyed ``<Type>_<field>`` to match the form's input ids.
        """
        data = self.context.body.get(self.type_name)
        if isinstance(data, Mapping):
            self._service.validator.assign(model, data)
        errors = self._service.validator.validate(model)
        return self._responder.json(
            {f"{self.type_name}_{field}": messages for field, messages in errors.items()}
        )

    def render(self, view: str, **context: Any) -> Response:
        return self._responder.render(view, {"controller": self, "config": self.config, **context})

    # ── Resolvers ────────────────────────────────────────────────────

    async def get_model(self, required: bool = True) -> E | None:
        """The entity for this request.

        With an id in the query this is the stored record (update scenario),
        otherwise a new empty entity (create scenario). A missing record
        raises EntityNotFoundError when ``required``, else returns None.
        """
        if not self._model.computed:
            self._model.set(await self._resolve_model())
        model = self._model.get()
        if model is None and required:
            raise EntityNotFoundError(self.type_name, self.context.query.get(self.config.id_param, ""))
        return model

    async def _resolve_model(self) -> E | None:
        if self.config.id_param in self.context.query:
            key = self.context.query[self.config.id_param]
            model = await self._service.find(key)
            if model is None:
                logger.info("%s %r not found", self.type_name, key)
                return None
            model.scenario = self.config.update_scenario
            return model

        model = self.entity_type()
        model.scenario = self.config.create_scenario
        return model

    def get_filter_model(self) -> Entity:
        """The filter entity with the request's filter attributes assigned."""
        if not self._filter_model.computed:
            filter_type = self.filter_type or self.entity_type
            model = filter_type()
            model.scenario = self.config.filter_scenario
            self.assign_filter_attributes(model)
            self._filter_model.set(model)
        return self._filter_model.get()

    def assign_filter_attributes(self, model: Entity) -> None:
        """Assign filter attributes to the filter model.

        By default this reads ``?<TypeName>[field]=value`` query parameters.
        Override to support a custom URL pattern such as
        ``?dateStart=2012-10-01&dateEnd=2012-11-01``.
        """
        values = self.context.query.get(model.type_name())
        if isinstance(values, Mapping):
            self._service.validator.assign_coerced(model, values)

    async def get_return_url(self) -> str:
        """Where to go after a successful save or delete.

        The ``returnUrl`` query parameter may hold ``edit`` or ``view`` to
        return to that page of the current record (the list page while the
        record is still new or has just been deleted), or a same-origin path.
        Anything else, including no parameter at all, returns to the list page.
        """
        target = self.context.query.get(self.config.return_var)
        if not isinstance(target, str) or not target:
            return self.list_url

        if target in _ITEM_RETURN_TOKENS:
            model = await self.get_model(required=False)
            if model is None or model.is_new or self._deleted:
                return self.list_url
            key_name = self._key_name(type(model))
            return self.create_url(target, {self.config.id_param: getattr(model, key_name)})

        if is_safe_return_url(target):
            return target
        logger.warning("Rejected unsafe return URL %r on %s", target, self.name)
        return self.list_url

    # ── View helpers ─────────────────────────────────────────────────

    def create_item_url(
        self,
        entity: Entity,
        action: str,
        return_url: bool | str | None = True,
    ) -> str:
        """URL to the edit or view page of one record, e.g. for list rows.

        ``return_url`` adds the return parameter: True for the current page,
        a string for a custom URL, False/None for none.
        """
        if self._item_url_parts is None:
            self._item_url_parts = (self.url, self._key_name(type(entity)))
        current_url, key_name = self._item_url_parts

        key = getattr(entity, key_name)
        if key is None:
            raise ValueError(f"Cannot link to {entity.type_name()} without a {key_name}")
        params: dict[str, Any] = {self.config.id_param: key}
        if return_url:
            params[self.config.return_var] = current_url if return_url is True else return_url
        return self.create_url(action, params)

    def _key_name(self, entity_type: type[Entity]) -> str:
        key = entity_type.primary_key
        if isinstance(key, tuple):
            raise UnsupportedConfigurationError(
                f"{self.name} does not support composite keys "
                f"({entity_type.type_name()}: {', '.join(key)})"
            )
        return key
