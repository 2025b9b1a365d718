"""Declarative per-controller configuration."""

from dataclasses import dataclass, field

from crudkit.domain.exceptions import UnsupportedConfigurationError

ACTIONS = ("list", "edit", "view", "delete")


@dataclass(frozen=True)
class ActionConfig:
    """Which actions a controller serves and how its views and scenarios are named.

    Subclasses of CrudActionController override the ``config`` class attribute,
    e.g. ``ActionConfig(enabled_actions={"list", "view"})`` for a read-only
    controller.
    """

    enabled_actions: frozenset[str] = field(default_factory=lambda: frozenset(ACTIONS))
    default_action: str = "list"

    # Views, relative to the controller's view directory
    form_view: str = "form"
    list_view: str = "list"
    list_partial: str = "_items"
    detail_view: str = "detail"

    # Validation scenarios
    create_scenario: str = "create"
    update_scenario: str = "update"
    filter_scenario: str = "filter"

    # Request parameter names
    id_param: str = "id"
    return_var: str = "returnUrl"

    def __post_init__(self) -> None:
        enabled = frozenset(self.enabled_actions)
        unknown = enabled - set(ACTIONS)
        if unknown:
            raise UnsupportedConfigurationError(
                f"Unknown CRUD actions: {', '.join(sorted(unknown))}"
            )
        if self.default_action not in ACTIONS:
            raise UnsupportedConfigurationError(f"Unknown default action '{self.default_action}'")
        object.__setattr__(self, "enabled_actions", enabled)

    def is_enabled(self, action: str) -> bool:
        return action in self.enabled_actions
