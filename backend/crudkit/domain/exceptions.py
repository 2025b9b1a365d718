"""Domain-specific exceptions — framework-independent."""


class NotFoundError(Exception):
    """Base for every lookup that should surface as a 404."""


class EntityNotFoundError(NotFoundError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ActionNotFoundError(NotFoundError):
    """Raised when a controller action is unknown or disabled."""

    def __init__(self, controller: str, action: str):
        self.controller = controller
        self.action = action
        super().__init__(f"Action '{action}' is not available on {controller}")


class UnsupportedConfigurationError(Exception):
    """Raised when an entity type is configured in a way the controller cannot handle.

    This is a development-time error (e.g. a composite primary key), never a
    transient condition.
    """


class EntityValidationError(Exception):
    """Raised when an entity fails the validation rules of its scenario."""

    def __init__(self, entity_type: str, errors: dict[str, list[str]]):
        self.entity_type = entity_type
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"{entity_type} failed validation: {fields}")


class PersistenceError(Exception):
    """Raised when the storage layer refuses to save an entity."""


class DuplicateEntityError(PersistenceError):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")
