"""Base class for records managed by a CRUD controller."""

from typing import Any, ClassVar


class Entity:
    """Mixin giving a domain entity a primary key and a validation scenario.

    ``primary_key`` names the key field. A tuple declares a composite key,
    which the CRUD controllers refuse to build URLs for.
    """

    primary_key: ClassVar[str | tuple[str, ...]] = "id"
    key_type: ClassVar[type] = int

    scenario: str = ""

    @property
    def key(self) -> Any:
        if isinstance(self.primary_key, tuple):
            return tuple(getattr(self, name) for name in self.primary_key)
        return getattr(self, self.primary_key)

    @property
    def is_new(self) -> bool:
        """True until the storage layer has assigned a key."""
        if isinstance(self.primary_key, tuple):
            return all(value is None for value in self.key)
        return self.key is None

    @classmethod
    def type_name(cls) -> str:
        return cls.__name__
